# topmark:header:start
#
#   project      : SemiCompact
#   file         : __init__.py
#   file_relpath : src/semicompact/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer: logging setup, TOML sources and the merged config model.

The config layer is Click-free so it can be used from the API and tests as well as
from the CLI.
"""

from __future__ import annotations

from semicompact.config.errors import ConfigError
from semicompact.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "ConfigError",
    "MutableConfig",
]
