# topmark:header:start
#
#   project      : SemiCompact
#   file         : errors.py
#   file_relpath : src/semicompact/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration errors."""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised for unreadable, malformed or invalid configuration sources."""
