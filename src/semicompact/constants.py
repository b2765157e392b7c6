# topmark:header:start
#
#   project      : SemiCompact
#   file         : constants.py
#   file_relpath : src/semicompact/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SemiCompact Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SEMICOMPACT_VERSION: str = get_version("semicompact")

# Indentation unit repeated once per nesting level.
DEFAULT_INDENT: str = "  "

# Project config file names, in lookup order within one directory.
CONFIG_FILE_NAME: str = "semicompact.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"

ENV_LOG_LEVEL: str = "SEMICOMPACT_LOG_LEVEL"

CONFIG_DUMP_BEGIN: str = "# === BEGIN ==="
CONFIG_DUMP_END: str = "# === END ==="
