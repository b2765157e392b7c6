# topmark:header:start
#
#   project      : SemiCompact
#   file         : keys.py
#   file_relpath : src/semicompact/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for SemiCompact configuration.

These constants are the external configuration schema as it appears in
``semicompact.toml`` and in ``[tool.semicompact]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by SemiCompact configuration."""

    # Stop upward discovery at this file
    KEY_ROOT: Final[str] = "root"

    # [formatting]
    SECTION_FORMATTING: Final[str] = "formatting"

    KEY_INDENT: Final[str] = "indent"

    # [input]
    SECTION_INPUT: Final[str] = "input"

    KEY_PRESERVE_NUMBER_TEXT: Final[str] = "preserve_number_text"
    KEY_ALLOW_NAN: Final[str] = "allow_nan"

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_NAME: Final[str] = "semicompact"
