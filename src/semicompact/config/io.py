# topmark:header:start
#
#   project      : SemiCompact
#   file         : io.py
#   file_relpath : src/semicompact/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O and typed value getters for SemiCompact configuration.

Parsing and rendering are done with `tomlkit`; parsed documents are returned as
plain `dict` structures (`TomlTable`).

TOML has no `null` value, so `None` entries are stripped when rendering.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from semicompact.config.errors import ConfigError
from semicompact.config.keys import Toml
from semicompact.config.logging import get_logger
from semicompact.constants import DEFAULT_INDENT

if TYPE_CHECKING:
    from pathlib import Path

    from semicompact.config.logging import SemicompactLogger

TomlTable = dict[str, Any]

logger: SemicompactLogger = get_logger(__name__)

# Indentation may only use JSON insignificant whitespace on a line.
_INDENT_CHARS: Final[frozenset[str]] = frozenset(" \t")


def load_defaults_dict() -> TomlTable:
    """Return SemiCompact's runtime defaults as a TOML-compatible dict.

    Returns:
        TomlTable: A new dict; callers may mutate it.
    """
    return {
        Toml.SECTION_FORMATTING: {
            Toml.KEY_INDENT: DEFAULT_INDENT,
        },
        Toml.SECTION_INPUT: {
            Toml.KEY_PRESERVE_NUMBER_TEXT: True,
            Toml.KEY_ALLOW_NAN: False,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``semicompact.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except (TomlkitParseError, UnicodeDecodeError) as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` entries from mappings and lists."""
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _strip_none_for_toml(v) for k, v in m.items() if v is not None}
    if isinstance(value, list):
        seq: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in seq if v is not None]
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` of ``table``, or an empty dict.

    Raises:
        ConfigError: If the key exists but is not a table.
    """
    value: object = table.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] must be a table, got {type(value).__name__}")
    return cast("TomlTable", value)


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Return a boolean value from ``table``, or None if absent.

    Raises:
        ConfigError: If the value is present but not a boolean.
    """
    if key not in table:
        return None
    value: object = table[key]
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be a boolean, got {value!r}")
    return value


def coerce_indent(value: object) -> str:
    """Normalize an indent setting to the indentation unit string.

    Integers mean that many spaces; strings are used as-is.

    Args:
        value (object): Raw indent value from TOML or the CLI.

    Returns:
        str: The indentation unit.

    Raises:
        ConfigError: On negative counts, non-whitespace strings or other types.
    """
    if isinstance(value, bool):
        raise ConfigError(f"'indent' must be a string or an integer, got {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ConfigError(f"'indent' must not be negative, got {value}")
        return " " * value
    if isinstance(value, str):
        if not set(value) <= _INDENT_CHARS:
            raise ConfigError(f"'indent' may only contain spaces and tabs, got {value!r}")
        return value
    raise ConfigError(f"'indent' must be a string or an integer, got {value!r}")


def get_indent_value_or_none(table: TomlTable, key: str) -> str | None:
    """Return the normalized indent from ``table``, or None if absent."""
    if key not in table:
        return None
    return coerce_indent(table[key])
