# topmark:header:start
#
#   project      : SemiCompact
#   file         : api.py
#   file_relpath : src/semicompact/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public entry points for semi-compact JSON serialization.

All functions stream through a fresh
[`SemiCompactFormatter`][semicompact.core.layout.SemiCompactFormatter], so they are
safe to call concurrently from different threads.

Examples:
    ```python
    >>> from semicompact import to_string
    >>> print(to_string({"a": 1, "b": [1, 2, 3], "c": {"x": True}}), end="")
    {
      "a": 1,
      "b": [ 1, 2, 3 ],
      "c": { "x": true }
    }
    ```

Errors:
    - [`SerializationError`][semicompact.core.errors.SerializationError] (and
      subclasses) when the value cannot be represented as JSON.
    - Whatever the sink raises (typically `OSError`) and whatever a ``default``
      hook or ``to_dict()`` method raises, unchanged.

    Output written to a sink before a failure is not rolled back.
"""

from __future__ import annotations

import io
from typing import IO, TYPE_CHECKING, Any

from semicompact.config.logging import get_logger
from semicompact.constants import DEFAULT_INDENT
from semicompact.core.layout import SemiCompactFormatter
from semicompact.core.serializer import Serializer

if TYPE_CHECKING:
    from semicompact.config.logging import SemicompactLogger
    from semicompact.core.formatter import Writer
    from semicompact.core.serializer import DefaultHook

logger: SemicompactLogger = get_logger(__name__)


def to_writer(
    writer: Writer,
    value: object,
    *,
    indent: bytes | str = DEFAULT_INDENT,
    default: DefaultHook | None = None,
) -> None:
    """Serialize ``value`` as semi-compact JSON into a binary sink.

    Only valid UTF-8 is ever written to the sink.

    Args:
        writer (Writer): Binary sink (anything with ``write(bytes)``).
        value (object): The value to serialize.
        indent (bytes | str): Indentation unit, repeated once per nesting level.
        default (DefaultHook | None): Hook converting otherwise unsupported values.
    """
    logger.debug("Serializing %s with indent %r", type(value).__name__, indent)
    serializer = Serializer(writer, SemiCompactFormatter(indent), default=default)
    serializer.serialize(value)


def to_bytes(
    value: object,
    *,
    indent: bytes | str = DEFAULT_INDENT,
    default: DefaultHook | None = None,
) -> bytes:
    """Serialize ``value`` as semi-compact JSON into a new `bytes` object.

    Args:
        value (object): The value to serialize.
        indent (bytes | str): Indentation unit, repeated once per nesting level.
        default (DefaultHook | None): Hook converting otherwise unsupported values.

    Returns:
        bytes: The UTF-8 encoded JSON document.
    """
    buffer = io.BytesIO()
    to_writer(buffer, value, indent=indent, default=default)
    return buffer.getvalue()


def to_string(
    value: object,
    *,
    indent: bytes | str = DEFAULT_INDENT,
    default: DefaultHook | None = None,
) -> str:
    """Serialize ``value`` as a semi-compact JSON string.

    Args:
        value (object): The value to serialize.
        indent (bytes | str): Indentation unit, repeated once per nesting level.
        default (DefaultHook | None): Hook converting otherwise unsupported values.

    Returns:
        str: The JSON document.
    """
    return to_bytes(value, indent=indent, default=default).decode("utf-8")


def dumps(
    value: object,
    *,
    indent: bytes | str = DEFAULT_INDENT,
    default: DefaultHook | None = None,
) -> str:
    """`json.dumps`-style alias of [`to_string`][semicompact.api.to_string]."""
    return to_string(value, indent=indent, default=default)


def dump(
    value: object,
    fp: IO[Any],
    *,
    indent: bytes | str = DEFAULT_INDENT,
    default: DefaultHook | None = None,
) -> None:
    """Serialize ``value`` to a file object, `json.dump`-style.

    Binary file objects are written to directly (streaming). Text file objects
    receive the document as one string once serialization has succeeded.

    Args:
        value (object): The value to serialize.
        fp (IO[Any]): Binary or text file object.
        indent (bytes | str): Indentation unit, repeated once per nesting level.
        default (DefaultHook | None): Hook converting otherwise unsupported values.
    """
    if isinstance(fp, io.TextIOBase):
        fp.write(to_string(value, indent=indent, default=default))
    else:
        to_writer(fp, value, indent=indent, default=default)
