# topmark:header:start
#
#   project      : SemiCompact
#   file         : formatter.py
#   file_relpath : src/semicompact/core/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter contract driven by the serializer, and the compact scalar writer.

The [`Serializer`][semicompact.core.serializer.Serializer] walks a value tree and
calls one `Formatter` method per structural or scalar event. A formatter decides
which bytes each event produces and writes them to the sink it is handed.

The default implementations on `Formatter` produce compact JSON (no whitespace at
all). `CompactFormatter` is that behavior under its own name; layout-aware
formatters override the structural events and reuse a `CompactFormatter` for the
scalar tokens.

String tokens are quoted and escaped by the standard `json` encoder
(``ensure_ascii=False``), so non-ASCII text is written as UTF-8.

Sinks:
    Any object with a ``write(bytes)`` method is accepted as a sink
    (see `Writer`). Binary files, `io.BytesIO` and sockets wrapped with
    ``makefile("wb")`` all qualify.
"""

from __future__ import annotations

import json
from typing import Protocol

from semicompact.core.errors import SerializationError


class Writer(Protocol):
    """Minimal binary sink protocol used by formatters."""

    def write(self, data: bytes, /) -> object:
        """Write ``data`` to the sink."""
        ...


def int_to_text(value: int) -> str:
    """Return the decimal text of an integer.

    `int.__repr__` is used so that int subclasses (IntEnum, IntFlag) render as numbers.

    Args:
        value (int): The integer to render.

    Returns:
        str: Decimal representation of ``value``.

    Raises:
        SerializationError: If the integer exceeds the interpreter's
            integer-to-string conversion limit (`sys.set_int_max_str_digits`).
    """
    try:
        return int.__repr__(value)
    except ValueError as exc:
        raise SerializationError(f"integer is too large to convert to text: {exc}") from exc


class Formatter:
    """Event contract between the serializer and the bytes written to a sink.

    Every method receives the sink as its first argument. The base implementation
    writes compact JSON; subclasses override what they need.
    """

    def reset(self) -> None:
        """Discard per-document state left behind by an interrupted serialization."""

    # --- scalars ---

    def write_null(self, w: Writer) -> None:
        w.write(b"null")

    def write_bool(self, w: Writer, value: bool) -> None:
        w.write(b"true" if value else b"false")

    def write_int(self, w: Writer, value: int) -> None:
        w.write(int_to_text(value).encode("ascii"))

    def write_float(self, w: Writer, value: float) -> None:
        """Write a finite float using its shortest round-trip representation."""
        w.write(float.__repr__(value).encode("ascii"))

    def write_number_str(self, w: Writer, value: str) -> None:
        """Write an already formatted number verbatim (e.g. from a `Decimal`)."""
        w.write(value.encode("ascii"))

    def write_str(self, w: Writer, value: str) -> None:
        """Write ``value`` as a quoted JSON string token."""
        w.write(json.dumps(value, ensure_ascii=False).encode("utf-8"))

    def write_raw_fragment(self, w: Writer, fragment: str) -> None:
        """Write pre-formatted JSON verbatim."""
        w.write(fragment.encode("utf-8"))

    # --- arrays ---

    def begin_array(self, w: Writer) -> None:
        w.write(b"[")

    def end_array(self, w: Writer) -> None:
        w.write(b"]")

    def begin_array_value(self, w: Writer, first: bool) -> None:
        if not first:
            w.write(b",")

    def end_array_value(self, w: Writer) -> None:
        pass

    # --- objects ---

    def begin_object(self, w: Writer) -> None:
        w.write(b"{")

    def end_object(self, w: Writer) -> None:
        w.write(b"}")

    def begin_object_key(self, w: Writer, first: bool) -> None:
        if not first:
            w.write(b",")

    def end_object_key(self, w: Writer) -> None:
        pass

    def begin_object_value(self, w: Writer) -> None:
        w.write(b":")

    def end_object_value(self, w: Writer) -> None:
        pass


class CompactFormatter(Formatter):
    """Formatter producing compact JSON with no whitespace."""

