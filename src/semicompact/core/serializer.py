# topmark:header:start
#
#   project      : SemiCompact
#   file         : serializer.py
#   file_relpath : src/semicompact/core/serializer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value-tree walker that drives a `Formatter`.

`Serializer` performs a recursive descent over a Python value and emits one
formatter event per structural element or scalar token. It knows nothing about
layout; that is entirely up to the formatter it is given.

Supported values:
    - ``None``, `bool`, `int`, `float`, `str`
    - `decimal.Decimal` (written verbatim as a number)
    - `RawValue` (pre-formatted JSON written verbatim)
    - any `Mapping` (object) with `str` or `int` keys
    - `list`, `tuple`, `set`, `frozenset` and other non-bytes sequences (array)
    - `pathlib.PurePath` (string), `enum.Enum` (its name)
    - objects exposing a callable ``to_dict()`` (serialized as that mapping)
    - anything the ``default`` hook converts into one of the above

Non-finite floats and decimals (NaN, infinities) are written as ``null``.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import TYPE_CHECKING, Any, Callable, Final

from semicompact.core.errors import (
    CircularReferenceError,
    KeyMustBeStringError,
    SerializationError,
    UnsupportedTypeError,
)
from semicompact.core.formatter import CompactFormatter, Formatter, int_to_text

if TYPE_CHECKING:
    from collections.abc import Iterable

    from semicompact.core.formatter import Writer

# Lone surrogates cannot be encoded as UTF-8.
_SURROGATE_RE: Final[re.Pattern[str]] = re.compile("[\ud800-\udfff]")

# Written as arrays; other sequences qualify unless they hold bytes.
_ARRAY_TYPES: Final[tuple[type, ...]] = (list, tuple, set, frozenset)
_BYTES_TYPES: Final[tuple[type, ...]] = (bytes, bytearray, memoryview)

DefaultHook = Callable[[Any], Any]


@dataclass(frozen=True, slots=True)
class RawValue:
    """A fragment of already formatted JSON, written to the output verbatim.

    The text is not validated; it must be a complete JSON value.

    Attributes:
        text (str): The JSON text.
    """

    text: str


class Serializer:
    """Walk a value tree and feed formatter events to a binary sink.

    Args:
        writer (Writer): Destination sink (anything with ``write(bytes)``).
        formatter (Formatter | None): Formatter deciding the output bytes.
            Defaults to a `CompactFormatter`.
        default (DefaultHook | None): Called with any value that has no JSON
            representation; must return a serializable replacement or raise.
        check_circular (bool): Detect containers that contain themselves.
    """

    def __init__(
        self,
        writer: Writer,
        formatter: Formatter | None = None,
        *,
        default: DefaultHook | None = None,
        check_circular: bool = True,
    ) -> None:
        self.writer: Writer = writer
        self.formatter: Formatter = formatter if formatter is not None else CompactFormatter()
        self.default: DefaultHook | None = default
        self._markers: set[int] | None = set() if check_circular else None

    def serialize(self, value: object) -> None:
        """Serialize ``value`` into the sink as one complete document.

        If serialization fails, the formatter is reset before the exception
        propagates so that it can be reused for the next document.

        Args:
            value (object): The value to serialize.

        Raises:
            SerializationError: If the value cannot be represented as JSON.
        """
        try:
            self._serialize(value)
        except Exception:
            self.formatter.reset()
            if self._markers is not None:
                self._markers.clear()
            raise

    def _serialize(self, value: object) -> None:
        f: Formatter = self.formatter
        w: Writer = self.writer

        if value is None:
            f.write_null(w)
        elif isinstance(value, bool):
            f.write_bool(w, value)
        elif isinstance(value, int):
            f.write_int(w, value)
        elif isinstance(value, float):
            if math.isfinite(value):
                f.write_float(w, value)
            else:
                f.write_null(w)
        elif isinstance(value, str):
            self._serialize_str(value)
        elif isinstance(value, Decimal):
            if value.is_finite():
                f.write_number_str(w, str(value))
            else:
                f.write_null(w)
        elif isinstance(value, RawValue):
            f.write_raw_fragment(w, value.text)
        elif isinstance(value, Mapping):
            self._enter(value)
            try:
                self._serialize_map(value)
            finally:
                self._leave(value)
        elif isinstance(value, _ARRAY_TYPES) or (
            isinstance(value, Sequence) and not isinstance(value, _BYTES_TYPES)
        ):
            self._enter(value)
            try:
                self._serialize_seq(value)
            finally:
                self._leave(value)
        elif isinstance(value, PurePath):
            self._serialize_str(str(value))
        elif isinstance(value, Enum):
            self._serialize_str(value.name)
        else:
            self._serialize_other(value)

    def _serialize_other(self, value: object) -> None:
        to_dict: Any | None = getattr(value, "to_dict", None)
        if callable(to_dict):
            replacement: object = to_dict()
        elif self.default is not None:
            replacement = self.default(value)
        else:
            raise UnsupportedTypeError(value)

        self._enter(value)
        try:
            self._serialize(replacement)
        finally:
            self._leave(value)

    def _serialize_str(self, value: str) -> None:
        if _SURROGATE_RE.search(value):
            raise SerializationError(f"string is not valid UTF-8 (lone surrogate): {value!r}")

        self.formatter.write_str(self.writer, value)

    def _serialize_key(self, key: object) -> None:
        if isinstance(key, str):
            self._serialize_str(key)
        elif isinstance(key, int) and not isinstance(key, bool):
            self.formatter.write_str(self.writer, int_to_text(key))
        else:
            raise KeyMustBeStringError(key)

    def _serialize_seq(self, values: Iterable[object]) -> None:
        f: Formatter = self.formatter
        w: Writer = self.writer

        f.begin_array(w)
        first = True
        for item in values:
            f.begin_array_value(w, first)
            self._serialize(item)
            f.end_array_value(w)
            first = False
        f.end_array(w)

    def _serialize_map(self, mapping: Mapping[Any, Any]) -> None:
        f: Formatter = self.formatter
        w: Writer = self.writer

        f.begin_object(w)
        first = True
        for key, item in mapping.items():
            f.begin_object_key(w, first)
            self._serialize_key(key)
            f.end_object_key(w)
            f.begin_object_value(w)
            self._serialize(item)
            f.end_object_value(w)
            first = False
        f.end_object(w)

    def _enter(self, value: object) -> None:
        if self._markers is None:
            return
        marker = id(value)
        if marker in self._markers:
            raise CircularReferenceError()
        self._markers.add(marker)

    def _leave(self, value: object) -> None:
        if self._markers is not None:
            self._markers.discard(id(value))
