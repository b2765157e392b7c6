# topmark:header:start
#
#   project      : SemiCompact
#   file         : layout.py
#   file_relpath : src/semicompact/core/layout.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Semi-compact layout formatter.

The overall structure is pretty-printed (one member per line, indented), but any
array or object whose members are all primitives is written on a single line:

```json
{
  "name": "tremble_r1",
  "flags": [ 1074823168, 1081459343, 0 ],
  "bbox": {
    "min": [ -1.0, -1.0, 0.0 ],
    "max": [ 1.0, 1.0, 2.0 ]
  },
  "material": { "variant": 0 }
}
```

How the decision is made while streaming:
    When a container opens, its members are rendered into a list of per-member
    byte slots instead of the sink. If the container closes with that list still
    pending, it is written inline as ``[ a, b, c ]``. If a nested container opens
    first, the pending list belongs to the parent: it is flushed to the sink
    one member per line right away, and a fresh list is started for the child.

    Only one pending list exists at any time (that of the innermost container not
    yet known to hold a nested container), so memory stays bounded to one level.
"""

from __future__ import annotations

from io import BytesIO
from typing import TYPE_CHECKING, Final

from semicompact.config.logging import get_logger
from semicompact.constants import DEFAULT_INDENT
from semicompact.core.formatter import CompactFormatter, Formatter

if TYPE_CHECKING:
    from semicompact.config.logging import SemicompactLogger
    from semicompact.core.formatter import Writer

logger: SemicompactLogger = get_logger(__name__)

_COMPACT: Final[CompactFormatter] = CompactFormatter()


class SemiCompactFormatter(Formatter):
    """A pretty-printer that saves vertical space on lists of primitive values.

    Args:
        indent (bytes | str): Indentation unit repeated once per nesting level.
            A `str` is UTF-8 encoded. Defaults to two spaces.

    Attributes:
        current_indent (int): Depth of the currently open containers.
        indent (bytes): Indentation unit.
        buffer (list[BytesIO] | None): One slot per member of the innermost open
            container that may still be written on a single line; ``None`` once that
            container has been committed to multi-line layout.

    Notes:
        Instances hold per-document state and are not safe to share between
        concurrent serializations. They can be reused sequentially; `Serializer`
        calls `reset` when a document fails part way through.
    """

    current_indent: int
    indent: bytes
    buffer: list[BytesIO] | None

    def __init__(self, indent: bytes | str = DEFAULT_INDENT) -> None:
        self.current_indent = 0
        self.buffer = None
        self.indent = indent.encode("utf-8") if isinstance(indent, str) else bytes(indent)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(indent={self.indent!r}, "
            f"current_indent={self.current_indent}, "
            f"pending={None if self.buffer is None else len(self.buffer)})"
        )

    def reset(self) -> None:
        """Return to the state of a fresh instance (depth 0, nothing pending)."""
        if self.current_indent or self.buffer is not None:
            logger.debug("Resetting formatter left at depth %d", self.current_indent)
        self.current_indent = 0
        self.buffer = None

    def _writer(self, w: Writer) -> Writer:
        """Return the last pending slot if a container is undecided, else the sink."""
        if self.buffer is not None:
            return self.buffer[-1]
        return w

    def _newline(self, w: Writer) -> None:
        w.write(b"\n")
        for _ in range(self.current_indent):
            w.write(self.indent)

    def _begin(self, w: Writer, delimiter: bytes) -> None:
        self._writer(w).write(delimiter)
        previous: list[BytesIO] | None = self.buffer
        self.buffer = []
        if previous is not None:
            # The parent holds a container: commit it to one member per line.
            logger.trace(
                "Flushing %d pending member(s) at depth %d", len(previous), self.current_indent
            )
            for index, slot in enumerate(previous):
                if index:
                    w.write(b",")
                self._newline(w)
                w.write(slot.getvalue())
        self.current_indent += 1

    def _end(self, w: Writer, delimiter: bytes) -> None:
        self.current_indent -= 1
        pending: list[BytesIO] | None = self.buffer
        self.buffer = None
        if pending is not None:
            if pending:
                w.write(b" ")
                for index, slot in enumerate(pending):
                    if index:
                        w.write(b", ")
                    w.write(slot.getvalue())
                w.write(b" ")
        else:
            self._newline(w)
        w.write(delimiter)
        if self.current_indent == 0:
            self._newline(w)

    def _member(self, w: Writer, first: bool) -> None:
        if self.buffer is not None:
            self.buffer.append(BytesIO())
        elif not first:
            w.write(b",")
            self._newline(w)

    # --- structural events ---

    def begin_array(self, w: Writer) -> None:
        self._begin(w, b"[")

    def end_array(self, w: Writer) -> None:
        self._end(w, b"]")

    def begin_array_value(self, w: Writer, first: bool) -> None:
        self._member(w, first)

    def begin_object(self, w: Writer) -> None:
        self._begin(w, b"{")

    def end_object(self, w: Writer) -> None:
        self._end(w, b"}")

    def begin_object_key(self, w: Writer, first: bool) -> None:
        self._member(w, first)

    def begin_object_value(self, w: Writer) -> None:
        self._writer(w).write(b": ")

    # --- scalar tokens: compact encoding, written to the selected target ---

    def write_null(self, w: Writer) -> None:
        _COMPACT.write_null(self._writer(w))

    def write_bool(self, w: Writer, value: bool) -> None:
        _COMPACT.write_bool(self._writer(w), value)

    def write_int(self, w: Writer, value: int) -> None:
        _COMPACT.write_int(self._writer(w), value)

    def write_float(self, w: Writer, value: float) -> None:
        _COMPACT.write_float(self._writer(w), value)

    def write_number_str(self, w: Writer, value: str) -> None:
        _COMPACT.write_number_str(self._writer(w), value)

    def write_str(self, w: Writer, value: str) -> None:
        _COMPACT.write_str(self._writer(w), value)

    def write_raw_fragment(self, w: Writer, fragment: str) -> None:
        _COMPACT.write_raw_fragment(self._writer(w), fragment)
