# topmark:header:start
#
#   project      : SemiCompact
#   file         : __init__.py
#   file_relpath : src/semicompact/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SemiCompact package.

SemiCompact renders JSON the way a human would lay it out: the overall structure
is indented one member per line, while arrays and objects holding only primitive
values stay on a single line. It exposes a small typed API and a CLI.
"""

from __future__ import annotations

from semicompact.api import dump, dumps, to_bytes, to_string, to_writer
from semicompact.core import (
    CircularReferenceError,
    KeyMustBeStringError,
    RawValue,
    SemiCompactFormatter,
    SerializationError,
    UnsupportedTypeError,
)

__all__ = [
    "CircularReferenceError",
    "KeyMustBeStringError",
    "RawValue",
    "SemiCompactFormatter",
    "SerializationError",
    "UnsupportedTypeError",
    "dump",
    "dumps",
    "to_bytes",
    "to_string",
    "to_writer",
]
