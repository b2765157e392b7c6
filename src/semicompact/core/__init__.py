# topmark:header:start
#
#   project      : SemiCompact
#   file         : __init__.py
#   file_relpath : src/semicompact/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serialization core: formatter contract, layout formatter and value-tree walker.

This package is Click-free and console-free; it only writes bytes to a sink.
"""

from __future__ import annotations

from semicompact.core.errors import (
    CircularReferenceError,
    KeyMustBeStringError,
    SerializationError,
    UnsupportedTypeError,
)
from semicompact.core.formatter import CompactFormatter, Formatter, Writer
from semicompact.core.layout import SemiCompactFormatter
from semicompact.core.serializer import RawValue, Serializer

__all__ = [
    "CircularReferenceError",
    "CompactFormatter",
    "Formatter",
    "KeyMustBeStringError",
    "RawValue",
    "SemiCompactFormatter",
    "SerializationError",
    "Serializer",
    "UnsupportedTypeError",
    "Writer",
]
