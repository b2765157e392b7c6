# topmark:header:start
#
#   project      : SemiCompact
#   file         : errors.py
#   file_relpath : src/semicompact/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while serializing a value tree.

Only failures detected by the serializer itself are represented here. Errors raised
by the output sink (typically `OSError`) and by user hooks (``default`` callables,
``to_dict()`` methods) propagate unchanged.

Partial output may already have been written to the sink when any of these is raised;
callers must treat the output as incomplete.
"""

from __future__ import annotations


class SerializationError(ValueError):
    """Base class for serialization failures detected by SemiCompact."""


class KeyMustBeStringError(SerializationError):
    """Raised when a mapping key is neither a `str` nor an `int`."""

    def __init__(self, key: object) -> None:
        super().__init__(f"key must be a string, not {type(key).__name__}: {key!r}")
        self.key: object = key


class UnsupportedTypeError(SerializationError):
    """Raised when a value has no JSON representation and no ``default`` hook handles it."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Object of type {type(value).__name__} is not JSON serializable")
        self.value: object = value


class CircularReferenceError(SerializationError):
    """Raised when a container (directly or indirectly) contains itself."""

    def __init__(self) -> None:
        super().__init__("Circular reference detected")
