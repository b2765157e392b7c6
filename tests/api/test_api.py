# topmark:header:start
#
#   project      : SemiCompact
#   file         : test_api.py
#   file_relpath : tests/api/test_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the public entry points exported by `semicompact`."""

from __future__ import annotations

import io
import json
from typing import TYPE_CHECKING

import pytest

import semicompact
from semicompact import (
    SerializationError,
    UnsupportedTypeError,
    dump,
    dumps,
    to_bytes,
    to_string,
    to_writer,
)

if TYPE_CHECKING:
    from pathlib import Path

SAMPLE: dict[str, object] = {"a": 1, "b": [1, 2, 3], "c": {"x": True}}
SAMPLE_TEXT = '{\n  "a": 1,\n  "b": [ 1, 2, 3 ],\n  "c": { "x": true }\n}\n'


def test_public_names() -> None:
    """The package root re-exports the API, the errors and the formatter."""
    for name in semicompact.__all__:
        assert hasattr(semicompact, name), name


def test_to_string() -> None:
    """`to_string` returns the semi-compact document as text."""
    assert to_string(SAMPLE) == SAMPLE_TEXT


def test_to_bytes_is_utf8() -> None:
    """`to_bytes` returns the UTF-8 encoding of the same document."""
    assert to_bytes({"k": "é"}) == '{ "k": "é" }\n'.encode()


def test_to_writer_streams_into_sink() -> None:
    """`to_writer` writes into any object with ``write(bytes)``."""
    chunks: list[bytes] = []

    class Collector:
        def write(self, data: bytes, /) -> None:
            chunks.append(bytes(data))

    to_writer(Collector(), SAMPLE)
    assert b"".join(chunks).decode("utf-8") == SAMPLE_TEXT


def test_indent_option() -> None:
    """All entry points accept an ``indent`` unit."""
    assert to_string({"a": [[1]]}, indent=4 * " ") == '{\n    "a": [\n        [ 1 ]\n    ]\n}\n'
    assert to_bytes({"a": [[1]]}, indent=b"\t") == b'{\n\t"a": [\n\t\t[ 1 ]\n\t]\n}\n'


def test_default_option() -> None:
    """The ``default`` hook is forwarded to the serializer."""
    assert dumps({"z": 1 + 2j}, default=str) == '{ "z": "(1+2j)" }\n'


def test_dumps_matches_to_string() -> None:
    """`dumps` is an alias of `to_string`."""
    assert dumps(SAMPLE) == to_string(SAMPLE)


def test_dump_text_file(tmp_path: Path) -> None:
    """`dump` accepts text file objects."""
    target: Path = tmp_path / "out.json"
    with target.open("w", encoding="utf-8") as fp:
        dump(SAMPLE, fp)
    assert target.read_text(encoding="utf-8") == SAMPLE_TEXT


def test_dump_binary_file(tmp_path: Path) -> None:
    """`dump` streams into binary file objects."""
    target: Path = tmp_path / "out.json"
    with target.open("wb") as fp:
        dump(SAMPLE, fp)
    assert target.read_bytes() == SAMPLE_TEXT.encode()


def test_dump_text_file_untouched_on_error() -> None:
    """Text targets only receive output once serialization has succeeded."""
    fp = io.StringIO()
    with pytest.raises(UnsupportedTypeError):
        dump({"a": [1, object()]}, fp)
    assert fp.getvalue() == ""


def test_output_round_trips_through_json() -> None:
    """Parsing the output gives back the input value."""
    value: dict[str, object] = {
        "name": "tremble_r1",
        "flags": [1074823168, 1081459343, 0],
        "bbox": {"min": [-1.0, -1.0, 0.0], "max": [1.0, 1.0, 2.0]},
        "material": {"variant": 0},
        "tags": [],
        "text": 'line\nbreak "quoted" \\ \x07',
    }
    assert json.loads(to_string(value)) == value


def test_errors_surface_from_entry_points() -> None:
    """Serialization errors raised by the engine reach the caller."""
    with pytest.raises(SerializationError):
        to_bytes({None: 1})
