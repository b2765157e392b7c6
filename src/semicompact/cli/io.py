# topmark:header:start
#
#   project      : SemiCompact
#   file         : io.py
#   file_relpath : src/semicompact/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input/output plumbing for the ``format`` command.

This module maps filesystem, decoding and parsing failures onto the CLI error
classes (and hence exit codes). Layout decisions stay in `semicompact.core`.

- Inputs are files or STDIN (``-`` or no paths at all).
- Input is decoded as UTF-8; a leading byte order mark is accepted and dropped.
- In-place rewrites go through a temporary file in the target directory which
  then replaces the original.
"""

from __future__ import annotations

import json
import os
import shutil
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, NoReturn

from semicompact.api import to_bytes
from semicompact.cli.errors import (
    SemicompactEncodingError,
    SemicompactFileNotFoundError,
    SemicompactInputError,
    SemicompactIOError,
    SemicompactPermissionDeniedError,
    SemicompactSerializationError,
    SemicompactUsageError,
)
from semicompact.config.logging import get_logger
from semicompact.core.errors import SerializationError
from semicompact.core.serializer import RawValue

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from semicompact.config import Config
    from semicompact.config.logging import SemicompactLogger

logger: SemicompactLogger = get_logger(__name__)

STDIN_MARKER = "-"
STDIN_NAME = "<stdin>"


@dataclass(frozen=True)
class InputSource:
    """One JSON document to format.

    Attributes:
        name (str): Display name used in messages.
        path (Path | None): File path, or None for STDIN.
    """

    name: str
    path: Path | None = None

    @property
    def is_stdin(self) -> bool:
        """Whether this source reads from STDIN."""
        return self.path is None


def collect_sources(files: Sequence[str]) -> list[InputSource]:
    """Turn positional arguments into input sources.

    No arguments means STDIN. ``-`` may appear at most once.

    Raises:
        SemicompactUsageError: If ``-`` is given more than once.
    """
    if not files:
        return [InputSource(STDIN_NAME)]
    if list(files).count(STDIN_MARKER) > 1:
        raise SemicompactUsageError("STDIN ('-') may only be given once.")
    return [
        InputSource(STDIN_NAME) if f == STDIN_MARKER else InputSource(f, Path(f)) for f in files
    ]


def _raise_os_error(source: InputSource, exc: OSError, action: str) -> NoReturn:
    if isinstance(exc, FileNotFoundError):
        raise SemicompactFileNotFoundError(f"{source.name}: no such file") from exc
    if isinstance(exc, PermissionError):
        raise SemicompactPermissionDeniedError(
            f"{source.name}: permission denied while {action}"
        ) from exc
    raise SemicompactIOError(f"{source.name}: error while {action}: {exc}") from exc


def read_source(source: InputSource) -> bytes:
    """Read the raw bytes of a source.

    Raises:
        SemicompactFileNotFoundError: If the file does not exist.
        SemicompactPermissionDeniedError: If the file is not readable.
        SemicompactIOError: On any other read failure.
    """
    if source.path is None:
        logger.debug("Reading JSON from STDIN")
        return sys.stdin.buffer.read()
    logger.debug("Reading JSON from %s", source.path)
    try:
        return source.path.read_bytes()
    except OSError as e:
        _raise_os_error(source, e, "reading")


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"{name} is not valid JSON (use --allow-nan to accept it)")


def parse_document(data: bytes, *, name: str, config: Config) -> Any:
    """Decode and parse one JSON document.

    With ``preserve_number_text`` every number becomes a `RawValue` holding the
    exact input text. ``NaN``/``Infinity``/``-Infinity`` are rejected unless
    ``allow_nan`` is set.

    Args:
        data (bytes): Raw input.
        name (str): Display name used in messages.
        config (Config): Effective configuration.

    Returns:
        Any: The parsed value tree.

    Raises:
        SemicompactEncodingError: If the input is not valid UTF-8.
        SemicompactInputError: If the input is not a valid JSON document.
    """
    try:
        text: str = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise SemicompactEncodingError(f"{name}: input is not valid UTF-8: {e}") from e

    parse_constant: Callable[[str], Any] = float if config.allow_nan else _reject_constant
    try:
        if config.preserve_number_text:
            return json.loads(
                text, parse_float=RawValue, parse_int=RawValue, parse_constant=parse_constant
            )
        return json.loads(text, parse_constant=parse_constant)
    except json.JSONDecodeError as e:
        raise SemicompactInputError(f"{name}: invalid JSON: {e}") from e
    except RecursionError as e:
        raise SemicompactInputError(f"{name}: JSON nesting is too deep") from e
    except ValueError as e:
        raise SemicompactInputError(f"{name}: invalid JSON: {e}") from e


def render_document(value: Any, *, name: str, config: Config) -> bytes:
    """Render a parsed document as semi-compact JSON file content.

    The result always ends with a newline (top-level scalars get one appended).

    Raises:
        SemicompactSerializationError: If the value cannot be written as JSON.
    """
    try:
        rendered: bytes = to_bytes(value, indent=config.indent)
    except SerializationError as e:
        raise SemicompactSerializationError(f"{name}: {e}") from e
    except RecursionError as e:
        raise SemicompactSerializationError(f"{name}: JSON nesting is too deep") from e
    if not rendered.endswith(b"\n"):
        rendered += b"\n"
    return rendered


def write_stdout(data: bytes) -> None:
    """Write formatted output to the binary STDOUT stream."""
    # Text already echoed to stdout must precede the bytes.
    sys.stdout.flush()
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def write_in_place(source: InputSource, data: bytes) -> None:
    """Atomically replace a file's content, keeping its permission bits.

    Raises:
        SemicompactPermissionDeniedError: If the directory or file is not writable.
        SemicompactIOError: On any other write failure.
    """
    assert source.path is not None, "STDIN cannot be rewritten in place"
    path: Path = source.path
    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "wb", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as e:
        _raise_os_error(source, e, "writing")
    finally:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
    logger.debug("Rewrote %s (%d bytes)", path, len(data))
