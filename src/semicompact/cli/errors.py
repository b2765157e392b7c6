# topmark:header:start
#
#   project      : SemiCompact
#   file         : errors.py
#   file_relpath : src/semicompact/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the SemiCompact CLI.

Raise these in CLI commands to signal errors with standardized messages and exit
codes. They prefer the project console if one is present in the Click context and
fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from semicompact.cli.exit_codes import ExitCode


class SemicompactError(click.ClickException):
    """Base class for all SemiCompact CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class SemicompactUsageError(SemicompactError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SemicompactConfigError(SemicompactError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class SemicompactInputError(SemicompactError):
    """Error for input that is not valid JSON."""

    exit_code = ExitCode.INPUT_ERROR


class SemicompactFileNotFoundError(SemicompactError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SemicompactPermissionDeniedError(SemicompactError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class SemicompactIOError(SemicompactError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class SemicompactEncodingError(SemicompactError):
    """Error for input that is not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR


class SemicompactSerializationError(SemicompactError):
    """Error for values that cannot be written as JSON."""

    exit_code = ExitCode.FAILURE
