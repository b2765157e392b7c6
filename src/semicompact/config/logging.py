# topmark:header:start
#
#   project      : SemiCompact
#   file         : logging.py
#   file_relpath : src/semicompact/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SemiCompact logging with a TRACE level and colored output.

This module extends the standard logging module with a custom TRACE level below
DEBUG, a logger class exposing `.trace()`, and a chalk-colored formatter.

Library code only logs at TRACE/DEBUG; the default level is CRITICAL so that using
SemiCompact as a library stays silent unless `SEMICOMPACT_LOG_LEVEL` says otherwise.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

from yachalk import chalk

from semicompact.constants import ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class SemicompactLogger(logging.Logger):
    """Logger class with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(SemicompactLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class ChalkFormatter(logging.Formatter):
    """Formatter that colors log records with chalk based on severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim.red(message)


def parse_log_level(value: str) -> int | None:
    """Return the logging level for a name ("TRACE", "debug") or number ("10").

    Args:
        value (str): Level name or number.

    Returns:
        int | None: The level, or None if ``value`` is not recognized.
    """
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return a logging level from `SEMICOMPACT_LOG_LEVEL`, or None if unset or invalid."""
    val = os.environ.get(ENV_LOG_LEVEL)
    if val:
        return parse_log_level(val)
    return None


def setup_logging(level: int | None = None, *, stream: TextIO | None = None) -> None:
    """Configure the root logger with a level and colored output.

    If ``level`` is None, the environment is consulted via
    [`resolve_env_log_level`][semicompact.config.logging.resolve_env_log_level].
    Default is CRITICAL when unspecified.

    Args:
        level (int | None): Logging level to apply.
        stream (TextIO | None): Destination stream; defaults to `sys.stderr` so that
            diagnostics never mix with JSON written to stdout.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove all existing handlers to prevent duplicate log messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str) -> SemicompactLogger:
    """Retrieve a SemicompactLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        SemicompactLogger: A SemicompactLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("SemicompactLogger", logger)
