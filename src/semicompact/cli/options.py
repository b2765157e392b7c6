# topmark:header:start
#
#   project      : SemiCompact
#   file         : options.py
#   file_relpath : src/semicompact/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the SemiCompact Click CLI.

This module centralizes reusable options (verbosity, color, config, formatting)
and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Any, Callable, ParamSpec, TypeVar

import click

from semicompact.cli.errors import SemicompactUsageError
from semicompact.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by the group and its commands.
CONTEXT_SETTINGS: dict[str, Any] = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the counts of ``-v`` and ``-q`` flags.

    Args:
        verbose_count (int): Number of times ``-v`` is passed.
        quiet_count (int): Number of times ``-q`` is passed.

    Returns:
        int: The logging level.

    Raises:
        SemicompactUsageError: If both verbose and quiet flags are used.

    Behavior:
        Three or more ``-v`` set TRACE, two set DEBUG, one sets INFO.
        One or more ``-q`` set ERROR. Default is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise SemicompactUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat for more detail (-vvv enables TRACE logging).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from CLI options.
        stdout_isatty (bool | None): Whether stdout is a TTY; auto-detected if None.

    Returns:
        bool: True if color output should be enabled.

    Behavior:
        Honors ``--color``/``--no-color``, then ``FORCE_COLOR`` and ``NO_COLOR``;
        defaults to enabling color when stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-config`` and ``--config`` options to a command."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore discovered project config files (only use defaults and --config).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def common_formatting_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add options overriding the formatting and input configuration.

    Adds ``--indent N``, ``--tab``, ``--preserve-numbers/--no-preserve-numbers``
    and ``--allow-nan/--no-allow-nan``. Unset options leave the configuration alone.
    """
    f = click.option(
        "--indent",
        "indent",
        type=click.IntRange(min=0),
        default=None,
        help="Indent with N spaces per nesting level (default: 2).",
    )(f)
    f = click.option(
        "--tab",
        "tab",
        is_flag=True,
        help="Indent with one tab per nesting level.",
    )(f)
    f = click.option(
        "--preserve-numbers/--no-preserve-numbers",
        "preserve_number_text",
        default=None,
        help="Keep the exact text of input numbers (default: on).",
    )(f)
    f = click.option(
        "--allow-nan/--no-allow-nan",
        "allow_nan",
        default=None,
        help="Accept NaN/Infinity in input; they are written as null (default: off).",
    )(f)
    return f


def resolve_indent_option(indent: int | None, tab: bool) -> str | int | None:
    """Combine ``--indent`` and ``--tab`` into one indent override.

    Raises:
        SemicompactUsageError: If both options are given.
    """
    if tab and indent is not None:
        raise SemicompactUsageError("The '--indent' and '--tab' options are mutually exclusive.")
    if tab:
        return "\t"
    return indent
