# topmark:header:start
#
#   project      : SemiCompact
#   file         : main.py
#   file_relpath : src/semicompact/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click group for the SemiCompact CLI.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read them back through `semicompact.cli.cmd_common`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from semicompact.cli.commands.dump_config import dump_config_command
from semicompact.cli.commands.format import format_command
from semicompact.cli.commands.version import version_command
from semicompact.cli.console import ClickConsole
from semicompact.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from semicompact.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from semicompact.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color) on the Click context.

    ``SEMICOMPACT_LOG_LEVEL`` takes precedence over ``-v``/``-q`` for logging.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbose

    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="SemiCompact: format JSON with flat containers kept on one line.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the SemiCompact CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]
    logger.debug("Invoked subcommand: %s", ctx.invoked_subcommand)

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'semicompact format [PATHS...]' to format JSON files.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(format_command)

cli.add_command(dump_config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
