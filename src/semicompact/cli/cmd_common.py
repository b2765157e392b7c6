# topmark:header:start
#
#   project      : SemiCompact
#   file         : cmd_common.py
#   file_relpath : src/semicompact/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

These helpers only encapsulate plumbing shared by several commands (config
resolution, console lookup); policy such as exit codes lives in the commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from semicompact.cli.console import ClickConsole
from semicompact.cli.errors import SemicompactConfigError
from semicompact.cli.options import resolve_indent_option
from semicompact.config import ConfigError, MutableConfig
from semicompact.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from semicompact.cli.console import ConsoleLike
    from semicompact.config import Config
    from semicompact.config.logging import SemicompactLogger

logger: SemicompactLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context, creating a plain one if missing."""
    ctx.ensure_object(dict)
    console: ConsoleLike | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (count of ``-v``, 0 if unset)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def build_config_common(
    *,
    no_config: bool,
    config_paths: Sequence[str],
    indent: int | None,
    tab: bool,
    preserve_number_text: bool | None,
    allow_nan: bool | None,
) -> Config:
    """Resolve the effective configuration for a command.

    Merges defaults, discovered project config, explicit ``--config`` files and the
    formatting overrides given on the command line.

    Args:
        no_config (bool): Skip project config discovery.
        config_paths (Sequence[str]): Explicit config files, merged in order.
        indent (int | None): ``--indent`` value.
        tab (bool): ``--tab`` flag.
        preserve_number_text (bool | None): ``--preserve-numbers`` tri-state.
        allow_nan (bool | None): ``--allow-nan`` tri-state.

    Returns:
        Config: The frozen configuration.

    Raises:
        SemicompactConfigError: If a config source is unreadable or invalid.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
        draft.apply_cli_args(
            {
                "indent": resolve_indent_option(indent, tab),
                "preserve_number_text": preserve_number_text,
                "allow_nan": allow_nan,
            }
        )
    except ConfigError as e:
        raise SemicompactConfigError(str(e)) from e

    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config
