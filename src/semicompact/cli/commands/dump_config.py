# topmark:header:start
#
#   project      : SemiCompact
#   file         : dump_config.py
#   file_relpath : src/semicompact/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SemiCompact `dump-config` command.

Prints the effective configuration (defaults, discovered config files, ``--config``
files and CLI overrides, merged) as TOML between ``# === BEGIN ===`` and
``# === END ===`` markers, for easy parsing in tests or tooling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from semicompact.cli.cmd_common import build_config_common, get_console, get_effective_verbosity
from semicompact.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_formatting_options,
)
from semicompact.constants import CONFIG_DUMP_BEGIN, CONFIG_DUMP_END

if TYPE_CHECKING:
    from semicompact.cli.console import ConsoleLike
    from semicompact.config import Config


@click.command(
    name="dump-config",
    help="Dump the final merged SemiCompact configuration as TOML.",
    epilog="Output is wrapped between '# === BEGIN ===' and '# === END ===' markers.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@common_formatting_options
def dump_config_command(
    *,
    no_config: bool,
    config_paths: tuple[str, ...],
    indent: int | None,
    tab: bool,
    preserve_number_text: bool | None,
    allow_nan: bool | None,
) -> None:
    """Dump the final merged configuration as TOML.

    With ``-v`` the contributing config sources are listed first.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    config: Config = build_config_common(
        no_config=no_config,
        config_paths=config_paths,
        indent=indent,
        tab=tab,
        preserve_number_text=preserve_number_text,
        allow_nan=allow_nan,
    )

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Config sources:", bold=True, underline=True))
        for src in config.config_files:
            console.print(f"  {src}")
        console.print()

    console.print(CONFIG_DUMP_BEGIN)
    console.print(config.to_toml().rstrip("\n"))
    console.print(CONFIG_DUMP_END)
