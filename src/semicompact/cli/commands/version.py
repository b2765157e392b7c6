# topmark:header:start
#
#   project      : SemiCompact
#   file         : version.py
#   file_relpath : src/semicompact/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SemiCompact `version` command.

Prints the current SemiCompact version as installed in the active Python environment.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

import click

from semicompact.api import to_string
from semicompact.cli.cmd_common import get_console, get_effective_verbosity
from semicompact.cli.options import CONTEXT_SETTINGS
from semicompact.constants import SEMICOMPACT_VERSION

if TYPE_CHECKING:
    from semicompact.cli.console import ConsoleLike


class OutputFormat(str, Enum):
    """Output formats for informational commands."""

    DEFAULT = "default"
    JSON = "json"


@click.command(
    name="version",
    help="Show the current version of SemiCompact.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.DEFAULT.value,
    help=f"Output format ({', '.join(f.value for f in OutputFormat)}).",
)
def version_command(*, output_format: str) -> None:
    """Show the current version of SemiCompact.

    Args:
        output_format (str): ``default`` for plain text, ``json`` for a JSON object.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    if OutputFormat(output_format) == OutputFormat.JSON:
        console.print(to_string({"name": "semicompact", "version": SEMICOMPACT_VERSION}), nl=False)
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("SemiCompact version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(SEMICOMPACT_VERSION, bold=True)}")
    else:
        console.print(console.styled(SEMICOMPACT_VERSION, bold=True))
