# topmark:header:start
#
#   project      : SemiCompact
#   file         : format.py
#   file_relpath : src/semicompact/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SemiCompact `format` command.

Re-renders JSON documents in semi-compact form.

Modes:
  * default: write the formatted documents to stdout, in argument order.
  * ``--in-place``: rewrite files whose content changes (STDIN is not allowed).
  * ``--check``: write nothing; exit with ``WOULD_CHANGE`` if any input differs
    from its formatted form.

Input handling:
  * With no PATHS, or with ``-`` as a PATH, the document is read from STDIN.
  * Processing stops at the first input that cannot be read, parsed or written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from semicompact.cli.cmd_common import build_config_common, get_console, get_effective_verbosity
from semicompact.cli.errors import SemicompactUsageError
from semicompact.cli.exit_codes import ExitCode
from semicompact.cli.io import (
    collect_sources,
    parse_document,
    read_source,
    render_document,
    write_in_place,
    write_stdout,
)
from semicompact.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_formatting_options,
)
from semicompact.config.logging import get_logger

if TYPE_CHECKING:
    from semicompact.cli.console import ConsoleLike
    from semicompact.cli.io import InputSource
    from semicompact.config import Config
    from semicompact.config.logging import SemicompactLogger

logger: SemicompactLogger = get_logger(__name__)


@click.command(
    name="format",
    help="Format JSON documents in semi-compact style.",
    epilog=(
        "Notes:\n"
        "  • Containers holding only scalars stay on one line.\n"
        "  • Use '-' (or no PATHS) to read a document from STDIN."
    ),
    context_settings=CONTEXT_SETTINGS,
)
@click.argument(
    "files",
    nargs=-1,
    type=click.Path(allow_dash=True),
    metavar="[PATHS]...",
)
@click.option(
    "--in-place",
    "-i",
    "in_place",
    is_flag=True,
    help="Rewrite files in place instead of writing to stdout.",
)
@click.option(
    "--check",
    "check",
    is_flag=True,
    help="Do not write anything; exit with status 2 if any input would be reformatted.",
)
@common_config_options
@common_formatting_options
def format_command(
    *,
    files: tuple[str, ...],
    in_place: bool,
    check: bool,
    no_config: bool,
    config_paths: tuple[str, ...],
    indent: int | None,
    tab: bool,
    preserve_number_text: bool | None,
    allow_nan: bool | None,
) -> None:
    """Format JSON documents in semi-compact style.

    Args:
        files (tuple[str, ...]): Input paths; ``-`` stands for STDIN.
        in_place (bool): Rewrite files instead of printing.
        check (bool): Only report whether inputs are formatted.
        no_config (bool): Skip project config discovery.
        config_paths (tuple[str, ...]): Extra config files to merge.
        indent (int | None): Spaces per nesting level.
        tab (bool): Indent with tabs.
        preserve_number_text (bool | None): Keep input number text.
        allow_nan (bool | None): Accept ``NaN``/``Infinity`` in input.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    if in_place and check:
        raise SemicompactUsageError("The '--in-place' and '--check' options are mutually exclusive.")

    sources: list[InputSource] = collect_sources(files)
    if in_place and any(s.is_stdin for s in sources):
        raise SemicompactUsageError("STDIN cannot be formatted in place; use a file path.")

    config: Config = build_config_common(
        no_config=no_config,
        config_paths=config_paths,
        indent=indent,
        tab=tab,
        preserve_number_text=preserve_number_text,
        allow_nan=allow_nan,
    )

    would_change: list[str] = []
    for source in sources:
        original: bytes = read_source(source)
        value = parse_document(original, name=source.name, config=config)
        formatted: bytes = render_document(value, name=source.name, config=config)
        changed: bool = formatted != original
        logger.debug("%s: %s", source.name, "changed" if changed else "unchanged")

        if check:
            if changed:
                would_change.append(source.name)
                console.print(f"would reformat {source.name}")
            elif vlevel > 0:
                console.print(f"already formatted {source.name}")
        elif in_place:
            if changed:
                write_in_place(source, formatted)
                if vlevel > 0:
                    console.print(f"reformatted {source.name}")
        else:
            write_stdout(formatted)

    if check and would_change:
        n = len(would_change)
        console.print(
            console.styled(
                f"{n} file{'s' if n != 1 else ''} would be reformatted.", fg="yellow", bold=True
            )
        )
        ctx.exit(ExitCode.WOULD_CHANGE)
