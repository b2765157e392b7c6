# topmark:header:start
#
#   project      : SemiCompact
#   file         : __init__.py
#   file_relpath : src/semicompact/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SemiCompact CLI package.

Click command definitions and the I/O plumbing behind them.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    semicompact = "semicompact.cli.main:cli"

All subcommands live in [`semicompact.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
