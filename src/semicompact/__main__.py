# topmark:header:start
#
#   project      : SemiCompact
#   file         : __main__.py
#   file_relpath : src/semicompact/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running SemiCompact via ``python -m semicompact``.

Delegates to :func:`semicompact.cli.main.cli`, the same Click group installed as
the ``semicompact`` console script.

Examples:
    Reformat a file to stdout::

        python -m semicompact format data.json
"""

from __future__ import annotations

from semicompact.cli.main import cli

if __name__ == "__main__":
    cli()
