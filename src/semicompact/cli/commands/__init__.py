# topmark:header:start
#
#   project      : SemiCompact
#   file         : __init__.py
#   file_relpath : src/semicompact/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the SemiCompact CLI (registered in `semicompact.cli.main`)."""
