# topmark:header:start
#
#   project      : SemiCompact
#   file         : exit_codes.py
#   file_relpath : src/semicompact/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the SemiCompact CLI.

The error codes follow the BSD ``sysexits.h`` conventions where one applies.

Usage:
    ```python
    import subprocess
    from semicompact.cli.exit_codes import ExitCode

    result = subprocess.run(["semicompact", "format", "--check", "data.json"])
    if result.returncode == ExitCode.WOULD_CHANGE:
        print("data.json is not semi-compact formatted.")
    ```
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the SemiCompact CLI.

    Attributes:
        SUCCESS (int): Command completed; with ``--check``, all inputs are formatted.
        FAILURE (int): Generic failure (including values that cannot be serialized).
        WOULD_CHANGE (int): ``--check`` found at least one input that would be reformatted.
        USAGE_ERROR (int): Invalid flags or arguments.
        INPUT_ERROR (int): Input is not valid JSON.
        FILE_NOT_FOUND (int): An input path does not exist.
        ENCODING_ERROR (int): Input is not valid UTF-8.
        PERMISSION_DENIED (int): Insufficient permissions to read or write.
        IO_ERROR (int): Other read/write failure.
        CONFIG_ERROR (int): Missing, malformed or invalid configuration.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2
    USAGE_ERROR = 64
    INPUT_ERROR = 65
    FILE_NOT_FOUND = 66
    ENCODING_ERROR = 67
    PERMISSION_DENIED = 77
    IO_ERROR = 74
    CONFIG_ERROR = 78
