# topmark:header:start
#
#   project      : SemiCompact
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running SemiCompact through Click's `CliRunner`.

`run_cli_in()` changes the working directory to a given directory before invoking
the CLI, so relative paths and config discovery resolve against it. `run_cli()`
invokes the CLI from the current working directory.

`Result.output` holds stdout and stderr interleaved; `Result.stdout` only holds
stdout, which is where formatted JSON goes.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from semicompact.cli.exit_codes import ExitCode
from semicompact.cli.main import cli
from semicompact.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Reinstall test logging after each CLI run (the CLI reconfigures the root logger)."""
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli_in(
    cwd: Path,
    argv: str | Sequence[str] | None,
    *,
    input_data: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``cwd`` as the working directory.

    Args:
        cwd (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["format", "a.json"]``.
        input_data (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    previous: str = os.getcwd()
    try:
        os.chdir(cwd)
        return run_cli(argv, input_data=input_data)
    finally:
        os.chdir(previous)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_data: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector.
        input_data (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_data)


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``, showing the output otherwise."""
    assert result.exit_code == code, (result.exit_code, result.output, result.exception)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert_exit(result, ExitCode.SUCCESS)


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2)."""
    assert_exit(result, ExitCode.WOULD_CHANGE)
