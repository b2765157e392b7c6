# topmark:header:start
#
#   project      : SemiCompact
#   file         : test_info_commands.py
#   file_relpath : tests/cli/test_info_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI informational commands: group help, `version` and `dump-config`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import tomlkit

from semicompact.constants import CONFIG_DUMP_BEGIN, CONFIG_DUMP_END, SEMICOMPACT_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


def _dumped_toml(output: str) -> dict[str, Any]:
    """Return the TOML between the dump markers, parsed."""
    start: int = output.index(CONFIG_DUMP_BEGIN) + len(CONFIG_DUMP_BEGIN)
    end: int = output.index(CONFIG_DUMP_END)
    return tomlkit.parse(output[start:end]).unwrap()


@mark_cli
def test_group_without_command_prints_help(isolation: Path) -> None:
    """Invoking the group alone prints a hint and the help text."""
    result: Result = run_cli([])
    assert_SUCCESS(result)
    assert "semicompact format" in result.stdout
    assert "dump-config" in result.stdout


@mark_cli
def test_version_plain(isolation: Path) -> None:
    """`version` prints the installed version."""
    result: Result = run_cli(["version"])
    assert_SUCCESS(result)
    assert result.stdout.strip() == SEMICOMPACT_VERSION


@mark_cli
def test_version_json(isolation: Path) -> None:
    """`version --format json` prints a semi-compact JSON object."""
    result: Result = run_cli(["version", "--format", "json"])
    assert_SUCCESS(result)
    assert result.stdout == f'{{ "name": "semicompact", "version": "{SEMICOMPACT_VERSION}" }}\n'
    assert json.loads(result.stdout)["version"] == SEMICOMPACT_VERSION


@mark_cli
def test_dump_config_defaults(isolation: Path) -> None:
    """`dump-config` prints the effective configuration between markers."""
    result: Result = run_cli(["dump-config"])
    assert_SUCCESS(result)
    assert _dumped_toml(result.stdout) == {
        "formatting": {"indent": "  "},
        "input": {"preserve_number_text": True, "allow_nan": False},
    }


@mark_cli
def test_dump_config_merges_files_and_overrides(isolation: Path) -> None:
    """Discovered config and CLI overrides both show up in the dump."""
    (isolation / "semicompact.toml").write_text(
        "root = true\n[input]\nallow_nan = true\n", encoding="utf-8"
    )
    result: Result = run_cli(["dump-config", "--tab", "--no-preserve-numbers"])
    assert_SUCCESS(result)
    assert _dumped_toml(result.stdout) == {
        "formatting": {"indent": "\t"},
        "input": {"preserve_number_text": False, "allow_nan": True},
    }


@mark_cli
def test_dump_config_verbose_lists_sources(isolation: Path) -> None:
    """With ``-v`` the contributing sources are listed."""
    result: Result = run_cli(["-v", "dump-config", "--indent", "3"])
    assert_SUCCESS(result)
    assert "Config sources:" in result.stdout
    assert "semicompact.toml" in result.stdout
    assert "<CLI overrides>" in result.stdout
