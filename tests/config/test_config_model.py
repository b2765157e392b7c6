# topmark:header:start
#
#   project      : SemiCompact
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for configuration discovery, precedence, freezing and TOML export."""

from __future__ import annotations

import dataclasses
import textwrap
from pathlib import Path

import pytest
import tomlkit

from semicompact.config import Config, ConfigError, MutableConfig
from semicompact.config.model import CLI_OVERRIDE_STR


def _write(path: Path, content: str) -> None:
    """Helper: write dedented content to a file, creating parents."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")


def test_defaults() -> None:
    """Defaults: two-space indent, numbers preserved, NaN rejected."""
    config: Config = MutableConfig.from_defaults().freeze()
    assert config.indent == "  "
    assert config.preserve_number_text is True
    assert config.allow_nan is False
    assert config.config_files == ()


def test_config_is_frozen() -> None:
    """`Config` cannot be mutated; `thaw()` gives an editable copy."""
    config = Config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.indent = "\t"  # type: ignore[misc]
    draft: MutableConfig = config.thaw()
    draft.indent = "\t"
    assert draft.freeze().indent == "\t"
    assert config.indent == "  "


def test_from_toml_dict_integer_indent() -> None:
    """An integer indent means that many spaces."""
    draft = MutableConfig.from_toml_dict({"formatting": {"indent": 4}})
    assert draft.indent == "    "
    assert draft.preserve_number_text is None


def test_from_toml_dict_rejects_bad_values() -> None:
    """Invalid values raise `ConfigError` naming the source file."""
    with pytest.raises(ConfigError, match="bad.toml: 'allow_nan' must be a boolean"):
        MutableConfig.from_toml_dict({"input": {"allow_nan": "yes"}}, Path("bad.toml"))
    with pytest.raises(ConfigError, match="spaces and tabs"):
        MutableConfig.from_toml_dict({"formatting": {"indent": "--"}})
    with pytest.raises(ConfigError, match=r"\[formatting\] must be a table"):
        MutableConfig.from_toml_dict({"formatting": 2})


def test_merge_with_only_overrides_set_fields() -> None:
    """Later layers only override what they set."""
    base = MutableConfig(indent="\t", allow_nan=True, config_files=["a"])
    top = MutableConfig(preserve_number_text=False, config_files=["b"])
    merged: MutableConfig = base.merge_with(top)
    assert merged.indent == "\t"
    assert merged.allow_nan is True
    assert merged.preserve_number_text is False
    assert merged.config_files == ["a", "b"]


def test_apply_cli_args() -> None:
    """CLI overrides win and are recorded as a source."""
    draft: MutableConfig = MutableConfig.from_defaults()
    draft.apply_cli_args({"indent": 3, "allow_nan": True, "preserve_number_text": None})
    config: Config = draft.freeze()
    assert config.indent == "   "
    assert config.allow_nan is True
    assert config.preserve_number_text is True
    assert config.config_files[-1] == CLI_OVERRIDE_STR


def test_apply_cli_args_without_values_records_nothing() -> None:
    """Unset CLI options leave the builder and its sources untouched."""
    draft: MutableConfig = MutableConfig.from_defaults()
    draft.apply_cli_args({"indent": None})
    assert CLI_OVERRIDE_STR not in draft.config_files


def test_pyproject_without_tool_section_is_ignored(tmp_path: Path) -> None:
    """A `pyproject.toml` without `[tool.semicompact]` contributes nothing."""
    _write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')
    assert MutableConfig.from_toml_file(tmp_path / "pyproject.toml") is None
    assert MutableConfig.discover_local_config_files(tmp_path) == []


def test_same_dir_precedence_semicompact_over_pyproject(tmp_path: Path) -> None:
    """In one directory `pyproject.toml` is merged first, then `semicompact.toml`."""
    proj: Path = tmp_path / "proj"
    _write(
        proj / "pyproject.toml",
        """
        [tool.semicompact]
        root = true

        [tool.semicompact.formatting]
        indent = 4
        """,
    )
    _write(
        proj / "semicompact.toml",
        """
        [formatting]
        indent = "\\t"
        """,
    )
    draft: MutableConfig = MutableConfig.load_merged(anchor=proj)
    assert draft.indent == "\t"
    resolved: Path = proj.resolve()
    assert draft.config_files == [resolved / "pyproject.toml", resolved / "semicompact.toml"]


def test_nearest_config_wins_and_root_stops_traversal(tmp_path: Path) -> None:
    """Nearer files override farther ones; `root = true` stops discovery."""
    above: Path = tmp_path / "above"
    root: Path = above / "root"
    child: Path = root / "apps" / "a"
    child.mkdir(parents=True)

    _write(above / "semicompact.toml", "[input]\nallow_nan = true\n")
    _write(
        root / "semicompact.toml",
        """
        root = true

        [formatting]
        indent = 8
        """,
    )
    _write(child / "semicompact.toml", "[formatting]\nindent = 1\n")

    draft: MutableConfig = MutableConfig.load_merged(anchor=child)
    assert draft.indent == " "
    # `above` is beyond the root marker
    assert draft.allow_nan is False


def test_no_config_skips_discovery_but_keeps_explicit_files(tmp_path: Path) -> None:
    """`no_config` ignores discovered files; explicit files still merge, in order."""
    _write(tmp_path / "semicompact.toml", "root = true\n[formatting]\nindent = 8\n")
    first: Path = tmp_path / "extra" / "one.toml"
    second: Path = tmp_path / "extra" / "two.toml"
    _write(first, "[formatting]\nindent = 3\n[input]\nallow_nan = true\n")
    _write(second, "[formatting]\nindent = 5\n")

    draft: MutableConfig = MutableConfig.load_merged(
        anchor=tmp_path, extra_config_files=[first, second], no_config=True
    )
    assert draft.indent == 5 * " "
    assert draft.allow_nan is True
    assert draft.config_files == [first, second]


def test_unreadable_explicit_config_raises(tmp_path: Path) -> None:
    """Malformed explicit config files raise `ConfigError`."""
    bad: Path = tmp_path / "bad.toml"
    bad.write_text("[formatting\nindent = 2\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        MutableConfig.load_merged(anchor=tmp_path, extra_config_files=[bad], no_config=True)


def test_malformed_file_skipped_during_discovery(tmp_path: Path) -> None:
    """Discovery skips files it cannot parse."""
    (tmp_path / "semicompact.toml").write_text("not = [valid\n", encoding="utf-8")
    assert MutableConfig.discover_local_config_files(tmp_path) == []


def test_to_toml_round_trips() -> None:
    """The TOML export parses back into the same settings."""
    config = Config(indent="\t", preserve_number_text=False, allow_nan=True)
    parsed = tomlkit.parse(config.to_toml()).unwrap()
    assert parsed == {
        "formatting": {"indent": "\t"},
        "input": {"preserve_number_text": False, "allow_nan": True},
    }
    assert MutableConfig.from_toml_dict(parsed).freeze() == config
