# topmark:header:start
#
#   project      : SemiCompact
#   file         : model.py
#   file_relpath : src/semicompact/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used by the CLI.
    - `MutableConfig`: a mutable builder used during discovery/merge; it can be
      frozen into `Config` and thawed back for edits.

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) Project configs discovered upward from the anchor directory, root-most first;
       within one directory ``pyproject.toml`` (``[tool.semicompact]``) is merged
       before ``semicompact.toml``
    3) Extra config files passed explicitly (``--config``), in the given order
    4) CLI overrides (`MutableConfig.apply_cli_args`)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from semicompact.config.errors import ConfigError
from semicompact.config.io import (
    coerce_indent,
    get_bool_value_or_none,
    get_indent_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)
from semicompact.config.keys import Toml
from semicompact.config.logging import get_logger
from semicompact.constants import CONFIG_FILE_NAME, DEFAULT_INDENT, PYPROJECT_FILE_NAME

if TYPE_CHECKING:
    from collections.abc import Iterable

    from semicompact.config.io import TomlTable
    from semicompact.config.logging import SemicompactLogger

# Generic mapping accepted by `apply_cli_args` (CLI namespaces and API dicts alike).
ArgsLike = Mapping[str, Any]

CLI_OVERRIDE_STR = "<CLI overrides>"

logger: SemicompactLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for SemiCompact.

    Attributes:
        indent (str): Indentation unit repeated once per nesting level.
        preserve_number_text (bool): Parse input numbers as `RawValue`s so their
            text is written back unchanged.
        allow_nan (bool): Accept ``NaN``/``Infinity`` literals in input JSON (they
            are written back as ``null``).
        config_files (tuple[Path | str, ...]): Config sources that contributed, in merge order.
    """

    indent: str = DEFAULT_INDENT
    preserve_number_text: bool = True
    allow_nan: bool = False
    config_files: tuple[Path | str, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Return the configuration as a TOML-compatible dict (schema of `Toml`)."""
        return {
            Toml.SECTION_FORMATTING: {
                Toml.KEY_INDENT: self.indent,
            },
            Toml.SECTION_INPUT: {
                Toml.KEY_PRESERVE_NUMBER_TEXT: self.preserve_number_text,
                Toml.KEY_ALLOW_NAN: self.allow_nan,
            },
        }

    def to_toml(self) -> str:
        """Render the configuration as a TOML document."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            indent=self.indent,
            preserve_number_text=self.preserve_number_text,
            allow_nan=self.allow_nan,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Fields are tri-state where it matters: ``None`` means "not set by this layer",
    so a later layer only overrides what it actually specifies.

    Attributes:
        indent (str | None): Indentation unit.
        preserve_number_text (bool | None): Keep input number text (`RawValue` parsing).
        allow_nan (bool | None): Accept non-finite literals in input.
        config_files (list[Path | str]): Config sources, in merge order.
    """

    indent: str | None = None
    preserve_number_text: bool | None = None
    allow_nan: bool | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`, filling unset fields."""
        defaults = Config()
        return Config(
            indent=self.indent if self.indent is not None else defaults.indent,
            preserve_number_text=self.preserve_number_text
            if self.preserve_number_text is not None
            else defaults.preserve_number_text,
            allow_nan=self.allow_nan if self.allow_nan is not None else defaults.allow_nan,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a builder from a parsed TOML table.

        Args:
            data (TomlTable): The SemiCompact table (top level of ``semicompact.toml``
                or ``[tool.semicompact]``).
            config_file (Path | None): Source file, recorded in ``config_files``.

        Returns:
            MutableConfig: The resulting builder.

        Raises:
            ConfigError: If a value has the wrong type or is out of range.
        """
        try:
            formatting_tbl: TomlTable = get_table_value(data, Toml.SECTION_FORMATTING)
            logger.trace("TOML [formatting]: %s", formatting_tbl)

            input_tbl: TomlTable = get_table_value(data, Toml.SECTION_INPUT)
            logger.trace("TOML [input]: %s", input_tbl)

            return cls(
                indent=get_indent_value_or_none(formatting_tbl, Toml.KEY_INDENT),
                preserve_number_text=get_bool_value_or_none(
                    input_tbl, Toml.KEY_PRESERVE_NUMBER_TEXT
                ),
                allow_nan=get_bool_value_or_none(input_tbl, Toml.KEY_ALLOW_NAN),
                config_files=[config_file] if config_file else [],
            )
        except ConfigError as e:
            if config_file is None:
                raise
            raise ConfigError(f"{config_file}: {e}") from e

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        ``pyproject.toml`` files contribute their ``[tool.semicompact]`` table only.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The builder, or None for a ``pyproject.toml``
                without a ``[tool.semicompact]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)

        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_FILE_NAME:
            tool_section: TomlTable = _tool_section(toml_data)
            if not tool_section:
                logger.debug("[tool.semicompact] section missing in %s", path)
                return None
            toml_data = tool_section

        draft: MutableConfig = cls.from_toml_dict(toml_data, config_file=path)
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found walking upward from ``start``.

        Files are returned root-most first, nearest last. A file setting
        ``root = true`` stops the walk after its directory. Unreadable files are
        skipped during discovery (they fail loudly when loaded).

        Args:
            start (Path): Directory (or file) where discovery starts.

        Returns:
            list[Path]: Discovered config paths in merge order.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []

            for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                try:
                    data: TomlTable = load_toml_dict(p)
                except ConfigError as e:
                    logger.debug("Ignoring unreadable config during discovery: %s", e)
                    continue
                table: TomlTable = _tool_section(data) if name == PYPROJECT_FILE_NAME else data
                if name == PYPROJECT_FILE_NAME and not table:
                    continue
                logger.debug("Discovered config file: %s", p)
                dir_entries.append(p)
                if table.get(Toml.KEY_ROOT) is True:
                    root_stop_here = True

            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            if parent == cur:
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a builder.

        Args:
            anchor (Path | None): Where upward discovery starts (default: CWD).
            extra_config_files (Iterable[Path] | None): Explicit config files merged
                after discovery, in the given order.
            no_config (bool): Skip discovery (explicit files are still merged).

        Returns:
            MutableConfig: The merged builder, ready for CLI overrides and `freeze`.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(anchor or Path.cwd()):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set in ``other`` override this one."""
        return MutableConfig(
            indent=other.indent if other.indent is not None else self.indent,
            preserve_number_text=other.preserve_number_text
            if other.preserve_number_text is not None
            else self.preserve_number_text,
            allow_nan=other.allow_nan if other.allow_nan is not None else self.allow_nan,
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply overrides from an arguments mapping (CLI or API).

        Only keys present with a non-None value override the current builder.
        Recognized keys: ``indent`` (str or int), ``preserve_number_text``, ``allow_nan``.

        Args:
            args (ArgsLike): Parsed arguments mapping.

        Returns:
            MutableConfig: This builder, updated in place.

        Raises:
            ConfigError: If ``indent`` is invalid.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)

        applied = False
        if args.get("indent") is not None:
            self.indent = coerce_indent(args["indent"])
            applied = True
        if args.get("preserve_number_text") is not None:
            self.preserve_number_text = bool(args["preserve_number_text"])
            applied = True
        if args.get("allow_nan") is not None:
            self.allow_nan = bool(args["allow_nan"])
            applied = True

        if applied:
            self.config_files.append(CLI_OVERRIDE_STR)
        return self


def _tool_section(pyproject: TomlTable) -> TomlTable:
    tool: object = pyproject.get(Toml.SECTION_TOOL, {})
    if not isinstance(tool, dict):
        return {}
    section: object = tool.get(Toml.SECTION_TOOL_NAME, {})  # pyright: ignore[reportUnknownMemberType]
    return section if isinstance(section, dict) else {}  # pyright: ignore[reportUnknownVariableType]
