# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : model.py
#   file_relpath : src/prettymarkup/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used by the engine, the writer
      and the pipeline.
    - `MutableConfig`: a mutable builder used while layering defaults, an
      explicit config file and CLI/API overrides; it can be frozen into
      `Config` and thawed back for edits.

Precedence (lowest to highest):
    1. Packaged defaults (``prettymarkup-default.toml``).
    2. An explicit config file (``prettymarkup.toml``, or ``pyproject.toml``
       with a ``[tool.prettymarkup]`` table).
    3. Overrides (CLI options or API keyword arguments); ``None`` means
       "not given".

There is no config file discovery: only files named by the caller are read.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from prettymarkup.config.io import (
    get_bool_value_checked,
    get_int_value_checked,
    get_table_value,
    load_default_config_toml_text,
    load_toml_dict,
    parse_toml_text,
    to_toml,
)
from prettymarkup.config.keys import Toml
from prettymarkup.config.logging import get_logger
from prettymarkup.constants import PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION
from prettymarkup.core.errors import ConfigError

if TYPE_CHECKING:
    from prettymarkup.config.io import TomlTable
    from prettymarkup.config.logging import PrettyMarkupLogger

# ArgsLike: generic mapping accepted by `MutableConfig.apply_overrides`
# (works for CLI option dicts and API keyword arguments).
ArgsLike = Mapping[str, Any]

logger: PrettyMarkupLogger = get_logger(__name__)

DEFAULT_TAB_WIDTH: int = 2
DEFAULT_PRINT_WIDTH: int = 80


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        tab_width (int): Spaces per indent level (display width of a tab).
        use_tabs (bool): Indent with one tab per level instead of spaces.
        print_width (int): Column limit above which start tags wrap their attributes.
        single_quote (bool): Prefer single quotes around attribute values.
        use_embedded_formatter (bool): Format ``<script>``/``<style>`` content.
        ignore_first_lf (bool): Drop the linefeed after ``<pre>``-like start tags.
        embedded (Mapping[str, Any]): Extra options for the embedded formatter.
        config_files (tuple[str, ...]): Config sources merged into this snapshot.
        diagnostics (tuple[str, ...]): Warnings recorded while loading config.
    """

    tab_width: int = DEFAULT_TAB_WIDTH
    use_tabs: bool = False
    print_width: int = DEFAULT_PRINT_WIDTH
    single_quote: bool = False
    use_embedded_formatter: bool = True
    ignore_first_lf: bool = False
    embedded: Mapping[str, Any] = field(default_factory=dict)
    config_files: tuple[str, ...] = ()
    diagnostics: tuple[str, ...] = ()

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the frozen packaged defaults."""
        return MutableConfig.from_defaults().freeze()

    @property
    def indent_unit(self) -> str:
        """One level of indentation: a tab or ``tab_width`` spaces."""
        return "\t" if self.use_tabs else " " * self.tab_width

    @property
    def quote_style(self) -> str:
        """``"single"`` or ``"double"``."""
        return "single" if self.single_quote else "double"

    def embedded_formatter_options(self) -> dict[str, Any]:
        """Return the style options handed to the embedded formatter."""
        options: dict[str, Any] = dict(self.embedded)
        options.update(
            indent_unit=self.indent_unit,
            tab_width=self.tab_width,
            use_tabs=self.use_tabs,
            print_width=self.print_width,
            single_quote=self.single_quote,
        )
        return options

    def to_toml_dict(self) -> TomlTable:
        """Convert this config into a TOML-serializable dict."""
        return {
            Toml.SECTION_FORMATTING: {
                Toml.KEY_TAB_WIDTH: self.tab_width,
                Toml.KEY_USE_TABS: self.use_tabs,
                Toml.KEY_PRINT_WIDTH: self.print_width,
                Toml.KEY_SINGLE_QUOTE: self.single_quote,
                Toml.KEY_USE_EMBEDDED_FORMATTER: self.use_embedded_formatter,
            },
            Toml.SECTION_PARSER: {
                Toml.KEY_IGNORE_FIRST_LF: self.ignore_first_lf,
            },
            Toml.SECTION_EMBEDDED: dict(self.embedded),
        }

    def to_toml(self) -> str:
        """Render this config as TOML text."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            tab_width=self.tab_width,
            use_tabs=self.use_tabs,
            print_width=self.print_width,
            single_quote=self.single_quote,
            use_embedded_formatter=self.use_embedded_formatter,
            ignore_first_lf=self.ignore_first_lf,
            embedded=dict(self.embedded),
            config_files=list(self.config_files),
            diagnostics=list(self.diagnostics),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used while merging config layers.

    Mirrors the fields of `Config` with mutable containers.
    """

    tab_width: int = DEFAULT_TAB_WIDTH
    use_tabs: bool = False
    print_width: int = DEFAULT_PRINT_WIDTH
    single_quote: bool = False
    use_embedded_formatter: bool = True
    ignore_first_lf: bool = False
    embedded: dict[str, Any] = field(default_factory=lambda: {})
    config_files: list[str] = field(default_factory=lambda: [])
    diagnostics: list[str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------

    def sanitize(self) -> None:
        """Reset out-of-range values to their defaults, recording a warning."""
        if self.tab_width < 1:
            self.diagnostics.append(
                f"tab_width must be >= 1, got {self.tab_width}; using {DEFAULT_TAB_WIDTH}"
            )
            logger.warning("Invalid tab_width %d; using %d", self.tab_width, DEFAULT_TAB_WIDTH)
            self.tab_width = DEFAULT_TAB_WIDTH
        if self.print_width < 1:
            self.diagnostics.append(
                f"print_width must be >= 1, got {self.print_width}; using {DEFAULT_PRINT_WIDTH}"
            )
            logger.warning(
                "Invalid print_width %d; using %d", self.print_width, DEFAULT_PRINT_WIDTH
            )
            self.print_width = DEFAULT_PRINT_WIDTH

    def freeze(self) -> Config:
        """Sanitize and freeze this builder into an immutable `Config`."""
        self.sanitize()
        return Config(
            tab_width=self.tab_width,
            use_tabs=self.use_tabs,
            print_width=self.print_width,
            single_quote=self.single_quote,
            use_embedded_formatter=self.use_embedded_formatter,
            ignore_first_lf=self.ignore_first_lf,
            embedded=dict(self.embedded),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Load the defaults from the packaged ``prettymarkup-default.toml``."""
        draft = cls()
        draft.apply_toml(parse_toml_text(load_default_config_toml_text(), source="defaults"))
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Return the defaults merged with the config file at ``path``.

        Raises:
            ConfigError: If the file cannot be read, is not valid TOML, or is a
                ``pyproject.toml`` without a ``[tool.prettymarkup]`` table.
        """
        draft: MutableConfig = cls.from_defaults()
        draft.merge_toml_file(path)
        return draft

    def merge_toml_file(self, path: Path) -> MutableConfig:
        """Merge the config file at ``path`` into this builder."""
        logger.debug("Merging TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable = get_table_value(
                get_table_value(toml_data, "tool"), PYPROJECT_TOOL_SECTION
            )
            if not tool_section:
                raise ConfigError(
                    f"[tool.{PYPROJECT_TOOL_SECTION}] section missing or malformed in {path}"
                )
            toml_data = tool_section

        self.apply_toml(toml_data)
        self.config_files.append(str(path))
        return self

    def apply_toml(self, data: TomlTable) -> MutableConfig:
        """Apply the values present in a parsed TOML table.

        Mistyped values are ignored with a warning recorded in ``diagnostics``.
        """
        formatting_tbl: TomlTable = get_table_value(data, Toml.SECTION_FORMATTING)
        logger.trace("TOML [formatting]: %s", formatting_tbl)
        parser_tbl: TomlTable = get_table_value(data, Toml.SECTION_PARSER)
        logger.trace("TOML [parser]: %s", parser_tbl)
        embedded_tbl: TomlTable = get_table_value(data, Toml.SECTION_EMBEDDED)
        logger.trace("TOML [embedded]: %s", embedded_tbl)

        where_fmt: str = f"[{Toml.SECTION_FORMATTING}]"
        ints: dict[str, int | None] = {
            key: get_int_value_checked(
                formatting_tbl, key, where=where_fmt, diagnostics=self.diagnostics
            )
            for key in (Toml.KEY_TAB_WIDTH, Toml.KEY_PRINT_WIDTH)
        }
        bools: dict[str, bool | None] = {
            key: get_bool_value_checked(
                formatting_tbl, key, where=where_fmt, diagnostics=self.diagnostics
            )
            for key in (
                Toml.KEY_USE_TABS,
                Toml.KEY_SINGLE_QUOTE,
                Toml.KEY_USE_EMBEDDED_FORMATTER,
            )
        }
        bools[Toml.KEY_IGNORE_FIRST_LF] = get_bool_value_checked(
            parser_tbl,
            Toml.KEY_IGNORE_FIRST_LF,
            where=f"[{Toml.SECTION_PARSER}]",
            diagnostics=self.diagnostics,
        )

        self.apply_overrides({**ints, **bools})
        self.embedded.update(embedded_tbl)
        return self

    def apply_overrides(self, overrides: ArgsLike) -> MutableConfig:
        """Apply keyword overrides; ``None`` values and unknown keys are ignored."""
        for key in (
            Toml.KEY_TAB_WIDTH,
            Toml.KEY_USE_TABS,
            Toml.KEY_PRINT_WIDTH,
            Toml.KEY_SINGLE_QUOTE,
            Toml.KEY_USE_EMBEDDED_FORMATTER,
            Toml.KEY_IGNORE_FIRST_LF,
        ):
            value: Any | None = overrides.get(key)
            if value is not None:
                setattr(self, key, value)
        return self


def load_config(
    config_file: Path | str | None = None,
    overrides: ArgsLike | None = None,
) -> Config:
    """Build a frozen `Config` from defaults, an optional file and overrides.

    Raises:
        ConfigError: If ``config_file`` cannot be loaded.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    if config_file is not None:
        draft.merge_toml_file(Path(config_file))
    if overrides:
        draft.apply_overrides(overrides)
    return draft.freeze()
