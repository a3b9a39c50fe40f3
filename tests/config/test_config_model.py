# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration: defaults, file layering, overrides and diagnostics."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from prettymarkup.config import Config, MutableConfig, load_config
from prettymarkup.config.io import load_defaults_dict, parse_toml_text
from prettymarkup.core.errors import ConfigError
from prettymarkup.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


def test_packaged_defaults_match_code_defaults() -> None:
    config: Config = Config.from_defaults()
    assert config.tab_width == 2
    assert config.use_tabs is False
    assert config.print_width == 80
    assert config.single_quote is False
    assert config.use_embedded_formatter is True
    assert config.ignore_first_lf is False
    assert config.diagnostics == ()
    assert config.to_toml_dict() == load_defaults_dict()


def test_indent_unit_and_quote_style() -> None:
    assert Config(tab_width=4).indent_unit == "    "
    assert Config(use_tabs=True, tab_width=4).indent_unit == "\t"
    assert Config().quote_style == "double"
    assert Config(single_quote=True).quote_style == "single"


def test_embedded_formatter_options_include_style_and_extras() -> None:
    config: Config = Config(tab_width=4, embedded={"semi": False})
    options = config.embedded_formatter_options()
    assert options["semi"] is False
    assert options["indent_unit"] == "    "
    assert options["print_width"] == 80


def test_config_is_frozen() -> None:
    config: Config = Config.from_defaults()
    with pytest.raises(AttributeError):
        config.tab_width = 8  # type: ignore[misc]


def test_thaw_and_freeze_round_trip() -> None:
    config: Config = load_config(overrides={"tab_width": 3, "single_quote": True})
    draft: MutableConfig = config.thaw()
    draft.use_tabs = True
    changed: Config = draft.freeze()
    assert changed.tab_width == 3
    assert changed.single_quote is True
    assert changed.use_tabs is True
    assert config.use_tabs is False


def test_toml_file_overrides_defaults(tmp_path: Path) -> None:
    path: Path = tmp_path / "prettymarkup.toml"
    path.write_text(
        "[formatting]\ntab_width = 4\nsingle_quote = true\n"
        "[parser]\nignore_first_lf = true\n"
        '[embedded]\nparser_option = "x"\n',
        encoding="utf-8",
    )
    config: Config = load_config(path)
    assert config.tab_width == 4
    assert config.single_quote is True
    assert config.ignore_first_lf is True
    assert config.print_width == 80
    assert dict(config.embedded) == {"parser_option": "x"}
    assert config.config_files == (str(path),)


def test_overrides_win_over_file(tmp_path: Path) -> None:
    path: Path = tmp_path / "prettymarkup.toml"
    path.write_text("[formatting]\ntab_width = 4\n", encoding="utf-8")
    config: Config = load_config(path, {"tab_width": 8, "use_tabs": None})
    assert config.tab_width == 8
    assert config.use_tabs is False


def test_pyproject_tool_section_is_used(tmp_path: Path) -> None:
    path: Path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "x"\n\n[tool.prettymarkup.formatting]\nuse_tabs = true\n',
        encoding="utf-8",
    )
    assert load_config(path).use_tabs is True


def test_pyproject_without_tool_section_is_an_error(tmp_path: Path) -> None:
    path: Path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n', encoding="utf-8")
    with pytest.raises(ConfigError, match=r"\[tool.prettymarkup\]"):
        load_config(path)


def test_missing_file_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as excinfo:
        load_config(tmp_path / "nope.toml")
    assert excinfo.value.exit_code == ExitCode.CONFIG_ERROR


def test_invalid_toml_is_an_error(tmp_path: Path) -> None:
    path: Path = tmp_path / "prettymarkup.toml"
    path.write_text("[formatting\ntab_width = ", encoding="utf-8")
    with pytest.raises(ConfigError, match="Error decoding TOML"):
        load_config(path)


def test_mistyped_values_are_ignored_with_diagnostics() -> None:
    draft: MutableConfig = MutableConfig.from_defaults()
    draft.apply_toml(
        parse_toml_text(
            '[formatting]\ntab_width = "4"\nuse_tabs = 1\nprint_width = true\n',
            source="test",
        )
    )
    config: Config = draft.freeze()
    assert config.tab_width == 2
    assert config.use_tabs is False
    assert config.print_width == 80
    assert len(config.diagnostics) == 3
    assert any("[formatting].tab_width" in message for message in config.diagnostics)


def test_out_of_range_values_are_reset() -> None:
    config: Config = load_config(overrides={"tab_width": 0, "print_width": -5})
    assert config.tab_width == 2
    assert config.print_width == 80
    assert len(config.diagnostics) == 2


def test_to_toml_round_trips() -> None:
    config: Config = load_config(overrides={"tab_width": 4, "use_tabs": True})
    draft: MutableConfig = MutableConfig()
    draft.apply_toml(parse_toml_text(config.to_toml(), source="rendered"))
    assert draft.freeze() == config
