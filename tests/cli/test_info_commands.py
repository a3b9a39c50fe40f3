# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : test_info_commands.py
#   file_relpath : tests/cli/test_info_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI informational commands: `version`, `tags` and `config`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import tomlkit

from prettymarkup.constants import PRETTYMARKUP_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def test_version() -> None:
    result: Result = run_cli(["version"])
    assert_SUCCESS(result)
    assert result.output.strip() == PRETTYMARKUP_VERSION


def test_version_verbose() -> None:
    result: Result = run_cli(["-v", "version"])
    assert_SUCCESS(result)
    assert "PrettyMarkup version:" in result.output
    assert PRETTYMARKUP_VERSION in result.output


def test_group_without_command_prints_help() -> None:
    result: Result = run_cli([])
    assert_SUCCESS(result)
    assert "Hint: use 'prettymarkup format" in result.output
    assert "Commands:" in result.output


def test_tags_lists_registry() -> None:
    result: Result = run_cli(["tags"])
    assert_SUCCESS(result)
    names: list[str] = result.output.split()
    assert "br" in names
    assert "textarea" in names
    assert names == sorted(names)


def test_tags_describes_behaviors() -> None:
    result: Result = run_cli(["--no-color", "tags", "LI", "br", "pre"])
    assert_SUCCESS(result)
    assert "li\n    content: parsable_data\n    closed by: li\n    closed by parent: yes" in (
        result.output
    )
    assert "void: yes" in result.output
    assert "whitespace sensitive: yes" in result.output
    assert "ignores first linefeed" not in result.output


def test_tags_mode_flag() -> None:
    result: Result = run_cli(["tags", "--ignore-first-lf", "pre"])
    assert_SUCCESS(result)
    assert "ignores first linefeed: yes" in result.output


def test_tags_marks_custom_elements() -> None:
    result: Result = run_cli(["--no-color", "tags", "my-widget"])
    assert_SUCCESS(result)
    assert "my-widget (custom element, default behavior)" in result.output


def test_config_defaults_prints_template() -> None:
    result: Result = run_cli(["config", "--defaults"])
    assert_SUCCESS(result)
    assert result.output.startswith("# Default PrettyMarkup configuration.")
    assert "topmark:header" not in result.output
    assert "tab_width = 2" in result.output


def test_config_shows_effective_values(tmp_path: Path) -> None:
    cfg: Path = tmp_path / "prettymarkup.toml"
    cfg.write_text("[formatting]\nprint_width = 120\n", "utf-8")

    result: Result = run_cli(["config", "--config", str(cfg)])

    assert_SUCCESS(result)
    assert f"# source: {cfg}" in result.output
    data = tomlkit.parse(result.output).unwrap()
    assert data["formatting"]["print_width"] == 120
    assert data["parser"]["ignore_first_lf"] is False


def test_config_missing_file_is_a_click_error(tmp_path: Path) -> None:
    result: Result = run_cli(["config", "--config", str(tmp_path / "missing.toml")])
    assert result.exit_code == 2
    assert "does not exist" in result.output
