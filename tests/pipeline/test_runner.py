# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : test_runner.py
#   file_relpath : tests/pipeline/test_runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline runner: per-document results, write-back and exit code mapping."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prettymarkup.core.exit_codes import ExitCode
from prettymarkup.pipeline.runner import STDIN_NAME, Formatter, format_text, run_for_files
from prettymarkup.pipeline.status import FormatStatus, WriteStatus
from tests.conftest import make_config

if TYPE_CHECKING:
    from pathlib import Path

    from prettymarkup.pipeline.results import FormatResult

UGLY: str = "<div><p>A</p><p>B</p></div>"
PRETTY: str = "<div>\n  <p>A</p>\n  <p>B</p>\n</div>\n"


def test_format_text() -> None:
    assert format_text(UGLY, make_config()) == PRETTY


def test_format_source_reports_changes() -> None:
    formatter = Formatter(make_config())

    changed: FormatResult = formatter.format_source(UGLY)
    assert changed.name == STDIN_NAME
    assert changed.status is FormatStatus.CHANGED
    assert changed.changed
    assert changed.formatted == PRETTY

    clean: FormatResult = formatter.format_source(PRETTY, name="clean.html")
    assert clean.status is FormatStatus.UNCHANGED
    assert clean.patch() == []
    assert clean.summary() == "clean.html: unchanged"


def test_deeply_nested_documents_are_formatted() -> None:
    depth: int = 1500
    result: FormatResult = Formatter(make_config()).format_source(
        "<p>" + "<b>" * depth + "x" + "</b>" * depth + "</p>"
    )
    assert result.status is FormatStatus.CHANGED
    assert result.formatted is not None
    assert result.formatted.count("<b>") == depth


def test_format_source_records_errors() -> None:
    result: FormatResult = Formatter(make_config()).format_source("<div></span>")
    assert result.failed
    assert result.status is FormatStatus.ERROR
    assert result.exit_code == ExitCode.PIPELINE_ERROR
    assert result.formatted is None
    assert result.error is not None
    assert "Unexpected closing tag" in result.summary()


def test_embedded_errors_map_to_their_exit_code() -> None:
    result: FormatResult = Formatter(make_config()).format_source(
        '<script type="application/json">{</script>'
    )
    assert result.exit_code == ExitCode.EMBEDDED_FORMAT_ERROR


def test_patch_is_a_unified_diff() -> None:
    result: FormatResult = Formatter(make_config()).format_source(UGLY, name="x.html")
    patch: list[str] = result.patch()
    assert patch[0].startswith("--- x.html")
    assert patch[1].startswith("+++ x.html (formatted)")
    assert "+  <p>A</p>\n" in patch


def test_check_mode_does_not_write(tmp_path: Path) -> None:
    path: Path = tmp_path / "a.html"
    path.write_text(UGLY, encoding="utf-8")

    results, error = run_for_files([path], config=make_config())

    assert error is None
    assert results[0].changed
    assert results[0].write_status is WriteStatus.SKIPPED
    assert path.read_text(encoding="utf-8") == UGLY


def test_apply_writes_changed_files_only(tmp_path: Path) -> None:
    ugly: Path = tmp_path / "ugly.html"
    ugly.write_text(UGLY, encoding="utf-8")
    pretty: Path = tmp_path / "pretty.html"
    pretty.write_text(PRETTY, encoding="utf-8")

    results, error = run_for_files([ugly, pretty], config=make_config(), apply=True)

    assert error is None
    assert [r.write_status for r in results] == [WriteStatus.WRITTEN, WriteStatus.SKIPPED]
    assert ugly.read_text(encoding="utf-8") == PRETTY
    assert results[0].summary() == f"{ugly}: reformatted (written)"


def test_errors_do_not_stop_the_batch(tmp_path: Path) -> None:
    missing: Path = tmp_path / "missing.html"
    broken: Path = tmp_path / "broken.html"
    broken.write_text("<p></b>", encoding="utf-8")
    good: Path = tmp_path / "good.html"
    good.write_text(UGLY, encoding="utf-8")

    results, error = run_for_files([missing, broken, good], config=make_config(), apply=True)

    assert [r.exit_code for r in results] == [
        ExitCode.FILE_NOT_FOUND,
        ExitCode.PIPELINE_ERROR,
        ExitCode.SUCCESS,
    ]
    assert error == ExitCode.FILE_NOT_FOUND
    assert good.read_text(encoding="utf-8") == PRETTY
    assert broken.read_text(encoding="utf-8") == "<p></b>"


def test_directories_are_reported_as_not_found(tmp_path: Path) -> None:
    results, error = run_for_files([tmp_path], config=make_config())
    assert results[0].failed
    assert error == ExitCode.FILE_NOT_FOUND


def test_non_utf8_files_are_encoding_errors(tmp_path: Path) -> None:
    path: Path = tmp_path / "latin1.html"
    path.write_bytes("<p>café</p>".encode("latin-1"))
    results, error = run_for_files([path], config=make_config())
    assert results[0].exit_code == ExitCode.ENCODING_ERROR
    assert error == ExitCode.ENCODING_ERROR


def test_parallel_jobs_keep_input_order(tmp_path: Path) -> None:
    paths: list[Path] = []
    for index in range(12):
        path: Path = tmp_path / f"f{index:02d}.html"
        path.write_text(f"<ul><li>{index}</li></ul>", encoding="utf-8")
        paths.append(path)

    results, error = run_for_files(paths, config=make_config(), apply=True, jobs=4)

    assert error is None
    assert [r.path for r in results] == paths
    for index, path in enumerate(paths):
        assert path.read_text(encoding="utf-8") == f"<ul>\n  <li>{index}</li>\n</ul>\n"
