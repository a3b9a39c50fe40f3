# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : format.py
#   file_relpath : src/prettymarkup/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrettyMarkup `format` command.

Formats the given files (or STDIN) and reports which ones change.

* Without ``--apply`` nothing is written (check mode) and the command exits
  with ``WOULD_CHANGE`` (2) when at least one document would be reformatted.
* With ``--apply`` changed files are rewritten; with ``--stdin`` the
  formatted text is printed to STDOUT.
* ``--diff`` prints a unified diff for every changed document.

Errors in one document do not stop the others; the command exits with the
code of the first error.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from prettymarkup.cli.cmd_common import build_config, get_console, get_effective_verbosity
from prettymarkup.cli.errors import PrettyMarkupUsageError
from prettymarkup.cli.options import config_file_option, formatting_options
from prettymarkup.config.keys import Toml
from prettymarkup.core.exit_codes import ExitCode
from prettymarkup.pipeline.runner import Formatter, run_for_files
from prettymarkup.utils.diff import render_patch

if TYPE_CHECKING:
    from prettymarkup.cli.console import ClickConsole
    from prettymarkup.config.model import Config
    from prettymarkup.pipeline.results import FormatResult
    from prettymarkup.pipeline.status import FormatStatus


def _status_label(console: ClickConsole, status: FormatStatus) -> str:
    return status.render() if console.enable_color else status.value


def _report(console: ClickConsole, result: FormatResult, *, verbosity: int, diff: bool) -> None:
    if result.failed:
        console.error(result.summary())
        return
    if (result.changed and verbosity >= 0) or verbosity > 0:
        console.print(f"{result.name}: {_status_label(console, result.status)}")
    if diff and result.changed:
        patch: list[str] = result.patch()
        console.print(render_patch(patch) if console.enable_color else "".join(patch), nl=False)


def _summarize(console: ClickConsole, results: list[FormatResult], *, apply: bool) -> None:
    changed: int = sum(1 for r in results if r.changed and not r.failed)
    failed: int = sum(1 for r in results if r.failed)
    unchanged: int = len(results) - changed - failed
    verb: str = "reformatted" if apply else "would be reformatted"
    console.print(
        console.styled(
            f"{changed} file(s) {verb}, {unchanged} unchanged, {failed} error(s)", bold=True
        )
    )


@click.command(
    name="format",
    help="Format markup files (check only unless --apply is given).",
)
@click.argument(
    "paths",
    nargs=-1,
    type=click.Path(path_type=Path),
)
@click.option("--apply", "apply", is_flag=True, default=False, help="Write the changes.")
@click.option("--diff", "diff", is_flag=True, default=False, help="Show a unified diff.")
@click.option(
    "--stdin",
    "use_stdin",
    is_flag=True,
    default=False,
    help="Read one document from STDIN (prints it formatted with --apply).",
)
@click.option(
    "--jobs",
    "-j",
    "jobs",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of files formatted in parallel.",
)
@formatting_options
@config_file_option
@click.pass_context
def format_command(
    ctx: click.Context,
    *,
    paths: tuple[Path, ...],
    apply: bool,
    diff: bool,
    use_stdin: bool,
    jobs: int,
    tab_width: int | None,
    use_tabs: bool | None,
    print_width: int | None,
    single_quote: bool | None,
    no_embedded: bool,
    ignore_first_lf: bool | None,
    config_file: Path | None,
) -> None:
    """Format markup files or STDIN."""
    console: ClickConsole = get_console(ctx)
    verbosity: int = get_effective_verbosity(ctx)

    if use_stdin and paths:
        raise PrettyMarkupUsageError("PATHS cannot be combined with '--stdin'.")
    if not use_stdin and not paths:
        raise PrettyMarkupUsageError("No input: give one or more PATHS, or use '--stdin'.")

    config: Config = build_config(
        ctx,
        config_file,
        {
            Toml.KEY_TAB_WIDTH: tab_width,
            Toml.KEY_USE_TABS: use_tabs,
            Toml.KEY_PRINT_WIDTH: print_width,
            Toml.KEY_SINGLE_QUOTE: single_quote,
            Toml.KEY_USE_EMBEDDED_FORMATTER: False if no_embedded else None,
            Toml.KEY_IGNORE_FIRST_LF: ignore_first_lf,
        },
    )

    if use_stdin:
        text: str = click.get_text_stream("stdin").read()
        result: FormatResult = Formatter(config).format_source(text)
        if result.failed:
            console.error(result.summary())
            ctx.exit(int(result.exit_code))
        if apply and result.formatted is not None:
            console.print(result.formatted, nl=False)
            return
        _report(console, result, verbosity=verbosity, diff=diff)
        if result.changed:
            ctx.exit(int(ExitCode.WOULD_CHANGE))
        return

    results, error_code = run_for_files(list(paths), config=config, apply=apply, jobs=jobs)
    for file_result in results:
        _report(console, file_result, verbosity=verbosity, diff=diff)
    if verbosity >= 0:
        _summarize(console, results, apply=apply)

    if error_code is not None:
        ctx.exit(int(error_code))
    if not apply and any(r.changed for r in results):
        ctx.exit(int(ExitCode.WOULD_CHANGE))
