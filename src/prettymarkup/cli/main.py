# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : main.py
#   file_relpath : src/prettymarkup/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrettyMarkup command-line entry point.

Group-level options are resolved once and placed into ``ctx.obj``:

* ``verbosity_level``: program-output verbosity from ``-v``/``-q``;
* ``log_level``: internal logging level from ``PRETTYMARKUP_LOG_LEVEL``;
* ``console``: the `ClickConsole` used for all user-facing output.
"""

from __future__ import annotations

import click

from prettymarkup.cli.commands.config import config_command
from prettymarkup.cli.commands.format import format_command
from prettymarkup.cli.commands.tags import tags_command
from prettymarkup.cli.commands.version import version_command
from prettymarkup.cli.console import ClickConsole
from prettymarkup.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from prettymarkup.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int, no_color: bool) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context."""
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.color = False if no_color else None
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="PrettyMarkup: a markup pretty-printer.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool) -> None:
    """Entry point for the PrettyMarkup CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'prettymarkup format [PATHS...]' to check formatting.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(format_command)

cli.add_command(tags_command)

cli.add_command(config_command)

if __name__ == "__main__":
    cli()
