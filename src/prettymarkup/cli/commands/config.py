# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : config.py
#   file_relpath : src/prettymarkup/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrettyMarkup `config` command.

Prints the effective configuration as TOML, or the annotated default template
with ``--defaults`` (a starting point for ``prettymarkup.toml``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from prettymarkup.cli.cmd_common import build_config, get_console
from prettymarkup.cli.options import config_file_option
from prettymarkup.config.io import load_default_config_toml_text

if TYPE_CHECKING:
    from pathlib import Path

    from prettymarkup.cli.console import ClickConsole
    from prettymarkup.config.model import Config


@click.command(
    name="config",
    help="Show the effective configuration as TOML.",
)
@click.option(
    "--defaults",
    "show_defaults",
    is_flag=True,
    default=False,
    help="Print the annotated default configuration template instead.",
)
@config_file_option
@click.pass_context
def config_command(ctx: click.Context, *, show_defaults: bool, config_file: Path | None) -> None:
    """Show the effective configuration."""
    console: ClickConsole = get_console(ctx)
    if show_defaults:
        console.print(load_default_config_toml_text(), nl=False)
        return

    config: Config = build_config(ctx, config_file, {})
    for source in config.config_files:
        console.print(f"# source: {source}")
    console.print(config.to_toml(), nl=False)
