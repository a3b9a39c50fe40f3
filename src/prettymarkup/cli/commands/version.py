# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : version.py
#   file_relpath : src/prettymarkup/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrettyMarkup `version` command.

Prints the PrettyMarkup version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from prettymarkup.cli.cmd_common import get_console, get_effective_verbosity
from prettymarkup.constants import PRETTYMARKUP_VERSION

if TYPE_CHECKING:
    from prettymarkup.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of PrettyMarkup.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Show the current version of PrettyMarkup."""
    console: ClickConsole = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("PrettyMarkup version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(PRETTYMARKUP_VERSION, bold=True)}")
    else:
        console.print(console.styled(PRETTYMARKUP_VERSION, bold=True))
