# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : tags.py
#   file_relpath : src/prettymarkup/cli/commands/tags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrettyMarkup `tags` command.

Shows the formatting behavior the tag registry assigns to tag names. Without
arguments, lists every tag with a non-default behavior.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from prettymarkup.cli.cmd_common import get_console, get_effective_verbosity
from prettymarkup.tags.known import is_known_tag_name
from prettymarkup.tags.registry import get_registry
from prettymarkup.tags.whitespace import is_whitespace_sensitive_tag

if TYPE_CHECKING:
    from prettymarkup.cli.console import ClickConsole
    from prettymarkup.tags.behavior import TagBehavior


def describe_behavior(name: str, behavior: TagBehavior) -> list[str]:
    """Return ``key: value`` lines describing ``behavior`` (defaults omitted)."""
    lines: list[str] = [f"content: {behavior.content_type.value}"]
    if behavior.is_void:
        lines.append("void: yes")
    if behavior.closed_by_children:
        lines.append(f"closed by: {', '.join(sorted(behavior.closed_by_children))}")
    if behavior.closed_by_parent and not behavior.is_void:
        lines.append("closed by parent: yes")
    if behavior.required_parents:
        lines.append(f"required parents: {', '.join(behavior.required_parents)}")
    if behavior.implicit_namespace_prefix:
        lines.append(f"namespace: {behavior.implicit_namespace_prefix}")
    if behavior.ignore_first_lf:
        lines.append("ignores first linefeed: yes")
    if is_whitespace_sensitive_tag(name):
        lines.append("whitespace sensitive: yes")
    return lines


@click.command(
    name="tags",
    help="Show how tags are treated by the formatter.",
)
@click.argument("names", nargs=-1)
@click.option(
    "--ignore-first-lf",
    "ignore_first_lf",
    is_flag=True,
    default=False,
    help="Show behaviors for the mode that drops the first linefeed of <pre>-like content.",
)
@click.pass_context
def tags_command(ctx: click.Context, *, names: tuple[str, ...], ignore_first_lf: bool) -> None:
    """Show tag behaviors."""
    console: ClickConsole = get_console(ctx)
    verbose: bool = get_effective_verbosity(ctx) > 0
    registry = get_registry()

    if not names:
        for name in sorted(registry.table(ignore_first_lf)):
            console.print(name)
        return

    for name in names:
        behavior: TagBehavior = registry.lookup(name, ignore_first_lf)
        title: str = console.styled(name.lower(), bold=True)
        if not is_known_tag_name(name):
            title += console.styled(" (custom element, default behavior)", fg="yellow")
        console.print(title)
        for line in describe_behavior(name, behavior):
            console.print(f"    {line}")
        if verbose:
            console.print(f"    {behavior!r}")
