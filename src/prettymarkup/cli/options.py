# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : options.py
#   file_relpath : src/prettymarkup/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

Reusable options (verbosity, color, formatting overrides) and their
resolution logic, so the group and its commands stay thin.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from prettymarkup.cli.errors import PrettyMarkupUsageError

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")

# Program-output verbosity (not log levels): -q, default, -v, -vv.
VERBOSITY_QUIET: int = -1
VERBOSITY_DEFAULT: int = 0


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Returns:
        int: ``-1`` when quiet, otherwise the number of ``-v`` flags.

    Raises:
        PrettyMarkupUsageError: If both ``-v`` and ``-q`` are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise PrettyMarkupUsageError(
            "The '--verbose' and '--quiet' options are mutually exclusive."
        )
    if quiet_count > 0:
        return VERBOSITY_QUIET
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--no-color`` option."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in program output.",
    )(f)


def config_file_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--config FILE`` option (``prettymarkup.toml`` or ``pyproject.toml``)."""
    return click.option(
        "--config",
        "config_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Read settings from this prettymarkup.toml or pyproject.toml file.",
    )(f)


def formatting_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the formatting overrides.

    Flags default to ``None`` so that only options actually given override the
    configuration file and defaults.
    """
    f = click.option(
        "--tab-width",
        "tab_width",
        type=click.IntRange(min=1),
        default=None,
        help="Spaces per indentation level.",
    )(f)
    f = click.option(
        "--use-tabs",
        "use_tabs",
        is_flag=True,
        default=None,
        help="Indent with tabs instead of spaces.",
    )(f)
    f = click.option(
        "--print-width",
        "print_width",
        type=click.IntRange(min=1),
        default=None,
        help="Wrap attributes of start tags longer than this.",
    )(f)
    f = click.option(
        "--single-quote",
        "single_quote",
        is_flag=True,
        default=None,
        help="Prefer single quotes around attribute values.",
    )(f)
    f = click.option(
        "--no-embedded",
        "no_embedded",
        is_flag=True,
        default=False,
        help="Leave <script> and <style> content untouched.",
    )(f)
    f = click.option(
        "--ignore-first-lf",
        "ignore_first_lf",
        is_flag=True,
        default=None,
        help="Drop the linefeed directly after <pre>, <listing> and <textarea> start tags.",
    )(f)
    return f
