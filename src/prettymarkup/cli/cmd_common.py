# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : cmd_common.py
#   file_relpath : src/prettymarkup/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by CLI commands (context state and config loading)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from prettymarkup.cli.console import ClickConsole
from prettymarkup.cli.errors import PrettyMarkupConfigError
from prettymarkup.cli.options import VERBOSITY_DEFAULT
from prettymarkup.config.logging import get_logger
from prettymarkup.config.model import load_config
from prettymarkup.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from prettymarkup.config.logging import PrettyMarkupLogger
    from prettymarkup.config.model import Config

logger: PrettyMarkupLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console installed by the group (or a default one)."""
    ctx.ensure_object(dict)
    console: ClickConsole | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole()
        ctx.obj["console"] = console
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity resolved by the group."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", VERBOSITY_DEFAULT))


def build_config(
    ctx: click.Context,
    config_file: Path | None,
    overrides: Mapping[str, Any],
) -> Config:
    """Load the run configuration and surface its warnings on the console.

    Raises:
        PrettyMarkupConfigError: If the config file cannot be loaded.
    """
    try:
        config: Config = load_config(config_file, overrides)
    except ConfigError as exc:
        raise PrettyMarkupConfigError(str(exc)) from exc

    if get_effective_verbosity(ctx) >= 0:
        console: ClickConsole = get_console(ctx)
        for message in config.diagnostics:
            console.warn(f"[config] {message}")
    logger.debug("Effective config: %s", config)
    return config
