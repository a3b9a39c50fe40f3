# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : errors.py
#   file_relpath : src/prettymarkup/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the PrettyMarkup CLI.

Raise these in commands to stop with a standardized message and exit code.
They are displayed through the project console when one is installed on the
Click context, and with Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from prettymarkup.core.exit_codes import ExitCode


class PrettyMarkupCliError(click.ClickException):
    """Base class for all PrettyMarkup CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (color is applied in `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        obj: Any = getattr(ctx, "obj", None)
        console = obj.get("console") if isinstance(obj, dict) else None
        if console is not None:
            console.error(f"Error: {self.format_message()}")
            return
        super().show(file)


class PrettyMarkupUsageError(PrettyMarkupCliError):
    """Invalid command-line invocation (conflicting flags, missing input)."""

    exit_code = ExitCode.USAGE_ERROR


class PrettyMarkupConfigError(PrettyMarkupCliError):
    """Missing, invalid or malformed configuration file."""

    exit_code = ExitCode.CONFIG_ERROR


class PrettyMarkupFormatError(PrettyMarkupCliError):
    """A document could not be formatted; carries the error's own exit code."""

    def __init__(self, message: str, exit_code: ExitCode) -> None:
        super().__init__(message)
        self.exit_code = exit_code
