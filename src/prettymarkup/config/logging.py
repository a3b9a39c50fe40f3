# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : logging.py
#   file_relpath : src/prettymarkup/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrettyMarkup logging: a TRACE level, a logger class and chalk-colored records.

All PrettyMarkup loggers live under the ``prettymarkup`` namespace. `setup_logging`
configures that namespace only, so applications embedding the library keep
control over the root logger.

The indentation engine and the reader log their per-node decisions at TRACE
level, which keeps DEBUG output readable for whole-document runs. Records go to
stderr: in ``--stdin`` mode, stdout carries the formatted document.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

ENV_LOG_LEVEL: Final[str] = "PRETTYMARKUP_LOG_LEVEL"

PACKAGE_LOGGER_NAME: Final[str] = "prettymarkup"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class PrettyMarkupLogger(logging.Logger):
    """Logger class with a `trace` method for the TRACE level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` with severity TRACE.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Optional extra record attributes.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(PrettyMarkupLogger)


# Checked from the most severe level down; the first threshold reached wins.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity with yachalk."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it according to its level.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colorized message.
        """
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def parse_log_level(value: str) -> int | None:
    """Convert a level name (``"TRACE"``, ``"debug"``) or number (``"10"``) to a level."""
    v: str = value.strip().upper()
    if v.isdigit():
        return int(v)
    return LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``PRETTYMARKUP_LOG_LEVEL``, or None if unset or unknown."""
    val: str | None = os.environ.get(ENV_LOG_LEVEL)
    if not val:
        return None
    return parse_log_level(val)


def setup_logging(level: int | None = None) -> None:
    """Configure the ``prettymarkup`` logger with a colored stderr handler.

    Args:
        level (int | None): The level to set. When None, the environment is
            consulted via `resolve_env_log_level`, defaulting to CRITICAL.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    package_logger: logging.Logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)

    # Repeated setup (one per CLI invocation) must not stack handlers
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = False


def get_logger(name: str) -> PrettyMarkupLogger:
    """Return the `PrettyMarkupLogger` for ``name`` (normally ``__name__``)."""
    return cast("PrettyMarkupLogger", logging.getLogger(name))
