# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : status.py
#   file_relpath : src/prettymarkup/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-document outcome of a formatting run."""

from __future__ import annotations

from yachalk import chalk

from prettymarkup.core.colored_enum import ColoredStrEnum


class FormatStatus(ColoredStrEnum):
    """Outcome of formatting one document.

    Values are human-readable strings used in CLI summaries; compare members
    with ``==``.
    """

    UNCHANGED = ("unchanged", chalk.green)
    CHANGED = ("reformatted", chalk.yellow)
    ERROR = ("error", chalk.red_bright)


class WriteStatus(ColoredStrEnum):
    """What happened to the formatted output of one document."""

    SKIPPED = ("not written", chalk.gray)
    WRITTEN = ("written", chalk.green)
    FAILED = ("write failed", chalk.red_bright)
