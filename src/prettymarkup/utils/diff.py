# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : diff.py
#   file_relpath : src/prettymarkup/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diffs between a document and its formatted version.

`make_patch` builds the diff with `difflib`; `render_patch` colorizes it
with yachalk for terminal display.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Sequence


def make_patch(original: str, formatted: str, name: str) -> list[str]:
    """Return the unified diff of ``original`` against ``formatted`` as lines.

    Lines keep their line endings; an empty list means no difference.

    Args:
        original (str): Text before formatting.
        formatted (str): Text after formatting.
        name (str): File name shown in the ``---``/``+++`` headers.
    """
    return list(
        difflib.unified_diff(
            original.splitlines(keepends=True),
            formatted.splitlines(keepends=True),
            fromfile=name,
            tofile=f"{name} (formatted)",
        )
    )


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\n") for line in patch]

    def process_line(line: str) -> str:
        # Carriage returns stay visible.
        content: str = line.replace("\r", "\\r")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers:
        return chalk.gray(
            "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
        )
    return chalk.gray("".join(f"{process_line(line)}\n" for line in lines))
