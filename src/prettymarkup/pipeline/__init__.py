# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : __init__.py
#   file_relpath : src/prettymarkup/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Batch formatting pipeline (read, parse, format, serialize, compare, write)."""

from __future__ import annotations

from .results import FormatResult
from .runner import Formatter, format_text, run_for_files, write_result
from .status import FormatStatus, WriteStatus

__all__ = [
    "FormatResult",
    "FormatStatus",
    "Formatter",
    "WriteStatus",
    "format_text",
    "run_for_files",
    "write_result",
]
