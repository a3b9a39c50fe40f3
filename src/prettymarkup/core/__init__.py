# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : __init__.py
#   file_relpath : src/prettymarkup/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core building blocks shared by the engine, the pipeline and the CLI."""

from __future__ import annotations

from .errors import (
    ConfigError,
    EmbeddedFormatterError,
    MalformedTreeError,
    MarkupParseError,
    PrettyMarkupError,
    SourcePosition,
)
from .exit_codes import ExitCode

__all__ = [
    "ConfigError",
    "EmbeddedFormatterError",
    "ExitCode",
    "MalformedTreeError",
    "MarkupParseError",
    "PrettyMarkupError",
    "SourcePosition",
]
