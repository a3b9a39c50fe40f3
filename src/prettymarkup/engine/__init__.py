# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : __init__.py
#   file_relpath : src/prettymarkup/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatting engine: indentation/newline decisions, template detection and
embedded-content delegation."""

from __future__ import annotations

from .embedded import DefaultEmbeddedFormatter, EmbeddedFormatter, guess_dialect
from .indent import IndentEngine, format_tree, is_page_mode
from .templates import looks_like_template_expression

__all__ = [
    "DefaultEmbeddedFormatter",
    "EmbeddedFormatter",
    "IndentEngine",
    "format_tree",
    "guess_dialect",
    "is_page_mode",
    "looks_like_template_expression",
]
