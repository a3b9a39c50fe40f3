# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : templates.py
#   file_relpath : src/prettymarkup/engine/templates.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detection of template interpolation syntax in text.

Breaking an interpolation such as ``{{ user.name }}`` onto its own line is safe
only when it is not the sole content of its parent; the engine asks this
module whether a text node looks like one.

Recognized dialects, tested in this order:

1. ``<% ... %>`` (ERB, EJS)
2. ``{{ ... }}`` (Angular, Vue, Handlebars)
3. ``{ ... }`` (Svelte, JSX-like)

The single-brace pattern also matches double-brace text, and it matches any
literal ``{...}`` in prose. Both are accepted behaviors of the heuristic.
"""

from __future__ import annotations

import re
from typing import Final

ARROW_PERCENT_INTERPOLATION: Final[re.Pattern[str]] = re.compile(r"<%([\s\S]*?)%>")
DOUBLE_BRACE_INTERPOLATION: Final[re.Pattern[str]] = re.compile(r"\{\{([\s\S]*?)\}\}")
SINGLE_BRACE_INTERPOLATION: Final[re.Pattern[str]] = re.compile(r"\{([\s\S]*?)\}")

TEMPLATE_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    ARROW_PERCENT_INTERPOLATION,
    DOUBLE_BRACE_INTERPOLATION,
    SINGLE_BRACE_INTERPOLATION,
)


def looks_like_template_expression(text: str) -> bool:
    """Return True if ``text`` contains interpolation syntax of a known dialect."""
    return any(pattern.search(text) for pattern in TEMPLATE_PATTERNS)
