# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : minify.py
#   file_relpath : src/prettymarkup/tree/minify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Whitespace pre-normalizer run before the indentation engine.

Removes the insignificant whitespace a previous formatting run (or a human)
left in the tree, so that the engine always starts from the same shape and
formatting is idempotent:

* runs of ASCII whitespace collapse to a single ``\\n`` when the run contains a
  linefeed, otherwise to a single space;
* text nodes lose their leading and trailing whitespace, so line breaks the
  engine inserted next to an element do not read as multi-line text on the
  next run;
* text nodes left empty are dropped.

Whitespace-sensitive subtrees (``<pre>``, ``<textarea>``, ``<script>``, ...)
are never touched, and neither is an element preceded by a
``prettymarkup-ignore`` comment. Non-breaking spaces are content and are never collapsed.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from prettymarkup.constants import IGNORE_MARKER
from prettymarkup.tags.whitespace import is_whitespace_sensitive_tag
from prettymarkup.tree.nodes import Comment, Element, Root, Text

if TYPE_CHECKING:
    from prettymarkup.tree.nodes import Node, ParentNode

_WHITESPACE_RUN: Final[re.Pattern[str]] = re.compile(r"[ \t\n\r\f]+")
_ASCII_WHITESPACE: Final[str] = " \t\n\r\f"


def _collapse(match: re.Match[str]) -> str:
    return "\n" if "\n" in match.group(0) else " "


def collapse_whitespace(value: str) -> str:
    """Collapse whitespace runs of ``value`` (see module docstring)."""
    return _WHITESPACE_RUN.sub(_collapse, value)


def _minify_parent(parent: ParentNode) -> list[Element]:
    """Normalize the text children of ``parent``; return the elements to descend into."""
    if isinstance(parent, Element) and is_whitespace_sensitive_tag(parent.tag_name):
        return []

    descend: list[Element] = []
    children: list[Node] = []
    protect_next_element: bool = False
    for child in parent.children:
        if isinstance(child, Comment) and IGNORE_MARKER in child.value:
            protect_next_element = True
        if isinstance(child, Text):
            value: str = collapse_whitespace(child.value).strip(_ASCII_WHITESPACE)
            if not value:
                continue
            child.value = value
        elif isinstance(child, Element):
            if not protect_next_element:
                descend.append(child)
            protect_next_element = False
        children.append(child)

    parent.children = children
    return descend


def minify_whitespace(root: Root) -> Root:
    """Normalize insignificant whitespace of ``root`` in place and return it."""
    pending: list[ParentNode] = [root]
    while pending:
        pending.extend(_minify_parent(pending.pop()))
    return root
