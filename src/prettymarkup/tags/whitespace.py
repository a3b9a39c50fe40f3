# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : whitespace.py
#   file_relpath : src/prettymarkup/tags/whitespace.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Whitespace-sensitivity classification.

Inside ``<pre>``, ``<textarea>``, ``<script>`` and friends, inserting or
removing whitespace changes what the document renders or executes. Both the
whitespace pre-normalizer and the indentation engine leave such subtrees
byte-identical.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from prettymarkup.tree.nodes import Element

if TYPE_CHECKING:
    from collections.abc import Iterable

    from prettymarkup.tree.nodes import Node

WHITESPACE_SENSITIVE_TAG_NAMES: Final[frozenset[str]] = frozenset(
    {
        "listing",
        "plaintext",
        "pre",
        "script",
        "style",
        "textarea",
        "xmp",
    }
)


def is_whitespace_sensitive_tag(tag_name: str) -> bool:
    """Return True if content of ``tag_name`` must be preserved byte for byte."""
    return tag_name.lower() in WHITESPACE_SENSITIVE_TAG_NAMES


def is_whitespace_sensitive(chain: Iterable[Node]) -> bool:
    """Return True if any node of ``chain`` is a whitespace-sensitive element.

    Args:
        chain (Iterable[Node]): The ancestors of a node, **including the node itself**.

    Returns:
        bool: ``True`` when the node sits in (or is) a whitespace-preserving subtree.
    """
    return any(
        isinstance(node, Element) and is_whitespace_sensitive_tag(node.tag_name) for node in chain
    )
