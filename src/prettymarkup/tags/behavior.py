# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : behavior.py
#   file_relpath : src/prettymarkup/tags/behavior.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable per-tag formatting behavior.

A `TagBehavior` describes how one tag name behaves under one formatting mode
(whether the first linefeed of ``<pre>``-like content is ignored). Instances
are built by `prettymarkup.tags.registry` and shared across the process, so
they are frozen.

This is an approximation of the HTML optional-tag rules
(see http://www.w3.org/TR/html51/syntax.html#optional-tags), not a conformant
implementation.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

# Parents under which required-parent rules are suspended.
_TEMPLATE_PARENTS: frozenset[str] = frozenset({"template", "ng-template"})


class TagContentType(Enum):
    """How the content of an element is tokenized.

    Attributes:
        PARSABLE_DATA: Regular markup content.
        RAW_TEXT: Content is never parsed or unescaped (``<script>``, ``<style>``).
        ESCAPABLE_RAW_TEXT: Content is not parsed but entities are decoded
            (``<title>``, ``<textarea>``).
    """

    PARSABLE_DATA = "parsable_data"
    RAW_TEXT = "raw_text"
    ESCAPABLE_RAW_TEXT = "escapable_raw_text"

    @property
    def is_raw(self) -> bool:
        """Whether content of this type is kept out of markup parsing."""
        return self is not TagContentType.PARSABLE_DATA


@dataclass(frozen=True)
class TagBehavior:
    """Formatting behavior of a tag name.

    Attributes:
        is_void: The element never has content (``<br>``, ``<img>``).
        closed_by_parent: The element is implicitly closed when its parent closes.
            Always true for void elements.
        closed_by_children: Lower-case tag names whose start tag implicitly
            closes this element (e.g. ``<li>`` closes an open ``<li>``).
        required_parents: Tag names of which one must be the parent; the first
            entry is the wrapper to insert when none is present. Empty means no
            requirement.
        content_type: How the element content is tokenized.
        implicit_namespace_prefix: Namespace prefix implied by the element
            (``svg``, ``math``), if any.
        ignore_first_lf: A linefeed directly after the start tag is not content.
    """

    is_void: bool = False
    closed_by_parent: bool = False
    closed_by_children: frozenset[str] = field(default_factory=frozenset)
    required_parents: tuple[str, ...] = ()
    content_type: TagContentType = TagContentType.PARSABLE_DATA
    implicit_namespace_prefix: str | None = None
    ignore_first_lf: bool = False

    @classmethod
    def build(
        cls,
        *,
        closed_by_children: Iterable[str] = (),
        closed_by_parent: bool = False,
        required_parents: Iterable[str] = (),
        implicit_namespace_prefix: str | None = None,
        content_type: TagContentType = TagContentType.PARSABLE_DATA,
        is_void: bool = False,
        ignore_first_lf: bool = False,
    ) -> TagBehavior:
        """Build a behavior, normalizing names and deriving ``closed_by_parent``."""
        return cls(
            is_void=is_void,
            closed_by_parent=closed_by_parent or is_void,
            closed_by_children=frozenset(name.lower() for name in closed_by_children),
            required_parents=tuple(name.lower() for name in required_parents),
            content_type=content_type,
            implicit_namespace_prefix=implicit_namespace_prefix,
            ignore_first_lf=ignore_first_lf,
        )

    @property
    def parent_to_add(self) -> str | None:
        """The implicit wrapper to insert when no required parent is present."""
        return self.required_parents[0] if self.required_parents else None

    def require_extra_parent(self, current_parent: str | None) -> bool:
        """Return True if an implicit parent must be inserted around this element.

        Args:
            current_parent (str | None): Tag name of the current parent, or ``None``
                at the document root.

        Returns:
            bool: ``False`` when the tag has no required parents or the parent is a
            template container; ``True`` at the root; otherwise whether the
            parent is missing from ``required_parents``.
        """
        if not self.required_parents:
            return False
        if not current_parent:
            return True
        parent: str = current_parent.lower()
        if parent in _TEMPLATE_PARENTS:
            return False
        return parent not in self.required_parents

    def is_closed_by_child(self, name: str) -> bool:
        """Return True if a ``<name>`` start tag implicitly closes this element."""
        return self.is_void or name.lower() in self.closed_by_children
