# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : nodes.py
#   file_relpath : src/prettymarkup/tree/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup document tree and the formatting annotation side table.

The tree is a closed set of node dataclasses:

* `Root` and `Element` own an ordered ``children`` list.
* `Text`, `Comment` and `Doctype` are leaves carrying a ``value``.

Nodes do not store parent references. Code that needs the ancestor chain of a
node receives it explicitly from a top-down walk (see `walk`), which keeps the
tree acyclic by construction and cheap to copy.

Nodes compare by identity (``eq=False``): two ``Text("a")`` nodes are distinct
tree positions, and the `AnnotationTable` keys entries by node identity.

Annotations written by the indentation engine live in an `AnnotationTable`
instead of on the nodes themselves; the writer reads them when serializing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, TypeAlias

from prettymarkup.core.errors import MalformedTreeError

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from prettymarkup.core.errors import SourcePosition


class NodeKind(Enum):
    """Discriminator of the node variants."""

    ROOT = "root"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    DOCTYPE = "doctype"


@dataclass(eq=False)
class Root:
    """Document root. Not an element: it has no tag name and is never indented."""

    children: list[Node] = field(default_factory=list)

    kind: ClassVar[NodeKind] = NodeKind.ROOT


@dataclass(eq=False)
class Element:
    """A markup element.

    Attributes:
        tag_name (str): Tag name as written in the source (lookups lower-case it).
        attributes (dict[str, str | None]): Attribute values; ``None`` for bare
            boolean attributes such as ``disabled``.
        children (list[Node]): Ordered child nodes.
        position (SourcePosition | None): Where the start tag was read, if known.
    """

    tag_name: str
    attributes: dict[str, str | None] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    position: SourcePosition | None = None

    kind: ClassVar[NodeKind] = NodeKind.ELEMENT

    @property
    def name(self) -> str:
        """Lower-cased tag name."""
        return self.tag_name.lower()


@dataclass(eq=False)
class Text:
    """Character data."""

    value: str

    kind: ClassVar[NodeKind] = NodeKind.TEXT


@dataclass(eq=False)
class Comment:
    """A comment; ``value`` excludes the ``<!--``/``-->`` delimiters."""

    value: str

    kind: ClassVar[NodeKind] = NodeKind.COMMENT


@dataclass(eq=False)
class Doctype:
    """A document type declaration; ``value`` is the text after ``<!DOCTYPE``."""

    value: str = "html"

    kind: ClassVar[NodeKind] = NodeKind.DOCTYPE


Node: TypeAlias = "Root | Element | Text | Comment | Doctype"
ParentNode: TypeAlias = "Root | Element"


def is_element(node: Node | None, *names: str) -> bool:
    """Return True if ``node`` is an element, optionally restricted to tag ``names``.

    Names are compared case-insensitively.
    """
    if not isinstance(node, Element):
        return False
    if not names:
        return True
    return node.name in {n.lower() for n in names}


def walk(root: Root) -> Iterator[tuple[Node, tuple[ParentNode, ...]]]:
    """Yield ``(node, ancestors)`` pairs in document (pre-)order.

    ``ancestors`` runs from the root down to the node's parent; it is empty for
    the root itself.
    """
    stack: list[tuple[Node, tuple[ParentNode, ...]]] = [(root, ())]
    while stack:
        node, ancestors = stack.pop()
        yield node, ancestors
        if isinstance(node, (Root, Element)):
            chain: tuple[ParentNode, ...] = (*ancestors, node)
            stack.extend((child, chain) for child in reversed(node.children))


def text_content(node: Node) -> str:
    """Return the concatenated text of ``node`` and its descendants."""
    parts: list[str] = []
    stack: list[Node] = [node]
    while stack:
        match stack.pop():
            case Text(value=value):
                parts.append(value)
            case Root(children=children) | Element(children=children):
                stack.extend(reversed(children))
            case _:
                pass
    return "".join(parts)


def contains_only_text(children: Sequence[Node]) -> bool:
    """Return True if ``children`` is non-empty and every child is a text node."""
    return bool(children) and all(isinstance(child, Text) for child in children)


def contains_only_blank_text(children: Sequence[Node]) -> bool:
    """Return True if ``children`` is non-empty and holds only whitespace text nodes."""
    return bool(children) and all(
        isinstance(child, Text) and child.value != "" and child.value.isspace()
        for child in children
    )


def validate_tree(root: Root) -> None:
    """Check the structural invariants of a tree.

    Every node must appear exactly once (no sharing, no cycles) and a `Root`
    may only appear at the top.

    Raises:
        MalformedTreeError: When an invariant is violated.
    """
    if not isinstance(root, Root):
        raise MalformedTreeError(f"Expected a Root node, got {type(root).__name__}")

    seen: set[int] = set()
    stack: list[Node] = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            raise MalformedTreeError(
                f"{type(node).__name__} node is reachable from more than one parent"
            )
        seen.add(id(node))
        if isinstance(node, (Root, Element)):
            for child in node.children:
                if isinstance(child, Root):
                    raise MalformedTreeError("A Root node cannot be the child of another node")
                if not isinstance(child, (Element, Text, Comment, Doctype)):
                    raise MalformedTreeError(f"Unexpected child object: {child!r}")
                stack.append(child)


# ------------------ Formatting annotations ------------------


@dataclass(frozen=True)
class FormattingAnnotation:
    """Per-node formatting data computed by the indentation engine.

    Attributes:
        indent_level (int): Number of indent units of the line the node starts on.
    """

    indent_level: int


class AnnotationTable:
    """Side table mapping nodes (by identity) to their `FormattingAnnotation`.

    The engine writes entries during its single pass and then seals the table;
    the writer only reads. Nodes are kept alive by the table so identities
    cannot be recycled while it exists.
    """

    def __init__(self) -> None:
        self._entries: dict[int, tuple[Node, FormattingAnnotation]] = {}
        self._sealed: bool = False

    def record(self, node: Node, indent_level: int) -> None:
        """Store the annotation of ``node`` (negative levels are clamped to 0)."""
        if self._sealed:
            raise RuntimeError("AnnotationTable is sealed; annotations are read-only")
        self._entries[id(node)] = (node, FormattingAnnotation(max(indent_level, 0)))

    def seal(self) -> None:
        """Make the table read-only."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        """Whether the table has been sealed."""
        return self._sealed

    def get(self, node: Node) -> FormattingAnnotation | None:
        """Return the annotation of ``node`` or ``None``."""
        entry = self._entries.get(id(node))
        return entry[1] if entry is not None else None

    def indent_level(self, node: Node, default: int = 0) -> int:
        """Return the recorded indent level of ``node`` or ``default``."""
        annotation = self.get(node)
        return annotation.indent_level if annotation is not None else default

    def __contains__(self, node: object) -> bool:
        entry = self._entries.get(id(node))
        return entry is not None and entry[0] is node

    def __len__(self) -> int:
        return len(self._entries)
