# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : writer.py
#   file_relpath : src/prettymarkup/tree/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serializer turning an annotated document tree back into markup text.

Layout decisions (line breaks, indentation) are already encoded in the tree
as text nodes by the indentation engine; the writer emits them verbatim. The
only layout decision taken here is attribute wrapping: when a start tag would
not fit in ``print_width`` columns, its attributes are put one per line,
indented one level deeper than the line the tag starts on (taken from the
`AnnotationTable`). Elements the engine left alone (content of
whitespace-sensitive elements, elements after a ``prettymarkup-ignore``
comment) are never wrapped.

Text and comments are written as they are in the tree. Attribute values are
quoted with the configured quote style, switching quotes when the value
contains the preferred one.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from prettymarkup.constants import IGNORE_MARKER
from prettymarkup.tags.registry import get_registry
from prettymarkup.tags.whitespace import is_whitespace_sensitive_tag
from prettymarkup.tree.nodes import Comment, Doctype, Element, Root, Text

if TYPE_CHECKING:
    from prettymarkup.config.model import Config
    from prettymarkup.tags.registry import TagBehaviorRegistry
    from prettymarkup.tree.nodes import AnnotationTable, Node, ParentNode

# "&" that a reader would take for the start of a character reference.
_AMBIGUOUS_AMPERSAND: Final[re.Pattern[str]] = re.compile(r"&(?=#?[A-Za-z0-9]+;)")


def quote_attribute(value: str, *, single_quote: bool) -> str:
    """Quote an attribute value.

    The preferred quote is used unless the value contains it and not the other
    one; when it contains both, the preferred quote is escaped.
    """
    value = _AMBIGUOUS_AMPERSAND.sub("&amp;", value)
    preferred, other = ("'", '"') if single_quote else ('"', "'")
    if preferred in value:
        if other not in value:
            preferred = other
        else:
            value = value.replace(preferred, "&#39;" if preferred == "'" else "&quot;")
    return f"{preferred}{value}{preferred}"


def format_attributes(element: Element, *, single_quote: bool) -> list[str]:
    """Render each attribute of ``element`` as ``name`` or ``name="value"``."""
    rendered: list[str] = []
    for name, value in element.attributes.items():
        if value is None:
            rendered.append(name)
        else:
            rendered.append(f"{name}={quote_attribute(value, single_quote=single_quote)}")
    return rendered


class MarkupWriter:
    """Serialize trees formatted by the indentation engine.

    Args:
        config (Config): Supplies ``indent_unit``, ``tab_width``,
            ``print_width`` and ``single_quote``.
        registry (TagBehaviorRegistry | None): Tag behaviors (void elements).
    """

    def __init__(self, config: Config, *, registry: TagBehaviorRegistry | None = None) -> None:
        self.config = config
        self.registry: TagBehaviorRegistry = registry or get_registry()

    def column_width(self, level: int) -> int:
        """Return the display width of ``level`` indent units."""
        width: int = self.config.tab_width if self.config.use_tabs else len(
            self.config.indent_unit
        )
        return width * max(level, 0)

    def start_tag(self, element: Element, level: int, *, wrap: bool = True) -> str:
        attributes: list[str] = format_attributes(element, single_quote=self.config.single_quote)
        if not attributes:
            return f"<{element.tag_name}>"

        inline: str = f"<{element.tag_name} {' '.join(attributes)}>"
        if not wrap or len(attributes) == 1 or (
            self.column_width(level) + len(inline) <= self.config.print_width
        ):
            return inline

        inner: str = "\n" + self.config.indent_unit * (level + 1)
        closing: str = "\n" + self.config.indent_unit * level
        return f"<{element.tag_name}{inner}{inner.join(attributes)}{closing}>"

    def child_items(self, node: ParentNode, *, verbatim: bool) -> list[tuple[Node, bool]]:
        """Pair the children of ``node`` with their verbatim flag.

        The element following a ``prettymarkup-ignore`` comment is verbatim.
        """
        items: list[tuple[Node, bool]] = []
        protect_next_element: bool = False
        for child in node.children:
            if isinstance(child, Element):
                items.append((child, verbatim or protect_next_element))
                protect_next_element = False
                continue
            items.append((child, verbatim))
            if isinstance(child, Comment) and IGNORE_MARKER in child.value:
                protect_next_element = True
        return items

    def write_node(self, node: Node, annotations: AnnotationTable, out: list[str]) -> None:
        """Append the markup of ``node`` and its descendants to ``out``.

        Only annotated elements outside whitespace-sensitive content may have
        their start tag wrapped; everything else is written as it stands.
        """
        # Pending work in reverse document order: (node, verbatim) pairs and end tags.
        pending: list[tuple[Node, bool] | str] = [(node, False)]
        while pending:
            item: tuple[Node, bool] | str = pending.pop()
            if isinstance(item, str):
                out.append(item)
                continue
            current, verbatim = item
            match current:
                case Root():
                    pending.extend(reversed(self.child_items(current, verbatim=verbatim)))
                case Element():
                    wrap: bool = not verbatim and current in annotations
                    level: int = annotations.indent_level(current)
                    out.append(self.start_tag(current, level, wrap=wrap))
                    behavior = self.registry.lookup(current.tag_name, self.config.ignore_first_lf)
                    if behavior.is_void:
                        continue
                    first: Node | None = current.children[0] if current.children else None
                    if behavior.ignore_first_lf and isinstance(first, Text):
                        if first.value.startswith("\n"):
                            # Readers drop the first linefeed of this element.
                            out.append("\n")
                    pending.append(f"</{current.tag_name}>")
                    inner: bool = verbatim or is_whitespace_sensitive_tag(current.tag_name)
                    pending.extend(reversed(self.child_items(current, verbatim=inner)))
                case Text():
                    out.append(current.value)
                case Comment():
                    out.append(f"<!--{current.value}-->")
                case Doctype():
                    out.append(f"<!DOCTYPE {current.value}>")

    def serialize(self, root: Root, annotations: AnnotationTable) -> str:
        """Return the markup text of ``root``."""
        out: list[str] = []
        self.write_node(root, annotations, out)
        return "".join(out)


def serialize(root: Root, annotations: AnnotationTable, config: Config) -> str:
    """Serialize ``root`` with a one-off `MarkupWriter`."""
    return MarkupWriter(config).serialize(root, annotations)
