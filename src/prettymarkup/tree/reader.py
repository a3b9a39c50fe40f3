# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : reader.py
#   file_relpath : src/prettymarkup/tree/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup reader building a document tree with `html.parser`.

The reader is deliberately lenient and lossless where it matters for
formatting:

* character and entity references are kept verbatim (``&amp;`` stays
  ``&amp;``);
* comments and the doctype are preserved;
* tag names keep the case used in the source (``<feGaussianBlur>``);
* void elements and implicit end tags (``<li>``, ``<p>``, ``<td>``, ...) follow
  the tag behavior registry;
* ``<x/>`` is accepted for any element.

It does not implement HTML tree construction: no implicit ``<html>``/
``<body>`` and no wrapper insertion for required parents.
"""

from __future__ import annotations

import re
from html.parser import HTMLParser
from typing import TYPE_CHECKING, Final

from prettymarkup.config.logging import get_logger
from prettymarkup.core.errors import MarkupParseError, SourcePosition
from prettymarkup.tags.known import is_known_tag_name
from prettymarkup.tags.registry import get_registry
from prettymarkup.tree.nodes import Comment, Doctype, Element, Root, Text

if TYPE_CHECKING:
    from prettymarkup.config.logging import PrettyMarkupLogger
    from prettymarkup.tags.behavior import TagBehavior
    from prettymarkup.tags.registry import TagBehaviorRegistry
    from prettymarkup.tree.nodes import Node, ParentNode

logger: PrettyMarkupLogger = get_logger(__name__)

_SOURCE_TAG_NAME: Final[re.Pattern[str]] = re.compile(r"<\s*([^\s/>]+)")
_DOCTYPE_PREFIX: Final[re.Pattern[str]] = re.compile(r"^doctype\s*", re.IGNORECASE)


class MarkupTreeBuilder(HTMLParser):
    """`HTMLParser` subclass assembling `Root`/`Element`/`Text` nodes.

    Args:
        ignore_first_lf (bool): Drop the linefeed right after ``<pre>``,
            ``<listing>`` and ``<textarea>`` start tags.
        registry (TagBehaviorRegistry | None): Tag behaviors; defaults to the
            process-wide registry.
    """

    def __init__(
        self,
        *,
        ignore_first_lf: bool = False,
        registry: TagBehaviorRegistry | None = None,
    ) -> None:
        super().__init__(convert_charrefs=False)
        self.ignore_first_lf = ignore_first_lf
        self.registry: TagBehaviorRegistry = registry or get_registry()
        self.root = Root()
        self.stack: list[Element] = []

    # ------------------ helpers ------------------

    @property
    def current(self) -> ParentNode:
        """The innermost open element, or the root."""
        return self.stack[-1] if self.stack else self.root

    def behavior(self, tag_name: str) -> TagBehavior:
        """Return the behavior of ``tag_name`` in the reader's mode."""
        return self.registry.lookup(tag_name, self.ignore_first_lf)

    def position(self) -> SourcePosition:
        """Return the position of the token being handled."""
        line, column = self.getpos()
        return SourcePosition(line, column)

    def source_tag_name(self, lowered: str) -> str:
        """Recover the source spelling of the current start tag name."""
        raw: str | None = self.get_starttag_text()
        if raw:
            match = _SOURCE_TAG_NAME.match(raw)
            if match and match.group(1).lower() == lowered:
                return match.group(1)
        return lowered

    def append_text(self, data: str) -> None:
        """Append character data, merging with a preceding text node."""
        if not data:
            return
        parent: ParentNode = self.current
        if isinstance(parent, Element) and not parent.children and data.startswith("\n"):
            if self.behavior(parent.tag_name).ignore_first_lf:
                data = data[1:]
                if not data:
                    return
        if parent.children and isinstance(parent.children[-1], Text):
            parent.children[-1].value += data
        else:
            parent.children.append(Text(data))

    def open_element(self, tag: str, attrs: list[tuple[str, str | None]]) -> Element:
        """Create an element for a start tag and attach it to the current parent."""
        tag_name: str = self.source_tag_name(tag)
        if self.stack and self.behavior(self.stack[-1].tag_name).is_closed_by_child(tag):
            closed: Element = self.stack.pop()
            logger.trace("<%s> implicitly closes <%s>", tag_name, closed.tag_name)

        parent: ParentNode = self.current
        behavior: TagBehavior = self.behavior(tag)
        parent_name: str | None = parent.tag_name if isinstance(parent, Element) else None
        if behavior.require_extra_parent(parent_name):
            logger.debug(
                "<%s> at %s expects a <%s> parent",
                tag_name,
                self.position(),
                behavior.parent_to_add,
            )
        if not is_known_tag_name(tag):
            logger.trace("Custom element <%s> at %s", tag_name, self.position())

        element = Element(tag_name, dict(attrs), position=self.position())
        parent.children.append(element)
        return element

    # ------------------ HTMLParser callbacks ------------------

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        element: Element = self.open_element(tag, attrs)
        behavior: TagBehavior = self.behavior(tag)
        if behavior.is_void:
            return
        self.stack.append(element)
        if behavior.content_type.is_raw:
            # Everything up to the matching end tag is character data
            self.set_cdata_mode(tag)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self.open_element(tag, attrs)

    def handle_endtag(self, tag: str) -> None:
        if self.behavior(tag).is_void:
            raise MarkupParseError(
                f"Void element <{tag}> cannot have an end tag (at {self.position()})"
            )
        for index in range(len(self.stack) - 1, -1, -1):
            if self.stack[index].name == tag:
                for unclosed in self.stack[index + 1 :]:
                    if not self.behavior(unclosed.tag_name).closed_by_parent:
                        logger.debug(
                            "Unclosed <%s> closed by </%s> at %s",
                            unclosed.tag_name,
                            tag,
                            self.position(),
                        )
                del self.stack[index:]
                return
        raise MarkupParseError(f"Unexpected closing tag </{tag}> at {self.position()}")

    def handle_data(self, data: str) -> None:
        self.append_text(data)

    def handle_entityref(self, name: str) -> None:
        self.append_text(f"&{name};")

    def handle_charref(self, name: str) -> None:
        self.append_text(f"&#{name};")

    def handle_comment(self, data: str) -> None:
        self.current.children.append(Comment(data))

    def handle_decl(self, decl: str) -> None:
        if decl.lower().startswith("doctype"):
            self.current.children.append(Doctype(_DOCTYPE_PREFIX.sub("", decl)))
        else:
            self.append_text(f"<!{decl}>")

    def handle_pi(self, data: str) -> None:
        self.append_text(f"<?{data}>")

    def unknown_decl(self, data: str) -> None:
        self.append_text(f"<![{data}]>")

    def build(self, text: str) -> Root:
        """Feed ``text`` and return the completed tree."""
        self.feed(text)
        self.close()
        if self.stack:
            logger.trace(
                "Closing %d element(s) left open at end of input", len(self.stack)
            )
            self.stack.clear()
        return self.root


def parse_markup(
    text: str,
    *,
    ignore_first_lf: bool = False,
    registry: TagBehaviorRegistry | None = None,
) -> Root:
    """Parse markup ``text`` into a document tree.

    Args:
        text (str): Markup source.
        ignore_first_lf (bool): Drop the first linefeed of ``<pre>``-like content.
        registry (TagBehaviorRegistry | None): Optional tag behavior registry.

    Returns:
        Root: The parsed document.

    Raises:
        MarkupParseError: On unexpected or void end tags.
    """
    builder = MarkupTreeBuilder(ignore_first_lf=ignore_first_lf, registry=registry)
    root: Root = builder.build(text)
    children: list[Node] = root.children
    logger.trace("Parsed %d top-level node(s)", len(children))
    return root
