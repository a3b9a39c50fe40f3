# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : indent.py
#   file_relpath : src/prettymarkup/engine/indent.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Indentation/newline engine.

Given a document tree, decides where linefeeds and indentation go by inserting
synthetic `Text` nodes into child lists, re-indents existing text and
comments, and records the indent level of every visited node in an
[`AnnotationTable`][prettymarkup.tree.nodes.AnnotationTable].

The pass is a single top-down, pre-order walk. For each root/element node:

1. ``level`` is the number of ancestors, one less when the document already
   has ``<html>``/``<head>``/``<body>`` (those are not indented).
2. A comment containing ``prettymarkup-ignore`` protects the next element
   sibling: its subtree is not visited.
3. Multi-line comments get their last line aligned with the comment start.
4. Whitespace-sensitive elements are annotated and left alone, except that
   blank content is cleared and ``<script>``/``<style>`` code is handed to the
   embedded formatter.
5. Text children are trimmed of edge spaces/tabs and their inner lines are
   re-indented.
6. A new child list is built with line breaks before children and before the
   closing tag (see `IndentPass.rebuild_children`).

Typical usage:
    ```python
    from prettymarkup.config import Config
    from prettymarkup.engine.indent import IndentEngine

    annotations = IndentEngine(Config.from_defaults()).format(root)
    ```

The engine never catches errors: malformed trees and embedded-formatter
failures propagate to the caller.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Final

from prettymarkup.config.logging import get_logger
from prettymarkup.constants import IGNORE_MARKER
from prettymarkup.core.errors import EmbeddedFormatterError
from prettymarkup.engine.embedded import (
    EMBEDDED_CONTAINERS,
    DefaultEmbeddedFormatter,
    escape_script_end_tags,
    guess_dialect,
    indent_formatted,
)
from prettymarkup.engine.templates import looks_like_template_expression
from prettymarkup.tags.registry import get_registry
from prettymarkup.tags.whitespace import is_whitespace_sensitive
from prettymarkup.tree.minify import minify_whitespace
from prettymarkup.tree.nodes import (
    AnnotationTable,
    Comment,
    Doctype,
    Element,
    Root,
    Text,
    contains_only_blank_text,
    contains_only_text,
    is_element,
    text_content,
    validate_tree,
    walk,
)

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from prettymarkup.config.logging import PrettyMarkupLogger
    from prettymarkup.config.model import Config
    from prettymarkup.engine.embedded import EmbeddedFormatter
    from prettymarkup.tags.registry import TagBehaviorRegistry
    from prettymarkup.tree.nodes import Node, ParentNode

logger: PrettyMarkupLogger = get_logger(__name__)

SINGLE_BREAK: Final[str] = "\n"
DOUBLE_BREAK: Final[str] = "\n\n"

DOCUMENT_STRUCTURE_TAGS: Final[tuple[str, ...]] = ("html", "head", "body")

_EDGE_BLANKS: Final[re.Pattern[str]] = re.compile(r"\A[ \t]+|[ \t]+\Z")
_ENDS_WITH_NEWLINE: Final[re.Pattern[str]] = re.compile(r"\n\s*\Z")
_STARTS_WITH_NEWLINE: Final[re.Pattern[str]] = re.compile(r"\s*\n")


def is_page_mode(root: Root) -> bool:
    """Return True unless the tree already contains ``<html>``, ``<head>`` or ``<body>``."""
    return not any(is_element(node, *DOCUMENT_STRUCTURE_TAGS) for node, _ in walk(root))


def is_conditional_comment(node: Node | None, *, ignore_case: bool = True) -> bool:
    """Return True for comments carrying a conditional directive (``<!--[if IE]>``).

    Any ``if`` in the comment text counts. Separating a conditional comment from
    a following element only recognizes a lower-case ``if``.
    """
    if not isinstance(node, Comment):
        return False
    value: str = node.value.lower() if ignore_case else node.value
    return "if" in value


def ends_with_newline(node: Node | None) -> bool:
    """Return True for text nodes whose value ends in a linefeed (plus whitespace)."""
    return isinstance(node, Text) and bool(_ENDS_WITH_NEWLINE.search(node.value))


def starts_with_newline(node: Node | None) -> bool:
    """Return True for text nodes whose value starts with a linefeed (after whitespace)."""
    return isinstance(node, Text) and bool(_STARTS_WITH_NEWLINE.match(node.value))


class IndentPass:
    """State of one engine run over one document.

    Attributes:
        engine (IndentEngine): The engine that owns the settings.
        page_mode (bool): ``False`` when the document has its own
            ``<html>``/``<head>``/``<body>``; levels then start one lower.
        annotations (AnnotationTable): Output side table.
    """

    def __init__(self, engine: IndentEngine, *, page_mode: bool) -> None:
        self.engine = engine
        self.page_mode = page_mode
        self.annotations = AnnotationTable()
        self.pending: list[tuple[Node, tuple[ParentNode, ...]]] = []

    def indent(self, level: int) -> str:
        """Return the indentation string for ``level`` (negative levels are empty)."""
        return self.engine.indent_unit * max(level, 0)

    def breaking_text(self, breaks: str, level: int) -> Text:
        """Create a synthetic text node holding ``breaks`` plus indentation."""
        node = Text(breaks + self.indent(level))
        self.annotations.record(node, level)
        return node

    # ------------------ traversal ------------------

    def traverse(self, root: Root) -> None:
        """Visit ``root`` and its descendants in document order.

        Uses an explicit stack, so nesting depth is not bounded by the
        interpreter recursion limit.
        """
        self.pending = [(root, ())]
        while self.pending:
            node, ancestors = self.pending.pop()
            self.visit(node, ancestors)

    def visit(self, node: Node, ancestors: tuple[ParentNode, ...]) -> None:
        """Format ``node`` and schedule the children that are still to be visited."""
        level: int = len(ancestors) if self.page_mode else len(ancestors) - 1

        match node:
            case Comment():
                if IGNORE_MARKER not in node.value:
                    self.reindent_comment(node, level)
                return
            case Text() | Doctype():
                return
            case Root() | Element():
                pass

        chain: tuple[ParentNode, ...] = (*ancestors, node)

        if isinstance(node, Element) and is_whitespace_sensitive(chain):
            self.format_sensitive(node, level)
            return

        logger.trace("Indenting <%s> at level %d", getattr(node, "tag_name", "#root"), level)
        saw_newline: bool = self.normalize_text_children(node, level)
        self.rebuild_children(node, level, saw_newline)

        to_visit: list[Node] = []
        protect_next_element: bool = False
        for child in node.children:
            if protect_next_element and isinstance(child, Element):
                protect_next_element = False
                logger.debug("Skipping <%s>: preceded by %s", child.tag_name, IGNORE_MARKER)
                continue
            if isinstance(child, Comment) and IGNORE_MARKER in child.value:
                protect_next_element = True
            to_visit.append(child)
        self.pending.extend((child, chain) for child in reversed(to_visit))

    # ------------------ node handlers ------------------

    def reindent_comment(self, node: Comment, level: int) -> None:
        """Align the last line of a multi-line comment with the comment start.

        Interior lines are kept as written.
        """
        lines: list[str] = node.value.split(SINGLE_BREAK)
        if len(lines) > 1:
            lines[-1] = self.indent(level - 1) + lines[-1].strip()
            node.value = SINGLE_BREAK.join(lines)

    def format_sensitive(self, node: Element, level: int) -> None:
        """Handle an element inside (or being) a whitespace-sensitive subtree."""
        self.annotations.record(node, level - 1)
        if not node.children:
            return

        if contains_only_blank_text(node.children):
            node.children = []
            return

        if not self.engine.config.use_embedded_formatter:
            return
        behavior = self.engine.registry.lookup(node.tag_name, self.engine.config.ignore_first_lf)
        if not behavior.content_type.is_raw or node.name not in EMBEDDED_CONTAINERS:
            return
        dialect: str | None = guess_dialect(node)
        if dialect is not None:
            self.format_embedded(node, level, dialect)

    def format_embedded(self, node: Element, level: int, dialect: str) -> None:
        """Replace the content of ``node`` with formatted, re-indented code.

        Raises:
            EmbeddedFormatterError: If the embedded formatter fails.
        """
        source: str = text_content(node)
        logger.debug("Formatting embedded <%s> content as %s", node.tag_name, dialect)
        try:
            formatted: str = self.engine.formatter(source, dialect, self.engine.embedded_options)
        except Exception as exc:
            raise EmbeddedFormatterError(
                str(exc), dialect=dialect, tag_name=node.tag_name, position=node.position
            ) from exc

        formatted = indent_formatted(formatted, level, self.engine.indent_unit)
        if node.name == "script":
            formatted = escape_script_end_tags(formatted)

        node.children = [
            Text(SINGLE_BREAK),
            Text(formatted),
            Text(self.indent(level - 1)),
        ]

    def normalize_text_children(self, node: ParentNode, level: int) -> bool:
        """Trim and re-indent the direct text children of an element.

        Root-level text is left alone: the root is not an element and its text
        must not influence other top-level nodes.

        Returns:
            bool: Whether any text child contained a linefeed.
        """
        if isinstance(node, Root):
            return False

        saw_newline: bool = False
        newline_indent: str = SINGLE_BREAK + self.indent(level)
        for child in node.children:
            if isinstance(child, Text):
                if SINGLE_BREAK in child.value:
                    saw_newline = True
                child.value = _EDGE_BLANKS.sub("", child.value).replace(
                    SINGLE_BREAK, newline_indent
                )
        return saw_newline

    def rebuild_children(self, node: ParentNode, level: int, saw_newline: bool) -> None:
        """Build a new child list of ``node`` with synthetic line breaks.

        Before each child, in order of precedence:

        * a double break after a conditional comment, when the child is an
          element (lower-case ``if`` only) or a non-conditional comment;
        * a single break when the previous child does not already end with a
          linefeed and `breaks_before_child` says so;
        * a single break before the first child when the text of ``node``
          spans several lines.

        After the last child, a break (one level up) closes the element when
        `breaks_before_close` says so or the text spans several lines.
        """
        original: list[Node] = node.children
        rebuilt: list[Node] = []
        text_only: bool = contains_only_text(original)
        prev: Node | None = None

        for index, child in enumerate(original):
            self.annotations.record(child, level)

            if (isinstance(child, Element) and is_conditional_comment(prev, ignore_case=False)) or (
                isinstance(child, Comment)
                and is_conditional_comment(prev)
                and not is_conditional_comment(child)
            ):
                rebuilt.append(self.breaking_text(DOUBLE_BREAK, level))
            elif (
                not ends_with_newline(prev)
                and self.breaks_before_child(node, child, index, prev, text_only)
            ) or (saw_newline and index == 0):
                rebuilt.append(self.breaking_text(SINGLE_BREAK, level))

            rebuilt.append(child)
            prev = child

        if self.breaks_before_close(node, original, prev) or saw_newline:
            rebuilt.append(self.breaking_text(SINGLE_BREAK, level - 1))

        node.children = rebuilt

    def breaks_before_child(
        self,
        node: ParentNode,
        child: Node,
        index: int,
        prev: Node | None,
        text_only: bool,
    ) -> bool:
        """Decide whether ``child`` starts on a new line."""
        # Interpolations go on their own line unless they are the whole content.
        if (
            isinstance(child, Text)
            and looks_like_template_expression(child.value)
            and not text_only
            and not starts_with_newline(child)
        ):
            return True

        # Never leave an element on the same line as a preceding comment.
        if isinstance(prev, Comment):
            return True

        if is_element(child, "script", "style") and index != 0:
            return True

        if isinstance(node, Root) and index == 0:
            return False

        return not isinstance(child, Text)

    def breaks_before_close(
        self,
        node: ParentNode,
        children: Sequence[Node],
        last: Node | None,
    ) -> bool:
        """Decide whether the closing tag of ``node`` goes on its own line.

        ``<label><input/>foo</label>`` breaks (mixed content);
        ``<label>foo</label>`` does not (text only); void elements never do.
        """
        if not children:
            return False
        if isinstance(node, Element) and self.engine.is_void(node):
            return False
        return not contains_only_text(children) or not isinstance(last, Text)


class IndentEngine:
    """Reusable engine configured once and applied to any number of documents.

    Engines hold no per-document state, so one instance may format documents
    from several threads; each call to `format` uses its own `IndentPass`.

    Args:
        config (Config): Formatting configuration.
        formatter (EmbeddedFormatter | None): Formatter for ``<script>``/``<style>``
            content; defaults to `DefaultEmbeddedFormatter`.
        registry (TagBehaviorRegistry | None): Tag behavior registry; defaults to
            the process-wide one.
    """

    def __init__(
        self,
        config: Config,
        *,
        formatter: EmbeddedFormatter | None = None,
        registry: TagBehaviorRegistry | None = None,
    ) -> None:
        self.config = config
        self.indent_unit: str = config.indent_unit
        self.formatter: EmbeddedFormatter = formatter or DefaultEmbeddedFormatter()
        self.registry: TagBehaviorRegistry = registry or get_registry()
        self.embedded_options: Mapping[str, Any] = config.embedded_formatter_options()

    def is_void(self, node: Element) -> bool:
        """Return True if ``node`` is a void element."""
        return self.registry.lookup(node.tag_name, self.config.ignore_first_lf).is_void

    def format(self, root: Root) -> AnnotationTable:
        """Format ``root`` in place and return its sealed annotations.

        Args:
            root (Root): The document tree; exclusively owned by this call for its
                duration.

        Returns:
            AnnotationTable: Indent levels of every visited node.

        Raises:
            MalformedTreeError: If the tree violates its invariants.
            EmbeddedFormatterError: If embedded code cannot be formatted.
        """
        validate_tree(root)
        minify_whitespace(root)

        page_mode: bool = is_page_mode(root)
        logger.debug("Formatting document (page_mode=%s)", page_mode)

        run = IndentPass(self, page_mode=page_mode)
        run.annotations.record(root, 0)
        run.traverse(root)
        run.annotations.seal()
        return run.annotations


def format_tree(
    root: Root,
    config: Config,
    *,
    formatter: EmbeddedFormatter | None = None,
) -> AnnotationTable:
    """Format ``root`` in place with a one-off `IndentEngine`."""
    return IndentEngine(config, formatter=formatter).format(root)
