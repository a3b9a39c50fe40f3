# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : registry.py
#   file_relpath : src/prettymarkup/tags/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tag behavior registry.

Maps a tag name and a formatting mode (``ignore_first_lf``) to an immutable
[`TagBehavior`][prettymarkup.tags.behavior.TagBehavior].

Notes:
    * The table for a mode is built lazily on first lookup for that mode and
      cached for the lifetime of the registry; two modes means at most two
      tables.
    * Table construction is guarded by an ``RLock`` so concurrent first
      lookups build a table exactly once. After that, lookups only read.
    * Tables are exposed as ``MappingProxyType`` (read-only). Behaviors are
      frozen dataclasses shared by every caller.
    * Unknown tag names resolve to a shared default behavior; this is never an
      error.

Typical usage:
    ```python
    from prettymarkup.tags import get_tag_behavior

    get_tag_behavior("BR").is_void  # True
    get_tag_behavior("my-widget").content_type  # TagContentType.PARSABLE_DATA
    ```
"""

from __future__ import annotations

from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from prettymarkup.config.logging import get_logger
from prettymarkup.tags.behavior import TagBehavior, TagContentType

if TYPE_CHECKING:
    from collections.abc import Mapping

    from prettymarkup.config.logging import PrettyMarkupLogger

logger: PrettyMarkupLogger = get_logger(__name__)

DEFAULT_TAG_BEHAVIOR: Final[TagBehavior] = TagBehavior()

_VOID_TAGS: Final[tuple[str, ...]] = (
    "base",
    "meta",
    "area",
    "embed",
    "link",
    "img",
    "input",
    "param",
    "hr",
    "br",
    "source",
    "track",
    "wbr",
)

# Block-level start tags that implicitly close an open <p>.
_P_CLOSERS: Final[tuple[str, ...]] = (
    "address",
    "article",
    "aside",
    "blockquote",
    "div",
    "dl",
    "fieldset",
    "footer",
    "form",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "header",
    "hgroup",
    "hr",
    "main",
    "nav",
    "ol",
    "p",
    "pre",
    "section",
    "table",
    "ul",
)

_RUBY_SIBLINGS: Final[tuple[str, ...]] = ("rb", "rt", "rtc", "rp")


def build_tag_behaviors(ignore_first_lf: bool) -> dict[str, TagBehavior]:
    """Build the behavior table for one formatting mode.

    Deterministic and side-effect free.

    Args:
        ignore_first_lf (bool): Whether ``<pre>``, ``<listing>`` and ``<textarea>``
            drop a linefeed that directly follows their start tag.

    Returns:
        dict[str, TagBehavior]: Behaviors keyed by lower-case tag name.
    """
    table: dict[str, TagBehavior] = {name: TagBehavior.build(is_void=True) for name in _VOID_TAGS}
    b = TagBehavior.build
    table.update(
        {
            "p": b(closed_by_children=_P_CLOSERS, closed_by_parent=True),
            "thead": b(closed_by_children=("tbody", "tfoot")),
            "tbody": b(closed_by_children=("tbody", "tfoot"), closed_by_parent=True),
            "tfoot": b(closed_by_children=("tbody",), closed_by_parent=True),
            "tr": b(
                closed_by_children=("tr",),
                required_parents=("tbody", "tfoot", "thead"),
                closed_by_parent=True,
            ),
            "td": b(closed_by_children=("td", "th"), closed_by_parent=True),
            "th": b(closed_by_children=("td", "th"), closed_by_parent=True),
            "col": b(required_parents=("colgroup",), is_void=True),
            "svg": b(implicit_namespace_prefix="svg"),
            "math": b(implicit_namespace_prefix="math"),
            "li": b(closed_by_children=("li",), closed_by_parent=True),
            "dt": b(closed_by_children=("dt", "dd")),
            "dd": b(closed_by_children=("dt", "dd"), closed_by_parent=True),
            "rb": b(closed_by_children=_RUBY_SIBLINGS, closed_by_parent=True),
            "rt": b(closed_by_children=_RUBY_SIBLINGS, closed_by_parent=True),
            "rtc": b(closed_by_children=("rb", "rtc", "rp"), closed_by_parent=True),
            "rp": b(closed_by_children=_RUBY_SIBLINGS, closed_by_parent=True),
            "optgroup": b(closed_by_children=("optgroup",), closed_by_parent=True),
            "option": b(closed_by_children=("option", "optgroup"), closed_by_parent=True),
            "pre": b(ignore_first_lf=ignore_first_lf),
            "listing": b(ignore_first_lf=ignore_first_lf),
            "style": b(content_type=TagContentType.RAW_TEXT),
            "script": b(content_type=TagContentType.RAW_TEXT),
            "title": b(content_type=TagContentType.ESCAPABLE_RAW_TEXT),
            "textarea": b(
                content_type=TagContentType.ESCAPABLE_RAW_TEXT,
                ignore_first_lf=ignore_first_lf,
            ),
        }
    )
    return table


class TagBehaviorRegistry:
    """Lazily built, per-mode tag behavior tables with a thread-safe accessor.

    Each instance owns its own cache; the module exposes a process-wide
    instance through `get_tag_behavior` and `get_registry`.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._tables: dict[bool, Mapping[str, TagBehavior]] = {}
        self.build_count: int = 0

    def table(self, ignore_first_lf: bool) -> Mapping[str, TagBehavior]:
        """Return the (read-only) behavior table for a mode, building it once.

        Args:
            ignore_first_lf (bool): The formatting mode.

        Returns:
            Mapping[str, TagBehavior]: A ``MappingProxyType`` keyed by lower-case tag name.
        """
        mode: bool = bool(ignore_first_lf)
        cached = self._tables.get(mode)
        if cached is not None:
            return cached
        with self._lock:
            # Re-check under the lock: another thread may have built it meanwhile.
            cached = self._tables.get(mode)
            if cached is None:
                cached = MappingProxyType(build_tag_behaviors(mode))
                self._tables[mode] = cached
                self.build_count += 1
                logger.debug(
                    "Built tag behavior table (ignore_first_lf=%s): %d tags", mode, len(cached)
                )
            return cached

    def lookup(self, tag_name: str, ignore_first_lf: bool = False) -> TagBehavior:
        """Return the behavior of ``tag_name`` (case-insensitive) under a mode.

        Unknown names yield `DEFAULT_TAG_BEHAVIOR`.
        """
        return self.table(ignore_first_lf).get(tag_name.lower(), DEFAULT_TAG_BEHAVIOR)

    def warm(self) -> None:
        """Build both mode tables eagerly (e.g. before fanning out to threads)."""
        self.table(False)
        self.table(True)


_registry: Final[TagBehaviorRegistry] = TagBehaviorRegistry()


def get_registry() -> TagBehaviorRegistry:
    """Return the process-wide tag behavior registry."""
    return _registry


def get_tag_behavior(tag_name: str, ignore_first_lf: bool = False) -> TagBehavior:
    """Look up ``tag_name`` in the process-wide registry."""
    return _registry.lookup(tag_name, ignore_first_lf)
