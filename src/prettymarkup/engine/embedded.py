# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : embedded.py
#   file_relpath : src/prettymarkup/engine/embedded.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Delegated formatting of ``<script>`` and ``<style>`` content.

The indentation engine treats the code inside these elements as a black box:
it guesses a dialect from the element attributes, hands the flattened text to
an `EmbeddedFormatter`, re-indents the result and splices it back in.

Any callable matching the protocol can be plugged in (for instance a wrapper
around an external code formatter). `DefaultEmbeddedFormatter` ships with the
package: it pretty-prints JSON and normalizes indentation of everything else.

Formatter failures are not handled here; the engine wraps them in
[`EmbeddedFormatterError`][prettymarkup.core.errors.EmbeddedFormatterError].
"""

from __future__ import annotations

import json
import re
import textwrap
from typing import TYPE_CHECKING, Any, Final, Protocol, runtime_checkable

from prettymarkup.config.logging import get_logger
from prettymarkup.tree.nodes import Element, is_element

if TYPE_CHECKING:
    from collections.abc import Mapping

    from prettymarkup.config.logging import PrettyMarkupLogger

logger: PrettyMarkupLogger = get_logger(__name__)

EMBEDDED_CONTAINERS: Final[frozenset[str]] = frozenset({"script", "style"})

# <script type="..."> values that denote executable JavaScript.
_JAVASCRIPT_TYPES: Final[frozenset[str]] = frozenset(
    {
        "",
        "application/ecmascript",
        "application/javascript",
        "application/x-javascript",
        "module",
        "text/babel",
        "text/ecmascript",
        "text/javascript",
        "text/jsx",
    }
)

_SCRIPT_END_TAG: Final[re.Pattern[str]] = re.compile(r"</script\s*>", re.IGNORECASE)


@runtime_checkable
class EmbeddedFormatter(Protocol):
    """Protocol for embedded-content formatters.

    A formatter receives the raw text of one ``<script>``/``<style>`` element,
    a dialect hint and pass-through style options, and returns the formatted
    text. It may raise on invalid input (e.g. a syntax error); it must not
    indent its output for the surrounding document.
    """

    def __call__(self, source: str, dialect: str, options: Mapping[str, Any]) -> str:
        """Format ``source`` written in ``dialect``.

        Args:
            source (str): The embedded code.
            dialect (str): One of ``css``, ``scss``, ``less``, ``babel``, ``json``,
                ``typescript``.
            options (Mapping[str, Any]): Style options (``indent_unit``,
                ``single_quote``, ``print_width`` and any ``[embedded]`` config keys).

        Returns:
            str: The formatted code.
        """
        ...


class DefaultEmbeddedFormatter:
    """Dependency-free formatter used when no external one is configured.

    * ``json`` is parsed and re-serialized with the document indent unit;
      invalid JSON raises ``json.JSONDecodeError``.
    * Every other dialect is dedented, stripped of blank leading/trailing
      lines and of trailing whitespace; the code itself is left as written.
    """

    def __call__(self, source: str, dialect: str, options: Mapping[str, Any]) -> str:
        if dialect == "json":
            data: Any = json.loads(source)
            indent: str = str(options.get("indent_unit", "  "))
            return json.dumps(data, indent=indent, ensure_ascii=False) + "\n"

        lines: list[str] = [line.rstrip() for line in source.splitlines()]
        while lines and not lines[0]:
            lines.pop(0)
        while lines and not lines[-1]:
            lines.pop()
        if not lines:
            return ""
        return textwrap.dedent("\n".join(lines)) + "\n"


def _attr(element: Element, name: str) -> str:
    value = element.attributes.get(name)
    return value.strip().lower() if value else ""


def guess_dialect(element: Element) -> str | None:
    """Guess the formatter dialect of an embedded container from its attributes.

    Returns:
        str | None: The dialect, or ``None`` when the element is not an embedded
        container or declares content the formatter does not understand
        (e.g. ``<script type="text/x-template">``).
    """
    if is_element(element, "style"):
        style_type: str = _attr(element, "type")
        if style_type == "text/x-scss":
            return "scss"
        if style_type == "text/less":
            return "less"
        lang: str = _attr(element, "lang")
        if lang in ("scss", "less"):
            return lang
        return "css"

    if is_element(element, "script"):
        script_type: str = _attr(element, "type")
        if "json" in script_type:
            return "json"
        if script_type == "application/x-typescript":
            return "typescript"
        if _attr(element, "lang") in ("ts", "tsx"):
            return "typescript"
        if script_type in _JAVASCRIPT_TYPES:
            return "babel"
        logger.debug("Leaving <script type=%r> verbatim", script_type)
        return None

    return None


def indent_formatted(text: str, level: int, indent_unit: str) -> str:
    """Prefix every non-blank line of ``text`` with ``level`` indent units."""
    prefix: str = indent_unit * max(level, 0)
    return "\n".join(
        prefix + line if line.strip() else line for line in text.split("\n")
    )


def escape_script_end_tags(text: str) -> str:
    """Escape ``</script>`` inside script content so it does not close the element."""
    return _SCRIPT_END_TAG.sub("<\\/script>", text)
