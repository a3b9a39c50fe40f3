# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : errors.py
#   file_relpath : src/prettymarkup/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the PrettyMarkup formatting core.

Taxonomy:
    - `MalformedTreeError`: the input tree violates its structural invariants
      (shared or cyclic nodes, children on leaf nodes). Fatal for the document.
    - `EmbeddedFormatterError`: the embedded-content formatter rejected a
      ``<script>``/``<style>`` block. Fatal for the document only.
    - `MarkupParseError`: the reader could not build a tree from the input.
    - `ConfigError`: a configuration source is unreadable or invalid.

Unrecognized tag names are never an error; lookups fall back to a default
behavior.

The engine raises immediately and never retries: formatting is deterministic,
so retrying the same input cannot succeed. Batch callers decide whether to
skip, report or abort (see `prettymarkup.pipeline.runner`).
"""

from __future__ import annotations

from dataclasses import dataclass

from prettymarkup.core.exit_codes import ExitCode


@dataclass(frozen=True)
class SourcePosition:
    """1-based line and 0-based column of a node in its source text."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class PrettyMarkupError(Exception):
    """Base class for all PrettyMarkup errors."""

    exit_code: ExitCode = ExitCode.FAILURE


class MalformedTreeError(PrettyMarkupError):
    """The document tree violates its invariants (acyclic, single parent per node)."""

    exit_code = ExitCode.MALFORMED_TREE


class MarkupParseError(PrettyMarkupError):
    """The reader failed to build a tree from the markup text."""

    exit_code = ExitCode.PIPELINE_ERROR


class ConfigError(PrettyMarkupError):
    """A configuration file is missing, unreadable or malformed."""

    exit_code = ExitCode.CONFIG_ERROR


class EmbeddedFormatterError(PrettyMarkupError):
    """The embedded-content formatter failed on a ``<script>`` or ``<style>`` block.

    The original exception is kept as ``__cause__``; its message is surfaced
    verbatim, prefixed with the element and its source position when known.

    Attributes:
        dialect (str): The dialect hint handed to the formatter (e.g. ``"json"``).
        tag_name (str): Tag name of the element whose content failed.
        position (SourcePosition | None): Location of the element, if the reader
            recorded one.
    """

    exit_code = ExitCode.EMBEDDED_FORMAT_ERROR

    def __init__(
        self,
        message: str,
        *,
        dialect: str,
        tag_name: str,
        position: SourcePosition | None = None,
    ) -> None:
        self.dialect = dialect
        self.tag_name = tag_name
        self.position = position
        where: str = f"<{tag_name}>" if position is None else f"<{tag_name}> at {position}"
        super().__init__(f"{where} ({dialect}): {message}")
