# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : results.py
#   file_relpath : src/prettymarkup/pipeline/results.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Result of formatting one document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from prettymarkup.core.exit_codes import ExitCode
from prettymarkup.pipeline.status import FormatStatus, WriteStatus
from prettymarkup.utils.diff import make_patch

if TYPE_CHECKING:
    from pathlib import Path


@dataclass
class FormatResult:
    """Outcome of formatting one document.

    Attributes:
        name (str): Display name (the file path, or ``<stdin>``).
        path (Path | None): Source file, ``None`` for in-memory/stdin input.
        status (FormatStatus): Whether the formatted text differs from the input.
        original (str | None): The input text, if it could be read.
        formatted (str | None): The formatted text, if formatting succeeded.
        write_status (WriteStatus): Whether the formatted text was written back.
        error (str | None): Error message when ``status`` is ``ERROR``.
        exit_code (ExitCode): Exit code describing this result.
    """

    name: str
    path: Path | None = None
    status: FormatStatus = FormatStatus.UNCHANGED
    original: str | None = None
    formatted: str | None = None
    write_status: WriteStatus = WriteStatus.SKIPPED
    error: str | None = None
    exit_code: ExitCode = ExitCode.SUCCESS

    @property
    def changed(self) -> bool:
        """Whether formatting produced a different text."""
        return self.status == FormatStatus.CHANGED

    @property
    def failed(self) -> bool:
        """Whether the document could not be formatted (or written)."""
        return self.status == FormatStatus.ERROR or self.write_status == WriteStatus.FAILED

    def patch(self) -> list[str]:
        """Return the unified diff between input and formatted text (empty if unchanged)."""
        if self.original is None or self.formatted is None:
            return []
        return make_patch(self.original, self.formatted, self.name)

    def summary(self) -> str:
        """Return a one-line plain-text summary."""
        if self.error:
            return f"{self.name}: {self.status.value}: {self.error}"
        if self.write_status == WriteStatus.WRITTEN:
            return f"{self.name}: {self.status.value} ({self.write_status.value})"
        return f"{self.name}: {self.status.value}"
