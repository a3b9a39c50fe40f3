# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : runner.py
#   file_relpath : src/prettymarkup/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the formatter over text, a file, or a list of files.

One document goes through: read -> parse -> format (whitespace
pre-normalization and the indentation engine) -> serialize -> compare, and is
written back only when ``apply`` is requested and the text changed.

Design goals:
  - No CLI dependencies: nothing here imports Click or console helpers;
    presentation and process exit belong to ``prettymarkup.cli``.
  - Per-document isolation: an error in one document is logged, recorded on
    its `FormatResult` with a mapped `ExitCode`, and never stops the batch.
  - Ordered results: with ``jobs > 1`` documents are formatted on a
    `concurrent.futures.ThreadPoolExecutor` and results keep input order.

Typical usage:

    results, err = run_for_files([Path("index.html")], config=cfg, apply=False)
    if err is not None:
        # the CLI maps this to a process exit; API callers may handle it differently
        ...
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from prettymarkup.config.logging import get_logger
from prettymarkup.core.errors import PrettyMarkupError
from prettymarkup.core.exit_codes import ExitCode
from prettymarkup.engine.indent import IndentEngine
from prettymarkup.pipeline.results import FormatResult
from prettymarkup.pipeline.status import FormatStatus, WriteStatus
from prettymarkup.tree.reader import parse_markup
from prettymarkup.tree.writer import MarkupWriter

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from prettymarkup.config.logging import PrettyMarkupLogger
    from prettymarkup.config.model import Config
    from prettymarkup.engine.embedded import EmbeddedFormatter
    from prettymarkup.tree.nodes import AnnotationTable, Root

logger: PrettyMarkupLogger = get_logger(__name__)

STDIN_NAME: str = "<stdin>"


class Formatter:
    """Parse, format and serialize documents with one configuration.

    Instances are reusable and may be shared by worker threads.
    """

    def __init__(self, config: Config, *, embedded: EmbeddedFormatter | None = None) -> None:
        self.config = config
        self.engine = IndentEngine(config, formatter=embedded)
        self.writer = MarkupWriter(config, registry=self.engine.registry)

    def format_text(self, text: str) -> str:
        """Return the formatted version of ``text``.

        Raises:
            MarkupParseError: If the markup cannot be read.
            EmbeddedFormatterError: If ``<script>``/``<style>`` content cannot be
                formatted.
        """
        root: Root = parse_markup(
            text, ignore_first_lf=self.config.ignore_first_lf, registry=self.engine.registry
        )
        annotations: AnnotationTable = self.engine.format(root)
        return self.writer.serialize(root, annotations)

    def format_source(self, text: str, *, name: str = STDIN_NAME) -> FormatResult:
        """Format in-memory ``text`` and return its result; errors are recorded, not raised."""
        result = FormatResult(name=name, original=text)
        try:
            result.formatted = self.format_text(text)
        except PrettyMarkupError as exc:
            logger.error("Cannot format %s: %s", name, exc)
            return _failed(result, str(exc), exc.exit_code)

        result.status = (
            FormatStatus.UNCHANGED if result.formatted == text else FormatStatus.CHANGED
        )
        logger.debug("%s: %s", name, result.status.value)
        return result

    def format_file(self, path: Path, *, apply: bool = False) -> FormatResult:
        """Format the file at ``path``, writing it back when ``apply`` and changed.

        Exit code mapping:
            FILE_NOT_FOUND: missing path or a directory.
            PERMISSION_DENIED: insufficient permissions to read or write.
            ENCODING_ERROR: the file is not UTF-8 text.
            IO_ERROR: any other error while writing.
            The error's own code for `PrettyMarkupError` subclasses.
        """
        name: str = str(path)
        try:
            text: str = path.read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError) as exc:
            logger.error("%s: %s", exc, path)
            return _failed(FormatResult(name=name, path=path), str(exc), ExitCode.FILE_NOT_FOUND)
        except PermissionError as exc:
            logger.error("%s: %s", exc, path)
            return _failed(
                FormatResult(name=name, path=path), str(exc), ExitCode.PERMISSION_DENIED
            )
        except UnicodeDecodeError as exc:
            logger.error("Encoding error while reading %s: %s", path, exc)
            return _failed(FormatResult(name=name, path=path), str(exc), ExitCode.ENCODING_ERROR)

        result: FormatResult = self.format_source(text, name=name)
        result.path = path
        if apply and result.changed and result.formatted is not None:
            write_result(result)
        return result


def _failed(result: FormatResult, message: str, code: ExitCode) -> FormatResult:
    result.status = FormatStatus.ERROR
    result.error = message
    result.exit_code = code
    return result


def write_result(result: FormatResult) -> FormatResult:
    """Write the formatted text of ``result`` back to its file.

    Write failures are recorded on ``result`` (``WriteStatus.FAILED``).
    """
    if result.path is None or result.formatted is None:
        return result
    try:
        with open(result.path, "w", encoding="utf-8", newline="") as f:
            f.write(result.formatted)
    except PermissionError as exc:
        logger.error("%s: %s", exc, result.path)
        result.write_status = WriteStatus.FAILED
        result.error = str(exc)
        result.exit_code = ExitCode.PERMISSION_DENIED
        return result
    except OSError as exc:
        logger.error("Cannot write %s: %s", result.path, exc)
        result.write_status = WriteStatus.FAILED
        result.error = str(exc)
        result.exit_code = ExitCode.IO_ERROR
        return result

    result.write_status = WriteStatus.WRITTEN
    logger.debug("Wrote %d characters to %s", len(result.formatted), result.path)
    return result


def format_text(
    text: str,
    config: Config,
    *,
    embedded: EmbeddedFormatter | None = None,
) -> str:
    """Return the formatted version of ``text`` (errors propagate)."""
    return Formatter(config, embedded=embedded).format_text(text)


def run_for_files(
    paths: Sequence[Path],
    *,
    config: Config,
    apply: bool = False,
    jobs: int = 1,
    embedded: EmbeddedFormatter | None = None,
) -> tuple[list[FormatResult], ExitCode | None]:
    """Format each file and return ``(results, encountered_error_code)``.

    Args:
        paths: Files to format.
        config: The run configuration.
        apply: Write changed files back.
        jobs: Number of worker threads (``1`` formats sequentially).
        embedded: Optional embedded-content formatter.

    Returns:
        tuple[list[FormatResult], ExitCode | None]: Results in input order, and
        the first non-success exit code encountered (``None`` if all succeeded).

    Notes:
        This helper never prints; it only logs.
    """
    formatter = Formatter(config, embedded=embedded)
    # Build the registry tables before any worker thread asks for them.
    formatter.engine.registry.warm()

    if jobs > 1 and len(paths) > 1:
        logger.debug("Formatting %d files with %d workers", len(paths), jobs)
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            results: list[FormatResult] = list(
                pool.map(lambda p: formatter.format_file(p, apply=apply), paths)
            )
    else:
        results = [formatter.format_file(path, apply=apply) for path in paths]

    encountered_error_code: ExitCode | None = None
    for result in results:
        if result.failed:
            encountered_error_code = encountered_error_code or result.exit_code

    return results, encountered_error_code
