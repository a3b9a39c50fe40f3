# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : api.py
#   file_relpath : src/prettymarkup/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public PrettyMarkup API (stable surface).

This module exposes a small, typed API for running the formatter
programmatically without going through the CLI. Functions here are thin
wrappers around `prettymarkup.pipeline`.

Configuration contract
----------------------
Public functions accept either a frozen [`prettymarkup.config.Config`][] or a
plain mapping mirroring the TOML shape; mappings are merged over the packaged
defaults. Keyword overrides (``tab_width=4``) win over both.

```python
from prettymarkup import api

text = api.format_string("<div><p>A</p></div>", tab_width=4)
run = api.check(["templates/index.html"], config={"formatting": {"use_tabs": True}})
```
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from prettymarkup.config.model import Config, MutableConfig
from prettymarkup.constants import PRETTYMARKUP_VERSION
from prettymarkup.pipeline.runner import Formatter, run_for_files
from prettymarkup.tags.registry import get_tag_behavior

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from prettymarkup.core.exit_codes import ExitCode
    from prettymarkup.engine.embedded import EmbeddedFormatter
    from prettymarkup.pipeline.results import FormatResult
    from prettymarkup.tags.behavior import TagBehavior


@dataclass(frozen=True)
class RunResult:
    """Aggregate result of a `check`/`format_files` run.

    Attributes:
        files (tuple[FormatResult, ...]): Per-file results in input order.
        error_code (ExitCode | None): First error encountered, if any.
    """

    files: tuple[FormatResult, ...]
    error_code: ExitCode | None

    @property
    def changed(self) -> tuple[FormatResult, ...]:
        """Results whose formatted text differs from the input."""
        return tuple(r for r in self.files if r.changed)

    @property
    def had_errors(self) -> bool:
        """Whether any document failed."""
        return self.error_code is not None


def resolve_config(
    config: Config | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Config:
    """Return a frozen `Config` from a config object or TOML-shaped mapping.

    Args:
        config: A frozen config, a mapping shaped like the TOML file, or ``None``
            for the packaged defaults.
        **overrides: Flat overrides such as ``tab_width=4`` or ``use_tabs=True``.
    """
    if isinstance(config, Config):
        draft: MutableConfig = config.thaw()
    else:
        draft = MutableConfig.from_defaults()
        if config:
            draft.apply_toml(dict(config))
    draft.apply_overrides(overrides)
    return draft.freeze()


def format_string(
    text: str,
    *,
    config: Config | Mapping[str, Any] | None = None,
    embedded: EmbeddedFormatter | None = None,
    **overrides: Any,
) -> str:
    """Return ``text`` formatted.

    Raises:
        MarkupParseError: If the markup cannot be read.
        EmbeddedFormatterError: If embedded code cannot be formatted.
    """
    return Formatter(resolve_config(config, **overrides), embedded=embedded).format_text(text)


def _run(
    paths: Iterable[Path | str],
    *,
    apply: bool,
    config: Config | Mapping[str, Any] | None,
    jobs: int,
    embedded: EmbeddedFormatter | None,
    overrides: Mapping[str, Any],
) -> RunResult:
    results, error_code = run_for_files(
        [Path(p) for p in paths],
        config=resolve_config(config, **overrides),
        apply=apply,
        jobs=jobs,
        embedded=embedded,
    )
    return RunResult(files=tuple(results), error_code=error_code)


def check(
    paths: Iterable[Path | str],
    *,
    config: Config | Mapping[str, Any] | None = None,
    jobs: int = 1,
    embedded: EmbeddedFormatter | None = None,
    **overrides: Any,
) -> RunResult:
    """Report which files would be reformatted, without writing anything."""
    return _run(
        paths, apply=False, config=config, jobs=jobs, embedded=embedded, overrides=overrides
    )


def format_files(
    paths: Iterable[Path | str],
    *,
    config: Config | Mapping[str, Any] | None = None,
    jobs: int = 1,
    embedded: EmbeddedFormatter | None = None,
    **overrides: Any,
) -> RunResult:
    """Format files in place (only changed files are written)."""
    return _run(
        paths, apply=True, config=config, jobs=jobs, embedded=embedded, overrides=overrides
    )


def describe_tag(tag_name: str, *, ignore_first_lf: bool = False) -> TagBehavior:
    """Return the formatting behavior of ``tag_name`` (default behavior if unknown)."""
    return get_tag_behavior(tag_name, ignore_first_lf)


def get_version() -> str:
    """Return the installed PrettyMarkup version."""
    return PRETTYMARKUP_VERSION
