# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the PrettyMarkup test suite.

This file sets up global fixtures and helpers and customizes the logging
configuration for test runs.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs with `make_config` (or `prettymarkup.config.MutableConfig`
      followed by ``freeze()``).
    - Do **not** mutate a frozen `Config`. Call `Config.thaw()`, edit the
      returned `MutableConfig`, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from prettymarkup.config import MutableConfig, logging
from prettymarkup.engine.indent import IndentEngine
from prettymarkup.tree.reader import parse_markup
from prettymarkup.tree.writer import MarkupWriter

if TYPE_CHECKING:
    from prettymarkup.config import Config
    from prettymarkup.engine.embedded import EmbeddedFormatter
    from prettymarkup.tree.nodes import AnnotationTable, Root

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_prettymarkup_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("PRETTYMARKUP_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE for all tests so every code path logs."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from the packaged defaults and ``overrides``.

    Args:
        **overrides (Any): Flat overrides such as ``tab_width=4``.

    Returns:
        Config: The frozen configuration.
    """
    return MutableConfig.from_defaults().apply_overrides(overrides).freeze()


def format_root(
    root: Root,
    *,
    embedded: EmbeddedFormatter | None = None,
    **overrides: Any,
) -> AnnotationTable:
    """Run the indentation engine over a hand-built tree."""
    return IndentEngine(make_config(**overrides), formatter=embedded).format(root)


def reformat(text: str, *, embedded: EmbeddedFormatter | None = None, **overrides: Any) -> str:
    """Parse, format and serialize ``text``."""
    config: Config = make_config(**overrides)
    engine = IndentEngine(config, formatter=embedded)
    root: Root = parse_markup(text, ignore_first_lf=config.ignore_first_lf)
    annotations: AnnotationTable = engine.format(root)
    return MarkupWriter(config).serialize(root, annotations)
