# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging helpers: level parsing, environment override and the TRACE method."""

from __future__ import annotations

import logging

import pytest

from prettymarkup.config.logging import (
    ENV_LOG_LEVEL,
    PACKAGE_LOGGER_NAME,
    TRACE_LEVEL,
    ChalkFormatter,
    PrettyMarkupLogger,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
    setup_logging,
)
from tests.conftest import parametrize


@parametrize(
    "value, expected",
    [
        ("TRACE", TRACE_LEVEL),
        (" debug ", logging.DEBUG),
        ("warn", logging.WARNING),
        ("15", 15),
        ("chatty", None),
    ],
)
def test_parse_log_level(value: str, expected: int | None) -> None:
    assert parse_log_level(value) == expected


def test_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_env_log_level() is None
    monkeypatch.setenv(ENV_LOG_LEVEL, "info")
    assert resolve_env_log_level() == logging.INFO


def test_loggers_are_prettymarkup_loggers() -> None:
    logger = get_logger("prettymarkup.engine.indent")
    assert isinstance(logger, PrettyMarkupLogger)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_setup_logging_configures_the_package_logger_only() -> None:
    root_handlers = list(logging.getLogger().handlers)
    try:
        setup_logging(level=logging.INFO)
        setup_logging(level=logging.INFO)
        package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        assert package_logger.level == logging.INFO
        assert len(package_logger.handlers) == 1
        assert isinstance(package_logger.handlers[0].formatter, ChalkFormatter)
        assert logging.getLogger().handlers == root_handlers
    finally:
        setup_logging(level=TRACE_LEVEL)


class _RecordingHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=TRACE_LEVEL)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


def test_trace_records_below_debug() -> None:
    logger = get_logger("prettymarkup.tests.trace")
    handler = _RecordingHandler()
    logger.addHandler(handler)
    logger.setLevel(TRACE_LEVEL)
    try:
        logger.trace("visiting %s", "div")
        logger.setLevel(logging.DEBUG)
        logger.trace("hidden")
    finally:
        logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
    assert [(r.levelno, r.getMessage()) for r in handler.records] == [(TRACE_LEVEL, "visiting div")]
