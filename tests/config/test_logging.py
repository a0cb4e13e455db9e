# topmark:header:start
#
#   project      : CodePipeline Requests
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 CodePipeline Requests contributors
#
# topmark:header:end

"""Tests for log level parsing and logger setup."""

from __future__ import annotations

import logging as std_logging

import pytest

from codepipeline_requests.config import logging
from codepipeline_requests.constants import LOG_LEVEL_ENV_VAR
from tests.conftest import parametrize


@parametrize(
    ("value", "expected"),
    [
        ("TRACE", logging.TRACE_LEVEL),
        ("debug", std_logging.DEBUG),
        (" Warn ", std_logging.WARNING),
        ("20", 20),
        ("", None),
        (None, None),
        ("loud", None),
    ],
)
def test_parse_log_level(value: str | None, expected: int | None) -> None:
    assert logging.parse_log_level(value) == expected


def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    assert logging.resolve_env_log_level() is None
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")
    assert logging.resolve_env_log_level() == std_logging.DEBUG


def test_get_logger_has_trace() -> None:
    logger = logging.get_logger("codepipeline_requests.tests.trace")
    assert isinstance(logger, logging.PipelineLogger)
    assert std_logging.getLevelName(logging.TRACE_LEVEL) == "TRACE"


def test_setup_logging_installs_single_stderr_handler() -> None:
    root = std_logging.getLogger()
    saved_level = root.level
    try:
        logging.setup_logging(level=std_logging.INFO)
        logging.setup_logging(level=std_logging.INFO)
        assert root.level == std_logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, logging.ChalkFormatter)
    finally:
        logging.setup_logging(level=saved_level)


def test_chalk_formatter_keeps_message_text() -> None:
    formatter = logging.ChalkFormatter(logging.LOG_FORMAT)
    record = std_logging.LogRecord("x", std_logging.WARNING, __file__, 1, "hello %s", ("world",), None)
    assert "[WARNING] hello world" in formatter.format(record)
