# topmark:header:start
#
#   project      : AxisConf
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TRACE level, env level resolution and axis-tagged records."""

from __future__ import annotations

import logging as std_logging

import pytest

from axisconf.config import logging
from tests.conftest import parametrize


@parametrize(
    "raw, expected",
    [
        ("", None),
        ("trace", logging.TRACE_LEVEL),
        (" Warn ", std_logging.WARNING),
        ("10", std_logging.DEBUG),
        ("loud", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None
) -> None:
    monkeypatch.setenv(logging.LOG_LEVEL_ENV, raw)
    assert logging.resolve_env_log_level() == expected


def test_trace_level_is_registered() -> None:
    assert std_logging.getLevelName(logging.TRACE_LEVEL) == "TRACE"
    assert isinstance(logging.get_logger("axisconf.test"), logging.AxisconfLogger)


def _record(level: int = std_logging.WARNING) -> std_logging.LogRecord:
    return std_logging.LogRecord("axisconf.test", level, __file__, 1, "hidden %s", ("trace",), None)


def test_axis_context_tags_records() -> None:
    record = _record()
    assert logging.current_axis() is None

    with logging.axis_context("y2"):
        assert logging.current_axis() == "y2"
        logging.AxisContextFilter().filter(record)
    assert logging.current_axis() is None
    assert getattr(record, "axis") == "y2"

    untagged = _record()
    logging.AxisContextFilter().filter(untagged)
    assert getattr(untagged, "axis") == "-"


def test_formatter_prints_axis_and_level() -> None:
    formatter = logging.ChalkFormatter(logging.LOG_FORMAT)
    record = _record()
    with logging.axis_context("x"):
        logging.AxisContextFilter().filter(record)
    assert "[WARNING] [x] hidden trace" in formatter.format(record)

    # records that bypassed the filter still format
    assert "[-] hidden trace" in formatter.format(_record(std_logging.ERROR))
