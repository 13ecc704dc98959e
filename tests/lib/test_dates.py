# topmark:header:start
#
#   project      : AxisConf
#   file         : test_dates.py
#   file_relpath : tests/lib/test_dates.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the date <-> millisecond helpers."""

from __future__ import annotations

from typing import Any

from axisconf.constants import ONEDAY, ONEHOUR
from axisconf.lib.dates import (
    clean_date,
    date_tick0,
    date_time_to_ms,
    is_date_time,
    is_number,
    ms_to_date_time,
)
from tests.conftest import parametrize


@parametrize(
    "value, expected",
    [
        ("1970-01-01", 0),
        ("1970-01-02", ONEDAY),
        ("1970-01-01 01:00", ONEHOUR),
        ("1970-01-01T00:00:01.5Z", 1500),
        ("2000-01-01", 946_684_800_000),
        ("2000", 946_684_800_000),
        (86_400_000, ONEDAY),
    ],
)
def test_date_time_to_ms(value: Any, expected: float) -> None:
    assert date_time_to_ms(value) == expected


@parametrize("value", ["2020-02-30", "yesterday", "", None, True, [2020], float("nan")])
def test_invalid_dates(value: Any) -> None:
    assert date_time_to_ms(value) is None
    assert not is_date_time(value)


@parametrize(
    "ms, text",
    [
        (0, "1970-01-01"),
        (10, "1970-01-01 00:00:00.01"),
        (3, "1970-01-01 00:00:00.003"),
        (1.5, "1970-01-01 00:00:00.0015"),
        (ONEHOUR, "1970-01-01 01:00"),
        (ONEHOUR + 1000, "1970-01-01 01:00:01"),
        (-ONEDAY, "1969-12-31"),
    ],
)
def test_ms_to_date_time(ms: float, text: str) -> None:
    assert ms_to_date_time(ms) == text


def test_ms_to_date_time_out_of_range() -> None:
    assert ms_to_date_time(1e20) is None


def test_is_number_excludes_bools_and_non_finite() -> None:
    assert is_number(3)
    assert is_number(-2.5)
    assert not is_number(True)
    assert not is_number(float("inf"))
    assert not is_number("3")


def test_clean_date() -> None:
    assert clean_date(0) == "1970-01-01"
    assert clean_date("2020-01-31 12:00") == "2020-01-31 12:00"
    assert clean_date("nope", "2000-01-01") == "2000-01-01"
    assert clean_date(None) is None


def test_date_tick0() -> None:
    assert date_tick0() == "2000-01-01"
    assert date_tick0(sunday=True) == "2000-01-02"
