# topmark:header:start
#
#   project      : AxisConf
#   file         : dates.py
#   file_relpath : src/axisconf/lib/dates.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Date <-> millisecond helpers for date axes.

Date axes store their range as date strings (``"2020-01-31 12:00"``) and do
all arithmetic on milliseconds since the Unix epoch (UTC, no leap seconds).

Conventions:
    * Strings are parsed as ``YYYY[-MM[-DD[( |T)HH[:MM[:SS[.fff]]]]]]``; a trailing
      time zone designator is accepted and ignored.
    * Numbers (``int``/``float``, not ``bool``) are milliseconds.
    * Values outside the representable window (years 1..9999) are rejected.
"""

from __future__ import annotations

import math
import re
from datetime import date, timedelta
from typing import Any, Final

from axisconf.constants import ONEDAY, ONEHOUR, ONEMIN, ONESEC

EPOCH: Final[date] = date(1970, 1, 1)

MIN_MS: Final[float] = (date(1, 1, 1) - EPOCH).days * ONEDAY
MAX_MS: Final[float] = ((date(9999, 12, 31) - EPOCH).days + 1) * ONEDAY - 1

DATETIME_RE: Final[re.Pattern[str]] = re.compile(
    r"^\s*(\d{4})"
    r"(?:-(\d?\d)"
    r"(?:-(\d?\d)"
    r"(?:[ Tt]([01]?\d|2[0-3])"
    r"(?::([0-5]\d)"
    r"(?::([0-5]\d(?:\.\d+)?))?"
    r"(?:Z|z|[+\-]\d\d(?::?\d\d)?)?"
    r")?)?)?)?\s*$"
)

DEFAULT_DATE_RANGE: Final[tuple[str, str]] = ("2000-01-01", "2001-01-01")


def is_number(value: Any) -> bool:
    """Return True for finite ``int``/``float`` values (``bool`` excluded)."""
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def date_time_to_ms(value: Any) -> float | None:
    """Convert a date string or millisecond number into milliseconds.

    Args:
        value (Any): Date string or millisecond number.

    Returns:
        float | None: Milliseconds since the epoch, or ``None`` when ``value`` is
        not a valid date.
    """
    if is_number(value):
        ms = float(value)
        return ms if MIN_MS <= ms <= MAX_MS else None
    if not isinstance(value, str):
        return None

    match = DATETIME_RE.match(value)
    if match is None:
        return None
    year_s, month_s, day_s, hour_s, minute_s, second_s = match.groups()

    try:
        day_value = date(int(year_s), int(month_s or 1), int(day_s or 1))
    except ValueError:
        return None

    ms: float = (day_value - EPOCH).days * ONEDAY
    ms += int(hour_s or 0) * ONEHOUR
    ms += int(minute_s or 0) * ONEMIN
    ms += float(second_s or 0) * ONESEC
    return ms


def is_date_time(value: Any) -> bool:
    """Return True if ``value`` can be interpreted as a date."""
    return date_time_to_ms(value) is not None


def ms_to_date_time(ms: float) -> str | None:
    """Render milliseconds as the shortest complete date string.

    Time parts are only included when non-zero, and fractional seconds are
    trimmed to their significant digits (down to a tenth of a millisecond)::

        0       -> "1970-01-01"
        10      -> "1970-01-01 00:00:00.01"
        3600000 -> "1970-01-01 01:00"

    Args:
        ms (float): Milliseconds since the epoch.

    Returns:
        str | None: The date string, or ``None`` when out of range.
    """
    if not is_number(ms) or not MIN_MS <= ms <= MAX_MS:
        return None

    msec_tenths: int = math.floor(((ms + 0.05) % 1) * 10)
    ms_rounded: int = round(ms - msec_tenths / 10)

    days, time_ms = divmod(ms_rounded, ONEDAY)
    date_str: str = (EPOCH + timedelta(days=days)).isoformat()

    hours: int = time_ms // ONEHOUR
    minutes: int = (time_ms // ONEMIN) % 60
    seconds: int = (time_ms // ONESEC) % 60
    msec10: int = (time_ms % ONESEC) * 10 + msec_tenths

    if not (hours or minutes or seconds or msec10):
        return date_str

    date_str += f" {hours:02d}:{minutes:02d}"
    if seconds or msec10:
        date_str += f":{seconds:02d}"
        if msec10:
            digits = 4
            while msec10 % 10 == 0:
                digits -= 1
                msec10 //= 10
            date_str += "." + str(msec10).zfill(digits)
    return date_str


def clean_date(value: Any, dflt: str | None = None) -> str | None:
    """Normalize a date-like value to a date string.

    Millisecond numbers are rendered with `ms_to_date_time`; valid date strings
    are returned unchanged; anything else yields ``dflt``.
    """
    if is_number(value):
        return ms_to_date_time(value) or dflt
    if is_date_time(value):
        return value
    return dflt


def date_tick0(sunday: bool = False) -> str:
    """Return the default tick0 for date axes.

    Args:
        sunday (bool): Align to a Sunday (for weekly tick spacing) instead of
            the Saturday the default lands on.

    Returns:
        str: ``"2000-01-02"`` when ``sunday`` is set, else ``"2000-01-01"``.
    """
    return "2000-01-02" if sunday else "2000-01-01"
