# topmark:header:start
#
#   project      : AxisConf
#   file         : convert.py
#   file_relpath : src/axisconf/axis/convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type conversion helpers for a resolved axis.

`set_convert` installs an `AxisConverter` on a `MutableAxis`. The converter
knows how values map between the three spaces the resolvers care about:

* data (``d``): values as they appear in traces and range breaks;
* range (``r``): values as stored in the ``range`` attribute (log axes store
  log10 units, date axes store date strings);
* linear (``l``): plain floats (milliseconds on date axes).

The converter snapshots the axis' type, letter and enabled range breaks when it
is created. Anything that changes those (notably resolving ``rangebreaks``)
must be followed by another `set_convert` call.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Final

from axisconf.axis.types import AxisType, BoundsRangeBreak, RangeBreakPattern, ValuesRangeBreak
from axisconf.config.logging import get_logger
from axisconf.constants import DFLTRANGEX, DFLTRANGEY, FP_SAFE, ONEDAY, ONEHOUR, ONESEC
from axisconf.lib.dates import (
    DEFAULT_DATE_RANGE,
    MAX_MS,
    MIN_MS,
    clean_date,
    date_time_to_ms,
    is_number,
    ms_to_date_time,
)

if TYPE_CHECKING:
    from axisconf.axis.layout import LayoutState
    from axisconf.axis.model import MutableAxis
    from axisconf.axis.types import RangeBreak
    from axisconf.config.logging import AxisconfLogger

logger: AxisconfLogger = get_logger(__name__)

WEEKDAYS: Final[dict[str, int]] = {
    "sun": 0,
    "mon": 1,
    "tue": 2,
    "wed": 3,
    "thu": 4,
    "fri": 5,
    "sat": 6,
}

# 1970-01-01 was a Thursday
_EPOCH_WEEKDAY: Final[int] = 4


def clean_number(value: Any) -> float | None:
    """Return ``value`` as a finite float (numeric strings allowed) or ``None``."""
    if is_number(value):
        return float(value)
    if isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            return None
        return parsed if math.isfinite(parsed) else None
    return None


def _weekday_number(value: Any) -> float | None:
    if isinstance(value, str) and value.strip()[:3].lower() in WEEKDAYS:
        return WEEKDAYS[value.strip()[:3].lower()]
    return clean_number(value)


class AxisConverter:
    """Range and data conversions for one axis.

    Attributes:
        axis_type (AxisType): Axis variant captured at setup time.
        letter (str): Axis letter captured at setup time.
        range_breaks (tuple[RangeBreak, ...]): Enabled range breaks captured at setup time.
    """

    def __init__(
        self,
        axis_type: AxisType,
        letter: str,
        range_breaks: tuple[RangeBreak, ...] = (),
        categories: tuple[Any, ...] = (),
    ) -> None:
        self.axis_type = axis_type
        self.letter = letter
        self.range_breaks = range_breaks
        self._categories = categories

    # --- conversions -------------------------------------------------------

    def d2c(self, value: Any) -> float | None:
        """Convert a data value to its linear (calc) position."""
        match self.axis_type:
            case AxisType.DATE:
                return date_time_to_ms(value)
            case AxisType.CATEGORY | AxisType.MULTICATEGORY:
                if value in self._categories:
                    return float(self._categories.index(value))
                return clean_number(value)
            case AxisType.LOG:
                number = clean_number(value)
                return math.log10(number) if number is not None and number > 0 else None
            case AxisType.LINEAR | AxisType.PLACEHOLDER:
                return clean_number(value)

    def r2l(self, value: Any) -> float | None:
        """Convert a range value to its linear position."""
        match self.axis_type:
            case AxisType.DATE:
                return date_time_to_ms(value)
            case (
                AxisType.LINEAR
                | AxisType.LOG
                | AxisType.CATEGORY
                | AxisType.MULTICATEGORY
                | AxisType.PLACEHOLDER
            ):
                return clean_number(value)

    def l2r(self, value: float) -> Any:
        """Convert a linear position back to a range value."""
        if self.axis_type is AxisType.DATE:
            return ms_to_date_time(value)
        return value

    # --- range helpers -----------------------------------------------------

    def is_valid_range(self, candidate: Any) -> bool:
        """Return True if ``candidate`` is a two-element range with convertible ends."""
        return (
            isinstance(candidate, list | tuple)
            and len(candidate) == 2
            and self.r2l(candidate[0]) is not None
            and self.r2l(candidate[1]) is not None
        )

    def default_range(self, rangemode: Any = None) -> list[Any]:
        """Return the range used when the input range is unusable."""
        dflt: list[Any]
        if self.axis_type is AxisType.DATE:
            dflt = list(DEFAULT_DATE_RANGE)
        elif self.letter == "y":
            dflt = list(DFLTRANGEY)
        else:
            dflt = list(DFLTRANGEX)
        if rangemode in ("tozero", "nonnegative"):
            dflt[0] = 0
        return dflt

    def clean_range(self, axis: MutableAxis) -> None:
        """Normalize the ``range`` attribute of ``axis`` in place.

        * Missing or wrong-length ranges are replaced by the default range.
        * Date axes: fixed ranges given in milliseconds are rendered as date
          strings; equal ends are split by one second either way.
        * Other axes: a non-numeric end is derived from the other one, ends are
          clamped to ``±FP_SAFE`` and equal ends are split apart.
        """
        rng = axis.get("range")
        dflt = self.default_range(axis.get("rangemode"))

        if not isinstance(rng, list) or len(rng) != 2:
            axis.set("range", dflt)
            return

        rng = list(rng)
        if self.axis_type is AxisType.DATE:
            axis.set("range", self._clean_date_range(rng, dflt, autorange=axis.get("autorange")))
            return

        for i in range(2):
            value = clean_number(rng[i])
            if value is None:
                other = clean_number(rng[1 - i])
                if other is None:
                    axis.set("range", dflt)
                    return
                value = other * (10 if i else 0.1)
            rng[i] = max(-FP_SAFE, min(FP_SAFE, value))

        if rng[0] == rng[1]:
            inc = max(1, abs(rng[0] * 1e-6))
            rng[0] -= inc
            rng[1] += inc

        axis.set("range", rng)

    def _clean_date_range(self, rng: list[Any], dflt: list[Any], *, autorange: Any) -> list[Any]:
        if not autorange:
            rng = [clean_date(v) for v in rng]
        start = date_time_to_ms(rng[0])
        end = date_time_to_ms(rng[1])
        if start is None or end is None:
            return dflt
        if start == end:
            center = max(MIN_MS + ONESEC, min(MAX_MS - ONESEC, start))
            return [self.l2r(center - ONESEC), self.l2r(center + ONESEC)]
        return rng

    # --- range breaks ------------------------------------------------------

    def mask_breaks(self, value: float) -> float | None:
        """Return ``None`` if linear ``value`` falls inside an enabled range break."""
        for brk in self.range_breaks:
            match brk:
                case BoundsRangeBreak(bounds=bounds, pattern=pattern):
                    if self._in_bounds_break(value, bounds, pattern):
                        return None
                case ValuesRangeBreak(values=values, dvalue=dvalue):
                    starts = sorted(s for s in (self.d2c(v) for v in values) if s is not None)
                    if any(start <= value < start + dvalue for start in starts):
                        return None
        return value

    def _in_bounds_break(
        self, value: float, bounds: tuple[Any, Any], pattern: RangeBreakPattern
    ) -> bool:
        vb: float
        match pattern:
            case RangeBreakPattern.DAY_OF_WEEK:
                b0, b1 = _weekday_number(bounds[0]), _weekday_number(bounds[1])
                if b0 is None or b1 is None:
                    return False
                vb = (math.floor(value / ONEDAY) + _EPOCH_WEEKDAY) % 7
                if b0 > b1:
                    b1 += 7
                    if vb < b0:
                        vb += 7
            case RangeBreakPattern.HOUR:
                b0, b1 = clean_number(bounds[0]), clean_number(bounds[1])
                if b0 is None or b1 is None:
                    return False
                vb = (value % ONEDAY) / ONEHOUR
                if b0 > b1:
                    b1 += 24
                    if vb < b0:
                        vb += 24
            case RangeBreakPattern.NONE:
                b0, b1 = self.d2c(bounds[0]), self.d2c(bounds[1])
                if b0 is None or b1 is None:
                    return False
                vb = value
        return b0 <= vb < b1


def set_convert(axis: MutableAxis, layout: LayoutState | None = None) -> AxisConverter:
    """Install a fresh `AxisConverter` on ``axis`` and return it.

    Args:
        axis (MutableAxis): Axis being resolved; its current type, letter,
            range breaks and category seed are captured.
        layout (LayoutState | None): Shared layout state (currently unused by
            the conversions themselves; accepted so every resolver step has the
            same collaborators).

    Returns:
        AxisConverter: The installed converter.
    """
    converter = AxisConverter(
        axis_type=axis.type,
        letter=axis.letter,
        range_breaks=tuple(axis.range_breaks()),
        categories=tuple(axis.initial_categories),
    )
    axis.converter = converter
    logger.trace(
        "set_convert: axis=%s type=%s range_breaks=%d",
        axis.axis_id,
        axis.type.value,
        len(converter.range_breaks),
    )
    return converter
