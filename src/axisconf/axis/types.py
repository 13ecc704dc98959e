# topmark:header:start
#
#   project      : AxisConf
#   file         : types.py
#   file_relpath : src/axisconf/axis/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Closed vocabularies and value types for axis resolution.

* `AxisType`: the axis variants. Resolvers ``match`` on it instead of comparing
  raw strings; the ``.value`` is what gets written to the ``type`` attribute.
* `RangeBreakPattern`: how the ``bounds`` of a range break are interpreted.
* `BoundsRangeBreak` / `ValuesRangeBreak`: typed view of an *enabled*, resolved
  range-break entry. Each variant only carries the fields that are meaningful
  for it; `range_break_from_item` builds them from resolved item mappings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from axisconf.constants import ONEDAY
from axisconf.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from collections.abc import Mapping


class AxisType(KeyedStrEnum):
    """Axis variants."""

    PLACEHOLDER = ("-", "Not yet determined")
    LINEAR = ("linear", "Linear")
    LOG = ("log", "Logarithmic")
    DATE = ("date", "Date")
    CATEGORY = ("category", "Category")
    MULTICATEGORY = ("multicategory", "Multi-category", ("multi_category",))

    @property
    def is_categorical(self) -> bool:
        """True for category and multi-category axes."""
        return self in (AxisType.CATEGORY, AxisType.MULTICATEGORY)


class RangeBreakPattern(KeyedStrEnum):
    """Interpretation of range-break ``bounds``."""

    NONE = ("", "Plain interval on the axis' own coordinate")
    DAY_OF_WEEK = ("day of week", "Weekday numbers, 0 = Sunday", ("weekday",))
    HOUR = ("hour", "Hours of the day, fractional allowed")


@dataclass(frozen=True, slots=True)
class BoundsRangeBreak:
    """Exclusion interval ``[bounds[0], bounds[1])`` interpreted per ``pattern``."""

    bounds: tuple[Any, Any]
    pattern: RangeBreakPattern = RangeBreakPattern.NONE


@dataclass(frozen=True, slots=True)
class ValuesRangeBreak:
    """Discrete excluded values, each hiding ``[value, value + dvalue)``."""

    values: tuple[Any, ...]
    dvalue: float


RangeBreak = BoundsRangeBreak | ValuesRangeBreak


def range_break_from_item(item: Mapping[str, Any]) -> RangeBreak | None:
    """Return the typed view of a resolved range-break item.

    Args:
        item (Mapping[str, Any]): A resolved ``rangebreaks`` entry.

    Returns:
        RangeBreak | None: ``None`` for disabled entries.
    """
    if not item.get("enabled"):
        return None
    bounds = item.get("bounds")
    if isinstance(bounds, list) and len(bounds) >= 2:
        pattern = RangeBreakPattern.parse(item.get("pattern")) or RangeBreakPattern.NONE
        return BoundsRangeBreak(bounds=(bounds[0], bounds[1]), pattern=pattern)
    values = item.get("values")
    if isinstance(values, list) and values:
        return ValuesRangeBreak(values=tuple(values), dvalue=float(item.get("dvalue") or ONEDAY))
    return None
