# topmark:header:start
#
#   project      : AxisConf
#   file         : range_breaks.py
#   file_relpath : src/axisconf/axis/range_breaks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defaults and validation for one ``rangebreaks`` entry of a date axis.

An entry excludes either an interval (``bounds``, optionally interpreted per
``pattern``) or a set of discrete values (``values`` with a width ``dvalue``).
Entries that cannot exclude anything sensible are switched off in place:

* no usable ``bounds`` and no ``values``;
* ``bounds`` that swallow the whole fixed range of the parent axis.

The containment test compares linearized positions (milliseconds on date axes)
so date strings and millisecond numbers can be mixed. Bounds that cannot be
linearized (weekday names, hours) never disable an entry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from axisconf.config.logging import get_logger
from axisconf.schema.attributes import RANGEBREAK_ATTRIBUTES
from axisconf.schema.coerce import make_coercer

if TYPE_CHECKING:
    from collections.abc import Mapping

    from axisconf.axis.model import MutableAxis
    from axisconf.config.logging import AxisconfLogger

logger: AxisconfLogger = get_logger(__name__)


def bounds_swallow_range(bounds: list[Any], axis_out: MutableAxis) -> bool:
    """Return True if ``bounds`` strictly contain the fixed range of ``axis_out``.

    Only applies when ``autorange`` is exactly ``False``. For a range stored
    low-to-high the bounds must lie strictly outside both ends; for a range
    stored high-to-low (reversed axis) the comparisons are mirrored.

    Args:
        bounds (list[Any]): The entry's (truncated) bounds.
        axis_out (MutableAxis): Parent axis, with ``range`` and converter resolved.

    Returns:
        bool: True when the entry would hide the entire visible range.
    """
    if axis_out.get("autorange") is not False or axis_out.converter is None:
        return False

    rng = axis_out.get("range")
    if not isinstance(rng, list) or len(rng) < 2:
        return False

    r2l = axis_out.converter.r2l
    r0, r1 = r2l(rng[0]), r2l(rng[1])
    b0, b1 = r2l(bounds[0]), r2l(bounds[1])
    if r0 is None or r1 is None or b0 is None or b1 is None:
        return False

    if r0 < r1:
        return b0 < r0 and b1 > r1
    return b0 > r0 and b1 < r1


def resolve_range_break(
    item_in: Mapping[str, Any],
    item_out: dict[str, Any],
    axis_out: MutableAxis,
) -> None:
    """Resolve one range-break entry into ``item_out``.

    Args:
        item_in (Mapping[str, Any]): Input entry.
        item_out (dict[str, Any]): Output entry (mutated).
        axis_out (MutableAxis): Parent axis; its ``autorange`` and ``range`` must
            already be resolved.
    """
    coerce = make_coercer(item_in, item_out, RANGEBREAK_ATTRIBUTES)

    if not coerce("enabled"):
        return

    bounds = coerce("bounds")
    if isinstance(bounds, list) and len(bounds) >= 2:
        if len(bounds) > 2:
            bounds = item_out["bounds"] = bounds[:2]

        if bounds_swallow_range(bounds, axis_out):
            logger.debug(
                "rangebreak %s swallows range %s of axis %s; disabling it",
                bounds,
                axis_out.get("range"),
                axis_out.axis_id,
            )
            item_out["enabled"] = False
            return

        coerce("pattern")
    else:
        values = coerce("values")
        if values:
            coerce("dvalue")
        else:
            logger.debug("rangebreak without bounds or values; disabling it")
            item_out["enabled"] = False
