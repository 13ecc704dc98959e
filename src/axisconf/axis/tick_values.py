# topmark:header:start
#
#   project      : AxisConf
#   file         : tick_values.py
#   file_relpath : src/axisconf/axis/tick_values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tick placement defaults: ``tickmode`` and the attributes each mode uses.

``dtick`` and ``tick0`` have type-dependent syntax and are cleaned here rather
than by the generic coercion layer:

* ``dtick`` is a positive number on every axis. Date axes also accept
  ``"M<n>"`` (every ``n`` months); log axes accept ``"L<f>"`` (linear step
  ``f``) and ``"D1"`` / ``"D2"`` (digit ticks).
* ``tick0`` is a date string on date axes (a Sunday when ``dtick`` is a whole
  number of weeks), absent with ``"D1"``/``"D2"``, and a number otherwise.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from axisconf.axis.convert import clean_number
from axisconf.axis.types import AxisType
from axisconf.config.logging import get_logger
from axisconf.constants import ONEDAY, ONEWEEK
from axisconf.lib.dates import clean_date, date_tick0

if TYPE_CHECKING:
    from collections.abc import Mapping

    from axisconf.axis.model import MutableAxis
    from axisconf.config.logging import AxisconfLogger
    from axisconf.schema.coerce import Coerce

logger: AxisconfLogger = get_logger(__name__)


def clean_dtick(dtick: Any, axis_type: AxisType) -> float | str:
    """Return a valid ``dtick`` for ``axis_type`` (the type default when invalid).

    Args:
        dtick (Any): Raw input value.
        axis_type (AxisType): Axis variant.

    Returns:
        float | str: Positive number, or a special string valid for the type.
    """
    dflt: float = ONEDAY if axis_type is AxisType.DATE else 1
    if not dtick:
        return dflt

    number = clean_number(dtick)
    if number is not None:
        if number <= 0:
            return dflt
        match axis_type:
            case AxisType.CATEGORY:
                return max(1, math.floor(number + 0.5))
            case AxisType.DATE:
                return max(0.1, number)
            case _:
                return number

    if not isinstance(dtick, str) or axis_type not in (AxisType.DATE, AxisType.LOG):
        return dflt

    prefix, rest = dtick[:1], dtick[1:]
    dtick_num: float = clean_number(rest) or 0
    if dtick_num <= 0:
        return dflt
    if axis_type is AxisType.DATE and prefix == "M" and dtick_num == round(dtick_num):
        return dtick
    if axis_type is AxisType.LOG and (prefix == "L" or (prefix == "D" and dtick_num in (1, 2))):
        return dtick
    return dflt


def clean_tick0(tick0: Any, axis_type: AxisType, dtick: float | str) -> Any:
    """Return a valid ``tick0`` for ``axis_type`` given the cleaned ``dtick``."""
    if axis_type is AxisType.DATE:
        sunday: bool = isinstance(dtick, int | float) and dtick % ONEWEEK == 0
        return clean_date(tick0, date_tick0(sunday))
    if dtick in ("D1", "D2"):
        return None
    number = clean_number(tick0)
    return number if number is not None else 0


def handle_tick_value_defaults(
    axis_in: Mapping[str, Any],
    axis_out: MutableAxis,
    coerce: Coerce,
    axis_type: AxisType,
) -> None:
    """Resolve ``tickmode`` and the placement attributes of the chosen mode.

    Args:
        axis_in (Mapping[str, Any]): Input axis container.
        axis_out (MutableAxis): Axis being resolved.
        coerce (Coerce): Bound coercion function.
        axis_type (AxisType): Axis variant.
    """
    tickmode: str
    if axis_in.get("tickmode") == "array" and axis_type in (AxisType.LOG, AxisType.DATE):
        tickmode = "auto"
        axis_out.set("tickmode", tickmode)
    else:
        if isinstance(axis_in.get("tickvals"), list | tuple):
            tickmode_dflt = "array"
        elif axis_in.get("dtick"):
            tickmode_dflt = "linear"
        else:
            tickmode_dflt = "auto"
        tickmode = coerce("tickmode", tickmode_dflt)

    if tickmode == "auto":
        coerce("nticks")
    elif tickmode == "linear":
        dtick = clean_dtick(axis_in.get("dtick"), axis_type)
        axis_out.set("dtick", dtick)
        tick0 = clean_tick0(axis_in.get("tick0"), axis_type, dtick)
        if tick0 is None:
            axis_out.delete("tick0")
        else:
            axis_out.set("tick0", tick0)
    elif axis_type is not AxisType.MULTICATEGORY:
        tickvals = coerce("tickvals")
        if tickvals is None:
            axis_out.delete("tickvals")
            axis_out.set("tickmode", "auto")
        else:
            coerce("ticktext")

    logger.trace("tickmode=%s for %s axis", axis_out.get("tickmode"), axis_type.value)
