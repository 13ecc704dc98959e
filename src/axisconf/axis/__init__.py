# topmark:header:start
#
#   project      : AxisConf
#   file         : __init__.py
#   file_relpath : src/axisconf/axis/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Axis resolution: the defaults pipeline, its sibling resolvers and the axis model.

Entry point is `resolve_axis` (`axisconf.axis.defaults`), which drives the
sibling resolvers (calendars, category order, tick values/labels/marks,
line/grid, range breaks) over a `MutableAxis` builder.
"""

from __future__ import annotations

from axisconf.axis.defaults import resolve_axis
from axisconf.axis.layout import LayoutState
from axisconf.axis.model import MutableAxis, ResolvedAxis
from axisconf.axis.range_breaks import resolve_range_break
from axisconf.axis.types import AxisType, BoundsRangeBreak, RangeBreak, ValuesRangeBreak

__all__ = [
    "AxisType",
    "BoundsRangeBreak",
    "LayoutState",
    "MutableAxis",
    "RangeBreak",
    "ResolvedAxis",
    "ValuesRangeBreak",
    "resolve_axis",
    "resolve_range_break",
]
