# topmark:header:start
#
#   project      : AxisConf
#   file         : defaults.py
#   file_relpath : src/axisconf/axis/defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Axis defaults: the ordered resolution pipeline for one cartesian axis.

`resolve_axis` fills a `MutableAxis` builder from an untrusted input mapping.
Steps run in a fixed order because later steps read what earlier ones wrote:

     1. ``visible``
     2. calendar (date axes)
     3. converter setup
     4. ``autorange`` (and ``rangemode`` on linear axes)
     5. ``range``, then range cleanup
     6. category order
     7. ``hoverformat``
     8. ``color`` and the derived font color
     9. tick labels, pass 1 (prefix/suffix)
    10. invisible axes stop here
    11. ``title``
    12. tick values, tick labels pass 2, tick marks, line/grid
    13. ``mirror``
    14. ``automargin``
    15. ``tickson``
    16. multi-category dividers
    17. ``rangebreaks`` (date axes), converter refresh, trace compatibility

The axis ``type`` must already be resolved on the builder.
"""

from __future__ import annotations

import math
from functools import partial
from typing import TYPE_CHECKING, Any

from axisconf.axis.array_container import handle_array_container_defaults
from axisconf.axis.calendars import handle_calendar_defaults
from axisconf.axis.category_order import handle_category_order_defaults
from axisconf.axis.convert import set_convert
from axisconf.axis.line_grid import LineGridOptions, handle_line_grid_defaults
from axisconf.axis.range_breaks import resolve_range_break
from axisconf.axis.tick_labels import TickLabelPass, handle_tick_label_defaults
from axisconf.axis.tick_marks import handle_tick_mark_defaults
from axisconf.axis.tick_values import handle_tick_value_defaults
from axisconf.axis.types import AxisType
from axisconf.config.logging import get_logger
from axisconf.constants import RANGEBREAK_INCOMPATIBLE_TRACES
from axisconf.schema.attributes import DEFAULT_LINE_COLOR
from axisconf.schema.coerce import coerce_font

if TYPE_CHECKING:
    from collections.abc import Mapping

    from axisconf.axis.layout import LayoutState
    from axisconf.axis.model import MutableAxis
    from axisconf.config.logging import AxisconfLogger
    from axisconf.config.model import ResolveOptions
    from axisconf.schema.coerce import Coerce

logger: AxisconfLogger = get_logger(__name__)


def _js_round(x: float) -> int:
    return math.floor(x + 0.5)


def _default_title(options: ResolveOptions, layout: LayoutState) -> str | None:
    splom_label = (options.splom_stash or {}).get("label")
    if splom_label:
        return splom_label
    title = layout.default_title(options.letter)
    if title is None and options.title:
        title = f"Click to enter {options.title} title"
    return title


def _resolve_autorange(
    axis_in: Mapping[str, Any],
    axis_out: MutableAxis,
    coerce: Coerce,
    options: ResolveOptions,
) -> None:
    autorange_dflt: bool | str = not axis_out.is_valid_range(axis_in.get("range"))
    if autorange_dflt and options.reverse_dflt:
        autorange_dflt = "reversed"
    autorange = coerce("autorange", autorange_dflt)

    match axis_out.type:
        case AxisType.LINEAR | AxisType.PLACEHOLDER:
            if autorange:
                coerce("rangemode")
        case AxisType.LOG | AxisType.DATE | AxisType.CATEGORY | AxisType.MULTICATEGORY:
            pass


def _resolve_tickson(axis_out: MutableAxis, coerce: Coerce, options: ResolveOptions) -> None:
    if options.no_tickson:
        return
    if not (axis_out.get("ticks") or axis_out.get("showgrid")):
        return

    match axis_out.type:
        case AxisType.MULTICATEGORY:
            coerce("tickson", "boundaries")
        case AxisType.CATEGORY:
            coerce("tickson")
        case AxisType.LINEAR | AxisType.LOG | AxisType.DATE | AxisType.PLACEHOLDER:
            pass


def _resolve_dividers(axis_out: MutableAxis, coerce: Coerce) -> None:
    match axis_out.type:
        case AxisType.MULTICATEGORY:
            if coerce("showdividers"):
                coerce("dividercolor")
                coerce("dividerwidth")
        case (
            AxisType.LINEAR
            | AxisType.LOG
            | AxisType.DATE
            | AxisType.CATEGORY
            | AxisType.PLACEHOLDER
        ):
            pass


def _resolve_range_breaks(
    axis_in: Mapping[str, Any],
    axis_out: MutableAxis,
    options: ResolveOptions,
    layout: LayoutState,
) -> None:
    range_breaks = axis_in.get("rangebreaks")
    if not isinstance(range_breaks, list | tuple) or not range_breaks:
        return

    handle_array_container_defaults(
        axis_in,
        axis_out.attrs,
        "rangebreaks",
        partial(resolve_range_break, axis_out=axis_out),
        inclusion_attr="enabled",
    )
    # Range breaks change how values map onto the axis
    set_convert(axis_out, layout)

    if not any(layout.has(trace_type) for trace_type in RANGEBREAK_INCOMPATIBLE_TRACES):
        return
    # Positions index the layout-wide trace list; only traces drawn on this axis are hidden
    for position, trace in enumerate(options.data):
        if trace.get(f"{axis_out.letter}axis", axis_out.letter) != axis_out.axis_id:
            continue
        trace_type = trace.get("type")
        if trace_type in RANGEBREAK_INCOMPATIBLE_TRACES:
            trace["visible"] = False
            index = trace.get("index", position)
            layout.warn(
                f"{trace_type} traces do not work on axes with rangebreaks."
                f" Setting trace {index} to `visible: false`.",
                axis_id=axis_out.axis_id,
                trace_index=index,
                trace_type=trace_type,
            )


def resolve_axis(
    axis_in: Mapping[str, Any],
    axis_out: MutableAxis,
    coerce: Coerce,
    options: ResolveOptions,
    layout: LayoutState,
) -> MutableAxis:
    """Resolve every attribute of one axis into ``axis_out``.

    Bad input never raises: invalid values fall back to defaults, contradictory
    range breaks are disabled and incompatible traces are hidden with a warning
    on ``layout``.

    Args:
        axis_in (Mapping[str, Any]): Untrusted input attributes.
        axis_out (MutableAxis): Builder with ``type`` already resolved.
        coerce (Coerce): Coercion function bound to ``axis_in``/``axis_out``.
        options (ResolveOptions): Per-axis options.
        layout (LayoutState): Shared layout state (titles, traces, warning sink).

    Returns:
        MutableAxis: ``axis_out``, resolved in place.
    """
    axis_type: AxisType = axis_out.type
    font = options.font
    logger.debug("Resolving axis %s (type=%s)", axis_out.axis_id, axis_type.value)

    visible = coerce("visible", not options.visible_dflt)

    match axis_type:
        case AxisType.DATE:
            handle_calendar_defaults(axis_in, axis_out.attrs, "calendar", options.calendar)
        case (
            AxisType.LINEAR
            | AxisType.LOG
            | AxisType.CATEGORY
            | AxisType.MULTICATEGORY
            | AxisType.PLACEHOLDER
        ):
            pass

    set_convert(axis_out, layout)

    _resolve_autorange(axis_in, axis_out, coerce, options)

    coerce("range")
    axis_out.clean_range()

    handle_category_order_defaults(axis_in, axis_out, coerce, options.data)

    if axis_type is not AxisType.CATEGORY and not options.no_hover:
        coerce("hoverformat")

    dflt_color: str = coerce("color")
    # Fonts only follow the axis color when it was changed from the default
    dflt_font_color = dflt_color if dflt_color != DEFAULT_LINE_COLOR else font.color

    handle_tick_label_defaults(
        axis_in, axis_out, coerce, axis_type, options, TickLabelPass.PREFIX_SUFFIX
    )

    if not visible:
        logger.debug("Axis %s is hidden; skipping the remaining defaults", axis_out.axis_id)
        return axis_out

    coerce("title.text", _default_title(options, layout))
    coerce_font(
        coerce,
        "title.font",
        {"family": font.family, "size": _js_round(font.size * 1.2), "color": dflt_font_color},
    )

    handle_tick_value_defaults(axis_in, axis_out, coerce, axis_type)
    handle_tick_label_defaults(axis_in, axis_out, coerce, axis_type, options, TickLabelPass.FORMAT)
    handle_tick_mark_defaults(axis_in, axis_out, coerce, options)
    handle_line_grid_defaults(
        axis_in,
        axis_out,
        coerce,
        LineGridOptions(
            dflt_color=dflt_color, bg_color=options.bg_color, show_grid=options.show_grid
        ),
    )

    if axis_out.get("showline") or axis_out.get("ticks"):
        coerce("mirror")

    if options.automargin:
        coerce("automargin")

    _resolve_tickson(axis_out, coerce, options)
    _resolve_dividers(axis_out, coerce)

    match axis_type:
        case AxisType.DATE:
            _resolve_range_breaks(axis_in, axis_out, options, layout)
        case (
            AxisType.LINEAR
            | AxisType.LOG
            | AxisType.CATEGORY
            | AxisType.MULTICATEGORY
            | AxisType.PLACEHOLDER
        ):
            pass

    return axis_out
