# topmark:header:start
#
#   project      : AxisConf
#   file         : tick_labels.py
#   file_relpath : src/axisconf/axis/tick_labels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tick label defaults, in two passes.

Pass 1 (prefix/suffix) runs for every axis, including invisible ones, since
other parts of a plot read those attributes. Pass 2 (label visibility, font,
angle and number formatting) only runs for visible axes.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any

from axisconf.axis.array_container import handle_array_container_defaults
from axisconf.axis.types import AxisType
from axisconf.config.logging import get_logger
from axisconf.schema.attributes import DEFAULT_LINE_COLOR, TICKFORMATSTOP_ATTRIBUTES
from axisconf.schema.coerce import coerce_font, make_coercer

if TYPE_CHECKING:
    from collections.abc import Mapping

    from axisconf.axis.model import MutableAxis
    from axisconf.config.logging import AxisconfLogger
    from axisconf.config.model import ResolveOptions
    from axisconf.schema.coerce import Coerce

logger: AxisconfLogger = get_logger(__name__)

SHOW_ATTRIBUTES: tuple[str, ...] = ("showexponent", "showtickprefix", "showticksuffix")


class TickLabelPass(IntEnum):
    """Which part of the tick-label defaults to run."""

    PREFIX_SUFFIX = 1
    FORMAT = 2


def show_attribute_default(axis_in: Mapping[str, Any]) -> Any:
    """Return the shared default for the ``show*`` attributes.

    When every ``show*`` attribute present in the input has the same value, that
    value becomes the default for the absent ones. Otherwise there is no shared
    default (``None``).
    """
    present: list[Any] = [axis_in[a] for a in SHOW_ATTRIBUTES if axis_in.get(a) is not None]
    if present and all(v == present[0] for v in present):
        return present[0]
    return None


def _tickformatstop_defaults(item_in: Mapping[str, Any], item_out: dict[str, Any]) -> None:
    coerce = make_coercer(item_in, item_out, TICKFORMATSTOP_ATTRIBUTES)
    if coerce("enabled"):
        coerce("dtickrange")
        coerce("value")


def _handle_prefix_suffix(axis_in: Mapping[str, Any], coerce: Coerce) -> None:
    show_dflt = show_attribute_default(axis_in)
    if coerce("tickprefix"):
        coerce("showtickprefix", show_dflt)
    if coerce("ticksuffix"):
        coerce("showticksuffix", show_dflt)


def _handle_format(
    axis_in: Mapping[str, Any],
    axis_out: MutableAxis,
    coerce: Coerce,
    axis_type: AxisType,
    options: ResolveOptions,
) -> None:
    show_dflt = show_attribute_default(axis_in)
    if not coerce("showticklabels"):
        return

    color = axis_out.get("color")
    font_color = color if color and color != DEFAULT_LINE_COLOR else options.font.color
    coerce_font(
        coerce,
        "tickfont",
        {"family": options.font.family, "size": options.font.size, "color": font_color},
    )
    coerce("tickangle")

    if axis_type is AxisType.CATEGORY:
        return

    tickformat = coerce("tickformat")
    stops = handle_array_container_defaults(
        axis_in, axis_out.attrs, "tickformatstops", _tickformatstop_defaults
    )
    if not stops:
        axis_out.delete("tickformatstops")

    if not tickformat and axis_type is not AxisType.DATE:
        coerce("showexponent", show_dflt)
        coerce("exponentformat")
        coerce("separatethousands")


def handle_tick_label_defaults(
    axis_in: Mapping[str, Any],
    axis_out: MutableAxis,
    coerce: Coerce,
    axis_type: AxisType,
    options: ResolveOptions,
    label_pass: TickLabelPass | None = None,
) -> None:
    """Resolve tick label attributes.

    Args:
        axis_in (Mapping[str, Any]): Input axis container.
        axis_out (MutableAxis): Axis being resolved.
        coerce (Coerce): Bound coercion function.
        axis_type (AxisType): Axis variant.
        options (ResolveOptions): Resolution options (inherited font).
        label_pass (TickLabelPass | None): Pass to run; ``None`` runs both.
    """
    if label_pass in (None, TickLabelPass.PREFIX_SUFFIX):
        _handle_prefix_suffix(axis_in, coerce)
    if label_pass in (None, TickLabelPass.FORMAT):
        _handle_format(axis_in, axis_out, coerce, axis_type, options)
    logger.trace("tick labels resolved (pass=%s)", label_pass.name if label_pass else "all")
