# topmark:header:start
#
#   project      : AxisConf
#   file         : tick_marks.py
#   file_relpath : src/axisconf/axis/tick_marks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tick mark defaults.

Setting any tick style (length, width or color) implies outside ticks unless
``ticks`` says otherwise. Axes without ticks drop the tick style attributes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from axisconf.config.logging import get_logger
from axisconf.schema.attributes import AXIS_ATTRIBUTES
from axisconf.schema.coerce import coerce2

if TYPE_CHECKING:
    from collections.abc import Mapping

    from axisconf.axis.model import MutableAxis
    from axisconf.config.logging import AxisconfLogger
    from axisconf.config.model import ResolveOptions
    from axisconf.schema.coerce import Coerce

logger: AxisconfLogger = get_logger(__name__)

TICK_STYLE_ATTRIBUTES: tuple[str, ...] = ("ticklen", "tickwidth", "tickcolor")


def handle_tick_mark_defaults(
    axis_in: Mapping[str, Any],
    axis_out: MutableAxis,
    coerce: Coerce,
    options: ResolveOptions,
) -> str:
    """Resolve ``ticks`` and the tick style attributes.

    Args:
        axis_in (Mapping[str, Any]): Input axis container.
        axis_out (MutableAxis): Axis being resolved.
        coerce (Coerce): Bound coercion function.
        options (ResolveOptions): Resolution options (``outer_ticks``).

    Returns:
        str: The resolved ``ticks`` value (``""`` when ticks are hidden).
    """
    tick_len = coerce2(axis_in, axis_out.attrs, AXIS_ATTRIBUTES, "ticklen")
    tick_width = coerce2(axis_in, axis_out.attrs, AXIS_ATTRIBUTES, "tickwidth")
    tick_color = coerce2(
        axis_in, axis_out.attrs, AXIS_ATTRIBUTES, "tickcolor", axis_out.get("color")
    )

    implied: bool = bool(options.outer_ticks or tick_len or tick_width or tick_color)
    ticks: str = coerce("ticks", "outside" if implied else "")

    if not ticks:
        for attr in TICK_STYLE_ATTRIBUTES:
            axis_out.delete(attr)

    logger.trace("ticks=%r", ticks)
    return ticks
