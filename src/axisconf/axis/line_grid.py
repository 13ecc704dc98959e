# topmark:header:start
#
#   project      : AxisConf
#   file         : line_grid.py
#   file_relpath : src/axisconf/axis/line_grid.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Axis line, grid line and zero line defaults.

Each of the three parts follows the same rule: explicitly styling a part
(color or width) turns it on by default, and a part that ends up hidden drops
its styling attributes. The default grid color is the axis color moved most
of the way toward the background color.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from axisconf.config.logging import get_logger
from axisconf.lib.colors import LIGHT_FRACTION, mix
from axisconf.schema.attributes import AXIS_ATTRIBUTES
from axisconf.schema.coerce import coerce2

if TYPE_CHECKING:
    from collections.abc import Mapping

    from axisconf.axis.model import MutableAxis
    from axisconf.config.logging import AxisconfLogger
    from axisconf.schema.coerce import Coerce

logger: AxisconfLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class LineGridOptions:
    """Inputs of `handle_line_grid_defaults`.

    Attributes:
        dflt_color (str): Resolved axis color.
        bg_color (str): Plot background color.
        show_grid (bool): Whether grid and zero lines default to visible.
        show_line (bool): Whether the axis line defaults to visible.
        no_zero_line (bool): Skip the zero line entirely.
        blend (float | None): Grid color blend percentage (defaults to `LIGHT_FRACTION`).
    """

    dflt_color: str
    bg_color: str
    show_grid: bool = False
    show_line: bool = False
    no_zero_line: bool = False
    blend: float | None = None


def _show_part(
    axis_in: Mapping[str, Any],
    axis_out: MutableAxis,
    coerce: Coerce,
    show_attr: str,
    style: tuple[tuple[str, Any], tuple[str, Any]],
    show_dflt: bool,
) -> bool:
    styled: bool = False
    for attr, dflt in style:
        styled = bool(coerce2(axis_in, axis_out.attrs, AXIS_ATTRIBUTES, attr, dflt)) or styled
    shown: bool = coerce(show_attr, show_dflt or styled)
    if not shown:
        for attr, _ in style:
            axis_out.delete(attr)
    return shown


def handle_line_grid_defaults(
    axis_in: Mapping[str, Any],
    axis_out: MutableAxis,
    coerce: Coerce,
    opts: LineGridOptions,
) -> None:
    """Resolve ``showline``, ``showgrid`` and ``zeroline`` with their styling.

    Args:
        axis_in (Mapping[str, Any]): Input axis container.
        axis_out (MutableAxis): Axis being resolved.
        coerce (Coerce): Bound coercion function.
        opts (LineGridOptions): Colors and visibility defaults.
    """
    show_line = _show_part(
        axis_in,
        axis_out,
        coerce,
        "showline",
        (("linecolor", opts.dflt_color), ("linewidth", None)),
        opts.show_line,
    )

    grid_color_dflt: str = mix(
        opts.dflt_color, opts.bg_color, LIGHT_FRACTION if opts.blend is None else opts.blend
    )
    show_grid = _show_part(
        axis_in,
        axis_out,
        coerce,
        "showgrid",
        (("gridcolor", grid_color_dflt), ("gridwidth", None)),
        opts.show_grid,
    )

    zero_line: bool | None = None
    if not opts.no_zero_line:
        zero_line = _show_part(
            axis_in,
            axis_out,
            coerce,
            "zeroline",
            (("zerolinecolor", opts.dflt_color), ("zerolinewidth", None)),
            opts.show_grid,
        )

    logger.trace("showline=%s showgrid=%s zeroline=%s", show_line, show_grid, zero_line)
