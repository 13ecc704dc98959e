# topmark:header:start
#
#   project      : AxisConf
#   file         : category_order.py
#   file_relpath : src/axisconf/axis/category_order.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Category ordering defaults and the initial category seed.

Only plain category axes take part. The resolved ``categoryorder`` decides the
seed stored on `MutableAxis.initial_categories`:

* ``trace``: empty (categories appear in trace order at draw time);
* ``array``: a copy of ``categoryarray``;
* ``category ascending`` / ``category descending``: the sorted distinct values
  found in the traces bound to this axis.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from axisconf.axis.types import AxisType
from axisconf.config.logging import get_logger
from axisconf.lib.dates import is_number
from axisconf.lib.increment import number_text

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from axisconf.axis.model import MutableAxis
    from axisconf.config.logging import AxisconfLogger
    from axisconf.schema.coerce import Coerce

logger: AxisconfLogger = get_logger(__name__)


def _category_key(value: Any) -> str:
    return number_text(value) if is_number(value) else str(value)


def find_categories(axis: MutableAxis, data: Sequence[Mapping[str, Any]]) -> list[str]:
    """Return the distinct category labels of the traces bound to ``axis``.

    A trace is bound to the axis when its ``<letter>axis`` attribute equals the
    axis id (traces without one are bound to the first axis of the letter).
    Values are returned as text, in first-seen order.
    """
    seen: dict[str, None] = {}
    for trace in data:
        if trace.get(f"{axis.letter}axis", axis.letter) != axis.axis_id:
            continue
        values = trace.get(axis.letter)
        if not isinstance(values, list | tuple):
            continue
        for value in values:
            if value is not None:
                seen.setdefault(_category_key(value), None)
    return list(seen)


def handle_category_order_defaults(
    axis_in: Mapping[str, Any],
    axis_out: MutableAxis,
    coerce: Coerce,
    data: Sequence[Mapping[str, Any]] = (),
) -> None:
    """Resolve ``categoryorder``/``categoryarray`` and seed the categories.

    Args:
        axis_in (Mapping[str, Any]): Input axis container.
        axis_out (MutableAxis): Axis being resolved.
        coerce (Coerce): Bound coercion function.
        data (Sequence[Mapping[str, Any]]): Traces of the layout.
    """
    if axis_out.type is not AxisType.CATEGORY:
        return

    array_in: Any = axis_in.get("categoryarray")
    is_valid_array: bool = isinstance(array_in, list | tuple) and len(array_in) > 0

    order: str = coerce("categoryorder", "array" if is_valid_array else None)
    array: list[Any] = []
    if order == "array":
        array = coerce("categoryarray") or []

    if not is_valid_array and order == "array":
        order = "trace"
        axis_out.set("categoryorder", order)

    match order:
        case "trace":
            axis_out.initial_categories = []
        case "array":
            axis_out.initial_categories = list(array)
        case "category ascending":
            axis_out.initial_categories = sorted(find_categories(axis_out, data))
        case "category descending":
            axis_out.initial_categories = sorted(find_categories(axis_out, data), reverse=True)

    logger.trace(
        "categoryorder=%s initial_categories=%d", order, len(axis_out.initial_categories)
    )
