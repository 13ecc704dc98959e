# topmark:header:start
#
#   project      : AxisConf
#   file         : attributes.py
#   file_relpath : src/axisconf/schema/attributes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attribute schema for cartesian axes.

Each resolvable attribute is declared once with an `AttributeSpec` (value type,
built-in default and type-specific constraints). Nested objects (``title``,
``title.font``, ...) are plain dicts of specs, so a dotted path such as
``"title.font.size"`` addresses a spec with `lookup_spec`.

The coercion layer (`axisconf.schema.coerce`) is the only consumer of these
declarations; resolvers never read defaults from here directly except to
compare against them (e.g. "was the axis color changed from the default?").
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Final, Union

from axisconf.constants import ONEDAY
from axisconf.lib.nested import split_path


class ValType(Enum):
    """Value types understood by the coercion layer."""

    BOOLEAN = "boolean"
    ENUMERATED = "enumerated"
    NUMBER = "number"
    INTEGER = "integer"
    STRING = "string"
    COLOR = "color"
    ANGLE = "angle"
    ANY = "any"
    INFO_ARRAY = "info_array"
    DATA_ARRAY = "data_array"


@dataclass(frozen=True, slots=True)
class AttributeSpec:
    """Declaration of one resolvable attribute.

    Attributes:
        val_type (ValType): How input values are validated and normalized.
        dflt (Any): Built-in default used when neither the input nor the caller
            supplies a valid value.
        values (tuple[Any, ...]): Allowed values for ``ENUMERATED``.
        min (float | None): Inclusive lower bound for ``NUMBER``/``INTEGER``.
        max (float | None): Inclusive upper bound for ``NUMBER``/``INTEGER``.
        items (tuple[AttributeSpec, ...]): Per-position item specs for ``INFO_ARRAY``.
        free_length (bool): ``INFO_ARRAY`` accepts any length (items reuse the last spec).
        no_blank (bool): ``STRING`` rejects the empty string.
        description (str): One-line help used by ``show-defaults``.
    """

    val_type: ValType
    dflt: Any = None
    values: tuple[Any, ...] = ()
    min: float | None = None
    max: float | None = None
    items: tuple[AttributeSpec, ...] = ()
    free_length: bool = False
    no_blank: bool = False
    description: str = ""


AttributeMap = dict[str, Union[AttributeSpec, "AttributeMap"]]

DEFAULT_LINE_COLOR: Final[str] = "#444"

CALENDARS: Final[tuple[str, ...]] = (
    "gregorian",
    "chinese",
    "coptic",
    "discworld",
    "ethiopian",
    "hebrew",
    "islamic",
    "julian",
    "mayan",
    "nanakshahi",
    "nepali",
    "persian",
    "jalali",
    "taiwan",
    "thai",
    "ummalqura",
)

_ANY: Final[AttributeSpec] = AttributeSpec(ValType.ANY)

_SHOW_ATTR_VALUES: Final[tuple[str, ...]] = ("all", "first", "last", "none")


def font_attributes(description: str = "") -> AttributeMap:
    """Return the spec map of a font object (family, size, color)."""
    return {
        "family": AttributeSpec(
            ValType.STRING, no_blank=True, description=f"{description} font family".strip()
        ),
        "size": AttributeSpec(
            ValType.NUMBER, min=1, description=f"{description} font size".strip()
        ),
        "color": AttributeSpec(ValType.COLOR, description=f"{description} font color".strip()),
    }


CALENDAR_ATTRIBUTE: Final[AttributeSpec] = AttributeSpec(
    ValType.ENUMERATED,
    values=CALENDARS,
    dflt="gregorian",
    description="Calendar system used to interpret date values.",
)

RANGEBREAK_ATTRIBUTES: Final[AttributeMap] = {
    "enabled": AttributeSpec(
        ValType.BOOLEAN, dflt=True, description="Whether this range break participates."
    ),
    "bounds": AttributeSpec(
        ValType.INFO_ARRAY,
        items=(_ANY, _ANY),
        description="Lower and upper bound of the excluded interval.",
    ),
    "pattern": AttributeSpec(
        ValType.ENUMERATED,
        values=("day of week", "hour", ""),
        dflt="",
        description="How bounds are interpreted: weekday numbers, hours, or plain values.",
    ),
    "values": AttributeSpec(
        ValType.INFO_ARRAY,
        items=(_ANY,),
        free_length=True,
        description="Explicit excluded coordinates.",
    ),
    "dvalue": AttributeSpec(
        ValType.NUMBER,
        min=0,
        dflt=ONEDAY,
        description="Size of each excluded value's interval (ms on date axes).",
    ),
}

TICKFORMATSTOP_ATTRIBUTES: Final[AttributeMap] = {
    "enabled": AttributeSpec(ValType.BOOLEAN, dflt=True, description="Whether this stop is used."),
    "dtickrange": AttributeSpec(
        ValType.INFO_ARRAY,
        items=(_ANY, _ANY),
        description="Tick spacing range [min, max] this stop applies to.",
    ),
    "value": AttributeSpec(ValType.STRING, dflt="", description="Tick format for this range."),
}

AXIS_ATTRIBUTES: Final[AttributeMap] = {
    "visible": AttributeSpec(ValType.BOOLEAN, description="Whether the axis is drawn."),
    "type": AttributeSpec(
        ValType.ENUMERATED,
        values=("-", "linear", "log", "date", "category", "multicategory"),
        dflt="-",
        description="Axis type.",
    ),
    "calendar": CALENDAR_ATTRIBUTE,
    "autorange": AttributeSpec(
        ValType.ENUMERATED,
        values=(True, False, "reversed"),
        dflt=True,
        description="Compute the range from the data.",
    ),
    "rangemode": AttributeSpec(
        ValType.ENUMERATED,
        values=("normal", "tozero", "nonnegative"),
        dflt="normal",
        description="Autorange extension rule for linear axes.",
    ),
    "range": AttributeSpec(
        ValType.INFO_ARRAY, items=(_ANY, _ANY), description="Visible range [start, end]."
    ),
    "categoryorder": AttributeSpec(
        ValType.ENUMERATED,
        values=("trace", "category ascending", "category descending", "array"),
        dflt="trace",
        description="Ordering of categories.",
    ),
    "categoryarray": AttributeSpec(
        ValType.DATA_ARRAY, description="Category order when categoryorder is 'array'."
    ),
    "hoverformat": AttributeSpec(ValType.STRING, dflt="", description="Hover label format."),
    "color": AttributeSpec(
        ValType.COLOR, dflt=DEFAULT_LINE_COLOR, description="Default color of all axis elements."
    ),
    "title": {
        "text": AttributeSpec(ValType.STRING, description="Axis title."),
        "font": font_attributes("Title"),
    },
    "tickmode": AttributeSpec(
        ValType.ENUMERATED,
        values=("auto", "linear", "array"),
        description="How tick positions are chosen.",
    ),
    "nticks": AttributeSpec(
        ValType.INTEGER, min=0, dflt=0, description="Maximum number of ticks (0 = automatic)."
    ),
    "tick0": AttributeSpec(ValType.ANY, description="First tick position in linear tick mode."),
    "dtick": AttributeSpec(ValType.ANY, description="Tick spacing in linear tick mode."),
    "tickvals": AttributeSpec(ValType.DATA_ARRAY, description="Tick positions in array mode."),
    "ticktext": AttributeSpec(ValType.DATA_ARRAY, description="Tick labels in array mode."),
    "ticks": AttributeSpec(
        ValType.ENUMERATED,
        values=("outside", "inside", ""),
        description="Tick mark placement ('' hides tick marks).",
    ),
    "tickson": AttributeSpec(
        ValType.ENUMERATED,
        values=("labels", "boundaries"),
        dflt="labels",
        description="Draw category ticks at labels or at category boundaries.",
    ),
    "mirror": AttributeSpec(
        ValType.ENUMERATED,
        values=(True, "ticks", False, "all", "allticks"),
        dflt=False,
        description="Mirror the axis line and/or ticks to the opposite side.",
    ),
    "ticklen": AttributeSpec(ValType.NUMBER, min=0, dflt=5, description="Tick length (px)."),
    "tickwidth": AttributeSpec(ValType.NUMBER, min=0, dflt=1, description="Tick width (px)."),
    "tickcolor": AttributeSpec(
        ValType.COLOR, dflt=DEFAULT_LINE_COLOR, description="Tick color."
    ),
    "showticklabels": AttributeSpec(
        ValType.BOOLEAN, dflt=True, description="Whether tick labels are drawn."
    ),
    "automargin": AttributeSpec(
        ValType.BOOLEAN, dflt=False, description="Grow margins to fit tick labels."
    ),
    "tickfont": font_attributes("Tick"),
    "tickangle": AttributeSpec(ValType.ANGLE, dflt="auto", description="Tick label angle."),
    "tickprefix": AttributeSpec(ValType.STRING, dflt="", description="Tick label prefix."),
    "showtickprefix": AttributeSpec(
        ValType.ENUMERATED,
        values=_SHOW_ATTR_VALUES,
        dflt="all",
        description="Which ticks show the prefix.",
    ),
    "ticksuffix": AttributeSpec(ValType.STRING, dflt="", description="Tick label suffix."),
    "showticksuffix": AttributeSpec(
        ValType.ENUMERATED,
        values=_SHOW_ATTR_VALUES,
        dflt="all",
        description="Which ticks show the suffix.",
    ),
    "showexponent": AttributeSpec(
        ValType.ENUMERATED,
        values=_SHOW_ATTR_VALUES,
        dflt="all",
        description="Which ticks show an exponent.",
    ),
    "exponentformat": AttributeSpec(
        ValType.ENUMERATED,
        values=("none", "e", "E", "power", "SI", "B"),
        dflt="B",
        description="Exponent notation for large/small tick values.",
    ),
    "separatethousands": AttributeSpec(
        ValType.BOOLEAN, dflt=False, description="Group thousands in tick labels."
    ),
    "tickformat": AttributeSpec(ValType.STRING, dflt="", description="Tick label format."),
    "showline": AttributeSpec(ValType.BOOLEAN, dflt=False, description="Draw the axis line."),
    "linecolor": AttributeSpec(
        ValType.COLOR, dflt=DEFAULT_LINE_COLOR, description="Axis line color."
    ),
    "linewidth": AttributeSpec(ValType.NUMBER, min=0, dflt=1, description="Axis line width."),
    "showgrid": AttributeSpec(ValType.BOOLEAN, description="Draw grid lines."),
    "gridcolor": AttributeSpec(ValType.COLOR, dflt="#eee", description="Grid line color."),
    "gridwidth": AttributeSpec(ValType.NUMBER, min=0, dflt=1, description="Grid line width."),
    "zeroline": AttributeSpec(ValType.BOOLEAN, description="Draw the zero line."),
    "zerolinecolor": AttributeSpec(
        ValType.COLOR, dflt=DEFAULT_LINE_COLOR, description="Zero line color."
    ),
    "zerolinewidth": AttributeSpec(
        ValType.NUMBER, dflt=1, description="Zero line width."
    ),
    "showdividers": AttributeSpec(
        ValType.BOOLEAN, dflt=True, description="Draw dividers between multi-category groups."
    ),
    "dividercolor": AttributeSpec(
        ValType.COLOR, dflt=DEFAULT_LINE_COLOR, description="Divider color."
    ),
    "dividerwidth": AttributeSpec(ValType.NUMBER, dflt=1, description="Divider width."),
}


def lookup_spec(attributes: AttributeMap, path: str) -> AttributeSpec | None:
    """Return the spec addressed by a dotted ``path``, or ``None`` if undeclared.

    Args:
        attributes (AttributeMap): Root spec map.
        path (str): Dotted attribute path, e.g. ``"title.font.size"``.

    Returns:
        AttributeSpec | None: The leaf spec, or ``None`` when the path does not
        end on a declared attribute.
    """
    node: AttributeSpec | AttributeMap = attributes
    for part in split_path(path):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, AttributeSpec) else None


def iter_specs(attributes: AttributeMap, prefix: str = "") -> list[tuple[str, AttributeSpec]]:
    """Flatten a spec map into ``(dotted_path, spec)`` pairs in declaration order."""
    out: list[tuple[str, AttributeSpec]] = []
    for name, node in attributes.items():
        path = f"{prefix}.{name}" if prefix else name
        if isinstance(node, AttributeSpec):
            out.append((path, node))
        else:
            out.extend(iter_specs(node, path))
    return out
