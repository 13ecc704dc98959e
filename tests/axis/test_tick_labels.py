# topmark:header:start
#
#   project      : AxisConf
#   file         : test_tick_labels.py
#   file_relpath : tests/axis/test_tick_labels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the two tick-label passes."""

from __future__ import annotations

from typing import Any

from axisconf.axis.tick_labels import (
    TickLabelPass,
    handle_tick_label_defaults,
    show_attribute_default,
)
from axisconf.axis.types import AxisType
from axisconf.config.model import FontDefaults
from tests.conftest import make_axis, make_options, parametrize


@parametrize(
    "axis_in, expected",
    [
        ({}, None),
        ({"showexponent": "first", "showtickprefix": "first"}, "first"),
        ({"showexponent": "first", "showticksuffix": "last"}, None),
        ({"showticksuffix": "none"}, "none"),
    ],
)
def test_show_attribute_default(axis_in: dict[str, Any], expected: Any) -> None:
    assert show_attribute_default(axis_in) == expected


def test_prefix_pass_only_resolves_show_attr_when_prefix_set() -> None:
    axis_in = {"tickprefix": "$", "showexponent": "last"}
    axis, coerce = make_axis(axis_in)
    handle_tick_label_defaults(
        axis_in, axis, coerce, AxisType.LINEAR, make_options(), TickLabelPass.PREFIX_SUFFIX
    )
    assert axis.get("tickprefix") == "$"
    assert axis.get("showtickprefix") == "last"
    assert axis.get("ticksuffix") == ""
    assert not axis.has("showticksuffix")
    assert not axis.has("showticklabels")


def test_format_pass_linear_defaults() -> None:
    axis, coerce = make_axis({})
    handle_tick_label_defaults(
        {}, axis, coerce, AxisType.LINEAR, make_options(), TickLabelPass.FORMAT
    )
    out = axis.to_dict()
    assert out["showticklabels"] is True
    assert out["tickfont"] == {
        "family": FontDefaults().family,
        "size": 12,
        "color": "#444",
    }
    assert out["tickangle"] == "auto"
    assert out["tickformat"] == ""
    assert out["showexponent"] == "all"
    assert out["exponentformat"] == "B"
    assert out["separatethousands"] is False
    assert "tickformatstops" not in out
    assert "tickprefix" not in out


def test_tick_font_follows_custom_axis_color() -> None:
    axis, coerce = make_axis({})
    axis.set("color", "red")
    handle_tick_label_defaults(
        {}, axis, coerce, AxisType.LINEAR, make_options(), TickLabelPass.FORMAT
    )
    assert axis.get("tickfont.color") == "red"


def test_category_axes_skip_number_formatting() -> None:
    axis, coerce = make_axis({}, axis_type="category")
    handle_tick_label_defaults({}, axis, coerce, AxisType.CATEGORY, make_options())
    assert axis.has("tickangle")
    assert not axis.has("tickformat")
    assert not axis.has("exponentformat")


def test_date_axes_skip_exponent_attributes() -> None:
    axis, coerce = make_axis({}, axis_type="date")
    handle_tick_label_defaults({}, axis, coerce, AxisType.DATE, make_options())
    assert axis.get("tickformat") == ""
    assert not axis.has("showexponent")


def test_explicit_tickformat_skips_exponent_attributes() -> None:
    axis_in = {"tickformat": ".2f"}
    axis, coerce = make_axis(axis_in)
    handle_tick_label_defaults(axis_in, axis, coerce, AxisType.LINEAR, make_options())
    assert axis.get("tickformat") == ".2f"
    assert not axis.has("exponentformat")


def test_hidden_labels_skip_the_rest() -> None:
    axis_in = {"showticklabels": False}
    axis, coerce = make_axis(axis_in)
    handle_tick_label_defaults(axis_in, axis, coerce, AxisType.LINEAR, make_options())
    assert axis.get("showticklabels") is False
    assert not axis.has("tickfont")
    assert not axis.has("tickformat")


def test_tickformatstops_are_resolved_per_item() -> None:
    axis_in: dict[str, Any] = {
        "tickformatstops": [{"dtickrange": [None, 1000], "value": "%H:%M"}, "bogus"]
    }
    axis, coerce = make_axis(axis_in, axis_type="date")
    handle_tick_label_defaults(axis_in, axis, coerce, AxisType.DATE, make_options())
    assert axis.to_dict()["tickformatstops"] == [
        {"enabled": True, "dtickrange": [None, 1000], "value": "%H:%M"},
        {"enabled": False},
    ]
