# topmark:header:start
#
#   project      : AxisConf
#   file         : test_tick_marks_line_grid.py
#   file_relpath : tests/axis/test_tick_marks_line_grid.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for tick mark and line/grid defaults."""

from __future__ import annotations

from typing import Any

from axisconf.axis.line_grid import LineGridOptions, handle_line_grid_defaults
from axisconf.axis.tick_marks import handle_tick_mark_defaults
from tests.conftest import make_axis, make_options

# ---------------------------- tick marks ----------------------------


def test_no_ticks_by_default_drops_tick_style() -> None:
    axis, coerce = make_axis({})
    assert handle_tick_mark_defaults({}, axis, coerce, make_options()) == ""
    assert axis.get("ticks") == ""
    for attr in ("ticklen", "tickwidth", "tickcolor"):
        assert not axis.has(attr)


def test_tick_style_implies_outside_ticks() -> None:
    axis_in = {"ticklen": 8}
    axis, coerce = make_axis(axis_in)
    axis.set("color", "#123")
    assert handle_tick_mark_defaults(axis_in, axis, coerce, make_options()) == "outside"
    assert axis.get("ticklen") == 8
    assert axis.get("tickwidth") == 1
    assert axis.get("tickcolor") == "#123"


def test_outer_ticks_option() -> None:
    axis, coerce = make_axis({})
    assert handle_tick_mark_defaults({}, axis, coerce, make_options(outer_ticks=True)) == "outside"
    assert axis.get("ticklen") == 5


def test_explicit_ticks_win() -> None:
    axis_in = {"ticks": "inside"}
    axis, coerce = make_axis(axis_in)
    assert handle_tick_mark_defaults(axis_in, axis, coerce, make_options()) == "inside"

    axis_in = {"ticks": "", "ticklen": 8}
    axis, coerce = make_axis(axis_in)
    assert handle_tick_mark_defaults(axis_in, axis, coerce, make_options()) == ""
    assert not axis.has("ticklen")


# ---------------------------- line / grid ----------------------------


def _line_grid(axis_in: dict[str, Any], **opts: Any) -> dict[str, Any]:
    axis, coerce = make_axis(axis_in)
    params: dict[str, Any] = {"dflt_color": "#444", "bg_color": "#fff", **opts}
    handle_line_grid_defaults(axis_in, axis, coerce, LineGridOptions(**params))
    return axis.to_dict()


def test_grid_defaults_with_show_grid() -> None:
    out = _line_grid({}, show_grid=True)
    assert out["showline"] is False
    assert "linecolor" not in out
    assert out["showgrid"] is True
    assert out["gridcolor"] == "rgb(238, 238, 238)"
    assert out["gridwidth"] == 1
    assert out["zeroline"] is True
    assert out["zerolinecolor"] == "#444"
    assert out["zerolinewidth"] == 1


def test_styling_a_part_turns_it_on() -> None:
    out = _line_grid({"gridcolor": "red", "linewidth": 2})
    assert out["showgrid"] is True
    assert out["gridcolor"] == "red"
    assert out["showline"] is True
    assert out["linecolor"] == "#444"
    assert out["linewidth"] == 2
    assert out["zeroline"] is False
    assert "zerolinecolor" not in out


def test_hidden_part_drops_styling() -> None:
    out = _line_grid({"showgrid": False, "gridcolor": "red"}, show_grid=True)
    assert out["showgrid"] is False
    assert "gridcolor" not in out
    assert "gridwidth" not in out


def test_no_zero_line() -> None:
    out = _line_grid({}, show_grid=True, no_zero_line=True)
    assert "zeroline" not in out


def test_grid_color_follows_background() -> None:
    out = _line_grid({}, show_grid=True, bg_color="#000", dflt_color="#fff")
    assert out["gridcolor"] == "rgb(23, 23, 23)"
