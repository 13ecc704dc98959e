# topmark:header:start
#
#   project      : AxisConf
#   file         : test_model.py
#   file_relpath : tests/axis/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the axis builder / snapshot pair and the axis vocabularies."""

from __future__ import annotations

import pytest

from axisconf.axis.model import MutableAxis, public_view
from axisconf.axis.types import AxisType, RangeBreakPattern, ValuesRangeBreak, range_break_from_item
from axisconf.diagnostic import DiagnosticLog
from tests.conftest import parametrize


def _builder() -> MutableAxis:
    axis = MutableAxis(letter="y", axis_id="y2")
    axis.set("type", "date")
    axis.set("title.text", "Time")
    axis.set("rangebreaks", [{"enabled": True, "values": ["2020-01-01"], "_index": 0}])
    axis.initial_categories = ["a"]
    return axis


def test_public_view_drops_internal_keys() -> None:
    assert public_view({"a": [{"_index": 0, "b": 1}], "_c": 2}) == {"a": [{"b": 1}]}


def test_freeze_is_read_only_and_detached() -> None:
    axis = _builder()
    log = DiagnosticLog()
    log.add_warning("careful")
    snapshot = axis.freeze(log.freeze())

    assert snapshot.type is AxisType.DATE
    assert snapshot.axis_id == "y2"
    assert snapshot["title"]["text"] == "Time"
    assert snapshot.get("title.text") == "Time"
    assert snapshot.get("missing", "dflt") == "dflt"
    assert snapshot.range_breaks == (ValuesRangeBreak(values=("2020-01-01",), dvalue=86_400_000),)
    assert len(snapshot.diagnostics) == 1

    with pytest.raises(TypeError):
        snapshot.attributes["type"] = "linear"  # type: ignore[index]

    axis.set("title.text", "changed")
    assert snapshot.get("title.text") == "Time"


def test_thaw_freeze_round_trip() -> None:
    snapshot = _builder().freeze()
    builder = snapshot.thaw()
    assert builder.to_dict() == snapshot.to_dict()
    assert builder.initial_categories == ["a"]
    assert builder.converter is None

    builder.set("title.text", "Other")
    assert builder.freeze().get("title.text") == "Other"
    assert snapshot.get("title.text") == "Time"


def test_builder_accessors() -> None:
    axis = MutableAxis()
    assert axis.type is AxisType.PLACEHOLDER
    axis.set("tickfont.size", 10)
    assert axis.has("tickfont.size")
    assert axis.get("tickfont.size") == 10
    axis.delete("tickfont.size")
    assert not axis.has("tickfont.size")
    assert axis.get("tickfont.size", 12) == 12


@parametrize(
    "raw, expected",
    [
        ("date", AxisType.DATE),
        ("-", AxisType.PLACEHOLDER),
        ("multi_category", AxisType.MULTICATEGORY),
        ("LOG", AxisType.LOG),
        ("polar", None),
        (3, None),
    ],
)
def test_axis_type_parse(raw: object, expected: AxisType | None) -> None:
    assert AxisType.parse(raw) is expected


def test_axis_type_is_categorical() -> None:
    assert AxisType.CATEGORY.is_categorical
    assert AxisType.MULTICATEGORY.is_categorical
    assert not AxisType.DATE.is_categorical


def test_range_break_from_item() -> None:
    assert range_break_from_item({"enabled": False, "bounds": [1, 2]}) is None
    assert range_break_from_item({"enabled": True}) is None
    brk = range_break_from_item({"enabled": True, "bounds": [1, 2], "pattern": "weekday"})
    assert brk is not None
    assert getattr(brk, "pattern") is RangeBreakPattern.DAY_OF_WEEK
