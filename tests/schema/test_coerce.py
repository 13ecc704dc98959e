# topmark:header:start
#
#   project      : AxisConf
#   file         : test_coerce.py
#   file_relpath : tests/schema/test_coerce.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the coercion contract: validate, default, write, return."""

from __future__ import annotations

from typing import Any

import pytest

from axisconf.schema.attributes import AXIS_ATTRIBUTES, AttributeSpec, ValType, lookup_spec
from axisconf.schema.coerce import (
    UnknownAttributeError,
    coerce,
    coerce2,
    coerce_font,
    make_coercer,
    validate,
)
from tests.conftest import parametrize


@parametrize(
    "attr, value, dflt, expected",
    [
        ("visible", "yes", True, True),
        ("visible", False, True, False),
        # enumerated values match strictly: 1 is not True
        ("autorange", 1, False, False),
        ("autorange", "reversed", True, "reversed"),
        ("ticklen", -1, None, 5),
        ("ticklen", "7.5", None, 7.5),
        ("nticks", 3.0, None, 3),
        ("nticks", 3.5, None, 0),
        ("hoverformat", 5, None, "5"),
        ("color", "not-a-color", None, "#444"),
        ("color", "rgb(1, 2, 3)", None, "rgb(1, 2, 3)"),
        ("tickangle", 270, None, -90),
        ("tickangle", "auto", None, "auto"),
        ("tickangle", 45, None, 45),
        ("categoryarray", ("a", "b"), None, ["a", "b"]),
        ("range", ["a", 1, 2], None, ["a", 1, 2]),
        ("range", "0,1", None, None),
    ],
)
def test_coerce_values(attr: str, value: Any, dflt: Any, expected: Any) -> None:
    out: dict[str, Any] = {}
    result = coerce({attr: value}, out, AXIS_ATTRIBUTES, attr, dflt)
    assert result == expected
    assert type(result) is type(expected)
    assert out[attr] == expected


def test_coerce_always_writes_even_none() -> None:
    out: dict[str, Any] = {}
    assert coerce({}, out, AXIS_ATTRIBUTES, "title.text") is None
    assert out == {"title": {"text": None}}


def test_none_default_selects_schema_default() -> None:
    out: dict[str, Any] = {}
    assert coerce({}, out, AXIS_ATTRIBUTES, "ticklen") == 5
    assert coerce({}, out, AXIS_ATTRIBUTES, "ticklen", 9) == 9


def test_unknown_attribute_raises() -> None:
    with pytest.raises(UnknownAttributeError):
        coerce({}, {}, AXIS_ATTRIBUTES, "no.such.attr")


def test_coerce2_reports_explicit_input() -> None:
    out: dict[str, Any] = {}
    assert coerce2({}, out, AXIS_ATTRIBUTES, "ticklen") is False
    assert out["ticklen"] == 5

    out = {}
    # invalid but present: the (default) value is returned and truthy
    assert coerce2({"ticklen": -3}, out, AXIS_ATTRIBUTES, "ticklen") == 5
    assert coerce2({"tickwidth": 2}, out, AXIS_ATTRIBUTES, "tickwidth") == 2


def test_coerce_font_uses_per_part_defaults() -> None:
    out: dict[str, Any] = {}
    bound = make_coercer({"tickfont": {"size": 20}}, out, AXIS_ATTRIBUTES)
    font = coerce_font(bound, "tickfont", {"family": "Arial", "size": 12, "color": "#123"})
    assert font == {"family": "Arial", "size": 20, "color": "#123"}
    assert out == {"tickfont": font}


def test_info_array_items_use_item_specs() -> None:
    spec = AttributeSpec(
        ValType.INFO_ARRAY,
        items=(AttributeSpec(ValType.NUMBER), AttributeSpec(ValType.BOOLEAN)),
        free_length=True,
    )
    assert validate(spec, ["3", "x", True], [0, False]) == [3.0, False, True]


def test_lookup_spec_requires_leaf() -> None:
    assert lookup_spec(AXIS_ATTRIBUTES, "title.font.size") is not None
    assert lookup_spec(AXIS_ATTRIBUTES, "title.font") is None
    assert lookup_spec(AXIS_ATTRIBUTES, "title.font.size.extra") is None
