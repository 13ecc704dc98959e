# topmark:header:start
#
#   project      : AxisConf
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for layout loading and resolved-axis rendering."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest
import tomlkit

from axisconf.config.io import (
    LayoutLoadError,
    drop_none,
    get_bool_value_or_none,
    get_number_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_layout_file,
    render_axes_json,
    render_axes_toml,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_typed_getters() -> None:
    table: dict[str, Any] = {"s": "x", "b": True, "i": 0, "n": 2.5, "t": {"k": 1}}
    assert get_string_value_or_none(table, "s") == "x"
    assert get_string_value_or_none(table, "b") is None
    assert get_bool_value_or_none(table, "b") is True
    assert get_bool_value_or_none(table, "i") is False
    assert get_bool_value_or_none(table, "s") is None
    assert get_number_value_or_none(table, "n") == 2.5
    assert get_number_value_or_none(table, "b") is None
    assert get_table_value(table, "t") == {"k": 1}
    assert get_table_value(table, "s") == {}


def test_load_defaults_dict() -> None:
    data = load_defaults_dict()
    assert set(data) == {"options", "titles"}


def test_load_layout_toml_and_json(tmp_path: Path) -> None:
    toml_file = tmp_path / "layout.toml"
    toml_file.write_text('[xaxis]\ntype = "date"\n\n[[data]]\ntype = "bar"\n', encoding="utf-8")
    assert load_layout_file(toml_file) == {"xaxis": {"type": "date"}, "data": [{"type": "bar"}]}

    json_file = tmp_path / "layout.JSON"
    json_file.write_text(json.dumps({"yaxis": {"range": [0, 1]}}), encoding="utf-8")
    assert load_layout_file(json_file) == {"yaxis": {"range": [0, 1]}}


@pytest.mark.parametrize(
    "name, content",
    [
        ("broken.toml", "[xaxis\n"),
        ("broken.json", "{"),
        ("list.json", "[1, 2]"),
    ],
)
def test_load_layout_errors(tmp_path: Path, name: str, content: str) -> None:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    with pytest.raises(LayoutLoadError):
        load_layout_file(path)


def test_missing_layout_file(tmp_path: Path) -> None:
    with pytest.raises(LayoutLoadError, match="Cannot read"):
        load_layout_file(tmp_path / "nope.toml")


def test_drop_none() -> None:
    assert drop_none({"a": None, "b": [1, None, {"c": None}]}) == {"b": [1, {}]}


def test_render_axes_toml() -> None:
    axes: dict[str, Any] = {
        "xaxis": {
            "type": "date",
            "range": ["2020-01-01", "2020-02-01"],
            "title": {"text": None, "font": {"size": 14}},
            "rangebreaks": [{"enabled": True, "bounds": ["sat", "mon"]}],
        }
    }
    text = render_axes_toml(axes, header="Resolved by test")
    assert text.startswith("# Resolved by test\n")
    parsed = tomlkit.parse(text).unwrap()
    assert parsed == {
        "xaxis": {
            "type": "date",
            "range": ["2020-01-01", "2020-02-01"],
            "title": {"font": {"size": 14}},
            "rangebreaks": [{"enabled": True, "bounds": ["sat", "mon"]}],
        }
    }


def test_render_axes_json() -> None:
    text = render_axes_json({"yaxis": {"range": [0, 1], "title": {"text": None}}})
    assert json.loads(text) == {"yaxis": {"range": [0, 1], "title": {"text": None}}}
