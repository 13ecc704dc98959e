# topmark:header:start
#
#   project      : AxisConf
#   file         : test_nested.py
#   file_relpath : tests/lib/test_nested.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dotted-path access into nested mappings."""

from __future__ import annotations

from typing import Any

from axisconf.lib.nested import delete_nested, get_nested, has_nested, set_nested


def test_get_nested() -> None:
    data: dict[str, Any] = {"title": {"font": {"size": 14}}, "range": [0, 1]}
    assert get_nested(data, "title.font.size") == 14
    assert get_nested(data, "title.text") is None
    assert get_nested(data, "range.0") is None
    assert get_nested(None, "title") is None


def test_set_nested_creates_and_replaces_parents() -> None:
    data: dict[str, Any] = {"title": "flat"}
    set_nested(data, "title.font.color", "red")
    assert data == {"title": {"font": {"color": "red"}}}


def test_delete_and_has_nested() -> None:
    data: dict[str, Any] = {"title": {"text": None}}
    assert has_nested(data, "title.text")
    assert not has_nested(data, "title.font")
    delete_nested(data, "title.text")
    delete_nested(data, "missing.path")
    assert data == {"title": {}}
