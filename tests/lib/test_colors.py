# topmark:header:start
#
#   project      : AxisConf
#   file         : test_colors.py
#   file_relpath : tests/lib/test_colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for color validation and mixing."""

from __future__ import annotations

from typing import Any

from axisconf.lib.colors import LIGHT_FRACTION, is_valid_color, mix, to_rgb_string, to_rgba
from tests.conftest import parametrize


@parametrize(
    "value",
    ["#444", "#1f77b4", "royalblue", "rgb(10, 20, 30)", "rgba(0,0,0,0.5)", "rgb(50%, 0%, 10%)"],
)
def test_valid_colors(value: str) -> None:
    assert is_valid_color(value)


@parametrize(
    "value", ["", "   ", None, 3, "0.5", "C0", "rgb(300, 0, 0)", "rgba(0,0,0,2)", "nocolor"]
)
def test_invalid_colors(value: Any) -> None:
    assert not is_valid_color(value)


def test_to_rgba_scales_channels() -> None:
    assert to_rgba("#fff") == (255.0, 255.0, 255.0, 1.0)
    assert to_rgba("rgba(1, 2, 3, 0.25)") == (1.0, 2.0, 3.0, 0.25)


def test_to_rgb_string() -> None:
    assert to_rgb_string((1, 2, 3, 1)) == "rgb(1, 2, 3)"
    assert to_rgb_string((1, 2, 3, 0.5)) == "rgba(1, 2, 3, 0.5)"


def test_mix_halfway() -> None:
    assert mix("#000", "#fff") == "rgb(128, 128, 128)"


def test_default_grid_color() -> None:
    """The default axis color blended toward white gives the classic light grid."""
    assert mix("#444", "#fff", LIGHT_FRACTION) == "rgb(238, 238, 238)"


def test_mix_treats_garbage_as_black() -> None:
    assert mix("garbage", "#000", 50) == "rgb(0, 0, 0)"
