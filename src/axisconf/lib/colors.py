# topmark:header:start
#
#   project      : AxisConf
#   file         : colors.py
#   file_relpath : src/axisconf/lib/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color validation and mixing.

Colors are CSS-style strings: hex (``#444``, ``#1f77b4``), named colors
(``"royalblue"``) and functional ``rgb(...)`` / ``rgba(...)`` notation. Hex and
named colors are delegated to `matplotlib.colors`; the functional notation is
parsed here since matplotlib has no equivalent.
"""

from __future__ import annotations

import math
import re
from typing import Any, Final

from matplotlib import colors as mcolors

RGBA = tuple[float, float, float, float]

# Percentage of the way from the axis color to the background used for grid lines
LIGHT_FRACTION: Final[float] = 100 * (0xE - 0x4) / (0xF - 0x4)

_RGB_FUNC_RE: Final[re.Pattern[str]] = re.compile(
    r"^\s*rgba?\(\s*([\d.]+%?)\s*,\s*([\d.]+%?)\s*,\s*([\d.]+%?)\s*(?:,\s*([\d.]+)\s*)?\)\s*$",
    re.IGNORECASE,
)


def _channel(token: str) -> float | None:
    try:
        if token.endswith("%"):
            value = float(token[:-1]) * 255 / 100
        else:
            value = float(token)
    except ValueError:
        return None
    return value if 0 <= value <= 255 else None


def to_rgba(value: Any) -> RGBA | None:
    """Parse a color string into 0-255 RGB channels plus a 0-1 alpha.

    Args:
        value (Any): Candidate color.

    Returns:
        RGBA | None: ``(r, g, b, a)`` or ``None`` when ``value`` is not a color.
    """
    if not isinstance(value, str) or not value.strip():
        return None

    match = _RGB_FUNC_RE.match(value)
    if match is not None:
        r, g, b = (_channel(t) for t in match.groups()[:3])
        alpha_token = match.group(4)
        alpha = 1.0 if alpha_token is None else float(alpha_token)
        if r is None or g is None or b is None or not 0 <= alpha <= 1:
            return None
        return (r, g, b, alpha)

    token = value.strip()
    # Only CSS-like tokens; matplotlib also accepts grayscale floats and cycle refs
    if not (token.startswith("#") or token.isalpha()):
        return None
    if not mcolors.is_color_like(token):
        return None
    r, g, b, a = mcolors.to_rgba(token)
    return (r * 255, g * 255, b * 255, a)


def is_valid_color(value: Any) -> bool:
    """Return True if ``value`` is a color string."""
    return to_rgba(value) is not None


def _js_round(x: float) -> int:
    return math.floor(x + 0.5)


def to_rgb_string(rgba: RGBA) -> str:
    """Render channels as ``rgb(r, g, b)`` (or ``rgba(...)`` when translucent)."""
    r, g, b, a = rgba
    if a == 1:
        return f"rgb({_js_round(r)}, {_js_round(g)}, {_js_round(b)})"
    alpha = _js_round(a * 100) / 100
    return f"rgba({_js_round(r)}, {_js_round(g)}, {_js_round(b)}, {alpha:g})"


def mix(color1: Any, color2: Any, amount: float = 50) -> str:
    """Blend ``color1`` toward ``color2`` by ``amount`` percent.

    Unparseable inputs are treated as opaque black.

    Args:
        color1 (Any): Start color.
        color2 (Any): Target color.
        amount (float): Percentage of the way from ``color1`` to ``color2``.

    Returns:
        str: The blended color in ``rgb(...)`` notation.
    """
    black: RGBA = (0.0, 0.0, 0.0, 1.0)
    c1: RGBA = to_rgba(color1) or black
    c2: RGBA = to_rgba(color2) or black
    p: float = amount / 100
    blended = tuple((b - a) * p + a for a, b in zip(c1, c2, strict=True))
    return to_rgb_string((blended[0], blended[1], blended[2], blended[3]))
