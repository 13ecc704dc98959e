# topmark:header:start
#
#   project      : AxisConf
#   file         : increment.py
#   file_relpath : src/axisconf/lib/increment.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Floating-point stepping with decimal representation-error mitigation.

Adding small decimal fractions in binary floating point accumulates
representation error: ``0.1 + 0.2`` is ``0.30000000000000004``, while
``(10 * 0.1 + 10 * 0.2) / 10`` is ``0.3``. `increment_numeric` scales both
operands toward integer-like magnitudes before adding, then rounds results
whose decimal text is suspiciously long.

Limitations:
    This is a heuristic, not arbitrary-precision arithmetic. Some sums are still
    off in the last binary digit and some legitimately long results get rounded
    to 12 significant digits.
"""

from __future__ import annotations

import math


def number_text(value: float) -> str:
    """Render a number the way tick/range values are displayed.

    Uses the shortest round-trip digits (as ``repr`` does) but lays them out with
    the positional/exponential thresholds of ECMAScript ``Number.prototype.toString``
    (positional for ``1e-7 < |v| < 1e21``, no trailing ``.0`` on integral values).

    Args:
        value (float): Number to render.

    Returns:
        str: The textual representation.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign: str = "-" if value < 0 else ""
    text: str = repr(abs(float(value)))
    mantissa, _, exp_text = text.partition("e")
    exponent: int = int(exp_text) if exp_text else 0
    int_part, _, frac_part = mantissa.partition(".")

    all_digits: str = int_part + frac_part
    leading_zeros: int = len(all_digits) - len(all_digits.lstrip("0"))
    digits: str = all_digits.strip("0")
    # value == 0.<digits> * 10**n
    n: int = len(int_part) + exponent - leading_zeros
    k: int = len(digits)

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * (-n) + digits

    e: int = n - 1
    e_text: str = ("+" if e > 0 else "-") + str(abs(e))
    if k == 1:
        return sign + digits + "e" + e_text
    return sign + digits[0] + "." + digits[1:] + "e" + e_text


def increment_numeric(x: float, delta: float | None) -> float:
    """Return ``x + delta`` with decimal representation error mitigated.

    A falsy ``delta`` (``0``, ``None`` or NaN) is a no-op and returns ``x``
    unchanged.

    Args:
        x (float): Starting value.
        delta (float | None): Step to add.

    Returns:
        float: The incremented value.
    """
    if not delta or math.isnan(delta):
        return x

    # 0.3 != 0.1 + 0.2 == 0.30000000000000004
    # but 0.3 == (10 * 0.1 + 10 * 0.2) / 10
    scale: float = 1 / abs(delta)
    if scale < 1:
        scale = 1
    new_x: float = (scale * x + scale * delta) / scale

    # e.g. 0.3 * 3 == 0.8999999999999999
    len_dt: int = len(number_text(delta))
    len_x0: int = len(number_text(x))
    len_x1: int = len(number_text(new_x))

    if len_x1 >= len_x0 + len_dt:  # likely a rounding error
        new_x = float(f"{new_x:.12g}")

    return new_x
