# topmark:header:start
#
#   project      : AxisConf
#   file         : __init__.py
#   file_relpath : src/axisconf/lib/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Small, dependency-light helpers shared by the resolvers (numbers, dates, colors, paths)."""

from __future__ import annotations

from axisconf.lib.increment import increment_numeric, number_text

__all__ = [
    "increment_numeric",
    "number_text",
]
