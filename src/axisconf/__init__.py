# topmark:header:start
#
#   project      : AxisConf
#   file         : __init__.py
#   file_relpath : src/axisconf/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AxisConf package.

AxisConf resolves partial cartesian axis attribute sets into complete,
internally consistent axis configurations. It exposes a small typed API
(`axisconf.api`) and a CLI (``axisconf``).
"""

from __future__ import annotations
