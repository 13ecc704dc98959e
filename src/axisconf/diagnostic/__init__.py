# topmark:header:start
#
#   project      : AxisConf
#   file         : __init__.py
#   file_relpath : src/axisconf/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives and helpers.

Design:
    - Diagnostics are represented by immutable `Diagnostic` instances.
    - During resolution, diagnostics are accumulated in a mutable `DiagnosticLog`
      owned by the layout state.
    - Resolved axes store diagnostics as an immutable `FrozenDiagnosticLog`.
"""

from __future__ import annotations

from axisconf.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    DiagnosticStats,
    FrozenDiagnosticLog,
    compute_diagnostic_stats,
)

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "DiagnosticStats",
    "FrozenDiagnosticLog",
    "compute_diagnostic_stats",
]
