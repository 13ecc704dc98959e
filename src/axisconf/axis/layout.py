# topmark:header:start
#
#   project      : AxisConf
#   file         : layout.py
#   file_relpath : src/axisconf/axis/layout.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared, read-mostly layout state for a resolution pass.

Every axis of a layout is resolved against the same `LayoutState`. Resolvers
only read from it, with one exception: `LayoutState.warn` appends to the
shared diagnostic log, which is the warning sink of the pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from axisconf.config.logging import get_logger
from axisconf.diagnostic import DiagnosticLog

if TYPE_CHECKING:
    from axisconf.config.logging import AxisconfLogger

logger: AxisconfLogger = get_logger(__name__)

DEFAULT_TITLES: dict[str, str] = {
    "x": "Click to enter X axis title",
    "y": "Click to enter Y axis title",
}


@dataclass
class LayoutState:
    """Layout-wide state shared by all axes of a resolution pass.

    Attributes:
        default_titles (dict[str, str]): Default axis title per axis letter.
        data (list[dict[str, Any]]): The plotted traces of the layout.
        diagnostics (DiagnosticLog): Warning sink.
    """

    default_titles: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_TITLES))
    data: list[dict[str, Any]] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    def has(self, trace_type: str) -> bool:
        """Return True if any trace of the layout has type ``trace_type``."""
        return any(trace.get("type") == trace_type for trace in self.data)

    def default_title(self, letter: str) -> str | None:
        """Return the default title for axes with the given letter."""
        return self.default_titles.get(letter)

    def warn(
        self,
        message: str,
        *,
        axis_id: str | None = None,
        trace_index: int | None = None,
        trace_type: str | None = None,
    ) -> None:
        """Record a warning in the diagnostic log and the logger; never raises."""
        logger.warning("%s", message)
        self.diagnostics.add_warning(
            message, axis_id=axis_id, trace_index=trace_index, trace_type=trace_type
        )
