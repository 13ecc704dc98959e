# topmark:header:start
#
#   project      : AxisConf
#   file         : model.py
#   file_relpath : src/axisconf/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolution diagnostics.

Axis resolution never raises on bad input. When a resolver overrides user intent
in a way the user should hear about (hiding a trace that cannot be drawn on an
axis with range breaks, for instance) it records a `Diagnostic` instead. Each
diagnostic remembers the axis it was emitted for and, where relevant, the trace
it concerns, so callers can group or filter them.

A `DiagnosticLog` is shared by all axes of a layout; `DiagnosticLog.mark` and
`DiagnosticLog.since` cut out the slice emitted while one axis was resolved.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from yachalk import chalk

from axisconf.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from axisconf.config.logging import AxisconfLogger


logger: AxisconfLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity of a diagnostic, ordered INFO < WARNING < ERROR."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function used to print this level."""
        return _LEVEL_COLORS[self]


_LEVEL_COLORS: dict[DiagnosticLevel, Callable[[str], str]] = {
    DiagnosticLevel.INFO: chalk.blue,
    DiagnosticLevel.WARNING: chalk.yellow,
    DiagnosticLevel.ERROR: chalk.red_bright,
}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A message emitted while resolving an axis.

    Attributes:
        level (DiagnosticLevel): Severity.
        message (str): Human-readable text.
        axis_id (str | None): Axis being resolved (``x``, ``y2``, ...).
        trace_index (int | None): Index of the trace concerned, if any.
        trace_type (str | None): Type of the trace concerned, if any.
    """

    level: DiagnosticLevel
    message: str
    axis_id: str | None = None
    trace_index: int | None = None
    trace_type: str | None = None

    def describe(self) -> str:
        """Return ``[level] axis: message`` (the axis part only when known)."""
        where = f"{self.axis_id}: " if self.axis_id else ""
        return f"[{self.level.value}] {where}{self.message}"


@dataclass(frozen=True, slots=True)
class DiagnosticStats:
    """Per-level counts of a set of diagnostics."""

    n_info: int = 0
    n_warning: int = 0
    n_error: int = 0

    @property
    def total(self) -> int:
        """Number of diagnostics counted."""
        return self.n_info + self.n_warning + self.n_error


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Count ``diagnostics`` per level.

    Args:
        diagnostics (Iterable[Diagnostic]): Diagnostics to count.

    Returns:
        DiagnosticStats: The per-level counts.
    """
    counts: Counter[DiagnosticLevel] = Counter(d.level for d in diagnostics)
    return DiagnosticStats(
        n_info=counts[DiagnosticLevel.INFO],
        n_warning=counts[DiagnosticLevel.WARNING],
        n_error=counts[DiagnosticLevel.ERROR],
    )


@dataclass
class DiagnosticLog:
    """Append-only sink shared by every axis of a resolution pass.

    Attributes:
        items (list[Diagnostic]): Diagnostics in emission order.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def add(self, diagnostic: Diagnostic) -> None:
        """Append ``diagnostic``."""
        logger.trace("Recording %s", diagnostic.describe())
        self.items.append(diagnostic)

    def add_warning(
        self,
        message: str,
        *,
        axis_id: str | None = None,
        trace_index: int | None = None,
        trace_type: str | None = None,
    ) -> Diagnostic:
        """Append a warning and return it.

        Args:
            message (str): Warning text.
            axis_id (str | None): Axis the warning was emitted for.
            trace_index (int | None): Trace concerned, if any.
            trace_type (str | None): Type of that trace.

        Returns:
            Diagnostic: The recorded warning.
        """
        diagnostic = Diagnostic(
            DiagnosticLevel.WARNING,
            message,
            axis_id=axis_id,
            trace_index=trace_index,
            trace_type=trace_type,
        )
        self.add(diagnostic)
        return diagnostic

    def mark(self) -> int:
        """Return a position to pass to `since` later."""
        return len(self.items)

    def since(self, mark: int) -> FrozenDiagnosticLog:
        """Return the diagnostics recorded after ``mark`` as a frozen log."""
        return FrozenDiagnosticLog(items=tuple(self.items[mark:]))

    def freeze(self) -> FrozenDiagnosticLog:
        """Return an immutable snapshot of the whole log."""
        return self.since(0)

    def stats(self) -> DiagnosticStats:
        """Return per-level counts."""
        return compute_diagnostic_stats(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class FrozenDiagnosticLog:
    """Immutable diagnostics stored on `ResolvedAxis` and `ResolvedLayout`.

    Attributes:
        items (tuple[Diagnostic, ...]): Diagnostics in emission order.
    """

    items: tuple[Diagnostic, ...] = ()

    def stats(self) -> DiagnosticStats:
        """Return per-level counts."""
        return compute_diagnostic_stats(self.items)

    def for_axis(self, axis_id: str) -> tuple[Diagnostic, ...]:
        """Return the diagnostics emitted for ``axis_id``."""
        return tuple(d for d in self.items if d.axis_id == axis_id)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
