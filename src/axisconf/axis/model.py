# topmark:header:start
#
#   project      : AxisConf
#   file         : model.py
#   file_relpath : src/axisconf/axis/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Axis builder and resolved snapshot.

This module defines:
    - `MutableAxis`: the builder a resolution pass owns and mutates. Resolver
      steps receive it, write attributes through the coercion contract and hand
      it on; nothing else holds a reference while a pass runs.
    - `ResolvedAxis`: an immutable snapshot produced by `MutableAxis.freeze`.
      Use `ResolvedAxis.thaw` → edit → `MutableAxis.freeze` for updates, or feed
      `ResolvedAxis.to_dict()` back in as input for a new resolution pass.

Attributes live in a nested dict (``attrs``) addressed by dotted paths.
Keys starting with an underscore are internal bookkeeping (e.g. the ``_index``
of an array-container item) and are not part of the public view.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from axisconf.axis.types import AxisType, RangeBreak, range_break_from_item
from axisconf.config.logging import get_logger
from axisconf.diagnostic import FrozenDiagnosticLog
from axisconf.lib.nested import delete_nested, get_nested, has_nested, set_nested

if TYPE_CHECKING:
    from collections.abc import Mapping

    from axisconf.axis.convert import AxisConverter
    from axisconf.config.logging import AxisconfLogger

logger: AxisconfLogger = get_logger(__name__)


class ConverterNotReadyError(RuntimeError):
    """Raised when range helpers are used before `set_convert` ran on the axis."""


def public_view(value: Any) -> Any:
    """Return a deep, plain copy of ``value`` without underscore-prefixed keys."""
    if isinstance(value, dict | MappingProxyType):
        return {
            k: public_view(v)
            for k, v in value.items()
            if not (isinstance(k, str) and k.startswith("_"))
        }
    if isinstance(value, list | tuple):
        return [public_view(v) for v in value]
    return value


def _deep_freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({k: _deep_freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_deep_freeze(v) for v in value)
    return value


@dataclass
class MutableAxis:
    """Mutable axis configuration being resolved.

    Attributes:
        letter (str): Axis letter (``"x"`` or ``"y"``).
        axis_id (str): Axis identifier traces refer to (``"x"``, ``"x2"``, ...).
        attrs (dict[str, Any]): Resolved attributes (nested dicts).
        converter (AxisConverter | None): Range/type helpers installed by `set_convert`.
        initial_categories (list[Any]): Category seed set by the category-order step.
    """

    letter: str = "x"
    axis_id: str = "x"
    attrs: dict[str, Any] = field(default_factory=lambda: {})
    converter: AxisConverter | None = None
    initial_categories: list[Any] = field(default_factory=lambda: [])

    @property
    def type(self) -> AxisType:
        """The axis variant; unknown values read as the placeholder type."""
        return AxisType.parse(self.attrs.get("type")) or AxisType.PLACEHOLDER

    def get(self, path: str, default: Any = None) -> Any:
        """Return the attribute at ``path`` (``default`` when unset or ``None``)."""
        value = get_nested(self.attrs, path)
        return default if value is None else value

    def set(self, path: str, value: Any) -> None:
        """Write the attribute at ``path``."""
        set_nested(self.attrs, path, value)

    def delete(self, path: str) -> None:
        """Remove the attribute at ``path`` if present."""
        delete_nested(self.attrs, path)

    def has(self, path: str) -> bool:
        """Return True if ``path`` was written (even with a ``None`` value)."""
        return has_nested(self.attrs, path)

    def _require_converter(self) -> AxisConverter:
        if self.converter is None:
            raise ConverterNotReadyError(
                f"Axis {self.axis_id!r} has no converter; call set_convert() first"
            )
        return self.converter

    def is_valid_range(self, candidate: Any) -> bool:
        """Return True if ``candidate`` is a complete range for this axis type."""
        return self._require_converter().is_valid_range(candidate)

    def clean_range(self) -> None:
        """Normalize ``range`` in place (defaults, clamping, date rendering)."""
        self._require_converter().clean_range(self)

    def range_breaks(self) -> list[RangeBreak]:
        """Return the typed view of the enabled, resolved range breaks."""
        items = self.attrs.get("rangebreaks")
        if not isinstance(items, list):
            return []
        out: list[RangeBreak] = []
        for item in items:
            if isinstance(item, dict):
                brk = range_break_from_item(item)
                if brk is not None:
                    out.append(brk)
        return out

    def to_dict(self) -> dict[str, Any]:
        """Return the public attributes as plain, independent dicts/lists."""
        return public_view(self.attrs)

    def freeze(self, diagnostics: FrozenDiagnosticLog | None = None) -> ResolvedAxis:
        """Return an immutable snapshot of this axis.

        Args:
            diagnostics (FrozenDiagnosticLog | None): Diagnostics emitted while
                resolving this axis.

        Returns:
            ResolvedAxis: The snapshot.
        """
        logger.trace("Freezing axis %s (%s)", self.axis_id, self.type.value)
        return ResolvedAxis(
            letter=self.letter,
            axis_id=self.axis_id,
            type=self.type,
            attributes=_deep_freeze(self.to_dict()),
            range_breaks=tuple(self.range_breaks()),
            initial_categories=tuple(self.initial_categories),
            diagnostics=diagnostics or FrozenDiagnosticLog(),
        )


@dataclass(frozen=True, slots=True)
class ResolvedAxis:
    """Immutable, fully resolved axis configuration.

    Attributes:
        letter (str): Axis letter.
        axis_id (str): Axis identifier.
        type (AxisType): Axis variant.
        attributes (Mapping[str, Any]): Read-only public attributes (nested
            mappings and tuples).
        range_breaks (tuple[RangeBreak, ...]): Enabled range breaks.
        initial_categories (tuple[Any, ...]): Category seed for category axes.
        diagnostics (FrozenDiagnosticLog): Warnings emitted while resolving.
    """

    letter: str
    axis_id: str
    type: AxisType
    attributes: Mapping[str, Any]
    range_breaks: tuple[RangeBreak, ...] = ()
    initial_categories: tuple[Any, ...] = ()
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    def __getitem__(self, key: str) -> Any:
        return self.attributes[key]

    def get(self, path: str, default: Any = None) -> Any:
        """Return the attribute at dotted ``path`` or ``default``."""
        value = get_nested(self.attributes, path)
        return default if value is None else value

    def to_dict(self) -> dict[str, Any]:
        """Return the attributes as plain dicts/lists (suitable as resolver input)."""
        return public_view(self.attributes)

    def thaw(self) -> MutableAxis:
        """Return a mutable builder initialized from this snapshot."""
        return MutableAxis(
            letter=self.letter,
            axis_id=self.axis_id,
            attrs=copy.deepcopy(self.to_dict()),
            initial_categories=list(self.initial_categories),
        )
