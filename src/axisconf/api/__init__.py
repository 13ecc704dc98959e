# topmark:header:start
#
#   project      : AxisConf
#   file         : __init__.py
#   file_relpath : src/axisconf/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public AxisConf API (stable surface).

This module exposes a **small, typed API** for resolving axis configurations
programmatically without going through the CLI.

Options contract
----------------
- Functions accept ``options`` either as a frozen `ResolveOptions`, as a plain
  **mapping** mirroring the TOML shape of ``axisconf-default.toml``
  (``{"options": {...}, "titles": {...}}``), or ``None`` for the bundled
  defaults. Mappings are layered on top of the bundled defaults.
- The `MutableResolveOptions` builder is **not part of the public API**.

```python
from axisconf import api

result = api.resolve_layout(
    {
        "xaxis": {"type": "date", "range": [0, 10], "rangebreaks": [{"bounds": [2, 5]}]},
        "data": [{"type": "scatter", "x": [1, 2, 3]}],
    },
    options={"options": {"show_grid": False}},
)
result.axes["xaxis"]["rangebreaks"][0]["enabled"]  # True
```
"""

from __future__ import annotations

import copy
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from axisconf.axis.defaults import resolve_axis
from axisconf.axis.layout import DEFAULT_TITLES, LayoutState
from axisconf.axis.model import MutableAxis
from axisconf.config.logging import axis_context, get_logger
from axisconf.config.model import MutableResolveOptions, ResolveOptions, default_options
from axisconf.constants import AXISCONF_VERSION
from axisconf.diagnostic import FrozenDiagnosticLog
from axisconf.lib.increment import increment_numeric
from axisconf.schema.attributes import AXIS_ATTRIBUTES
from axisconf.schema.coerce import make_coercer

if TYPE_CHECKING:
    from axisconf.axis.model import ResolvedAxis
    from axisconf.config.logging import AxisconfLogger

logger: AxisconfLogger = get_logger(__name__)

AXIS_KEY_RE: re.Pattern[str] = re.compile(r"^([xy])axis(\d*)$")

OptionsLike = ResolveOptions | Mapping[str, Any] | None


@dataclass(frozen=True, slots=True)
class ResolvedLayout:
    """Result of `resolve_layout`.

    Attributes:
        axes (dict[str, ResolvedAxis]): Resolved axes keyed by layout key
            (``xaxis``, ``yaxis2``, ...), in input order.
        data (tuple[dict[str, Any], ...]): Copies of the input traces, with
            ``visible`` forced off where a trace cannot be drawn.
        diagnostics (FrozenDiagnosticLog): All warnings of the pass, in order.
    """

    axes: dict[str, ResolvedAxis] = field(default_factory=lambda: {})
    data: tuple[dict[str, Any], ...] = ()
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)


def _normalize_options(options: OptionsLike) -> ResolveOptions:
    if isinstance(options, ResolveOptions):
        return options
    if options is None:
        return default_options()
    layer = MutableResolveOptions.from_toml_dict(dict(options))
    layer.sources = ["<api>"]
    return MutableResolveOptions.from_defaults().merge_with(layer).freeze()


def axis_id_from_key(key: str) -> tuple[str, str] | None:
    """Return ``(letter, axis_id)`` for a layout key such as ``"yaxis2"``.

    ``xaxis`` and ``xaxis1`` both map to axis id ``x``. Other keys yield ``None``.
    """
    match = AXIS_KEY_RE.match(key)
    if match is None:
        return None
    letter, number = match.groups()
    return letter, letter if number in ("", "1") else f"{letter}{number}"


def _resolve_one(
    axis_in: Mapping[str, Any],
    letter: str,
    axis_id: str,
    options: ResolveOptions,
    layout: LayoutState,
) -> ResolvedAxis:
    axis_out = MutableAxis(letter=letter, axis_id=axis_id)
    coerce = make_coercer(axis_in, axis_out.attrs, AXIS_ATTRIBUTES)
    coerce("type")

    mark = layout.diagnostics.mark()
    with axis_context(axis_id):
        resolve_axis(axis_in, axis_out, coerce, options, layout)
    return axis_out.freeze(layout.diagnostics.since(mark))


def resolve_axis_config(
    axis_in: Mapping[str, Any] | None,
    *,
    letter: str = "x",
    axis_id: str | None = None,
    options: OptionsLike = None,
    layout: LayoutState | None = None,
) -> ResolvedAxis:
    """Resolve a single axis.

    Args:
        axis_in (Mapping[str, Any] | None): Partial axis attributes (dotted
            paths are nested mappings, e.g. ``{"title": {"text": "Time"}}``).
        letter (str): Axis letter, ``"x"`` or ``"y"``.
        axis_id (str | None): Axis id traces refer to (defaults to ``letter``).
        options (OptionsLike): Resolution options.
        layout (LayoutState | None): Shared layout state; a fresh one is built
            from ``options`` when omitted.

    Returns:
        ResolvedAxis: The immutable resolved axis.
    """
    base: ResolveOptions = _normalize_options(options)
    if layout is None:
        layout = LayoutState(
            default_titles={**DEFAULT_TITLES, **base.default_titles},
            data=list(base.data),
        )
    axis_options = base.for_axis(letter, data=layout.data)
    return _resolve_one(axis_in or {}, letter, axis_id or letter, axis_options, layout)


def resolve_layout(layout_in: Mapping[str, Any], *, options: OptionsLike = None) -> ResolvedLayout:
    """Resolve every ``xaxis*``/``yaxis*`` entry of a layout document.

    Traces are read from ``layout_in["data"]``; they are copied, never mutated.
    All axes share one `LayoutState`, so the returned diagnostics hold every
    warning of the pass while each axis keeps the ones emitted on its behalf.

    Args:
        layout_in (Mapping[str, Any]): Layout document.
        options (OptionsLike): Resolution options.

    Returns:
        ResolvedLayout: The resolved axes, the (possibly updated) traces and the
        diagnostics.
    """
    base: ResolveOptions = _normalize_options(options)

    raw_data: Any = layout_in.get("data")
    data: list[dict[str, Any]] = [
        copy.deepcopy(dict(trace))
        for trace in (raw_data if isinstance(raw_data, list | tuple) else [])
        if isinstance(trace, Mapping)
    ]
    layout = LayoutState(
        default_titles={**DEFAULT_TITLES, **base.default_titles},
        data=data,
    )

    axes: dict[str, ResolvedAxis] = {}
    for key, axis_in in layout_in.items():
        ids = axis_id_from_key(key)
        if ids is None:
            continue
        if not isinstance(axis_in, Mapping):
            logger.warning("Ignoring %s: expected a table, got %s", key, type(axis_in).__name__)
            continue
        letter, axis_id = ids
        axes[key] = _resolve_one(axis_in, letter, axis_id, base.for_axis(letter, data=data), layout)

    logger.info("Resolved %d axes (%d diagnostics)", len(axes), len(layout.diagnostics))
    return ResolvedLayout(axes=axes, data=tuple(data), diagnostics=layout.diagnostics.freeze())


def get_version() -> str:
    """Return the installed AxisConf version."""
    return AXISCONF_VERSION


__all__ = [
    "OptionsLike",
    "ResolvedLayout",
    "axis_id_from_key",
    "get_version",
    "increment_numeric",
    "resolve_axis_config",
    "resolve_layout",
]
