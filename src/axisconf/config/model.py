# topmark:header:start
#
#   project      : AxisConf
#   file         : model.py
#   file_relpath : src/axisconf/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolution options and merge policy.

This module defines:
    - `ResolveOptions`: an immutable options bag read by the axis resolvers.
    - `MutableResolveOptions`: a tri-state builder (``None`` = inherit) used to
      layer the bundled defaults, user option files and API/CLI overrides. It
      can be frozen into `ResolveOptions` and thawed back for edits.
    - `FontDefaults`: the inherited font (family, size, color).

Scope:
    - *In scope*: data shapes, field-level defaulting, merge policy
      (`MutableResolveOptions.merge_with`) and freeze/thaw mechanics.
    - *Out of scope*: TOML I/O, which lives in `axisconf.config.io`.

Per-axis context:
    ``letter``, ``title``, ``data`` and ``splom_stash`` describe the axis being
    resolved rather than user preferences. They are not read from TOML; use
    `ResolveOptions.for_axis` to derive a per-axis copy.
"""

from __future__ import annotations

import dataclasses
import functools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from axisconf.config.io import (
    get_bool_value_or_none,
    get_number_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)
from axisconf.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping, MutableMapping, Sequence
    from pathlib import Path

    from axisconf.config.io import TomlTable
    from axisconf.config.logging import AxisconfLogger

logger: AxisconfLogger = get_logger(__name__)

# Keys of the [options] table that hold booleans
_BOOL_OPTIONS: tuple[str, ...] = (
    "show_grid",
    "outer_ticks",
    "automargin",
    "no_hover",
    "no_tickson",
    "visible_dflt",
    "reverse_dflt",
)


@dataclass(frozen=True, slots=True)
class FontDefaults:
    """Inherited font.

    Attributes:
        family (str): Font family list.
        size (float): Font size in px.
        color (str): Font color.
    """

    family: str = '"Open Sans", verdana, arial, sans-serif'
    size: float = 12
    color: str = "#444"

    def to_dict(self) -> dict[str, Any]:
        """Return the font as a plain mapping."""
        return {"family": self.family, "size": self.size, "color": self.color}


# ------------------ Immutable options ------------------


@dataclass(frozen=True, slots=True)
class ResolveOptions:
    """Immutable options for resolving one axis.

    Attributes:
        letter (str): Axis letter (``"x"`` or ``"y"``).
        title (str | None): Display name used to build a default title when the
            layout has none for ``letter``.
        font (FontDefaults): Inherited font.
        outer_ticks (bool): Ticks default to ``"outside"``.
        show_grid (bool): Grid and zero lines default to visible.
        no_hover (bool): The axis does not support hover (skip ``hoverformat``).
        no_tickson (bool): The axis has no ``tickson`` concept.
        data (Sequence[MutableMapping[str, Any]]): The plotted traces; traces
            incompatible with range breaks are hidden in place.
        bg_color (str): Plot background color.
        calendar (str): Default calendar of date axes.
        splom_stash (Mapping[str, Any] | None): Matrix-plot overrides (``label``).
        visible_dflt (bool): When True the axis defaults to hidden.
        reverse_dflt (bool): Autorange defaults to ``"reversed"``.
        automargin (bool): Resolve the ``automargin`` attribute.
        default_titles (Mapping[str, str]): Default title per axis letter.
    """

    letter: str = "x"
    title: str | None = None
    font: FontDefaults = field(default_factory=FontDefaults)
    outer_ticks: bool = False
    show_grid: bool = False
    no_hover: bool = False
    no_tickson: bool = False
    data: Sequence[MutableMapping[str, Any]] = ()
    bg_color: str = "#fff"
    calendar: str = "gregorian"
    splom_stash: Mapping[str, Any] | None = None
    visible_dflt: bool = False
    reverse_dflt: bool = False
    automargin: bool = False
    default_titles: Mapping[str, str] = field(default_factory=lambda: {})

    def for_axis(self, letter: str, **context: Any) -> ResolveOptions:
        """Return a copy bound to one axis (letter plus optional per-axis context).

        Args:
            letter (str): Axis letter.
            **context (Any): Other per-axis fields (``title``, ``data``,
                ``splom_stash``).

        Returns:
            ResolveOptions: The per-axis options.
        """
        return dataclasses.replace(self, letter=letter, **context)

    def to_toml_dict(self) -> TomlTable:
        """Convert the user-facing options into a TOML-serializable dict."""
        options: TomlTable = {
            "font_family": self.font.family,
            "font_size": self.font.size,
            "font_color": self.font.color,
            "bg_color": self.bg_color,
            "calendar": self.calendar,
        }
        for key in _BOOL_OPTIONS:
            options[key] = getattr(self, key)
        return {"options": options, "titles": dict(self.default_titles)}

    def thaw(self) -> MutableResolveOptions:
        """Return a mutable builder initialized from this snapshot."""
        return MutableResolveOptions(
            font_family=self.font.family,
            font_size=self.font.size,
            font_color=self.font.color,
            bg_color=self.bg_color,
            calendar=self.calendar,
            show_grid=self.show_grid,
            outer_ticks=self.outer_ticks,
            automargin=self.automargin,
            no_hover=self.no_hover,
            no_tickson=self.no_tickson,
            visible_dflt=self.visible_dflt,
            reverse_dflt=self.reverse_dflt,
            default_titles=dict(self.default_titles),
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableResolveOptions:
    """Mutable, layered options builder.

    Every scalar field is tri-state: ``None`` means "inherit from the layer
    below". `freeze` fills the remaining gaps from the field defaults of
    `ResolveOptions`.

    Attributes:
        font_family (str | None): Inherited font family.
        font_size (float | None): Inherited font size.
        font_color (str | None): Inherited font color.
        bg_color (str | None): Plot background color.
        calendar (str | None): Default calendar of date axes.
        show_grid (bool | None): Grid lines default to visible.
        outer_ticks (bool | None): Ticks default to outside.
        automargin (bool | None): Resolve ``automargin``.
        no_hover (bool | None): Skip ``hoverformat``.
        no_tickson (bool | None): Skip ``tickson``.
        visible_dflt (bool | None): Axes default to hidden.
        reverse_dflt (bool | None): Autorange defaults to reversed.
        default_titles (dict[str, str]): Default title per axis letter.
        sources (list[str]): Provenance of the merged layers.
    """

    font_family: str | None = None
    font_size: float | None = None
    font_color: str | None = None
    bg_color: str | None = None
    calendar: str | None = None
    show_grid: bool | None = None
    outer_ticks: bool | None = None
    automargin: bool | None = None
    no_hover: bool | None = None
    no_tickson: bool | None = None
    visible_dflt: bool | None = None
    reverse_dflt: bool | None = None
    default_titles: dict[str, str] = field(default_factory=lambda: {})
    sources: list[str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> ResolveOptions:
        """Freeze this builder into immutable `ResolveOptions`."""
        base = ResolveOptions()
        font = FontDefaults(
            family=self.font_family if self.font_family is not None else base.font.family,
            size=self.font_size if self.font_size is not None else base.font.size,
            color=self.font_color if self.font_color is not None else base.font.color,
        )
        bools: dict[str, bool] = {
            key: value if (value := getattr(self, key)) is not None else getattr(base, key)
            for key in _BOOL_OPTIONS
        }
        return ResolveOptions(
            font=font,
            bg_color=self.bg_color if self.bg_color is not None else base.bg_color,
            calendar=self.calendar if self.calendar is not None else base.calendar,
            default_titles=dict(self.default_titles),
            **bools,
        )

    def merge_with(self, other: MutableResolveOptions) -> MutableResolveOptions:
        """Return a new builder where values set in ``other`` override this one.

        Args:
            other (MutableResolveOptions): The higher-precedence layer.

        Returns:
            MutableResolveOptions: The merged builder.
        """
        merged: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            if f.name in ("default_titles", "sources"):
                continue
            theirs = getattr(other, f.name)
            merged[f.name] = theirs if theirs is not None else getattr(self, f.name)
        return MutableResolveOptions(
            default_titles={**self.default_titles, **other.default_titles},
            sources=self.sources + other.sources,
            **merged,
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    @functools.cache
    def get_default_options_toml(cls) -> str:
        """Return the bundled default options as a normalized TOML string."""
        return to_toml(load_defaults_dict())

    @classmethod
    def from_defaults(cls) -> MutableResolveOptions:
        """Load the bundled ``axisconf-default.toml`` options."""
        draft = cls.from_toml_dict(load_defaults_dict())
        draft.sources = ["<defaults>"]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableResolveOptions:
        """Load an options file (same layout as the bundled defaults).

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableResolveOptions: The options layer (empty when unreadable).
        """
        draft = cls.from_toml_dict(load_toml_dict(path))
        draft.sources = [str(path)]
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableResolveOptions:
        """Create a builder from parsed TOML (``[options]`` and ``[titles]`` tables).

        Unknown keys and values of the wrong type are ignored with a warning.

        Args:
            data (TomlTable): The parsed TOML data.

        Returns:
            MutableResolveOptions: The resulting builder.
        """
        options_tbl: TomlTable = get_table_value(data, "options")
        logger.trace("TOML [options]: %s", options_tbl)
        titles_tbl: TomlTable = get_table_value(data, "titles")
        logger.trace("TOML [titles]: %s", titles_tbl)

        draft = cls(
            font_family=get_string_value_or_none(options_tbl, "font_family"),
            font_size=get_number_value_or_none(options_tbl, "font_size"),
            font_color=get_string_value_or_none(options_tbl, "font_color"),
            bg_color=get_string_value_or_none(options_tbl, "bg_color"),
            calendar=get_string_value_or_none(options_tbl, "calendar"),
        )
        for key in _BOOL_OPTIONS:
            setattr(draft, key, get_bool_value_or_none(options_tbl, key))

        known: set[str] = {"font_family", "font_size", "font_color", "bg_color", "calendar"}
        known.update(_BOOL_OPTIONS)
        for key in options_tbl:
            if key not in known:
                logger.warning("Ignoring unknown option %r in [options]", key)

        draft.default_titles = {
            letter: title for letter, title in titles_tbl.items() if isinstance(title, str)
        }
        return draft

    @classmethod
    def load_merged(
        cls,
        *paths: Path,
        overrides: MutableResolveOptions | None = None,
    ) -> MutableResolveOptions:
        """Layer the bundled defaults, option files (in order) and overrides.

        Args:
            *paths (Path): Option files, lowest precedence first.
            overrides (MutableResolveOptions | None): Highest-precedence layer.

        Returns:
            MutableResolveOptions: The merged builder.
        """
        draft = cls.from_defaults()
        for path in paths:
            draft = draft.merge_with(cls.from_toml_file(path))
        if overrides is not None:
            draft = draft.merge_with(overrides)
        logger.debug("Merged options from: %s", ", ".join(draft.sources))
        return draft


@functools.cache
def default_options() -> ResolveOptions:
    """Return the frozen bundled default options (cached)."""
    return MutableResolveOptions.from_defaults().freeze()
