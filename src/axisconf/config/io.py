# topmark:header:start
#
#   project      : AxisConf
#   file         : io.py
#   file_relpath : src/axisconf/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight TOML/JSON I/O helpers for AxisConf.

This module centralizes **pure** helpers for reading option files and layout
documents and for rendering resolved axes.

Typical flow:
    1. Load defaults from the packaged resource (``load_defaults_dict``).
    2. Load user option files or layout documents (``load_toml_dict``,
       ``load_layout_file``).
    3. Normalize and inspect values using typed helpers
       (``get_table_value``, ``get_string_value_or_none``, etc.).
    4. Serialize back to TOML when needed (``to_toml``, ``render_axes_toml``).

Notes:
    - Parsing uses `toml`. Rendering of resolved axes uses `tomlkit` so the
      output keeps key order and carries a comment header.
"""

from __future__ import annotations

import json
from importlib.resources import files
from typing import TYPE_CHECKING, Any, TypeGuard

import toml
import tomlkit

from axisconf.config.logging import get_logger
from axisconf.constants import DEFAULT_TOML_CONFIG_NAME, DEFAULT_TOML_CONFIG_PACKAGE

if TYPE_CHECKING:
    import sys
    from collections.abc import Mapping

    if sys.version_info >= (3, 14):
        from importlib.resources.abc import Traversable
    else:
        from importlib.abc import Traversable

    from pathlib import Path

    from axisconf.config.logging import AxisconfLogger

logger: AxisconfLogger = get_logger(__name__)

TomlTable = dict[str, Any]


__all__: list[str] = [
    "TomlTable",
    "LayoutLoadError",
    "is_toml_table",
    "get_table_value",
    "get_string_value_or_none",
    "get_bool_value_or_none",
    "get_number_value_or_none",
    "load_defaults_dict",
    "load_toml_dict",
    "load_layout_file",
    "drop_none",
    "to_toml",
    "render_axes_toml",
    "render_axes_json",
]


class LayoutLoadError(Exception):
    """Raised when a layout document cannot be read or parsed."""


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        val (Any): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``val`` is a ``dict[str, Any]``.
    """
    return isinstance(val, dict)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table (empty dict when missing or not a table)."""
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent or not a string.
    """
    value: Any | None = table.get(key)
    return value if isinstance(value, str) else None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    Integers are coerced via ``bool(value)``; anything else yields ``None``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        bool | None: The boolean value, or ``None`` when absent or not coercible.
    """
    value: Any | None = table.get(key)
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    return None


def get_number_value_or_none(table: TomlTable, key: str) -> float | None:
    """Extract an optional number (``int``/``float``, not ``bool``) from a TOML table."""
    value: Any | None = table.get(key)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return None


def load_defaults_dict() -> TomlTable:
    """Return the packaged default options as a Python dict.

    Reads the bundled TOML resource from the ``axisconf.config`` package using
    ``importlib.resources.files`` and parses it into a dictionary.

    Returns:
        TomlTable: The parsed default options.

    Raises:
        RuntimeError: If the bundled resource cannot be read or parsed as TOML.
    """
    resource: Traversable = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    logger.debug("Loading defaults from package resource: %s", resource)
    try:
        text: str = resource.read_text(encoding="utf8")
    except OSError as exc:
        raise RuntimeError(
            f"Cannot read bundled default config {DEFAULT_TOML_CONFIG_PACKAGE!r}/"
            f"{DEFAULT_TOML_CONFIG_NAME!r}: {exc}"
        ) from exc

    try:
        data: TomlTable = toml.loads(text)
    except toml.TomlDecodeError as exc:
        raise RuntimeError(
            f"Bundled default config {DEFAULT_TOML_CONFIG_PACKAGE!r}/"
            f"{DEFAULT_TOML_CONFIG_NAME!r} is invalid TOML: {exc}"
        ) from exc

    return data


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML options file.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        val: TomlTable = toml.load(path)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        val = {}
    except toml.TomlDecodeError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        val = {}
    return val


def load_layout_file(path: Path) -> dict[str, Any]:
    """Load a layout document from a ``.json`` or TOML file.

    Files ending in ``.json`` are parsed as JSON, everything else as TOML.

    Args:
        path (Path): Layout file.

    Returns:
        dict[str, Any]: The parsed layout.

    Raises:
        LayoutLoadError: If the file cannot be read, does not parse, or does not
            hold a top-level table.
    """
    try:
        text: str = path.read_text(encoding="utf8")
    except OSError as exc:
        raise LayoutLoadError(f"Cannot read layout file {path}: {exc}") from exc

    data: Any
    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = toml.loads(text)
    except (json.JSONDecodeError, toml.TomlDecodeError) as exc:
        raise LayoutLoadError(f"Cannot parse layout file {path}: {exc}") from exc

    if not is_toml_table(data):
        raise LayoutLoadError(f"Layout file {path} must contain a table/object at top level")
    logger.debug("Loaded layout %s (%d top-level keys)", path, len(data))
    return data


def drop_none(value: Any) -> Any:
    """Return a copy of ``value`` without ``None`` entries (TOML has no null)."""
    if isinstance(value, dict):
        return {k: drop_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list | tuple):
        return [drop_none(v) for v in value if v is not None]
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document as a string.
    """
    return toml.dumps(toml_dict)


def render_axes_toml(axes: Mapping[str, Mapping[str, Any]], *, header: str | None = None) -> str:
    """Render resolved axes as a TOML document, one table per axis.

    Args:
        axes (Mapping[str, Mapping[str, Any]]): Plain attribute dicts keyed by
            layout key (``xaxis``, ``yaxis2``, ...).
        header (str | None): Optional comment placed at the top of the document.

    Returns:
        str: The TOML document.
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    if header:
        doc.add(tomlkit.comment(header))
        doc.add(tomlkit.nl())
    for key, attrs in axes.items():
        doc.add(key, drop_none(dict(attrs)))
    return tomlkit.dumps(doc)


def render_axes_json(axes: Mapping[str, Mapping[str, Any]]) -> str:
    """Render resolved axes as an indented JSON object."""
    return json.dumps({k: dict(v) for k, v in axes.items()}, indent=2)
