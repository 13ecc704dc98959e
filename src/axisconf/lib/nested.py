# topmark:header:start
#
#   project      : AxisConf
#   file         : nested.py
#   file_relpath : src/axisconf/lib/nested.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dotted-path access into nested mappings (``"title.font.size"``)."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any


def split_path(path: str) -> list[str]:
    """Split a dotted attribute path into its parts."""
    return path.split(".")


def get_nested(container: Mapping[str, Any] | None, path: str) -> Any | None:
    """Return the value at ``path``, or ``None`` if any part is missing.

    Args:
        container (Mapping[str, Any] | None): Root mapping (may be ``None``).
        path (str): Dotted attribute path.

    Returns:
        Any | None: The stored value or ``None``.
    """
    node: Any = container
    for part in split_path(path):
        if not isinstance(node, Mapping):
            return None
        node = node.get(part)
    return node


def set_nested(container: MutableMapping[str, Any], path: str, value: Any) -> None:
    """Store ``value`` at ``path``, creating intermediate dicts as needed.

    Non-mapping values found along the way are replaced by dicts.
    """
    *parents, leaf = split_path(path)
    node: MutableMapping[str, Any] = container
    for part in parents:
        child = node.get(part)
        if not isinstance(child, MutableMapping):
            child = {}
            node[part] = child
        node = child
    node[leaf] = value


def delete_nested(container: MutableMapping[str, Any], path: str) -> None:
    """Remove the value at ``path`` if present (a no-op otherwise)."""
    *parents, leaf = split_path(path)
    node: Any = container
    for part in parents:
        if not isinstance(node, MutableMapping):
            return
        node = node.get(part)
    if isinstance(node, MutableMapping):
        node.pop(leaf, None)


def has_nested(container: Mapping[str, Any] | None, path: str) -> bool:
    """Return True if ``path`` exists in ``container`` (even if it maps to ``None``)."""
    *parents, leaf = split_path(path)
    node: Any = container
    for part in parents:
        if not isinstance(node, Mapping):
            return False
        node = node.get(part)
    return isinstance(node, Mapping) and leaf in node
