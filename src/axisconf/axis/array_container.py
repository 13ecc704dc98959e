# topmark:header:start
#
#   project      : AxisConf
#   file         : array_container.py
#   file_relpath : src/axisconf/axis/array_container.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defaults for list attributes whose items are objects (``rangebreaks``, ...).

Each item of the input list is resolved independently by an item resolver
into its own output mapping. Items that are not mappings are kept as
placeholders with the inclusion attribute forced off, so indices in the output
line up with indices in the input. Every output item records its position in
``_index`` (internal, not part of the public view).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from axisconf.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping, MutableMapping

    from axisconf.config.logging import AxisconfLogger

logger: AxisconfLogger = get_logger(__name__)


class ItemDefaults(Protocol):
    """Item resolver: ``(item_in, item_out) -> None`` (mutates ``item_out``)."""

    def __call__(self, item_in: Mapping[str, Any], item_out: dict[str, Any]) -> None: ...


def handle_array_container_defaults(
    parent_in: Mapping[str, Any] | None,
    parent_out: MutableMapping[str, Any],
    name: str,
    item_defaults: ItemDefaults,
    inclusion_attr: str = "enabled",
) -> list[dict[str, Any]]:
    """Resolve the list attribute ``name`` item by item.

    Args:
        parent_in (Mapping[str, Any] | None): Input parent container.
        parent_out (MutableMapping[str, Any]): Output parent container; its
            ``name`` entry is replaced by the resolved list.
        name (str): List attribute name, e.g. ``"rangebreaks"``.
        item_defaults (ItemDefaults): Resolver applied to every mapping item.
        inclusion_attr (str): Attribute forced to ``False`` on non-mapping items.

    Returns:
        list[dict[str, Any]]: The resolved items.
    """
    items_in: Any = (parent_in or {}).get(name)
    if not isinstance(items_in, list | tuple):
        items_in = []

    items_out: list[dict[str, Any]] = []
    for index, item_in in enumerate(items_in):
        item_out: dict[str, Any]
        if isinstance(item_in, dict):
            item_out = {}
            item_defaults(item_in, item_out)
        else:
            logger.debug("%s[%d] is not an object; excluding it", name, index)
            item_out = {inclusion_attr: False}
        item_out["_index"] = index
        items_out.append(item_out)

    parent_out[name] = items_out
    return items_out
