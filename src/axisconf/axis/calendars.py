# topmark:header:start
#
#   project      : AxisConf
#   file         : calendars.py
#   file_relpath : src/axisconf/axis/calendars.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Calendar-system defaults for date axes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from axisconf.config.logging import get_logger
from axisconf.schema.attributes import CALENDAR_ATTRIBUTE, CALENDARS
from axisconf.schema.coerce import coerce

if TYPE_CHECKING:
    from collections.abc import Mapping, MutableMapping

    from axisconf.config.logging import AxisconfLogger

logger: AxisconfLogger = get_logger(__name__)


def handle_calendar_defaults(
    container_in: Mapping[str, Any] | None,
    container_out: MutableMapping[str, Any],
    attr: str,
    dflt: str | None,
) -> str:
    """Coerce the calendar attribute ``attr`` of a date container.

    Args:
        container_in (Mapping[str, Any] | None): Input container.
        container_out (MutableMapping[str, Any]): Output container.
        attr (str): Attribute name (``"calendar"`` for axes).
        dflt (str | None): Layout-level default calendar; unknown names fall
            back to ``"gregorian"``.

    Returns:
        str: The resolved calendar name.
    """
    if dflt not in CALENDARS:
        dflt = CALENDAR_ATTRIBUTE.dflt
    calendar: str = coerce(container_in, container_out, {attr: CALENDAR_ATTRIBUTE}, attr, dflt)
    if calendar != "gregorian":
        # Date arithmetic always runs on the gregorian calendar
        logger.debug("Calendar %r recorded; gregorian arithmetic is used", calendar)
    return calendar
