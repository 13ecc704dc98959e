# topmark:header:start
#
#   project      : AxisConf
#   file         : logging.py
#   file_relpath : src/axisconf/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AxisConf logging: a TRACE level, axis-tagged records and colored output.

Resolver steps log each attribute decision at TRACE level, so a complete pass
can be followed with ``AXISCONF_LOG_LEVEL=TRACE``. While an axis is being
resolved (inside `axis_context`), every record carries the axis id in its
``axis`` attribute and the formatter prints it next to the level:

    [TRACE] [y2] tickmode='auto'

Outside a resolution the field reads ``-``.
"""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV: Final[str] = "AXISCONF_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] [%(axis)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = (
    "[%(levelname)s] [%(axis)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"
)

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

# Highest threshold first
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)

_current_axis: ContextVar[str | None] = ContextVar("axisconf_current_axis", default=None)


class AxisconfLogger(logging.Logger):
    """Logger with a ``trace`` method for the TRACE level below DEBUG."""

    def trace(self, msg: object, *args: object, **kwargs: Any) -> None:
        """Log ``msg % args`` with severity TRACE."""
        if self.isEnabledFor(TRACE_LEVEL):
            kwargs.setdefault("stacklevel", 2)
            self._log(TRACE_LEVEL, msg, args, **kwargs)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(AxisconfLogger)


@contextmanager
def axis_context(axis_id: str) -> Iterator[None]:
    """Tag log records emitted inside the block with ``axis_id``.

    Args:
        axis_id (str): Id of the axis being resolved (``x``, ``y2``, ...).

    Yields:
        None: Control returns to the block.
    """
    token = _current_axis.set(axis_id)
    try:
        yield
    finally:
        _current_axis.reset(token)


def current_axis() -> str | None:
    """Return the id of the axis being resolved, if any."""
    return _current_axis.get()


class AxisContextFilter(logging.Filter):
    """Copy the current axis id onto each record as ``record.axis``."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Annotate ``record``; never drops it."""
        setattr(record, "axis", _current_axis.get() or "-")
        return True


class ChalkFormatter(logging.Formatter):
    """Formatter coloring whole records by severity with `yachalk`."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it by level.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colored text.
        """
        if not hasattr(record, "axis"):
            setattr(record, "axis", "-")
        message = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``AXISCONF_LOG_LEVEL``, or None if unset or unknown.

    Accepts level names (``TRACE``, ``debug``, ``WARN``...) and numbers (``10``).
    """
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return _LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None) -> None:
    """Install a single colored stderr handler on the root logger.

    Args:
        level (int | None): Log level; when None, `resolve_env_log_level` is
            consulted and CRITICAL is used if the variable is unset.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.addFilter(AxisContextFilter())
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> AxisconfLogger:
    """Return the `AxisconfLogger` named ``name``.

    Args:
        name (str): Logger name, normally ``__name__``.

    Returns:
        AxisconfLogger: The logger.
    """
    return cast("AxisconfLogger", logging.getLogger(name))
