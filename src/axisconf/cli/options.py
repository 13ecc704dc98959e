# topmark:header:start
#
#   project      : AxisConf
#   file         : options.py
#   file_relpath : src/axisconf/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, output format) and
their resolution logic, so the group and its commands can stay thin.
"""

from __future__ import annotations

from typing import Any, Callable, ParamSpec, TypeVar

import click

from axisconf.config.logging import get_logger
from axisconf.core.enum_mixins import KeyedStrEnum

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


class OutputFormat(KeyedStrEnum):
    """Output formats of the ``resolve`` command."""

    TOML = ("toml", "TOML document, one table per axis")
    JSON = ("json", "JSON object keyed by layout key")


class EnumChoiceParam(click.Choice):
    """`click.Choice` over the keys of a `KeyedStrEnum`, converting to the member."""

    def __init__(self, enum_cls: type[KeyedStrEnum]) -> None:
        super().__init__(list(enum_cls.keys()), case_sensitive=False)
        self.enum_cls = enum_cls

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        """Convert the chosen token into its enum member."""
        if isinstance(value, self.enum_cls):
            return value
        token = super().convert(value, param, ctx)
        return self.enum_cls.parse(token)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: ``verbose_count`` (positive), ``-quiet_count`` (negative) or 0.

    Raises:
        click.UsageError: If both flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise click.UsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count or -quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output other than results and errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--no-color`` flag to a command."""
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in program output.",
    )(f)
    return f
