# topmark:header:start
#
#   project      : AxisConf
#   file         : increment.py
#   file_relpath : src/axisconf/cli/commands/increment.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AxisConf `increment` command.

Adds ``DELTA`` to ``X`` with the rounding-artifact correction used for tick
stepping, e.g. ``axisconf increment 0.1 0.2`` prints ``0.3``. Use ``--`` before
negative numbers: ``axisconf increment -- -1 0.1``.
"""

from __future__ import annotations

import click

from axisconf.cli.console import ClickConsole
from axisconf.lib.increment import increment_numeric, number_text


@click.command(
    name="increment",
    help="Add DELTA to X, correcting floating-point representation artifacts.",
)
@click.argument("x", type=float)
@click.argument("delta", type=float)
def increment_command(x: float, delta: float) -> None:
    """Print ``increment_numeric(X, DELTA)``.

    Args:
        x (float): Start value.
        delta (float): Step.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    console.print(number_text(increment_numeric(x, delta)))
