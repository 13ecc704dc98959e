# topmark:header:start
#
#   project      : AxisConf
#   file         : version.py
#   file_relpath : src/axisconf/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AxisConf `version` command.

Prints the current AxisConf version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from axisconf.cli.console import ClickConsole
from axisconf.constants import AXISCONF_VERSION


@click.command(
    name="version",
    help="Show the current version of AxisConf.",
)
def version_command() -> None:
    """Show the current version of AxisConf."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("AxisConf version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(AXISCONF_VERSION, bold=True)}")
    else:
        console.print(console.styled(AXISCONF_VERSION, bold=True))
