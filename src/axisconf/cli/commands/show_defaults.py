# topmark:header:start
#
#   project      : AxisConf
#   file         : show_defaults.py
#   file_relpath : src/axisconf/cli/commands/show_defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AxisConf `show-defaults` command.

Displays the built-in default resolution options bundled with the package, as
a reference for writing option files passed to ``axisconf resolve --options``.
"""

from __future__ import annotations

import click

from axisconf.cli.console import ClickConsole
from axisconf.config import MutableResolveOptions


@click.command(
    name="show-defaults",
    help="Display the built-in default resolution options (TOML).",
)
def show_defaults_command() -> None:
    """Display the built-in default options."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    verbose: bool = ctx.obj.get("verbosity_level", 0) > 0

    if verbose:
        console.print(console.styled("Default AxisConf options (TOML):", bold=True, underline=True))
        console.print(console.styled("# === BEGIN ===", fg="cyan", dim=True))

    console.print(console.styled(MutableResolveOptions.get_default_options_toml(), fg="cyan"))

    if verbose:
        console.print(console.styled("# === END ===", fg="cyan", dim=True))
