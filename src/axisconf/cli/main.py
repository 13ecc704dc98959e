# topmark:header:start
#
#   project      : AxisConf
#   file         : main.py
#   file_relpath : src/axisconf/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AxisConf CLI entry point.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj`` together with the shared `ClickConsole`; subcommands read them from
there.
"""

from __future__ import annotations

import click

from axisconf.cli.commands.increment import increment_command
from axisconf.cli.commands.resolve import resolve_command
from axisconf.cli.commands.show_defaults import show_defaults_command
from axisconf.cli.commands.version import version_command
from axisconf.cli.console import ClickConsole
from axisconf.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from axisconf.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int, no_color: bool) -> None:
    """Initialize shared state (verbosity, logging, color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via env only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.color = not no_color
    ctx.obj["color_enabled"] = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="AxisConf CLI: resolve partial axis configurations.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool) -> None:
    """Entry point for the AxisConf CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'axisconf resolve LAYOUT' to resolve the axes of a layout.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(show_defaults_command)

cli.add_command(increment_command)

cli.add_command(resolve_command)

if __name__ == "__main__":
    cli()
