# topmark:header:start
#
#   project      : AxisConf
#   file         : resolve.py
#   file_relpath : src/axisconf/cli/commands/resolve.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AxisConf `resolve` command.

Reads a layout document (TOML, or JSON when the file name ends in ``.json``),
resolves every ``xaxis*``/``yaxis*`` table and prints the resolved axes.
Diagnostics (e.g. traces hidden because of range breaks) go to stderr.

Input file example (TOML):

```toml
[xaxis]
type = "date"
range = ["2020-01-01", "2020-03-01"]
rangebreaks = [{ bounds = ["sat", "mon"], pattern = "day of week" }]

[[data]]
type = "scatter"
x = ["2020-01-03", "2020-01-06"]
```

Exit codes: 0 on success, 1 when the layout cannot be read, 2 with ``--strict``
when resolution emitted warnings.
"""

from __future__ import annotations

from pathlib import Path

import click

from axisconf.api import resolve_layout
from axisconf.cli.console import ClickConsole
from axisconf.cli.exit_codes import ExitCode
from axisconf.cli.options import EnumChoiceParam, OutputFormat
from axisconf.config.io import LayoutLoadError, load_layout_file, render_axes_json, render_axes_toml
from axisconf.config.logging import get_logger
from axisconf.config.model import MutableResolveOptions
from axisconf.constants import AXISCONF_VERSION

logger = get_logger(__name__)


@click.command(
    name="resolve",
    help="Resolve the axes of a layout file (TOML or JSON).",
)
@click.argument(
    "layout_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=OutputFormat.TOML.value,
    show_default=True,
    help="Output format: " + "; ".join(f"{fmt.value} = {fmt.label}" for fmt in OutputFormat),
)
@click.option(
    "--options",
    "options_files",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    multiple=True,
    help="Options file layered over the bundled defaults (repeatable, later wins).",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit with code 2 when resolution emits warnings.",
)
def resolve_command(
    layout_file: Path,
    output_format: OutputFormat,
    options_files: tuple[Path, ...],
    strict: bool,
) -> None:
    """Resolve and print the axes of ``layout_file``.

    Args:
        layout_file (Path): Layout document.
        output_format (OutputFormat): Rendering of the resolved axes.
        options_files (tuple[Path, ...]): Option files, lowest precedence first.
        strict (bool): Turn warnings into a non-zero exit code.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    try:
        layout_in = load_layout_file(layout_file)
    except LayoutLoadError as exc:
        logger.error("%s", exc)
        console.error(str(exc))
        ctx.exit(ExitCode.FAILURE)

    options = MutableResolveOptions.load_merged(*options_files).freeze()
    result = resolve_layout(layout_in, options=options)

    if not result.axes:
        console.warn(f"No xaxis/yaxis tables found in {layout_file}")

    axes = {key: axis.to_dict() for key, axis in result.axes.items()}
    if output_format is OutputFormat.JSON:
        console.print(render_axes_json(axes))
    else:
        console.print(
            render_axes_toml(axes, header=f"Resolved by AxisConf {AXISCONF_VERSION}"), nl=False
        )

    if vlevel >= 0:
        for diagnostic in result.diagnostics:
            console.diagnostic(diagnostic)
    if vlevel > 0:
        stats = result.diagnostics.stats()
        console.warn(
            f"{len(result.axes)} axes resolved: "
            f"{stats.n_warning} warning(s), {stats.n_info} info message(s)"
        )

    if strict and result.diagnostics.stats().n_warning:
        ctx.exit(ExitCode.WARNINGS)
