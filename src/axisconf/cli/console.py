# topmark:header:start
#
#   project      : AxisConf
#   file         : console.py
#   file_relpath : src/axisconf/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

`ClickConsole` separates CLI output from internal logging: use it for
messages intended for end users and keep `logging` for diagnostics of
AxisConf itself.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, TextIO

import click

if TYPE_CHECKING:
    from axisconf.diagnostic import Diagnostic


class ClickConsole:
    """Program-output console, independent from the logger.

    Attributes:
        enable_color (bool): Whether to emit ANSI color codes.
        out (TextIO): Stream for standard output (defaults to sys.stdout).
        err (TextIO): Stream for error output (defaults to sys.stderr).
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def diagnostic(self, diagnostic: Diagnostic) -> None:
        """Write a resolution diagnostic to stderr, colored by its level."""
        text = diagnostic.describe()
        if self.enable_color:
            text = diagnostic.level.color(text)
        click.echo(text, file=self.err, color=self.enable_color)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style` (plain when color is disabled).

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments accepted by `click.style`.

        Returns:
            str: The styled text.
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
