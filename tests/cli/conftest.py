# topmark:header:start
#
#   project      : AxisConf
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for invoking AxisConf through Click's test runner.

`run_cli()` restores the root logger after each invocation: the CLI group calls
`setup_logging`, which would otherwise leave a handler bound to the runner's
(closed) stderr for the rest of the session.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from axisconf.cli.exit_codes import ExitCode
from axisconf.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI and return the runner result.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    runner = CliRunner()
    try:
        return runner.invoke(cli, argv, input=input_text, obj={})
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)


def write_layout(tmp_path: Path, text: str, name: str = "layout.toml") -> Path:
    """Write a layout document into ``tmp_path`` and return its path."""
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1)."""
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_WARNINGS(result: Result) -> None:
    """Assert that the command exited with WARNINGS (code 2)."""
    assert result.exit_code == ExitCode.WARNINGS, result.output
