# topmark:header:start
#
#   project      : AxisConf
#   file         : exit_codes.py
#   file_relpath : src/axisconf/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the AxisConf CLI."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the AxisConf CLI.

    Attributes:
        SUCCESS (int): The command completed.
        FAILURE (int): Input could not be read or parsed.
        WARNINGS (int): Resolution completed but emitted warnings and
            ``--strict`` was requested.

    Usage:
        ```python
        import subprocess
        from axisconf.cli.exit_codes import ExitCode

        result = subprocess.run(["axisconf", "resolve", "--strict", "layout.toml"])
        if result.returncode == ExitCode.WARNINGS:
            print("Some traces were hidden.")
        ```
    """

    SUCCESS = 0
    FAILURE = 1
    WARNINGS = 2
