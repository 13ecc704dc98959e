# topmark:header:start
#
#   project      : AxisConf
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import pytest
from packaging.version import InvalidVersion, Version

from axisconf.constants import AXISCONF_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_outputs_pep440_version() -> None:
    """It should output the PEP 440 version string (exact match)."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)

    out: str = result.stdout.strip()
    assert out == AXISCONF_VERSION

    try:
        Version(out)
    except InvalidVersion as exc:
        pytest.fail(f"Not a valid PEP 440 version: {out!r} ({exc})")


@mark_cli
def test_version_verbose_has_heading() -> None:
    result = run_cli(["--no-color", "-v", "version"])

    assert_SUCCESS(result)
    assert result.stdout.startswith("AxisConf version:")
    assert AXISCONF_VERSION in result.stdout
