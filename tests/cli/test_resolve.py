# topmark:header:start
#
#   project      : AxisConf
#   file         : test_resolve.py
#   file_relpath : tests/cli/test_resolve.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `resolve` output formats, option files and exit codes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import tomlkit

from axisconf.constants import AXISCONF_VERSION
from tests.cli.conftest import (
    assert_FAILURE,
    assert_SUCCESS,
    assert_WARNINGS,
    run_cli,
    write_layout,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

LAYOUT_TOML = """\
[xaxis]
type = "date"
range = ["2020-01-01", "2020-03-01"]
rangebreaks = [{ bounds = ["sat", "mon"], pattern = "day of week" }]

[yaxis]
rangemode = "tozero"

[[data]]
type = "scatter"
x = ["2020-01-03", "2020-01-06"]
y = [1, 2]
"""


@mark_cli
def test_resolve_toml(tmp_path: Path) -> None:
    layout = write_layout(tmp_path, LAYOUT_TOML)
    result = run_cli(["--no-color", "resolve", str(layout)])

    assert_SUCCESS(result)
    assert result.stdout.startswith(f"# Resolved by AxisConf {AXISCONF_VERSION}")
    doc = tomlkit.parse(result.stdout).unwrap()
    assert set(doc) == {"xaxis", "yaxis"}
    assert doc["xaxis"]["type"] == "date"
    assert doc["xaxis"]["rangebreaks"][0]["enabled"] is True
    assert doc["xaxis"]["rangebreaks"][0]["pattern"] == "day of week"
    assert doc["yaxis"]["type"] == "-"
    assert doc["yaxis"]["showgrid"] is True
    assert result.stderr == ""


@mark_cli
def test_resolve_json_with_options_file(tmp_path: Path) -> None:
    layout = write_layout(tmp_path, json.dumps({"yaxis2": {"ticks": "inside"}}), "layout.json")
    options = write_layout(
        tmp_path, '[options]\nshow_grid = false\n[titles]\ny = "Height"\n', "options.toml"
    )
    result = run_cli(
        ["--no-color", "resolve", "--format", "JSON", "--options", str(options), str(layout)]
    )

    assert_SUCCESS(result)
    data = json.loads(result.stdout)
    axis = data["yaxis2"]
    assert axis["showgrid"] is False
    assert axis["ticks"] == "inside"
    assert axis["title"]["text"] == "Height"


@mark_cli
def test_resolve_reports_hidden_traces(tmp_path: Path) -> None:
    layout = write_layout(tmp_path, LAYOUT_TOML.replace('type = "scatter"', 'type = "scattergl"'))

    result = run_cli(["--no-color", "resolve", str(layout)])
    assert_SUCCESS(result)
    assert "[warning]" in result.stderr
    assert "scattergl" in result.stderr

    strict = run_cli(["--no-color", "resolve", "--strict", str(layout)])
    assert_WARNINGS(strict)

    quiet = run_cli(["--no-color", "-q", "resolve", str(layout)])
    assert_SUCCESS(quiet)
    assert "[warning]" not in quiet.stderr


@mark_cli
def test_resolve_verbose_summary(tmp_path: Path) -> None:
    layout = write_layout(tmp_path, LAYOUT_TOML)
    result = run_cli(["--no-color", "-v", "resolve", str(layout)])

    assert_SUCCESS(result)
    assert "2 axes resolved: 0 warning(s), 0 info message(s)" in result.stderr


@mark_cli
def test_resolve_without_axes_warns(tmp_path: Path) -> None:
    layout = write_layout(tmp_path, 'title = "nothing"\n')
    result = run_cli(["--no-color", "resolve", str(layout)])

    assert_SUCCESS(result)
    assert "No xaxis/yaxis tables found" in result.stderr


@mark_cli
def test_resolve_invalid_layout_fails(tmp_path: Path) -> None:
    layout = write_layout(tmp_path, "[xaxis\n")
    result = run_cli(["--no-color", "resolve", str(layout)])

    assert_FAILURE(result)
    assert "Cannot parse layout file" in result.stderr


@mark_cli
def test_resolve_missing_file_is_usage_error(tmp_path: Path) -> None:
    result = run_cli(["resolve", str(tmp_path / "missing.toml")])

    assert result.exit_code == 2
    assert "does not exist" in result.output
