# topmark:header:start
#
#   project      : AxisConf
#   file         : __main__.py
#   file_relpath : src/axisconf/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running AxisConf via ``python -m axisconf``.

Delegates to `axisconf.cli.main.cli`, the same entry point as the
``axisconf`` console script.
"""

from __future__ import annotations

from axisconf.cli.main import cli

if __name__ == "__main__":
    cli()
