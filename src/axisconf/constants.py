# topmark:header:start
#
#   project      : AxisConf
#   file         : constants.py
#   file_relpath : src/axisconf/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AxisConf Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

AXISCONF_VERSION: str = get_version("axisconf")

# Name of the bundled default options inside the package `axisconf.config`:
DEFAULT_TOML_CONFIG_PACKAGE: str = "axisconf.config"
DEFAULT_TOML_CONFIG_NAME: str = "axisconf-default.toml"

# Time units in milliseconds
ONESEC: int = 1000
ONEMIN: int = 60 * ONESEC
ONEHOUR: int = 60 * ONEMIN
ONEDAY: int = 24 * ONEHOUR
ONEWEEK: int = 7 * ONEDAY

# Largest magnitude a linear range end may take
FP_SAFE: float = 1e300

# Default ranges for non-date axes, per axis letter
DFLTRANGEX: tuple[float, float] = (-1, 6)
DFLTRANGEY: tuple[float, float] = (-1, 4)

# Trace types that cannot be drawn on axes with range breaks
RANGEBREAK_INCOMPATIBLE_TRACES: tuple[str, ...] = ("scattergl", "splom")
