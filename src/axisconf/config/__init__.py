# topmark:header:start
#
#   project      : AxisConf
#   file         : __init__.py
#   file_relpath : src/axisconf/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for AxisConf: resolution options, TOML/JSON I/O and logging.

The bundled ``axisconf-default.toml`` lives in this package and is loaded with
`importlib.resources` (see `axisconf.config.io.load_defaults_dict`).
"""

from __future__ import annotations

from axisconf.config.model import (
    FontDefaults,
    MutableResolveOptions,
    ResolveOptions,
    default_options,
)

__all__ = [
    "FontDefaults",
    "MutableResolveOptions",
    "ResolveOptions",
    "default_options",
]
