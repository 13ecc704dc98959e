# topmark:header:start
#
#   project      : AxisConf
#   file         : __init__.py
#   file_relpath : src/axisconf/schema/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attribute schema and the coercion contract built on it."""

from __future__ import annotations

from axisconf.schema.attributes import (
    AXIS_ATTRIBUTES,
    RANGEBREAK_ATTRIBUTES,
    TICKFORMATSTOP_ATTRIBUTES,
    AttributeSpec,
    ValType,
    lookup_spec,
)
from axisconf.schema.coerce import (
    Coerce,
    UnknownAttributeError,
    coerce,
    coerce2,
    coerce_font,
    make_coercer,
)

__all__ = [
    "AXIS_ATTRIBUTES",
    "RANGEBREAK_ATTRIBUTES",
    "TICKFORMATSTOP_ATTRIBUTES",
    "AttributeSpec",
    "Coerce",
    "UnknownAttributeError",
    "ValType",
    "coerce",
    "coerce2",
    "coerce_font",
    "lookup_spec",
    "make_coercer",
]
