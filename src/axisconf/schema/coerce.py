# topmark:header:start
#
#   project      : AxisConf
#   file         : coerce.py
#   file_relpath : src/axisconf/schema/coerce.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The coercion contract.

Coercing an attribute means: read it from the (untrusted) input container,
validate and normalize it according to its `AttributeSpec`, fall back to the
caller's default (or the schema default) when it is missing or invalid, write
the chosen value into the output container and return it.

Coercion never raises on bad *input*; asking for an attribute the schema does
not declare is a programming error and raises `UnknownAttributeError`.

Resolvers receive a bound `Coerce` callable (see `make_coercer`) so they only
deal with attribute paths and defaults:

    coerce = make_coercer(axis_in, axis_out.attrs, AXIS_ATTRIBUTES)
    visible = coerce("visible", True)
"""

from __future__ import annotations

import math
from collections.abc import Mapping, MutableMapping
from typing import TYPE_CHECKING, Any, Protocol

from axisconf.lib.colors import is_valid_color
from axisconf.lib.dates import is_number
from axisconf.lib.increment import number_text
from axisconf.lib.nested import get_nested, set_nested
from axisconf.schema.attributes import AttributeSpec, ValType, lookup_spec

if TYPE_CHECKING:
    from axisconf.schema.attributes import AttributeMap


class UnknownAttributeError(KeyError):
    """Raised when coercing an attribute path the schema does not declare."""


class Coerce(Protocol):
    """Bound coercion function: ``coerce(attr, dflt=None) -> value``."""

    def __call__(self, attr: str, dflt: Any = None) -> Any: ...


def _as_number(value: Any) -> float | int | None:
    if is_number(value):
        return value
    if isinstance(value, str):
        try:
            parsed = float(value)
        except ValueError:
            return None
        return parsed if math.isfinite(parsed) else None
    return None


def _in_bounds(spec: AttributeSpec, value: float) -> bool:
    if spec.min is not None and value < spec.min:
        return False
    if spec.max is not None and value > spec.max:
        return False
    return True


def _same_value(a: Any, b: Any) -> bool:
    # Strict: True must not match 1, "1" must not match 1
    return type(a) is type(b) and a == b


def validate(spec: AttributeSpec, value: Any, dflt: Any) -> Any:
    """Return ``value`` normalized per ``spec``, or ``dflt`` when invalid.

    Args:
        spec (AttributeSpec): Attribute declaration.
        value (Any): Raw input value (``None`` when absent).
        dflt (Any): Fallback value.

    Returns:
        Any: The value to store.
    """
    match spec.val_type:
        case ValType.BOOLEAN:
            return value if isinstance(value, bool) else dflt

        case ValType.ENUMERATED:
            if any(_same_value(value, allowed) for allowed in spec.values):
                return value
            return dflt

        case ValType.NUMBER:
            number = _as_number(value)
            if number is None or not _in_bounds(spec, number):
                return dflt
            return number

        case ValType.INTEGER:
            number = _as_number(value)
            if number is None or number % 1 or not _in_bounds(spec, number):
                return dflt
            return int(number)

        case ValType.STRING:
            if isinstance(value, str):
                if spec.no_blank and not value:
                    return dflt
                return value
            if is_number(value):
                return number_text(value)
            return dflt

        case ValType.COLOR:
            return value if is_valid_color(value) else dflt

        case ValType.ANGLE:
            if value == "auto":
                return "auto"
            number = _as_number(value)
            if number is None:
                return dflt
            if abs(number) > 180:
                number = number - math.floor(number / 360 + 0.5) * 360
            return number

        case ValType.ANY:
            return dflt if value is None else value

        case ValType.DATA_ARRAY:
            return list(value) if isinstance(value, (list, tuple)) else dflt

        case ValType.INFO_ARRAY:
            return _validate_info_array(spec, value, dflt)

    raise AssertionError(f"Unhandled value type: {spec.val_type!r}")


def _validate_info_array(spec: AttributeSpec, value: Any, dflt: Any) -> Any:
    if not isinstance(value, (list, tuple)):
        return dflt

    dflt_items: list[Any] = list(dflt) if isinstance(dflt, (list, tuple)) else []
    out: list[Any] = []
    for i, item in enumerate(value):
        item_spec: AttributeSpec = (
            spec.items[min(i, len(spec.items) - 1)] if spec.items else AttributeSpec(ValType.ANY)
        )
        item_dflt = dflt_items[i] if i < len(dflt_items) else item_spec.dflt
        out.append(validate(item_spec, item, item_dflt))
    return out


def coerce(
    container_in: Mapping[str, Any] | None,
    container_out: MutableMapping[str, Any],
    attributes: AttributeMap,
    attr: str,
    dflt: Any = None,
) -> Any:
    """Resolve one attribute from input into output.

    Args:
        container_in (Mapping[str, Any] | None): Untrusted input container.
        container_out (MutableMapping[str, Any]): Output container (written in place).
        attributes (AttributeMap): Schema for the containers.
        attr (str): Dotted attribute path.
        dflt (Any): Caller default; ``None`` selects the schema default.

    Returns:
        Any: The value written to ``container_out``.

    Raises:
        UnknownAttributeError: If ``attr`` is not declared in ``attributes``.
    """
    spec: AttributeSpec | None = lookup_spec(attributes, attr)
    if spec is None:
        raise UnknownAttributeError(attr)
    if dflt is None:
        dflt = spec.dflt

    value = validate(spec, get_nested(container_in, attr), dflt)
    set_nested(container_out, attr, value)
    return value


def coerce2(
    container_in: Mapping[str, Any] | None,
    container_out: MutableMapping[str, Any],
    attributes: AttributeMap,
    attr: str,
    dflt: Any = None,
) -> Any:
    """Coerce ``attr`` but report whether the input set it explicitly.

    The attribute is always written to ``container_out``.

    Returns:
        Any: The coerced value when the input held a (non-``None``) value for
        ``attr``, valid or not; otherwise ``False``.
    """
    value = coerce(container_in, container_out, attributes, attr, dflt)
    return value if get_nested(container_in, attr) is not None else False


def coerce_font(
    coerce_fn: Coerce, attr: str, dflt: Mapping[str, Any] | None = None
) -> dict[str, Any]:
    """Coerce the ``family``/``size``/``color`` of the font object at ``attr``.

    Args:
        coerce_fn (Coerce): Bound coercion function for the container.
        attr (str): Path of the font object, e.g. ``"title.font"``.
        dflt (Mapping[str, Any] | None): Default font parts.

    Returns:
        dict[str, Any]: The resolved font.
    """
    dflt = dflt or {}
    return {
        "family": coerce_fn(f"{attr}.family", dflt.get("family")),
        "size": coerce_fn(f"{attr}.size", dflt.get("size")),
        "color": coerce_fn(f"{attr}.color", dflt.get("color")),
    }


def make_coercer(
    container_in: Mapping[str, Any] | None,
    container_out: MutableMapping[str, Any],
    attributes: AttributeMap,
) -> Coerce:
    """Bind `coerce` to a pair of containers and their schema."""

    def _coerce(attr: str, dflt: Any = None) -> Any:
        return coerce(container_in, container_out, attributes, attr, dflt)

    return _coerce
