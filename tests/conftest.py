# topmark:header:start
#
#   project      : AxisConf
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the AxisConf test suite.

This file sets up typed mark wrappers, global fixtures and the logging level
used during test runs.

Notes:
    Tests should respect the immutable/mutable split of the axis model:

    - Resolvers write into a `axisconf.axis.model.MutableAxis` builder; the
      public API returns frozen `axisconf.axis.model.ResolvedAxis` snapshots.
    - Do **not** mutate a snapshot. If you need to tweak one, call
      `ResolvedAxis.thaw()`, edit the builder, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from axisconf.axis.convert import set_convert
from axisconf.axis.layout import LayoutState
from axisconf.axis.model import MutableAxis
from axisconf.config import logging
from axisconf.config.model import ResolveOptions
from axisconf.schema.attributes import AXIS_ATTRIBUTES
from axisconf.schema.coerce import make_coercer

if TYPE_CHECKING:
    from collections.abc import Mapping

    from axisconf.schema.coerce import Coerce

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_axisconf_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure AxisConf's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so resolver decisions are captured.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_axis(
    axis_in: Mapping[str, Any] | None = None,
    *,
    axis_type: str = "linear",
    letter: str = "x",
    axis_id: str | None = None,
    layout: LayoutState | None = None,
) -> tuple[MutableAxis, Coerce]:
    """Return a builder with ``type`` resolved and a coercer bound to ``axis_in``.

    Sibling resolvers expect the type on the builder and (for range helpers) a
    converter; this mirrors what `axisconf.api` does before the pipeline runs.

    Args:
        axis_in (Mapping[str, Any] | None): Input attributes.
        axis_type (str): Axis type written to the builder.
        letter (str): Axis letter.
        axis_id (str | None): Axis id (defaults to ``letter``).
        layout (LayoutState | None): Layout state passed to `set_convert`.

    Returns:
        tuple[MutableAxis, Coerce]: The builder and the bound coercer.
    """
    axis_out = MutableAxis(letter=letter, axis_id=axis_id or letter)
    axis_out.set("type", axis_type)
    set_convert(axis_out, layout)
    return axis_out, make_coercer(axis_in or {}, axis_out.attrs, AXIS_ATTRIBUTES)


def make_options(**overrides: Any) -> ResolveOptions:
    """Return `ResolveOptions` built from the dataclass defaults and overrides."""
    return ResolveOptions(**overrides)
