"""
Exception bridges.

The core helpers never catch: whatever the function raises reaches the caller.
The try_* variants here turn a raised Exception into a kungfu Result instead,
for pipelines that treat errors as values.

Example:
    from apply_also import lift as L
    import json

    parsed = L.try_apply(raw, json.loads, on_error=lambda e: ParseError(str(e)))
    match parsed:
        case Ok(doc): ...
        case Error(err): ...
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from . import core
from ._types import Effect, Mutation, Transform


def try_apply[T, R, E](
    value: T,
    function: Transform[T, R],
    *,
    on_error: Callable[[Exception], E],
) -> Result[R, E]:
    """
    apply(), with exceptions converted to Error.

    **When to use:** Bridge between exception-based code and Result-based code.

    NOTE: Catches all Exception subclasses. For specific exceptions,
          filter in on_error or use try/except manually.
    """
    try:
        return Ok(core.apply(value, function))
    except Exception as exc:
        return Error(on_error(exc))


def try_apply_ref[T, R, E](
    value: T,
    function: Transform[T, R],
    *,
    on_error: Callable[[Exception], E],
) -> Result[R, E]:
    """apply_ref(), with exceptions converted to Error."""
    try:
        return Ok(core.apply_ref(value, function))
    except Exception as exc:
        return Error(on_error(exc))


def try_also[T, E](
    value: T,
    function: Effect[T],
    *,
    on_error: Callable[[Exception], E],
) -> Result[T, E]:
    """
    also(), with exceptions converted to Error.

    Ok carries the original value.
    """
    try:
        return Ok(core.also(value, function))
    except Exception as exc:
        return Error(on_error(exc))


def try_also_mut[T, E](
    value: T,
    function: Mutation[T],
    *,
    on_error: Callable[[Exception], E],
) -> Result[T, E]:
    """
    also_mut(), with exceptions converted to Error.

    NOTE: Mutations made before the function raised are not rolled back.
    """
    try:
        return Ok(core.also_mut(value, function))
    except Exception as exc:
        return Error(on_error(exc))


__all__ = (
    "try_apply",
    "try_apply_ref",
    "try_also",
    "try_also_mut",
)
