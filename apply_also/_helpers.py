"""Internal helpers for apply_also.

Common functions used by the fluent builders and the writer helpers.
Not part of the public API, but usable for custom describers."""

from __future__ import annotations

import functools
import typing
from collections.abc import Callable


def function_name(function: Callable[..., typing.Any]) -> str:
    """
    Human-readable name of a callable.

    functools.partial is named after the function it wraps,
    anything without a __qualname__ falls back to its type name.
    Enclosing function scopes are dropped: a lambda is just "<lambda>".
    """
    while isinstance(function, functools.partial):
        function = function.func
    name = getattr(function, "__qualname__", None)
    if name is None:
        name = type(function).__qualname__
    return name.rsplit("<locals>.", 1)[-1]


def describe(operation: str, function: Callable[..., typing.Any]) -> str:
    """
    Default trace entry for a helper step.

    Example:
        describe("also_mut", add_defaults)  # "also_mut(add_defaults)"
    """
    return f"{operation}({function_name(function)})"


def silent(operation: str, function: Callable[..., typing.Any]) -> None:
    """Describer that records nothing."""
    _ = (operation, function)
    return None


def short_repr(value: object, limit: int) -> str:
    """repr() of value, cut to at most limit characters."""
    text = repr(value)
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


__all__ = (
    "function_name",
    "describe",
    "silent",
    "short_repr",
)
