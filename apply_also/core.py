"""
Apply / also helpers
====================

Higher order functions for chaining a transformation or a side effect onto
a value inside a single expression. Inspired by Kotlin's `apply` and `also`.

    settings = also_mut({}, lambda it: it.update(hello="world"))
    doubled = apply(256, lambda it: it * 2)  # 512

`also` works like the unix `tee` command: do something with the value,
then keep going with the same value.

Every helper calls `function` exactly once and lets anything it raises
propagate unchanged.
"""

from __future__ import annotations

from ._types import Effect, Mutation, Transform


def apply[T, R](value: T, function: Transform[T, R]) -> R:
    """
    Apply function to value and return the result.

    Use when the transformed value should replace the original.

    Example:
        apply(256, lambda it: it * 2)  # 512
    """
    return function(value)


def apply_ref[T, R](value: T, function: Transform[T, R]) -> R:
    """
    Apply function to value and return the result, keeping value usable.

    Python passes every object by reference, so this is the same call as
    apply(). It exists so that read-only uses read as such:

        size = apply_ref(items, len)
        items.append(size)  # items is still ours
    """
    return function(value)


def also[T](value: T, function: Effect[T]) -> T:
    """
    Call function with value for its side effect and return value.

    Whatever function returns is discarded.

    Example:
        x = also(3, print)  # prints 3
        assert x == 3
    """
    function(value)
    return value


def also_mut[T](value: T, function: Mutation[T]) -> T:
    """
    Let function mutate value in place, then return the mutated value.

    Builds an object with a sequence of in-place changes inside one expression:

        names = also_mut([], lambda it: it.extend(["hello", "world"]))

    NOTE: Immutable values (int, str, tuple, frozen dataclasses) come back
          as they went in. Use apply() to replace them instead.
    """
    function(value)
    return value


__all__ = ("apply", "apply_ref", "also", "also_mut")
