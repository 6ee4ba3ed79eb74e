"""Writer helpers

The core helpers lifted over Written: the value goes through the helper,
the note (if any) goes to the end of a fresh copy of the log."""

from __future__ import annotations

from .. import core
from .._types import Effect, Mutation, Transform
from .log import Log
from .result import Written


def _noted[W](log: Log[W], note: W | None) -> Log[W]:
    if note is None:
        return Log(log)
    return log.tell(note)


def apply_w[T, R, W](
    written: Written[T, W],
    function: Transform[T, R],
    *,
    note: W | None = None,
) -> Written[R, W]:
    """apply() on the carried value. Preserves log."""
    return Written(core.apply(written.value, function), _noted(written.log, note))


def apply_ref_w[T, R, W](
    written: Written[T, W],
    function: Transform[T, R],
    *,
    note: W | None = None,
) -> Written[R, W]:
    """apply_ref() on the carried value. Preserves log."""
    return Written(core.apply_ref(written.value, function), _noted(written.log, note))


def also_w[T, W](
    written: Written[T, W],
    function: Effect[T],
    *,
    note: W | None = None,
) -> Written[T, W]:
    """also() on the carried value. Preserves log."""
    return Written(core.also(written.value, function), _noted(written.log, note))


def also_mut_w[T, W](
    written: Written[T, W],
    function: Mutation[T],
    *,
    note: W | None = None,
) -> Written[T, W]:
    """also_mut() on the carried value. Preserves log."""
    return Written(core.also_mut(written.value, function), _noted(written.log, note))


__all__ = ("apply_w", "apply_ref_w", "also_w", "also_mut_w")
