"""
Written - value with accumulated log
====================================
"""

from __future__ import annotations

from .log import Log


class Written[T, W]:
    """
    Value paired with the log written while producing it.

    Immutable: the writer helpers always return a new Written
    and a new Log, so earlier steps keep their own trace.
    """

    __slots__ = ("_value", "_log")
    __match_args__ = ("value", "log")

    def __init__(self, value: T, log: Log[W]) -> None:
        self._value = value
        self._log = log

    @property
    def value(self) -> T:
        """The carried value."""
        return self._value

    @property
    def log(self) -> Log[W]:
        """The accumulated log."""
        return self._log

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Written):
            return NotImplemented
        return self._value == other._value and self._log == other._log

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Written({self._value!r}, log={self._log!r})"


def written[T, W](value: T, *notes: W) -> Written[T, W]:
    """
    Start a Written from a plain value.

    Example:
        written({}, "start")  # Written({}, log=['start'])
    """
    return Written(value, Log.of(*notes))


__all__ = ("Written", "written")
