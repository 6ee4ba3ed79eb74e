"""
Log - monoidal accumulator for traces
=====================================
"""

from __future__ import annotations


class Log[A](list[A]):
    """
    Trace accumulator.

    A list with monoidal operations that never touch the receiver:
    - empty: Log()
    - combine: concatenation

    Monoid laws hold:
    - Left identity: Log().combine(x) == x
    - Right identity: x.combine(Log()) == x
    - Associativity: (x.combine(y)).combine(z) == x.combine(y.combine(z))
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Combine two logs.

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log(["a", "b", "c"])
        """
        result: Log[A] = Log(self)
        result.extend(other)
        return result

    def tell(self, *items: A) -> Log[A]:
        """Copy of this log with items appended."""
        result: Log[A] = Log(self)
        result.extend(items)
        return result


__all__ = ("Log",)
