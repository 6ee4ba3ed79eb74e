"""
Method form of the helpers.

Mix `Apply` and `Also` into your own classes to call the helpers as methods:

    @dataclass
    class Request(Apply, Also):
        headers: dict[str, str] = field(default_factory=dict)

    request = Request().also_mut(lambda it: it.headers.update(accept="json"))

Builtins and third-party types can't take a mixin; use `fluent()` for those.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from typing import Self

from . import core


class Apply:
    """Adds apply() and apply_ref() to subclasses."""

    __slots__ = ()

    def apply[R](self, function: Callable[[Self], R], /) -> R:
        """Apply function to self and return the result."""
        return core.apply(self, function)

    def apply_ref[R](self, function: Callable[[Self], R], /) -> R:
        """Apply function to self and return the result; self stays usable."""
        return core.apply_ref(self, function)


class Also:
    """Adds also() and also_mut() to subclasses."""

    __slots__ = ()

    def also(self, function: Callable[[Self], typing.Any], /) -> Self:
        """Call function with self for its side effect, return self."""
        return core.also(self, function)

    def also_mut(self, function: Callable[[Self], typing.Any], /) -> Self:
        """Let function mutate self in place, return self."""
        return core.also_mut(self, function)


__all__ = ("Apply", "Also")
