"""
Core type definitions for apply_also.

Aliases for the function shapes the helpers accept.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Transform = function whose result replaces the value (apply, apply_ref)
type Transform[T, R] = Callable[[T], R]

# Effect = function called for its side effect, result discarded (also)
type Effect[T] = Callable[[T], typing.Any]

# Mutation = function that changes the value in place, result discarded (also_mut)
type Mutation[T] = Callable[[T], typing.Any]

# Describer = (operation name, function) -> trace entry, None to record nothing
type Describer = Callable[[str, Callable[..., typing.Any]], str | None]

__all__ = (
    "Transform",
    "Effect",
    "Mutation",
    "Describer",
)
