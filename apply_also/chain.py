"""
Fluent builders for chaining helpers on any value.

Architecture:
- Fluent[T] - wraps a value, each method runs the core helper of the same name
- FluentW[T] - same, plus a trace Log[str] with one entry per step
- TracePolicy - how FluentW turns a step into a trace entry

Steps run eagerly, as soon as the method is called.

Example:
    config = (
        fluent({})
        .also_mut(lambda it: it.update(host="localhost"))
        .also_mut(lambda it: it.setdefault("port", 8080))
        .get()
    )
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass, field

from . import core
from ._helpers import describe as describe_step
from ._helpers import short_repr, silent
from ._types import Describer, Effect, Mutation, Transform
from .writer import Log, Written


# ============================================================================
# Trace configuration
# ============================================================================


@dataclass(frozen=True, slots=True)
class TracePolicy:
    """
    How FluentW describes a step.

    describe returns the entry for (operation, function), or None to skip it.
    include_values appends the repr of the value after the step,
    cut to max_repr characters.
    """

    describe: Describer = describe_step
    include_values: bool = False
    max_repr: int = 80

    def __post_init__(self) -> None:
        if self.max_repr < 8:
            raise ValueError("TracePolicy.max_repr must be >= 8")

    @classmethod
    def quiet(cls) -> TracePolicy:
        """Record nothing. Explicit tell() entries are still kept."""
        return cls(describe=silent)

    @classmethod
    def verbose(cls, max_repr: int = 80) -> TracePolicy:
        """Record every step together with the value it produced."""
        return cls(include_values=True, max_repr=max_repr)

    def entry(
        self,
        operation: str,
        function: Callable[..., typing.Any],
        value: object,
    ) -> str | None:
        text = self.describe(operation, function)
        if text is None or not self.include_values:
            return text
        return f"{text} -> {short_repr(value, self.max_repr)}"


# ============================================================================
# Plain builder
# ============================================================================


@dataclass(frozen=True, slots=True)
class Fluent[T]:
    """
    Fluent builder over a plain value.

    Each method calls the corresponding core helper and wraps the result.
    """

    value: T

    def apply[R](self, function: Transform[T, R]) -> Fluent[R]:
        return Fluent(core.apply(self.value, function))

    def apply_ref[R](self, function: Transform[T, R]) -> Fluent[R]:
        return Fluent(core.apply_ref(self.value, function))

    def also(self, function: Effect[T]) -> Fluent[T]:
        return Fluent(core.also(self.value, function))

    def also_mut(self, function: Mutation[T]) -> Fluent[T]:
        return Fluent(core.also_mut(self.value, function))

    def traced(self, *, policy: TracePolicy | None = None) -> FluentW[T]:
        """Continue the chain with a trace, starting from an empty log."""
        return fluent_w(self.value, policy=policy)

    def get(self) -> T:
        return self.value


# ============================================================================
# Traced builder (FluentW)
# ============================================================================


def _default_policy() -> TracePolicy:
    return TracePolicy()


@dataclass(frozen=True, slots=True)
class FluentW[T]:
    """
    Fluent builder that writes a trace.

    Direct value-based implementation on top of Written.
    """

    written: Written[T, str]
    policy: TracePolicy = field(default_factory=_default_policy)

    def _step[R](
        self,
        operation: str,
        helper: Callable[[T, Callable[[T], typing.Any]], R],
        function: Callable[[T], typing.Any],
    ) -> FluentW[R]:
        value = helper(self.written.value, function)
        entry = self.policy.entry(operation, function, value)
        log = Log(self.written.log) if entry is None else self.written.log.tell(entry)
        return FluentW(Written(value, log), self.policy)

    def apply[R](self, function: Transform[T, R]) -> FluentW[R]:
        return self._step("apply", core.apply, function)

    def apply_ref[R](self, function: Transform[T, R]) -> FluentW[R]:
        return self._step("apply_ref", core.apply_ref, function)

    def also(self, function: Effect[T]) -> FluentW[T]:
        return self._step("also", core.also, function)

    def also_mut(self, function: Mutation[T]) -> FluentW[T]:
        return self._step("also_mut", core.also_mut, function)

    def tell(self, *entries: str) -> FluentW[T]:
        """Append custom entries to the trace."""
        return FluentW(Written(self.written.value, self.written.log.tell(*entries)), self.policy)

    @property
    def log(self) -> Log[str]:
        return self.written.log

    def get(self) -> T:
        return self.written.value

    def run(self) -> Written[T, str]:
        return self.written


# ============================================================================
# Entry points
# ============================================================================


def fluent[T](value: T) -> Fluent[T]:
    """
    Start a fluent chain.

    Example:
        fluent(256).apply(lambda it: it * 2).get()  # 512
    """
    return Fluent(value)


def fluent_w[T](value: T, *, policy: TracePolicy | None = None) -> FluentW[T]:
    """
    Start a traced fluent chain.

    Example:
        wr = fluent_w([]).also_mut(fill).apply(len).run()
        wr.value  # 3
        wr.log    # ['also_mut(fill)', 'apply(len)']
    """
    if policy is None:
        policy = TracePolicy()
    return FluentW(Written(value, Log[str]()), policy)


__all__ = (
    "TracePolicy",
    "Fluent",
    "FluentW",
    "fluent",
    "fluent_w",
)
