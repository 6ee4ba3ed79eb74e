"""Tests for the fluent builders and TracePolicy."""

import functools

import pytest
from conftest import Boom

from apply_also import Fluent, FluentW, Log, TracePolicy, Written, fluent, fluent_w


def fill(it: list[str]) -> None:
    it.extend(["hello", "world"])


# Fluent


def test_fluent_apply():
    assert fluent(256).apply(lambda it: it * 2).get() == 512


def test_fluent_builds_dict():
    mapping = fluent({}).also_mut(lambda it: it.update(hello="world")).get()
    assert mapping == {"hello": "world"}


def test_fluent_steps_run_eagerly(counter):
    fluent("now").also(counter)
    assert counter.calls == ["now"]


def test_fluent_is_immutable():
    start = fluent(1)
    doubled = start.apply(lambda it: it * 2)

    assert start.get() == 1
    assert doubled.get() == 2
    with pytest.raises(AttributeError):
        start.value = 3  # type: ignore[misc]


def test_fluent_mixed_chain(counter):
    result = (
        fluent([])
        .also_mut(fill)
        .also(counter)
        .apply_ref(len)
        .apply(str)
        .get()
    )

    assert result == "2"
    assert counter.calls == [["hello", "world"]]


def test_fluent_propagates_exception():
    def explode(_: object) -> None:
        raise Boom("step failed")

    with pytest.raises(Boom, match="step failed"):
        fluent(1).also(explode)


def test_fluent_equality():
    assert fluent(3) == Fluent(3)


# FluentW


def test_fluent_w_records_steps():
    wr = fluent_w([]).also_mut(fill).apply(len).run()

    assert wr == Written(2, Log.of("also_mut(fill)", "apply(len)"))


def test_fluent_w_names_lambdas_and_partials():
    add = functools.partial(lambda it, n: it + n, n=1)
    chain = fluent_w(1).apply(add).also(print)

    assert chain.log == ["apply(<lambda>)", "also(print)"]


def test_fluent_w_tell():
    chain = fluent_w({}).tell("start").also_mut(lambda it: it.update(a=1)).tell("done")

    assert chain.get() == {"a": 1}
    assert chain.log == ["start", "also_mut(<lambda>)", "done"]


def test_fluent_w_logs_are_not_shared():
    first = fluent_w(1).tell("a")
    second = first.tell("b")

    assert first.log == ["a"]
    assert second.log == ["a", "b"]
    assert first.log is not second.log


def test_fluent_w_pattern_match():
    match fluent_w(2).apply(lambda it: it + 1).run():
        case Written(value, log):
            assert value == 3
            assert log == ["apply(<lambda>)"]
        case _:
            pytest.fail("expected Written")


def test_fluent_w_exception_leaves_earlier_chain_intact():
    chain = fluent_w(1).tell("before")

    def explode(_: int) -> None:
        raise Boom("traced")

    with pytest.raises(Boom):
        chain.also(explode)
    assert chain.log == ["before"]


def test_traced_switches_to_fluent_w():
    chain = fluent(5).apply(lambda it: it * 2).traced().apply(str)

    assert isinstance(chain, FluentW)
    assert chain.run() == Written("10", Log.of("apply(str)"))


# TracePolicy


def test_quiet_policy_records_nothing():
    chain = fluent_w(1, policy=TracePolicy.quiet()).apply(str).tell("kept")

    assert chain.get() == "1"
    assert chain.log == ["kept"]


def test_verbose_policy_includes_values():
    chain = fluent_w([], policy=TracePolicy.verbose()).also_mut(fill)
    assert chain.log == ["also_mut(fill) -> ['hello', 'world']"]


def test_verbose_policy_cuts_long_values():
    chain = fluent_w("x" * 50, policy=TracePolicy.verbose(max_repr=10)).also(len)

    (entry,) = chain.log
    _, value = entry.split(" -> ")
    assert len(value) == 10
    assert value.endswith("...")


def test_custom_describer():
    policy = TracePolicy(describe=lambda operation, function: operation.upper())
    assert fluent_w(1).apply(str).log == ["apply(str)"]
    assert fluent_w(1, policy=policy).apply(str).log == ["APPLY"]


def test_policy_rejects_small_max_repr():
    with pytest.raises(ValueError, match="max_repr"):
        TracePolicy(max_repr=3)
