"""Tests for the carrier types' own Functor/Applicative/Monad operations.

Validates:
- Functor laws per carrier
- Native apply and pure
- Per-carrier bind primitives
- Helpers (list construction and folds, Optional conversion, Reader helpers, Effect)
"""

from __future__ import annotations

import asyncio
import operator

import pytest

from kleisli.carriers import (
    Cons,
    Effect,
    Empty,
    EmptyListError,
    ExactlyOne,
    Full,
    List,
    Nil,
    Optional,
    Reader,
    ask,
    asks,
    curried,
    effect,
    list_of,
)


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Functor Laws
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("value", [ExactlyOne(4), Full(4), Empty, list_of(1, 2, 3), Nil])
def test_functor_identity(value: object) -> None:
    """Functor law: fmap id = id"""
    assert value.map(lambda x: x) == value  # type: ignore[attr-defined]


@pytest.mark.parametrize("value", [ExactlyOne(4), Full(4), Empty, list_of(1, 2, 3), Nil])
def test_functor_composition(value: object) -> None:
    """Functor law: fmap (f . g) = fmap f . fmap g"""
    f = lambda x: x + 1
    g = lambda x: x * 2
    assert value.map(lambda x: f(g(x))) == value.map(g).map(f)  # type: ignore[attr-defined]


def test_reader_functor_laws() -> None:
    r = Reader(lambda t: t - 3)
    f = lambda x: x + 1
    g = lambda x: x * 2
    for t in (0, 5, -2):
        assert r.map(lambda x: x)(t) == r(t)
        assert r.map(lambda x: f(g(x)))(t) == r.map(g).map(f)(t)


# ═════════════════════════════════════════════════════════════════════════════
# ExactlyOne
# ═════════════════════════════════════════════════════════════════════════════


def test_exactly_one_basics() -> None:
    one = ExactlyOne(2)
    assert one.value == 2
    assert list(one) == [2]
    assert repr(one) == "ExactlyOne(2)"
    assert ExactlyOne.pure("a") == ExactlyOne("a")
    assert hash(ExactlyOne(2)) == hash(ExactlyOne(2))


def test_exactly_one_apply_and_bind() -> None:
    assert ExactlyOne(lambda x: x + 10).apply(ExactlyOne(8)) == ExactlyOne(18)
    assert ExactlyOne(2).bind(lambda x: ExactlyOne(x + 1)) == ExactlyOne(3)


def test_exactly_one_match() -> None:
    match ExactlyOne(5):
        case ExactlyOne(v):
            assert v == 5


# ═════════════════════════════════════════════════════════════════════════════
# Optional
# ═════════════════════════════════════════════════════════════════════════════


def test_optional_variants() -> None:
    assert Full(3).is_full() and not Full(3).is_empty()
    assert Empty.is_empty() and not Empty.is_full()
    assert Full(3).value == 3
    assert bool(Full(0))
    assert not Empty
    assert repr(Full("x")) == "Full('x')"
    assert repr(Empty) == "Empty"


def test_optional_full_none_is_not_empty() -> None:
    """Full(None) holds a value; only the Empty variant is absent."""
    assert Full(None) != Empty
    assert Full(None).is_full()


def test_optional_match_over_both_variants() -> None:
    """Class patterns bind the held value on Full and fall through on Empty."""
    def describe(x: Optional[int]) -> str:
        match x:
            case Optional(v):
                return f"full {v}"
            case Optional():
                return "empty"
        return "unreachable"

    assert describe(Full(3)) == "full 3"
    assert describe(Full(None)) == "full None"
    assert describe(Empty) == "empty"


def test_optional_empty_ignores_payload() -> None:
    """Every Empty is the same value, whatever was passed to the constructor."""
    stray = Optional(5, is_full=False)
    assert stray == Empty
    assert hash(stray) == hash(Empty)
    assert len({stray, Empty}) == 1
    assert stray != Full(5)
    assert repr(stray) == "Empty"


def test_optional_value_on_empty_raises() -> None:
    with pytest.raises(ValueError):
        Empty.value


def test_optional_conversions() -> None:
    assert Full(3).value_or(0) == 3
    assert Empty.value_or(0) == 0
    assert Optional.from_python(None) == Empty
    assert Optional.from_python(4) == Full(4)
    assert Full(4).to_python() == 4
    assert Empty.to_python() is None
    assert list(Full(1)) == [1]
    assert list(Empty) == []


def test_optional_apply() -> None:
    add8 = lambda x: x + 8
    assert Full(add8).apply(Full(7)) == Full(15)
    assert Empty.apply(Full(7)) == Empty
    assert Full(add8).apply(Empty) == Empty
    assert Optional.pure(1) == Full(1)


def test_optional_bind() -> None:
    assert Full(7).bind(lambda n: Full(n + n)) == Full(14)
    assert Empty.bind(lambda n: Full(n + n)) == Empty
    assert Full(7).bind(lambda _: Empty) == Empty


def test_optional_bind_does_not_call_function_on_empty() -> None:
    calls: list[int] = []

    def f(n: int) -> Optional[int]:
        calls.append(n)
        return Full(n)

    Empty.bind(f)
    assert calls == []


# ═════════════════════════════════════════════════════════════════════════════
# List
# ═════════════════════════════════════════════════════════════════════════════


def test_list_construction() -> None:
    xs = Cons(1, Cons(2, Cons(3, Nil)))
    assert xs == list_of(1, 2, 3)
    assert xs == List.from_iterable(range(1, 4))
    assert xs.to_list() == [1, 2, 3]
    assert len(xs) == 3
    assert len(Nil) == 0
    assert repr(xs) == "[1,2,3]"
    assert repr(Nil) == "[]"
    assert repr(list_of(list_of(1), Nil)) == "[[1],[]]"


def test_list_equality_and_hash() -> None:
    assert list_of(1, 2) != list_of(1, 2, 3)
    assert list_of(1, 2, 3) != list_of(1, 2)
    assert list_of(1, 2) != list_of(2, 1)
    assert Nil == list_of()
    assert hash(list_of(1, 2)) == hash(list_of(1, 2))
    assert list_of(1) != [1]


def test_list_head_tail() -> None:
    xs = list_of(1, 2)
    assert xs.head() == 1
    assert xs.tail() == list_of(2)
    assert Nil.head_or(9) == 9
    with pytest.raises(EmptyListError):
        Nil.head()
    with pytest.raises(IndexError):
        Nil.tail()


def test_list_structure_sharing() -> None:
    tail = list_of(2, 3)
    xs = Cons(1, tail)
    assert xs.tail() is tail
    ys = list_of(0) + tail
    assert ys.tail() is tail


def test_list_folds() -> None:
    xs = list_of(1, 2, 3)
    assert xs.fold_left(operator.sub, 0) == ((0 - 1) - 2) - 3
    assert xs.fold_right(operator.sub, 0) == 1 - (2 - (3 - 0))
    assert xs.reverse() == list_of(3, 2, 1)
    assert xs.filter(lambda n: n % 2 == 1) == list_of(1, 3)
    assert list_of(1, 2) + list_of(3) == list_of(1, 2, 3)
    assert Nil + Nil == Nil


def test_list_apply_is_function_major() -> None:
    fs = list_of(lambda x: x + 1, lambda x: x * 2)
    assert fs.apply(list_of(1, 2, 3)) == list_of(2, 3, 4, 2, 4, 6)
    assert Nil.apply(list_of(1)) == Nil
    assert fs.apply(Nil) == Nil
    assert List.pure(5) == list_of(5)


def test_list_bind() -> None:
    assert list_of(1, 2, 3).bind(lambda n: list_of(n, n)) == list_of(1, 1, 2, 2, 3, 3)
    assert Nil.bind(lambda n: list_of(n, n)) == Nil
    assert list_of(1, 2, 3).bind(lambda n: Nil if n == 2 else list_of(n)) == list_of(1, 3)


def test_list_long_does_not_recurse() -> None:
    n = 20_000
    xs = List.from_iterable(range(n))
    assert len(xs.bind(lambda x: list_of(x))) == n
    assert xs.map(lambda x: x + 1).head() == 1
    assert xs == List.from_iterable(range(n))


# ═════════════════════════════════════════════════════════════════════════════
# Reader
# ═════════════════════════════════════════════════════════════════════════════


def test_reader_run() -> None:
    r = Reader(lambda t: t * 3)
    assert r(2) == 6
    assert r.run(2) == 6


def test_reader_pure_ignores_environment() -> None:
    r = Reader.pure("const")
    assert r(1) == r("anything") == "const"


def test_reader_apply() -> None:
    assert curried(operator.add).apply(Reader(lambda t: t + 10))(3) == 16
    assert curried(operator.mul).apply(Reader(lambda t: t + 2))(3) == 15


def test_reader_bind_threads_environment() -> None:
    r = Reader(lambda t: t + 10).bind(lambda x: Reader(lambda t: x * t))
    assert r(7) == 119


def test_reader_helpers() -> None:
    assert ask()(5) == 5
    assert asks(len)("abc") == 3
    assert Reader(lambda t: t * 2).local(lambda t: t + 1)(3) == 8


def test_reader_config_example() -> None:
    """Readers share one environment across a chain."""
    env = {"host": "localhost", "port": 8080}
    url = asks(lambda e: e["host"]).bind(lambda h: asks(lambda e: f"{h}:{e['port']}"))
    assert url(env) == "localhost:8080"


# ═════════════════════════════════════════════════════════════════════════════
# Effect
# ═════════════════════════════════════════════════════════════════════════════


def test_effect_pure_and_map() -> None:
    assert Effect.pure(3).map(lambda x: x + 1).run_sync() == 4


def test_effect_apply() -> None:
    assert Effect.pure(lambda x: x * 2).apply(Effect.pure(21)).run_sync() == 42


def test_effect_bind_sequences_in_order() -> None:
    events: list[str] = []

    @effect
    async def step(name: str, value: int) -> int:
        events.append(f"start {name}")
        await asyncio.sleep(0)
        events.append(f"end {name}")
        return value

    program = step("a", 1).bind(lambda x: step("b", x + 1))
    assert events == []  # Nothing runs until the effect is run
    assert program.run_sync() == 2
    assert events == ["start a", "end a", "start b", "end b"]


def test_effect_reruns_factory() -> None:
    calls: list[int] = []

    async def tick() -> int:
        calls.append(1)
        return len(calls)

    e = Effect(tick)
    assert e.run_sync() == 1
    assert e.run_sync() == 2


def test_effect_runs_inside_loop() -> None:
    async def main() -> int:
        return await Effect.pure(5).bind(lambda x: Effect.pure(x * 2)).run()

    assert asyncio.run(main()) == 10


def test_effect_from_awaitable() -> None:
    async def main() -> int:
        fut: asyncio.Future[int] = asyncio.get_running_loop().create_future()
        fut.set_result(7)
        return await Effect.from_awaitable(fut).map(lambda x: x + 1).run()

    assert asyncio.run(main()) == 8


def test_effect_propagates_exceptions() -> None:
    async def boom() -> int:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        Effect(boom).bind(lambda x: Effect.pure(x)).run_sync()
