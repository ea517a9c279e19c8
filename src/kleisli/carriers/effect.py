"""Effect: pass-through instance over asyncio awaitables.

The host's own effect system is ``async``/``await``. An Effect wraps a
factory producing an awaitable and adapts bind to native ``await``
sequencing: nothing about ordering, suspension or cancellation is
reimplemented here. Every run calls the factory again, so an Effect is a
description of work, not a cached result.
"""

from __future__ import annotations

import asyncio
from functools import wraps
from typing import TYPE_CHECKING, Awaitable, Callable, Generic, ParamSpec, TypeVar

if TYPE_CHECKING:
    from collections.abc import Coroutine

A = TypeVar("A")
B = TypeVar("B")
P = ParamSpec("P")


class Effect(Generic[A]):
    """Deferred awaitable computation.

    Examples:
        >>> async def fetch() -> int:
        ...     return 20
        >>> Effect(fetch).bind(lambda x: Effect.pure(x + 1)).run_sync()
        21
    """

    __slots__ = ("_factory",)

    def __init__(self, factory: Callable[[], Awaitable[A]]) -> None:
        self._factory = factory

    async def run(self) -> A:
        """Perform the effect on the running loop."""
        return await self._factory()

    def run_sync(self) -> A:
        """Perform the effect on a fresh event loop via ``asyncio.run``.

        Must not be called while a loop is already running in this thread.
        """
        return asyncio.run(self.run())

    # ─────────────────────────────────────────────────────────────────
    # Functor / Applicative
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[A], B]) -> Effect[B]:
        async def mapped() -> B:
            return f(await self.run())
        return Effect(mapped)

    @classmethod
    def pure(cls, value: B) -> Effect[B]:
        """Effect that resolves immediately to ``value``."""
        async def resolved() -> B:
            return value
        return cls(resolved)

    def apply(self: Effect[Callable[[A], B]], ka: Effect[A]) -> Effect[B]:
        """Await the function, then the argument, then apply."""
        async def applied() -> B:
            f = await self.run()
            return f(await ka.run())
        return Effect(applied)

    # ─────────────────────────────────────────────────────────────────
    # Monad
    # ─────────────────────────────────────────────────────────────────

    def bind(self, f: Callable[[A], Effect[B]]) -> Effect[B]:
        """Native sequencing: await self, then await what ``f`` returns.

        Type signature: Effect[A] -> (A -> Effect[B]) -> Effect[B]
        """
        async def bound() -> B:
            return await f(await self.run()).run()
        return Effect(bound)

    def __rshift__(self, f: Callable[[A], Effect[B]]) -> Effect[B]:
        from ..monad import flat_map
        return flat_map(self, f)

    def __repr__(self) -> str:
        return f"Effect({getattr(self._factory, '__name__', self._factory)!r})"

    # ─────────────────────────────────────────────────────────────────
    # Interop
    # ─────────────────────────────────────────────────────────────────

    @classmethod
    def from_awaitable(cls, awaitable: Awaitable[B]) -> Effect[B]:
        """Wrap an already-created awaitable.

        Coroutine objects can only be awaited once, so the resulting Effect
        can only be run once. Prefer ``Effect(factory)`` or ``effect``.
        """
        return cls(lambda: awaitable)


def effect(fn: Callable[P, Coroutine[object, object, A]]) -> Callable[P, Effect[A]]:
    """Decorator turning an ``async def`` into a function returning Effect.

    Example:
        >>> @effect
        ... async def double(x: int) -> int:
        ...     return x * 2
        >>> double(4).run_sync()
        8
    """
    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Effect[A]:
        return Effect(lambda: fn(*args, **kwargs))
    return wrapper
