"""Reader: a computation that depends on a shared environment.

A Reader is just a function ``T -> A``. It is wrapped in a one-slot class so
it carries map/pure/apply/bind like the other carriers; calling the reader
with an environment runs it.

Binding is the only operation that must thread the environment twice: the
source reader and the reader produced by the continuation both see the same
``t``.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")  # Environment type
A = TypeVar("A")
B = TypeVar("B")


class Reader(Generic[T, A]):
    """Function from environment to result.

    Examples:
        >>> add_ten = Reader(lambda t: t + 10)
        >>> add_ten.map(lambda x: x * 2)(1)
        22
        >>> add_ten.bind(lambda x: Reader(lambda t: x * t))(7)
        119
    """

    __slots__ = ("_run",)

    def __init__(self, run: Callable[[T], A]) -> None:
        self._run = run

    def __call__(self, env: T) -> A:
        return self._run(env)

    def run(self, env: T) -> A:
        """Run against ``env``. Same as calling the reader."""
        return self._run(env)

    # ─────────────────────────────────────────────────────────────────
    # Functor / Applicative
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[A], B]) -> Reader[T, B]:
        """Post-compose ``f``: ``t -> f(g(t))``."""
        run = self._run
        return Reader(lambda t: f(run(t)))

    @classmethod
    def pure(cls, value: B) -> Reader[T, B]:
        """Constant reader ignoring its environment."""
        return cls(lambda _t: value)

    def apply(self: Reader[T, Callable[[A], B]], ka: Reader[T, A]) -> Reader[T, B]:
        """``t -> kf(t)(ka(t))``."""
        run = self._run
        return Reader(lambda t: run(t)(ka(t)))

    # ─────────────────────────────────────────────────────────────────
    # Monad
    # ─────────────────────────────────────────────────────────────────

    def bind(self, f: Callable[[A], Reader[T, B]]) -> Reader[T, B]:
        """``t -> f(g(t))(t)``.

        Type signature: Reader[T, A] -> (A -> Reader[T, B]) -> Reader[T, B]
        """
        run = self._run
        return Reader(lambda t: f(run(t))(t))

    def __rshift__(self, f: Callable[[A], Reader[T, B]]) -> Reader[T, B]:
        from ..monad import flat_map
        return flat_map(self, f)

    def local(self, f: Callable[[T], T]) -> Reader[T, A]:
        """Run this reader in an environment modified by ``f``."""
        run = self._run
        return Reader(lambda t: run(f(t)))

    def __repr__(self) -> str:
        return f"Reader({getattr(self._run, '__name__', self._run)!r})"


# ═════════════════════════════════════════════════════════════════════════════
# Helpers
# ═════════════════════════════════════════════════════════════════════════════


def ask() -> Reader[T, T]:
    """Reader returning the environment itself."""
    return Reader(lambda t: t)


def asks(f: Callable[[T], A]) -> Reader[T, A]:
    """Reader projecting the environment through ``f``."""
    return Reader(f)


def curried(f: Callable[[T, A], B]) -> Reader[T, Callable[[A], B]]:
    """Lift a two-argument ``f(t, x)`` into a reader of functions.

    Lets binary operators take part in ``apply``/``apply_m``:

        >>> import operator
        >>> curried(operator.add).apply(Reader(lambda t: t + 10))(3)
        16
    """
    return Reader(lambda t: lambda x: f(t, x))
