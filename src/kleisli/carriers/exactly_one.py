"""ExactlyOne: the single-value carrier.

Trivial identity context. Every operation unwraps the one value, works on it,
and wraps (or returns) the result. No branching anywhere.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator

A = TypeVar("A")
B = TypeVar("B")


class ExactlyOne(Generic[A]):
    """Container holding exactly one value.

    Examples:
        >>> ExactlyOne(2).map(lambda x: x + 1)
        ExactlyOne(3)
        >>> ExactlyOne(2).bind(lambda x: ExactlyOne(x * 10))
        ExactlyOne(20)
    """

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: A) -> None:
        self._value: A = value

    @property
    def value(self) -> A:
        """Unwrap the held value."""
        return self._value

    # ─────────────────────────────────────────────────────────────────
    # Functor / Applicative
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[A], B]) -> ExactlyOne[B]:
        """Type signature: ExactlyOne[A] -> (A -> B) -> ExactlyOne[B]"""
        return ExactlyOne(f(self._value))

    @classmethod
    def pure(cls, value: B) -> ExactlyOne[B]:
        return cls(value)

    def apply(self: ExactlyOne[Callable[[A], B]], ka: ExactlyOne[A]) -> ExactlyOne[B]:
        """Apply the held function to the value held by ``ka``."""
        return ExactlyOne(self._value(ka.value))

    # ─────────────────────────────────────────────────────────────────
    # Monad
    # ─────────────────────────────────────────────────────────────────

    def bind(self, f: Callable[[A], ExactlyOne[B]]) -> ExactlyOne[B]:
        """Type signature: ExactlyOne[A] -> (A -> ExactlyOne[B]) -> ExactlyOne[B]"""
        return f(self._value)

    def __rshift__(self, f: Callable[[A], ExactlyOne[B]]) -> ExactlyOne[B]:
        from ..monad import flat_map
        return flat_map(self, f)

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __repr__(self) -> str:
        return f"ExactlyOne({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExactlyOne):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(("ExactlyOne", self._value))

    def __iter__(self) -> Iterator[A]:
        yield self._value
