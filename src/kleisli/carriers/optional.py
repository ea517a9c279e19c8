"""Optional: a value that may be absent.

Two variants, Empty and Full(value), with exactly one active. Absence is an
ordinary value here, never an error: every operation short-circuits on Empty
and passes Empty through unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar, cast

if TYPE_CHECKING:
    from collections.abc import Iterator

A = TypeVar("A")
B = TypeVar("B")


class Optional(Generic[A]):
    """Discriminated union of Empty and Full(value).

    Construct with ``Full(v)`` or use the ``Empty`` singleton.

    Examples:
        >>> Full(7).bind(lambda n: Full(n + n))
        Full(14)
        >>> Empty.bind(lambda n: Full(n + n))
        Empty
        >>> Full(3).value_or(0), Empty.value_or(0)
        (3, 0)
    """

    __slots__ = ("_value", "_is_full")
    __match_args__ = ("_full_value",)

    def __init__(self, value: A | None, is_full: bool) -> None:
        """Private constructor. Use Full() or Empty instead."""
        self._value = value if is_full else None
        self._is_full = is_full

    # ─────────────────────────────────────────────────────────────────
    # Inspection
    # ─────────────────────────────────────────────────────────────────

    def is_full(self) -> bool:
        return self._is_full

    def is_empty(self) -> bool:
        return not self._is_full

    @property
    def value(self) -> A:
        """Held value of a Full.

        Raises:
            ValueError: On Empty
        """
        if self._is_full:
            return cast(A, self._value)
        raise ValueError("Empty holds no value")

    @property
    def _full_value(self) -> A:
        # AttributeError lets a class pattern skip Empty instead of raising.
        if self._is_full:
            return cast(A, self._value)
        raise AttributeError("Empty holds no value")

    def value_or(self, default: A) -> A:
        """Held value, or ``default`` on Empty."""
        return cast(A, self._value) if self._is_full else default

    def to_python(self) -> A | None:
        """Full(v) -> v, Empty -> None."""
        return cast(A, self._value) if self._is_full else None

    @staticmethod
    def from_python(value: A | None) -> Optional[A]:
        """None -> Empty, anything else -> Full(value)."""
        return Empty if value is None else Full(value)

    # ─────────────────────────────────────────────────────────────────
    # Functor / Applicative
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[A], B]) -> Optional[B]:
        """Type signature: Optional[A] -> (A -> B) -> Optional[B]"""
        return Full(f(cast(A, self._value))) if self._is_full else Empty

    @classmethod
    def pure(cls, value: B) -> Optional[B]:
        return Full(value)

    def apply(self: Optional[Callable[[A], B]], ka: Optional[A]) -> Optional[B]:
        """Full(f) applied to Full(v) is Full(f(v)); any Empty gives Empty."""
        if self._is_full and ka.is_full():
            return Full(cast(Callable[[A], B], self._value)(ka.value))
        return Empty

    # ─────────────────────────────────────────────────────────────────
    # Monad
    # ─────────────────────────────────────────────────────────────────

    def bind(self, f: Callable[[A], Optional[B]]) -> Optional[B]:
        """Monadic bind, short-circuiting on Empty.

        Type signature: Optional[A] -> (A -> Optional[B]) -> Optional[B]
        """
        if self._is_full:
            return f(cast(A, self._value))
        return Empty

    def __rshift__(self, f: Callable[[A], Optional[B]]) -> Optional[B]:
        from ..monad import flat_map
        return flat_map(self, f)

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_full

    def __repr__(self) -> str:
        return f"Full({self._value!r})" if self._is_full else "Empty"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        if self._is_full != other._is_full:
            return False
        return not self._is_full or self._value == other._value

    def __hash__(self) -> int:
        return hash((True, self._value)) if self._is_full else hash(False)

    def __iter__(self) -> Iterator[A]:
        """Yields 0 or 1 element."""
        if self._is_full:
            yield cast(A, self._value)


# ═════════════════════════════════════════════════════════════════════════════
# Constructors
# ═════════════════════════════════════════════════════════════════════════════


Empty: Optional = Optional(None, is_full=False)


def Full(value: A) -> Optional[A]:  # noqa: N802
    """Construct the Full variant.

    Type signature: A -> Optional[A]
    """
    return Optional(value, is_full=True)
