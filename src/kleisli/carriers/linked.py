"""List: a persistent singly-linked sequence.

Built from Nil and Cons(head, tail). Lists are immutable and share structure,
so prepending is O(1) and a tail is never copied. Operations walk the spine
iteratively, which keeps long lists clear of the recursion limit while giving
the same results as the textbook recursive definitions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar, cast

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

A = TypeVar("A")
B = TypeVar("B")


class EmptyListError(IndexError):
    """Raised when taking the head or tail of Nil."""


class List(Generic[A]):
    """Immutable cons list.

    Construct with ``Cons(h, t)``, ``list_of(*items)`` or
    ``List.from_iterable(items)``; ``Nil`` is the empty list.

    Examples:
        >>> list_of(1, 2, 3).bind(lambda n: list_of(n, n))
        [1,1,2,2,3,3]
        >>> list_of(1, 2) + list_of(3)
        [1,2,3]
    """

    __slots__ = ("_head", "_tail", "_is_cons")

    def __init__(self, head: A | None, tail: List[A] | None, is_cons: bool) -> None:
        """Private constructor. Use Cons() or Nil instead."""
        self._head = head
        self._tail = tail
        self._is_cons = is_cons

    # ─────────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────────

    @classmethod
    def from_iterable(cls, items: Iterable[B]) -> List[B]:
        """Build a list preserving iteration order."""
        out: List[B] = Nil
        for item in reversed(list(items)):
            out = Cons(item, out)
        return out

    # ─────────────────────────────────────────────────────────────────
    # Inspection
    # ─────────────────────────────────────────────────────────────────

    def is_nil(self) -> bool:
        return not self._is_cons

    def head(self) -> A:
        """First element.

        Raises:
            EmptyListError: On Nil
        """
        if self._is_cons:
            return cast(A, self._head)
        raise EmptyListError("head of Nil")

    def tail(self) -> List[A]:
        """Everything after the first element.

        Raises:
            EmptyListError: On Nil
        """
        if self._is_cons:
            return cast(List[A], self._tail)
        raise EmptyListError("tail of Nil")

    def head_or(self, default: A) -> A:
        return cast(A, self._head) if self._is_cons else default

    def to_list(self) -> list[A]:
        return list(self)

    # ─────────────────────────────────────────────────────────────────
    # Folds & Structure
    # ─────────────────────────────────────────────────────────────────

    def fold_right(self, f: Callable[[A, B], B], z: B) -> B:
        """``f(x1, f(x2, ... f(xn, z)))``."""
        acc = z
        for item in reversed(self.to_list()):
            acc = f(item, acc)
        return acc

    def fold_left(self, f: Callable[[B, A], B], z: B) -> B:
        """``f(... f(f(z, x1), x2) ..., xn)``."""
        acc = z
        for item in self:
            acc = f(acc, item)
        return acc

    def concat(self, other: List[A]) -> List[A]:
        """Append ``other``. ``other`` is shared, not copied."""
        return self.fold_right(Cons, other)

    def reverse(self) -> List[A]:
        return self.fold_left(lambda acc, x: Cons(x, acc), cast(List[A], Nil))

    def filter(self, pred: Callable[[A], bool]) -> List[A]:
        return self.fold_right(lambda x, acc: Cons(x, acc) if pred(x) else acc, cast(List[A], Nil))

    # ─────────────────────────────────────────────────────────────────
    # Functor / Applicative
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[A], B]) -> List[B]:
        """Apply ``f`` to every element, in order."""
        return List.from_iterable(f(x) for x in self)

    @classmethod
    def pure(cls, value: B) -> List[B]:
        """Singleton list."""
        return Cons(value, Nil)

    def apply(self: List[Callable[[A], B]], ka: List[A]) -> List[B]:
        """Every function over every value, function-major.

        Type signature: List[A -> B] -> List[A] -> List[B]
        """
        return List.from_iterable(f(x) for f in self for x in ka)

    # ─────────────────────────────────────────────────────────────────
    # Monad
    # ─────────────────────────────────────────────────────────────────

    def bind(self, f: Callable[[A], List[B]]) -> List[B]:
        """Flat-map: concatenate ``f(x)`` for each element, in order.

        Nil binds to Nil. For Cons(h, t) the result is ``f(h) ++ bind(f, t)``.

        Type signature: List[A] -> (A -> List[B]) -> List[B]
        """
        chunks = [f(x) for x in self]
        out: List[B] = Nil
        for chunk in reversed(chunks):
            out = chunk.concat(out)
        return out

    def __rshift__(self, f: Callable[[A], List[B]]) -> List[B]:
        from ..monad import flat_map
        return flat_map(self, f)

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __iter__(self) -> Iterator[A]:
        node = self
        while node._is_cons:
            yield cast(A, node._head)
            node = cast(List[A], node._tail)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return self._is_cons

    def __add__(self, other: List[A]) -> List[A]:
        if not isinstance(other, List):
            return NotImplemented
        return self.concat(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, List):
            return NotImplemented
        left, right = self, other
        while left._is_cons and right._is_cons:
            if left._head != right._head:
                return False
            left, right = cast(List[A], left._tail), cast(List[A], right._tail)
        return left._is_cons == right._is_cons

    def __hash__(self) -> int:
        return hash(("List", tuple(self)))

    def __repr__(self) -> str:
        return "[" + ",".join(repr(x) for x in self) + "]"


# ═════════════════════════════════════════════════════════════════════════════
# Constructors
# ═════════════════════════════════════════════════════════════════════════════


Nil: List = List(None, None, is_cons=False)


def Cons(head: A, tail: List[A]) -> List[A]:  # noqa: N802
    """Prepend ``head`` to ``tail``.

    Type signature: A -> List[A] -> List[A]
    """
    return List(head, tail, is_cons=True)


def list_of(*items: A) -> List[A]:
    """``list_of(1, 2, 3)`` is ``Cons(1, Cons(2, Cons(3, Nil)))``."""
    return List.from_iterable(items)
