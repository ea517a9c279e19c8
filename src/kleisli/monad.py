"""Generic monadic operations, derived from each carrier's ``bind``.

Every function here works for any carrier satisfying the Monad capability.
Only ``bind`` reaches into the carrier's primitive; the rest is built from
``bind``, ``map`` and ``pure``:

- ``apply_m``: application from bind + map
- ``join``: bind with the identity function
- ``flat_map``: join + map, never calling bind directly
- ``compose_k``: Kleisli composition

Example:
    >>> from kleisli.carriers import list_of
    >>> compose_k(lambda n: list_of(n, n), lambda n: list_of(n + 1, n + 2))(1)
    [2,2,3,3]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeVar

from .carriers.linked import Cons, Nil
from .errors import NotAMonadError
from .typeclasses import is_monad

if TYPE_CHECKING:
    from collections.abc import Iterable

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

# Carrier-polymorphic values. Python cannot express K[A] for a variable K.
KA = Any
KB = Any
KC = Any


def _require(value: object, operation: str) -> None:
    if not is_monad(value):
        raise NotAMonadError(value, operation)


def _identity(x: A) -> A:
    return x


# ═════════════════════════════════════════════════════════════════════════════
# Primitive
# ═════════════════════════════════════════════════════════════════════════════


def bind(f: Callable[[A], KB], ka: KA) -> KB:
    """Sequence ``ka`` through ``f`` using the carrier's own primitive.

    Type signature: (A -> K[B]) -> K[A] -> K[B]

    Raises:
        NotAMonadError: If ``ka`` has no Monad capability
    """
    _require(ka, "bind")
    return ka.bind(f)


def fmap(f: Callable[[A], B], ka: KA) -> KB:
    """Functor map in function-first order. Type signature: (A -> B) -> K[A] -> K[B]"""
    _require(ka, "fmap")
    return ka.map(f)


def pure_like(k: KA, value: B) -> KB:
    """Lift ``value`` into the same carrier as ``k``."""
    _require(k, "pure_like")
    return type(k).pure(value)


# ═════════════════════════════════════════════════════════════════════════════
# Derived Operations
# ═════════════════════════════════════════════════════════════════════════════


def apply_m(kf: Any, ka: KA) -> KB:
    """Application derived from bind and map.

    Binds over the wrapped function(s) and maps each one over ``ka``. Agrees
    with the carrier's native ``apply``; for lists that means every function
    over every value, function-major.

    Type signature: K[A -> B] -> K[A] -> K[B]

    Example:
        >>> from kleisli.carriers import list_of
        >>> apply_m(list_of(lambda x: x + 1, lambda x: x * 2), list_of(1, 2, 3))
        [2,3,4,2,4,6]
    """
    _require(kf, "apply_m")
    _require(ka, "apply_m")
    return bind(lambda g: ka.map(g), kf)


def join(kka: Any) -> KA:
    """Collapse one level of nesting: ``bind(identity, kka)``.

    Type signature: K[K[A]] -> K[A]

    Example:
        >>> from kleisli.carriers import Full, Empty
        >>> join(Full(Full(7))), join(Full(Empty))
        (Full(7), Empty)
    """
    return bind(_identity, kka)


def flat_map(ka: KA, f: Callable[[A], KB]) -> KB:
    """Bind with arguments flipped, built from ``join`` and ``map`` only.

    Type signature: K[A] -> (A -> K[B]) -> K[B]
    """
    _require(ka, "flat_map")
    return join(ka.map(f))


def compose_k(g: Callable[[B], KC], f: Callable[[A], KB]) -> Callable[[A], KC]:
    """Kleisli composition: ``a -> bind(g, f(a))``.

    Type signature: (B -> K[C]) -> (A -> K[B]) -> A -> K[C]
    """
    def composed(a: A) -> KC:
        return bind(g, f(a))
    return composed


def kleisli_chain(*fs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose wrapped-producing functions left to right.

    ``kleisli_chain(f, g, h)`` is ``compose_k(h, compose_k(g, f))``.

    Raises:
        ValueError: If no functions are given
    """
    if not fs:
        raise ValueError("kleisli_chain() needs at least one function")
    chained = fs[0]
    for f in fs[1:]:
        chained = compose_k(f, chained)
    return chained


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def sequence(ks: Iterable[KA], pure: Callable[[Any], KA]) -> Any:
    """Turn a sequence of carrier values into a carrier of a List.

    Built from bind and pure only. For Optional this fails fast on the first
    Empty; for List it yields every combination.

    Type signature: [K[A]] -> K[List[A]]

    Example:
        >>> from kleisli.carriers import Full, Empty, Optional
        >>> sequence([Full(1), Full(2)], Optional.pure)
        Full([1,2])
        >>> sequence([Full(1), Empty], Optional.pure)
        Empty
    """
    acc: Any = pure(Nil)
    for k in reversed(list(ks)):
        acc = _cons_into(k, acc, pure)
    return acc


def _cons_into(k: KA, acc: Any, pure: Callable[[Any], KA]) -> Any:
    # One closure per step so each binding sees its own k and acc.
    return bind(lambda x: bind(lambda xs: pure(Cons(x, xs)), acc), k)


def traverse(items: Iterable[A], f: Callable[[A], KB], pure: Callable[[Any], KB]) -> Any:
    """``sequence`` of ``f`` applied to each item.

    Type signature: [A] -> (A -> K[B]) -> K[List[B]]
    """
    return sequence([f(item) for item in items], pure)


__all__ = [
    "bind", "fmap", "pure_like",
    "apply_m", "join", "flat_map", "compose_k", "kleisli_chain",
    "sequence", "traverse",
]
