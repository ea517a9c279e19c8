"""Capability protocols: Functor, Applicative, Monad.

Each capability is a structural protocol. A carrier satisfies it by having
the right methods; there is no shared base class. The hierarchy mirrors the
laws: a Monad is an Applicative is a Functor.

Laws (not enforced by the type system, see ``kleisli.laws``):

- Functor: ``x.map(id) == x`` and ``x.map(g).map(f) == x.map(f . g)``
- Monad associativity:
  ``bind(g, bind(f, x)) == bind(compose_k(g, f), x)``
"""

from __future__ import annotations

from typing import Callable, Protocol, TypeVar, runtime_checkable

A = TypeVar("A")
B = TypeVar("B")


@runtime_checkable
class Functor(Protocol[A]):
    """Carrier with ``map``."""

    def map(self, f: Callable[[A], B]) -> Functor[B]: ...


@runtime_checkable
class Applicative(Functor[A], Protocol[A]):
    """Functor with ``pure`` (classmethod) and ``apply``.

    ``kf.apply(ka)``: kf holds function(s), ka holds argument(s).
    """

    @classmethod
    def pure(cls, value: B) -> Applicative[B]: ...

    def apply(self, ka: Applicative[B]) -> Applicative[B]: ...


@runtime_checkable
class Monad(Applicative[A], Protocol[A]):
    """Applicative with ``bind``. ``x.bind(f)`` is ``bind(f, x)``."""

    def bind(self, f: Callable[[A], Monad[B]]) -> Monad[B]: ...


def is_monad(value: object) -> bool:
    """True when ``value`` is a carrier value satisfying the Monad capability.

    Carrier classes themselves have the methods too, but are not values.
    """
    return not isinstance(value, type) and isinstance(value, Monad)
