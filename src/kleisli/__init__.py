"""Kleisli - Functor, Applicative and Monad from first principles.

Four carriers share one capability surface without sharing a base class:

- ExactlyOne: exactly one value
- List: persistent cons list (Nil / Cons)
- Optional: Empty / Full(value)
- Reader: function from an environment
- Effect: pass-through over asyncio awaitables

Each carrier supplies map, pure, apply and bind. Everything else (apply_m,
join, flat_map, compose_k) is derived generically from bind.

Example:
    >>> from kleisli import Full, Empty, bind, join, list_of, compose_k
    >>> bind(lambda n: Full(n + n), Full(7))
    Full(14)
    >>> bind(lambda n: Full(n + n), Empty)
    Empty
    >>> join(list_of(list_of(1, 2, 3), list_of(1, 2)))
    [1,2,3,1,2]
    >>> compose_k(lambda n: list_of(n, n), lambda n: list_of(n + 1, n + 2))(1)
    [2,2,3,3]
"""

from .carriers import (
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
from .errors import ErrorCode, KleisliException, LawFailure, LawViolation, NotAMonadError
from .monad import (
    apply_m,
    bind,
    compose_k,
    flat_map,
    fmap,
    join,
    kleisli_chain,
    pure_like,
    sequence,
    traverse,
)
from .typeclasses import Applicative, Functor, Monad, is_monad

__version__ = "0.1.0"

__all__ = [
    # Carriers
    "ExactlyOne",
    "List", "Nil", "Cons", "list_of", "EmptyListError",
    "Optional", "Full", "Empty",
    "Reader", "ask", "asks", "curried",
    "Effect", "effect",
    # Capabilities
    "Functor", "Applicative", "Monad", "is_monad",
    # Operations
    "bind", "fmap", "pure_like", "apply_m", "join", "flat_map", "compose_k", "kleisli_chain",
    "sequence", "traverse",
    # Errors
    "ErrorCode", "KleisliException", "NotAMonadError", "LawFailure", "LawViolation",
]
