"""Carrier types: ExactlyOne, List, Optional, Reader and the Effect pass-through."""

from .effect import Effect, effect
from .exactly_one import ExactlyOne
from .linked import Cons, EmptyListError, List, Nil, list_of
from .optional import Empty, Full, Optional
from .reader import Reader, ask, asks, curried

__all__ = [
    "ExactlyOne",
    "List", "Nil", "Cons", "list_of", "EmptyListError",
    "Optional", "Full", "Empty",
    "Reader", "ask", "asks", "curried",
    "Effect", "effect",
]
