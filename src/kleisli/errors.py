"""Error types for kleisli.

The core operations are total, so nothing here is raised by bind, join or
friends on well-formed input. These types cover the two ways things go
wrong around the core: passing a value that is not a monad to a generic
operation, and a carrier instance that breaks a law.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field


class ErrorCode(StrEnum):
    """Machine-readable failure codes."""
    NOT_A_MONAD = "NOT_A_MONAD"
    LAW_VIOLATION = "LAW_VIOLATION"
    UNKNOWN = "UNKNOWN"


class LawFailure(BaseModel):
    """One failed law check: which law, on what carrier, and both sides."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    law: str = Field(min_length=1)
    carrier: str
    left: str
    right: str
    code: ErrorCode = ErrorCode.LAW_VIOLATION

    def render(self) -> str:
        return f"{self.law} failed for {self.carrier}: {self.left} != {self.right}"

    __str__ = render


class KleisliException(Exception):
    """Base for exceptions raised by kleisli."""

    code: ErrorCode = ErrorCode.UNKNOWN


class NotAMonadError(KleisliException, TypeError):
    """A generic operation got a value with no ``bind``/``map``."""

    code = ErrorCode.NOT_A_MONAD

    def __init__(self, value: object, operation: str) -> None:
        self.value = value
        self.operation = operation
        super().__init__(f"{operation}() needs a monadic value, got {type(value).__name__}: {value!r}")


class LawViolation(KleisliException):
    """Exception wrapping one or more LawFailure records for raising."""

    __slots__ = ("failures",)
    code = ErrorCode.LAW_VIOLATION

    def __init__(self, failures: list[LawFailure]) -> None:
        self.failures = failures
        super().__init__("; ".join(f.render() for f in failures))

    @classmethod
    def create(cls, law: str, carrier: str, left: object, right: object) -> Self:
        """Build from a single failed comparison."""
        return cls([LawFailure(law=law, carrier=carrier, left=repr(left), right=repr(right))])
