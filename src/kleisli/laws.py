"""Law checks for Monad instances.

The type system cannot see the monad laws, so a broken carrier only shows up
when someone runs it. Each function here evaluates both sides of one law and
returns a LawCheck; ``verify`` runs the whole suite for one carrier value,
logs the outcome and raises LawViolation on failure (configurable).

Readers and Effects have no structural equality. Compare them with
``reader_equivalence`` (run both on sample environments) and
``effect_equivalence`` (run both with ``asyncio.run``); ``equivalence_for``
picks the right one automatically.

Example:
    >>> from kleisli.carriers import Full
    >>> report = verify(Full(3), lambda n: Full(n + 1), lambda n: Full(n * 2), 5)
    >>> report.passed
    True
"""

from __future__ import annotations

import asyncio
import operator
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, computed_field

from .carriers.effect import Effect
from .carriers.reader import Reader
from .config import get_settings
from .errors import LawFailure, LawViolation
from .monad import apply_m, bind, compose_k, flat_map, fmap, join, pure_like
from .observability import get_logger

Equivalence = Callable[[Any, Any], bool]


# ═════════════════════════════════════════════════════════════════════════════
# Results
# ═════════════════════════════════════════════════════════════════════════════


class LawCheck(BaseModel):
    """Outcome of evaluating one law. ``left``/``right`` are reprs of both sides."""

    model_config = ConfigDict(frozen=True)

    law: str
    carrier: str
    holds: bool
    left: str
    right: str

    def to_failure(self) -> LawFailure:
        return LawFailure(law=self.law, carrier=self.carrier, left=self.left, right=self.right)


class LawReport(BaseModel):
    """All law checks run against one carrier."""

    model_config = ConfigDict(frozen=True)

    carrier: str
    checks: list[LawCheck]

    @computed_field
    @property
    def passed(self) -> bool:
        return all(c.holds for c in self.checks)

    def failures(self) -> list[LawFailure]:
        return [c.to_failure() for c in self.checks if not c.holds]

    def raise_for_violations(self) -> LawReport:
        """Raise LawViolation if any check failed, else return self."""
        if failures := self.failures():
            raise LawViolation(failures)
        return self


# ═════════════════════════════════════════════════════════════════════════════
# Equivalences
# ═════════════════════════════════════════════════════════════════════════════


def reader_equivalence(*envs: Any) -> Equivalence:
    """Readers are equal when they agree on every sample environment.

    Defaults to ``KleisliSettings.laws.sample_environments``.
    """
    samples = envs or tuple(get_settings().laws.sample_environments)

    def eq(left: Reader, right: Reader) -> bool:
        return all(left(t) == right(t) for t in samples)
    return eq


def effect_equivalence(inner: Equivalence = operator.eq) -> Equivalence:
    """Effects are equal when running them yields equal results."""
    def eq(left: Effect, right: Effect) -> bool:
        return inner(asyncio.run(left.run()), asyncio.run(right.run()))
    return eq


def equivalence_for(value: object) -> Equivalence:
    """Pick the comparison suited to ``value``'s carrier."""
    if isinstance(value, Reader):
        return reader_equivalence()
    if isinstance(value, Effect):
        return effect_equivalence()
    return operator.eq


def _check(law: str, carrier: str, left: Any, right: Any, eq: Equivalence) -> LawCheck:
    return LawCheck(law=law, carrier=carrier, holds=bool(eq(left, right)), left=repr(left), right=repr(right))


# ═════════════════════════════════════════════════════════════════════════════
# Laws
# ═════════════════════════════════════════════════════════════════════════════


def left_identity(f: Callable[[Any], Any], a: Any, pure: Callable[[Any], Any], *,
                  eq: Equivalence | None = None) -> LawCheck:
    """``bind(f, pure(a)) == f(a)``"""
    left, right = bind(f, pure(a)), f(a)
    return _check("left_identity", type(right).__name__, left, right, eq or equivalence_for(right))


def right_identity(x: Any, *, eq: Equivalence | None = None) -> LawCheck:
    """``bind(pure, x) == x``"""
    left = bind(lambda a: pure_like(x, a), x)
    return _check("right_identity", type(x).__name__, left, x, eq or equivalence_for(x))


def associativity(x: Any, f: Callable[[Any], Any], g: Callable[[Any], Any], *,
                  eq: Equivalence | None = None) -> LawCheck:
    """``bind(g, bind(f, x)) == bind(compose_k(g, f), x)``"""
    left, right = bind(g, bind(f, x)), bind(compose_k(g, f), x)
    return _check("associativity", type(x).__name__, left, right, eq or equivalence_for(x))


def join_bind(x: Any, f: Callable[[Any], Any], *, eq: Equivalence | None = None) -> LawCheck:
    """``join(map(f, x)) == bind(f, x)``"""
    left, right = join(fmap(f, x)), bind(f, x)
    return _check("join_bind", type(x).__name__, left, right, eq or equivalence_for(x))


def flat_map_bind(x: Any, f: Callable[[Any], Any], *, eq: Equivalence | None = None) -> LawCheck:
    """``flat_map(x, f) == bind(f, x)``"""
    left, right = flat_map(x, f), bind(f, x)
    return _check("flat_map_bind", type(x).__name__, left, right, eq or equivalence_for(x))


def apply_m_apply(kf: Any, ka: Any, *, eq: Equivalence | None = None) -> LawCheck:
    """``apply_m(kf, ka) == kf.apply(ka)``: derived application agrees with the native one."""
    left, right = apply_m(kf, ka), kf.apply(ka)
    return _check("apply_m_apply", type(ka).__name__, left, right, eq or equivalence_for(ka))


# ═════════════════════════════════════════════════════════════════════════════
# Suite
# ═════════════════════════════════════════════════════════════════════════════


def verify(
    x: Any,
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    a: Any,
    *,
    kf: Any | None = None,
    eq: Equivalence | None = None,
    raise_on_violation: bool | None = None,
) -> LawReport:
    """Run every monad law for the carrier of ``x``.

    Args:
        x: A carrier value to test against
        f: Function ``A -> K[B]``
        g: Function ``B -> K[C]``
        a: Plain value for the left identity check
        kf: Optional carrier of functions; adds the apply_m/apply cross-check against ``x``
        eq: Comparison; defaults to ``equivalence_for(x)``. For a Reader the
            default runs both sides on the integer
            ``KleisliSettings.laws.sample_environments``; readers over any
            other environment type need ``eq=reader_equivalence(env, ...)``
        raise_on_violation: Overrides ``KleisliSettings.laws.raise_on_violation``

    Raises:
        LawViolation: If any law fails and raising is enabled
    """
    carrier = type(x).__name__
    eq = eq or equivalence_for(x)
    pure = type(x).pure
    checks = [
        left_identity(f, a, pure, eq=eq),
        right_identity(x, eq=eq),
        associativity(x, f, g, eq=eq),
        join_bind(x, f, eq=eq),
        flat_map_bind(x, f, eq=eq),
    ]
    if kf is not None:
        checks.append(apply_m_apply(kf, x, eq=eq))

    bound = get_logger("kleisli.laws", carrier=carrier)
    for check in checks:
        bound.debug("law checked", law=check.law, holds=check.holds)
    report = LawReport(carrier=carrier, checks=checks)

    if report.passed:
        bound.info("laws verified", checks=len(checks))
        return report
    bound.warning("laws violated", failed=[c.law for c in checks if not c.holds])
    if raise_on_violation is None:
        raise_on_violation = get_settings().laws.raise_on_violation
    if raise_on_violation:
        report.raise_for_violations()
    return report
