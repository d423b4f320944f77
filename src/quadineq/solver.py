"""Solution sets of ``a·x² + b·x + c cmp 0`` by discriminant analysis."""

from __future__ import annotations

import logging
import math

from quadineq.ast import ComparisonKind
from quadineq.config import Settings, get_settings
from quadineq.intervals import (
    EMPTY,
    REALS,
    Interval,
    SolutionSet,
    canonicalize,
)

logger = logging.getLogger("quadineq.solver")

LT, LE, GT, GE, EQ, NE = (
    ComparisonKind.LT,
    ComparisonKind.LE,
    ComparisonKind.GT,
    ComparisonKind.GE,
    ComparisonKind.EQ,
    ComparisonKind.NE,
)


def _punctured(*points: float) -> list[Interval]:
    """The real line without ``points`` (given in ascending order)."""
    pieces = []
    lower = -math.inf
    for p in points:
        pieces.append(Interval.open(lower, p))
        lower = p
    pieces.append(Interval.open(lower, math.inf))
    return pieces


def _relative_to_point(r: float, cmp: ComparisonKind) -> list[Interval]:
    """Solutions of ``x cmp r``."""
    match cmp:
        case ComparisonKind.LT:
            return [Interval.below(r)]
        case ComparisonKind.LE:
            return [Interval.below(r, inclusive=True)]
        case ComparisonKind.GT:
            return [Interval.above(r)]
        case ComparisonKind.GE:
            return [Interval.above(r, inclusive=True)]
        case ComparisonKind.EQ:
            return [Interval.point(r)]
        case ComparisonKind.NE:
            return _punctured(r)


def solve_linear(
    b: float, c: float, cmp: ComparisonKind, settings: Settings | None = None
) -> SolutionSet:
    """Solve ``b·x + c cmp 0``."""
    settings = settings or get_settings()
    eps = settings.epsilon
    if abs(b) <= eps:
        value = 0.0 if abs(c) <= eps else c
        logger.debug("Constant branch: %r %s 0", value, cmp.value)
        return REALS if cmp.holds(value, 0.0) else EMPTY
    root = -c / b
    if b < 0:
        cmp = cmp.reversed()
    logger.debug("Linear branch: x %s %r", cmp.value, root)
    return canonicalize(_relative_to_point(root, cmp), settings)


def _scaled(a: float, b: float, c: float) -> tuple[float, float, float]:
    """Divide the coefficients by a power of two bringing them into ``[-1, 1]``."""
    _, exponent = math.frexp(max(abs(a), abs(b), abs(c)))
    return (
        math.ldexp(a, -exponent),
        math.ldexp(b, -exponent),
        math.ldexp(c, -exponent),
    )


def _discriminant(a: float, b: float, c: float) -> tuple[float, float]:
    """``b² − 4ac`` and its value relative to the larger of its two terms."""
    disc = b * b - 4.0 * a * c
    size = max(b * b, abs(4.0 * a * c))
    return disc, (disc / size if size else 0.0)


def _roots(a: float, b: float, c: float, disc: float) -> tuple[float, float]:
    """Distinct roots of ``a·x² + b·x + c`` in ascending order."""
    t = -(b + math.copysign(math.sqrt(disc), b)) / 2.0
    r1, r2 = t / a, c / t
    return (r1, r2) if r1 < r2 else (r2, r1)


def _double_root(r: float, cmp: ComparisonKind) -> list[Interval]:
    match cmp:
        case ComparisonKind.GT | ComparisonKind.NE:
            return _punctured(r)
        case ComparisonKind.GE:
            return list(REALS)
        case ComparisonKind.LT:
            return []
        case ComparisonKind.LE | ComparisonKind.EQ:
            return [Interval.point(r)]


def _two_roots(r1: float, r2: float, cmp: ComparisonKind) -> list[Interval]:
    match cmp:
        case ComparisonKind.GT:
            return [Interval.below(r1), Interval.above(r2)]
        case ComparisonKind.GE:
            return [
                Interval.below(r1, inclusive=True),
                Interval.above(r2, inclusive=True),
            ]
        case ComparisonKind.LT:
            return [Interval.open(r1, r2)]
        case ComparisonKind.LE:
            return [Interval.closed(r1, r2)]
        case ComparisonKind.EQ:
            return [Interval.point(r1), Interval.point(r2)]
        case ComparisonKind.NE:
            return _punctured(r1, r2)


def solve(
    a: float,
    b: float,
    c: float,
    cmp: ComparisonKind,
    settings: Settings | None = None,
) -> SolutionSet:
    """Solve ``a·x² + b·x + c cmp 0`` over the reals.

    Degenerate leading coefficients fall back to :func:`solve_linear`. For a
    proper quadratic the signs are flipped when ``a < 0`` so every rule below
    reasons about an upward-opening parabola. The coefficients are rescaled
    by a power of two before squaring, and the discriminant is compared with
    epsilon relative to the larger of ``b²`` and ``4ac``. Roots beyond the
    float range come out infinite and their pieces drop out as empty.
    """
    settings = settings or get_settings()
    eps = settings.epsilon
    if abs(a) <= eps:
        return solve_linear(b, c, cmp, settings)

    if a < 0:
        a, b, c = -a, -b, -c
        cmp = cmp.reversed()
    a, b, c = _scaled(a, b, c)
    disc, relative = _discriminant(a, b, c)

    if relative < -eps:
        logger.debug("No real roots (D=%r)", relative)
        return REALS if cmp in (GT, GE, NE) else EMPTY
    if relative <= eps:
        r = -b / (2.0 * a)
        logger.debug("Double root %r", r)
        return canonicalize(_double_root(r, cmp), settings)
    r1, r2 = _roots(a, b, c, disc)
    logger.debug("Roots %r < %r", r1, r2)
    return canonicalize(_two_roots(r1, r2, cmp), settings)
