"""Rendering of solution sets."""

from __future__ import annotations

import math

from quadineq.config import Settings, get_settings
from quadineq.intervals import Bound, Interval, SolutionSet, is_full

EMPTY_GLYPH = "∅"
REALS_GLYPH = "ℝ"
UNION = " ∪ "
# Larger integral values are written in exponent form.
EXACT_INTEGERS = 10**15


def format_number(value: float, settings: Settings | None = None) -> str:
    """Render ``value`` as an integer when it is one within tolerance."""
    settings = settings or get_settings()
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    nearest = round(value)
    if abs(nearest) < EXACT_INTEGERS and abs(value - nearest) <= settings.epsilon:
        return str(int(nearest))
    text = f"{value:.{settings.significant_digits}g}"
    if "e" in text:
        mantissa, exponent = text.split("e")
        if "." in mantissa:
            mantissa = mantissa.rstrip("0").rstrip(".")
        return f"{mantissa}e{exponent}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _format_interval(interval: Interval, settings: Settings) -> str:
    if interval.is_point:
        return "{" + format_number(interval.lower.value, settings) + "}"
    lo, hi = interval.lower, interval.upper
    left = "[" if lo.closed else "("
    right = "]" if hi.closed else ")"
    return (
        f"{left}{format_number(lo.value, settings)}, "
        f"{format_number(hi.value, settings)}{right}"
    )


def format_solution(solution: SolutionSet, settings: Settings | None = None) -> str:
    """Render ``solution`` in interval notation, e.g. ``(-∞, 1) ∪ [2, 3]``."""
    settings = settings or get_settings()
    if not solution:
        return EMPTY_GLYPH
    if is_full(solution):
        return REALS_GLYPH
    return UNION.join(_format_interval(i, settings) for i in solution)


def _clause(interval: Interval, variable: str, settings: Settings) -> str:
    lo, hi = interval.lower, interval.upper

    def num(bound: Bound) -> str:
        return format_number(bound.value, settings)

    def less(bound: Bound) -> str:
        return "≤" if bound.closed else "<"

    if interval.is_point:
        return f"{variable} = {num(lo)}"
    if lo.is_infinite:
        return f"{variable} {less(hi)} {num(hi)}"
    if hi.is_infinite:
        greater = "≥" if lo.closed else ">"
        return f"{variable} {greater} {num(lo)}"
    return f"{num(lo)} {less(lo)} {variable} {less(hi)} {num(hi)}"


def format_inequality(
    solution: SolutionSet, variable: str = "x", settings: Settings | None = None
) -> str:
    """Render ``solution`` as inequalities on ``variable``, e.g. ``x < 1 or x > 2``."""
    settings = settings or get_settings()
    if not solution:
        return "no solution"
    if is_full(solution):
        return "all real numbers"
    return " or ".join(_clause(i, variable, settings) for i in solution)
