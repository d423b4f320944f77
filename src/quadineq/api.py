"""String-in/string-out entry points over the solver pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from quadineq.config import Settings, get_settings
from quadineq.errors import InequalityError
from quadineq.intervals import SolutionSet
from quadineq.lexer import tokenize
from quadineq.normalize import CanonicalQuadratic, normalize
from quadineq.parser import parse
from quadineq.pretty import format_inequality, format_solution
from quadineq.solver import solve

logger = logging.getLogger("quadineq.api")


@dataclass(frozen=True)
class Solution:
    quadratic: CanonicalQuadratic
    intervals: SolutionSet

    def as_intervals(self, settings: Settings | None = None) -> str:
        return format_solution(self.intervals, settings)

    def as_inequality(self, settings: Settings | None = None) -> str:
        return format_inequality(self.intervals, self.quadratic.variable, settings)


def solve_inequality(source: str, settings: Settings | None = None) -> Solution:
    """Run the full pipeline, raising :class:`InequalityError` on bad input."""
    settings = settings or get_settings()
    toks = tokenize(source, settings)
    parsed = parse(toks, source, settings)
    quadratic = normalize(
        parsed.left,
        parsed.right,
        parsed.comparison,
        parsed.variable,
        source,
        settings,
    )
    intervals = solve(
        quadratic.a, quadratic.b, quadratic.c, quadratic.comparison, settings
    )
    return Solution(quadratic, intervals)


def solve_text(source: str, settings: Settings | None = None) -> str:
    """Solve ``source`` and render the result, or a message describing the error."""
    try:
        solution = solve_inequality(source, settings)
    except InequalityError as exc:
        logger.info("Rejected %r: %s", source, exc)
        return exc.describe()
    return solution.as_intervals(settings)
