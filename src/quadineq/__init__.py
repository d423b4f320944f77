"""Quadratic inequality solver: text in, interval notation out."""

from quadineq.api import Solution, solve_inequality, solve_text
from quadineq.ast import ComparisonKind
from quadineq.config import Settings, get_settings
from quadineq.errors import (
    DegreeError,
    DomainError,
    InequalityError,
    InequalitySyntaxError,
)
from quadineq.intervals import Bound, Interval, SolutionSet, canonicalize, complement
from quadineq.normalize import CanonicalQuadratic
from quadineq.pretty import format_inequality, format_solution
from quadineq.solver import solve

__all__ = [
    "Bound",
    "CanonicalQuadratic",
    "ComparisonKind",
    "DegreeError",
    "DomainError",
    "InequalityError",
    "InequalitySyntaxError",
    "Interval",
    "Settings",
    "Solution",
    "SolutionSet",
    "canonicalize",
    "complement",
    "format_inequality",
    "format_solution",
    "get_settings",
    "solve",
    "solve_inequality",
    "solve_text",
]
