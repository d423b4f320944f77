"""Intervals over the real line and ordered unions of them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from quadineq.config import Settings, get_settings


@dataclass(frozen=True)
class Bound:
    value: float
    closed: bool = False

    def __post_init__(self) -> None:
        if math.isinf(self.value) and self.closed:
            object.__setattr__(self, "closed", False)

    @property
    def is_infinite(self) -> bool:
        return math.isinf(self.value)


NEG_INF = Bound(-math.inf)
POS_INF = Bound(math.inf)


@dataclass(frozen=True)
class Interval:
    lower: Bound
    upper: Bound

    @staticmethod
    def point(value: float) -> Interval:
        return Interval(Bound(value, True), Bound(value, True))

    @staticmethod
    def open(lo: float, hi: float) -> Interval:
        return Interval(Bound(lo), Bound(hi))

    @staticmethod
    def closed(lo: float, hi: float) -> Interval:
        return Interval(Bound(lo, True), Bound(hi, True))

    @staticmethod
    def below(value: float, inclusive: bool = False) -> Interval:
        return Interval(NEG_INF, Bound(value, inclusive))

    @staticmethod
    def above(value: float, inclusive: bool = False) -> Interval:
        return Interval(Bound(value, inclusive), POS_INF)

    @property
    def is_point(self) -> bool:
        return self.lower.value == self.upper.value

    @property
    def is_empty(self) -> bool:
        if self.lower.value > self.upper.value:
            return True
        if self.lower.value == self.upper.value:
            return not (self.lower.closed and self.upper.closed)
        return False

    @property
    def is_full(self) -> bool:
        return self.lower.value == -math.inf and self.upper.value == math.inf

    def __contains__(self, x: float) -> bool:
        if x < self.lower.value or (x == self.lower.value and not self.lower.closed):
            return False
        if x > self.upper.value or (x == self.upper.value and not self.upper.closed):
            return False
        return True


SolutionSet = tuple[Interval, ...]

EMPTY: SolutionSet = ()
REALS: SolutionSet = (Interval(NEG_INF, POS_INF),)


def _lower_key(interval: Interval) -> tuple[float, int]:
    # A closed lower bound starts before an open one at the same value.
    return (interval.lower.value, 0 if interval.lower.closed else 1)


def _joinable(current: Interval, nxt: Interval, eps: float) -> bool:
    gap = nxt.lower.value - current.upper.value
    if gap < -eps:
        return True
    if gap <= eps:
        return current.upper.closed or nxt.lower.closed
    return False


def _max_upper(a: Bound, b: Bound, eps: float) -> Bound:
    if abs(a.value - b.value) <= eps:
        return Bound(max(a.value, b.value), a.closed or b.closed)
    return a if a.value > b.value else b


def canonicalize(
    intervals: Iterable[Interval], settings: Settings | None = None
) -> SolutionSet:
    """Sort, drop empty pieces and merge overlapping or touching intervals.

    Endpoints closer than ``settings.epsilon`` are treated as equal. Two pieces
    sharing an endpoint merge when at least one of them contains it.
    """
    eps = (settings or get_settings()).epsilon
    pieces = sorted((i for i in intervals if not i.is_empty), key=_lower_key)
    merged: list[Interval] = []
    for piece in pieces:
        if merged and _joinable(merged[-1], piece, eps):
            last = merged[-1]
            merged[-1] = Interval(last.lower, _max_upper(last.upper, piece.upper, eps))
        else:
            merged.append(piece)
    return tuple(merged)


def complement(
    solution: SolutionSet, settings: Settings | None = None
) -> SolutionSet:
    """Return the canonical complement of a canonical solution set."""
    pieces: list[Interval] = []
    lower = NEG_INF
    for interval in solution:
        if not interval.lower.is_infinite:
            upper = Bound(interval.lower.value, not interval.lower.closed)
            pieces.append(Interval(lower, upper))
        lower = Bound(interval.upper.value, not interval.upper.closed)
        if interval.upper.is_infinite:
            lower = POS_INF
    if not lower.is_infinite or lower.value < 0:
        pieces.append(Interval(lower, POS_INF))
    return canonicalize(pieces, settings)


def contains(solution: SolutionSet, x: float) -> bool:
    return any(x in interval for interval in solution)


def is_full(solution: SolutionSet) -> bool:
    return len(solution) == 1 and solution[0].is_full
