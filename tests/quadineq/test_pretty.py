import math

import pytest

from quadineq.config import Settings
from quadineq.intervals import EMPTY, REALS, Bound, Interval
from quadineq.pretty import format_inequality, format_number, format_solution


@pytest.mark.parametrize(
    ("value", "text"),
    [
        (2.0, "2"),
        (-3.0, "-3"),
        (-0.0, "0"),
        (1.5, "1.5"),
        (1 / 3, "0.333333"),
        (2.000000000001, "2"),
        (-math.sqrt(2), "-1.41421"),
        (1e-7, "1e-07"),
        (1234567.5, "1.23457e+06"),
        (1e14, "100000000000000"),
        (-1e16, "-1e+16"),
        (-1e200, "-1e+200"),
        (math.inf, "∞"),
        (-math.inf, "-∞"),
    ],
)
def test_format_number(value: float, text: str) -> None:
    assert format_number(value) == text


def test_significant_digits_from_settings() -> None:
    assert format_number(1 / 3, Settings(significant_digits=3)) == "0.333"
    assert format_number(0.25, Settings(significant_digits=10)) == "0.25"


def test_extremes() -> None:
    assert format_solution(EMPTY) == "∅"
    assert format_solution(REALS) == "ℝ"


def test_rays_and_bounded() -> None:
    rays = (Interval.below(1.0), Interval.above(2.0))
    assert format_solution(rays) == "(-∞, 1) ∪ (2, ∞)"
    closed_rays = (
        Interval.below(-2.0, inclusive=True),
        Interval.above(0.0, inclusive=True),
    )
    assert format_solution(closed_rays) == "(-∞, -2] ∪ [0, ∞)"
    assert format_solution((Interval.closed(1.0, 2.5),)) == "[1, 2.5]"
    assert format_solution((Interval(Bound(1.0, True), Bound(4.0)),)) == "[1, 4)"


def test_points() -> None:
    assert format_solution((Interval.point(1.0),)) == "{1}"
    assert format_solution((Interval.point(-2.0), Interval.point(2.0))) == "{-2} ∪ {2}"


def test_inequality_style() -> None:
    assert format_inequality(EMPTY) == "no solution"
    assert format_inequality(REALS) == "all real numbers"
    rays = (Interval.below(1.0), Interval.above(2.0))
    assert format_inequality(rays) == "x < 1 or x > 2"
    assert format_inequality((Interval.closed(1.0, 2.0),), "t") == "1 ≤ t ≤ 2"
    assert format_inequality((Interval.point(3.0),)) == "x = 3"
    closed_rays = (
        Interval.below(1.0, inclusive=True),
        Interval.above(2.0, inclusive=True),
    )
    assert format_inequality(closed_rays) == "x ≤ 1 or x ≥ 2"
