import pytest

from quadineq.ast import ComparisonKind
from quadineq.errors import DegreeError, DomainError
from quadineq.lexer import tokenize
from quadineq.normalize import CanonicalQuadratic, normalize
from quadineq.parser import parse


def canon(source: str) -> CanonicalQuadratic:
    parsed = parse(tokenize(source), source)
    return normalize(
        parsed.left, parsed.right, parsed.comparison, parsed.variable, source
    )


def coeffs(source: str) -> tuple[float, float, float]:
    result = canon(source)
    return (result.a, result.b, result.c)


def test_collects_like_powers() -> None:
    result = canon("x^2-3x+2>0")
    assert (result.a, result.b, result.c) == (1.0, -3.0, 2.0)
    assert result.comparison is ComparisonKind.GT


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("(x+1)^2 >= x", (1.0, 1.0, 1.0)),
        ("x/2 < 1", (0.0, 0.5, -1.0)),
        ("2x^2 = x^2 + 4", (1.0, 0.0, -4.0)),
        ("2^3 x > 0", (0.0, 8.0, 0.0)),
        ("4^0.5 = x", (0.0, -1.0, 2.0)),
        ("x^2 - x^2 + x > 0", (0.0, 1.0, 0.0)),
        ("(x-1)(x+1) <= 0", (1.0, 0.0, -1.0)),
        ("x^0 > 0", (0.0, 0.0, 1.0)),
        ("-(x - 2) * 3 < x^2", (-1.0, -3.0, 6.0)),
    ],
)
def test_canonical_coefficients(
    source: str, expected: tuple[float, float, float]
) -> None:
    assert coeffs(source) == expected


def test_variable_is_recorded() -> None:
    assert canon("t^2 > 1").variable == "t"


def test_evaluate() -> None:
    assert canon("x^2-3x+2>0").evaluate(3.0) == 2.0


@pytest.mark.parametrize(
    ("source", "message"),
    [
        ("x^3-1>0", "degree 3 exceeds 2"),
        ("x*x*x > 0", "degree 3 exceeds 2"),
        ("(x^2)^2 > 0", "degree 4 exceeds 2"),
        ("x^0.5 > 0", "non-negative integer"),
        ("x^-1 > 0", "non-negative integer"),
        ("2^x > 0", "Exponent must be a constant"),
    ],
)
def test_degree_errors(source: str, message: str) -> None:
    with pytest.raises(DegreeError, match=message):
        canon(source)


@pytest.mark.parametrize(
    ("source", "message"),
    [
        ("1/x > 0", "Variable in divisor"),
        ("x/(x-x+1) > 0", "Variable in divisor"),
        ("x/(1-1) > 0", "Division by zero"),
        ("(-8)^0.5 > x", "undefined over the reals"),
        ("0^-1 > x", "undefined over the reals"),
        ("10^400 > x", "undefined over the reals"),
        ("10^300 * 10^300 > x", "non-finite"),
    ],
)
def test_domain_errors(source: str, message: str) -> None:
    with pytest.raises(DomainError, match=message):
        canon(source)


def test_error_span_points_at_divisor() -> None:
    source = "x^2 / (x + 1) > 0"
    with pytest.raises(DomainError) as info:
        canon(source)
    assert info.value.span.extract(source) == "x + 1"


def test_long_flat_chains_fold() -> None:
    assert coeffs("+".join(["x"] * 2000) + " > 0") == (0.0, 2000.0, 0.0)
    assert coeffs("x" + "*1" * 1500 + " > 2") == (0.0, 1.0, -2.0)
    assert coeffs("x" + "/2" * 3 + " = 1") == (0.0, 0.125, -1.0)
