"""Fold expression trees into the canonical form ``a·x² + b·x + c cmp 0``."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from quadineq.ast import (
    Binary,
    BinaryOp,
    ComparisonKind,
    Constant,
    Expr,
    Unary,
    UnaryOp,
    Variable,
    left_spine,
    variables,
)
from quadineq.common.span import Span
from quadineq.config import Settings, get_settings
from quadineq.errors import DegreeError, DomainError
from quadineq.polynomial import Polynomial

logger = logging.getLogger("quadineq.normalize")

MAX_DEGREE = 2


@dataclass(frozen=True)
class CanonicalQuadratic:
    a: float
    b: float
    c: float
    comparison: ComparisonKind
    variable: str = "x"

    def evaluate(self, x: float) -> float:
        return (self.a * x + self.b) * x + self.c


class _Folder:
    def __init__(self, source: str | None, settings: Settings) -> None:
        self.source = source
        self.settings = settings

    def _finite(self, poly: Polynomial, span: Span) -> Polynomial:
        if not poly.is_finite():
            raise DomainError("Arithmetic produced a non-finite value", span, self.source)
        return poly

    def _bounded(self, poly: Polynomial, span: Span) -> Polynomial:
        if poly.degree > MAX_DEGREE:
            raise DegreeError(
                f"Polynomial degree {poly.degree} exceeds {MAX_DEGREE}",
                span,
                self.source,
            )
        return self._finite(poly, span)

    def fold(self, expr: Expr) -> Polynomial:
        match expr:
            case Constant(span, value):
                return self._finite(Polynomial.constant(value), span)
            case Variable():
                return Polynomial.identity()
            case Unary(_, UnaryOp.NEG, operand):
                return -self.fold(operand)
            case Binary():
                nodes = left_spine(expr)
                acc = self.fold(nodes[0].left)
                for node in nodes:
                    acc = self._apply(node, acc)
                return acc
            case _:
                raise TypeError(f"Unknown expression node {expr!r}")

    def _apply(self, node: Binary, left: Polynomial) -> Polynomial:
        match node:
            case Binary(span, BinaryOp.ADD, _, right):
                return self._finite(left + self.fold(right), span)
            case Binary(span, BinaryOp.SUB, _, right):
                return self._finite(left - self.fold(right), span)
            case Binary(span, BinaryOp.MUL, _, right):
                return self._bounded(left * self.fold(right), span)
            case Binary(span, BinaryOp.DIV, _, right):
                return self._divide(left, right, span)
            case Binary(span, BinaryOp.POW, _, right):
                return self._power(left, right, span)
            case _:
                raise TypeError(f"Unknown operator {node.op!r}")

    def _divide(self, left: Polynomial, right: Expr, span: Span) -> Polynomial:
        if variables(right):
            raise DomainError("Variable in divisor", right.span, self.source)
        divisor = self.fold(right).coefficient(0)
        if divisor == 0.0:
            raise DomainError("Division by zero", right.span, self.source)
        return self._finite(left.scale(1.0 / divisor), span)

    def _power(self, base: Polynomial, right: Expr, span: Span) -> Polynomial:
        if variables(right):
            raise DegreeError("Exponent must be a constant", right.span, self.source)
        exponent = self.fold(right).coefficient(0)
        if base.is_constant:
            try:
                value = math.pow(base.coefficient(0), exponent)
            except (ValueError, OverflowError) as exc:
                raise DomainError(
                    "Power is undefined over the reals", span, self.source
                ) from exc
            return self._finite(Polynomial.constant(value), span)
        whole = round(exponent)
        if whole < 0 or abs(exponent - whole) > self.settings.epsilon:
            raise DegreeError(
                "Exponent must be a non-negative integer", right.span, self.source
            )
        if base.degree * whole > MAX_DEGREE:
            raise DegreeError(
                f"Polynomial degree {base.degree * whole} exceeds {MAX_DEGREE}",
                span,
                self.source,
            )
        return self._bounded(base**whole, span)


def to_polynomial(
    expr: Expr, source: str | None = None, settings: Settings | None = None
) -> Polynomial:
    """Fold a single expression into a polynomial of degree at most two."""
    return _Folder(source, settings or get_settings()).fold(expr)


def normalize(
    left: Expr,
    right: Expr,
    comparison: ComparisonKind,
    variable: str = "x",
    source: str | None = None,
    settings: Settings | None = None,
) -> CanonicalQuadratic:
    """Move every term to the left-hand side and collect like powers."""
    folder = _Folder(source, settings or get_settings())
    poly = folder.fold(left) - folder.fold(right)
    poly = folder._finite(poly, left.span.join(right.span))
    result = CanonicalQuadratic(
        poly.coefficient(2),
        poly.coefficient(1),
        poly.coefficient(0),
        comparison,
        variable,
    )
    logger.debug(
        "Canonical form %r*%s^2 + %r*%s + %r %s 0",
        result.a,
        variable,
        result.b,
        variable,
        result.c,
        comparison.value,
    )
    return result
