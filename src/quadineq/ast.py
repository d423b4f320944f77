"""Expression trees and comparison kinds produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from quadineq.common.span import Span


class ComparisonKind(Enum):
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    EQ = "="
    NE = "!="

    def reversed(self) -> ComparisonKind:
        """Comparison obtained after multiplying both sides by a negative."""
        return _REVERSED[self]

    def negated(self) -> ComparisonKind:
        """Logical complement of the comparison."""
        return _NEGATED[self]

    def holds(self, lhs: float, rhs: float) -> bool:
        match self:
            case ComparisonKind.LT:
                return lhs < rhs
            case ComparisonKind.LE:
                return lhs <= rhs
            case ComparisonKind.GT:
                return lhs > rhs
            case ComparisonKind.GE:
                return lhs >= rhs
            case ComparisonKind.EQ:
                return lhs == rhs
            case ComparisonKind.NE:
                return lhs != rhs


_REVERSED = {
    ComparisonKind.LT: ComparisonKind.GT,
    ComparisonKind.LE: ComparisonKind.GE,
    ComparisonKind.GT: ComparisonKind.LT,
    ComparisonKind.GE: ComparisonKind.LE,
    ComparisonKind.EQ: ComparisonKind.EQ,
    ComparisonKind.NE: ComparisonKind.NE,
}

_NEGATED = {
    ComparisonKind.LT: ComparisonKind.GE,
    ComparisonKind.LE: ComparisonKind.GT,
    ComparisonKind.GT: ComparisonKind.LE,
    ComparisonKind.GE: ComparisonKind.LT,
    ComparisonKind.EQ: ComparisonKind.NE,
    ComparisonKind.NE: ComparisonKind.EQ,
}


class UnaryOp(Enum):
    NEG = "-"


class BinaryOp(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"


@dataclass(frozen=True)
class Expr:
    """Base class for expression nodes."""

    span: Span

    @property
    def depth(self) -> int:
        return 1


@dataclass(frozen=True)
class Constant(Expr):
    value: float


@dataclass(frozen=True)
class Variable(Expr):
    name: str


@dataclass(frozen=True)
class Unary(Expr):
    op: UnaryOp
    operand: Expr
    height: int = 1

    @property
    def depth(self) -> int:
        return self.height


@dataclass(frozen=True)
class Binary(Expr):
    op: BinaryOp
    left: Expr
    right: Expr
    height: int = 1

    @property
    def depth(self) -> int:
        return self.height


def unary(op: UnaryOp, operand: Expr, span: Span) -> Unary:
    return Unary(span, op, operand, operand.depth + 1)


def binary(op: BinaryOp, left: Expr, right: Expr) -> Binary:
    # Left-leaning chains are folded iteratively, so only the right operand
    # adds to the height.
    height = max(left.depth, right.depth + 1)
    return Binary(left.span.join(right.span), op, left, right, height)


def left_spine(expr: Binary) -> list[Binary]:
    """The binary nodes on the left edge of ``expr``, innermost first."""
    nodes = []
    node: Expr = expr
    while isinstance(node, Binary):
        nodes.append(node)
        node = node.left
    nodes.reverse()
    return nodes


def variables(expr: Expr) -> set[str]:
    """Return the variable names occurring in ``expr``."""

    match expr:
        case Variable(_, name):
            return {name}
        case Unary(_, _, operand):
            return variables(operand)
        case Binary():
            nodes = left_spine(expr)
            found = variables(nodes[0].left)
            for node in nodes:
                found |= variables(node.right)
            return found
        case _:
            return set()


def show(expr: Expr) -> str:
    """Render ``expr`` fully parenthesized, mainly for debugging and tests."""

    match expr:
        case Constant(_, value):
            return f"{value:g}"
        case Variable(_, name):
            return name
        case Unary(_, op, operand):
            return f"({op.value}{show(operand)})"
        case Binary():
            nodes = left_spine(expr)
            text = show(nodes[0].left)
            for node in nodes:
                text = f"({text} {node.op.value} {show(node.right)})"
            return text
        case _:
            raise TypeError(f"Unknown expression node {expr!r}")
