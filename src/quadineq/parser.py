"""LALR parser turning a token sequence into an inequality."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Iterable, Iterator, cast

import ply.lex as lex  # type: ignore[import-untyped]
import ply.yacc as yacc  # type: ignore[import-untyped]

from quadineq.ast import (
    BinaryOp,
    ComparisonKind,
    Constant,
    Expr,
    UnaryOp,
    Variable,
    binary,
    unary,
)
from quadineq.common.span import Span
from quadineq.config import Settings, get_settings
from quadineq.errors import InequalitySyntaxError
from quadineq.lexer import tokens  # noqa: F401  (read by ply.yacc)

logger = logging.getLogger("quadineq.parser")

DEFAULT_VARIABLE = "x"

_SOURCE: str = ""
_MAX_DEPTH: int = 256


@dataclass(frozen=True)
class ParsedInequality:
    left: Expr
    comparison: ComparisonKind
    right: Expr
    variable: str = DEFAULT_VARIABLE


def _tok_span(tok: lex.LexToken) -> Span:
    end = getattr(tok, "end", tok.lexpos + len(str(tok.value)))
    return Span(tok.lexpos, end)


def _checked(expr: Expr) -> Expr:
    if expr.depth > _MAX_DEPTH:
        raise InequalitySyntaxError("Expression nested too deeply", expr.span, _SOURCE)
    return expr


def p_inequality(p: yacc.YaccProduction) -> None:
    "inequality : expr COMPARATOR expr"
    p[0] = (p[1], p[2], p[3])


def p_expr_add(p: yacc.YaccProduction) -> None:
    "expr : expr PLUS term"
    p[0] = _checked(binary(BinaryOp.ADD, p[1], p[3]))


def p_expr_sub(p: yacc.YaccProduction) -> None:
    "expr : expr MINUS term"
    p[0] = _checked(binary(BinaryOp.SUB, p[1], p[3]))


def p_expr_term(p: yacc.YaccProduction) -> None:
    "expr : term"
    p[0] = p[1]


def p_term_mul(p: yacc.YaccProduction) -> None:
    "term : term TIMES signed"
    p[0] = _checked(binary(BinaryOp.MUL, p[1], p[3]))


def p_term_div(p: yacc.YaccProduction) -> None:
    "term : term DIVIDE signed"
    p[0] = _checked(binary(BinaryOp.DIV, p[1], p[3]))


def p_term_implicit(p: yacc.YaccProduction) -> None:
    "term : term group_power"
    p[0] = _checked(binary(BinaryOp.MUL, p[1], p[2]))


def p_term_signed(p: yacc.YaccProduction) -> None:
    "term : signed"
    p[0] = p[1]


def p_signed_neg(p: yacc.YaccProduction) -> None:
    "signed : MINUS signed"
    span = _tok_span(cast(lex.LexToken, p.slice[1])).join(p[2].span)
    p[0] = _checked(unary(UnaryOp.NEG, p[2], span))


def p_signed_pos(p: yacc.YaccProduction) -> None:
    "signed : PLUS signed"
    p[0] = p[2]


def p_signed_power(p: yacc.YaccProduction) -> None:
    "signed : power"
    p[0] = p[1]


def p_power(p: yacc.YaccProduction) -> None:
    """power : atom CARET signed
    group_power : group CARET signed"""
    p[0] = _checked(binary(BinaryOp.POW, p[1], p[3]))


def p_power_atom(p: yacc.YaccProduction) -> None:
    """power : atom
    group_power : group"""
    p[0] = p[1]


def p_atom_number(p: yacc.YaccProduction) -> None:
    "atom : NUMBER"
    p[0] = Constant(_tok_span(cast(lex.LexToken, p.slice[1])), p[1])


def p_atom_group(p: yacc.YaccProduction) -> None:
    "atom : group"
    p[0] = p[1]


def p_group_variable(p: yacc.YaccProduction) -> None:
    "group : VARIABLE"
    p[0] = Variable(_tok_span(cast(lex.LexToken, p.slice[1])), p[1])


def p_group_paren(p: yacc.YaccProduction) -> None:
    "group : LPAREN expr RPAREN"
    p[0] = p[2]


_MISSING_OPERAND_BEFORE = {"COMPARATOR", "RPAREN", "TIMES", "DIVIDE", "CARET"}


def p_error(p: lex.LexToken | None) -> None:
    if p is None:
        span = Span(len(_SOURCE), len(_SOURCE))
        raise InequalitySyntaxError("Missing operand at end of input", span, _SOURCE)
    tok = cast(lex.LexToken, p)
    if tok.type in _MISSING_OPERAND_BEFORE:
        raise InequalitySyntaxError("Missing operand", _tok_span(tok), _SOURCE)
    raise InequalitySyntaxError("Unexpected token", _tok_span(tok), _SOURCE)


class _TokenStream:
    """Feeds an already tokenized input to ``ply.yacc``."""

    def __init__(self, toks: Iterable[lex.LexToken]) -> None:
        self._iter: Iterator[lex.LexToken] = iter(toks)

    def token(self) -> lex.LexToken | None:
        return next(self._iter, None)


def _check_parentheses(
    toks: list[lex.LexToken], source: str, settings: Settings
) -> None:
    opened: list[lex.LexToken] = []
    for tok in toks:
        if tok.type == "LPAREN":
            opened.append(tok)
            if len(opened) > settings.max_nesting:
                raise InequalitySyntaxError(
                    f"Nesting too deep (limit {settings.max_nesting})",
                    _tok_span(tok),
                    source,
                )
        elif tok.type == "RPAREN":
            if not opened:
                raise InequalitySyntaxError(
                    "Unbalanced parenthesis", _tok_span(tok), source
                )
            opened.pop()
    if opened:
        raise InequalitySyntaxError("Unbalanced parenthesis", _tok_span(opened[-1]), source)


def _check_structure(
    toks: list[lex.LexToken], source: str, settings: Settings
) -> str:
    """Validate grouping, comparators and the variable; return the variable."""

    if not toks:
        raise InequalitySyntaxError("Empty input", Span(0, 0), source)
    _check_parentheses(toks, source, settings)
    depth = 0
    comparators: list[lex.LexToken] = []
    variable: str | None = None
    for tok in toks:
        match tok.type:
            case "LPAREN":
                depth += 1
            case "RPAREN":
                depth -= 1
            case "COMPARATOR":
                if depth:
                    raise InequalitySyntaxError(
                        "Comparison operator inside parentheses",
                        _tok_span(tok),
                        source,
                    )
                comparators.append(tok)
            case "VARIABLE":
                if variable is None:
                    variable = tok.value
                elif tok.value != variable:
                    raise InequalitySyntaxError(
                        f"Expected variable {variable!r}, found {tok.value!r}",
                        _tok_span(tok),
                        source,
                    )
    if not comparators:
        span = Span(len(source), len(source))
        raise InequalitySyntaxError("Missing comparison operator", span, source)
    if len(comparators) > 1:
        raise InequalitySyntaxError(
            "Multiple comparison operators", _tok_span(comparators[1]), source
        )
    return variable or DEFAULT_VARIABLE


_PARSER = None
_LOCK = threading.Lock()


def _parser() -> yacc.LRParser:
    global _PARSER
    if _PARSER is None:
        _PARSER = yacc.yacc(start="inequality", debug=False, write_tables=False)
    return _PARSER


def parse(
    toks: list[lex.LexToken], source: str = "", settings: Settings | None = None
) -> ParsedInequality:
    """Parse ``toks`` (as produced by :func:`quadineq.lexer.tokenize`)."""
    global _SOURCE, _MAX_DEPTH
    settings = settings or get_settings()
    variable = _check_structure(toks, source, settings)
    with _LOCK:
        _SOURCE = source
        _MAX_DEPTH = settings.max_depth
        result = _parser().parse(lexer=_TokenStream(toks))
    left, comparison, right = result
    logger.debug("Parsed %s inequality in %r", comparison.value, variable)
    return ParsedInequality(left, comparison, right, variable)
