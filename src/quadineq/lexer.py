"""Tokenizer for textual inequalities."""

from __future__ import annotations

import logging
import re
import threading

import ply.lex as lex  # type: ignore[import-untyped]

from quadineq.common.span import Span
from quadineq.config import Settings, get_settings
from quadineq.errors import InequalitySyntaxError

logger = logging.getLogger("quadineq.lexer")

tokens = (
    "NUMBER",
    "VARIABLE",
    "PLUS",
    "MINUS",
    "TIMES",
    "DIVIDE",
    "CARET",
    "LPAREN",
    "RPAREN",
    "COMPARATOR",
)

_NUMBER_RE = re.compile(r"\d+(\.\d*)?|\.\d+")

t_PLUS = r"\+"
t_MINUS = r"-|−"
t_DIVIDE = r"/|÷"
t_LPAREN = r"\("
t_RPAREN = r"\)"

t_ignore = " \t\r\n"


def t_CARET(t: lex.LexToken) -> lex.LexToken:
    r"\^|\*\*"
    t.end = t.lexpos + len(t.value)
    return t


def t_TIMES(t: lex.LexToken) -> lex.LexToken:
    r"\*|×|·"
    t.end = t.lexpos + len(t.value)
    return t


def t_NUMBER(t: lex.LexToken) -> lex.LexToken:
    r"[\d.]+"
    t.end = t.lexpos + len(t.value)
    if not _NUMBER_RE.fullmatch(t.value):
        span = Span(t.lexpos, t.end)
        raise InequalitySyntaxError(
            f"Malformed number literal {t.value!r}", span, t.lexer.source
        )
    t.value = float(t.value)
    return t


def t_VARIABLE(t: lex.LexToken) -> lex.LexToken:
    r"[A-Za-z]"
    t.end = t.lexpos + 1
    return t


def t_COMPARATOR(t: lex.LexToken) -> lex.LexToken:
    r"[<>!=]=?|≤|≥|≠"
    t.end = t.lexpos + len(t.value)
    kind = t.lexer.comparators.get(t.value)
    if kind is None:
        span = Span(t.lexpos, t.end)
        raise InequalitySyntaxError(
            f"Unknown comparison operator {t.value!r}", span, t.lexer.source
        )
    t.value = kind
    return t


def t_error(t: lex.LexToken) -> None:
    span = Span.at(t.lexpos)
    raise InequalitySyntaxError(
        f"Unexpected character {t.value[0]!r}", span, t.lexer.source
    )


_LEXER = None
_LOCK = threading.Lock()


def _base_lexer() -> lex.Lexer:
    global _LEXER
    with _LOCK:
        if _LEXER is None:
            _LEXER = lex.lex()
        return _LEXER


def tokenize(source: str, settings: Settings | None = None) -> list[lex.LexToken]:
    """Split ``source`` into tokens, raising on the first unrecognized input."""
    settings = settings or get_settings()
    lexer = _base_lexer().clone()
    lexer.source = source
    lexer.comparators = settings.comparators
    lexer.input(source)
    result = list(iter(lexer.token, None))
    logger.debug("Tokenized %d characters into %d tokens", len(source), len(result))
    return result
