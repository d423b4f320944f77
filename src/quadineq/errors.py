"""Error types raised by the lexer, parser and normalizer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from quadineq.common.span import Span


@dataclass
class InequalityError(Exception):
    message: str
    span: Span
    source: str | None = None

    kind: ClassVar[str] = "Input"

    def __str__(self) -> str:
        if self.source is None:
            return f"{self.message} @ {self.span.start}:{self.span.end}"
        snippet = self.span.extract(self.source)
        return f"{self.message} @ {self.span.start}:{self.span.end}: {snippet!r}"

    def describe(self) -> str:
        """User-facing one-line description, stable across releases."""
        return f"{self.kind} error: {self.message}"


class InequalitySyntaxError(InequalityError):
    """Malformed token stream or grammar violation."""

    kind = "Syntax"

    def describe(self) -> str:
        return f"{self.kind} error at position {self.span.start}: {self.message}"


class DegreeError(InequalityError):
    """Polynomial degree above two, or an unsupported exponent."""

    kind = "Degree"


class DomainError(InequalityError):
    """Variable in a divisor, or folding produced a non-finite value."""

    kind = "Domain"
