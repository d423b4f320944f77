"""Source span type shared across the pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    start: int
    end: int

    def extract(self, source: str) -> str:
        return source[self.start : self.end]

    def join(self, other: Span) -> Span:
        return Span(min(self.start, other.start), max(self.end, other.end))

    @staticmethod
    def at(position: int) -> Span:
        return Span(position, position + 1)
