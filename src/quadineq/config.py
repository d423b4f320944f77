"""Solver settings.

All configuration is sourced from ``QUADINEQ_*`` environment variables (and
optionally ``.env``).
"""

from __future__ import annotations

from functools import cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from quadineq.ast import ComparisonKind

DEFAULT_COMPARATORS: dict[str, ComparisonKind] = {
    "<": ComparisonKind.LT,
    "<=": ComparisonKind.LE,
    "≤": ComparisonKind.LE,
    ">": ComparisonKind.GT,
    ">=": ComparisonKind.GE,
    "≥": ComparisonKind.GE,
    "=": ComparisonKind.EQ,
    "==": ComparisonKind.EQ,
    "!=": ComparisonKind.NE,
    "≠": ComparisonKind.NE,
}


class Settings(BaseSettings):
    """Typed environment-backed settings for the solver pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="QUADINEQ_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Single tolerance for every "effectively zero / equal" decision.
    epsilon: float = Field(default=1e-9, gt=0.0, lt=1.0)
    max_nesting: int = Field(default=64, ge=1)
    max_depth: int = Field(default=256, ge=2)
    significant_digits: int = Field(default=6, ge=1, le=17)
    comparators: dict[str, ComparisonKind] = Field(
        default_factory=lambda: dict(DEFAULT_COMPARATORS)
    )
    log_level: str = "WARNING"

    @field_validator("comparators")
    @classmethod
    def _known_spellings(
        cls, value: dict[str, ComparisonKind]
    ) -> dict[str, ComparisonKind]:
        for spelling in value:
            if spelling not in DEFAULT_COMPARATORS:
                raise ValueError(f"unsupported comparator spelling {spelling!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


@cache
def get_settings() -> Settings:
    return Settings()
