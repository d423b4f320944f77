"""Dense univariate polynomials with float coefficients."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _trim(coeffs: tuple[float, ...]) -> tuple[float, ...]:
    end = len(coeffs)
    while end > 0 and coeffs[end - 1] == 0.0:
        end -= 1
    return coeffs[:end]


@dataclass(frozen=True)
class Polynomial:
    """Coefficients stored lowest degree first, without trailing zeros."""

    coeffs: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "coeffs", _trim(tuple(float(c) for c in self.coeffs)))

    @staticmethod
    def constant(value: float) -> Polynomial:
        return Polynomial((value,))

    @staticmethod
    def identity() -> Polynomial:
        return Polynomial((0.0, 1.0))

    @property
    def degree(self) -> int:
        """Degree of the polynomial; the zero polynomial has degree 0."""
        return max(len(self.coeffs) - 1, 0)

    @property
    def is_constant(self) -> bool:
        return len(self.coeffs) <= 1

    def coefficient(self, power: int) -> float:
        return self.coeffs[power] if power < len(self.coeffs) else 0.0

    def is_finite(self) -> bool:
        return all(math.isfinite(c) for c in self.coeffs)

    def __neg__(self) -> Polynomial:
        return Polynomial(tuple(-c for c in self.coeffs))

    def __add__(self, other: Polynomial) -> Polynomial:
        size = max(len(self.coeffs), len(other.coeffs))
        return Polynomial(
            tuple(self.coefficient(k) + other.coefficient(k) for k in range(size))
        )

    def __sub__(self, other: Polynomial) -> Polynomial:
        return self + (-other)

    def __mul__(self, other: Polynomial) -> Polynomial:
        if not self.coeffs or not other.coeffs:
            return Polynomial()
        out = [0.0] * (len(self.coeffs) + len(other.coeffs) - 1)
        for i, x in enumerate(self.coeffs):
            for j, y in enumerate(other.coeffs):
                out[i + j] += x * y
        return Polynomial(tuple(out))

    def scale(self, factor: float) -> Polynomial:
        return Polynomial(tuple(c * factor for c in self.coeffs))

    def __pow__(self, exponent: int) -> Polynomial:
        if exponent < 0:
            raise ValueError("negative exponent")
        result = Polynomial.constant(1.0)
        for _ in range(exponent):
            result = result * self
        return result

    def __call__(self, x: float) -> float:
        total = 0.0
        for c in reversed(self.coeffs):
            total = total * x + c
        return total
