from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class ComplexNumber:
    """
    Immutable complex value with total arithmetic.

    Division by a zero-modulus denominator yields ZERO instead of raising or
    producing NaN/Inf, so nothing non-finite ever reaches a renderer.
    """

    re: float
    im: float = 0.0

    @classmethod
    def cis(cls, theta: float) -> ComplexNumber:
        """e^{iθ}"""
        return cls(math.cos(theta), math.sin(theta))

    def __add__(self, other: ComplexNumber) -> ComplexNumber:
        return ComplexNumber(self.re + other.re, self.im + other.im)

    def __sub__(self, other: ComplexNumber) -> ComplexNumber:
        return ComplexNumber(self.re - other.re, self.im - other.im)

    def __mul__(self, other: ComplexNumber) -> ComplexNumber:
        return ComplexNumber(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    def __truediv__(self, other: ComplexNumber) -> ComplexNumber:
        denom = other.re * other.re + other.im * other.im
        if denom == 0.0:
            return ZERO
        return ComplexNumber(
            (self.re * other.re + self.im * other.im) / denom,
            (self.im * other.re - self.re * other.im) / denom,
        )

    def scale(self, s: float) -> ComplexNumber:
        return ComplexNumber(self.re * s, self.im * s)

    def exp(self) -> ComplexNumber:
        ea = math.exp(self.re)
        return ComplexNumber(ea * math.cos(self.im), ea * math.sin(self.im))

    def conj(self) -> ComplexNumber:
        return ComplexNumber(self.re, -self.im)

    @property
    def abs2(self) -> float:
        return self.re * self.re + self.im * self.im

    def __abs__(self) -> float:
        return math.hypot(self.re, self.im)

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def is_finite(self) -> bool:
        return math.isfinite(self.re) and math.isfinite(self.im)


ZERO = ComplexNumber(0.0, 0.0)
ONE = ComplexNumber(1.0, 0.0)
I = ComplexNumber(0.0, 1.0)
