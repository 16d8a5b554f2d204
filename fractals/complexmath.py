"""Single-precision complex values used by the escape-time recurrences."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Complex:
    """A complex number stored as a pair of 32-bit floats."""

    real: np.float32
    imag: np.float32

    def __post_init__(self) -> None:
        object.__setattr__(self, "real", np.float32(self.real))
        object.__setattr__(self, "imag", np.float32(self.imag))

    def __add__(self, other: Complex) -> Complex:
        return Complex(self.real + other.real, self.imag + other.imag)

    def __mul__(self, other: Complex) -> Complex:
        a, b = self.real, self.imag
        c, d = other.real, other.imag
        return Complex(a * c - b * d, a * d + b * c)

    def norm_sqr(self) -> np.float32:
        return self.real * self.real + self.imag * self.imag

    def magnitude(self) -> np.float32:
        return np.sqrt(self.norm_sqr())
