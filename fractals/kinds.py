"""Fractal kinds and the window-fitting constants that belong to each."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FractalKind(Enum):
    """Selects the recurrence and the window geometry of a render."""

    JULIA = 0
    MANDELBROT = 1

    @classmethod
    def from_code(cls, code: int) -> FractalKind:
        """Map a numeric type code to a kind; unknown codes render a Julia set."""

        try:
            return cls(code)
        except ValueError:
            return cls.JULIA

    @property
    def label(self) -> str:
        return "Julia Set" if self is FractalKind.JULIA else "Mandelbrot Set"

    @property
    def constants(self) -> KindConstants:
        return KIND_CONSTANTS[self]


@dataclass(frozen=True)
class KindConstants:
    """Bounding box of the interesting region of a fractal.

    ``aspect`` is the width:height ratio of the pixel window, ``span_x`` and
    ``span_y`` the extent of that window in the complex plane and ``shift_x``
    and ``shift_y`` the offset subtracted from the scaled pixel position. A
    ``shift_y`` of ``None`` centers the window vertically on the real axis.
    """

    aspect: float
    span_x: float
    span_y: float
    shift_x: float
    shift_y: Optional[float]


KIND_CONSTANTS: dict[FractalKind, KindConstants] = {
    FractalKind.JULIA: KindConstants(aspect=1.5, span_x=3.0, span_y=2.0, shift_x=1.5, shift_y=1.0),
    FractalKind.MANDELBROT: KindConstants(aspect=1.0, span_x=2.2, span_y=2.2, shift_x=1.6, shift_y=None),
}
