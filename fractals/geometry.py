"""Mapping between canvas pixels and the complex plane."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .complexmath import Complex
from .kinds import FractalKind


@dataclass(frozen=True)
class RenderWindow:
    """The centered sub-rectangle of a canvas that is actually iterated over."""

    window_width: int
    window_height: int
    x_offset: int
    y_offset: int
    scale_x: np.float32
    scale_y: np.float32
    x_shift: np.float32
    y_shift: np.float32

    def to_complex(self, px: int, py: int) -> Complex:
        """Complex coordinate of window pixel ``(px, py)``."""

        cx = np.float32(px) * self.scale_x - self.x_shift
        cy = np.float32(py) * self.scale_y - self.y_shift
        return Complex(cx, cy)


def _fit_window(width: int, height: int, aspect: float) -> tuple[int, int]:
    if width >= height:
        window_width = int(height * aspect)
        if window_width > width:
            return width, max(1, int(width / aspect))
        return max(1, window_width), height
    return width, max(1, int(width / aspect))


def compute_window(canvas_width: int, canvas_height: int, kind: FractalKind) -> RenderWindow:
    """Fit the bounding box of ``kind`` into the canvas without distortion."""

    if canvas_width < 1 or canvas_height < 1:
        raise ValueError(f"canvas must be at least 1x1, got {canvas_width}x{canvas_height}")

    constants = kind.constants
    window_width, window_height = _fit_window(canvas_width, canvas_height, constants.aspect)

    scale_x = np.float32(constants.span_x) / np.float32(window_width)
    scale_y = np.float32(constants.span_y) / np.float32(window_height)

    x_shift = np.float32(constants.shift_x)
    if constants.shift_y is None:
        y_shift = np.float32(window_height / 2.0) * scale_y
    else:
        y_shift = np.float32(constants.shift_y)

    return RenderWindow(
        window_width=window_width,
        window_height=window_height,
        x_offset=(canvas_width - window_width) // 2,
        y_offset=(canvas_height - window_height) // 2,
        scale_x=scale_x,
        scale_y=scale_y,
        x_shift=x_shift,
        y_shift=y_shift,
    )
