"""Render orchestration: window mapping, escape counts and canvas composition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .canvas import ImageCanvas
from .escape import escape_counts
from .geometry import compute_window
from .kinds import FractalKind


@dataclass(frozen=True)
class RenderConfig:
    """Parameters that describe a single fractal render."""

    width: int = 400
    height: int = 400
    kind: FractalKind = FractalKind.MANDELBROT

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"image size must be at least 1x1, got {self.width}x{self.height}")


def render(canvas: ImageCanvas, kind: FractalKind, *, device: Optional[str] = None) -> None:
    """Write the escape counts of ``kind`` into the green channel of ``canvas``.

    Only the pixels inside the render window are touched; red, blue and every
    pixel outside the window keep their background values.
    """

    window = compute_window(canvas.width, canvas.height, kind)
    counts = escape_counts(window, kind, device=device)
    canvas.write_green(window.x_offset, window.y_offset, counts)


def render_buffer(config: RenderConfig, *, device: Optional[str] = None) -> np.ndarray:
    """Render ``config`` onto a fresh canvas and return its ``(height, width, 3)`` pixels."""

    canvas = ImageCanvas(config.width, config.height)
    render(canvas, config.kind, device=device)
    return canvas.pixels
