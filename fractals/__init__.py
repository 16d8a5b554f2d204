"""Public API for escape-time fractal rendering."""

from .canvas import ImageCanvas, background_gradient
from .complexmath import Complex
from .escape import MAX_ITERATIONS, escape_counts, iterate
from .geometry import RenderWindow, compute_window
from .kinds import KIND_CONSTANTS, FractalKind, KindConstants
from .renderer import RenderConfig, render, render_buffer

__all__ = [
    "Complex",
    "FractalKind",
    "ImageCanvas",
    "KIND_CONSTANTS",
    "KindConstants",
    "MAX_ITERATIONS",
    "RenderConfig",
    "RenderWindow",
    "background_gradient",
    "compute_window",
    "escape_counts",
    "iterate",
    "render",
    "render_buffer",
]
