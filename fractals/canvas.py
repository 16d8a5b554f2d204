"""In-memory RGB canvas with the red/blue gradient background."""

from __future__ import annotations

import numpy as np
import PIL.Image

RED, GREEN, BLUE = 0, 1, 2


def background_gradient(width: int, height: int) -> np.ndarray:
    """Red grows down the rows and blue across the columns, green starts at zero.

    Both ramps use the same step, ``255 / max(width, height)``, so neither
    channel can exceed 255 on a portrait or landscape canvas.
    """

    delta = np.float32(255.0) / np.float32(max(width, height))
    rows = (np.arange(height, dtype=np.float32) * delta).astype(np.uint8)
    cols = (np.arange(width, dtype=np.float32) * delta).astype(np.uint8)

    pixels = np.zeros((height, width, 3), dtype=np.uint8)
    pixels[:, :, RED] = rows[:, np.newaxis]
    pixels[:, :, BLUE] = cols[np.newaxis, :]
    return pixels


class ImageCanvas:
    """A fixed-size grid of RGB pixels addressed as ``(x, y)``."""

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"canvas must be at least 1x1, got {width}x{height}")
        self._pixels = background_gradient(width, height)

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def pixels(self) -> np.ndarray:
        return self._pixels

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")

    def get(self, x: int, y: int) -> tuple[int, int, int]:
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return int(r), int(g), int(b)

    def set_green(self, x: int, y: int, value: int) -> None:
        self._check_bounds(x, y)
        if not 0 <= value <= 255:
            raise ValueError(f"channel value must be in 0..255, got {value}")
        self._pixels[y, x, GREEN] = value

    def write_green(self, x_offset: int, y_offset: int, values: np.ndarray) -> None:
        """Overwrite the green channel of a block whose top-left corner is at the offset."""

        rows, cols = values.shape
        if x_offset < 0 or y_offset < 0 or x_offset + cols > self.width or y_offset + rows > self.height:
            raise IndexError(
                f"{cols}x{rows} block at ({x_offset}, {y_offset}) outside {self.width}x{self.height} canvas"
            )
        self._pixels[y_offset:y_offset + rows, x_offset:x_offset + cols, GREEN] = values

    def to_image(self) -> PIL.Image.Image:
        return PIL.Image.fromarray(self._pixels)
