from __future__ import annotations

from typing import Optional

import numpy as np
from numpy import ndarray as NDArray
from PIL import Image

from .context import Context2D


class Canvas:
    """
    Offscreen RGBA raster surface backed by a Pillow image.

    Starts fully transparent. Only the "2d" context kind exists; asking for
    any other kind returns None, as a browser canvas does.
    """

    def __init__(self, width: int, height: Optional[int] = None) -> None:
        height = width if height is None else height
        if width <= 0 or height <= 0:
            raise ValueError(f"width and height must be positive, got {width!r}x{height!r}")

        self.width = int(width)
        self.height = int(height)
        self.image = Image.new("RGBA", (self.width, self.height), (0, 0, 0, 0))
        self._context: Optional[Context2D] = None

    def get_context(self, kind: str = "2d") -> Optional[Context2D]:
        if kind != "2d":
            return None
        if self._context is None:
            self._context = Context2D(self)
        return self._context

    def to_image(self) -> Image.Image:
        return self.image.copy()

    def to_array(self) -> NDArray:
        """(height, width, 4) uint8 copy of the pixels."""
        return np.array(self.image)

    def save(self, fp, format: Optional[str] = None) -> None:
        self.image.save(fp, format=format)

    def __repr__(self) -> str:
        return f"Canvas({self.width}, {self.height})"
