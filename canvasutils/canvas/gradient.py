from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Tuple

import numpy as np
from numpy import ndarray as NDArray
from PIL import ImageColor

from . import geometry

RGBA = Tuple[int, int, int, int]


def parse_color(color: str) -> RGBA:
    """
    Resolve any color string Pillow understands to RGBA bytes.

    Covers hex forms, ``rgb()``/``hsl()``/``hsv()`` notation and named colors.

    Raises:
        ValueError: if Pillow cannot parse the string
    """
    return ImageColor.getcolor(color, "RGBA")


class CanvasGradient(ABC):
    """
    Gradient fill style with ordered color stops.

    Stops keep their registration order; they are sorted by offset (stably)
    only when the gradient is rendered. Colors are interpolated per channel
    and padded with the end colors outside [0, 1].
    """

    def __init__(self) -> None:
        self._stops: List[Tuple[float, RGBA]] = []

    def add_color_stop(self, offset: float, color: str) -> None:
        if not 0.0 <= offset <= 1.0:
            raise ValueError(f"Color stop offset must be in [0, 1], got {offset!r}")
        try:
            rgba = parse_color(color)
        except ValueError as err:
            raise ValueError(f"Invalid color stop color: {color!r}") from err
        self._stops.append((float(offset), rgba))

    @property
    def stops(self) -> List[Tuple[float, RGBA]]:
        """Registered stops, in registration order."""
        return list(self._stops)

    def sample(self, t: NDArray) -> NDArray:
        """
        Interpolated RGBA (float, 0-255) for gradient parameters t.

        A gradient without stops is transparent black everywhere.
        """
        t = np.asarray(t, dtype=float)
        if not self._stops:
            return np.zeros(t.shape + (4,))

        ordered = sorted(self._stops, key=lambda stop: stop[0])
        offsets = np.array([offset for offset, _ in ordered])
        channels = np.array([rgba for _, rgba in ordered], dtype=float)

        t = np.clip(t, 0.0, 1.0)
        return np.stack(
            [np.interp(t, offsets, channels[:, k]) for k in range(4)],
            axis=-1,
        )

    def render(self, width: int, height: int, inverse_transform: NDArray) -> NDArray:
        """
        Rasterize the gradient over a whole surface.

        Args:
            width, height: Surface size in pixels
            inverse_transform: Device-to-user matrix active when painting

        Returns:
            (height, width, 4) float array, transparent where undefined
        """
        user = geometry.apply(inverse_transform, geometry.pixel_centers(width, height))
        t, valid = self.parameter(user[:, 0], user[:, 1])
        colors = self.sample(np.where(valid, t, 0.0))
        colors[~valid] = 0.0
        return colors.reshape(height, width, 4)

    @abstractmethod
    def parameter(self, x: NDArray, y: NDArray) -> Tuple[NDArray, NDArray]:
        """Gradient parameter at user-space points, and where it is defined."""


class LinearGradient(CanvasGradient):
    def __init__(self, x0: float, y0: float, x1: float, y1: float) -> None:
        super().__init__()
        self.start = (x0, y0)
        self.end = (x1, y1)

    def parameter(self, x: NDArray, y: NDArray) -> Tuple[NDArray, NDArray]:
        (x0, y0), (x1, y1) = self.start, self.end
        dx, dy = x1 - x0, y1 - y0
        length_sq = dx * dx + dy * dy

        if length_sq == 0:
            # zero-length gradient line paints nothing
            return np.zeros_like(x), np.zeros(x.shape, dtype=bool)

        t = ((x - x0) * dx + (y - y0) * dy) / length_sq
        return t, np.ones(x.shape, dtype=bool)


class RadialGradient(CanvasGradient):
    """
    Two-circle radial gradient.

    For each point the largest omega is chosen such that the point lies on
    the circle interpolated between the start and end circles at omega,
    with a non-negative radius.
    """

    def __init__(self, x0: float, y0: float, r0: float, x1: float, y1: float, r1: float) -> None:
        if r0 < 0 or r1 < 0:
            raise ValueError(f"Radii must be non-negative, got {r0!r} and {r1!r}")
        super().__init__()
        self.start = (x0, y0, r0)
        self.end = (x1, y1, r1)

    def parameter(self, x: NDArray, y: NDArray) -> Tuple[NDArray, NDArray]:
        x0, y0, r0 = self.start
        x1, y1, r1 = self.end

        if self.start == self.end:
            return np.zeros_like(x), np.zeros(x.shape, dtype=bool)

        cdx, cdy, dr = x1 - x0, y1 - y0, r1 - r0
        pdx, pdy = x - x0, y - y0

        a = cdx * cdx + cdy * cdy - dr * dr
        b = pdx * cdx + pdy * cdy + r0 * dr
        c = pdx * pdx + pdy * pdy - r0 * r0

        with np.errstate(divide="ignore", invalid="ignore"):
            if abs(a) < 1e-12:
                omega = np.where(b != 0, c / (2 * b), np.nan)
                omega = np.where(r0 + omega * dr >= 0, omega, np.nan)
            else:
                disc = b * b - a * c
                root = np.sqrt(np.where(disc >= 0, disc, np.nan))
                w1 = (b + root) / a
                w2 = (b - root) / a
                w_hi = np.maximum(w1, w2)
                w_lo = np.minimum(w1, w2)
                omega = np.where(
                    r0 + w_hi * dr >= 0,
                    w_hi,
                    np.where(r0 + w_lo * dr >= 0, w_lo, np.nan),
                )

        valid = np.isfinite(omega)
        return np.where(valid, omega, 0.0), valid
