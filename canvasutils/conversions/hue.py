import math
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HUE_SECTORS


def channel_range(r: float, g: float, b: float) -> Tuple[float, float]:
    """
    Largest and smallest of three normalized channels.

    A NaN channel makes both extremes NaN wherever it sits. The built-ins
    `max`/`min` only return NaN when it is the first argument.
    """
    if math.isnan(r) or math.isnan(g) or math.isnan(b):
        return math.nan, math.nan
    return max(r, g, b), min(r, g, b)


def rgb_hue(r: float, g: float, b: float, delta: float) -> float:
    """
    Hue of a chromatic color as a fraction of a full turn.

    The branch is picked by ranking the channels, first match wins:
    red, then green, then blue. Ties between a channel and the maximum
    therefore resolve toward red, and green over blue.

    Args:
        r, g, b: Normalized channels in [0, 1]
        delta: max(r, g, b) - min(r, g, b), must be non-zero

    Returns:
        Hue in [0, 1)
    """
    if r >= g and r >= b:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif g >= b:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4
    return hue / HUE_SECTORS


def np_rgb_hue(r: NDArray, g: NDArray, b: NDArray, delta: NDArray) -> NDArray:
    """
    Vectorized: hue from normalized channels, 0 where delta is 0 or NaN.

    Uses the same red -> green -> blue ranking as `rgb_hue`.
    """
    safe_delta = np.where(delta == 0, 1.0, delta)

    red = (g - b) / safe_delta + np.where(g < b, 6.0, 0.0)
    green = (b - r) / safe_delta + 2.0
    blue = (r - g) / safe_delta + 4.0

    hue = np.select(
        [(r >= g) & (r >= b), g >= b],
        [red, green],
        default=blue,
    )
    return np.where((delta == 0) | np.isnan(delta), 0.0, hue / HUE_SECTORS)
