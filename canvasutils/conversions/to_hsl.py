import math

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSLTuple, RGB_MAX
from .hue import channel_range, rgb_hue, np_rgb_hue


def rgb_to_hsl(red: float, green: float, blue: float) -> HSLTuple:
    """
    Convert a color from RGB to HSL.

    Inputs are not range-checked; values outside [0, 255] are extrapolated.

    Args:
        red: Red value [0-255]
        green: Green value [0-255]
        blue: Blue value [0-255]

    Returns:
        Tuple[float, float, float]: (hue [0,1), saturation [0,1], lightness [0,1])
    """
    r = red / RGB_MAX
    g = green / RGB_MAX
    b = blue / RGB_MAX

    max_c, min_c = channel_range(r, g, b)

    hue = 0.0
    saturation = 0.0
    lightness = (max_c + min_c) / 2

    if max_c != min_c:
        delta = max_c - min_c
        if lightness > 0.5:
            saturation = delta / (2 - max_c - min_c)
        else:
            saturation = delta / (max_c + min_c)
        # a NaN channel has no hue branch, so the hue stays 0
        if not math.isnan(delta):
            hue = rgb_hue(r, g, b, delta)

    return hue, saturation, lightness


def np_rgb_to_hsl(red: NDArray, green: NDArray, blue: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        red, green, blue: array-like or scalar, [0, 255]

    Returns:
        hsl: array of shape (..., 3): (hue [0,1), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(red, dtype=float) / RGB_MAX
    g = np.asarray(green, dtype=float) / RGB_MAX
    b = np.asarray(blue, dtype=float) / RGB_MAX

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    with np.errstate(divide="ignore", invalid="ignore"):
        saturation = np.where(
            lightness > 0.5,
            delta / (2 - max_c - min_c),
            delta / (max_c + min_c),
        )
    saturation = np.where(delta == 0, 0.0, saturation)

    hue = np_rgb_hue(r, g, b, delta)

    return np.stack([hue, saturation, lightness], axis=-1)
