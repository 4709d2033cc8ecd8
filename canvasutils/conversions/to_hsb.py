import math

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSBTuple, RGB_MAX
from .hue import channel_range, rgb_hue, np_rgb_hue


def rgb_to_hsb(red: float, green: float, blue: float) -> HSBTuple:
    """
    Convert a color from RGB to HSB (also known as HSV).

    Saturation is relative to the brightest channel, unlike HSL where it
    depends on lightness.

    Args:
        red: Red value [0-255]
        green: Green value [0-255]
        blue: Blue value [0-255]

    Returns:
        Tuple[float, float, float]: (hue [0,1), saturation [0,1], brightness [0,1])
    """
    r = red / RGB_MAX
    g = green / RGB_MAX
    b = blue / RGB_MAX

    max_c, min_c = channel_range(r, g, b)
    brightness = max_c
    delta = max_c - min_c
    saturation = 0.0 if max_c == 0 else delta / max_c

    hue = 0.0
    # a NaN channel has no hue branch, so the hue stays 0
    if max_c != min_c and not math.isnan(delta):
        hue = rgb_hue(r, g, b, delta)

    return hue, saturation, brightness


def np_rgb_to_hsb(red: NDArray, green: NDArray, blue: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSB.

    Args:
        red, green, blue: array-like or scalar, [0, 255]

    Returns:
        hsb: array of shape (..., 3): (hue [0,1), saturation [0,1], brightness [0,1])
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

    with np.errstate(divide="ignore", invalid="ignore"):
        saturation = np.where(max_c == 0, 0.0, delta / max_c)

    hue = np_rgb_hue(r, g, b, delta)

    return np.stack([hue, saturation, max_c], axis=-1)
