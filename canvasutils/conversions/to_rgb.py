import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBTuple, RGB_MAX, HUE_SECTORS


def _check_finite_hue(hue: float) -> None:
    if not math.isfinite(hue):
        raise ValueError(f"Hue must be a finite number, got {hue!r}")


## HSB to RGB conversions

def hsb_to_rgb(hue: float, saturation: float, brightness: float) -> RGBTuple:
    """
    Convert a color from HSB to RGB using the six-sector color wheel.

    Channels are floored after scaling to 255, never rounded, so an
    RGB -> HSB -> RGB round trip can land one below the original value.
    Any finite hue wraps onto the wheel (-0.1 is the same sector as 0.9).

    Note:
        Negative hues produce colors. Older data that relied on a negative
        hue falling outside every sector and giving black (0, 0, 0) will
        now render the wrapped hue instead.

    Args:
        hue: Hue value [0, 1)
        saturation: Saturation value [0, 1]
        brightness: Brightness value [0, 1]

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]

    Raises:
        ValueError: if hue is NaN or infinite, since it has no sector
    """
    _check_finite_hue(hue)

    scaled = hue * HUE_SECTORS
    i = math.floor(scaled)
    f = scaled - i
    p = brightness * (1 - saturation)
    q = brightness * (1 - f * saturation)
    t = brightness * (1 - (1 - f) * saturation)

    sectors = (
        (brightness, t, p),
        (q, brightness, p),
        (p, brightness, t),
        (p, q, brightness),
        (t, p, brightness),
        (brightness, p, q),
    )
    r, g, b = sectors[i % HUE_SECTORS]

    return math.floor(r * RGB_MAX), math.floor(g * RGB_MAX), math.floor(b * RGB_MAX)


def np_hsb_to_rgb(hue: NDArray, saturation: NDArray, brightness: NDArray) -> NDArray:
    """
    Vectorized: Convert HSB to RGB.

    Args:
        hue: array-like or scalar, [0, 1)
        saturation: array-like or scalar, [0, 1]
        brightness: array-like or scalar, [0, 1]

    Returns:
        rgb: integer array of shape (..., 3) in [0, 255]
    """
    h = np.asarray(hue, dtype=float)
    s = np.asarray(saturation, dtype=float)
    v = np.asarray(brightness, dtype=float)

    if not np.all(np.isfinite(h)):
        raise ValueError("Hue must contain only finite numbers")

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    scaled = h * HUE_SECTORS
    i = np.floor(scaled)
    f = scaled - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sector = np.mod(i, HUE_SECTORS).astype(int)

    r = np.choose(sector, [v, q, p, p, t, v])
    g = np.choose(sector, [t, v, v, q, p, p])
    b = np.choose(sector, [p, p, t, v, v, q])

    return np.floor(np.stack([r, g, b], axis=-1) * RGB_MAX).astype(int)


## HSL to RGB conversions

def _hue_to_channel(p: float, q: float, t: float) -> float:
    t = t % 1.0
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (4 - 6 * t)
    return p


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> RGBTuple:
    """
    Convert a color from HSL to RGB.

    Uses the same floor quantization as `hsb_to_rgb`.

    Args:
        hue: Hue value [0, 1)
        saturation: Saturation value [0, 1]
        lightness: Lightness value [0, 1]

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]
    """
    _check_finite_hue(hue)

    if saturation == 0:
        r = g = b = lightness
    else:
        if lightness < 0.5:
            q = lightness * (1 + saturation)
        else:
            q = lightness + saturation - lightness * saturation
        p = 2 * lightness - q
        r = _hue_to_channel(p, q, hue + 1 / 3)
        g = _hue_to_channel(p, q, hue)
        b = _hue_to_channel(p, q, hue - 1 / 3)

    return math.floor(r * RGB_MAX), math.floor(g * RGB_MAX), math.floor(b * RGB_MAX)


def _np_hue_to_channel(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.mod(t, 1.0)
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q, p + (q - p) * (4 - 6 * t)],
        default=p,
    )


def np_hsl_to_rgb(hue: NDArray, saturation: NDArray, lightness: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        hue: array-like or scalar, [0, 1)
        saturation: array-like or scalar, [0, 1]
        lightness: array-like or scalar, [0, 1]

    Returns:
        rgb: integer array of shape (..., 3) in [0, 255]
    """
    h = np.asarray(hue, dtype=float)
    s = np.asarray(saturation, dtype=float)
    l = np.asarray(lightness, dtype=float)

    if not np.all(np.isfinite(h)):
        raise ValueError("Hue must contain only finite numbers")

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q

    r = np.where(s == 0, l, _np_hue_to_channel(p, q, h + 1 / 3))
    g = np.where(s == 0, l, _np_hue_to_channel(p, q, h))
    b = np.where(s == 0, l, _np_hue_to_channel(p, q, h - 1 / 3))

    return np.floor(np.stack([r, g, b], axis=-1) * RGB_MAX).astype(int)
