import numpy as np
from typing import Callable, Dict, Tuple, Union

from ..types.color_types import ColorSpace, normalize_space
from .hex import hex_to_rgb, rgb_to_hex
from .to_hsb import rgb_to_hsb, np_rgb_to_hsb
from .to_hsl import rgb_to_hsl, np_rgb_to_hsl
from .to_rgb import hsb_to_rgb, hsl_to_rgb, np_hsb_to_rgb, np_hsl_to_rgb

ColorInput = Union[str, Tuple[float, float, float]]

SPACES = ("rgb", "hsl", "hsb", "hex")
NUMPY_SPACES = ("rgb", "hsl", "hsb")

TO_RGB: Dict[str, Callable] = {
    "hsl": hsl_to_rgb,
    "hsb": hsb_to_rgb,
}

FROM_RGB: Dict[str, Callable] = {
    "hsl": rgb_to_hsl,
    "hsb": rgb_to_hsb,
    "hex": rgb_to_hex,
}

NP_TO_RGB: Dict[str, Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    "hsl": np_hsl_to_rgb,
    "hsb": np_hsb_to_rgb,
}

NP_FROM_RGB: Dict[str, Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    "hsl": np_rgb_to_hsl,
    "hsb": np_rgb_to_hsb,
}


def _check_space(space: str, allowed: Tuple[str, ...]) -> str:
    space = normalize_space(space)
    if space not in allowed:
        raise ValueError(f"Unknown space: {space}")
    return space


def convert(color: ColorInput, from_space: ColorSpace, to_space: ColorSpace) -> ColorInput:
    """
    Convert a single color between rgb, hsl, hsb (alias hsv) and hex.

    Every conversion goes through integer RGB, so hsl -> hsb is quantized
    to 8 bits per channel on the way.

    Args:
        color: Channel tuple, or a HEX string when from_space is "hex"
        from_space: Source color space
        to_space: Target color space

    Returns:
        Channel tuple, or a HEX string when to_space is "hex"
    """
    fs = _check_space(from_space, SPACES)
    ts = _check_space(to_space, SPACES)

    if fs == ts:
        return color  # No conversion needed

    if fs == "hex":
        if not isinstance(color, str):
            raise TypeError(f"hex input must be a string, got {type(color).__name__}")
        rgb = hex_to_rgb(color)
    elif fs == "rgb":
        rgb = tuple(color)
    else:
        rgb = TO_RGB[fs](*color)

    if ts == "rgb":
        return rgb
    return FROM_RGB[ts](*rgb)


def np_convert(color: np.ndarray, from_space: ColorSpace, to_space: ColorSpace) -> np.ndarray:
    """
    Vectorized: convert an array of shape (..., 3) between rgb, hsl and hsb.

    Args:
        color: array-like, last dimension holds the three channels
        from_space: Source color space
        to_space: Target color space

    Returns:
        Array of shape (..., 3); integer for rgb, float otherwise
    """
    fs = _check_space(from_space, NUMPY_SPACES)
    ts = _check_space(to_space, NUMPY_SPACES)

    color = np.asarray(color)
    if color.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {color.shape}")

    if fs == ts:
        return color

    if fs == "rgb":
        rgb = color
    else:
        rgb = NP_TO_RGB[fs](color[..., 0], color[..., 1], color[..., 2])

    if ts == "rgb":
        return rgb
    return NP_FROM_RGB[ts](rgb[..., 0], rgb[..., 1], rgb[..., 2])
