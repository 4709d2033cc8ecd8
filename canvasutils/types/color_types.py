from __future__ import annotations
from typing import Literal, Tuple, Union

Scalar = Union[int, float]
RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, int]
HSLTuple = Tuple[float, float, float]
HSBTuple = Tuple[float, float, float]
# hex_to_rgb may yield NaN for a malformed channel
ParsedRGB = Tuple[Scalar, Scalar, Scalar]

ColorSpace = Literal["rgb", "hsl", "hsb", "hsv", "hex"]
SPACE_ALIASES = {"hsv": "hsb"}

RGB_MAX = 255
HUE_SECTORS = 6


def normalize_space(space: str) -> str:
    """
    Lower-case a color space name and resolve aliases.

    Args:
        space: Color space name ("rgb", "hsl", "hsb", "hsv", "hex")

    Returns:
        Canonical color space name
    """
    space = space.lower()
    return SPACE_ALIASES.get(space, space)
