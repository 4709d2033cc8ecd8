import math
import re

from ..types.color_types import ParsedRGB, RGB_MAX

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_SIX_HEX_DIGITS = re.compile(r"[0-9a-fA-F]{6}")


def parse_hex_int(text: str) -> float:
    """
    Parse a base-16 integer the way ``parseInt(text, 16)`` does.

    Leading whitespace, a sign and a ``0x`` prefix are accepted, then the
    longest run of hex digits is read. Anything unparsable gives NaN.

    Args:
        text: String to parse

    Returns:
        The parsed integer, or ``math.nan``
    """
    s = text.lstrip()
    sign = 1
    if s.startswith(("-", "+")):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    if s[:2] in ("0x", "0X"):
        s = s[2:]

    match = _HEX_DIGITS.match(s)
    if match is None:
        return math.nan
    return sign * int(match.group(), 16)


def hex_to_rgb(hex_color: str, *, strict: bool = False) -> ParsedRGB:
    """
    Convert a color from HEX to RGB.

    Only the six digits after an optional ``#`` are read; any alpha digits
    are ignored. A malformed pair yields NaN for that channel.

    Args:
        hex_color: HEX color string, e.g. "#ff8800" or "ff8800"
        strict: Raise instead of returning NaN channels

    Returns:
        Tuple: (r, g, b) in [0, 255], NaN for unparsable channels

    Raises:
        ValueError: in strict mode, if the six digits are not all hex
    """
    digits = hex_color[1:7] if hex_color.startswith("#") else hex_color

    if strict and _SIX_HEX_DIGITS.match(digits) is None:
        raise ValueError(f"Invalid hex color: {hex_color!r}")

    return (
        parse_hex_int(digits[0:2]),  # red
        parse_hex_int(digits[2:4]),  # green
        parse_hex_int(digits[4:6]),  # blue
    )


def rgb_to_hex(red: int, green: int, blue: int, *, prefix: str = "#", upper: bool = False) -> str:
    """
    Convert a color from RGB to a six digit HEX string.

    Args:
        red, green, blue: Channel values [0-255]
        prefix: Prepended to the digits
        upper: Use upper-case digits

    Returns:
        HEX color string, e.g. "#ff8800"
    """
    channels = (red, green, blue)
    for channel in channels:
        if not 0 <= channel <= RGB_MAX:
            raise ValueError(f"RGB channels must be in [0, {RGB_MAX}], got {channels!r}")

    digits = "".join(f"{int(channel):02x}" for channel in channels)
    return prefix + (digits.upper() if upper else digits)
