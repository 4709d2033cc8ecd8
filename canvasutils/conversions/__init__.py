"""
canvasutils Color Conversions
=============================

Conversions between RGB, HSL, HSB (HSV) and HEX, each as a scalar function
and, where it makes sense, a vectorized numpy counterpart.

Value ranges
------------
- RGB: integers in [0, 255]
- HSL / HSB: hue as a fraction of a full turn in [0, 1), the other two
  channels in [0, 1]
- HEX: "#rrggbb" or "rrggbb"; extra (alpha) digits are ignored

Inputs are not range-checked. Out-of-range channels are extrapolated by
the same formulas instead of being rejected or clamped.

Conversion Functions
--------------------
RGB → HSL:      rgb_to_hsl(r, g, b), np_rgb_to_hsl(r, g, b)
RGB → HSB:      rgb_to_hsb(r, g, b), np_rgb_to_hsb(r, g, b)
HSB → RGB:      hsb_to_rgb(h, s, v), np_hsb_to_rgb(h, s, v)
HSL → RGB:      hsl_to_rgb(h, s, l), np_hsl_to_rgb(h, s, l)
HEX ↔ RGB:      hex_to_rgb(hex), rgb_to_hex(r, g, b)

High-Level API
--------------
    convert(color, from_space, to_space)
    np_convert(color, from_space, to_space)

Examples
--------
>>> from canvasutils.conversions import rgb_to_hsb, hsb_to_rgb, hex_to_rgb
>>> rgb_to_hsb(255, 0, 0)
(0.0, 1.0, 1.0)
>>> hsb_to_rgb(0, 1, 1)
(255, 0, 0)
>>> hex_to_rgb("#0000FF")
(0, 0, 255)
"""

from .to_hsl import rgb_to_hsl, np_rgb_to_hsl
from .to_hsb import rgb_to_hsb, np_rgb_to_hsb
from .to_rgb import hsb_to_rgb, hsl_to_rgb, np_hsb_to_rgb, np_hsl_to_rgb
from .hex import hex_to_rgb, rgb_to_hex, parse_hex_int
from .wrapper import convert, np_convert

__all__ = [
    # RGB → HSL
    'rgb_to_hsl',
    'np_rgb_to_hsl',

    # RGB → HSB
    'rgb_to_hsb',
    'np_rgb_to_hsb',

    # HSx → RGB
    'hsb_to_rgb',
    'hsl_to_rgb',
    'np_hsb_to_rgb',
    'np_hsl_to_rgb',

    # HEX
    'hex_to_rgb',
    'rgb_to_hex',
    'parse_hex_int',

    # High-level API
    'convert',
    'np_convert',
]
