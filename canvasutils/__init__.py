"""
canvasutils - Drawing utilities for 2D raster canvases
======================================================

Color model conversions, gradient composition, declarative path replay and
pixel sampling on top of an offscreen canvas.

Key Features
------------
- RGB ↔ HSL, RGB ↔ HSB (HSV) and HEX ↔ RGB conversions, scalar and numpy
- Linear and radial gradients built from ordered color stops
- Path instructions (move, line, arc, arc-to, cubic curve, close) replayed
  on any 2D context
- Resolving arbitrary color strings to RGBA by rendering a single pixel
- A Pillow-backed canvas as the default rendering surface, replaceable by
  any object with the same methods

Quick Start
-----------
>>> from canvasutils import rgb_to_hsb, hsb_to_rgb, get_color_values
>>> hsb_to_rgb(*rgb_to_hsb(255, 0, 0))
(255, 0, 0)
>>> get_color_values("orange")
(255, 165, 0, 255)

Modules
-------
- conversions: Color space conversion functions
- gradients: Color stops and gradient composition
- paths: Path instructions and replay
- sampling: Pixel sampler
- common: Canvas creation and context helpers
- canvas: Pillow rendering backend
"""

from .conversions import (
    rgb_to_hsl, rgb_to_hsb, hsb_to_rgb, hsl_to_rgb,
    hex_to_rgb, rgb_to_hex,
    np_rgb_to_hsl, np_rgb_to_hsb, np_hsb_to_rgb, np_hsl_to_rgb,
    convert, np_convert,
)
from .common import (
    CanvasContextError,
    create_canvas, get_canvas_context, draw_to_canvas, rotate_context,
)
from .gradients import (
    ColorStop,
    add_color_stops, create_linear_gradient, create_radial_gradient,
    evenly_spaced_stops, hue_wheel_stops,
)
from .paths import (
    MoveTo, LineTo, Arc, ArcTo, BezierCurveTo, ClosePath,
    instruction_from_dict, draw_path, fill_path, stroke_path,
)
from .sampling import get_color_values
from .canvas import Canvas

__version__ = "1.0.0"

__all__ = [
    # Conversions
    "rgb_to_hsl", "rgb_to_hsb", "hsb_to_rgb", "hsl_to_rgb",
    "hex_to_rgb", "rgb_to_hex",
    "np_rgb_to_hsl", "np_rgb_to_hsb", "np_hsb_to_rgb", "np_hsl_to_rgb",
    "convert", "np_convert",

    # Surfaces
    "Canvas",
    "CanvasContextError",
    "create_canvas", "get_canvas_context", "draw_to_canvas", "rotate_context",

    # Gradients
    "ColorStop",
    "add_color_stops", "create_linear_gradient", "create_radial_gradient",
    "evenly_spaced_stops", "hue_wheel_stops",

    # Paths
    "MoveTo", "LineTo", "Arc", "ArcTo", "BezierCurveTo", "ClosePath",
    "instruction_from_dict", "draw_path", "fill_path", "stroke_path",

    # Sampling
    "get_color_values",

    # Version
    "__version__",
]
