"""
Pillow rendering backend.

The default drawing collaborator: an offscreen RGBA surface and a 2D
context that follows the HTML canvas API closely enough for gradients,
path replay and pixel sampling.
"""

from .surface import Canvas
from .context import Context2D, DrawingState, ImageData, Subpath
from .gradient import CanvasGradient, LinearGradient, RadialGradient, parse_color

__all__ = [
    "Canvas",
    "Context2D",
    "DrawingState",
    "ImageData",
    "Subpath",
    "CanvasGradient",
    "LinearGradient",
    "RadialGradient",
    "parse_color",
]
