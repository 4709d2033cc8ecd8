"""
Gradient composition.

Builds gradients on a rendering context and registers color stops on them
in exactly the order given. Offsets are not checked or sorted here; the
gradient object decides what it accepts.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, NamedTuple, Sequence, Tuple, TypeVar, Union

import numpy as np

from .conversions import hsb_to_rgb, rgb_to_hex
from .types.surface_types import GradientLike, RenderingContext


class ColorStop(NamedTuple):
    offset: float
    color: str


StopInput = Union[ColorStop, Tuple[float, str], Mapping[str, Any]]
G = TypeVar("G", bound=GradientLike)


def as_color_stop(stop: StopInput) -> ColorStop:
    """Accept a ColorStop, an ``(offset, color)`` pair or an offset/color mapping."""
    if isinstance(stop, Mapping):
        return ColorStop(stop["offset"], stop["color"])
    offset, color = stop
    return ColorStop(offset, color)


def add_color_stops(gradient: G, color_stops: Iterable[StopInput]) -> G:
    """
    Register color stops on a gradient, in sequence order.

    Args:
        gradient: Any object with ``add_color_stop(offset, color)``
        color_stops: Stops to register

    Returns:
        The same gradient
    """
    for stop in color_stops:
        offset, color = as_color_stop(stop)
        gradient.add_color_stop(offset, color)
    return gradient


def create_linear_gradient(
    ctx: RenderingContext,
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    color_stops: Iterable[StopInput],
) -> GradientLike:
    """
    Create a linear gradient from a 2D context.

    Args:
        ctx: the canvas context
        x0, y0: start position
        x1, y1: end position
        color_stops: color stops

    Returns:
        The context's gradient object, stops registered
    """
    return add_color_stops(ctx.create_linear_gradient(x0, y0, x1, y1), color_stops)


def create_radial_gradient(
    ctx: RenderingContext,
    x: float,
    y: float,
    r0: float,
    r1: float,
    color_stops: Iterable[StopInput],
) -> GradientLike:
    """
    Create a concentric radial gradient from a 2D context.

    Args:
        ctx: the canvas context
        x, y: center position
        r0: start radius
        r1: end radius
        color_stops: color stops
    """
    return add_color_stops(ctx.create_radial_gradient(x, y, r0, x, y, r1), color_stops)


def evenly_spaced_stops(colors: Sequence[str]) -> List[ColorStop]:
    """Spread colors over [0, 1]; a single color sits at offset 0."""
    if len(colors) == 1:
        return [ColorStop(0.0, colors[0])]
    offsets = np.linspace(0.0, 1.0, len(colors))
    return [ColorStop(float(offset), color) for offset, color in zip(offsets, colors)]


def hue_wheel_stops(steps: int, saturation: float = 1.0, brightness: float = 1.0) -> List[ColorStop]:
    """
    Stops sweeping once around the hue wheel at fixed saturation and brightness.

    The last stop has hue 1.0, which wraps back to the first color.
    """
    if steps < 2:
        raise ValueError(f"steps must be at least 2, got {steps!r}")
    hues = np.linspace(0.0, 1.0, steps)
    colors = [rgb_to_hex(*hsb_to_rgb(float(h), saturation, brightness)) for h in hues]
    return evenly_spaced_stops(colors)
