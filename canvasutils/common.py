"""Drawing surface helpers: create a canvas, get its context, draw into it."""
from __future__ import annotations

from typing import Optional

from .canvas import Canvas
from .types.surface_types import CanvasFactory, CanvasLike, DrawFunction, RenderingContext


class CanvasContextError(RuntimeError):
    """Raised when a drawing context cannot be obtained from a surface."""


def create_canvas(width: int, height: Optional[int] = None, *, canvas_factory: Optional[CanvasFactory] = None) -> CanvasLike:
    """
    Create an offscreen canvas.

    Args:
        width: canvas width
        height: canvas height (default: equal to `width`)
        canvas_factory: Callable ``(width, height) -> canvas``; defaults to
            the Pillow-backed `Canvas`

    Returns:
        A newly created canvas
    """
    factory = canvas_factory or Canvas
    return factory(width, width if height is None else height)


def get_canvas_context(canvas: Optional[CanvasLike]) -> RenderingContext:
    """
    Obtain the 2D context of a canvas.

    Raises:
        CanvasContextError: if there is no canvas or it has no 2D context
    """
    ctx = canvas.get_context("2d") if canvas is not None else None
    if ctx is None:
        raise CanvasContextError("Unable to get canvas context!")
    return ctx


def draw_to_canvas(
    width: int,
    height: Optional[int],
    draw: DrawFunction,
    canvas_factory: Optional[CanvasFactory] = None,
) -> CanvasLike:
    """
    Create a canvas and draw into it.

    Args:
        width: Canvas width
        height: Canvas height (None for a square canvas)
        draw: Callback receiving the canvas 2D context
        canvas_factory: See `create_canvas`

    Returns:
        The resulting canvas
    """
    canvas = create_canvas(width, height, canvas_factory=canvas_factory)
    draw(get_canvas_context(canvas))
    return canvas


def rotate_context(
    ctx: RenderingContext,
    angle: float,
    center_x: Optional[float] = None,
    center_y: Optional[float] = None,
) -> None:
    """Rotate a context around a point, by default the canvas center."""
    if center_x is None:
        center_x = ctx.canvas.width / 2
    if center_y is None:
        center_y = ctx.canvas.height / 2

    ctx.translate(center_x, center_y)
    ctx.rotate(angle)
    ctx.translate(-center_x, -center_y)
