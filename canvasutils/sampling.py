from typing import Optional

from .common import draw_to_canvas, get_canvas_context
from .types.color_types import RGBATuple
from .types.surface_types import CanvasFactory, RenderingContext


def get_color_values(color: str, canvas_factory: Optional[CanvasFactory] = None) -> RGBATuple:
    """
    Retrieve color data in RGBA order from a color string.

    The string is handed to the rendering surface as a fill style and a
    single pixel is read back, so anything the surface understands works,
    named colors included. A string the surface rejects leaves the default
    black fill in place.

    Args:
        color: A color string the rendering surface understands
        canvas_factory: Surface factory; defaults to the Pillow backend

    Returns:
        (r, g, b, a) as integers in [0, 255]

    Raises:
        CanvasContextError: if the surface has no 2D context
    """
    def fill_pixel(ctx: RenderingContext) -> None:
        ctx.fill_style = color
        ctx.begin_path()
        ctx.rect(0, 0, 1, 1)
        ctx.fill()

    canvas = draw_to_canvas(1, 1, fill_pixel, canvas_factory=canvas_factory)
    data = get_canvas_context(canvas).get_image_data(0, 0, 1, 1).data

    return int(data[0]), int(data[1]), int(data[2]), int(data[3])
