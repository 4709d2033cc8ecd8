"""
Structural interfaces for the rendering collaborator.

The conversion core never touches pixels itself. Everything that draws is
written against these protocols, so any object with the right methods
(the Pillow backend in ``canvasutils.canvas`` or a test stub) can be
injected.
"""
from __future__ import annotations
from typing import Any, Callable, Optional, Protocol, Sequence, Union


class GradientLike(Protocol):
    def add_color_stop(self, offset: float, color: str) -> None: ...


FillStrokeStyle = Union[str, GradientLike]


class ImageDataLike(Protocol):
    width: int
    height: int
    data: Sequence[int]


class RenderingContext(Protocol):
    fill_style: FillStrokeStyle
    stroke_style: FillStrokeStyle

    @property
    def canvas(self) -> "CanvasLike": ...

    def save(self) -> None: ...
    def restore(self) -> None: ...

    def translate(self, x: float, y: float) -> None: ...
    def rotate(self, angle: float) -> None: ...

    def begin_path(self) -> None: ...
    def close_path(self) -> None: ...
    def move_to(self, x: float, y: float) -> None: ...
    def line_to(self, x: float, y: float) -> None: ...
    def rect(self, x: float, y: float, width: float, height: float) -> None: ...
    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None: ...
    def arc_to(self, x1: float, y1: float, x2: float, y2: float, radius: float) -> None: ...
    def bezier_curve_to(
        self, cp1x: float, cp1y: float, cp2x: float, cp2y: float, x: float, y: float
    ) -> None: ...

    def fill(self) -> None: ...
    def stroke(self) -> None: ...

    def get_image_data(self, sx: int, sy: int, sw: int, sh: int) -> ImageDataLike: ...

    def create_linear_gradient(self, x0: float, y0: float, x1: float, y1: float) -> GradientLike: ...
    def create_radial_gradient(
        self, x0: float, y0: float, r0: float, x1: float, y1: float, r1: float
    ) -> GradientLike: ...


class CanvasLike(Protocol):
    width: int
    height: int

    def get_context(self, kind: str = "2d") -> Optional[RenderingContext]: ...


CanvasFactory = Callable[[int, int], CanvasLike]
DrawFunction = Callable[[RenderingContext], Any]
