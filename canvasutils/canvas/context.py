from __future__ import annotations

import math
import warnings
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, List, Optional, Tuple, Union

import numpy as np
from numpy import ndarray as NDArray
from PIL import Image, ImageDraw

from . import geometry
from .geometry import FillRule
from .gradient import CanvasGradient, LinearGradient, RadialGradient, parse_color

if TYPE_CHECKING:
    from .surface import Canvas

FillStrokeStyle = Union[str, CanvasGradient]

DEFAULT_STYLE = "#000000"


@dataclass
class DrawingState:
    fill_style: FillStrokeStyle = DEFAULT_STYLE
    stroke_style: FillStrokeStyle = DEFAULT_STYLE
    line_width: float = 1.0
    transform: NDArray = field(default_factory=geometry.identity)

    def copy(self) -> DrawingState:
        return replace(self, transform=self.transform.copy())


@dataclass
class Subpath:
    """Flattened subpath; points are in device space."""
    points: List[Tuple[float, float]]
    closed: bool = False


@dataclass(frozen=True)
class ImageData:
    """Row-major RGBA bytes for a rectangle of the surface."""
    width: int
    height: int
    data: bytes

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        i = (y * self.width + x) * 4
        return self.data[i], self.data[i + 1], self.data[i + 2], self.data[i + 3]


class Context2D:
    """
    Immediate-mode 2D drawing context over a Pillow RGBA image.

    Mirrors the HTML canvas 2D API with snake_case names. Paths are
    flattened to polylines in device space as they are built, using the
    transform active at that moment. Fills sample pixel centers (no
    anti-aliasing); strokes are drawn with Pillow's ImageDraw.
    """

    def __init__(self, canvas: Canvas) -> None:
        self._canvas = canvas
        self._state = DrawingState()
        self._stack: List[DrawingState] = []
        self._subpaths: List[Subpath] = []

    @property
    def canvas(self) -> Canvas:
        return self._canvas

    # ------------------ STATE ------------------
    @property
    def fill_style(self) -> FillStrokeStyle:
        return self._state.fill_style

    @fill_style.setter
    def fill_style(self, value: FillStrokeStyle) -> None:
        if self._accepts_style(value, "fill"):
            self._state.fill_style = value

    @property
    def stroke_style(self) -> FillStrokeStyle:
        return self._state.stroke_style

    @stroke_style.setter
    def stroke_style(self, value: FillStrokeStyle) -> None:
        if self._accepts_style(value, "stroke"):
            self._state.stroke_style = value

    @property
    def line_width(self) -> float:
        return self._state.line_width

    @line_width.setter
    def line_width(self, value: float) -> None:
        # non-positive or non-finite widths are ignored, as in browsers
        if math.isfinite(value) and value > 0:
            self._state.line_width = float(value)

    @staticmethod
    def _accepts_style(value: FillStrokeStyle, kind: str) -> bool:
        if isinstance(value, CanvasGradient):
            return True
        if not isinstance(value, str):
            raise TypeError(f"{kind} style must be a color string or a gradient, got {type(value).__name__}")
        try:
            parse_color(value)
        except ValueError:
            warnings.warn(f"Ignoring unparsable {kind} style {value!r}", stacklevel=3)
            return False
        return True

    def save(self) -> None:
        self._stack.append(self._state.copy())

    def restore(self) -> None:
        if self._stack:
            self._state = self._stack.pop()

    # ------------------ TRANSFORMS ------------------
    @property
    def transform(self) -> NDArray:
        return self._state.transform.copy()

    def _multiply(self, matrix: NDArray) -> None:
        self._state.transform = self._state.transform @ matrix

    def translate(self, x: float, y: float) -> None:
        self._multiply(geometry.translation(x, y))

    def rotate(self, angle: float) -> None:
        self._multiply(geometry.rotation(angle))

    def scale(self, x: float, y: float) -> None:
        self._multiply(geometry.scaling(x, y))

    def set_transform(self, a: float, b: float, c: float, d: float, e: float, f: float) -> None:
        self._state.transform = geometry.from_coefficients(a, b, c, d, e, f)

    def reset_transform(self) -> None:
        self._state.transform = geometry.identity()

    def _to_device(self, points: NDArray) -> List[Tuple[float, float]]:
        return [(float(x), float(y)) for x, y in geometry.apply(self._state.transform, points)]

    def _to_user(self, point: Tuple[float, float]) -> NDArray:
        return geometry.apply(np.linalg.inv(self._state.transform), [point])[0]

    # ------------------ PATHS ------------------
    def _current(self) -> Optional[Subpath]:
        return self._subpaths[-1] if self._subpaths else None

    def _start_subpath(self, device_point: Tuple[float, float]) -> None:
        self._subpaths.append(Subpath([device_point]))

    def _extend(self, device_points: List[Tuple[float, float]]) -> None:
        current = self._current()
        if current is None:
            self._start_subpath(device_points[0])
            current = self._current()
        current.points.extend(device_points)

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._start_subpath(self._to_device([(x, y)])[0])

    def line_to(self, x: float, y: float) -> None:
        point = self._to_device([(x, y)])[0]
        if self._current() is None:
            self._start_subpath(point)
        else:
            self._extend([point])

    def close_path(self) -> None:
        current = self._current()
        if current is None:
            return
        current.closed = True
        self._start_subpath(current.points[0])

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        corners = self._to_device([(x, y), (x + width, y), (x + width, y + height), (x, y + height)])
        self._subpaths.append(Subpath(corners, closed=True))
        self._start_subpath(corners[0])

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None:
        if radius < 0:
            raise ValueError(f"Arc radius must be non-negative, got {radius!r}")
        sweep = geometry.arc_sweep(start_angle, end_angle, counterclockwise)
        points = self._to_device(geometry.arc_points(x, y, radius, start_angle, sweep))
        # an existing subpath is joined to the arc start with a straight line
        self._extend(points)

    def arc_to(self, x1: float, y1: float, x2: float, y2: float, radius: float) -> None:
        if radius < 0:
            raise ValueError(f"Arc radius must be non-negative, got {radius!r}")
        current = self._current()
        if current is None:
            self.move_to(x1, y1)
            current = self._current()

        p0 = self._to_user(current.points[-1])
        corner = geometry.arc_to_geometry(p0, (x1, y1), (x2, y2), radius)
        if corner is None:
            self.line_to(x1, y1)
            return

        cx, cy, start, end, counterclockwise = corner
        self.arc(cx, cy, radius, start, end, counterclockwise)

    def bezier_curve_to(self, cp1x: float, cp1y: float, cp2x: float, cp2y: float, x: float, y: float) -> None:
        current = self._current()
        if current is None:
            self.move_to(cp1x, cp1y)
            current = self._current()

        p0 = self._to_user(current.points[-1])
        points = geometry.cubic_points(p0, (cp1x, cp1y), (cp2x, cp2y), (x, y))
        self._extend(self._to_device(points))

    # ------------------ PAINTING ------------------
    def _size(self) -> Tuple[int, int]:
        return self._canvas.width, self._canvas.height

    def _paint(self, mask: NDArray, style: FillStrokeStyle) -> None:
        width, height = self._size()
        if isinstance(style, CanvasGradient):
            layer = style.render(width, height, np.linalg.inv(self._state.transform))
        else:
            layer = np.empty((height, width, 4))
            layer[...] = parse_color(style)

        layer[..., 3] *= mask
        pixels = np.clip(np.round(layer), 0, 255).astype(np.uint8)
        self._canvas.image.alpha_composite(Image.fromarray(pixels))

    def fill(self, rule: FillRule = "nonzero") -> None:
        width, height = self._size()
        polygons = [sp.points for sp in self._subpaths]
        self._paint(geometry.fill_mask(polygons, width, height, rule), self._state.fill_style)

    def stroke(self) -> None:
        width, height = self._size()
        mask = Image.new("L", (width, height), 0)
        draw = ImageDraw.Draw(mask)
        line_width = max(1, round(self._state.line_width * geometry.linear_scale(self._state.transform)))

        for subpath in self._subpaths:
            points = list(subpath.points)
            if subpath.closed:
                points.append(points[0])
            if len(points) < 2:
                continue
            draw.line(points, fill=255, width=line_width, joint="curve")

        self._paint(np.asarray(mask) > 0, self._state.stroke_style)

    def _rect_mask(self, x: float, y: float, width: float, height: float) -> NDArray:
        corners = self._to_device([(x, y), (x + width, y), (x + width, y + height), (x, y + height)])
        return geometry.fill_mask([corners], *self._size())

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._paint(self._rect_mask(x, y, width, height), self._state.fill_style)

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        pixels = np.array(self._canvas.image)
        pixels[self._rect_mask(x, y, width, height)] = 0
        self._canvas.image.paste(Image.fromarray(pixels))

    # ------------------ PIXELS ------------------
    def get_image_data(self, sx: int, sy: int, sw: int, sh: int) -> ImageData:
        """
        Copy a rectangle of RGBA bytes; pixels outside the surface read as
        transparent black.
        """
        if sw <= 0 or sh <= 0:
            raise ValueError(f"Image data width and height must be positive, got {sw!r}x{sh!r}")

        width, height = self._size()
        out = np.zeros((sh, sw, 4), dtype=np.uint8)
        source = np.asarray(self._canvas.image)

        x0, y0 = max(sx, 0), max(sy, 0)
        x1, y1 = min(sx + sw, width), min(sy + sh, height)
        if x0 < x1 and y0 < y1:
            out[y0 - sy:y1 - sy, x0 - sx:x1 - sx] = source[y0:y1, x0:x1]

        return ImageData(sw, sh, out.tobytes())

    # ------------------ GRADIENTS ------------------
    def create_linear_gradient(self, x0: float, y0: float, x1: float, y1: float) -> LinearGradient:
        return LinearGradient(x0, y0, x1, y1)

    def create_radial_gradient(
        self, x0: float, y0: float, r0: float, x1: float, y1: float, r1: float
    ) -> RadialGradient:
        return RadialGradient(x0, y0, r0, x1, y1, r1)
