"""
Affine transforms, curve flattening and scanline coverage for the Pillow
backend. Points are numpy arrays of shape (N, 2).
"""
import math
from typing import Iterable, Literal, Optional, Tuple

import numpy as np
from numpy import ndarray as NDArray

TAU = 2 * math.pi

# Flattening resolution
ARC_SEGMENT_LENGTH = 2.0
MIN_ARC_SEGMENTS = 8
CURVE_SEGMENTS = 32

FillRule = Literal["nonzero", "evenodd"]


## Affine matrices

def identity() -> NDArray:
    return np.eye(3)


def translation(x: float, y: float) -> NDArray:
    m = np.eye(3)
    m[0, 2] = x
    m[1, 2] = y
    return m


def rotation(angle: float) -> NDArray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([
        [c, -s, 0.0],
        [s, c, 0.0],
        [0.0, 0.0, 1.0],
    ])


def scaling(x: float, y: float) -> NDArray:
    return np.diag([x, y, 1.0])


def from_coefficients(a: float, b: float, c: float, d: float, e: float, f: float) -> NDArray:
    """Matrix for the canvas-style ``(a, b, c, d, e, f)`` transform."""
    return np.array([
        [a, c, e],
        [b, d, f],
        [0.0, 0.0, 1.0],
    ])


def apply(matrix: NDArray, points: NDArray) -> NDArray:
    """Map (N, 2) points through a 3x3 affine matrix."""
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    homogeneous = np.column_stack([pts, np.ones(len(pts))])
    return (homogeneous @ matrix.T)[:, :2]


def linear_scale(matrix: NDArray) -> float:
    """Average length scale of a transform, used for stroke widths."""
    return math.sqrt(abs(np.linalg.det(matrix[:2, :2])))


## Curve flattening

def arc_sweep(start_angle: float, end_angle: float, counterclockwise: bool) -> float:
    """
    Signed angular extent of a canvas arc.

    A difference of a full turn or more draws the whole circle; anything
    else is wrapped into a single turn in the requested direction.
    """
    if not counterclockwise:
        if end_angle - start_angle >= TAU:
            return TAU
        return (end_angle - start_angle) % TAU
    if start_angle - end_angle >= TAU:
        return -TAU
    return -((start_angle - end_angle) % TAU)


def arc_points(cx: float, cy: float, radius: float, start_angle: float, sweep: float) -> NDArray:
    """Points along an arc, both ends included."""
    n = max(MIN_ARC_SEGMENTS, math.ceil(abs(sweep) * radius / ARC_SEGMENT_LENGTH))
    angles = start_angle + np.linspace(0.0, sweep, n + 1)
    return np.column_stack([cx + radius * np.cos(angles), cy + radius * np.sin(angles)])


def cubic_points(p0: NDArray, p1: NDArray, p2: NDArray, p3: NDArray, segments: int = CURVE_SEGMENTS) -> NDArray:
    """Points along a cubic Bezier curve, excluding the start point."""
    p0, p1, p2, p3 = (np.asarray(p, dtype=float) for p in (p0, p1, p2, p3))
    t = np.linspace(0.0, 1.0, segments + 1)[1:, None]
    mt = 1 - t
    return mt ** 3 * p0 + 3 * mt ** 2 * t * p1 + 3 * mt * t ** 2 * p2 + t ** 3 * p3


def arc_to_geometry(
    p0: NDArray, p1: NDArray, p2: NDArray, radius: float
) -> Optional[Tuple[float, float, float, float, bool]]:
    """
    Circle tangent to the lines p0-p1 and p1-p2, as used by ``arcTo``.

    Returns:
        (center_x, center_y, start_angle, end_angle, counterclockwise), or
        None when the corner degenerates to a straight line to p1
    """
    p0, p1, p2 = (np.asarray(p, dtype=float) for p in (p0, p1, p2))
    v1 = p0 - p1
    v2 = p2 - p1
    len1 = float(np.hypot(*v1))
    len2 = float(np.hypot(*v2))

    if radius == 0 or len1 == 0 or len2 == 0:
        return None

    cross = v1[0] * v2[1] - v1[1] * v2[0]
    if abs(cross) < 1e-12 * len1 * len2:
        return None

    u1 = v1 / len1
    u2 = v2 / len2
    theta = math.acos(max(-1.0, min(1.0, float(np.dot(u1, u2)))))

    tangent_distance = radius / math.tan(theta / 2)
    t1 = p1 + u1 * tangent_distance
    t2 = p1 + u2 * tangent_distance

    bisector = u1 + u2
    bisector /= np.hypot(*bisector)
    center = p1 + bisector * (radius / math.sin(theta / 2))

    start = math.atan2(t1[1] - center[1], t1[0] - center[0])
    end = math.atan2(t2[1] - center[1], t2[0] - center[0])

    # the tangent arc is always the short way round
    delta = (end - start + math.pi) % TAU - math.pi
    return float(center[0]), float(center[1]), start, end, delta < 0


## Coverage

def fill_mask(polygons: Iterable[NDArray], width: int, height: int, rule: FillRule = "nonzero") -> NDArray:
    """
    Boolean (height, width) mask of pixels whose centers are inside.

    Winding numbers are accumulated edge by edge over all polygons, so
    overlapping subpaths combine according to the fill rule.
    """
    if rule not in ("nonzero", "evenodd"):
        raise ValueError(f"Unknown fill rule: {rule}")

    ys, xs = np.mgrid[0:height, 0:width] + 0.5
    winding = np.zeros((height, width), dtype=int)

    for polygon in polygons:
        pts = np.asarray(polygon, dtype=float)
        if len(pts) < 3:
            continue
        for (x0, y0), (x1, y1) in zip(pts, np.roll(pts, -1, axis=0)):
            if y0 == y1:
                continue
            side = (x1 - x0) * (ys - y0) - (xs - x0) * (y1 - y0)
            winding += ((y0 <= ys) & (ys < y1) & (side > 0)).astype(int)
            winding -= ((y1 <= ys) & (ys < y0) & (side < 0)).astype(int)

    if rule == "nonzero":
        return winding != 0
    return winding % 2 == 1


def pixel_centers(width: int, height: int) -> NDArray:
    """(height * width, 2) array of pixel center coordinates, row major."""
    ys, xs = np.mgrid[0:height, 0:width] + 0.5
    return np.column_stack([xs.ravel(), ys.ravel()])
