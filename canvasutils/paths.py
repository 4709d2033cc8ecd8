"""
Declarative path instructions and their replay on a 2D context.

A path is a sequence of instructions, each one mapping to a single context
call. Instructions can be built directly or loaded from plain mappings
with a ``"step"`` key:

>>> outline = [
...     {"step": "move-to", "x": 10, "y": 10},
...     {"step": "line-to", "x": 90, "y": 10},
...     {"step": "arc", "x": 50, "y": 10, "radius": 40, "start_angle": 0, "end_angle": 3.14159},
...     {"step": "close"},
... ]
>>> fill_path(ctx, "tomato", [instruction_from_dict(d) for d in outline])
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Iterable, Mapping, Type, Union

from .types.surface_types import FillStrokeStyle, RenderingContext


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class Arc:
    x: float
    y: float
    radius: float
    start_angle: float
    end_angle: float
    counterclockwise: bool = False


@dataclass(frozen=True)
class ArcTo:
    x1: float
    y1: float
    x2: float
    y2: float
    radius: float


@dataclass(frozen=True)
class BezierCurveTo:
    cp1x: float
    cp1y: float
    cp2x: float
    cp2y: float
    x: float
    y: float


@dataclass(frozen=True)
class ClosePath:
    pass


PathInstruction = Union[MoveTo, LineTo, Arc, ArcTo, BezierCurveTo, ClosePath]

STEPS: Dict[str, Type] = {
    "move-to": MoveTo,
    "line-to": LineTo,
    "arc": Arc,
    "arc-to": ArcTo,
    "bezier-curve-to": BezierCurveTo,
    "beziere-curve-to": BezierCurveTo,
    "close": ClosePath,
}

# camelCase keys of legacy path data; the old "clockwise" flag was always
# handed to the canvas as its anticlockwise argument
FIELD_ALIASES: Dict[str, str] = {
    "startAngle": "start_angle",
    "endAngle": "end_angle",
    "clockwise": "counterclockwise",
}


def _canonical_fields(step: str, data: Mapping[str, Any]) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    for key, value in data.items():
        if key == "step":
            continue
        name = FIELD_ALIASES.get(key, key)
        if name in params:
            raise ValueError(f"Duplicate field for {step!r}: {name!r}")
        params[name] = value
    return params


def instruction_from_dict(data: Mapping[str, Any]) -> PathInstruction:
    """
    Build an instruction from a ``{"step": ..., **fields}`` mapping.

    Field names are the instruction's own; the camelCase names of legacy
    path data (``startAngle``, ``endAngle``, ``clockwise``) are accepted too,
    ``clockwise`` landing on ``counterclockwise``.

    Raises:
        ValueError: for an unknown step or missing/unexpected/duplicate fields
    """
    step = data.get("step")
    cls = STEPS.get(step)
    if cls is None:
        raise ValueError(f"Unknown path step: {step!r}")

    params = _canonical_fields(step, data)
    names = {f.name for f in fields(cls)}
    unexpected = set(params) - names
    if unexpected:
        raise ValueError(f"Unexpected fields for {step!r}: {sorted(unexpected)}")
    try:
        return cls(**params)
    except TypeError as err:
        raise ValueError(f"Invalid fields for {step!r}: {err}") from err


def draw_segment(ctx: RenderingContext, instruction: PathInstruction) -> None:
    if isinstance(instruction, MoveTo):
        ctx.move_to(instruction.x, instruction.y)
    elif isinstance(instruction, LineTo):
        ctx.line_to(instruction.x, instruction.y)
    elif isinstance(instruction, Arc):
        ctx.arc(
            instruction.x,
            instruction.y,
            instruction.radius,
            instruction.start_angle,
            instruction.end_angle,
            instruction.counterclockwise,
        )
    elif isinstance(instruction, ArcTo):
        ctx.arc_to(instruction.x1, instruction.y1, instruction.x2, instruction.y2, instruction.radius)
    elif isinstance(instruction, BezierCurveTo):
        ctx.bezier_curve_to(
            instruction.cp1x,
            instruction.cp1y,
            instruction.cp2x,
            instruction.cp2y,
            instruction.x,
            instruction.y,
        )
    elif isinstance(instruction, ClosePath):
        ctx.close_path()
    else:
        raise TypeError(f"Not a path instruction: {instruction!r}")


def draw_path(ctx: RenderingContext, instructions: Iterable[PathInstruction]) -> None:
    """Start a new path and replay the instructions on it."""
    ctx.begin_path()
    for instruction in instructions:
        draw_segment(ctx, instruction)


def fill_path(ctx: RenderingContext, fill_style: FillStrokeStyle, instructions: Iterable[PathInstruction]) -> None:
    """Fill a path with the given style, leaving the context state untouched."""
    ctx.save()
    ctx.fill_style = fill_style
    draw_path(ctx, instructions)
    ctx.fill()
    ctx.restore()


def stroke_path(ctx: RenderingContext, stroke_style: FillStrokeStyle, instructions: Iterable[PathInstruction]) -> None:
    """Stroke a path with the given style, leaving the context state untouched."""
    ctx.save()
    ctx.stroke_style = stroke_style
    draw_path(ctx, instructions)
    ctx.stroke()
    ctx.restore()
