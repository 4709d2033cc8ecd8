import numpy as np
import pytest

from canvasutils import Canvas
from canvasutils.paths import (
    Arc,
    ArcTo,
    BezierCurveTo,
    ClosePath,
    LineTo,
    MoveTo,
    draw_path,
    draw_segment,
    fill_path,
    instruction_from_dict,
    stroke_path,
)
from tests.stubs import StubCanvas


@pytest.fixture
def ctx():
    return StubCanvas(10, 10).context


class TestDrawSegment:
    @pytest.mark.parametrize("instruction, expected", [
        (MoveTo(1, 2), ("move_to", 1, 2)),
        (LineTo(3, 4), ("line_to", 3, 4)),
        (Arc(5, 5, 2, 0, 3), ("arc", 5, 5, 2, 0, 3, False)),
        (Arc(5, 5, 2, 0, 3, counterclockwise=True), ("arc", 5, 5, 2, 0, 3, True)),
        (ArcTo(1, 2, 3, 4, 5), ("arc_to", 1, 2, 3, 4, 5)),
        (BezierCurveTo(1, 2, 3, 4, 5, 6), ("bezier_curve_to", 1, 2, 3, 4, 5, 6)),
        (ClosePath(), ("close_path",)),
    ])
    def test_maps_to_context_call(self, ctx, instruction, expected):
        draw_segment(ctx, instruction)
        assert ctx.calls == [expected]

    def test_rejects_unknown(self, ctx):
        with pytest.raises(TypeError):
            draw_segment(ctx, ("line-to", 1, 2))


class TestPaths:
    def test_draw_path_begins_new_path(self, ctx):
        draw_path(ctx, [MoveTo(0, 0), LineTo(1, 1), ClosePath()])
        assert ctx.calls == [
            ("begin_path",),
            ("move_to", 0, 0),
            ("line_to", 1, 1),
            ("close_path",),
        ]

    def test_fill_path_isolates_state(self, ctx):
        fill_path(ctx, "red", [MoveTo(0, 0)])
        assert ctx.calls == [
            ("save",),
            ("fill_style", "red"),
            ("begin_path",),
            ("move_to", 0, 0),
            ("fill",),
            ("restore",),
        ]

    def test_stroke_path_isolates_state(self, ctx):
        stroke_path(ctx, "blue", [])
        assert ctx.calls == [
            ("save",),
            ("stroke_style", "blue"),
            ("begin_path",),
            ("stroke",),
            ("restore",),
        ]

    def test_fill_path_on_pillow(self):
        canvas = Canvas(4)
        ctx = canvas.get_context()
        fill_path(ctx, "lime", [MoveTo(0, 0), LineTo(4, 0), LineTo(4, 4), LineTo(0, 4), ClosePath()])

        assert np.all(canvas.to_array() == (0, 255, 0, 255))
        assert ctx.fill_style == "#000000"


class TestInstructionFromDict:
    def test_builds_instructions(self):
        assert instruction_from_dict({"step": "move-to", "x": 1, "y": 2}) == MoveTo(1, 2)
        assert instruction_from_dict({"step": "close"}) == ClosePath()
        assert instruction_from_dict(
            {"step": "arc", "x": 0, "y": 0, "radius": 1, "start_angle": 0, "end_angle": 1}
        ) == Arc(0, 0, 1, 0, 1)

    def test_legacy_bezier_step_name(self):
        data = {"cp1x": 0, "cp1y": 1, "cp2x": 2, "cp2y": 3, "x": 4, "y": 5}
        assert instruction_from_dict({"step": "beziere-curve-to", **data}) == \
            instruction_from_dict({"step": "bezier-curve-to", **data})

    def test_legacy_arc_fields(self):
        data = {"step": "arc", "x": 1, "y": 2, "radius": 3,
                "startAngle": 0, "endAngle": 1.5, "clockwise": True}
        assert instruction_from_dict(data) == Arc(1, 2, 3, 0, 1.5, counterclockwise=True)

    def test_legacy_arc_replays_as_counterclockwise(self, ctx):
        data = {"step": "arc", "x": 1, "y": 2, "radius": 3, "startAngle": 0, "endAngle": 1.5, "clockwise": True}
        draw_segment(ctx, instruction_from_dict(data))
        assert ctx.calls == [("arc", 1, 2, 3, 0, 1.5, True)]

    def test_duplicate_field_via_alias(self):
        with pytest.raises(ValueError, match="Duplicate field"):
            instruction_from_dict({"step": "arc", "x": 0, "y": 0, "radius": 1,
                                   "start_angle": 0, "startAngle": 0, "end_angle": 1})

    def test_unknown_step(self):
        with pytest.raises(ValueError, match="Unknown path step"):
            instruction_from_dict({"step": "spline"})

    def test_unexpected_field(self):
        with pytest.raises(ValueError, match="Unexpected fields"):
            instruction_from_dict({"step": "line-to", "x": 1, "y": 2, "z": 3})

    def test_missing_field(self):
        with pytest.raises(ValueError, match="Invalid fields"):
            instruction_from_dict({"step": "line-to", "x": 1})
