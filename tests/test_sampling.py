import pytest

from canvasutils import CanvasContextError, get_color_values
from tests.stubs import StubCanvas


@pytest.mark.parametrize("color, expected", [
    ("#ff0000", (255, 0, 0, 255)),
    ("red", (255, 0, 0, 255)),
    ("orange", (255, 165, 0, 255)),
    ("rgb(0, 128, 255)", (0, 128, 255, 255)),
    ("hsl(120, 100%, 50%)", (0, 255, 0, 255)),
    ("#00000000", (0, 0, 0, 0)),
])
def test_get_color_values(color, expected):
    assert get_color_values(color) == expected


def test_returns_plain_ints():
    assert all(type(v) is int for v in get_color_values("teal"))


def test_unparsable_color_keeps_default_fill():
    with pytest.warns(UserWarning):
        assert get_color_values("not a color") == (0, 0, 0, 255)


def test_uses_surface_factory(stub_factory):
    assert get_color_values("red", canvas_factory=stub_factory) == (12, 34, 56, 78)

    (canvas,) = stub_factory.created
    assert (canvas.width, canvas.height) == (1, 1)
    assert canvas.context.calls == [
        ("fill_style", "red"),
        ("begin_path",),
        ("rect", 0, 0, 1, 1),
        ("fill",),
        ("get_image_data", 0, 0, 1, 1),
    ]


def test_surface_without_context():
    def factory(width, height):
        return StubCanvas(width, height, has_context=False)

    with pytest.raises(CanvasContextError):
        get_color_values("red", canvas_factory=factory)
