import numpy as np
import pytest

from canvasutils.canvas import Canvas, LinearGradient, RadialGradient


class TestColorStops:
    def test_offset_out_of_range(self):
        gradient = LinearGradient(0, 0, 1, 0)
        with pytest.raises(ValueError, match="offset"):
            gradient.add_color_stop(1.5, "red")
        with pytest.raises(ValueError, match="offset"):
            gradient.add_color_stop(-0.1, "red")

    def test_invalid_color(self):
        gradient = LinearGradient(0, 0, 1, 0)
        with pytest.raises(ValueError, match="Invalid color stop color"):
            gradient.add_color_stop(0.5, "no-such-color")

    def test_keeps_registration_order(self):
        gradient = LinearGradient(0, 0, 1, 0)
        gradient.add_color_stop(1.0, "blue")
        gradient.add_color_stop(0.0, "red")
        assert [offset for offset, _ in gradient.stops] == [1.0, 0.0]

    def test_sample_sorts_by_offset(self):
        gradient = LinearGradient(0, 0, 1, 0)
        gradient.add_color_stop(1.0, "blue")
        gradient.add_color_stop(0.0, "red")
        assert np.allclose(gradient.sample(0.0), (255, 0, 0, 255))
        assert np.allclose(gradient.sample(0.5), (127.5, 0, 127.5, 255))
        assert np.allclose(gradient.sample(1.0), (0, 0, 255, 255))

    def test_sample_pads_ends(self):
        gradient = LinearGradient(0, 0, 1, 0)
        gradient.add_color_stop(0.25, "red")
        gradient.add_color_stop(0.75, "blue")
        assert np.allclose(gradient.sample(np.array([-2.0, 0.1, 0.9, 3.0])),
                           [(255, 0, 0, 255), (255, 0, 0, 255), (0, 0, 255, 255), (0, 0, 255, 255)])

    def test_no_stops_is_transparent(self):
        assert np.all(LinearGradient(0, 0, 1, 0).sample(np.linspace(0, 1, 5)) == 0)


class TestLinearGradient:
    def test_parameter_projects_on_line(self):
        gradient = LinearGradient(0, 0, 10, 0)
        t, valid = gradient.parameter(np.array([0.0, 5.0, 10.0]), np.array([3.0, -2.0, 7.0]))
        assert np.allclose(t, [0.0, 0.5, 1.0])
        assert valid.all()

    def test_zero_length_paints_nothing(self):
        _, valid = LinearGradient(1, 1, 1, 1).parameter(np.array([0.0]), np.array([0.0]))
        assert not valid.any()

    def test_fill_with_gradient(self):
        canvas = Canvas(10, 1)
        ctx = canvas.get_context()
        gradient = ctx.create_linear_gradient(0, 0, 10, 0)
        gradient.add_color_stop(0, "red")
        gradient.add_color_stop(1, "blue")
        ctx.fill_style = gradient
        ctx.fill_rect(0, 0, 10, 1)

        pixels = canvas.to_array()[0]
        assert pixels[0, 0] > pixels[0, 2]
        assert pixels[9, 2] > pixels[9, 0]
        assert np.all(pixels[:, 3] == 255)
        assert np.all(np.diff(pixels[:, 0].astype(int)) <= 0)


class TestRadialGradient:
    def test_negative_radius(self):
        with pytest.raises(ValueError, match="non-negative"):
            RadialGradient(0, 0, -1, 0, 0, 5)

    def test_concentric_parameter(self):
        gradient = RadialGradient(10, 10, 0, 10, 10, 10)
        t, valid = gradient.parameter(np.array([10.0, 13.0, 30.0]), np.array([10.0, 14.0, 10.0]))
        assert valid.all()
        assert np.allclose(t, [0.0, 0.5, 2.0])

    def test_concentric_with_inner_radius(self):
        gradient = RadialGradient(0, 0, 2, 0, 0, 6)
        t, valid = gradient.parameter(np.array([4.0]), np.array([0.0]))
        assert valid.all()
        assert np.allclose(t, [0.5])

    def test_identical_circles_paint_nothing(self):
        _, valid = RadialGradient(0, 0, 3, 0, 0, 3).parameter(np.array([1.0]), np.array([1.0]))
        assert not valid.any()

    def test_offset_circles(self):
        # start circle is a point at the origin, end circle of radius 10 centered at (5, 0)
        gradient = RadialGradient(0, 0, 0, 5, 0, 10)
        t, valid = gradient.parameter(np.array([15.0, 0.0]), np.array([0.0, 0.0]))
        assert valid.all()
        assert np.allclose(t, [1.0, 0.0])

    def test_fill_with_radial_gradient(self):
        canvas = Canvas(21)
        ctx = canvas.get_context()
        gradient = ctx.create_radial_gradient(10.5, 10.5, 0, 10.5, 10.5, 10)
        gradient.add_color_stop(0, "white")
        gradient.add_color_stop(1, "black")
        ctx.fill_style = gradient
        ctx.fill_rect(0, 0, 21, 21)

        pixels = canvas.to_array()
        assert tuple(pixels[10, 10]) == (255, 255, 255, 255)
        assert tuple(pixels[0, 0]) == (0, 0, 0, 255)
