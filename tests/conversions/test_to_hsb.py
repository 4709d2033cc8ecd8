import math

from canvasutils.conversions.to_hsb import rgb_to_hsb, np_rgb_to_hsb
from canvasutils.conversions.to_hsl import rgb_to_hsl
import numpy as np
import pytest
from ..samples import samples_rgb_hsb, rgb_grid

tolerance = 1e-9

def test_rgb_to_hsb():
    for (r, g, b), (h_exp, s_exp, v_exp) in samples_rgb_hsb.items():
        h_out, s_out, v_out = rgb_to_hsb(r, g, b)

        assert abs(h_out - h_exp) < tolerance
        assert abs(s_out - s_exp) < tolerance
        assert abs(v_out - v_exp) < tolerance

def test_rgb_to_hsb_achromatic():
    for v in range(256):
        assert rgb_to_hsb(v, v, v) == (0, 0, v / 255)

def test_rgb_to_hsb_black_has_no_saturation():
    assert rgb_to_hsb(0, 0, 0) == (0, 0, 0)

def test_rgb_to_hsb_differs_from_hsl():
    # same hue, different saturation definition
    h_hsb, s_hsb, v = rgb_to_hsb(64, 128, 192)
    h_hsl, s_hsl, l = rgb_to_hsl(64, 128, 192)
    assert abs(h_hsb - h_hsl) < tolerance
    assert abs(s_hsb - s_hsl) > 0.1
    assert v > l

def test_rgb_to_hsb_hue_domain():
    for r, g, b in rgb_grid:
        h, s, v = rgb_to_hsb(r, g, b)
        assert 0.0 <= h < 1.0
        assert 0.0 <= s <= 1.0
        assert 0.0 <= v <= 1.0

def test_rgb_to_hsb_numpy():
    the_matrix = np.array(list(samples_rgb_hsb.keys()))
    expected = np.array(list(samples_rgb_hsb.values()))
    result = np_rgb_to_hsb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(result, expected, atol=tolerance)

def test_rgb_to_hsb_numpy_matches_scalar():
    grid = np.array(rgb_grid)
    result = np_rgb_to_hsb(grid[:, 0], grid[:, 1], grid[:, 2])
    expected = np.array([rgb_to_hsb(*rgb) for rgb in rgb_grid])
    assert np.allclose(result, expected, atol=1e-12)

def test_rgb_to_hsb_numpy_broadcasts():
    result = np_rgb_to_hsb(np.array([[255, 0], [0, 0]]), 0, 0)
    assert result.shape == (2, 2, 3)
    assert np.allclose(result[0, 0], (0.0, 1.0, 1.0))
    assert np.allclose(result[1, 1], (0.0, 0.0, 0.0))

nan_channels = [(math.nan, 0, 0), (0, math.nan, 0), (0, 0, math.nan), (10, 200, math.nan)]

@pytest.mark.parametrize("rgb", nan_channels)
def test_rgb_to_hsb_nan_channel_propagates(rgb):
    h, s, x = rgb_to_hsb(*rgb)
    assert h == 0.0
    assert math.isnan(s)
    assert math.isnan(x)

@pytest.mark.parametrize("rgb", nan_channels)
def test_rgb_to_hsb_nan_channel_numpy_matches_scalar(rgb):
    result = np_rgb_to_hsb(*rgb)
    assert np.allclose(result, rgb_to_hsb(*rgb), equal_nan=True)
