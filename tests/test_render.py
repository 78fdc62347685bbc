import numpy as np
import pytest

from fractol.fractal import (
    HEIGHT,
    INSIDE_COLOR,
    WIDTH,
    JuliaParams,
    Variant,
    fractal_color,
    map_x_to_real,
    map_y_to_comp,
)
from fractol.render import render_pixels, to_rgb
from fractol.viewport import Viewport

SAMPLES = [(0, 0), (250, 250), (499, 499), (123, 321), (400, 10), (37, 480), (300, 260)]


@pytest.fixture(scope="module")
def default_frame():
    return render_pixels(Viewport.default(), JuliaParams())


@pytest.fixture(scope="module")
def julia_view():
    return Viewport(0.5, 2.5, 0.5, 2.5)


@pytest.fixture(scope="module")
def julia_params():
    return JuliaParams(10.0, -5.0, Variant.JULIA)


@pytest.fixture(scope="module")
def julia_frame(julia_view, julia_params):
    return render_pixels(julia_view, julia_params)


def test_frame_shape_and_dtype(default_frame):
    assert default_frame.shape == (HEIGHT, WIDTH)
    assert default_frame.dtype == np.uint32


def test_centre_of_default_view_is_inside(default_frame):
    assert default_frame[250, 250] == INSIDE_COLOR


def test_top_left_corner_escapes_after_one_step(default_frame):
    assert int(default_frame[0, 0]) == 0x0E0000


@pytest.mark.parametrize("x, y", SAMPLES)
def test_mandelbrot_matches_scalar(default_frame, x, y):
    view = Viewport.default()
    expected = fractal_color(
        map_x_to_real(x, view.x_min, view.x_max),
        map_y_to_comp(y, view.y_min, view.y_max),
        JuliaParams(),
    )
    assert int(default_frame[y, x]) == expected


@pytest.mark.parametrize("x, y", SAMPLES)
def test_julia_matches_scalar(julia_frame, julia_view, julia_params, x, y):
    expected = fractal_color(
        map_x_to_real(x, julia_view.x_min, julia_view.x_max),
        map_y_to_comp(y, julia_view.y_min, julia_view.y_max),
        julia_params,
    )
    assert int(julia_frame[y, x]) == expected


def test_frame_colours_are_valid(default_frame):
    outside = default_frame[default_frame != INSIDE_COLOR]
    assert outside.size > 0
    assert int(np.max(outside & 0xFFFF)) == 0
    assert int(np.max((outside >> 16) % 2)) == 0
    assert int(np.max(outside >> 16)) <= 0xFF


def test_to_rgb_splits_channels():
    rgb = to_rgb(np.array([[0x00FF00, 0xAB0000]], dtype=np.uint32))
    assert rgb.shape == (1, 2, 3)
    assert rgb.dtype == np.uint8
    assert rgb[0, 0].tolist() == [0, 0xFF, 0]
    assert rgb[0, 1].tolist() == [0xAB, 0, 0]


def test_to_rgb_round_trip(default_frame):
    rgb = to_rgb(default_frame).astype(np.uint32)
    rebuilt = (rgb[..., 0] << 16) | (rgb[..., 1] << 8) | rgb[..., 2]
    assert np.array_equal(rebuilt, default_frame)