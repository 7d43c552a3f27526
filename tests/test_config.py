import math

import pytest

from mazerunner import config
from mazerunner.config import Settings
from mazerunner.projector import Viewport


def test_default_view_is_a_right_angle():
    assert math.isclose(config.FOV, math.pi / 2, rel_tol=1e-9)


def test_default_marching_bound_is_ten_cells():
    assert config.MAX_DISTANCE == 10 * config.CELL_SIZE
    assert Settings().marching_bound == 500
    assert Settings(cell_size=20).marching_bound == 200
    assert Settings(max_distance=123).marching_bound == 123


def test_defaults_mirror_constants():
    s = Settings()
    assert s.ray_count == config.NUM_RAYS
    assert s.surface_epsilon == config.SURFACE_EPSILON == 1
    assert s.shade_reference_distance == 400
    assert s.velocity == config.PLAYER_VELOCITY
    assert s.rotate_speed == pytest.approx(math.pi / 30)


def test_view_viewport_sits_one_cell_right_of_map():
    assert Settings().view_viewport(10, 10) == Viewport(550, 0, 500, 500)
    assert Settings(cell_size=20).view_viewport(14, 6) == Viewport(300, 0, 280, 120)


@pytest.mark.parametrize(
    "kwargs,cols,rows,expected",
    [
        ({}, 10, 10, (1050, 500)),
        ({"cell_size": 20}, 10, 10, (420, 200)),
        ({"cell_size": 20}, 14, 6, (580, 120)),
        ({"screen_width": 800, "screen_height": 600}, 10, 10, (800, 600)),
    ],
)
def test_screen_size_fits_maze(kwargs, cols, rows, expected):
    assert Settings(**kwargs).screen_size(cols, rows) == expected


@pytest.mark.parametrize(
    "kwargs",
    [
        {"cell_size": 0},
        {"ray_count": 0},
        {"fov": -0.1},
        {"surface_epsilon": 0},
        {"max_distance": -5},
        {"shade_reference_distance": 0},
        {"screen_width": 0},
        {"screen_height": -1},
    ],
)
def test_invalid_settings_rejected(kwargs):
    with pytest.raises(ValueError):
        Settings(**kwargs)
