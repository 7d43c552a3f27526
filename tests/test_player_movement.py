import math

import pytest

from mazerunner.config import MAZE_LAYOUT
from mazerunner.distance_field import DistanceField
from mazerunner.geometry import Obstacle, Point
from mazerunner.maze import Maze
from mazerunner.player import Player, Pose, truncate_displacement


def open_field():
    return DistanceField([])


@pytest.mark.parametrize(
    "direction,heading,expected_x,expected_y",
    [
        (1, 0.0, 78.0, 75.0),  # forward along +x
        (1, math.pi / 2, 75.0, 78.0),  # forward along +y
        (-1, 0.0, 72.0, 75.0),  # backward along -x
        (1, math.pi, 72.0, 75.0),  # forward along -x
    ],
)
def test_player_move_no_walls(direction, heading, expected_x, expected_y):
    player = Player(75, 75, heading, open_field(), velocity=3)
    assert player.try_move(direction)
    assert player.x == expected_x
    assert player.y == expected_y


def test_move_down_blocked_by_wall_within_margin():
    # Wall top face at y=79; a 3-unit step down lands 1 unit from it
    field = DistanceField([Obstacle(Point(75, 104), 25)])
    player = Player(75, 75, math.pi / 2, field, velocity=3, safety_margin=1)
    assert not player.try_move(1)
    assert (player.x, player.y) == (75, 75)
    assert player.heading == math.pi / 2


def test_move_allowed_just_beyond_margin():
    # Top face at y=80 leaves 2 units after the step
    field = DistanceField([Obstacle(Point(75, 105), 25)])
    player = Player(75, 75, math.pi / 2, field, velocity=3, safety_margin=1)
    assert player.try_move(1)
    assert (player.x, player.y) == (75, 78)


def test_truncation_floors_before_direction():
    # cos(3pi/2) is a tiny negative number, which floors to -1
    assert truncate_displacement(3 * math.pi / 2, 3, 1) == (-1, -3)
    assert truncate_displacement(3 * math.pi / 2, 3, -1) == (1, 3)
    # a non-integral step is cut to whole units
    assert truncate_displacement(math.pi / 4, 3, 1) == (2, 2)
    assert truncate_displacement(math.pi / 4, 3, -1) == (-2, -2)


@pytest.mark.parametrize("direction", [1, -1])
@pytest.mark.parametrize("heading", [0.0, 0.7, math.pi / 2, 2.5, math.pi, 4.0, 5.5])
def test_move_rejected_iff_candidate_within_margin(direction, heading):
    field = DistanceField.from_maze(Maze(MAZE_LAYOUT), cell_size=50)
    # Near the wall corners of open cell (1, 1)
    for start in [(75, 75), (97, 75), (75, 52), (53, 97), (98, 98)]:
        player = Player(start[0], start[1], heading, field, velocity=3, safety_margin=1)
        dx, dy = truncate_displacement(heading, 3, direction)
        candidate = Point(start[0] + dx, start[1] + dy)
        expected = field.distance_to_scene(candidate) > 1
        assert player.try_move(direction) == expected
        if expected:
            assert player.pose.position == candidate
        else:
            assert player.pose.position == Point(*start)
        assert player.heading == heading


def test_rotate_is_unbounded():
    player = Player(0, 0, 0.0, open_field())
    player.rotate(10.0)
    assert player.heading == pytest.approx(10.0)
    assert player.pose.normalized_heading == pytest.approx(10.0 - 2 * math.pi)
    player.rotate(-20.0)
    assert player.heading == pytest.approx(-10.0)
    assert 0 <= player.pose.normalized_heading < 2 * math.pi


def test_turn_uses_rotate_speed():
    player = Player(0, 0, 1.0, open_field(), rotate_speed=0.25)
    player.turn(-1)
    assert player.heading == pytest.approx(0.75)
    player.turn(1)
    player.turn(1)
    assert player.heading == pytest.approx(1.25)


def test_pose_position():
    pose = Pose(1.5, 2.5, 0.0)
    assert pose.position == Point(1.5, 2.5)
