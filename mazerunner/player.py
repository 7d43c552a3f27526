from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from .config import PLAYER_ROTATE_VELOCITY, PLAYER_VELOCITY, SURFACE_EPSILON
from .geometry import Point, normalize_angle

if TYPE_CHECKING:
    from .distance_field import DistanceField

logger = logging.getLogger(__name__)


@dataclass
class Pose:
    """Player position in world units and heading in radians (unbounded)."""

    x: float
    y: float
    heading: float

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    @property
    def normalized_heading(self) -> float:
        return normalize_angle(self.heading)


def truncate_displacement(
    heading: float, velocity: float, direction: int
) -> Tuple[int, int]:
    """
    Per-frame displacement for a move along heading, floored to whole units.
    The floor is taken before the direction sign is applied, so forward and
    backward steps along the same heading can differ by one unit.
    """
    dx = direction * math.floor(math.cos(heading) * velocity)
    dy = direction * math.floor(math.sin(heading) * velocity)
    return dx, dy


class Player:
    """Player pose plus movement resolved against the distance field."""

    def __init__(
        self,
        x: float,
        y: float,
        heading: float,
        field: DistanceField,
        velocity: float = PLAYER_VELOCITY,
        rotate_speed: float = PLAYER_ROTATE_VELOCITY,
        safety_margin: float = SURFACE_EPSILON,
    ) -> None:
        """
        x, y: starting position in world units.
        heading: facing direction in radians.
        field: distance field used for collision checks.
        velocity: movement per frame in world units.
        rotate_speed: rotation per frame in radians, used by turn().
        safety_margin: a move is rejected when the destination is this close
            to a wall or closer.
        """
        self.pose = Pose(float(x), float(y), float(heading))
        self.field = field
        self.velocity = velocity
        self.rotate_speed = rotate_speed
        self.safety_margin = safety_margin

    @property
    def x(self) -> float:
        return self.pose.x

    @property
    def y(self) -> float:
        return self.pose.y

    @property
    def heading(self) -> float:
        return self.pose.heading

    def rotate(self, delta: float) -> None:
        """Add delta radians to the heading, without wrapping."""
        self.pose.heading += delta

    def turn(self, direction: int) -> None:
        """Rotate left (direction=-1) or right (direction=1) by one frame's step."""
        self.rotate(self.rotate_speed * direction)

    def try_move(self, direction: int) -> bool:
        """
        Move forward (direction=1) or backward (direction=-1) if the
        destination point is clear of every wall by more than the safety
        margin. Returns True if the pose changed.
        """
        dx, dy = truncate_displacement(self.pose.heading, self.velocity, direction)
        candidate = Point(self.pose.x + dx, self.pose.y + dy)
        if self.field.distance_to_scene(candidate) > self.safety_margin:
            self.pose.x = candidate.x
            self.pose.y = candidate.y
            return True
        logger.debug("Move to (%.1f, %.1f) blocked", candidate.x, candidate.y)
        return False
