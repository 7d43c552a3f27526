"""
Plain geometric value types shared by the maze, the distance field and the player.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import NamedTuple

TWO_PI = 2.0 * math.pi


class Point(NamedTuple):
    """Position in continuous world units (same unit as the cell size)."""

    x: float
    y: float


@dataclass(frozen=True)
class Obstacle:
    """Axis-aligned square footprint of one wall cell."""

    center: Point
    half_size: float


def normalize_angle(angle: float) -> float:
    """Wrap an angle in radians into [0, 2*pi)."""
    wrapped = angle % TWO_PI
    # -tiny % 2pi rounds up to exactly 2pi
    return 0.0 if wrapped >= TWO_PI else wrapped
