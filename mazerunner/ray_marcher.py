"""
Sphere tracing against the maze distance field.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Sequence

import numpy as np

from .config import MAX_DISTANCE, SURFACE_EPSILON
from .geometry import Point

if TYPE_CHECKING:
    from .distance_field import DistanceField


@dataclass(frozen=True)
class RayResult:
    """
    Outcome of marching one ray.
    Attributes:
        index: Ray number within its fan.
        angle: Direction of the ray in radians.
        hit_point: Where marching stopped.
        distance: Accumulated marching distance (never above max_distance).
        hit: True if marching stopped on a surface, False if it ran out.
        steps: Number of advances taken.
    """

    index: int
    angle: float
    hit_point: Point
    distance: float
    hit: bool
    steps: int


class RayMarcher:
    """Advances rays by the locally safe distance until they reach a wall."""

    def __init__(
        self,
        field: DistanceField,
        max_distance: float = MAX_DISTANCE,
        epsilon: float = SURFACE_EPSILON,
    ) -> None:
        """
        field: scene distance field to march against.
        max_distance: bound on the accumulated distance of every ray.
        epsilon: a ray stops once the local distance is at or below this.
        """
        self.field = field
        self.max_distance = float(max_distance)
        self.epsilon = float(epsilon)

    def march(self, origin: Point, angle: float, index: int = 0) -> RayResult:
        """Sphere-trace a single ray from origin along angle."""
        dir_x = math.cos(angle)
        dir_y = math.sin(angle)
        x, y = origin
        total = 0.0
        steps = 0
        hit = False
        while total < self.max_distance:
            dist = self.field.distance_to_scene(Point(x, y))
            # Also stops rays that start inside a wall (negative distance)
            if dist <= self.epsilon:
                hit = True
                break
            remaining = self.max_distance - total
            steps += 1
            if dist >= remaining:
                x += dir_x * remaining
                y += dir_y * remaining
                total = self.max_distance
                break
            x += dir_x * dist
            y += dir_y * dist
            total += dist
        return RayResult(index, angle, Point(x, y), total, hit, steps)

    def march_fan(self, origin: Point, angles: Sequence[float]) -> List[RayResult]:
        """
        March every angle from the same origin in lock step.
        Each ray's state lives in its own array slot, so results come back
        in input order and match march() ray for ray.
        """
        count = len(angles)
        if count == 0:
            return []
        angle_arr = np.asarray(angles, dtype=np.float64)
        dirs = np.column_stack((np.cos(angle_arr), np.sin(angle_arr)))
        points = np.tile(np.asarray(origin, dtype=np.float64), (count, 1))
        totals = np.zeros(count)
        steps = np.zeros(count, dtype=np.int64)
        hits = np.zeros(count, dtype=bool)
        active = np.ones(count, dtype=bool)

        while active.any():
            idx = np.flatnonzero(active)
            dist = self.field.distances(points[idx])
            surfaced = dist <= self.epsilon
            hits[idx[surfaced]] = True
            active[idx[surfaced]] = False

            moving = idx[~surfaced]
            dist = dist[~surfaced]
            remaining = self.max_distance - totals[moving]
            capped = dist >= remaining
            step = np.where(capped, remaining, dist)
            points[moving] += dirs[moving] * step[:, None]
            totals[moving] = np.where(capped, self.max_distance, totals[moving] + dist)
            steps[moving] += 1
            active[moving[capped]] = False

        return [
            RayResult(
                i,
                float(angles[i]),
                Point(float(points[i, 0]), float(points[i, 1])),
                float(totals[i]),
                bool(hits[i]),
                int(steps[i]),
            )
            for i in range(count)
        ]
