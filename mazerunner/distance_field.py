"""
Signed distance field over the maze walls.

Every wall cell is an axis-aligned square; the scene distance is the minimum
of the exact box distances, negative inside a wall and zero on its boundary.
"""

from __future__ import annotations
import math
from typing import TYPE_CHECKING, Sequence

import numpy as np

from .geometry import Obstacle, Point

if TYPE_CHECKING:
    from .maze import Maze


def box_sdf(p: Point, center: Point, half_size: float) -> float:
    """Exact signed Euclidean distance from p to a square."""
    dx = abs(p[0] - center[0]) - half_size
    dy = abs(p[1] - center[1]) - half_size
    outside = math.hypot(max(dx, 0.0), max(dy, 0.0))
    inside = min(max(dx, dy), 0.0)
    return outside + inside


class DistanceField:
    """Scene SDF built once from a fixed set of obstacles."""

    def __init__(self, obstacles: Sequence[Obstacle]) -> None:
        self.obstacles = tuple(obstacles)
        # (N, 2) centers and (N,) half sizes for vectorised queries
        self._centers = np.array(
            [o.center for o in self.obstacles], dtype=np.float64
        ).reshape(-1, 2)
        self._half_sizes = np.array(
            [o.half_size for o in self.obstacles], dtype=np.float64
        )

    @classmethod
    def from_maze(cls, maze: Maze, cell_size: float) -> DistanceField:
        return cls(maze.obstacles(cell_size))

    def __len__(self) -> int:
        return len(self.obstacles)

    def distance_to_scene(self, p: Point) -> float:
        """
        Signed distance from p to the nearest obstacle surface.
        Returns +inf when there are no obstacles; callers bound the result.
        """
        if not self.obstacles:
            return math.inf
        offset = np.abs(np.asarray(p, dtype=np.float64) - self._centers)
        offset -= self._half_sizes[:, None]
        return float(np.min(self._combine(offset)))

    def distances(self, points: np.ndarray) -> np.ndarray:
        """
        Evaluate the field for an (M, 2) array of points at once.
        Returns an (M,) array; +inf everywhere when there are no obstacles.
        """
        points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        if not self.obstacles:
            return np.full(len(points), np.inf)
        # (M, N, 2): offset of every point from every obstacle
        offset = np.abs(points[:, None, :] - self._centers[None, :, :])
        offset -= self._half_sizes[None, :, None]
        return np.min(self._combine(offset), axis=1)

    @staticmethod
    def _combine(offset: np.ndarray) -> np.ndarray:
        """box_sdf over the last axis of per-axis face offsets."""
        dx = offset[..., 0]
        dy = offset[..., 1]
        outside = np.hypot(np.maximum(dx, 0.0), np.maximum(dy, 0.0))
        inside = np.minimum(np.maximum(dx, dy), 0.0)
        return outside + inside
