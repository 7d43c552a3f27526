"""
Casts the fan of rays that makes up one frame's view.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .player import Pose
    from .ray_marcher import RayMarcher, RayResult


def fan_angles(heading: float, fov: float, ray_count: int) -> List[float]:
    """Evenly spaced ray angles starting at heading - fov/2, fov/ray_count apart."""
    if ray_count <= 0:
        return []
    start = heading - fov / 2.0
    step = fov / ray_count
    return [start + i * step for i in range(ray_count)]


class ViewSampler:
    """Marches one ray per screen column from the player's position."""

    def __init__(self, marcher: RayMarcher, batched: bool = False) -> None:
        self.marcher = marcher
        self.batched = batched

    def cast_fan(self, pose: Pose, fov: float, ray_count: int) -> List[RayResult]:
        """Return the rays of the fan ordered by index (left to right)."""
        angles = fan_angles(pose.heading, fov, ray_count)
        origin = pose.position
        if self.batched:
            return self.marcher.march_fan(origin, angles)
        return [
            self.marcher.march(origin, angle, index)
            for index, angle in enumerate(angles)
        ]
