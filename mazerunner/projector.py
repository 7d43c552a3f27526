"""
Maps ray distances to the vertical bars of the pseudo-3D view.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, NamedTuple, Sequence

from .config import SHADE_REFERENCE_DISTANCE

if TYPE_CHECKING:
    from .ray_marcher import RayResult


class Viewport(NamedTuple):
    """Screen rectangle the view is projected into."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Column:
    """
    One vertical bar of the view.
    Attributes:
        index: Ray number the bar was derived from.
        x, y: Top-left corner on screen (y is the start of the bar).
        width, height: Bar size; height <= 0 means no visible wall.
        shade: Grey level, 255 - floor(distance * 255 / reference). Not
            clamped, so it can fall outside [0, 255].
        distance: Raw accumulated distance of the ray.
        hit: False when the ray ran out at the marching bound without
            reaching a wall; such a column shows no wall.
    """

    index: int
    x: float
    y: float
    width: float
    height: float
    shade: int
    distance: float
    hit: bool = True


def bar_height(corrected_distance: float, viewport_height: float) -> float:
    """Closer walls give taller bars; from half the view height on, none."""
    return 0.5 * viewport_height - corrected_distance


def shade_for(
    distance: float, reference_distance: float = SHADE_REFERENCE_DISTANCE
) -> int:
    """Linear greyscale from 255 at distance 0 down to 0 at the reference."""
    return 255 - math.floor(distance * (255 / reference_distance))


def project(
    results: Sequence[RayResult],
    viewport: Viewport,
    heading: float,
    shade_reference_distance: float = SHADE_REFERENCE_DISTANCE,
) -> List[Column]:
    """Turn an ordered ray fan into one column per ray, left to right."""
    if not results:
        return []
    bar_width = viewport.width / len(results)
    columns = []
    for i, result in enumerate(results):
        # Fish-eye correction: distance along the view direction
        corrected = result.distance * math.cos(heading - result.angle)
        height = bar_height(corrected, viewport.height)
        start_y = viewport.y + (viewport.height - height) / 2
        columns.append(
            Column(
                index=i,
                x=viewport.x + i * bar_width,
                y=start_y,
                width=bar_width,
                height=height,
                shade=shade_for(result.distance, shade_reference_distance),
                distance=result.distance,
                hit=result.hit,
            )
        )
    return columns
