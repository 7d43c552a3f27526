"""
Per-frame simulation state: maze, distance field, player and the current ray fan.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .config import (
    BACKGROUND_COLOR,
    FONT_SIZE,
    MAZE_LAYOUT,
    OUTLINE_COLOR,
    PLAYER_COLOR,
    PLAYER_START_CELL,
    PLAYER_START_HEADING,
    RAY_COLOR,
    TEXT_COLOR,
    WALL_COLOR,
    Settings,
)
from .distance_field import DistanceField
from .geometry import Point
from .maze import Maze
from .player import Player
from .primitives import Circle, FillRect, Line, Primitive, StrokeRect, Text
from .projector import Column, Viewport, project
from .ray_marcher import RayMarcher, RayResult
from .view_sampler import ViewSampler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Controls:
    """Logical controls held at the start of a frame."""

    rotate_left: bool = False
    rotate_right: bool = False
    move_forward: bool = False
    move_backward: bool = False


class Simulation:
    """Owns all mutable state of one maze session; advanced once per frame."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        layout: Sequence = MAZE_LAYOUT,
        start_cell=PLAYER_START_CELL,
        start_heading: float = PLAYER_START_HEADING,
        viewport: Optional[Viewport] = None,
    ) -> None:
        self.settings = settings or Settings()
        s = self.settings
        self.maze = Maze(layout)
        self.field = DistanceField.from_maze(self.maze, s.cell_size)
        self.marcher = RayMarcher(
            self.field, max_distance=s.marching_bound, epsilon=s.surface_epsilon
        )
        self.sampler = ViewSampler(self.marcher, batched=s.batched_marching)
        start = self.maze.cell_center(start_cell[0], start_cell[1], s.cell_size)
        # Collision margin and marching epsilon are the same parameter
        self.player = Player(
            start.x,
            start.y,
            start_heading,
            self.field,
            velocity=s.velocity,
            rotate_speed=s.rotate_speed,
            safety_margin=s.surface_epsilon,
        )
        self.screen_size = s.screen_size(self.maze.width, self.maze.height)
        self.viewport = viewport or s.view_viewport(
            self.maze.width, self.maze.height
        )
        self.rays: List[RayResult] = []
        self.last_elapsed = 0.0
        logger.info(
            "Simulation ready: %dx%d maze, %d obstacles, %d rays",
            self.maze.width,
            self.maze.height,
            len(self.field),
            s.ray_count,
        )

    def tick(self, elapsed: float, controls: Controls = Controls()) -> None:
        """Apply this frame's input, then recast the ray fan."""
        self.last_elapsed = elapsed
        if controls.move_forward or controls.move_backward:
            self.player.try_move(1 if controls.move_forward else -1)
        if controls.rotate_left:
            self.player.turn(-1)
        if controls.rotate_right:
            self.player.turn(1)
        self.rays = self.sampler.cast_fan(
            self.player.pose, self.settings.fov, self.settings.ray_count
        )

    @property
    def fps(self) -> int:
        if self.last_elapsed <= 0:
            return 0
        return int(1.0 / self.last_elapsed)

    def columns(self) -> List[Column]:
        return project(
            self.rays,
            self.viewport,
            self.player.heading,
            self.settings.shade_reference_distance,
        )

    def render(self) -> List[Primitive]:
        """Everything to paint this frame, back to front."""
        s = self.settings
        cell = s.cell_size
        prims: List[Primitive] = [
            FillRect(0, 0, *self.screen_size, BACKGROUND_COLOR),
            StrokeRect(
                0, 0, self.maze.width * cell, self.maze.height * cell, OUTLINE_COLOR
            ),
        ]
        for x, y in self.maze.wall_cells():
            prims.append(FillRect(x * cell, y * cell, cell, cell, WALL_COLOR))
        origin = self.player.pose.position
        for ray in self.rays:
            prims.append(Line(origin, ray.hit_point, RAY_COLOR))
        prims.append(Circle(origin, s.player_radius, PLAYER_COLOR))
        prims.extend(self.columns())
        prims.append(Text(Point(20, 20), f"FPS: {self.fps}", TEXT_COLOR, FONT_SIZE))
        return prims
