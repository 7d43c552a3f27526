from __future__ import annotations
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from .projector import Viewport

# Grid settings
# World units (pixels on the map overlay) per maze cell
CELL_SIZE = 50
# Maze layout: 'X' = wall, ' ' = empty
MAZE_LAYOUT = (
    "XXXXXXXXXX",
    "X X   XXXX",
    "X X X XXXX",
    "X X X   XX",
    "X   XXX XX",
    "XXXXXXX XX",
    "X    X   X",
    "XX X X X X",
    "X  X   X X",
    "XXXXXXXXXX",
)

# Frame rate cap
FPS = 60

# Player settings
# Start cell (column, row); the player starts at its center
PLAYER_START_CELL = (1, 1)
# Start heading in radians (pi/2 faces +y, i.e. down the map)
PLAYER_START_HEADING = math.pi / 2
# Movement per frame in world units
PLAYER_VELOCITY = 3
# Rotation per frame in radians
PLAYER_ROTATE_VELOCITY = math.pi / 30
# Radius of the player marker on the map overlay (visual only)
PLAYER_RADIUS = 10

# Ray marching settings
# Field of view angle (in radians)
FOV = math.pi / 2
# Number of rays cast per frame
NUM_RAYS = 1000
# Marching stops once the accumulated distance reaches this bound
MAX_DISTANCE = CELL_SIZE * 10
# Surface threshold shared by the marcher and the movement collision check
SURFACE_EPSILON = 1.0
# Distance at which a wall is shaded black
SHADE_REFERENCE_DISTANCE = 400

# Colors
BACKGROUND_COLOR = (102, 102, 102)
OUTLINE_COLOR = (255, 255, 255)
WALL_COLOR = (136, 136, 136)
RAY_COLOR = (255, 192, 203)
PLAYER_COLOR = (85, 85, 255)
TEXT_COLOR = (255, 255, 255)
# Font size for the FPS label
FONT_SIZE = 20


@dataclass(frozen=True)
class Settings:
    """
    Tunable parameters for one simulation.
    Defaults mirror the module constants; max_distance=None means
    10 cells, screen_width/screen_height=None fit the window to the maze.
    """

    cell_size: float = CELL_SIZE
    fov: float = FOV
    ray_count: int = NUM_RAYS
    velocity: float = PLAYER_VELOCITY
    rotate_speed: float = PLAYER_ROTATE_VELOCITY
    player_radius: float = PLAYER_RADIUS
    max_distance: Optional[float] = None
    surface_epsilon: float = SURFACE_EPSILON
    shade_reference_distance: float = SHADE_REFERENCE_DISTANCE
    # None derives the window from the maze size
    screen_width: Optional[int] = None
    screen_height: Optional[int] = None
    batched_marching: bool = True

    def __post_init__(self) -> None:
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.ray_count < 1:
            raise ValueError(f"ray_count must be at least 1, got {self.ray_count}")
        if self.fov < 0:
            raise ValueError(f"fov must not be negative, got {self.fov}")
        if self.surface_epsilon <= 0:
            raise ValueError(
                f"surface_epsilon must be positive, got {self.surface_epsilon}"
            )
        if self.max_distance is not None and self.max_distance <= 0:
            raise ValueError(
                f"max_distance must be positive, got {self.max_distance}"
            )
        if self.shade_reference_distance <= 0:
            raise ValueError(
                "shade_reference_distance must be positive, got "
                f"{self.shade_reference_distance}"
            )
        for name in ("screen_width", "screen_height"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

    @property
    def marching_bound(self) -> float:
        """Maximum accumulated marching distance in world units."""
        if self.max_distance is not None:
            return float(self.max_distance)
        return self.cell_size * 10

    def view_viewport(self, cols: int, rows: int) -> Viewport:
        """Screen area of the 3D view: map-sized, one cell right of the map."""
        from .projector import Viewport

        cell = self.cell_size
        return Viewport((cols + 1) * cell, 0, cols * cell, rows * cell)

    def screen_size(self, cols: int, rows: int) -> Tuple[int, int]:
        """Window size for a cols x rows maze: map, one-cell gap, view."""
        width = self.screen_width
        if width is None:
            width = int(round((2 * cols + 1) * self.cell_size))
        height = self.screen_height
        if height is None:
            height = int(round(rows * self.cell_size))
        return width, height
