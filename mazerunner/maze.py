"""
Static maze grid and the wall obstacles derived from it.
"""

from __future__ import annotations
import enum
import logging
from typing import Iterator, List, Sequence, Tuple, Union

from .geometry import Obstacle, Point

logger = logging.getLogger(__name__)


class MazeConfigError(ValueError):
    """Raised when a maze layout cannot be used (empty, ragged, unknown cells)."""


class Cell(enum.Enum):
    EMPTY = 0
    WALL = 1


# Accepted cell spellings: layout strings and integer grids
_CELL_CODES = {
    " ": Cell.EMPTY,
    "X": Cell.WALL,
    0: Cell.EMPTY,
    1: Cell.WALL,
}

RowSpec = Union[str, Sequence[Union[int, str, Cell]]]


def _parse_cell(code, row: int, col: int) -> Cell:
    if isinstance(code, Cell):
        return code
    try:
        return _CELL_CODES[code]
    except (KeyError, TypeError):
        raise MazeConfigError(
            f"Unknown maze cell {code!r} at row {row}, column {col}"
        ) from None


class Maze:
    """Immutable rectangular grid of wall/empty cells."""

    def __init__(self, rows: Sequence[RowSpec]) -> None:
        if not rows:
            logger.error("Rejecting empty maze layout")
            raise MazeConfigError("Maze layout must have at least one row")
        width = len(rows[0])
        if width == 0:
            logger.error("Rejecting maze layout with an empty first row")
            raise MazeConfigError("Maze rows must not be empty")
        for y, row in enumerate(rows):
            if len(row) != width:
                logger.error(
                    "Rejecting ragged maze: row %d has %d cells, expected %d",
                    y,
                    len(row),
                    width,
                )
                raise MazeConfigError(
                    f"Maze must be rectangular: row {y} has {len(row)} "
                    f"cells, expected {width}"
                )
        self._cells: Tuple[Tuple[Cell, ...], ...] = tuple(
            tuple(_parse_cell(code, y, x) for x, code in enumerate(row))
            for y, row in enumerate(rows)
        )
        self.height = len(self._cells)
        self.width = width

    def wall_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (col, row) of every wall cell in row-major order."""
        for y, row in enumerate(self._cells):
            for x, cell in enumerate(row):
                if cell is Cell.WALL:
                    yield x, y

    def obstacles(self, cell_size: float) -> List[Obstacle]:
        """Square footprint of every wall cell, in world units."""
        half = cell_size / 2.0
        result = [
            Obstacle(Point(x * cell_size + half, y * cell_size + half), half)
            for x, y in self.wall_cells()
        ]
        logger.debug(
            "Derived %d obstacles from %dx%d maze", len(result), self.width, self.height
        )
        return result

    def cell_center(self, col: int, row: int, cell_size: float) -> Point:
        """World-space center of the given cell."""
        return Point((col + 0.5) * cell_size, (row + 0.5) * cell_size)

    def __repr__(self) -> str:
        return f"<Maze {self.width}x{self.height}>"
