"""
Pygame renderer: paints the primitive list produced by the simulation.
"""

from __future__ import annotations
import logging
from typing import Iterable, Optional, Tuple

import pygame

from .primitives import Circle, FillRect, Line, Primitive, StrokeRect, Text
from .projector import Column

logger = logging.getLogger(__name__)


def _rect(x: float, y: float, width: float, height: float) -> pygame.Rect:
    return pygame.Rect(int(x), int(y), int(round(width)), int(round(height)))


def shade_to_color(shade: int) -> Tuple[int, int, int]:
    """Saturate a raw grey level into a valid RGB triple."""
    level = max(0, min(255, int(shade)))
    return (level, level, level)


class Renderer:
    """Draws primitives onto a pygame surface."""

    def __init__(self, font_name: Optional[str] = None) -> None:
        self.font_name = font_name
        # Fonts by size, created on first use
        self._fonts = {}

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.SysFont(self.font_name, size)
            self._fonts[size] = font
        return font

    def draw(self, surface: pygame.Surface, primitives: Iterable[Primitive]) -> None:
        skipped = 0
        for prim in primitives:
            if isinstance(prim, Column):
                if not self._draw_column(surface, prim):
                    skipped += 1
            elif isinstance(prim, FillRect):
                surface.fill(prim.color, _rect(prim.x, prim.y, prim.width, prim.height))
            elif isinstance(prim, StrokeRect):
                pygame.draw.rect(
                    surface,
                    prim.color,
                    _rect(prim.x, prim.y, prim.width, prim.height),
                    width=1,
                )
            elif isinstance(prim, Line):
                pygame.draw.line(surface, prim.color, prim.start, prim.end, prim.width)
            elif isinstance(prim, Circle):
                pygame.draw.circle(surface, prim.color, prim.center, prim.radius)
            elif isinstance(prim, Text):
                image = self._font(prim.size).render(prim.text, True, prim.color)
                surface.blit(image, prim.position)
            else:
                raise TypeError(f"Unsupported primitive: {prim!r}")
        if skipped:
            logger.debug("Skipped %d columns with no visible wall", skipped)

    def _draw_column(self, surface: pygame.Surface, column: Column) -> bool:
        """Fill one view bar; misses and non-positive heights are not drawn."""
        if not column.hit or column.height <= 0:
            return False
        # Round edges so adjacent fractional-width bars leave no gaps
        left = int(column.x)
        right = int(column.x + column.width + 0.5)
        rect = pygame.Rect(
            left, int(column.y), max(right - left, 1), int(column.height + 0.5)
        )
        surface.fill(shade_to_color(column.shade), rect)
        return True
