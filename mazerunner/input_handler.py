"""
Keyboard polling: turns pygame events and held keys into per-frame Controls.
"""

from __future__ import annotations
import pygame
from typing import Sequence

from .simulation import Controls

# Keys held for each logical control (arrows or WASD)
FORWARD_KEYS = (pygame.K_UP, pygame.K_w)
BACKWARD_KEYS = (pygame.K_DOWN, pygame.K_s)
LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)


def controls_from_keys(keys: Sequence[bool]) -> Controls:
    """Map a pygame key-state table to the logical controls."""
    return Controls(
        rotate_left=any(keys[k] for k in LEFT_KEYS),
        rotate_right=any(keys[k] for k in RIGHT_KEYS),
        move_forward=any(keys[k] for k in FORWARD_KEYS),
        move_backward=any(keys[k] for k in BACKWARD_KEYS),
    )


class InputHandler:
    """
    Processes Pygame events once per frame and exposes the quit flag and
    the held logical controls.
    """

    def __init__(self) -> None:
        self._quit = False
        self._controls = Controls()

    def process_events(self) -> None:
        """Poll Pygame events and capture the current key state."""
        self._quit = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self._quit = True
        self._controls = controls_from_keys(pygame.key.get_pressed())

    def should_quit(self) -> bool:
        """Return True if a quit command was issued this frame."""
        return self._quit

    def get_controls(self) -> Controls:
        """Return the controls held as of the last process_events()."""
        return self._controls
