from __future__ import annotations
import logging
import pygame
from typing import Optional

from .config import FPS, Settings
from .input_handler import InputHandler
from .renderer import Renderer
from .simulation import Simulation

logger = logging.getLogger(__name__)


class Game:
    """Main Game class: owns the window and drives the simulation once per frame."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clock: Optional[pygame.time.Clock] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.simulation = Simulation(self.settings)
        pygame.init()
        # Window fits the map plus the 3D view
        self.screen = pygame.display.set_mode(self.simulation.screen_size)
        pygame.display.set_caption("Maze Runner")
        # Clock for frame rate (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.fps = FPS
        self.renderer = Renderer()
        self.input = InputHandler()
        self.running = True

    def step(self, dt: float) -> None:
        """Run one frame: input, update, draw."""
        self.input.process_events()
        if self.input.should_quit():
            self.running = False
            return
        self.simulation.tick(dt, self.input.get_controls())
        self.renderer.draw(self.screen, self.simulation.render())
        pygame.display.flip()

    def run(self) -> None:
        """Main loop until the window is closed or Escape is pressed."""
        logger.info("Starting main loop at %d FPS", self.fps)
        while self.running:
            # Cap the frame rate and compute delta time in seconds
            dt = self.clock.tick(self.fps) / 1000.0
            self.step(dt)
        logger.info("Shutting down")
        pygame.quit()
