from __future__ import annotations
import logging
import pygame
from typing import List, Optional, Tuple

from .grid import Grid
from .renderer import GridRenderer
from .input_handler import InputHandler
from .config import CELL_SIZE, FPS, WINDOW_CAPTION

logger = logging.getLogger(__name__)


class Viewer:
    """Interactive window: pick start and target cells and watch the path update."""

    def __init__(
        self,
        grid: Optional[Grid] = None,
        clock: Optional[pygame.time.Clock] = None,
    ) -> None:
        pygame.init()
        self.grid = grid or Grid.load()
        self.renderer = GridRenderer(cell_size=CELL_SIZE)
        self.screen = pygame.display.set_mode(self.renderer.surface_size(self.grid))
        pygame.display.set_caption(WINDOW_CAPTION)
        # Clock for frame rate (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.fps = FPS
        self.input = InputHandler(CELL_SIZE)
        self.start: Tuple[int, int] = (0, 0)
        self.target: Tuple[int, int] = (0, 0)
        self.path: List[Tuple[int, int]] = []
        self.reset()
        # Control flag
        self.running = True

    def reset(self) -> None:
        """Restore the map's default endpoints (or the opposite corners)."""
        self.start = self.grid.start or (0, 0)
        self.target = self.grid.target or (self.grid.width - 1, self.grid.height - 1)
        self.update_path()

    def update_path(self) -> None:
        """Re-run the query for the current endpoints."""
        self.path = self.grid.find_path(self.start, self.target)
        if self.path:
            logger.info(
                "Path %s -> %s: %d steps",
                self.start, self.target, len(self.path) - 1,
            )
        else:
            logger.info("No path %s -> %s", self.start, self.target)

    def handle_events(self) -> None:
        """Process input events via InputHandler and apply picked endpoints."""
        self.input.process_events()
        if self.input.should_quit():
            self.running = False
            return
        if self.input.reset_pressed():
            self.reset()
            return
        changed = False
        start = self.input.start_clicked()
        if start is not None and self.grid.in_bounds(*start):
            self.start = start
            changed = True
        target = self.input.target_clicked()
        if target is not None and self.grid.in_bounds(*target):
            self.target = target
            changed = True
        if changed:
            self.update_path()

    def render(self) -> None:
        self.renderer.render(
            self.screen, self.grid, self.path, self.start, self.target
        )
        pygame.display.flip()

    def run(self) -> None:
        """Main loop: handle events and redraw until the window is closed."""
        while self.running:
            self.clock.tick(self.fps)
            self.handle_events()
            self.render()
        pygame.quit()
