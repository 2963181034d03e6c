"""
Input handling abstraction to decouple Pygame input from the viewer logic.
"""

from __future__ import annotations
import pygame
from typing import Optional, Tuple


class InputHandler:
    """
    Processes Pygame events once per frame and exposes the actions the
    viewer cares about: quit, reset, and grid cells picked with the mouse.
    """

    def __init__(self, cell_size: int) -> None:
        self.cell_size = cell_size
        self._quit = False
        self._reset = False
        # Cells clicked this frame, None if no click
        self._start_click: Optional[Tuple[int, int]] = None
        self._target_click: Optional[Tuple[int, int]] = None

    def process_events(self) -> None:
        """Poll Pygame events and update the per-frame action state."""
        self._quit = False
        self._reset = False
        self._start_click = None
        self._target_click = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_x, pygame.K_ESCAPE):
                    self._quit = True
                elif event.key == pygame.K_r:
                    self._reset = True
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:
                    self._start_click = self.cell_at(event.pos)
                elif event.button == 3:
                    self._target_click = self.cell_at(event.pos)

    def cell_at(self, pos: Tuple[int, int]) -> Tuple[int, int]:
        """Convert a pixel position to the grid cell under it."""
        return pos[0] // self.cell_size, pos[1] // self.cell_size

    def should_quit(self) -> bool:
        """Return True if a quit command was issued this frame."""
        return self._quit

    def reset_pressed(self) -> bool:
        """Return True if R was pressed this frame."""
        return self._reset

    def start_clicked(self) -> Optional[Tuple[int, int]]:
        """Cell picked as the new start (left click), if any."""
        return self._start_click

    def target_clicked(self) -> Optional[Tuple[int, int]]:
        """Cell picked as the new target (right click), if any."""
        return self._target_click
