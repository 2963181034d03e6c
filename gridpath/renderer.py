"""
Pygame renderer: draws the grid, the current path and its endpoints.
"""

from __future__ import annotations
import pygame
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from .config import (
    CELL_SIZE,
    GRID_LINE_WIDTH,
    WALKABLE_COLOR,
    BLOCKED_COLOR,
    GRID_LINE_COLOR,
    PATH_COLOR,
    START_COLOR,
    TARGET_COLOR,
)

if TYPE_CHECKING:
    from .grid import Grid


class GridRenderer:
    """Draws a Grid onto any pygame Surface, one square per cell."""

    def __init__(
        self, cell_size: int = CELL_SIZE, line_width: int = GRID_LINE_WIDTH
    ) -> None:
        self.cell_size = cell_size
        self.line_width = line_width

    def surface_size(self, grid: Grid) -> Tuple[int, int]:
        """Pixel size needed to draw the whole grid."""
        return grid.width * self.cell_size, grid.height * self.cell_size

    def cell_rect(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(
            x * self.cell_size, y * self.cell_size, self.cell_size, self.cell_size
        )

    def render(
        self,
        surface: pygame.Surface,
        grid: Grid,
        path: Sequence[Tuple[int, int]] = (),
        start: Optional[Tuple[int, int]] = None,
        target: Optional[Tuple[int, int]] = None,
    ) -> None:
        """Draw cells, then the path, then the endpoints, then grid lines."""
        for y in range(grid.height):
            for x in range(grid.width):
                color = WALKABLE_COLOR if grid.is_walkable(x, y) else BLOCKED_COLOR
                surface.fill(color, self.cell_rect(x, y))
        for x, y in path:
            surface.fill(PATH_COLOR, self.cell_rect(x, y))
        # Endpoints are drawn inset so the path color stays visible around them
        inset = self.cell_size // 4
        if start is not None:
            surface.fill(START_COLOR, self.cell_rect(*start).inflate(-inset, -inset))
        if target is not None:
            surface.fill(TARGET_COLOR, self.cell_rect(*target).inflate(-inset, -inset))
        if self.line_width > 0:
            width, height = self.surface_size(grid)
            for x in range(0, width + 1, self.cell_size):
                pygame.draw.line(
                    surface, GRID_LINE_COLOR, (x, 0), (x, height), self.line_width
                )
            for y in range(0, height + 1, self.cell_size):
                pygame.draw.line(
                    surface, GRID_LINE_COLOR, (0, y), (width, y), self.line_width
                )
