import pygame

from gridpath.grid import Grid
from gridpath.renderer import GridRenderer
from gridpath.config import (
    WALKABLE_COLOR,
    BLOCKED_COLOR,
    PATH_COLOR,
    START_COLOR,
    TARGET_COLOR,
    GRID_LINE_COLOR,
)


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_surface_size():
    renderer = GridRenderer(cell_size=10)
    assert renderer.surface_size(Grid(4, 3, [1] * 12)) == (40, 30)


def test_render_cells_path_and_endpoints():
    grid = Grid(3, 1, [1, 1, 0])
    renderer = GridRenderer(cell_size=10, line_width=0)
    surface = pygame.Surface(renderer.surface_size(grid))
    renderer.render(surface, grid, path=[(0, 0), (1, 0)], start=(0, 0), target=(1, 0))
    # Blocked cell keeps its color
    assert rgb(surface, (25, 5)) == BLOCKED_COLOR
    # Endpoints drawn inset over the path color
    assert rgb(surface, (5, 5)) == START_COLOR
    assert rgb(surface, (15, 5)) == TARGET_COLOR
    assert rgb(surface, (0, 0)) == PATH_COLOR
    assert rgb(surface, (10, 0)) == PATH_COLOR


def test_render_without_path():
    grid = Grid(2, 1, [1, 0])
    renderer = GridRenderer(cell_size=10, line_width=0)
    surface = pygame.Surface(renderer.surface_size(grid))
    renderer.render(surface, grid)
    assert rgb(surface, (5, 5)) == WALKABLE_COLOR
    assert rgb(surface, (15, 5)) == BLOCKED_COLOR


def test_render_grid_lines():
    grid = Grid(2, 1, [1, 1])
    renderer = GridRenderer(cell_size=10, line_width=1)
    surface = pygame.Surface(renderer.surface_size(grid))
    renderer.render(surface, grid)
    assert rgb(surface, (10, 5)) == GRID_LINE_COLOR
    assert rgb(surface, (5, 5)) == WALKABLE_COLOR
