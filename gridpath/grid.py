from __future__ import annotations
import os
import json
from typing import List, Optional, Sequence, Tuple

from .addressing import to_index, to_point
from .config import MAP_FILE
from .pathfinding import InvalidQueryError, find_path, walkable_cells

Point = Tuple[int, int]


class Grid:
    """Fixed-size walkability grid, loaded from a JSON map file or built from rows."""

    def __init__(
        self,
        width: int,
        height: int,
        cells: Sequence[int],
        start: Optional[Point] = None,
        target: Optional[Point] = None,
    ) -> None:
        self.width = width
        self.height = height
        # Flat row-major walkability flags, read-only for the grid's lifetime
        self.cells = walkable_cells(cells, width, height)
        self.cells.setflags(write=False)
        # Optional default endpoints (used by the viewer)
        self.start = start
        self.target = target

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[int]],
        start: Optional[Point] = None,
        target: Optional[Point] = None,
    ) -> Grid:
        """Build a grid from a list of rows, top row first (nonzero = walkable)."""
        height = len(rows)
        width = len(rows[0]) if height > 0 else 0
        for y, row in enumerate(rows):
            if len(row) != width:
                raise InvalidQueryError(
                    f"row {y} has {len(row)} cells, expected {width}"
                )
        cells = [cell for row in rows for cell in row]
        return cls(width, height, cells, start=start, target=target)

    @classmethod
    def load(cls, path: Optional[str] = None) -> Grid:
        """
        Load a grid from a JSON map file (default: MAP_FILE next to this package).
        The document holds either "width", "height" and a flat "map", or a
        list of "rows"; "start" and "target" are optional [x, y] pairs.
        """
        if path is None:
            path = os.path.join(os.path.dirname(__file__), MAP_FILE)
        try:
            with open(path, "r") as f:
                data = json.load(f)
            start = _parse_point(data.get("start"))
            target = _parse_point(data.get("target"))
            if "rows" in data:
                return cls.from_rows(data["rows"], start=start, target=target)
            return cls(
                int(data["width"]),
                int(data["height"]),
                data["map"],
                start=start,
                target=target,
            )
        except Exception as e:
            raise RuntimeError(f"Failed to load grid map from {path}: {e}")

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def index_of(self, x: int, y: int) -> int:
        return to_index(x, y, self.width)

    def point_of(self, index: int) -> Point:
        return to_point(index, self.width)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_walkable(self, x: int, y: int) -> bool:
        """Return True if (x, y) is inside the grid and walkable."""
        if not self.in_bounds(x, y):
            return False
        return bool(self.cells[self.index_of(x, y)])

    def is_wall(self, x: int, y: int) -> bool:
        """Return True if (x, y) is blocked or out of bounds."""
        return not self.is_walkable(x, y)

    def find_path(
        self, start: Point, target: Point, max_steps: Optional[int] = None
    ) -> List[Point]:
        """
        Return the shortest path from start to target as (x, y) points,
        start and target inclusive, or an empty list if the target is
        unreachable or further than max_steps (default: any length).
        """
        start = (int(start[0]), int(start[1]))
        target = (int(target[0]), int(target[1]))
        if start == target and self.in_bounds(*start):
            return [start]
        size = self.cell_count if max_steps is None else max_steps
        if size < 1:
            return []
        buffer = [0] * size
        steps = find_path(
            start, target, self.cells, self.width, self.height, buffer
        )
        if steps < 0:
            return []
        return [start] + [self.point_of(i) for i in buffer[:steps]]


def _parse_point(value) -> Optional[Point]:
    if value is None:
        return None
    x, y = value
    return int(x), int(y)
