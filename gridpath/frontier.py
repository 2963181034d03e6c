"""
Frontier of the search: a heapq priority queue whose entries can be removed
through the handle returned on insertion.

Keys are computed once, when a cell is inserted. A cell whose ordering key
changes must be removed and inserted again. Removed entries stay in the heap
marked dead and are skipped when they reach the top.
"""
from __future__ import annotations
import heapq
from typing import Any, Callable, List, Tuple


class FrontierEntry:
    """Handle for one cell queued in a Frontier."""

    __slots__ = ("key", "cell", "owner", "alive")

    def __init__(self, key: Any, cell: int, owner: Frontier) -> None:
        self.key = key
        self.cell = cell
        self.owner = owner
        # False once the entry was popped or removed
        self.alive = True

    def __repr__(self):
        return f"<FrontierEntry cell={self.cell} key={self.key} alive={self.alive}>"


class Frontier:
    """
    Priority structure ordered by key(cell), smallest first.

    Usage:
        frontier = Frontier(key=lambda cell: (cost[cell], cell))
        handle = frontier.insert(cell)
        ...
        frontier.remove(handle)
        best = frontier.pop()
    """

    def __init__(self, key: Callable[[int], Any]) -> None:
        self._key = key
        # heap of (key, count, entry); count keeps equal keys in insertion order
        self._heap: List[Tuple[Any, int, FrontierEntry]] = []
        self._count = 0
        self._live = 0

    def __len__(self) -> int:
        return self._live

    def __bool__(self) -> bool:
        return self._live > 0

    def __contains__(self, entry: FrontierEntry) -> bool:
        return entry.owner is self and entry.alive

    def is_empty(self) -> bool:
        return self._live == 0

    def insert(self, cell: int) -> FrontierEntry:
        """Queue `cell` under its current key and return the entry handle."""
        entry = FrontierEntry(self._key(cell), cell, self)
        self._count += 1
        heapq.heappush(self._heap, (entry.key, self._count, entry))
        self._live += 1
        return entry

    def remove(self, entry: FrontierEntry) -> None:
        """Remove exactly the entry identified by `entry`."""
        if entry not in self:
            raise KeyError(f"cell {entry.cell} is not queued in this frontier")
        entry.alive = False
        self._live -= 1

    def pop(self) -> int:
        """Remove and return the cell with the smallest key."""
        while self._heap:
            _, _, entry = heapq.heappop(self._heap)
            if entry.alive:
                entry.alive = False
                self._live -= 1
                return entry.cell
        raise IndexError("pop from an empty frontier")
