"""
Pathfinding: A* search over a row-major walkability map.

The search writes the found path into a caller-owned buffer and returns the
number of steps, or one of the negative result codes from config.
"""
from __future__ import annotations
import logging
import numbers
from enum import Enum
from typing import List, MutableSequence, Optional, Sequence, Tuple

import numpy as np

from .addressing import manhattan, to_index, to_point
from .config import BUFFER_TOO_SMALL, NO_PATH, UNDISCOVERED
from .frontier import Frontier, FrontierEntry
from .neighbors import valid_neighbors

logger = logging.getLogger(__name__)


class InvalidQueryError(ValueError):
    """Raised when a query is malformed, before any search is started."""


class SearchStatus(Enum):
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED_NO_PATH = "no_path"
    FAILED_BUFFER_TOO_SMALL = "buffer_too_small"


class SearchState:
    """Per-query bookkeeping, sized to the number of cells in the grid."""

    def __init__(self, cell_count: int) -> None:
        # True once every neighbor of the cell has been processed
        self.explored = np.zeros(cell_count, dtype=bool)
        # Steps from the start, UNDISCOVERED until the cell is reached
        self.distance = np.full(cell_count, UNDISCOVERED, dtype=np.int64)
        # Cell each cell was last reached from
        self.predecessor = np.full(cell_count, UNDISCOVERED, dtype=np.int64)
        # Live frontier entry of each cell, used to re-key it on relaxation
        self.handles: List[Optional[FrontierEntry]] = [None] * cell_count
        self.status = SearchStatus.RUNNING
        # Steps of the found path, set once the target is discovered
        self.length = -1


def _fail(message: str) -> InvalidQueryError:
    logger.error("Invalid path query: %s", message)
    return InvalidQueryError(message)


def _check_point(name: str, point: Tuple[int, int], width: int, height: int) -> None:
    x, y = point
    if not (isinstance(x, numbers.Integral) and isinstance(y, numbers.Integral)):
        raise _fail(f"{name} {tuple(point)} must have integer coordinates")
    if not (0 <= x < width and 0 <= y < height):
        raise _fail(f"{name} {tuple(point)} is outside the {width}x{height} grid")


def walkable_cells(walkable_map, width: int, height: int) -> np.ndarray:
    """Validate the map against the grid size and flatten it to booleans."""
    if width <= 0 or height <= 0:
        raise _fail(f"grid size must be positive, got {width}x{height}")
    cells = np.asarray(walkable_map)
    if cells.ndim == 2 and cells.shape != (height, width):
        raise _fail(
            f"map shape {cells.shape} does not match grid {width}x{height}"
        )
    if cells.ndim not in (1, 2) or cells.size != width * height:
        raise _fail(
            f"map holds {cells.size} cells, expected {width * height}"
        )
    return cells.ravel() != 0


def reconstruct_path(
    target: int,
    length: int,
    predecessor: Sequence[int],
    out_buffer: MutableSequence[int],
) -> None:
    """
    Write the `length` cells leading up to and including `target` into
    out_buffer[0:length], in order from the start towards the target.
    The start cell itself is not written.
    """
    node = target
    for i in range(length - 1, -1, -1):
        out_buffer[i] = node
        node = int(predecessor[node])


def search(
    start_node: int,
    target_node: int,
    walkable: Sequence[bool],
    width: int,
    height: int,
    out_buffer: MutableSequence[int],
    buffer_size: int,
) -> SearchState:
    """
    Run A* from start_node until target_node is discovered or the frontier
    runs dry. On success the path is written into out_buffer and the state's
    length holds the number of steps. Inputs are assumed valid.
    """
    state = SearchState(width * height)
    distance = state.distance
    predecessor = state.predecessor
    handles = state.handles
    target_point = to_point(target_node, width)

    def estimate(cell: int):
        # Steps so far plus the Manhattan estimate; lower index wins ties
        f = int(distance[cell]) + manhattan(to_point(cell, width), target_point)
        return f, cell

    frontier = Frontier(key=estimate)
    state.explored[start_node] = True
    predecessor[start_node] = start_node
    distance[start_node] = 0
    handles[start_node] = frontier.insert(start_node)

    while frontier:
        current = frontier.pop()
        handles[current] = None
        current_dist = int(distance[current])
        # No path through the frontier can be shorter than this one
        if current_dist > buffer_size:
            state.status = SearchStatus.FAILED_BUFFER_TOO_SMALL
            return state

        for n in valid_neighbors(
            current,
            int(predecessor[current]),
            walkable,
            state.explored,
            width,
            height,
        ):
            if distance[n] > current_dist + 1:
                predecessor[n] = current
                distance[n] = current_dist + 1
                frontier.remove(handles[n])
                handles[n] = frontier.insert(n)
            elif distance[n] == UNDISCOVERED:
                predecessor[n] = current
                distance[n] = current_dist + 1
                handles[n] = frontier.insert(n)
                if n == target_node:
                    state.length = current_dist + 1
                    if state.length > buffer_size:
                        state.status = SearchStatus.FAILED_BUFFER_TOO_SMALL
                        return state
                    reconstruct_path(n, state.length, predecessor, out_buffer)
                    state.status = SearchStatus.SUCCEEDED
                    return state

        state.explored[current] = True

    state.status = SearchStatus.FAILED_NO_PATH
    return state


def find_path(
    start: Tuple[int, int],
    target: Tuple[int, int],
    walkable_map,
    width: int,
    height: int,
    out_buffer: MutableSequence[int],
    buffer_size: Optional[int] = None,
) -> int:
    """
    Find the shortest 4-directional path from start to target.

    start, target: (x, y) grid coordinates.
    walkable_map: width*height flags in row-major order, nonzero = walkable
        (a numpy array shaped (height, width) is accepted too).
    out_buffer: caller-owned buffer receiving the path cell indices, start
        excluded and target included.
    buffer_size: usable capacity of out_buffer, defaults to its length.

    Returns the number of steps (0 when start == target, buffer untouched),
    NO_PATH if the target cannot be reached, or BUFFER_TOO_SMALL if the path
    does not fit in the buffer; out_buffer is only written on success.
    Raises InvalidQueryError for malformed input.
    """
    walkable = walkable_cells(walkable_map, width, height)
    _check_point("start", start, width, height)
    _check_point("target", target, width, height)
    if buffer_size is None:
        buffer_size = len(out_buffer)
    if buffer_size < 1:
        raise _fail(f"buffer size must be at least 1, got {buffer_size}")
    if buffer_size > len(out_buffer):
        raise _fail(
            f"buffer size {buffer_size} exceeds buffer length {len(out_buffer)}"
        )

    start_node = to_index(start[0], start[1], width)
    target_node = to_index(target[0], target[1], width)
    if start_node == target_node:
        return 0
    # If goal is not walkable, no path
    if not walkable[target_node]:
        logger.debug("Target %s is blocked, no path", tuple(target))
        return NO_PATH

    state = search(
        start_node, target_node, walkable, width, height, out_buffer, buffer_size
    )
    if state.status is SearchStatus.SUCCEEDED:
        logger.debug(
            "Path from %s to %s found: %d steps",
            tuple(start), tuple(target), state.length,
        )
        return state.length
    if state.status is SearchStatus.FAILED_BUFFER_TOO_SMALL:
        logger.info(
            "Path from %s to %s does not fit in %d cells",
            tuple(start), tuple(target), buffer_size,
        )
        return BUFFER_TOO_SMALL
    logger.debug("No path from %s to %s", tuple(start), tuple(target))
    return NO_PATH
