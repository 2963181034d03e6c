"""
Grid addressing: conversions between (x, y) points and row-major cell indices.
"""
from typing import Tuple


def to_index(x: int, y: int, width: int) -> int:
    """Return the row-major index of cell (x, y) on a grid `width` cells wide."""
    if y == 0:
        return x
    return y * width + x


def to_point(index: int, width: int) -> Tuple[int, int]:
    """Return the (x, y) point of a row-major cell index."""
    return index % width, index // width


def manhattan(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    """Manhattan distance heuristic for grid."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
