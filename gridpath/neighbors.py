"""
Neighbor discovery for 4-directional movement on a row-major grid.
"""
from typing import List, Sequence


def all_neighbors(node: int, width: int, height: int) -> List[int]:
    """
    Return the orthogonal neighbors of `node` that lie inside the grid,
    in the order up, down, left, right.
    """
    neighbors = []
    # Upper and lower border
    if node >= width:
        neighbors.append(node - width)
    if node < width * (height - 1):
        neighbors.append(node + width)
    # Left and right border; rows must not wrap into each other
    if node % width != 0:
        neighbors.append(node - 1)
    if node % width != width - 1:
        neighbors.append(node + 1)
    return neighbors


def valid_neighbors(
    node: int,
    found_from: int,
    walkable: Sequence[bool],
    explored: Sequence[bool],
    width: int,
    height: int,
) -> List[int]:
    """
    Return the neighbors of `node` worth relaxing: walkable, not yet explored
    and not the cell `node` itself was reached from.
    """
    return [
        n
        for n in all_neighbors(node, width, height)
        if walkable[n] and not explored[n] and n != found_from
    ]
