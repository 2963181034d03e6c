import pytest

from gridpath.neighbors import all_neighbors, valid_neighbors


@pytest.mark.parametrize(
    "node,expected",
    [
        (0, [4, 1]),  # top-left corner: down, right
        (3, [7, 2]),  # top-right corner: down, left
        (8, [4, 9]),  # bottom-left corner: up, right
        (11, [7, 10]),  # bottom-right corner: up, left
        (5, [1, 9, 4, 6]),  # interior: up, down, left, right
        (4, [0, 8, 5]),  # left border must not wrap to index 3
        (7, [3, 11, 6]),  # right border must not wrap to index 8
    ],
)
def test_all_neighbors_4x3(node, expected):
    assert all_neighbors(node, 4, 3) == expected


def test_all_neighbors_single_cell():
    assert all_neighbors(0, 1, 1) == []


def test_all_neighbors_single_row():
    assert all_neighbors(0, 3, 1) == [1]
    assert all_neighbors(1, 3, 1) == [0, 2]


def test_valid_neighbors_filters_blocked_explored_and_origin():
    walkable = [True] * 9
    walkable[1] = False
    explored = [False] * 9
    explored[7] = True
    # Interior cell 4 of a 3x3 grid: candidates 1, 7, 3, 5
    assert valid_neighbors(4, 3, walkable, explored, 3, 3) == [5]


def test_valid_neighbors_keeps_order():
    walkable = [True] * 9
    explored = [False] * 9
    assert valid_neighbors(4, 4, walkable, explored, 3, 3) == [1, 7, 3, 5]
