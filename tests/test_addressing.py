import pytest

from gridpath.addressing import to_index, to_point, manhattan


def test_to_index_row_major():
    # index = y * width + x
    assert to_index(0, 0, 4) == 0
    assert to_index(3, 0, 4) == 3
    assert to_index(0, 1, 4) == 4
    assert to_index(1, 2, 4) == 9


def test_to_point_inverse():
    assert to_point(9, 4) == (1, 2)
    assert to_point(3, 4) == (3, 0)


@pytest.mark.parametrize("width,height", [(1, 1), (4, 3), (3, 7), (10, 1)])
def test_point_index_round_trip(width, height):
    for y in range(height):
        for x in range(width):
            assert to_point(to_index(x, y, width), width) == (x, y)


def test_manhattan():
    # Manhattan distance heuristic
    assert manhattan((0, 0), (2, 3)) == 5
    assert manhattan((2, 3), (0, 0)) == 5
    assert manhattan((1, 1), (1, 1)) == 0
