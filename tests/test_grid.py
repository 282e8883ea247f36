import pytest

from algobox.grid import min_flips


def test_min_flips_diagonal():
    assert min_flips([[1, 0, 0], [0, 1, 0], [0, 0, 1]]) == 3


def test_min_flips_middle_row():
    assert min_flips([[0, 1], [0, 1], [0, 0]]) == 2


def test_min_flips_lone_pair_of_ones():
    assert min_flips([[1], [1]]) == 2


def test_min_flips_all_zero():
    assert not min_flips([[0, 0, 0], [0, 0, 0]])


GRIDS = [
    [[1, 0, 0], [0, 1, 0], [0, 0, 1]],
    [[0, 1], [0, 1], [0, 0]],
    [[1, 1, 0, 1], [0, 1, 1, 0], [1, 0, 0, 1]],
    [[1, 0, 1, 1, 0]],
]


@pytest.mark.parametrize("grid", GRIDS)
def test_min_flips_mirror_invariant(grid):
    expected = min_flips(grid)
    assert min_flips(grid[::-1]) == expected
    assert min_flips([row[::-1] for row in grid]) == expected


@pytest.mark.parametrize("grid", GRIDS)
def test_min_flips_transpose_invariant(grid):
    transposed = [list(column) for column in zip(*grid)]
    assert min_flips(transposed) == min_flips(grid)


@pytest.mark.parametrize("grid", [[], [[]]])
def test_min_flips_empty(grid):
    with pytest.raises(ValueError):
        min_flips(grid)