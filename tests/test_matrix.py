import copy

import pytest

from algonotes.matrix import (
    rotate_image,
    set_zeroes,
    set_zeroes_constant_space,
    spiral_order,
)

SQUARE = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
SQUARE4 = [[5, 1, 9, 11], [2, 4, 8, 10], [13, 3, 6, 7], [15, 14, 12, 16]]


@pytest.mark.parametrize("matrix", [SQUARE, SQUARE4, [[42]]])
def test_four_rotations_give_back_the_matrix(matrix):
    result = matrix
    for _ in range(4):
        result = rotate_image(result)
    assert result == matrix


@pytest.mark.parametrize("matrix", [SQUARE, SQUARE4])
def test_rotation_puts_first_column_reversed_on_top(matrix):
    rotated = rotate_image(matrix)
    assert rotated[0] == [row[0] for row in reversed(matrix)]
    assert [row[-1] for row in rotated] == matrix[0]


def test_rotate_image_rejects_non_square():
    with pytest.raises(ValueError):
        rotate_image([[1, 2, 3], [4, 5, 6]])


def test_set_zeroes_example():
    assert set_zeroes([[1, 1, 1], [1, 0, 1], [1, 1, 1]]) == [
        [1, 0, 1],
        [0, 0, 0],
        [1, 0, 1],
    ]


ZERO_CASES = [
    [[1, 1, 1], [1, 0, 1], [1, 1, 1]],
    [[0, 1, 2, 0], [3, 4, 5, 2], [1, 3, 1, 5]],
    [[1, 2], [0, 4], [5, 6]],
    [[7, 8, 9]],
    [[3, 0, 4], [5, 6, 7]],
]


@pytest.mark.parametrize("matrix", ZERO_CASES)
def test_set_zeroes_invariant(matrix):
    result = set_zeroes(matrix)
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            crossed = 0 in row or any(r[j] == 0 for r in matrix)
            assert result[i][j] == (0 if crossed else value)


@pytest.mark.parametrize("matrix", ZERO_CASES)
def test_constant_space_variant_agrees(matrix):
    expected = set_zeroes(matrix)
    work = copy.deepcopy(matrix)
    set_zeroes_constant_space(work)
    assert work == expected


def test_set_zeroes_leaves_input_untouched():
    matrix = [[1, 0], [2, 3]]
    original = copy.deepcopy(matrix)
    set_zeroes(matrix)
    assert matrix == original


def test_spiral_order_example():
    assert spiral_order(SQUARE) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


@pytest.mark.parametrize(
    "matrix",
    [SQUARE, SQUARE4, [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]], [[1], [2], [3]]],
)
def test_spiral_visits_every_cell_once(matrix):
    result = spiral_order(matrix)
    assert sorted(result) == sorted(v for row in matrix for v in row)
    assert result[: len(matrix[0])] == list(matrix[0])


def test_spiral_of_single_row_and_column():
    row = [4, 5, 6, 7]
    assert spiral_order([row]) == row
    column = [[v] for v in row]
    assert spiral_order(column) == row


def test_spiral_of_empty_matrix():
    empty = []
    assert spiral_order(empty) == empty