"""Matrix routines: rotation, zero propagation and spiral traversal."""

from __future__ import annotations

from collections.abc import Sequence


def rotate_image(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a square matrix rotated 90 degrees clockwise.

    Raises ``ValueError`` if the matrix is not square.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("only square matrices can be rotated")
    return [list(row) for row in zip(*reversed(matrix))]


def set_zeroes(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy where every row and column holding a zero is all zeroes."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    return [
        [0 if i in zero_rows or j in zero_cols else value for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]


def set_zeroes_constant_space(matrix: list[list[int]]) -> None:
    """Zero every row and column holding a zero, in place.

    The first row and column serve as markers, so no extra storage
    beyond one flag is used.
    """
    if not matrix or not matrix[0]:
        return
    rows, cols = len(matrix), len(matrix[0])
    first_col_zero = False
    for i in range(rows):
        for j in range(cols):
            if matrix[i][j] == 0:
                matrix[i][0] = 0
                if j != 0:
                    matrix[0][j] = 0
                else:
                    first_col_zero = True
    for i in range(1, rows):
        for j in range(1, cols):
            if matrix[i][0] == 0 or matrix[0][j] == 0:
                matrix[i][j] = 0
    if matrix[0][0] == 0:
        matrix[0] = [0] * cols
    if first_col_zero:
        for row in matrix:
            row[0] = 0


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of ``matrix`` in clockwise spiral order."""
    if not matrix or not matrix[0]:
        return []
    result: list[int] = []
    top, left = 0, 0
    bottom, right = len(matrix) - 1, len(matrix[0]) - 1
    while top <= bottom and left <= right:
        result.extend(matrix[top][left : right + 1])
        top += 1
        result.extend(matrix[i][right] for i in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][i] for i in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[i][left] for i in range(bottom, top - 1, -1))
            left += 1
    return result