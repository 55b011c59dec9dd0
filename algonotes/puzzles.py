"""Board puzzles solved by backtracking: N-Queens, rat in a maze, Sudoku."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_MAZE_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))
_SUDOKU_DIGITS = "123456789"
_EMPTY = "."


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError(f"board size must not be negative, got {n}")


def n_queens(n: int) -> list[list[str]]:
    """Return every N-Queens board, placing queens row by row.

    Each board is a list of ``n`` strings made of ``'Q'`` and ``'.'``.
    """
    _check_size(n)
    solutions: list[list[str]] = []
    columns: list[int] = []

    def is_safe(row: int, col: int) -> bool:
        return all(
            c != col and abs(c - col) != row - r for r, c in enumerate(columns)
        )

    def place(row: int) -> None:
        if row == n:
            solutions.append(["." * c + "Q" + "." * (n - c - 1) for c in columns])
            return
        for col in range(n):
            if is_safe(row, col):
                columns.append(col)
                place(row + 1)
                columns.pop()

    place(0)
    return solutions


def n_queens_by_column(n: int) -> list[list[str]]:
    """Return every N-Queens board, placing queens column by column.

    Occupied rows and diagonals are tracked in sets, so each placement
    is checked in constant time.
    """
    _check_size(n)
    solutions: list[list[str]] = []
    rows_of: list[int] = []
    used_rows: set[int] = set()
    used_sums: set[int] = set()
    used_diffs: set[int] = set()

    def render() -> list[str]:
        grid = [["."] * n for _ in range(n)]
        for col, row in enumerate(rows_of):
            grid[row][col] = "Q"
        return ["".join(line) for line in grid]

    def place(col: int) -> None:
        if col == n:
            solutions.append(render())
            return
        for row in range(n):
            if row in used_rows or row + col in used_sums or col - row in used_diffs:
                continue
            used_rows.add(row)
            used_sums.add(row + col)
            used_diffs.add(col - row)
            rows_of.append(row)
            place(col + 1)
            rows_of.pop()
            used_rows.discard(row)
            used_sums.discard(row + col)
            used_diffs.discard(col - row)

    place(0)
    return solutions


def format_boards(boards: Iterable[Sequence[str]]) -> str:
    """Render boards one row per line, with a blank line after each board."""
    return "".join("".join(f"{row}\n" for row in board) + "\n" for board in boards)


def rat_in_maze(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path from the top-left to the bottom-right cell.

    Open cells hold 1. Paths are strings of the moves ``D``, ``L``, ``R``
    and ``U``; a path never visits a cell twice. Paths come out in the
    order D, L, R, U is tried, which is also alphabetical order.
    """
    n = len(maze)
    if n == 0 or maze[0][0] != 1:
        return []

    paths: list[str] = []
    visited: set[tuple[int, int]] = set()

    def walk(i: int, j: int, path: str) -> None:
        if i == n - 1 and j == n - 1:
            paths.append(path)
            return
        visited.add((i, j))
        for letter, di, dj in _MAZE_MOVES:
            ni, nj = i + di, j + dj
            if (
                0 <= ni < n
                and 0 <= nj < n
                and (ni, nj) not in visited
                and maze[ni][nj] == 1
            ):
                walk(ni, nj, path + letter)
        visited.discard((i, j))

    walk(0, 0, "")
    return paths


def _sudoku_fits(board: list[list[str]], row: int, col: int, digit: str) -> bool:
    box_row, box_col = 3 * (row // 3), 3 * (col // 3)
    for i in range(9):
        if board[i][col] == digit or board[row][i] == digit:
            return False
        if board[box_row + i // 3][box_col + i % 3] == digit:
            return False
    return True


def _sudoku_fill(board: list[list[str]]) -> bool:
    for row in range(9):
        for col in range(9):
            if board[row][col] != _EMPTY:
                continue
            for digit in _SUDOKU_DIGITS:
                if _sudoku_fits(board, row, col, digit):
                    board[row][col] = digit
                    if _sudoku_fill(board):
                        return True
                    board[row][col] = _EMPTY
            return False
    return True


def solve_sudoku(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """Return a solved copy of a 9x9 Sudoku board.

    Empty cells are ``'.'``. The input is left untouched. Raises
    ``ValueError`` if the board is malformed or has no solution.
    """
    grid = [list(row) for row in board]
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("a Sudoku board must be 9 rows of 9 cells")
    allowed = set(_SUDOKU_DIGITS) | {_EMPTY}
    for row in grid:
        for cell in row:
            if cell not in allowed:
                raise ValueError(f"invalid Sudoku cell {cell!r}")
    if not _sudoku_fill(grid):
        raise ValueError("the Sudoku board has no solution")
    return grid