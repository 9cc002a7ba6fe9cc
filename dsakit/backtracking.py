"""Backtracking solvers for the n-queens puzzle and sudoku."""

from itertools import chain

Board = list[list[int]]

_SUDOKU_SIZE = 9
_BOX = 3
_EMPTY = 0


def _queen_is_safe(board: Board, row: int, col: int) -> bool:
    if any(board[row][:col]):
        return False
    n = len(board)
    upper_left = zip(range(row, -1, -1), range(col, -1, -1))
    lower_left = zip(range(row, n), range(col, -1, -1))
    return not any(board[r][c] for r, c in chain(upper_left, lower_left))


def _place_queens(board: Board, col: int) -> bool:
    if col >= len(board):
        return True
    for row in range(len(board)):
        if _queen_is_safe(board, row, col):
            board[row][col] = 1
            if _place_queens(board, col + 1):
                return True
            board[row][col] = 0
    return False


def solve_n_queens(n: int) -> Board | None:
    """Place ``n`` queens column by column; return the 0/1 board or None."""
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n}")
    board = [[0] * n for _ in range(n)]
    return board if _place_queens(board, 0) else None


def format_board(board: Board) -> str:
    """Render a board with each cell as `` v `` and one row per line."""
    return "".join("".join(f" {cell} " for cell in row) + "\n" for row in board)


def _digit_is_safe(grid: Board, row: int, col: int, num: int) -> bool:
    if num in grid[row]:
        return False
    if any(line[col] == num for line in grid):
        return False
    box_row, box_col = row - row % _BOX, col - col % _BOX
    if any(num in line[box_col:box_col + _BOX] for line in grid[box_row:box_row + _BOX]):
        return False
    return grid[row][col] == _EMPTY


def _first_empty(grid: Board) -> tuple[int, int] | None:
    return next(
        ((r, c) for r, line in enumerate(grid) for c, value in enumerate(line) if value == _EMPTY),
        None,
    )


def _fill(grid: Board) -> bool:
    cell = _first_empty(grid)
    if cell is None:
        return True
    row, col = cell
    for num in range(1, _SUDOKU_SIZE + 1):
        if _digit_is_safe(grid, row, col, num):
            grid[row][col] = num
            if _fill(grid):
                return True
            grid[row][col] = _EMPTY
    return False


def solve_sudoku(grid: Board) -> Board | None:
    """Solve a 9x9 sudoku where 0 marks an empty cell.

    The input is left untouched; a solved copy is returned, or None when no
    solution exists.
    """
    work = [list(line) for line in grid]
    if len(work) != _SUDOKU_SIZE or any(len(line) != _SUDOKU_SIZE for line in work):
        raise ValueError("sudoku grid must be 9 x 9")
    if any(not 0 <= value <= _SUDOKU_SIZE for line in work for value in line):
        raise ValueError("sudoku cells must hold 0 to 9")
    return work if _fill(work) else None


def format_grid(grid: Board) -> str:
    """Render a grid with each value followed by a space, one row per line."""
    return "".join("".join(f"{value} " for value in line) + "\n" for line in grid)