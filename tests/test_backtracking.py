import copy

import pytest

from dsakit.backtracking import format_board, format_grid, solve_n_queens, solve_sudoku

SOURCE_GRID = [
    [3, 0, 6, 5, 0, 8, 4, 0, 0],
    [5, 2, 0, 0, 0, 0, 0, 0, 0],
    [0, 8, 7, 0, 0, 0, 0, 3, 1],
    [0, 0, 3, 0, 1, 0, 0, 8, 0],
    [9, 0, 0, 8, 6, 3, 0, 0, 5],
    [0, 5, 0, 0, 9, 0, 6, 0, 0],
    [1, 3, 0, 0, 0, 0, 2, 5, 0],
    [0, 0, 0, 0, 0, 0, 0, 7, 4],
    [0, 0, 5, 2, 0, 6, 3, 0, 0],
]


def _assert_valid_queens(board, n):
    assert len(board) == n
    assert all(len(row) == n and set(row) <= {0, 1} for row in board)
    queens = [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell]
    assert len(queens) == n
    assert len({r for r, _ in queens}) == n
    assert len({c for _, c in queens}) == n
    assert len({r - c for r, c in queens}) == n
    assert len({r + c for r, c in queens}) == n


@pytest.mark.parametrize("n", [1, 4, 5, 6, 8])
def test_n_queens_solution_is_valid(n):
    board = solve_n_queens(n)
    _assert_valid_queens(board, n)


@pytest.mark.parametrize("n", [2, 3])
def test_n_queens_without_solution(n):
    assert solve_n_queens(n) is None


def test_n_queens_empty_board():
    assert solve_n_queens(0) == []


def test_n_queens_rejects_negative():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def test_format_board_layout():
    assert format_board([[1, 0], [0, 1]]) == " 1  0 \n 0  1 \n"


def test_format_board_of_solution_has_one_queen_per_line():
    text = format_board(solve_n_queens(5))
    lines = text.splitlines()
    assert len(lines) == 5
    assert all(line.split().count("1") == 1 for line in lines)


def test_sudoku_source_grid_is_solved():
    original = copy.deepcopy(SOURCE_GRID)
    solved = solve_sudoku(SOURCE_GRID)
    assert SOURCE_GRID == original
    digits = set(range(1, 10))
    assert all(set(row) == digits for row in solved)
    assert all({row[c] for row in solved} == digits for c in range(9))
    for br in range(0, 9, 3):
        for bc in range(0, 9, 3):
            box = {solved[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)}
            assert box == digits
    for r, row in enumerate(SOURCE_GRID):
        for c, value in enumerate(row):
            if value:
                assert solved[r][c] == value


def test_sudoku_without_solution_returns_none():
    grid = [[0] * 9 for _ in range(9)]
    grid[0][:8] = [1, 2, 3, 4, 5, 6, 7, 8]
    grid[1][8] = 9
    assert solve_sudoku(grid) is None


def test_sudoku_rejects_bad_shape():
    with pytest.raises(ValueError):
        solve_sudoku([[0] * 9 for _ in range(8)])


def test_sudoku_rejects_bad_values():
    grid = [[0] * 9 for _ in range(9)]
    grid[4][4] = 12
    with pytest.raises(ValueError):
        solve_sudoku(grid)


def test_format_grid_round_trips_rows():
    solved = solve_sudoku(SOURCE_GRID)
    text = format_grid(solved)
    assert text.endswith(" \n")
    assert [[int(v) for v in line.split()] for line in text.splitlines()] == solved