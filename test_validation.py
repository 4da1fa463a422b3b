"""Tests for rule checking and solution verification."""

import pytest

from conftest import PUZZLE_9, SOLUTION_9, pattern_solution
from models.grid import SudokuGrid
from utils.error_handling import InvalidPuzzleError
from utils.validation import as_board, is_valid_solution, validate_grid_values, validate_sudoku_rules


def test_valid_puzzle_passes(puzzle):
    validate_sudoku_rules(puzzle)


def test_zeros_fail_when_checked(puzzle):
    with pytest.raises(InvalidPuzzleError):
        validate_sudoku_rules(puzzle, check_zeros=True)


def test_duplicate_in_row():
    tiles = list(PUZZLE_9)
    tiles[2] = 5
    with pytest.raises(InvalidPuzzleError, match="row 0"):
        validate_sudoku_rules(SudokuGrid(tiles))


def test_duplicate_in_column():
    tiles = list(PUZZLE_9)
    tiles[9 * 8] = 5
    with pytest.raises(InvalidPuzzleError, match="column 0"):
        validate_sudoku_rules(SudokuGrid(tiles))


def test_duplicate_in_box_only():
    tiles = [0] * 16
    tiles[0] = 1
    tiles[5] = 1
    with pytest.raises(InvalidPuzzleError, match="box"):
        validate_sudoku_rules(SudokuGrid(tiles))


def test_nested_lists_of_any_size():
    tiles = pattern_solution(4)
    board = [tiles[r * 16:(r + 1) * 16] for r in range(16)]
    validate_sudoku_rules(board, check_zeros=True)


def test_rejects_non_square_lists():
    with pytest.raises(InvalidPuzzleError):
        as_board([[1, 2, 3], [1, 2, 3]])
    with pytest.raises(InvalidPuzzleError):
        as_board([[0] * 6 for _ in range(6)])


def test_value_range():
    board = [[0] * 4 for _ in range(4)]
    board[2][1] = 5
    with pytest.raises(InvalidPuzzleError, match=r"\(2, 1\)"):
        validate_grid_values(board)


def test_is_valid_solution(puzzle, solution):
    assert is_valid_solution(puzzle, solution)
    assert not is_valid_solution(puzzle, puzzle)


def test_solution_must_keep_givens(puzzle):
    # a different valid board does not match the givens
    other = SudokuGrid(pattern_solution(3))
    assert not is_valid_solution(puzzle, other)


def test_solution_size_mismatch(puzzle):
    assert not is_valid_solution(puzzle, SudokuGrid(pattern_solution(2)))


def test_solution_with_repeats():
    tiles = list(SOLUTION_9)
    tiles[0], tiles[1] = tiles[1], tiles[0]
    assert not is_valid_solution(SudokuGrid([0] * 81), SudokuGrid(tiles))
