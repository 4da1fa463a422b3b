# utils/validation.py
"""
Validation functions for Sudoku grids.
"""

import math
import logging
from typing import List, Union

import numpy as np

from utils.error_handling import InvalidPuzzleError

# Configure logging
logger = logging.getLogger(__name__)

# Define common types used in validation and elsewhere
GridType = List[List[int]]
GridLike = Union[GridType, np.ndarray, "SudokuGrid"]


# --- Validation Functions ---

def as_board(grid: GridLike) -> np.ndarray:
    """
    Convert a grid to a square 2D array.

    Args:
        grid: SudokuGrid, nested list or array.

    Returns:
        row_width x row_width integer array.

    Raises:
        InvalidPuzzleError: If the grid is not square with a square box size.
    """
    if hasattr(grid, "to_array"):
        return grid.to_array()

    board = np.asarray(grid)
    if board.ndim != 2 or board.shape[0] != board.shape[1] or board.shape[0] == 0:
        raise InvalidPuzzleError(f"Invalid grid dimensions {board.shape}. Must be a square N x N grid.")

    cell_width = math.isqrt(board.shape[0])
    if cell_width * cell_width != board.shape[0]:
        raise InvalidPuzzleError(f"Invalid grid size {board.shape[0]}. Must be a perfect square.")

    if not np.issubdtype(board.dtype, np.integer):
        raise InvalidPuzzleError(f"Invalid grid values of type {board.dtype}. Must be integers.")

    return board


def validate_grid_values(grid: GridLike) -> None:
    """
    Validate that the grid contains only integers between 0 and row_width.

    Args:
        grid: Grid representing the Sudoku puzzle.

    Raises:
        InvalidPuzzleError: If the grid has invalid dimensions or contains invalid values.
    """
    board = as_board(grid)
    n = board.shape[0]

    bad = np.argwhere((board < 0) | (board > n))
    if bad.size:
        r, c = (int(v) for v in bad[0])
        raise InvalidPuzzleError(f"Invalid value '{board[r, c]}' at grid position ({r}, {c}). Must be integer 0-{n}.")


def _check_unique(values: np.ndarray, check_zeros: bool, where: str) -> None:
    if not check_zeros:
        values = values[values != 0]
    uniq, counts = np.unique(values, return_counts=True)
    dupes = uniq[counts > 1]
    if dupes.size:
        raise InvalidPuzzleError(f"Duplicate value '{int(dupes[0])}' found in {where}.")


def validate_sudoku_rules(grid: GridLike, check_zeros: bool = False) -> None:
    """
    Validate that a Sudoku grid follows the basic rules (row, column, box uniqueness).

    Args:
        grid: Grid representing the Sudoku puzzle.
        check_zeros: If True, considers 0 as an invalid duplicate (for checking solved puzzles).
                     If False, ignores 0s (for checking initial puzzles).

    Raises:
        InvalidPuzzleError: If the grid violates Sudoku rules.
    """
    board = as_board(grid)
    validate_grid_values(board)

    n = board.shape[0]
    base = math.isqrt(n)

    # Check rows
    for r in range(n):
        _check_unique(board[r, :], check_zeros, f"row {r}")

    # Check columns
    for c in range(n):
        _check_unique(board[:, c], check_zeros, f"column {c}")

    # Check boxes
    for box_r in range(0, n, base):
        for box_c in range(0, n, base):
            box = board[box_r:box_r + base, box_c:box_c + base].ravel()
            _check_unique(box, check_zeros, f"box starting at ({box_r}, {box_c})")

    logger.debug(f"Sudoku rules validation passed (check_zeros={check_zeros}).")


def is_valid_solution(initial_grid: GridLike, solved_grid: GridLike) -> bool:
    """
    Check if a Sudoku solution is valid.

    Args:
        initial_grid: Initial Sudoku grid
        solved_grid: Solved Sudoku grid

    Returns:
        True if solution is complete, follows the rules and keeps the givens
    """
    try:
        initial = as_board(initial_grid)
        solved = as_board(solved_grid)
    except InvalidPuzzleError:
        return False

    if initial.shape != solved.shape:
        return False

    # Check if solved grid is complete
    if np.any(solved == 0):
        return False

    # Check if solved grid respects initial values
    givens = initial != 0
    if not np.array_equal(initial[givens], solved[givens]):
        return False

    try:
        validate_sudoku_rules(solved, check_zeros=True)
    except InvalidPuzzleError:
        return False

    return True
