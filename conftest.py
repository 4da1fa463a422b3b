"""Shared fixtures for the Sudoku solver tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from config.settings import initialize_settings
from models.grid import SudokuGrid

# Classic 9x9 puzzle with a unique solution
PUZZLE_9 = [
    5, 3, 0, 0, 7, 0, 0, 0, 0,
    6, 0, 0, 1, 9, 5, 0, 0, 0,
    0, 9, 8, 0, 0, 0, 0, 6, 0,
    8, 0, 0, 0, 6, 0, 0, 0, 3,
    4, 0, 0, 8, 0, 3, 0, 0, 1,
    7, 0, 0, 0, 2, 0, 0, 0, 6,
    0, 6, 0, 0, 0, 0, 2, 8, 0,
    0, 0, 0, 4, 1, 9, 0, 0, 5,
    0, 0, 0, 0, 8, 0, 0, 7, 9,
]

SOLUTION_9 = [
    5, 3, 4, 6, 7, 8, 9, 1, 2,
    6, 7, 2, 1, 9, 5, 3, 4, 8,
    1, 9, 8, 3, 4, 2, 5, 6, 7,
    8, 5, 9, 7, 6, 1, 4, 2, 3,
    4, 2, 6, 8, 5, 3, 7, 9, 1,
    7, 1, 3, 9, 2, 4, 8, 5, 6,
    9, 6, 1, 5, 3, 7, 2, 8, 4,
    2, 8, 7, 4, 1, 9, 6, 3, 5,
    3, 4, 5, 2, 8, 6, 1, 7, 9,
]

PUZZLE_4 = [
    1, 0, 0, 0,
    0, 0, 3, 0,
    0, 4, 0, 0,
    0, 0, 0, 2,
]

SOLUTION_4 = [
    1, 3, 2, 4,
    4, 2, 3, 1,
    2, 4, 1, 3,
    3, 1, 4, 2,
]

# Row 1 has no place left for a 1
UNSOLVABLE_4 = [
    1, 0, 0, 0,
    0, 0, 2, 0,
    0, 0, 0, 1,
    0, 0, 0, 0,
]


def pattern_solution(cell_width):
    """Valid completed board of any size built from the shifted-row pattern."""
    n = cell_width * cell_width
    return [
        (cell_width * (r % cell_width) + r // cell_width + c) % n + 1
        for r in range(n)
        for c in range(n)
    ]


@pytest.fixture(autouse=True)
def default_settings():
    """Start every test from the built-in configuration."""
    return initialize_settings(None)


@pytest.fixture
def puzzle():
    return SudokuGrid(PUZZLE_9)


@pytest.fixture
def solution():
    return SudokuGrid(SOLUTION_9)


@pytest.fixture
def small_puzzle():
    return SudokuGrid(PUZZLE_4)


@pytest.fixture
def unsolvable():
    return SudokuGrid(UNSOLVABLE_4)


@pytest.fixture
def contradictory():
    """Solved board with two blanks and a 5 repeated in row 1 and box 0."""
    tiles = list(SOLUTION_9)
    tiles[0] = 0
    tiles[1] = 0
    tiles[10] = 5
    return SudokuGrid(tiles)
