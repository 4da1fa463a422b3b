"""
Sudoku Solver Core Models.

This module provides the shared types and the abstract solver interface.
"""

import abc
import enum
from typing import Sequence, Tuple, Union

import numpy as np

# Define common types
TileSequence = Union[Sequence[int], np.ndarray]  # Flat row-major cell values
CoordType = Tuple[int, int]  # (row, col)


class SolveState(enum.Enum):
    """Terminal outcome of a search."""

    SOLVED = "Solved"
    UNSOLVED = "Unsolved"

    def is_solved(self) -> bool:
        return self is SolveState.SOLVED

    def __str__(self) -> str:
        return self.value


class SolverBase(abc.ABC):
    """Abstract base class for Sudoku solvers."""

    @abc.abstractmethod
    def solve(self, grid: "SudokuGrid") -> SolveState:
        """
        Solve a Sudoku puzzle in place.

        Args:
            grid: Grid with initial values (0 for empty)

        Returns:
            SolveState.SOLVED with the grid filled in, or
            SolveState.UNSOLVED with the grid left as it was given
        """
        pass


from .grid import SudokuGrid  # noqa: E402
