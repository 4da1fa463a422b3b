"""
Sudoku Solver Module.

This module implements Sudoku puzzle solving by depth-first backtracking
over the empty tiles in storage order, pruning each tile's digits with a
bitmask of the values already present in its row, column and box.
"""

import sys
import time
import logging
from typing import Dict, List, Optional

from . import SolverBase, SolveState
from .bitmask import full_mask, iter_bits, set_bit
from .grid import SudokuGrid
from config.default_fallbacks import DEFAULT_ERROR_MESSAGES
from config.settings import get_settings
from utils.error_handling import InvalidPuzzleError
from utils.validation import validate_sudoku_rules

# Configure logging
logger = logging.getLogger(__name__)

# Frames kept free for callers when the recursion limit is raised
RECURSION_HEADROOM = 200

SearchStats = Dict[str, int]


def possible(grid: SudokuGrid, tileno: int) -> int:
    """
    Compute which digits are possible at a tile.

    Args:
        grid: Current state of the grid
        tileno: Flat index of the tile

    Returns:
        Bitmask where bit n set means digit n may be placed
    """
    row, col = divmod(tileno, grid.row_width)

    bad = 0
    for n in grid.iter_row(row):
        bad = set_bit(bad, n)
    for n in grid.iter_col(col):
        bad = set_bit(bad, n)
    for n in grid.iter_cell(row, col):
        bad = set_bit(bad, n)

    # bit 0 may be set by empty tiles; the full mask never includes it
    return full_mask(grid.row_width) & ~bad


def candidates(grid: SudokuGrid, tileno: int) -> List[int]:
    """List the digits possible at a tile, ascending."""
    return list(iter_bits(possible(grid, tileno), grid.row_width))


def solve(grid: SudokuGrid, stats: Optional[SearchStats] = None) -> SolveState:
    """
    Solve ``grid`` in place.

    Args:
        grid: Grid to fill (0 for empty)
        stats: Optional dict receiving a "placements" counter

    Returns:
        SolveState.SOLVED with every tile filled, or SolveState.UNSOLVED
        with the grid back in its original state
    """
    if stats is not None:
        stats.setdefault("placements", 0)

    first_empty = grid.find_empty()
    if first_empty < 0:
        return SolveState.SOLVED
    return solve_at(grid, first_empty, stats)


def ensure_recursion_depth(grid: SudokuGrid) -> None:
    """Raise the interpreter recursion limit so a search of ``grid`` fits."""
    # one frame per empty tile
    empty = grid.size - int((grid.tiles != 0).sum())
    needed = empty + RECURSION_HEADROOM
    if needed > sys.getrecursionlimit():
        logger.debug(f"Raising recursion limit to {needed} for {empty} empty tiles")
        sys.setrecursionlimit(needed)


def solve_at(grid: SudokuGrid, tileno: int, stats: Optional[SearchStats] = None) -> SolveState:
    """
    Recursive backtracking step at an empty tile.

    Tries each possible digit in ascending order and recurses into the next
    empty tile. The tile is reset to 0 when no digit leads to a solution.
    """
    tries = possible(grid, tileno)
    next_tile = grid.find_empty(tileno + 1)

    for num in iter_bits(tries, grid.row_width):
        grid[tileno] = num
        if stats is not None:
            stats["placements"] += 1

        if next_tile < 0:
            return SolveState.SOLVED
        if solve_at(grid, next_tile, stats).is_solved():
            return SolveState.SOLVED

    grid[tileno] = 0
    return SolveState.UNSOLVED


class BacktrackingSolver(SolverBase):
    """
    Backtracking-based Sudoku solver.

    This class wraps the search with settings, logging and optional
    verification of the solved grid.
    """

    def __init__(self):
        """Initialize backtracking solver from the solver settings."""
        self.settings = get_settings().get_nested("solver")

        # Solver settings
        self.validate_solution = self.settings.get("validate_solution", True)
        self.raise_recursion_limit = self.settings.get("raise_recursion_limit", True)

        self.last_placements = 0
        self.last_solving_time = 0.0

    def solve(self, grid: SudokuGrid) -> SolveState:
        """
        Solve a Sudoku puzzle in place.

        Args:
            grid: Grid with initial values (0 for empty)

        Returns:
            Terminal search state
        """
        if self.raise_recursion_limit:
            ensure_recursion_depth(grid)

        logger.info(f"Solving {grid.row_width}x{grid.row_width} puzzle")

        stats: SearchStats = {}
        start_time = time.perf_counter()
        state = solve(grid, stats)
        self.last_solving_time = time.perf_counter() - start_time
        self.last_placements = stats["placements"]

        logger.info(f"Search finished: {state} in {self.last_solving_time:.4f} seconds")
        logger.debug(f"Placements tried: {self.last_placements}")

        if state.is_solved() and self.validate_solution:
            try:
                validate_sudoku_rules(grid, check_zeros=True)
            except InvalidPuzzleError as e:
                # only reachable when the given digits already conflict
                logger.error(f"{DEFAULT_ERROR_MESSAGES['verification_failed']} ({str(e)})")

        return state
