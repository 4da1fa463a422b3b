"""
Puzzle input parsing.

Puzzles are stored as delimited text: one board row per line, an empty
field for an empty tile and a non-negative integer otherwise.
"""

import logging
from typing import List

from models.grid import SudokuGrid
from utils.error_handling import InvalidDigitError

# Configure logging
logger = logging.getLogger(__name__)


def parse_tiles(text: str, delimiter: str = ",") -> List[int]:
    """
    Parse delimited text into a flat list of tile values.

    Args:
        text: Puzzle text
        delimiter: Field separator

    Returns:
        Tile values in row-major order

    Raises:
        InvalidDigitError: If a field is not a non-negative integer
    """
    tiles: List[int] = []

    for line_no, line in enumerate(text.splitlines(), start=1):
        for field in line.split(delimiter):
            field = field.strip()
            if not field:
                tiles.append(0)
                continue

            try:
                value = int(field)
            except ValueError as e:
                raise InvalidDigitError(field, line_no) from e

            # int() also accepts signs, underscores and non-ASCII digits
            if not (field.isascii() and field.isdigit()):
                raise InvalidDigitError(field, line_no)
            tiles.append(value)

    return tiles


def parse_grid(text: str, delimiter: str = ",") -> SudokuGrid:
    """
    Parse delimited text into a validated grid.

    Raises:
        InvalidDigitError: If a field is not a non-negative integer
        NonSquareError: If the tile count is not a perfect fourth power
        DigitOutOfRangeError: If a value exceeds the board width
    """
    grid = SudokuGrid(parse_tiles(text, delimiter))
    logger.debug(f"Parsed {grid.row_width}x{grid.row_width} grid")
    return grid


def read_grid_file(file_path: str, delimiter: str = ",") -> SudokuGrid:
    """Read and parse a puzzle file. OSError propagates to the caller."""
    logger.info(f"Reading puzzle from {file_path}")
    with open(file_path, 'r', encoding='utf-8') as f:
        text = f.read()
    return parse_grid(text, delimiter)


def format_grid_csv(grid: SudokuGrid, delimiter: str = ",") -> str:
    """Write a grid back in the input format, empty tiles as empty fields."""
    lines = []
    for row in range(grid.row_width):
        lines.append(delimiter.join(str(v) if v else "" for v in grid.iter_row(row)))
    return "\n".join(lines) + "\n"
