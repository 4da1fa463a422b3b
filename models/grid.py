"""
Sudoku Grid Module.

This module implements the board storage used by the solver: a flat,
row-major array of cell values addressed as a square board and split into
row, column and box views.
"""

import math
import logging
from typing import Iterator, Union

import numpy as np

from . import CoordType, TileSequence
from utils.error_handling import DigitOutOfRangeError, InvalidDigitError, NonSquareError

# Configure logging
logger = logging.getLogger(__name__)

IndexType = Union[int, CoordType]


def _check_python_ints(values: np.ndarray, row_width: int) -> np.ndarray:
    """Range-check an object array of ints and return it as int64."""
    items = values.tolist()
    for index, value in enumerate(items):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidDigitError(f"non-integer tile value {value!r}")
        if not 0 <= value <= row_width:
            raise DigitOutOfRangeError(int(value), row_width, index)
    return np.array(items, dtype=np.int64)


class SudokuGrid:
    """
    Square Sudoku board of side ``cell_width ** 2``.

    Empty tiles are represented by 0, placed digits by 1..row_width.
    Cells are addressed either by flat index or by a (row, col) tuple.
    """

    def __init__(self, tiles: TileSequence):
        """
        Build a grid from a flat row-major sequence of cell values.

        Args:
            tiles: Sequence of length cell_width ** 4

        Raises:
            NonSquareError: If the length is not a perfect fourth power
            DigitOutOfRangeError: If a value is outside 0..row_width
            InvalidDigitError: If the values are not integers
        """
        try:
            values = np.asarray(tiles)
        except OverflowError:
            values = np.asarray(tiles, dtype=object)
        if values.ndim != 1:
            values = values.reshape(-1)

        count = int(values.size)
        row_width = math.isqrt(count)
        cell_width = math.isqrt(row_width)

        if count == 0 or cell_width ** 4 != count:
            raise NonSquareError(count)

        # ints beyond 64 bits arrive as an object array
        if values.dtype == object:
            values = _check_python_ints(values, row_width)

        if not np.issubdtype(values.dtype, np.integer):
            raise InvalidDigitError(f"non-integer tile values of type {values.dtype}")

        bad = np.flatnonzero((values < 0) | (values > row_width))
        if bad.size:
            index = int(bad[0])
            raise DigitOutOfRangeError(int(values[index]), row_width, index)

        self._tiles = values.astype(np.uint32)
        self._cell_width = cell_width
        self._row_width = row_width

    @property
    def cell_width(self) -> int:
        """Side of one box, also the number of boxes along each side."""
        return self._cell_width

    @property
    def row_width(self) -> int:
        """Side of the full board."""
        return self._row_width

    @property
    def size(self) -> int:
        return int(self._tiles.size)

    @property
    def tiles(self) -> np.ndarray:
        """Read-only view of the flat tile array."""
        view = self._tiles.view()
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        return self.size

    def _flat_index(self, key: IndexType) -> int:
        if isinstance(key, tuple):
            row, col = key
            if not (0 <= row < self._row_width and 0 <= col < self._row_width):
                raise IndexError(
                    f"index {(row, col)} out of range for board with width {self._row_width}"
                )
            return row * self._row_width + col

        if not 0 <= key < self._tiles.size:
            raise IndexError(
                f"tile {key} out of range for board with {self._tiles.size} tiles"
            )
        return key

    def __getitem__(self, key: IndexType) -> int:
        return int(self._tiles[self._flat_index(key)])

    def __setitem__(self, key: IndexType, value: int) -> None:
        index = self._flat_index(key)
        if not 0 <= value <= self._row_width:
            raise ValueError(
                f"digit {value} out of range 0..{self._row_width} for tile {index}"
            )
        self._tiles[index] = value

    def __iter__(self) -> Iterator[int]:
        """Iterate over all the tiles on the board in storage order."""
        return iter(self._tiles.tolist())

    def iter_row(self, row: int) -> Iterator[int]:
        """Iterate over row ``row``."""
        if not 0 <= row < self._row_width:
            raise IndexError(
                f"Out of bounds. Row must be less than {self._row_width}, but is {row}."
            )
        start = row * self._row_width
        return iter(self._tiles[start:start + self._row_width].tolist())

    def iter_col(self, col: int) -> Iterator[int]:
        """Iterate over column ``col``."""
        if not 0 <= col < self._row_width:
            raise IndexError(
                f"Out of bounds. Col must be less than {self._row_width}, but is {col}."
            )
        return iter(self._tiles[col::self._row_width].tolist())

    def iter_cell(self, row: int, col: int) -> Iterator[int]:
        """Iterate over the box containing (``row``, ``col``), row by row."""
        if not 0 <= row < self._row_width:
            raise IndexError(
                f"Out of bounds. Row must be less than {self._row_width}, but is {row}."
            )
        if not 0 <= col < self._row_width:
            raise IndexError(
                f"Out of bounds. Col must be less than {self._row_width}, but is {col}."
            )
        return self._box_tiles(row - row % self._cell_width, col - col % self._cell_width)

    def _box_tiles(self, top: int, left: int) -> Iterator[int]:
        # top/left are already aligned to a box corner
        width = self._cell_width
        for r in range(top, top + width):
            start = r * self._row_width + left
            yield from self._tiles[start:start + width].tolist()

    def box_index(self, row: int, col: int) -> int:
        """Index of the box holding (row, col), counting boxes row-major."""
        return (row // self._cell_width) * self._cell_width + col // self._cell_width

    def find_empty(self, start: int = 0) -> int:
        """
        Find the first empty tile at or after ``start``.

        Returns:
            Flat index of the tile, or -1 if there is none
        """
        empty = np.flatnonzero(self._tiles[start:] == 0)
        if empty.size == 0:
            return -1
        return start + int(empty[0])

    def is_complete(self) -> bool:
        return not bool(np.any(self._tiles == 0))

    def copy(self) -> "SudokuGrid":
        return SudokuGrid(self._tiles.copy())

    def to_array(self) -> np.ndarray:
        """Copy of the board as a row_width x row_width array."""
        return self._tiles.reshape(self._row_width, self._row_width).copy()

    def to_list(self):
        return self.to_array().tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuGrid):
            return NotImplemented
        return self._cell_width == other._cell_width and bool(np.array_equal(self._tiles, other._tiles))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"SudokuGrid(cell_width={self._cell_width}, tiles={self._tiles.tolist()})"

    def __str__(self) -> str:
        # Import here to avoid circular imports
        from utils.visualization import render_grid
        return render_grid(self)
