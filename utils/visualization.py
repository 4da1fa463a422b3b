"""
Visualization Utilities.

This module provides functions for displaying Sudoku grids as text and
as matplotlib figures.
"""

import os
from typing import List, Optional

import matplotlib.pyplot as plt

from utils.validation import GridLike, as_board


def _border(left: str, fill: str, thin: str, thick: str, right: str, cell_width: int) -> str:
    """Build one horizontal border line."""
    box = thin.join([fill * 3] * cell_width)
    return left + thick.join([box] * cell_width) + right


def render_grid(grid, blank: str = " ") -> str:
    """
    Render a grid as a bordered text board.

    Box boundaries are drawn with double lines, cell boundaries inside a
    box with single lines, and empty tiles are left blank.

    Args:
        grid: SudokuGrid to render
        blank: Text shown for empty tiles

    Returns:
        Multi-line string
    """
    cell_width = grid.cell_width
    row_width = grid.row_width

    top_border = _border("╔", "═", "╤", "╦", "╗", cell_width)
    bottom_border = _border("╚", "═", "╧", "╩", "╝", cell_width)
    row_sep = _border("╟", "─", "┼", "╫", "╢", cell_width)
    cell_row_sep = _border("╠", "═", "╪", "╬", "╣", cell_width)

    lines: List[str] = [top_border]
    for y in range(row_width):
        line = "║"
        for x, cell in enumerate(grid.iter_row(y)):
            line += f"{blank if cell == 0 else cell:^3}"
            line += "║" if x % cell_width == cell_width - 1 else "│"
        lines.append(line)

        # write row separator
        if y != row_width - 1:
            lines.append(cell_row_sep if y % cell_width == cell_width - 1 else row_sep)

    lines.append(bottom_border)
    return "\n".join(lines)


def visualize_solution(
    initial_grid: GridLike,
    solved_grid: GridLike,
    save_path: Optional[str] = None,
    show: bool = False,
    cell_size: float = 0.5
):
    """
    Visualize Sudoku solution.

    Args:
        initial_grid: Initial digit grid
        solved_grid: Solved digit grid
        save_path: Path to save visualization (optional)
        show: Whether to show visualization
        cell_size: Size of each cell in inches

    Returns:
        matplotlib Figure
    """
    initial = as_board(initial_grid)
    solved = as_board(solved_grid)
    grid_size = solved.shape[0]
    box_size = int(round(grid_size ** 0.5))

    fig, ax = plt.subplots(figsize=(grid_size * cell_size, grid_size * cell_size))
    ax.set_xlim(0, grid_size)
    ax.set_ylim(grid_size, 0)
    ax.set_aspect('equal')
    ax.axis('off')

    # Draw digits
    font_size = max(6, int(cell_size * 28))
    for i in range(grid_size):
        for j in range(grid_size):
            solved_digit = int(solved[i, j])
            if solved_digit == 0:
                continue

            # Black for initial digits, green for solved digits
            color = "black" if initial[i, j] != 0 else "green"
            ax.text(
                j + 0.5, i + 0.5, str(solved_digit),
                ha='center', va='center', fontsize=font_size, color=color
            )

    # Draw grid lines, thicker for box boundaries
    for i in range(grid_size + 1):
        width = 2.0 if i % box_size == 0 else 0.5
        ax.plot([0, grid_size], [i, i], color='black', linewidth=width)
        ax.plot([i, i], [0, grid_size], color='black', linewidth=width)

    # Save visualization if requested
    if save_path:
        directory = os.path.dirname(save_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fig.savefig(save_path, bbox_inches='tight')

    # Show visualization if requested
    if show:
        plt.show()

    return fig
