#!/usr/bin/env python3
"""
Sudoku Solver Command-line Tool.

This script reads a Sudoku puzzle from a delimited text file (or uses the
built-in puzzle) and solves it by backtracking.
"""

import os
import sys
import argparse
import logging
from typing import List, Optional

from config.default_fallbacks import DEFAULT_ERROR_MESSAGES, DEFAULT_PUZZLE
from config.settings import initialize_settings
from models.grid import SudokuGrid
from models.solver import BacktrackingSolver
from utils.error_handling import ConfigError, SudokuParseError, log_error, setup_exception_handling
from utils.parsing import format_grid_csv, parse_grid, read_grid_file
from utils.visualization import render_grid, visualize_solution

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Solve a Sudoku puzzle stored as delimited text')

    parser.add_argument(
        'input',
        type=str,
        nargs='?',
        default=None,
        help='Puzzle file, one row per line (default: built-in puzzle)'
    )

    parser.add_argument(
        '--config',
        type=str,
        default='config/settings.json',
        help='Path to configuration file'
    )

    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='Write the solved grid to this file'
    )

    parser.add_argument(
        '--save-image',
        type=str,
        default=None,
        help='Save a picture of the solution to this path'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug output'
    )

    return parser.parse_args(argv)


def configure_logging(settings, debug: bool) -> None:
    """Apply the configured log level and optional log file."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if debug else settings.log_level())

    log_file = settings.get("system.log_file")
    if log_file:
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        root.addHandler(handler)


def load_puzzle(input_path: Optional[str], delimiter: str) -> SudokuGrid:
    """Load the puzzle from a file, or the built-in one."""
    if input_path is None:
        logger.info("No input file given, using built-in puzzle")
        return parse_grid(DEFAULT_PUZZLE, delimiter)
    return read_grid_file(input_path, delimiter)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for solve script."""
    # Parse arguments
    args = parse_args(argv)

    # Set up exception handling
    setup_exception_handling()

    # Initialize settings
    try:
        settings = initialize_settings(args.config)
    except ConfigError as e:
        log_error(e)
        return 2

    configure_logging(settings, args.debug)
    delimiter = settings.get("parser.delimiter", ",")
    blank = settings.get("renderer.show_blank_as", " ")

    # Read input
    try:
        sudoku = load_puzzle(args.input, delimiter)
    except OSError as e:
        logger.error(f"{DEFAULT_ERROR_MESSAGES['input_read_failed']} ({str(e)})")
        return 1
    except SudokuParseError as e:
        log_error(e, context={"input": args.input})
        print(DEFAULT_ERROR_MESSAGES["invalid_input"], file=sys.stderr)
        return 2

    initial = sudoku.copy()
    print(render_grid(sudoku, blank))

    # Solve puzzle
    solver = BacktrackingSolver()
    result = solver.solve(sudoku)
    print(result)

    if not result.is_solved():
        logger.info(DEFAULT_ERROR_MESSAGES["solving_failed"])
        return 0

    print(render_grid(sudoku, blank))

    try:
        if args.output:
            directory = os.path.dirname(args.output)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(format_grid_csv(sudoku, delimiter))
            logger.info(f"Solution written to {args.output}")

        if args.save_image:
            import matplotlib.pyplot as plt

            fig = visualize_solution(
                initial,
                sudoku,
                save_path=args.save_image,
                cell_size=settings.get("renderer.figure_cell_size", 0.5)
            )
            plt.close(fig)
            logger.info(f"Solution image saved to {args.save_image}")
    except OSError as e:
        logger.error(f"Failed to write results: {str(e)}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
