#!/usr/bin/env python3
"""
Benchmark Script for the Sudoku Solver.

This script times the backtracking solver over one or more puzzle files.
"""

import sys
import argparse
import logging
from typing import List, Optional

from config import initialize_settings
from config.default_fallbacks import DEFAULT_PUZZLE
from utils.error_handling import ConfigError, SudokuParseError, log_error, setup_exception_handling
from utils.metrics import benchmark_solver, save_benchmark_report
from utils.parsing import parse_grid, read_grid_file

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Benchmark the Sudoku solver')

    parser.add_argument(
        'puzzles',
        type=str,
        nargs='*',
        help='Puzzle files to time (default: built-in puzzle)'
    )

    parser.add_argument(
        '--repeats',
        type=int,
        default=None,
        help='Runs per puzzle (default: benchmark.repeats setting)'
    )

    parser.add_argument(
        '--output-dir',
        type=str,
        default=None,
        help='Directory to save the benchmark report'
    )

    parser.add_argument(
        '--config',
        type=str,
        default='config/settings.json',
        help='Path to configuration file'
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for benchmark script."""
    args = parse_args(argv)
    setup_exception_handling()

    try:
        settings = initialize_settings(args.config)
    except ConfigError as e:
        log_error(e)
        return 2

    logging.getLogger().setLevel(settings.log_level())
    delimiter = settings.get("parser.delimiter", ",")
    repeats = args.repeats if args.repeats is not None else settings.get("benchmark.repeats", 3)

    try:
        if args.puzzles:
            grids = [read_grid_file(path, delimiter) for path in args.puzzles]
            names = list(args.puzzles)
        else:
            grids = [parse_grid(DEFAULT_PUZZLE, delimiter)]
            names = ["built-in"]
    except OSError as e:
        logger.error(f"Could not read puzzle: {str(e)}")
        return 1
    except SudokuParseError as e:
        log_error(e)
        return 2

    try:
        results = benchmark_solver(grids, repeats=repeats, names=names)
    except ValueError as e:
        logger.error(str(e))
        return 2

    print("\nSudoku Solver Benchmark:")
    print(f"Runs: {results['total_runs']} (solved {results['solved_count']}, unsolved {results['unsolved_count']})")
    print(f"Mean time: {results['mean_time']:.6f}s")
    print(f"Min time: {results['min_time']:.6f}s")
    print(f"Max time: {results['max_time']:.6f}s")

    if args.output_dir:
        save_benchmark_report(results, args.output_dir)
        print(f"Results saved to: {args.output_dir}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
