"""
Benchmark Metrics.

This module times the solver over a set of puzzles and writes reports.
"""

import os
import time
import logging
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt

from models.grid import SudokuGrid
from models.solver import ensure_recursion_depth, solve

# Configure logging
logger = logging.getLogger(__name__)


def benchmark_solver(
    grids: Sequence[SudokuGrid],
    repeats: int = 3,
    names: Optional[Sequence[str]] = None
) -> Dict[str, Any]:
    """
    Time the solver over a set of puzzles.

    Every run works on a fresh copy, so the input grids are never modified.

    Args:
        grids: Puzzles to solve
        repeats: Number of runs per puzzle
        names: Optional label per puzzle, used in reports

    Returns:
        Dictionary with benchmark metrics
    """
    if len(grids) == 0:
        raise ValueError("Empty benchmark set")
    if repeats < 1:
        raise ValueError(f"repeats must be >= 1, got {repeats}")

    labels = list(names) if names is not None else [f"puzzle_{i + 1}" for i in range(len(grids))]

    times = np.zeros((len(grids), repeats))
    solved_count = 0
    unsolved_count = 0

    for i, grid in enumerate(grids):
        ensure_recursion_depth(grid)
        for run in range(repeats):
            working = grid.copy()
            start_time = time.perf_counter()
            state = solve(working)
            times[i, run] = time.perf_counter() - start_time

            if state.is_solved():
                solved_count += 1
            else:
                unsolved_count += 1

        logger.info(
            f"{labels[i]} ({i + 1}/{len(grids)}): "
            f"mean={times[i].mean():.4f}s over {repeats} runs"
        )

    return {
        "names": labels,
        "total_runs": int(times.size),
        "solved_count": solved_count,
        "unsolved_count": unsolved_count,
        "mean_time": float(times.mean()),
        "min_time": float(times.min()),
        "max_time": float(times.max()),
        "per_puzzle_mean": times.mean(axis=1).tolist(),
    }


def save_benchmark_report(results: Dict[str, Any], save_dir: str) -> List[str]:
    """
    Save benchmark results as a text summary and a bar chart.

    Args:
        results: Output of benchmark_solver
        save_dir: Directory to save results

    Returns:
        Paths of the written files
    """
    os.makedirs(save_dir, exist_ok=True)

    text_path = os.path.join(save_dir, "solver_metrics.txt")
    with open(text_path, "w") as f:
        f.write("Sudoku Solver Benchmark\n")
        f.write("=======================\n\n")
        f.write(f"Total runs: {results['total_runs']}\n")
        f.write(f"Solved: {results['solved_count']}\n")
        f.write(f"Unsolved: {results['unsolved_count']}\n")
        f.write(f"Mean solving time: {results['mean_time']:.6f}s\n")
        f.write(f"Min solving time: {results['min_time']:.6f}s\n")
        f.write(f"Max solving time: {results['max_time']:.6f}s\n\n")
        f.write("Per puzzle:\n")
        for name, mean in zip(results["names"], results["per_puzzle_mean"]):
            f.write(f"  {name}: {mean:.6f}s\n")

    # Plot per-puzzle times
    plot_path = os.path.join(save_dir, "solver_times.png")
    fig = plt.figure(figsize=(10, 6))
    plt.bar(results["names"], results["per_puzzle_mean"])
    plt.title('Mean Solving Time')
    plt.ylabel('Seconds')
    plt.savefig(plot_path)
    plt.close(fig)

    logger.info(f"Benchmark report saved to {save_dir}")
    return [text_path, plot_path]
