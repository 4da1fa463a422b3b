"""Tests for the benchmark helpers and script."""

import sys
import types

import pytest

import evaluate
import models.solver as solver_module
from conftest import PUZZLE_4, SOLUTION_4, UNSOLVABLE_4
from models.grid import SudokuGrid
from utils.metrics import benchmark_solver, save_benchmark_report


def test_benchmark_counts_outcomes():
    grids = [SudokuGrid(PUZZLE_4), SudokuGrid(UNSOLVABLE_4)]
    results = benchmark_solver(grids, repeats=2, names=["easy", "impossible"])

    assert results["total_runs"] == 4
    assert results["solved_count"] == 2
    assert results["unsolved_count"] == 2
    assert results["names"] == ["easy", "impossible"]
    assert len(results["per_puzzle_mean"]) == 2
    assert 0.0 <= results["min_time"] <= results["mean_time"] <= results["max_time"]


def test_benchmark_leaves_inputs_untouched():
    grid = SudokuGrid(PUZZLE_4)
    benchmark_solver([grid], repeats=1)
    assert list(grid) == PUZZLE_4


def test_benchmark_argument_checks():
    with pytest.raises(ValueError):
        benchmark_solver([])
    with pytest.raises(ValueError):
        benchmark_solver([SudokuGrid(PUZZLE_4)], repeats=0)


def test_save_report(tmp_path):
    results = benchmark_solver([SudokuGrid(PUZZLE_4)], repeats=1)
    paths = save_benchmark_report(results, str(tmp_path / "report"))

    assert len(paths) == 2
    text = (tmp_path / "report" / "solver_metrics.txt").read_text()
    assert "Solved: 1" in text
    assert "puzzle_1" in text
    assert (tmp_path / "report" / "solver_times.png").exists()


def test_evaluate_script(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    path = tmp_path / "small.csv"
    path.write_text("1,,,\n,,3,\n,4,,\n,,,2\n")

    code = evaluate.main([
        str(path), "--repeats", "1",
        "--output-dir", str(tmp_path / "out"),
        "--config", str(tmp_path / "none.json"),
    ])

    assert code == 0
    out = capsys.readouterr().out
    assert "Runs: 1 (solved 1, unsolved 0)" in out
    assert (tmp_path / "out" / "solver_metrics.txt").exists()


def test_evaluate_missing_file(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    code = evaluate.main([str(tmp_path / "missing.csv"), "--config", str(tmp_path / "none.json")])
    assert code == 1


def test_benchmark_raises_recursion_limit(monkeypatch):
    calls = []
    fake_sys = types.SimpleNamespace(
        getrecursionlimit=lambda: 100,
        setrecursionlimit=calls.append,
    )
    monkeypatch.setattr(solver_module, "sys", fake_sys)

    puzzle = list(SOLUTION_4)
    puzzle[0] = 0
    benchmark_solver([SudokuGrid(puzzle)], repeats=2)
    assert calls == [1 + solver_module.RECURSION_HEADROOM]
