"""Tests for auto mode orchestration (run_auto).

Creates a temporary charts output directory under pytest tmp_path.
"""

from __future__ import annotations

import json
import random
from pathlib import Path

from jobshop_ga.algorithms import GAParams
from jobshop_ga.models import ProblemModel
from jobshop_ga.modes.auto import run_auto
from jobshop_ga.operations import decode_genome, validate_genome


def _params() -> GAParams:
    return GAParams(population_size=12, generations=5)


def test_run_auto_creates_results_and_returns_best(
    tmp_path: Path, example_problem: ProblemModel
) -> None:
    charts_dir = tmp_path / "charts"
    best = run_auto(
        instance=example_problem,
        instance_path="example",
        runs=3,
        params=_params(),
        rng=random.Random(123),
        charts_dir=str(charts_dir),
    )
    assert best is not None
    validate_genome(example_problem, best.genome)

    json_files = list(charts_dir.glob("auto_results_*.json"))
    assert json_files, "Expected auto_results JSON file"
    data = json.loads(json_files[0].read_text())
    for key in ["instance", "runs", "timestamp", "params", "per_run", "best", "averages"]:
        assert key in data
    assert data["runs"] == 3
    assert len(data["per_run"]) == 3
    assert data["best"]["cmax"] == best.fitness == min(r["cmax"] for r in data["per_run"])
    assert data["best"]["genome"] == list(best.genome)
    assert data["best"]["operations"] == [
        list(op) for op in decode_genome(example_problem, best.genome)
    ]
    assert list(charts_dir.glob("gantt_ga_*.png"))
    assert list(charts_dir.glob("ga_progress_*.png"))


def test_run_auto_determinism_seed(tmp_path: Path, dataset_problem: ProblemModel) -> None:
    results = []
    for name in ("a", "b"):
        results.append(
            run_auto(
                instance=dataset_problem,
                instance_path="dataset",
                runs=2,
                params=_params(),
                rng=random.Random(999),
                charts_dir=str(tmp_path / name),
            )
        )
    assert results[0] == results[1]


def test_run_auto_zero_runs(tmp_path: Path, example_problem: ProblemModel) -> None:
    best = run_auto(
        instance=example_problem,
        instance_path="example",
        runs=0,
        params=_params(),
        rng=random.Random(0),
        charts_dir=str(tmp_path),
    )
    assert best is None
    assert not list(tmp_path.glob("auto_results_*.json"))
