"""End-to-end tests of the config-driven entry point and the CSV report."""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path

import pytest
import yaml

import main as entry
from jobshop_ga.algorithms.base import GenerationStats
from jobshop_ga.config import load_config, params_from_config
from jobshop_ga.errors import ValidationError
from jobshop_ga.report import REPORT_HEADER, format_generation, open_report_file, write_report


def _write_config(tmp_path: Path, **overrides) -> Path:
    cfg = {
        "instance": "example",
        "seed": 5,
        "runs": 1,
        "log_level": "WARNING",
        "ga": {"population_size": 10, "generations": 6},
        "output": {"csv": str(tmp_path / "out" / "progress.csv")},
    }
    cfg.update(overrides)
    path = tmp_path / "run.yaml"
    path.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return path


def test_format_generation_matches_reference_layout() -> None:
    assert format_generation(GenerationStats(generation=3, mean=12.5, best=11)) == "3,12.500000,11"


def test_write_report() -> None:
    buf = io.StringIO()
    write_report([GenerationStats(1, 10.0, 9), GenerationStats(2, 9.25, 8)], buf)
    assert buf.getvalue().splitlines() == [REPORT_HEADER, "1,10.000000,9", "2,9.250000,8"]


def test_open_report_file_without_path() -> None:
    with open_report_file(None) as report_file:
        assert report_file is None


def test_main_prints_report_and_writes_csv(tmp_path: Path, capsys) -> None:
    config_path = _write_config(tmp_path)
    entry.main(["--config", str(config_path)])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Generation,Mean fitness,Best fitness"
    assert len(lines) == 7
    for index, line in enumerate(lines[1:], start=1):
        generation, mean, best = line.split(",")
        assert int(generation) == index
        assert float(mean) >= int(best)
    csv_lines = (tmp_path / "out" / "progress.csv").read_text().splitlines()
    assert csv_lines == lines


def test_main_same_seed_same_output(tmp_path: Path, capsys) -> None:
    config_path = _write_config(tmp_path, output={})
    entry.main(["--config", str(config_path)])
    first = capsys.readouterr().out
    entry.main(["--config", str(config_path)])
    assert capsys.readouterr().out == first


def test_run_single_writes_charts(tmp_path: Path) -> None:
    cfg = load_config(str(_write_config(tmp_path)))
    cfg["output"]["charts_dir"] = str(tmp_path / "charts")
    best = entry.run_single(cfg, out=io.StringIO())
    assert best > 0
    assert list((tmp_path / "charts").glob("gantt_ga_*.png"))


def test_main_auto_mode(tmp_path: Path, capsys) -> None:
    config_path = _write_config(
        tmp_path, runs=2, output={"charts_dir": str(tmp_path / "charts")}
    )
    entry.main(["--config", str(config_path)])
    assert "Best makespan over 2 runs" in capsys.readouterr().out
    assert list((tmp_path / "charts").glob("auto_results_*.json"))


def test_main_auto_mode_null_charts_dir_uses_default(tmp_path: Path, capsys, monkeypatch) -> None:
    config_path = _write_config(tmp_path, runs=2, output={"charts_dir": None})
    monkeypatch.chdir(tmp_path)
    entry.main(["--config", str(config_path)])
    assert "Best makespan over 2 runs" in capsys.readouterr().out
    assert list((tmp_path / "charts").glob("auto_results_*.json"))


def test_main_logs_invalid_instance_before_raising(tmp_path: Path, caplog) -> None:
    bad = tmp_path / "bad.txt"
    bad.write_text("1 2\n5 3 1 2\n", encoding="utf-8")
    config_path = _write_config(tmp_path, instance=str(bad))
    caplog.set_level(logging.ERROR, logger="jssp.main")
    with pytest.raises(ValidationError):
        entry.main(["--config", str(config_path)])
    assert any(
        r.name == "jssp.main" and r.levelno == logging.ERROR for r in caplog.records
    )


def test_load_json_config_and_defaults(tmp_path: Path) -> None:
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"instance": "dataset", "ga": {"pairing": "fixed"}}))
    params = params_from_config(load_config(str(path)))
    assert params.pairing == "fixed"
    assert params.population_size == 50
    assert params.generations == 50
    assert params.selection_margin == pytest.approx(0.7)
    assert params.mutation_probability == pytest.approx(1.0 / 9.0)


def test_params_from_config_rejects_bad_values() -> None:
    with pytest.raises(ValidationError):
        params_from_config({"ga": {"population_size": "many"}})
    with pytest.raises(ValidationError):
        params_from_config({"ga": {"pairing": "random"}})


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))
