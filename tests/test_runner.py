from __future__ import annotations

import json
import pathlib

import pandas as pd
import pytest
import yaml

from moviestore.bench.measure import time_sort_call, timed
from moviestore.bench.runner import run_experiment
from moviestore.algorithms import SortAlgorithm
from moviestore.records import Field, Movie


def test_timed_returns_result_and_ms() -> None:
    out, ms = timed(sorted, [3, 1, 2])
    assert out == [1, 2, 3]
    assert ms >= 0.0


def test_time_sort_call_never_mutates_input() -> None:
    movies = [Movie(str(i), "a", 2000 - i, "g") for i in range(30)]
    before = list(movies)
    res = time_sort_call(
        algorithm=SortAlgorithm.BUBBLESORT,
        field=Field.YEAR,
        movies=movies,
        repeats=3,
        warmup=True,
        disable_gc=True,
        timeout_seconds=10.0,
    )
    assert movies == before
    assert res["status"] == "ok"
    assert len(res["samples_ns"]) == 3
    assert [m.year for m in res["last_output"]] == sorted(m.year for m in movies)


def test_run_experiment_writes_artifacts(tmp_path: pathlib.Path) -> None:
    cfg = {
        "experiment_name": "tiny",
        "output_dir": "runs",
        "seed": 1,
        "repeats": 2,
        "warmup": False,
        "disable_gc": False,
        "timeout_seconds": 30.0,
        "validate": True,
        "dataset": {"dist": "random", "params": {}},
        "sizes": [5, 20],
        "fields": ["title", "year"],
        "algorithms": ["bubblesort", "mergesort"],
    }
    path = tmp_path / "tiny.yaml"
    path.write_text(yaml.safe_dump(cfg), encoding="utf-8")

    run_dir = run_experiment(path, progress=False)

    assert run_dir.parent == tmp_path / "runs"
    for name in ("config_resolved.yaml", "meta.json", "results.jsonl", "summary.csv"):
        assert (run_dir / name).exists(), name

    lines = [json.loads(l) for l in (run_dir / "results.jsonl").read_text(encoding="utf-8").splitlines()]
    # 2 sizes x 2 algorithms x 2 fields x 2 repeats, no failures
    assert len(lines) == 16
    assert all("time_ns" in l for l in lines)

    summary = pd.read_csv(run_dir / "summary.csv")
    assert len(summary) == 8
    assert set(summary["algo"]) == {"bubblesort", "mergesort"}
    assert (summary["samples_ok"] == 2).all()

    meta = json.loads((run_dir / "meta.json").read_text(encoding="utf-8"))
    assert "numpy" in meta and "machine" in meta


def test_run_experiment_missing_keys(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("experiment_name: x\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Missing required config keys"):
        run_experiment(path, progress=False)
