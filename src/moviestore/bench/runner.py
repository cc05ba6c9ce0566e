"""
Experiment runner: times every sort algorithm on synthetic catalogs from a YAML config.

Usage (from repo root):
    moviestore-bench experiments/configs/01_random_scaling.yaml
    python -m moviestore.bench.runner experiments/configs/01_random_scaling.yaml

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per successful timing sample
    - summary.csv             # median + IQR per (algo, field, n)
    - (console) rich/tqdm summaries

Design notes:
- For each size n, we generate ONE catalog and every (algorithm, field) pair
  sorts its own copy of it.
- Harness handles warmup/GC; we keep timing clean.
- On timeout/error for an algorithm at size n, we skip larger sizes for that algo.
- With `validate: true`, each last sorted output is checked for order and
  permutation; a failed check is recorded as an error.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import logging
import os
import platform
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from moviestore.algorithms import SortAlgorithm
from moviestore.bench.measure import time_sort_call
from moviestore.datasets import make_catalog
from moviestore.logs import configure_logging
from moviestore.records import Field
from moviestore.validate import is_ordered, is_permutation

logger = logging.getLogger(__name__)

_console = Console()

REQUIRED_KEYS = [
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "fields",
    "algorithms",
]

_SUMMARY_COLUMNS = ["algo", "field", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]


# ------------------------- helpers: IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _timestamp() -> str:
    return _dt.datetime.now().strftime("%Y%m%d_%H%M%S")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    run_dir = base_dir / f"{_timestamp()}_{experiment_name}"
    suffix = 1
    while run_dir.exists():
        run_dir = base_dir / f"{_timestamp()}_{experiment_name}_{suffix}"
        suffix += 1
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
        return out.decode("utf-8").strip()
    except (OSError, subprocess.CalledProcessError):
        return None


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


def _resolve_algorithms(names: List[Any]) -> List[SortAlgorithm]:
    algos: List[SortAlgorithm] = []
    for name in names:
        algo = SortAlgorithm.parse(name)
        if algo in algos:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        algos.append(algo)
    return algos


def _resolve_fields(names: List[Any]) -> List[Field]:
    out: List[Field] = []
    for name in names:
        f = Field.parse(name)
        if f in out:
            raise ValueError(f"Duplicate field name in config: {name}")
        out.append(f)
    return out


def _iqr_ns(group: pd.DataFrame) -> int:
    q1 = group["time_ns"].quantile(0.25)
    q3 = group["time_ns"].quantile(0.75)
    return int(q3 - q1)


def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    # Only successful samples carry time_ns
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)

    keys = ["algo", "field", "n"]
    agg = (
        df.groupby(keys, as_index=False)
        .agg(
            samples_ok=("time_ns", "count"),
            median_ns=("time_ns", "median"),
            min_ns=("time_ns", "min"),
            max_ns=("time_ns", "max"),
        )
    )
    iqr_vals = (
        df.groupby(keys)[["time_ns"]]
        .apply(_iqr_ns)
        .rename("iqr_ns")
        .reset_index()
    )
    out = agg.merge(iqr_vals, on=keys, how="left")
    # pandas medians come back as float
    out[["median_ns", "min_ns", "max_ns", "iqr_ns"]] = out[["median_ns", "min_ns", "max_ns", "iqr_ns"]].astype("int64")
    out["n"] = out["n"].astype("int64")
    return out[_SUMMARY_COLUMNS].sort_values(keys, ignore_index=True)


def _print_rich_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in ms)")
    table.add_column("Algorithm", style="bold")
    table.add_column("Field")
    picks: List[Tuple[str, int]] = []
    if sizes:
        first = sizes[0]
        mid = sizes[len(sizes) // 2]
        last = sizes[-1]
        for npick in dict.fromkeys([first, mid, last]):
            picks.append(("n=" + str(npick), npick))
        for hdr, _ in picks:
            table.add_column(hdr, justify="right")

    def _format_cell(median_ns: Optional[int], iqr_ns: Optional[int]) -> str:
        if median_ns is None:
            return "—"
        median_ms = median_ns / 1e6
        if iqr_ns is None:
            return f"{median_ms:.2f}"
        return f"{median_ms:.2f} ± {iqr_ns / 1e6:.2f}"

    if summary.empty:
        _console.print("(no samples)")
        return

    for (algo, field), s in summary.groupby(["algo", "field"], sort=True):
        row = [f"[bold]{algo}[/]", str(field)]
        for _, npick in picks:
            cell = s[s["n"] == npick]
            if cell.empty:
                row.append("—")
            else:
                row.append(_format_cell(int(cell["median_ns"].values[0]), int(cell["iqr_ns"].values[0])))
        table.add_row(*row)
    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path, *, progress: bool = True) -> Path:
    cfg = _load_yaml(config_path)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config {config_path} must be a mapping at the top level")

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    experiment_name: str = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    if not output_dir.is_absolute():
        output_dir = config_path.parent / output_dir
    sizes: List[int] = [int(n) for n in cfg["sizes"]]
    repeats: int = int(cfg["repeats"])
    warmup: bool = bool(cfg["warmup"])
    disable_gc: bool = bool(cfg["disable_gc"])
    timeout_seconds: float = float(cfg["timeout_seconds"])
    dataset_spec: Dict[str, Any] = dict(cfg["dataset"])
    validate: bool = bool(cfg.get("validate", False))

    if not sizes or any(n <= 0 for n in sizes):
        raise ValueError("Config 'sizes' must be a non-empty list of positive integers")

    algos = _resolve_algorithms(list(cfg["algorithms"]))
    fields = _resolve_fields(list(cfg["fields"]))

    run_dir = _ensure_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    # Persist resolved config early
    _write_yaml(cfg, cfg_resolved_path)

    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(int(cfg["seed"]))

    # Per-(algorithm, field) skip flags, set on timeout/error
    skip = {(a, f): False for a in algos for f in fields}

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Experiment:[/bold] {experiment_name}")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(a.value for a in algos)}")
    _console.print(f"[bold]Fields:[/bold] {', '.join(f.value for f in fields)}")
    _console.print()

    for n in tqdm(sizes, desc="Sizes", unit="n", disable=not progress):
        base = make_catalog(n, dataset_spec, rng)

        for algo in algos:
            for field in fields:
                if skip[(algo, field)]:
                    continue

                res = time_sort_call(
                    algorithm=algo,
                    field=field,
                    movies=base,
                    repeats=repeats,
                    warmup=warmup,
                    disable_gc=disable_gc,
                    timeout_seconds=timeout_seconds,
                )

                for trial_idx, t_ns in enumerate(res["samples_ns"]):
                    _append_jsonl(
                        {
                            "algo": algo.value,
                            "field": field.value,
                            "n": n,
                            "dataset": dataset_spec,
                            "trial": trial_idx,
                            "time_ns": int(t_ns),
                        },
                        results_path,
                    )

                status = res["status"]
                error = res["error"]
                out = res["last_output"]
                if status == "ok" and validate and out is not None:
                    if not (is_ordered(out, field) and is_permutation(base, out)):
                        status = "error"
                        error = "validation failed: output not ordered or not a permutation"

                if status == "timeout":
                    skip[(algo, field)] = True
                    logger.info("%s by %s timed out at n=%d", algo.value, field.value, n)
                    _append_jsonl(
                        {
                            "algo": algo.value,
                            "field": field.value,
                            "n": n,
                            "status": "timeout",
                            "timed_out_on_repeat": res["timed_out_on_repeat"],
                        },
                        results_path,
                    )
                elif status == "error":
                    skip[(algo, field)] = True
                    logger.warning("%s by %s failed at n=%d: %s", algo.value, field.value, n, error)
                    _append_jsonl(
                        {
                            "algo": algo.value,
                            "field": field.value,
                            "n": n,
                            "status": "error",
                            "error": error,
                        },
                        results_path,
                    )

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)

    _print_rich_summary(summary_df, sizes)

    _console.print("[bold green]Done.[/bold green] Wrote:")
    _console.print(f" - {results_path}")
    _console.print(f" - {summary_path}")
    _console.print(f" - {meta_path}")
    _console.print(f" - {cfg_resolved_path}")

    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a catalog sorting benchmark from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    p.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    p.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    configure_logging(args.log_level)
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path, progress=not args.no_progress)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
