"""
Timing harness for catalog operations and sort algorithms.

Wall-clock time is taken with the monotonic high-resolution clock
(`time.perf_counter_ns`). All non-essential work (copying, GC, warmup) happens
outside the timed block to keep measurements clean.

Public API (stable):
    timed(fn, *args, **kwargs) -> (result, elapsed_ms)
    time_sort_call(...) -> dict

`time_sort_call` returns:
    {
        "algo": str,
        "field": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each successful sample
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # populated if status == "error"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
        "last_output": list | None,         # sorted copy from the last sample
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List, Sequence, Tuple, TypeVar

from moviestore.algorithms import SortAlgorithm
from moviestore.records import Field, Movie, resolve

T = TypeVar("T")

__all__ = ["timed", "time_sort_call"]


def timed(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Tuple[T, float]:
    """Call `fn` once and return its result with the elapsed milliseconds."""
    t0 = time.perf_counter_ns()
    out = fn(*args, **kwargs)
    t1 = time.perf_counter_ns()
    return out, (t1 - t0) / 1e6


def time_sort_call(
    *,
    algorithm: SortAlgorithm,
    field: Field,
    movies: Sequence[Movie],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
) -> Dict[str, Any]:
    """
    Time repeated in-place sorts of fresh copies of `movies`.

    Parameters
    ----------
    algorithm : SortAlgorithm
        Algorithm to time.
    field : Field
        Sort key; the comparator is resolved once, outside the timed block.
    movies : sequence of Movie
        Input catalog. Never mutated: every sample sorts its own copy.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call before timing.
    disable_gc : bool
        If True, collect and disable Python GC during the timed loop; restore afterward.
    timeout_seconds : float
        Per-sample threshold. A sample above it marks status="timeout" and
        stops further sampling.

    Returns
    -------
    dict
        See module docstring for exact schema.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    sort_fn = algorithm.sort_fn
    cmp = resolve(field)

    result: Dict[str, Any] = {
        "algo": algorithm.value,
        "field": field.value,
        "repeats": repeats,
        "samples_ns": [],  # type: List[int]
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
        "last_output": None,
    }

    # ---- Warmup (outside GC disable & outside timed block) ----
    if warmup and repeats > 0:
        try:
            sort_fn(list(movies), cmp)
        except Exception as e:  # pragma: no cover
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    # ---- GC control ----
    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        # ---- Timed loop ----
        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            try:
                # Copy OUTSIDE the timed block; sorts are in place
                arg = list(movies)

                t0 = time.perf_counter_ns()
                sort_fn(arg, cmp)
                t1 = time.perf_counter_ns()

                elapsed = t1 - t0
                result["samples_ns"].append(int(elapsed))
                result["last_output"] = arg

                if elapsed > threshold_ns:
                    result["status"] = "timeout"
                    result["timed_out_on_repeat"] = r
                    break

            except Exception as e:  # pragma: no cover
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

    finally:
        # Restore original GC state
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
