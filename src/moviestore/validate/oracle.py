"""
Oracle for sorting correctness.

We use Python's built-in `sorted()` as the ground-truth oracle:
- Correct total order for any comparator via `functools.cmp_to_key`
- Deterministic and portable
- Stable, so it predicts merge sort's output exactly, ties included

Public API (stable):
    oracle_sort(a: list[Movie], field) -> list[Movie]
    equals_oracle(a: list[Movie], out: list[Movie], field) -> bool

Conventions:
- The oracle never mutates its input and always returns a **new** list.
- Only stable algorithms are expected to match the oracle exactly; for the
  others, compare keys (see `same_keys_as_oracle`).
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import List, Sequence, Union

from moviestore.records import Field, Movie, resolve

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle", "same_keys_as_oracle"]


def oracle_sort(a: Sequence[Movie], field: Union[str, Field]) -> List[Movie]:
    """Return a new list with the movies of `a` stably sorted by `field`."""
    return sorted(a, key=cmp_to_key(resolve(field)))


def equals_oracle(a: Sequence[Movie], out: Sequence[Movie], field: Union[str, Field]) -> bool:
    """True iff `out` is exactly the oracle's (stable) ordering of `a`."""
    return list(out) == oracle_sort(a, field)


def same_keys_as_oracle(a: Sequence[Movie], out: Sequence[Movie], field: Union[str, Field]) -> bool:
    """True iff `out` carries the same sequence of sort keys as the oracle."""
    f = Field.parse(field)
    return [f.value_of(m) for m in out] == [f.value_of(m) for m in oracle_sort(a, f)]
