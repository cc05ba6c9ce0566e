"""
Property helpers for validating sort results over Movies.

These functions provide lightweight checks you can use in tests and inside the
benchmark runner for sanity validation.

Public API (stable):
    is_ordered(xs, field) -> bool
    first_order_violation_index(xs, field) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict[Movie, int]
    is_stable(before, after, field) -> bool
    assert_no_mutation(before, after) -> None

Notes
-----
Stability cannot be read off values alone when equal records are
indistinguishable, so `is_stable` tracks object identity: among records with
equal keys, `after` must keep them in their `before` order. Every record in
`before` must be a distinct object.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Optional, Sequence, Union

from moviestore.records import Field, Movie, resolve

__all__ = [
    "is_ordered",
    "first_order_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_stable",
    "assert_no_mutation",
]


def is_ordered(xs: Sequence[Movie], field: Union[str, Field]) -> bool:
    """Return True iff cmp(xs[i], xs[i+1]) <= 0 for all i."""
    return first_order_violation_index(xs, field) is None


def first_order_violation_index(xs: Sequence[Movie], field: Union[str, Field]) -> Optional[int]:
    """
    Return the first index i where xs[i] sorts after xs[i+1], or None.

    Useful for precise error messages:
        i = first_order_violation_index(out, "year")
        assert i is None, f"out of order at i={i}: {out[i]} > {out[i+1]}"
    """
    cmp = resolve(field)
    for i in range(len(xs) - 1):
        if cmp(xs[i], xs[i + 1]) > 0:
            return i
    return None


def is_permutation(a: Sequence[Movie], b: Sequence[Movie]) -> bool:
    """Return True iff `a` and `b` contain exactly the same multiset of movies."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Movie], b: Sequence[Movie]) -> Dict[Movie, int]:
    """
    Return a dict of movie -> count difference (count_a - count_b).

    Empty dict means `a` and `b` have identical multiplicities.
    """
    ca = Counter(a)
    cb = Counter(b)
    diff: Dict[Movie, int] = {}
    for k in set(ca.keys()) | set(cb.keys()):
        d = ca.get(k, 0) - cb.get(k, 0)
        if d != 0:
            diff[k] = d
    return diff


def is_stable(before: Sequence[Movie], after: Sequence[Movie], field: Union[str, Field]) -> bool:
    """True iff records with equal `field` keys keep their relative order."""
    f = Field.parse(field)
    position = {id(m): i for i, m in enumerate(before)}
    last_seen: Dict[object, int] = {}
    for m in after:
        key = f.value_of(m)
        pos = position[id(m)]
        if key in last_seen and last_seen[key] > pos:
            return False
        last_seen[key] = pos
    return True


def assert_no_mutation(before: Sequence[Movie], after: Sequence[Movie]) -> None:
    """
    Assert that two sequences are exactly equal (element-wise).

    Raises AssertionError with a concise message if they differ.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(
                f"Input mutated at index {i}: before={x}, after={y}"
            )
