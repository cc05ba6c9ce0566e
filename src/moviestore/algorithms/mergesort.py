"""
Top-down merge sort.

Split at the midpoint, sort both halves recursively, then merge them back into
the caller's sequence. Ties take from the left run (`cmp(l, r) <= 0`), which
makes the sort stable. O(n log n) comparisons, O(n) auxiliary space.
"""

from __future__ import annotations

from typing import Any, Callable, List, MutableSequence

__all__ = ["sort"]


def sort(a: MutableSequence[Any], cmp: Callable[[Any, Any], int]) -> None:
    if len(a) <= 1:
        return
    mid = len(a) // 2
    left = list(a[:mid])
    right = list(a[mid:])

    sort(left, cmp)
    sort(right, cmp)

    _merge(a, left, right, cmp)


def _merge(
    out: MutableSequence[Any],
    left: List[Any],
    right: List[Any],
    cmp: Callable[[Any, Any], int],
) -> None:
    i = j = k = 0
    while i < len(left) and j < len(right):
        if cmp(left[i], right[j]) <= 0:
            out[k] = left[i]
            i += 1
        else:
            out[k] = right[j]
            j += 1
        k += 1
    # At most one of these runs is non-empty
    while i < len(left):
        out[k] = left[i]
        i += 1
        k += 1
    while j < len(right):
        out[k] = right[j]
        j += 1
        k += 1
