"""
Selection sort: move the minimum of the unsorted suffix to its front.

O(n^2) comparisons, at most n - 1 swaps. In place. Not stable: the swap can
carry an element past an equal one.
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence

__all__ = ["sort"]


def sort(a: MutableSequence[Any], cmp: Callable[[Any, Any], int]) -> None:
    n = len(a)
    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            if cmp(a[j], a[min_idx]) < 0:
                min_idx = j
        a[i], a[min_idx] = a[min_idx], a[i]
