"""
Insertion sort: shift larger elements right and drop each key into the gap.

O(n^2) worst case, O(n) on already sorted input. In place.
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence

__all__ = ["sort"]


def sort(a: MutableSequence[Any], cmp: Callable[[Any, Any], int]) -> None:
    for i in range(1, len(a)):
        key = a[i]
        j = i - 1
        while j >= 0 and cmp(a[j], key) > 0:
            a[j + 1] = a[j]
            j -= 1
        a[j + 1] = key
