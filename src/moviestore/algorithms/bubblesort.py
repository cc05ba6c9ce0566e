"""
Bubble sort: repeated adjacent compare-and-swap, each pass one shorter.

O(n^2) comparisons. In place. Stable (only strictly greater pairs swap).
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence

__all__ = ["sort"]


def sort(a: MutableSequence[Any], cmp: Callable[[Any, Any], int]) -> None:
    n = len(a)
    for i in range(n - 1):
        for j in range(n - i - 1):
            if cmp(a[j], a[j + 1]) > 0:
                a[j], a[j + 1] = a[j + 1], a[j]
