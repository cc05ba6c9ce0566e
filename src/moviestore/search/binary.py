"""
Binary search over a catalog re-sorted by the search field.

Steps:
1. Merge-sort `movies` in place by `field`. This mutates the caller's sequence;
   a catalog searched this way ends up sorted by that field.
2. Bisect for a record whose field equals the query: integer equality for
   year, case-insensitive equality for strings.
3. From the hit at index m, extend the run left from m - 1 and right from
   m + 1 while the linear-search predicate (substring containment, not
   equality) still holds.

The run is returned in sequence order. No exact hit returns [].
"""

from __future__ import annotations

from typing import List, MutableSequence, Union

from moviestore.algorithms import SortAlgorithm
from moviestore.records import Field, Movie, matches, probe, resolve

__all__ = ["search", "find_exact"]


def search(movies: MutableSequence[Movie], query: str, field: Field, key: Union[str, int]) -> List[Movie]:
    """
    Parameters
    ----------
    movies : mutable sequence of Movie
        Sorted in place as a side effect.
    query : str
        Raw query text, used for run expansion.
    field : Field
        Search field.
    key : str | int
        Probe key; the parsed int for `Field.YEAR`, otherwise `query`.
    """
    SortAlgorithm.MERGESORT.sort_fn(movies, resolve(field))

    mid = find_exact(movies, field, key)
    if mid is None:
        return []

    lo = mid
    while lo - 1 >= 0 and matches(movies[lo - 1], field, query):
        lo -= 1
    hi = mid
    while hi + 1 < len(movies) and matches(movies[hi + 1], field, query):
        hi += 1
    return list(movies[lo : hi + 1])


def find_exact(movies: MutableSequence[Movie], field: Field, key: Union[str, int]) -> Union[int, None]:
    """Return the index of some exact hit for `key`, or None."""
    left, right = 0, len(movies) - 1
    while left <= right:
        mid = left + (right - left) // 2
        c = probe(movies[mid], field, key)
        if c == 0:
            return mid
        if c < 0:
            left = mid + 1
        else:
            right = mid - 1
    return None
