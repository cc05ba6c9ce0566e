"""
Sort engine public API.

Each algorithm lives in its own module exposing
    sort(a: MutableSequence, cmp: Callable[[x, y], int]) -> None
which sorts `a` in place. `SortAlgorithm` is the dispatch table mapping
algorithm names to those functions; resolve a name once with
`SortAlgorithm.parse` and pass the enum member around.

    from moviestore.algorithms import SortAlgorithm, sort
    sort(movies, resolve("year"), SortAlgorithm.MERGESORT)
"""

from __future__ import annotations

import enum
from typing import Any, Callable, Dict, MutableSequence, Union

from moviestore.errors import InvalidAlgorithm

from . import bubblesort, insertionsort, mergesort, selectionsort

SortFn = Callable[[MutableSequence[Any], Callable[[Any, Any], int]], None]

__all__ = ["SortAlgorithm", "SortFn", "get_sorter", "sort", "SUPPORTED_ALGORITHMS"]


class SortAlgorithm(enum.Enum):
    BUBBLESORT = "bubblesort"
    SELECTIONSORT = "selectionsort"
    INSERTIONSORT = "insertionsort"
    MERGESORT = "mergesort"

    @classmethod
    def parse(cls, name: Union[str, "SortAlgorithm"]) -> "SortAlgorithm":
        """Return the algorithm for `name` (case-insensitive), or raise InvalidAlgorithm."""
        if isinstance(name, SortAlgorithm):
            return name
        if not isinstance(name, str):
            raise InvalidAlgorithm(f"Algorithm name must be a string; got {name!r}")
        key = name.strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise InvalidAlgorithm(
                f"Invalid sorting algorithm: {name!r}. Supported: {SUPPORTED_ALGORITHMS}"
            ) from None

    @property
    def sort_fn(self) -> SortFn:
        return _SORTERS[self]


_ALIASES = {
    "bubble": "bubblesort",
    "selection": "selectionsort",
    "insertion": "insertionsort",
    "merge": "mergesort",
}

_SORTERS: Dict[SortAlgorithm, SortFn] = {
    SortAlgorithm.BUBBLESORT: bubblesort.sort,
    SortAlgorithm.SELECTIONSORT: selectionsort.sort,
    SortAlgorithm.INSERTIONSORT: insertionsort.sort,
    SortAlgorithm.MERGESORT: mergesort.sort,
}

SUPPORTED_ALGORITHMS = [a.value for a in SortAlgorithm]


def get_sorter(name: Union[str, SortAlgorithm]) -> SortFn:
    return SortAlgorithm.parse(name).sort_fn


def sort(
    a: MutableSequence[Any],
    cmp: Callable[[Any, Any], int],
    algorithm: Union[str, SortAlgorithm],
) -> None:
    """Sort `a` in place with the named algorithm."""
    get_sorter(algorithm)(a, cmp)
