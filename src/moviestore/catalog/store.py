"""
The catalog: an ordered, mutable list of Movies plus the operations over it.

Order reflects the last sort (or load/insertion order if never sorted).
Nothing keeps the list sorted across `add`/`remove`; binary search re-sorts
before probing, so that is never a correctness problem, only a side effect.

Not thread-safe: every operation mutates or reads the list without locking.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, TextIO, Union

from moviestore.algorithms import SortAlgorithm
from moviestore.records import Field, Movie, resolve
from moviestore import search as search_engine
from moviestore.search import SearchAlgorithm

from .textio import iter_records, write_records

__all__ = ["Catalog"]

logger = logging.getLogger(__name__)


class Catalog:
    def __init__(self, movies: Optional[Iterable[Movie]] = None) -> None:
        self._movies: List[Movie] = list(movies) if movies is not None else []

    def __len__(self) -> int:
        return len(self._movies)

    def __iter__(self) -> Iterator[Movie]:
        return iter(self._movies)

    def __repr__(self) -> str:
        return f"Catalog(size={len(self._movies)})"

    # ------------------------- records ------------------------- #

    def add(self, movie: Movie) -> None:
        self._movies.append(movie)

    def remove(self, title: str) -> bool:
        """Delete every movie whose title equals `title` ignoring case."""
        needle = title.lower()
        kept = [m for m in self._movies if m.title.lower() != needle]
        removed = len(self._movies) - len(kept)
        self._movies[:] = kept
        if removed:
            logger.debug("removed %d movie(s) titled %r", removed, title)
        return removed > 0

    def list(self) -> List[Movie]:
        return self._movies

    def find(self, title: str) -> Optional[Movie]:
        """Return the first movie whose title equals `title` ignoring case."""
        needle = title.lower()
        for m in self._movies:
            if m.title.lower() == needle:
                return m
        return None

    # ------------------------- algorithms ------------------------- #

    def sort(self, field: Union[str, Field], algorithm: Union[str, SortAlgorithm]) -> None:
        cmp = resolve(field)
        sorter = SortAlgorithm.parse(algorithm).sort_fn
        sorter(self._movies, cmp)

    def search(
        self,
        query: str,
        field: Union[str, Field],
        algorithm: Union[str, SearchAlgorithm],
    ) -> List[Movie]:
        """Search the catalog; a binary search leaves it sorted by `field`."""
        return search_engine.search(self._movies, query, field, algorithm)

    # ------------------------- persistence ------------------------- #

    def load_from_source(self, lines: Iterable[str]) -> int:
        """
        Append every well-formed record from `lines` and return how many.

        Raises IOFailure on a non-integer year; records parsed before that
        line stay in the catalog.
        """
        n = 0
        for movie in iter_records(lines):
            self._movies.append(movie)
            n += 1
        return n

    def export_to_sink(self, writer: TextIO) -> int:
        return write_records(self._movies, writer)
