"""
Caller-facing movie store.

`MovieStore` wraps a `Catalog` with the operations the console shell uses:
it loads the data file when created, times sorts and searches, and exports to
the configured output file.

Error policy:
- InvalidField / InvalidAlgorithm / InvalidQuery propagate to the caller.
- A failed load (missing file, unreadable file, bad year) is logged and
  swallowed; the store keeps whatever was parsed before the failure.
- A failed export raises IOFailure; the catalog is untouched.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from moviestore.algorithms import SortAlgorithm
from moviestore.bench.measure import timed
from moviestore.errors import IOFailure
from moviestore.records import Field, Movie
from moviestore.search import SearchAlgorithm

from .store import Catalog

__all__ = ["MovieStore", "MANAGER_PASSWORD", "is_manager_password"]

logger = logging.getLogger(__name__)

MANAGER_PASSWORD = "admin123"


def is_manager_password(candidate: str, password: str = MANAGER_PASSWORD) -> bool:
    """Plain string comparison; a menu gate, not a security boundary."""
    return candidate == password


class MovieStore:
    def __init__(
        self,
        data_file: Optional[Union[str, Path]] = None,
        output_file: Union[str, Path] = "output.txt",
        manager_password: str = MANAGER_PASSWORD,
        catalog: Optional[Catalog] = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else Catalog()
        self.output_file = Path(output_file)
        self._manager_password = manager_password
        if data_file is not None:
            self.load_movies_from_file(data_file)

    # ------------------------- persistence ------------------------- #

    def load_movies_from_file(self, path: Union[str, Path]) -> int:
        """Load `path` into the catalog; failures are logged, never raised."""
        path = Path(path)
        before = len(self.catalog)
        try:
            with path.open("r", encoding="utf-8") as f:
                self.catalog.load_from_source(f)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Error reading file %s: %s", path, e)
        loaded = len(self.catalog) - before
        logger.info("loaded %d movie(s) from %s", loaded, path)
        return loaded

    def write_movies_to_file(self, path: Optional[Union[str, Path]] = None) -> Path:
        """Overwrite `path` (default: the output file) with the export format."""
        path = Path(path) if path is not None else self.output_file
        try:
            with path.open("w", encoding="utf-8") as f:
                n = self.catalog.export_to_sink(f)
        except OSError as e:
            raise IOFailure(f"Error writing to file {path}: {e}") from e
        logger.info("wrote %d movie(s) to %s", n, path)
        return path

    # ------------------------- operations ------------------------- #

    def add_movie(self, movie: Movie) -> None:
        self.catalog.add(movie)

    def remove_movie(self, title: str) -> bool:
        return self.catalog.remove(title)

    def display_all(self) -> List[Movie]:
        return self.catalog.list()

    def display_movie(self, title: str) -> Optional[Movie]:
        return self.catalog.find(title)

    def search_movies(self, query: str, field: Union[str, Field]) -> List[Movie]:
        return self.catalog.search(query, field, SearchAlgorithm.LINEAR)

    def sort_movies(
        self, field: Union[str, Field], algorithm: Union[str, SortAlgorithm]
    ) -> float:
        """Sort the catalog in place and return the elapsed milliseconds."""
        _, elapsed_ms = timed(self.catalog.sort, field, algorithm)
        logger.info("sorted %d movie(s) by %s with %s in %.3f ms",
                    len(self.catalog), field, algorithm, elapsed_ms)
        return elapsed_ms

    def search_algorithm(
        self,
        query: str,
        field: Union[str, Field],
        algorithm: Union[str, SearchAlgorithm],
    ) -> Tuple[List[Movie], float]:
        """Search and return (results, elapsed milliseconds)."""
        results, elapsed_ms = timed(self.catalog.search, query, field, algorithm)
        logger.info("%s search %s=%r: %d hit(s) in %.3f ms",
                    algorithm, field, query, len(results), elapsed_ms)
        return results, elapsed_ms

    def is_manager_password(self, candidate: str) -> bool:
        return is_manager_password(candidate, self._manager_password)
