"""
Search engine public API.

    from moviestore.search import SearchAlgorithm, search
    hits = search(movies, "1994", "year", "binary")

`search` validates the field, the algorithm and (for year) the query before
touching the sequence, so a rejected binary search never re-sorts anything.
"""

from __future__ import annotations

import enum
from typing import List, MutableSequence, Union

from moviestore.errors import InvalidAlgorithm, InvalidQuery
from moviestore.records import Field, Movie, parse_year

from . import binary, linear

__all__ = ["SearchAlgorithm", "search", "parse_key", "SUPPORTED_SEARCHES"]


class SearchAlgorithm(enum.Enum):
    LINEAR = "linear"
    BINARY = "binary"

    @classmethod
    def parse(cls, name: Union[str, "SearchAlgorithm"]) -> "SearchAlgorithm":
        if isinstance(name, SearchAlgorithm):
            return name
        if not isinstance(name, str):
            raise InvalidAlgorithm(f"Algorithm name must be a string; got {name!r}")
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise InvalidAlgorithm(
                f"Invalid search algorithm: {name!r}. Supported: {SUPPORTED_SEARCHES}"
            ) from None


SUPPORTED_SEARCHES = [a.value for a in SearchAlgorithm]


def parse_key(query: str, field: Field) -> Union[str, int]:
    """Return the binary-search probe key for `query` on `field`."""
    if field is not Field.YEAR:
        return query
    try:
        return parse_year(query)
    except ValueError:
        raise InvalidQuery(f"Year query must be an integer; got {query!r}") from None


def search(
    movies: MutableSequence[Movie],
    query: str,
    field: Union[str, Field],
    algorithm: Union[str, SearchAlgorithm],
) -> List[Movie]:
    f = Field.parse(field)
    algo = SearchAlgorithm.parse(algorithm)
    if algo is SearchAlgorithm.LINEAR:
        return linear.search(movies, query, f)
    return binary.search(movies, query, f, parse_key(query, f))
