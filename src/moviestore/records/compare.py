"""
Comparator resolver: field selectors -> ordering functions over Movies.

Three views of a field are exposed, and they deliberately differ:

- `resolve(field)` orders records for sorting. String fields use Python's
  native (case-sensitive, code-point) ordering; `year` orders numerically.
- `probe(movie, field, key)` is the three-way comparison binary search uses to
  locate an exact hit. Strings compare case-insensitively; `year` compares as
  an integer.
- `matches(movie, field, query)` is the linear-search predicate. Strings match
  by case-insensitive substring containment; `year` matches by exact string
  equality with the decimal year.

Because sort order is case-sensitive while probing is not, binary search on a
catalog mixing "alien" and "Brazil" may miss records that linear search finds.

Public API (stable):
    Field                      # enum: TITLE, ACTOR, YEAR, GENRE
    Field.parse(name) -> Field # case-insensitive; raises InvalidField
    resolve(field) -> Comparator
    matches(movie, field, query) -> bool
    probe(movie, field, key) -> int
"""

from __future__ import annotations

import enum
from typing import Callable, Dict, Union

from moviestore.errors import InvalidField
from moviestore.records.movie import Movie

Comparator = Callable[[Movie, Movie], int]

__all__ = ["Field", "Comparator", "resolve", "matches", "probe"]


class Field(enum.Enum):
    TITLE = "title"
    ACTOR = "actor"
    YEAR = "year"
    GENRE = "genre"

    @classmethod
    def parse(cls, name: Union[str, "Field"]) -> "Field":
        """Return the Field for `name` (case-insensitive), or raise InvalidField."""
        if isinstance(name, Field):
            return name
        if not isinstance(name, str):
            raise InvalidField(f"Field name must be a string; got {name!r}")
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise InvalidField(
                f"Invalid field: {name!r}. Supported: {[f.value for f in cls]}"
            ) from None

    def value_of(self, movie: Movie) -> Union[str, int]:
        return getattr(movie, self.value)


def _cmp(x, y) -> int:
    return (x > y) - (x < y)


def _by_attr(attr: str) -> Comparator:
    def compare(a: Movie, b: Movie) -> int:
        return _cmp(getattr(a, attr), getattr(b, attr))

    compare.__name__ = f"compare_{attr}"
    return compare


_COMPARATORS: Dict[Field, Comparator] = {f: _by_attr(f.value) for f in Field}


def resolve(field: Union[str, Field]) -> Comparator:
    """Return the sort comparator for `field`."""
    return _COMPARATORS[Field.parse(field)]


def matches(movie: Movie, field: Union[str, Field], query: str) -> bool:
    """Linear-search predicate: does `movie` match `query` on `field`?"""
    f = Field.parse(field)
    if f is Field.YEAR:
        return str(movie.year) == query
    return query.lower() in f.value_of(movie).lower()


def probe(movie: Movie, field: Union[str, Field], key: Union[str, int]) -> int:
    """
    Three-way comparison of `movie`'s field against a binary-search key.

    For `year`, `key` must already be an int. For string fields the comparison
    ignores case.
    """
    f = Field.parse(field)
    if f is Field.YEAR:
        return _cmp(movie.year, int(key))
    return _cmp(f.value_of(movie).lower(), str(key).lower())
