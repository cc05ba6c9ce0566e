"""
The movie record.

A `Movie` is an immutable, hashable value with four required fields. It has no
identity beyond its values: two records with the same four fields compare
equal, and duplicate titles are legal everywhere in the package.

Public API (stable):
    Movie(title: str, actor: str, year: int, genre: str)
    Movie.describe() -> str
    parse_year(text: str) -> int   # optional sign and ASCII digits only
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["Movie", "parse_year"]

_YEAR_RE = re.compile(r"[+-]?[0-9]+")


def parse_year(text: str) -> int:
    """
    Parse a year written as an optional sign followed by ASCII digits.

    Stricter than `int()`: underscores, surrounding whitespace and non-ASCII
    digits raise ValueError.
    """
    if not isinstance(text, str) or _YEAR_RE.fullmatch(text) is None:
        raise ValueError(f"not an integer year: {text!r}")
    return int(text)


@dataclass(frozen=True)
class Movie:
    title: str
    actor: str
    year: int
    genre: str

    def __post_init__(self) -> None:
        for name in ("title", "actor", "genre"):
            if not isinstance(getattr(self, name), str):
                raise TypeError(f"Movie.{name} must be a str; got {getattr(self, name)!r}")
        # bool is an int subclass but never a year
        if not isinstance(self.year, int) or isinstance(self.year, bool):
            raise TypeError(f"Movie.year must be an int; got {self.year!r}")

    def describe(self) -> str:
        """Return the one-line descriptive form used for display and export."""
        return (
            f"Title: {self.title}, Actor: {self.actor}, "
            f"Year: {self.year}, Genre: {self.genre}"
        )

    def __str__(self) -> str:
        return self.describe()
