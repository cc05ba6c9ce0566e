"""
Linear search: scan every record and keep the ones matching the query.

Matching follows `moviestore.records.matches`: case-insensitive substring
containment for title/actor/genre, exact decimal equality for year. Input order
is preserved and the sequence is never mutated.
"""

from __future__ import annotations

from typing import List, Sequence

from moviestore.records import Field, Movie, matches

__all__ = ["search"]


def search(movies: Sequence[Movie], query: str, field: Field) -> List[Movie]:
    return [m for m in movies if matches(m, field, query)]
