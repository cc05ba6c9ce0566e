"""
Flat-file formats for the catalog.

Load format (one record per line):
    title,actor,year,genre
Fields are trimmed. Lines with any other field count are skipped without
comment. A year that is not an integer aborts the load with IOFailure.

Export format (one record per line):
    Title: <title>, Actor: <actor>, Year: <year>, Genre: <genre>

The two formats differ on purpose: an exported file does not load back
(every export line splits into exactly four comma fields, and the third,
"Year: 1994", is not an integer).
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, TextIO

from moviestore.errors import IOFailure
from moviestore.records import Movie, parse_year

__all__ = ["parse_line", "iter_records", "format_record", "write_records"]

FIELD_COUNT = 4


def _split(line: str) -> List[str]:
    parts = line.rstrip("\r\n").split(",")
    # Trailing empty fields are dropped before counting ("a,b,1,c," has 4 fields)
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def parse_line(line: str, lineno: Optional[int] = None) -> Optional[Movie]:
    """Parse one load-format line; None if it does not have four fields."""
    parts = _split(line)
    if len(parts) != FIELD_COUNT:
        return None
    title, actor, year_raw, genre = (p.strip() for p in parts)
    try:
        year = parse_year(year_raw)
    except ValueError:
        where = f" on line {lineno}" if lineno is not None else ""
        raise IOFailure(f"Invalid year {year_raw!r}{where}") from None
    return Movie(title=title, actor=actor, year=year, genre=genre)


def iter_records(lines: Iterable[str]) -> Iterator[Movie]:
    for lineno, line in enumerate(lines, start=1):
        movie = parse_line(line, lineno)
        if movie is not None:
            yield movie


def format_record(movie: Movie) -> str:
    return movie.describe()


def write_records(movies: Iterable[Movie], writer: TextIO) -> int:
    n = 0
    for m in movies:
        writer.write(format_record(m))
        writer.write("\n")
        n += 1
    return n
