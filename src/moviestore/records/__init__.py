"""
Records package public API.

Re-export the record type and the comparator resolver so callers can write:
    from moviestore.records import Movie, Field, resolve
"""

from .compare import Field, matches, probe, resolve
from .movie import Movie, parse_year

__all__ = ["Movie", "parse_year", "Field", "resolve", "matches", "probe"]
