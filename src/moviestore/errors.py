"""
Exception taxonomy for the movie store.

Every error raised on purpose by the package derives from `MovieStoreError`,
so callers can catch the whole family at once. The three input errors also
subclass `ValueError` and the I/O error subclasses `OSError`, which keeps
`except ValueError` / `except OSError` handlers working.

Public API (stable):
    MovieStoreError
    InvalidField       # unknown sort/search field name
    InvalidAlgorithm   # unknown sort/search algorithm name
    InvalidQuery       # non-numeric query against a numeric field
    IOFailure          # load/export file errors
"""

from __future__ import annotations

__all__ = [
    "MovieStoreError",
    "InvalidField",
    "InvalidAlgorithm",
    "InvalidQuery",
    "IOFailure",
]


class MovieStoreError(Exception):
    """Base class for all movie store errors."""


class InvalidField(MovieStoreError, ValueError):
    pass


class InvalidAlgorithm(MovieStoreError, ValueError):
    pass


class InvalidQuery(MovieStoreError, ValueError):
    pass


class IOFailure(MovieStoreError, OSError):
    pass
