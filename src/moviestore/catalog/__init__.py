"""
Catalog package public API.

Re-exports:
    - Catalog                  # the record store
    - MovieStore               # caller-facing facade with timing and file I/O
    - MANAGER_PASSWORD, is_manager_password
    - format helpers: parse_line, format_record
"""

from .facade import MANAGER_PASSWORD, MovieStore, is_manager_password
from .store import Catalog
from .textio import format_record, parse_line

__all__ = [
    "Catalog",
    "MovieStore",
    "MANAGER_PASSWORD",
    "is_manager_password",
    "parse_line",
    "format_record",
]
