"""
Shared fixtures.

This file inserts the project `src/` onto sys.path so tests run without installing the package.
"""

from __future__ import annotations

import pathlib
import sys
from typing import List

import pytest

# Ensure `src/` is importable when running `pytest` from the repo root
_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from moviestore.records import Movie  # noqa: E402


@pytest.fixture
def five_movies() -> List[Movie]:
    return [
        Movie("The Shawshank Redemption", "Tim Robbins", 1994, "Drama"),
        Movie("Alien", "Sigourney Weaver", 1979, "Horror"),
        Movie("Amélie", "Audrey Tautou", 2001, "Romantic Comedy"),
        Movie("Moonlight", "Mahershala Ali", 2016, "drama"),
        Movie("Heat", "Al Pacino", 1995, "Crime Melodrama"),
    ]


@pytest.fixture
def movies_file(tmp_path: pathlib.Path) -> pathlib.Path:
    path = tmp_path / "movies.txt"
    path.write_text(
        "Alien, Sigourney Weaver, 1979, Horror\n"
        "Broken line, only three\n"
        "Heat , Al Pacino , 1995 , Crime\n",
        encoding="utf-8",
    )
    return path
