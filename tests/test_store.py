from __future__ import annotations

import logging
import pathlib
from typing import List

import pytest

from moviestore.catalog import MANAGER_PASSWORD, Catalog, MovieStore, is_manager_password
from moviestore.errors import InvalidQuery, IOFailure
from moviestore.records import Movie


def test_loads_data_file_on_creation(movies_file: pathlib.Path) -> None:
    store = MovieStore(data_file=movies_file)
    assert [m.title for m in store.display_all()] == ["Alien", "Heat"]


def test_missing_data_file_is_logged_not_raised(tmp_path: pathlib.Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="moviestore.catalog.facade"):
        store = MovieStore(data_file=tmp_path / "nope.txt")
    assert store.display_all() == []
    assert "Error reading file" in caplog.text


def test_bad_year_keeps_records_parsed_before(tmp_path: pathlib.Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "movies.txt"
    path.write_text("Alien, Sigourney Weaver, 1979, Horror\nHeat, Al Pacino, 95x, Crime\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        store = MovieStore(data_file=path)
    assert [m.title for m in store.display_all()] == ["Alien"]
    assert "Invalid year" in caplog.text


def test_sort_movies_returns_elapsed_ms(five_movies: List[Movie]) -> None:
    store = MovieStore(catalog=Catalog(five_movies))
    elapsed = store.sort_movies("year", "selectionsort")
    assert elapsed >= 0.0
    assert [m.year for m in store.display_all()] == [1979, 1994, 1995, 2001, 2016]


def test_search_algorithm_returns_results_and_time(five_movies: List[Movie]) -> None:
    store = MovieStore(catalog=Catalog(five_movies))
    results, elapsed = store.search_algorithm("1994", "year", "binary")
    assert [m.title for m in results] == ["The Shawshank Redemption"]
    assert elapsed >= 0.0
    # Binary search leaves the catalog sorted by year
    assert [m.year for m in store.display_all()] == [1979, 1994, 1995, 2001, 2016]


def test_search_errors_propagate(five_movies: List[Movie]) -> None:
    store = MovieStore(catalog=Catalog(five_movies))
    with pytest.raises(InvalidQuery):
        store.search_algorithm("abc", "year", "binary")


def test_search_movies_and_display_movie(five_movies: List[Movie]) -> None:
    store = MovieStore(catalog=Catalog(five_movies))
    assert [m.actor for m in store.search_movies("al", "actor")] == ["Mahershala Ali", "Al Pacino"]
    assert store.display_movie("ALIEN").year == 1979
    assert store.display_movie("Nope") is None


def test_add_and_remove() -> None:
    store = MovieStore()
    store.add_movie(Movie("Up", "Ed Asner", 2009, "Animation"))
    store.add_movie(Movie("UP", "Ed Asner", 2009, "Animation"))
    assert store.remove_movie("up") is True
    assert store.display_all() == []
    assert store.remove_movie("up") is False


def test_write_movies_to_file_overwrites(tmp_path: pathlib.Path, five_movies: List[Movie]) -> None:
    out = tmp_path / "output.txt"
    out.write_text("stale\n" * 50, encoding="utf-8")
    store = MovieStore(output_file=out, catalog=Catalog(five_movies[:2]))
    assert store.write_movies_to_file() == out
    assert out.read_text(encoding="utf-8").splitlines() == [
        "Title: The Shawshank Redemption, Actor: Tim Robbins, Year: 1994, Genre: Drama",
        "Title: Alien, Actor: Sigourney Weaver, Year: 1979, Genre: Horror",
    ]


def test_write_failure_raises_io_failure(tmp_path: pathlib.Path, five_movies: List[Movie]) -> None:
    store = MovieStore(catalog=Catalog(five_movies))
    with pytest.raises(IOFailure):
        store.write_movies_to_file(tmp_path / "missing-dir" / "out.txt")
    assert len(store.display_all()) == 5


def test_manager_password() -> None:
    assert is_manager_password(MANAGER_PASSWORD)
    assert not is_manager_password("Admin123")
    store = MovieStore(manager_password="s3cret")
    assert store.is_manager_password("s3cret")
    assert not store.is_manager_password(MANAGER_PASSWORD)
