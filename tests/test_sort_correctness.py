"""
Correctness tests for the four sort algorithms against the oracle (Python's built-in sorted).

What we check, for every (algorithm, field) pair:
- Output is ordered under the field's comparator
- Permutation preservation (no lost/duplicated records)
- Same key sequence as the oracle; exact oracle match for merge sort (stable)
- Sorting sorted input changes nothing
"""

from __future__ import annotations

from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from moviestore.algorithms import SUPPORTED_ALGORITHMS, SortAlgorithm, get_sorter, sort
from moviestore.errors import InvalidAlgorithm, InvalidField
from moviestore.records import Field, Movie, resolve
from moviestore.validate import (
    equals_oracle,
    first_order_violation_index,
    is_permutation,
    is_stable,
    oracle_sort,
    same_keys_as_oracle,
)

ALGOS = list(SortAlgorithm)
FIELDS = list(Field)


# ------------------------- helpers ------------------------- #

def _check_one(movies: List[Movie], algo: SortAlgorithm, field: Field) -> None:
    """Common assertion bundle for one input."""
    before = list(movies)
    out = list(movies)
    sort(out, resolve(field), algo)

    i = first_order_violation_index(out, field)
    assert i is None, f"{algo.value} out of order at i={i}: {out[i]} > {out[i + 1]}"
    assert is_permutation(before, out), "Output is not a permutation of input"
    assert same_keys_as_oracle(before, out, field)
    if algo is SortAlgorithm.MERGESORT:
        assert equals_oracle(before, out, field)

    # Idempotence
    again = list(out)
    sort(again, resolve(field), algo)
    assert [field.value_of(m) for m in again] == [field.value_of(m) for m in out]


def _m(title: str, year: int = 2000, actor: str = "A", genre: str = "G") -> Movie:
    return Movie(title, actor, year, genre)


# ------------------------- unit tests (deterministic) ------------------------- #

CASES = [
    [],
    [_m("Solo")],
    [_m("b", 2001), _m("a", 2000)],
    [_m("a", 1990), _m("b", 1991), _m("c", 1992)],
    [_m("d", 2004), _m("c", 2003), _m("b", 2002), _m("a", 2001)],
    [_m("Up", 2009), _m("UP", 2009), _m("up", 2009)],
    [_m("alien", 1979), _m("Brazil", 1985), _m("Alien", 1979), _m("brazil", 1985)],
    [_m(str(i), 2000 - i) for i in range(20)],
]


@pytest.mark.parametrize("algo", ALGOS, ids=lambda a: a.value)
@pytest.mark.parametrize("field", FIELDS, ids=lambda f: f.value)
@pytest.mark.parametrize("movies", CASES)
def test_unit_cases(movies: List[Movie], algo: SortAlgorithm, field: Field) -> None:
    _check_one(movies, algo, field)


def test_string_fields_sort_case_sensitively() -> None:
    movies = [_m("alien"), _m("Brazil"), _m("Zodiac"), _m("amélie")]
    sort(movies, resolve("title"), "mergesort")
    assert [m.title for m in movies] == ["Brazil", "Zodiac", "alien", "amélie"]


def test_year_sorts_numerically() -> None:
    movies = [_m("a", 2010), _m("b", 999), _m("c", 1994)]
    sort(movies, resolve("year"), "insertionsort")
    assert [m.year for m in movies] == [999, 1994, 2010]


def test_merge_sort_is_stable() -> None:
    movies = [_m("x", 1994), _m("y", 1990), _m("z", 1994), _m("w", 1990), _m("v", 1994)]
    before = list(movies)
    sort(movies, resolve(Field.YEAR), SortAlgorithm.MERGESORT)
    assert [m.title for m in movies] == ["y", "w", "x", "z", "v"]
    assert is_stable(before, movies, Field.YEAR)


def test_sorting_sorted_sequence_is_unchanged() -> None:
    movies = oracle_sort([_m(t, y) for t, y in [("c", 3), ("a", 1), ("b", 2)]], "title")
    for algo in ALGOS:
        out = list(movies)
        sort(out, resolve("title"), algo)
        assert out == movies


@pytest.mark.parametrize("name", ["MergeSort", " bubblesort ", "insertion", "SELECTION"])
def test_algorithm_names_are_case_insensitive(name: str) -> None:
    assert SortAlgorithm.parse(name).value in SUPPORTED_ALGORITHMS
    assert callable(get_sorter(name))


def test_unknown_algorithm_raises() -> None:
    with pytest.raises(InvalidAlgorithm):
        sort([_m("a")], resolve("title"), "quicksort")


def test_unknown_field_raises() -> None:
    with pytest.raises(InvalidField):
        resolve("director")


# ------------------------- property-based tests (randomized) ------------------------- #

# Small alphabets and year ranges force plenty of ties
movies_st = st.builds(
    Movie,
    title=st.text(alphabet="aAbBc", max_size=3),
    actor=st.text(alphabet="xyZ", max_size=2),
    year=st.integers(min_value=1990, max_value=1995),
    genre=st.sampled_from(["Drama", "drama", "Comedy", "Horror"]),
)


@settings(deadline=None, max_examples=60)
@given(st.lists(movies_st, max_size=40), st.sampled_from(ALGOS), st.sampled_from(FIELDS))
def test_property_sorts_match_oracle(movies: List[Movie], algo: SortAlgorithm, field: Field) -> None:
    _check_one(movies, algo, field)


@settings(deadline=None, max_examples=60)
@given(st.lists(movies_st, max_size=60), st.sampled_from(FIELDS))
def test_property_merge_sort_stable(movies: List[Movie], field: Field) -> None:
    before = list(movies)
    out = list(movies)
    get_sorter("mergesort")(out, resolve(field))
    assert is_stable(before, out, field)
