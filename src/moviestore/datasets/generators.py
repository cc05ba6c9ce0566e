"""
Synthetic catalog generators for tests and sorting benchmarks.

Currently implemented:
- dist == "random":
    Titles, actors and genres drawn uniformly from word pools; years drawn
    uniformly from an inclusive range.

- dist == "nearly_sorted":
    Start from records with nondecreasing years, then perform
    ceil(swap_frac * n) random index swaps using the provided RNG.

- dist == "few_uniques":
    Pick at most k distinct records, then fill the catalog by sampling them
    uniformly. Produces many ties on every field.

- dist == "reversed":
    Deterministic: years descending from the top of the range (wrapping
    around once the range is exhausted).

Public API (stable):
    make_catalog(n: int, spec: dict, rng: numpy.random.Generator) -> list[Movie]

Conventions:
- Year ranges in params["years"] are **inclusive** on both ends
  (default [1920, 2024]).
- Returns a Python `list[Movie]` (algorithms stay NumPy-agnostic).
- The caller supplies the RNG (for reproducibility across runs where applicable).
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import numpy as np

from moviestore.records import Movie

SUPPORTED_DISTS = {
    "random",
    "nearly_sorted",
    "few_uniques",
    "reversed",
}
__all__ = ["SUPPORTED_DISTS", "make_catalog"]

DEFAULT_YEARS = (1920, 2024)

_TITLE_WORDS = [
    "Alien", "Blade", "Casablanca", "Dune", "Eraserhead", "Fargo", "Gattaca",
    "Heat", "Inception", "Jaws", "Kes", "Léon", "Memento", "Nosferatu",
    "Oldboy", "Psycho", "Ran", "Se7en", "Tampopo", "Up", "Vertigo", "Wall-E",
    "Xanadu", "Yojimbo", "Zodiac",
]
_ACTORS = [
    "Bette Davis", "Cary Grant", "Denzel Washington", "Frances McDormand",
    "Gong Li", "Humphrey Bogart", "Isabelle Huppert", "Jean Reno",
    "Kim Novak", "Marlon Brando", "Meryl Streep", "Sigourney Weaver",
    "Tilda Swinton", "Toshiro Mifune", "Viola Davis",
]
_GENRES = [
    "Action", "Animation", "Comedy", "Crime", "Documentary", "Drama",
    "Fantasy", "Horror", "Musical", "Romance", "Sci-Fi", "Thriller", "Western",
]


def make_catalog(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[Movie]:
    """
    Generate a list of Movies according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of records to generate. Must be >= 0.
    spec : dict
        Distribution specification, e.g.

            {"dist": "random", "params": {"years": [1950, 2000]}}
            {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}
            {"dist": "few_uniques", "params": {"k": 5}}
            {"dist": "reversed", "params": {}}

    rng : numpy.random.Generator
        Random number generator owned by the caller (seeded upstream).
        Unused for "reversed".

    Returns
    -------
    list[Movie]

    Raises
    ------
    ValueError
        If inputs are invalid or if the distribution is unsupported.
    """
    _validate_n(n)

    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params", {}) or {}
    lo, hi = _parse_years(params)

    if n == 0:
        return []

    if dist == "random":
        return _draw(n, lo, hi, rng)

    if dist == "nearly_sorted":
        swap_frac = _parse_swap_frac(params)
        years = np.sort(rng.integers(lo, hi + 1, size=n))
        arr = [_ordered_movie(i, int(y)) for i, y in enumerate(years)]
        num_swaps = int(np.ceil(swap_frac * n))
        if num_swaps <= 0:
            return arr
        idxs = rng.integers(0, n, size=2 * num_swaps)
        for k in range(num_swaps):
            i = int(idxs[2 * k])
            j = int(idxs[2 * k + 1])
            if i != j:
                arr[i], arr[j] = arr[j], arr[i]
        return arr

    if dist == "few_uniques":
        k = _parse_k(params)
        pool = _draw(min(k, n), lo, hi, rng)
        picks = rng.integers(0, len(pool), size=n)
        return [pool[int(t)] for t in picks]

    if dist == "reversed":
        # Deterministic; `rng` is unused.
        return [_ordered_movie(n - 1 - i, hi - (i % (hi - lo + 1))) for i in range(n)]

    # Should be unreachable because of the check above; keep explicit for clarity.
    raise ValueError(f"Unhandled dataset dist: {dist!r}")


# ------------------------- helpers ------------------------- #


def _draw(n: int, lo: int, hi: int, rng: np.random.Generator) -> List[Movie]:
    t = rng.integers(0, len(_TITLE_WORDS), size=n)
    s = rng.integers(0, 1000, size=n)
    a = rng.integers(0, len(_ACTORS), size=n)
    g = rng.integers(0, len(_GENRES), size=n)
    y = rng.integers(lo, hi + 1, size=n)
    return [
        Movie(
            title=f"{_TITLE_WORDS[int(t[i])]} {int(s[i])}",
            actor=_ACTORS[int(a[i])],
            year=int(y[i]),
            genre=_GENRES[int(g[i])],
        )
        for i in range(n)
    ]


def _ordered_movie(i: int, year: int) -> Movie:
    word = _TITLE_WORDS[i % len(_TITLE_WORDS)]
    return Movie(
        title=f"{word} {i // len(_TITLE_WORDS):04d}",
        actor=_ACTORS[i % len(_ACTORS)],
        year=year,
        genre=_GENRES[i % len(_GENRES)],
    )


def _validate_n(n: int) -> None:
    if not isinstance(n, int):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_years(params: Dict[str, Any]) -> Tuple[int, int]:
    """Parse the optional inclusive year range; default DEFAULT_YEARS."""
    if "years" not in params:
        return DEFAULT_YEARS
    spec = params["years"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError("params.years must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError("params.years values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"params.years invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    """
    Parse and validate swap_frac in [0.0, 1.0] for nearly_sorted.
    Default to 0.05 if not provided.
    """
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}"
        )
    return x


def _parse_k(params: Dict[str, Any]) -> int:
    """
    Parse and validate k (desired #unique records) for few_uniques.
    Must be an integer >= 1.
    """
    if "k" not in params:
        raise ValueError("few_uniques.params.k must be provided (int >= 1)")
    k = params["k"]
    if not isinstance(k, int) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    return k


def _is_int_like(x: Any) -> bool:
    # Accept Python ints and NumPy integer types
    return isinstance(x, (int, np.integer))
