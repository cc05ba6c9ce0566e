"""
Interactive console shell for the movie store.

Usage:
    moviestore [--config moviestore.yaml] [--data movies.txt] [--output output.txt]

A password prompt selects manager mode (add/remove allowed) or user mode, then
the main menu loops until 0 is chosen or input ends.
"""

from __future__ import annotations

import argparse
import logging
from typing import Callable, Dict, List, Optional, TextIO

from rich.console import Console
from rich.markup import escape

from moviestore.algorithms import SUPPORTED_ALGORITHMS
from moviestore.catalog import MovieStore
from moviestore.config import Settings, load_settings
from moviestore.errors import IOFailure, MovieStoreError
from moviestore.logs import configure_logging
from moviestore.records import Field, Movie
from moviestore.search import SUPPORTED_SEARCHES

__all__ = ["Shell", "main"]

logger = logging.getLogger(__name__)

_FIELDS = "/".join(f.value for f in Field)


class Shell:
    """
    Menu loop over a MovieStore.

    `stream`, when given, replaces the terminal as the input source (one
    answer per line); the shell exits when it runs dry.
    """

    def __init__(
        self,
        store: MovieStore,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.store = store
        self.console = console or Console()
        self.stream = stream
        self.is_manager = False
        self._actions: Dict[int, Callable[[], None]] = {
            1: self.display_all_movies,
            2: self.search_movies,
            3: self.sort_movies,
            4: self.add_movie,
            5: self.remove_movie,
        }

    # ------------------------- input ------------------------- #

    def _ask(self, prompt: str, password: bool = False) -> str:
        raw = self.console.input(
            prompt, markup=False, password=password and self.stream is None, stream=self.stream
        )
        if self.stream is not None and raw == "":
            raise EOFError
        return raw.rstrip("\r\n")

    def _ask_int(self, prompt: str) -> int:
        while True:
            raw = self._ask(prompt)
            try:
                return int(raw.strip())
            except ValueError:
                self.console.print("Invalid input. Please enter a number.")

    def _print_movies(self, movies: List[Movie]) -> None:
        for m in movies:
            self.console.print(m.describe(), markup=False, highlight=False)

    # ------------------------- flow ------------------------- #

    def run(self) -> None:
        try:
            self._login()
            while True:
                self._display_menu()
                choice = self._ask_int("Enter your choice: ")
                if choice == 0:
                    self.console.print("Thank you for using the Movie Store Management System!")
                    return
                action = self._actions.get(choice)
                if action is None:
                    self.console.print("Invalid choice. Please try again.")
                elif choice in (4, 5) and not self.is_manager:
                    self.console.print("Invalid option for user mode.")
                else:
                    try:
                        action()
                    except MovieStoreError as e:
                        self.console.print(f"[red]Error:[/red] {escape(str(e))}")
        except (EOFError, KeyboardInterrupt):
            self.console.print()
            logger.debug("input closed; leaving shell")

    def _login(self) -> None:
        password = self._ask(
            "Enter password for manager mode (or press Enter for user mode): ", password=True
        )
        self.is_manager = self.store.is_manager_password(password)
        if self.is_manager:
            self.console.print("Manager mode activated.")
        else:
            self.console.print("User mode activated.")

    def _display_menu(self) -> None:
        self.console.print("\n--- Movie Store Management System ---", markup=False)
        self.console.print("1. Display all movies")
        self.console.print("2. Search movies")
        self.console.print("3. Sort movies")
        if self.is_manager:
            self.console.print("4. Add a movie")
            self.console.print("5. Remove a movie")
        self.console.print("0. Exit")

    # ------------------------- actions ------------------------- #

    def display_all_movies(self) -> None:
        self._print_movies(self.store.display_all())

    def search_movies(self) -> None:
        field = self._ask(f"Search by ({_FIELDS}): ")
        query = self._ask("Enter search query: ")
        while True:
            algorithm = self._ask(f"Choose search algorithm ({'/'.join(SUPPORTED_SEARCHES)}): ").lower()
            if algorithm in SUPPORTED_SEARCHES:
                break

        results, elapsed_ms = self.store.search_algorithm(query, field, algorithm)
        if not results:
            self.console.print("No movies found.")
        else:
            self._print_movies(results)
        self.console.print(f"Search completed in {elapsed_ms:.3f} milliseconds.")

    def sort_movies(self) -> None:
        field = self._ask(f"Sort by ({_FIELDS}): ")
        algorithm = self._ask(f"Choose sorting algorithm ({'/'.join(SUPPORTED_ALGORITHMS)}): ")

        elapsed_ms = self.store.sort_movies(field, algorithm)
        self.console.print(f"Sorting completed in {elapsed_ms:.3f} milliseconds.")

        try:
            path = self.store.write_movies_to_file()
            self.console.print(f"Sorted movies have been written to {path}", markup=False)
        except IOFailure as e:
            self.console.print(f"Error writing to file: {e}", markup=False)

        self.console.print("Sorted Movies:")
        self._print_movies(self.store.display_all())

    def add_movie(self) -> None:
        title = self._ask("Enter movie title: ")
        actor = self._ask("Enter lead actor/actress: ")
        year = self._ask_int("Enter release year: ")
        genre = self._ask("Enter genre: ")
        self.store.add_movie(Movie(title=title, actor=actor, year=year, genre=genre))
        self.console.print("Movie added successfully.")

    def remove_movie(self) -> None:
        title = self._ask("Enter the title of the movie to remove: ")
        if self.store.remove_movie(title):
            self.console.print("Movie removed successfully.")
        else:
            self.console.print("Movie not found.")


# ------------------------- entry point ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Movie Store Management System.")
    p.add_argument("--config", type=str, default=None, help="Path to YAML settings file")
    p.add_argument("--data", type=str, default=None, help="Movie file to load (title,actor,year,genre)")
    p.add_argument("--output", type=str, default=None, help="File the sorted catalog is written to")
    p.add_argument("--log-level", type=str, default=None, help="Logging level")
    return p.parse_args(argv)


def build_store(settings: Settings) -> MovieStore:
    return MovieStore(
        data_file=settings.data_file,
        output_file=settings.output_file,
        manager_password=settings.manager_password,
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    try:
        settings = load_settings(args.config).override(
            data_file=args.data, output_file=args.output, log_level=args.log_level
        )
    except (OSError, ValueError) as e:
        raise SystemExit(f"Could not load settings: {e}")
    configure_logging(settings.log_level)
    Shell(build_store(settings)).run()


if __name__ == "__main__":
    main()
