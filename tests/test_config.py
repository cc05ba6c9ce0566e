from __future__ import annotations

import pathlib

import pytest

from moviestore.config import Settings, load_settings


def test_defaults_without_file() -> None:
    s = load_settings(None)
    assert s == Settings()
    assert s.data_file == "movies.txt"
    assert s.manager_password == "admin123"


def test_partial_file_keeps_defaults(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "s.yaml"
    path.write_text("output_file: sorted.txt\nlog_level: debug\n", encoding="utf-8")
    s = load_settings(path)
    assert s.output_file == "sorted.txt"
    assert s.log_level == "debug"
    assert s.data_file == "movies.txt"


def test_empty_file_is_defaults(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "s.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(path) == Settings()


@pytest.mark.parametrize(
    "body",
    [
        "colour: blue\n",
        "data_file: [a, b]\n",
        "log_level: LOUD\n",
        "- just\n- a list\n",
    ],
)
def test_invalid_files_raise(tmp_path: pathlib.Path, body: str) -> None:
    path = tmp_path / "s.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(path)


def test_override_ignores_none() -> None:
    s = Settings().override(data_file="other.txt", output_file=None)
    assert s.data_file == "other.txt"
    assert s.output_file == "output.txt"
    with pytest.raises(ValueError):
        Settings().override(log_level="chatty")


@pytest.mark.parametrize("raw", ["0123", "true", "1234", "1.5", "null"])
def test_unquoted_password_scalars_are_rejected(tmp_path: pathlib.Path, raw: str) -> None:
    path = tmp_path / "s.yaml"
    path.write_text(f"manager_password: {raw}\n", encoding="utf-8")
    with pytest.raises(ValueError, match="quote the password"):
        load_settings(path)


def test_quoted_password_is_kept_verbatim(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "s.yaml"
    path.write_text('manager_password: "0123"\n', encoding="utf-8")
    assert load_settings(path).manager_password == "0123"
