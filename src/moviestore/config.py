"""
Store settings, read from a YAML file.

Example `moviestore.yaml`:

    data_file: movies.txt
    output_file: output.txt
    manager_password: admin123
    log_level: WARNING

Every key is optional; missing keys take the defaults above. Unknown keys and
values of the wrong type raise ValueError. Quote passwords that YAML would
read as something else (`manager_password: "0123"`).
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

__all__ = ["Settings", "load_settings"]

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Settings:
    data_file: str = "movies.txt"
    output_file: str = "output.txt"
    manager_password: str = "admin123"
    log_level: str = "WARNING"

    def override(self, **changes: Any) -> "Settings":
        """Return a copy with every non-None value in `changes` applied."""
        return _validated(replace(self, **{k: v for k, v in changes.items() if v is not None}))


def _validated(s: Settings) -> Settings:
    for f in fields(s):
        val = getattr(s, f.name)
        if not isinstance(val, str):
            raise ValueError(f"Setting {f.name!r} must be a string; got {val!r}")
    if s.log_level.upper() not in _LOG_LEVELS:
        raise ValueError(
            f"Setting 'log_level' must be one of {sorted(_LOG_LEVELS)}; got {s.log_level!r}"
        )
    return s


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must be a mapping at the top level")
    return data


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """Read settings from `path`; None means all defaults."""
    if path is None:
        return Settings()
    cfg = _load_yaml(Path(path))

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(cfg) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")

    # YAML 1.1 resolves bare 0123, true, 1.5 ... before we see them
    if "manager_password" in cfg and not isinstance(cfg["manager_password"], str):
        raise ValueError(
            f"Setting 'manager_password' must be a string; got {cfg['manager_password']!r} "
            "(quote the password in the YAML file)"
        )

    return _validated(Settings(**cfg))
