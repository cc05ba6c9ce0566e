"""
Logging setup for the console entry points.

Library modules only create module loggers (`logging.getLogger(__name__)`);
handlers are installed here, once, by whichever entry point runs.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["configure_logging"]


def configure_logging(level: str = "WARNING", console: Optional[Console] = None) -> None:
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
