from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str | None = None, *, console: Console | None = None) -> None:
    """Minimal logging setup.

    - Uses POPCORN_LOG_LEVEL when `level` is None (default WARNING).
    - Routes records through a single RichHandler on stderr.
    """

    level_name = (level or os.getenv("POPCORN_LOG_LEVEL") or "WARNING").upper()
    level_value = getattr(logging, level_name, logging.WARNING)

    logging.basicConfig(
        level=level_value,
        format="%(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[RichHandler(console=console or Console(stderr=True), show_path=False)],
        force=True,
    )
