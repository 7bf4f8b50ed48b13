"""Runtime settings for here, read from the environment."""

from __future__ import annotations

import logging
import os
from typing import Optional

PROG_NAME = "here"

# Truecolor palette (r, g, b)
SALMON = (250, 128, 114)
CRIMSON = (220, 20, 60)
ORANGE = (255, 165, 0)

SEARCH_BACKENDS = {"where", "path"}

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def color_disabled() -> bool:
    """Return True when the environment asks for plain output."""
    return bool(os.environ.get("NO_COLOR") or os.environ.get("HERE_NO_COLOR"))


def search_backend() -> Optional[str]:
    """Search backend forced through ``HERE_SEARCH_BACKEND``, if any."""
    value = os.environ.get("HERE_SEARCH_BACKEND", "").strip().lower()
    return value if value in SEARCH_BACKENDS else None


def log_level() -> int:
    name = os.environ.get("HERE_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging() -> None:
    """Configure the root logger from ``HERE_LOG_LEVEL`` (default WARNING)."""
    logging.basicConfig(level=log_level(), format=LOG_FORMAT)
