"""Compute the base path a run starts from."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .models import Configuration
from .search import Chooser, Searcher, default_searcher, select_candidate
from .transform import clean_path

logger = logging.getLogger(__name__)


def resolve_base_path(
    config: Configuration,
    searcher: Optional[Searcher] = None,
    chooser: Optional[Chooser] = None,
    cwd: Optional[str] = None,
) -> str:
    """Return the path for the current mode.

    Default mode uses the working directory, segment mode joins the
    positional argument onto it, and search mode (``-w``) asks the search
    backend for the program named by the positional argument. Segment and
    search results are cleaned the same way.
    """
    if config.from_where and config.target:
        logger.debug("Search mode for %r", config.target)
        result = (searcher or default_searcher()).search(config.target)
        chosen = select_candidate(result, select_first=config.select_first, chooser=chooser)
        return clean_path(chosen)

    base = Path(cwd) if cwd is not None else Path.cwd()
    if not config.target:
        logger.debug("Default mode: %s", base)
        return str(base)

    logger.debug("Segment mode: %s + %r", base, config.target)
    return clean_path(base / config.target)
