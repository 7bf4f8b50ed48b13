"""Locate executables the way the platform's ``where`` facility does."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Protocol, Sequence

from rich.console import Console
from rich.prompt import Prompt

from . import config
from .errors import NotFoundError, ResolutionError, UserCancelled
from .models import SearchResult

logger = logging.getLogger(__name__)

Chooser = Callable[[Sequence[str]], str]

CANCEL_CHOICE = "q"


class Searcher(Protocol):
    def search(self, name: str) -> SearchResult:
        ...


def parse_where_output(text: str) -> List[str]:
    """Split ``where``-style output into candidate paths, in order."""
    lines = text.replace("\r", "").split("\n")
    return [line.strip() for line in lines if line.strip()]


class WhereSearch:
    """Windows backend: ``cmd /C where <name>`` in a subprocess."""

    def __init__(self, runner: Callable[..., subprocess.CompletedProcess] = subprocess.run):
        self._run = runner

    def command(self, name: str) -> List[str]:
        return ["cmd", "/C", "where", name]

    def search(self, name: str) -> SearchResult:
        cmd = self.command(name)
        logger.debug("Running search command: %s", cmd)
        try:
            proc = self._run(cmd, capture_output=True, text=True)
        except OSError as exc:
            raise ResolutionError(f"Failed to run 'where': {exc}") from exc

        candidates = parse_where_output(proc.stdout or "")
        if proc.returncode != 0 and not candidates:
            logger.debug("'where' exited with %s: %s", proc.returncode, (proc.stderr or "").strip())
        return SearchResult(program=name, candidates=tuple(candidates))


class PathScanSearch:
    """POSIX backend: walk each ``PATH`` entry and collect executables.

    Candidates follow ``PATH`` order; a directory listed twice (or reached
    through a symlink) only contributes once.
    """

    def __init__(self, path: Optional[str] = None, pathext: Optional[str] = None):
        self._path = path
        self._pathext = pathext

    def _directories(self) -> List[Path]:
        raw = self._path if self._path is not None else os.environ.get("PATH", "")
        return [Path(entry) for entry in raw.split(os.pathsep) if entry]

    def _names(self, name: str) -> List[str]:
        if sys.platform != "win32" and self._pathext is None:
            return [name]
        exts = (self._pathext or os.environ.get("PATHEXT", ".COM;.EXE;.BAT;.CMD")).split(os.pathsep)
        if any(name.lower().endswith(ext.lower()) for ext in exts if ext):
            return [name]
        return [name] + [name + ext for ext in exts if ext]

    @staticmethod
    def _is_executable(candidate: Path) -> bool:
        return candidate.is_file() and os.access(candidate, os.X_OK)

    def _scan(self, name: str) -> Iterator[str]:
        if os.sep in name or (os.altsep and os.altsep in name):
            direct = Path(name)
            if self._is_executable(direct):
                yield str(direct.absolute())
            return

        seen = set()
        for directory in self._directories():
            key = directory.resolve()
            if key in seen:
                continue
            seen.add(key)
            for filename in self._names(name):
                candidate = directory / filename
                if self._is_executable(candidate):
                    yield str(candidate)

    def search(self, name: str) -> SearchResult:
        candidates = tuple(self._scan(name))
        logger.debug("PATH scan for %r found %d candidate(s)", name, len(candidates))
        return SearchResult(program=name, candidates=candidates)


def default_searcher() -> Searcher:
    """Pick the search backend for this platform (``HERE_SEARCH_BACKEND`` wins)."""
    backend = config.search_backend()
    if backend is None:
        backend = "where" if sys.platform == "win32" else "path"
    return WhereSearch() if backend == "where" else PathScanSearch()


def prompt_for_candidate(candidates: Sequence[str], console: Optional[Console] = None) -> str:
    """Ask the user to pick one of several candidates.

    Raises:
        UserCancelled: on ``q``, end of input or Ctrl+C.
    """
    console = console or Console(stderr=True, highlight=False)
    console.print("\n[bold]Select a path:[/bold]")
    for index, candidate in enumerate(candidates, 1):
        console.print(f"  {index}) {candidate}")

    choices = [str(i) for i in range(1, len(candidates) + 1)] + [CANCEL_CHOICE]
    try:
        answer = Prompt.ask(
            f"Choice [1-{len(candidates)}, {CANCEL_CHOICE} to cancel]",
            choices=choices,
            show_choices=False,
            console=console,
        )
    except KeyboardInterrupt:
        raise UserCancelled(interrupted=True) from None
    except EOFError:
        raise UserCancelled() from None

    if answer == CANCEL_CHOICE:
        raise UserCancelled()
    return candidates[int(answer) - 1]


def select_candidate(
    result: SearchResult,
    select_first: bool = False,
    chooser: Optional[Chooser] = None,
) -> str:
    """Collapse a search result into exactly one path."""
    if result.is_empty:
        raise NotFoundError(result.program)
    if not result.is_ambiguous:
        return result.first
    if select_first:
        logger.debug("Selecting first of %d candidates", len(result.candidates))
        return result.first
    return (chooser or prompt_for_candidate)(result.candidates)
