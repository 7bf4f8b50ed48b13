"""Pytest configuration and fixtures for here tests."""

import os
import shutil
import stat
import tempfile
from pathlib import Path
from typing import Callable, Generator, List

import pytest

from here_cli.models import SearchResult

PROJECT_DIR = "/home/user/project"


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Strip environment variables that change colors or the search backend."""
    for name in ("NO_COLOR", "HERE_NO_COLOR", "HERE_SEARCH_BACKEND", "HERE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def clipboard(monkeypatch) -> List[str]:
    """Record clipboard writes instead of touching the real clipboard."""
    copied: List[str] = []
    monkeypatch.setattr("here_cli.cli.copy_to_clipboard", copied.append)
    return copied


@pytest.fixture(autouse=True)
def typed(monkeypatch) -> List[str]:
    """Record directory changes instead of injecting keystrokes."""
    paths: List[str] = []

    def _emit_cd(path):
        paths.append(path)
        return None

    monkeypatch.setattr("here_cli.cli.emit_cd", _emit_cd)
    return paths


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def fake_cwd(monkeypatch) -> str:
    """Pretend the process runs in /home/user/project."""
    monkeypatch.setattr(os, "getcwd", lambda: PROJECT_DIR)
    return PROJECT_DIR


class FakeSearcher:
    def __init__(self, candidates):
        self.candidates = tuple(candidates)
        self.calls: List[str] = []

    def search(self, name: str) -> SearchResult:
        self.calls.append(name)
        return SearchResult(program=name, candidates=self.candidates)


@pytest.fixture
def fake_search(monkeypatch) -> Callable[..., FakeSearcher]:
    """Install a searcher returning the given candidates."""

    def _install(*candidates: str) -> FakeSearcher:
        searcher = FakeSearcher(candidates)
        monkeypatch.setattr("here_cli.resolver.default_searcher", lambda: searcher)
        return searcher

    return _install


@pytest.fixture
def make_executable() -> Callable[[Path], Path]:
    """Create an executable file at the given path."""

    def _make(path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("#!/bin/sh\n")
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    return _make
