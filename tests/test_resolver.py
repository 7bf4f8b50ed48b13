"""Tests for base path resolution."""

import os

import pytest

from here_cli.errors import NotFoundError
from here_cli.models import Configuration
from here_cli.resolver import resolve_base_path


def test_default_mode_uses_cwd():
    assert resolve_base_path(Configuration(), cwd="/home/user/project") == "/home/user/project"


def test_default_mode_reads_process_cwd(fake_cwd):
    assert resolve_base_path(Configuration()) == fake_cwd


def test_segment_mode_joins_without_existence_check():
    config = Configuration(target="does/not/exist.txt")

    assert resolve_base_path(config, cwd="/home/user/project") == os.path.normpath(
        "/home/user/project/does/not/exist.txt"
    )


def test_segment_mode_cleans_dot_segments():
    config = Configuration(target="./a/../b")

    assert resolve_base_path(config, cwd="/srv") == os.path.normpath("/srv/b")


def test_search_mode_uses_searcher(fake_search):
    searcher = fake_search("/usr/bin/myprog", "/usr/local/bin/myprog")
    config = Configuration(target="myprog", from_where=True, select_first=True)

    assert resolve_base_path(config) == "/usr/bin/myprog"
    assert searcher.calls == ["myprog"]


def test_search_mode_not_found(fake_search):
    fake_search()
    config = Configuration(target="missingprog", from_where=True)

    with pytest.raises(NotFoundError):
        resolve_base_path(config)


def test_search_mode_passes_chooser(fake_search):
    fake_search("/a/myprog", "/b/myprog")
    config = Configuration(target="myprog", from_where=True)

    assert resolve_base_path(config, chooser=lambda c: c[-1]) == "/b/myprog"


def test_search_mode_cleans_candidate(fake_search):
    fake_search("/usr/local/../bin/myprog")
    config = Configuration(target="myprog", from_where=True)

    assert resolve_base_path(config) == os.path.normpath("/usr/bin/myprog")


def test_segment_mode_with_process_cwd(fake_cwd):
    config = Configuration(target="src/../docs")

    assert resolve_base_path(config) == os.path.normpath(fake_cwd + "/docs")
