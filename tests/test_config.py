"""Tests for environment driven settings."""

import logging

from here_cli import config


def test_log_level_defaults_to_warning():
    assert config.log_level() == logging.WARNING


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("HERE_LOG_LEVEL", "debug")
    assert config.log_level() == logging.DEBUG


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("HERE_LOG_LEVEL", "chatty")
    assert config.log_level() == logging.WARNING


def test_color_disabled(monkeypatch):
    assert not config.color_disabled()
    monkeypatch.setenv("NO_COLOR", "1")
    assert config.color_disabled()


def test_search_backend(monkeypatch):
    assert config.search_backend() is None
    monkeypatch.setenv("HERE_SEARCH_BACKEND", " Where ")
    assert config.search_backend() == "where"
