"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from graphcopy import AliasTracker, CopySettings, Dispatcher, default_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep GRAPHCOPY_* variables of the host and cached defaults out of every test."""
    monkeypatch.delenv("GRAPHCOPY_MAX_DEPTH", raising=False)
    monkeypatch.delenv("GRAPHCOPY_WARN_ON_KEY_COLLISION", raising=False)
    default_settings.cache_clear()
    yield
    default_settings.cache_clear()


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return CopySettings()


@pytest.fixture
def tracker():
    """Fresh aliasing tracker."""
    return AliasTracker()


@pytest.fixture
def dispatcher(settings):
    """Dispatcher using default settings."""
    return Dispatcher(settings)
