"""Pytest configuration file."""

import os

import pytest

from codetags import InstanceRegistry


@pytest.fixture
def fixture_dir() -> str:
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "tests", "codetags", "fixture"))


@pytest.fixture
def make_registry():
    """Build a registry whose instances read the given mapping instead of os.environ."""

    def _make(env: dict | None = None) -> InstanceRegistry:
        return InstanceRegistry(env=env or {})

    return _make
