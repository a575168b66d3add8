"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def scores() -> dict[str, int]:
    """Provide a fresh small mapping with distinct values for each test."""
    return {"a": 1, "b": 2, "c": 3}


@pytest.fixture
def empty() -> dict[str, int]:
    return {}
