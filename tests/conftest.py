"""Shared test fixtures."""

from __future__ import annotations

import pytest

from mtsample.core.generator import MersenneTwister


@pytest.fixture
def rng() -> MersenneTwister:
    """Deterministic generator for tests."""
    return MersenneTwister(42)
