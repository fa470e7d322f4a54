"""Deterministic generator factory for reproducible experiments."""

from __future__ import annotations

from collections.abc import Sequence

from mtsample.config.schema import GeneratorConfig
from mtsample.core.generator import MersenneTwister


def make_rng(
    seed: int | None = None,
    key: Sequence[int] | None = None,
) -> MersenneTwister:
    """Create a Mersenne Twister from a scalar seed or a seed key.

    With neither argument the generator falls back to the default seed
    (5489) on its first draw.
    """
    return MersenneTwister(seed, key=key)


def rng_from_config(config: GeneratorConfig) -> MersenneTwister:
    """Create a Mersenne Twister described by a :class:`GeneratorConfig`."""
    return make_rng(config.seed, config.init_key)
