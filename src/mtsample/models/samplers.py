"""Uniform and negative exponential samplers built on a uniform source."""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import NDArray

from mtsample.core.generator import INV_2_32, INV_2_32_MINUS_1
from mtsample.models.base import UniformSource

logger = logging.getLogger(__name__)


def closed_reals(words: NDArray[np.uint32]) -> NDArray[np.float64]:
    """Map raw words onto [0, 1], as ``next_real_closed`` does."""
    return words.astype(np.float64) * INV_2_32_MINUS_1


def half_open_reals(words: NDArray[np.uint32]) -> NDArray[np.float64]:
    """Map raw words onto [0, 1), as ``next_real_half_open`` does."""
    return words.astype(np.float64) * INV_2_32


def uniform(rng: UniformSource, low: float, high: float) -> float:
    """Draw a real on [low, high).

    ``low > high`` is not checked; the result then lies in (high, low].
    """
    return rng.next_real_half_open() * (high - low) + low


def uniform_many(rng: UniformSource, low: float, high: float, n: int) -> NDArray[np.float64]:
    """Draw ``n`` reals on [low, high), in the same order as repeated :func:`uniform`."""
    return half_open_reals(rng.next_u32_array(n)) * (high - low) + low


def exponential(rng: UniformSource, mean: float) -> float:
    """Draw a negative exponential deviate with the given mean.

    Uses ``-mean * log(1 - X)`` with ``X`` on the closed interval [0, 1].
    ``X == 1.0`` is a legal draw that sends the logarithm to minus
    infinity; the deviate is then ``inf``.
    """
    u = rng.next_real_closed()
    if u == 1.0:
        logger.debug("Closed-interval draw hit 1.0; exponential deviate is infinite")
        return math.inf
    return -mean * math.log(1.0 - u)


def exponential_many(rng: UniformSource, mean: float, n: int) -> NDArray[np.float64]:
    """Draw ``n`` exponential deviates, in the same order as repeated :func:`exponential`."""
    u = closed_reals(rng.next_u32_array(n))
    out = np.full(n, np.inf)
    finite = u < 1.0
    out[finite] = -mean * np.log(1.0 - u[finite])
    return out
