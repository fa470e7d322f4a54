"""Sample statistics for experiment output."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from mtsample.utils.exceptions import SimulationError


@dataclass(frozen=True)
class SampleSummary:
    """Basic moments and extremes of a sample."""

    n: int
    mean: float
    std: float
    minimum: float
    maximum: float


def summarize(samples: ArrayLike) -> SampleSummary:
    """Compute summary statistics.

    Raises:
        SimulationError: If the sample is empty.
    """
    arr = np.asarray(samples, dtype=np.float64)
    if arr.size == 0:
        raise SimulationError("Cannot summarize an empty sample")
    return SampleSummary(
        n=int(arr.size),
        mean=float(arr.mean()),
        std=float(arr.std()),
        minimum=float(arr.min()),
        maximum=float(arr.max()),
    )


def exponential_histogram(samples: ArrayLike, n_bins: int = 22) -> NDArray[np.int64]:
    """Count samples in unit-width bins.

    Bin ``k`` holds samples with integer part ``k`` for ``k < n_bins - 1``;
    the last bin collects everything from ``n_bins - 1`` upward, infinite
    deviates included.

    Args:
        samples: Non-negative deviates.
        n_bins: Number of bins, overflow bin included.

    Returns:
        Integer array of length ``n_bins``.
    """
    if n_bins < 2:
        raise ValueError(f"n_bins must be at least 2, got {n_bins}")
    arr = np.asarray(samples, dtype=np.float64)
    if (arr < 0).any():
        raise ValueError("exponential_histogram expects non-negative samples")
    bins = np.minimum(np.floor(arr), n_bins - 1).astype(np.int64)
    return np.bincount(bins, minlength=n_bins).astype(np.int64)
