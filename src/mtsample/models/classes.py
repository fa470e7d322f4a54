"""Discrete class draws and class frequency tables."""

from __future__ import annotations

import string
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from mtsample.models.base import UniformSource
from mtsample.models.samplers import closed_reals
from mtsample.utils.exceptions import SimulationError


@dataclass(frozen=True)
class ClassCounts:
    """How many draws fell into each class."""

    labels: tuple[str, ...]
    counts: tuple[int, ...]

    @property
    def total(self) -> int:
        return sum(self.counts)

    def as_dict(self) -> dict[str, int]:
        return dict(zip(self.labels, self.counts))


@dataclass(frozen=True)
class FrequencyTable:
    """Per-class and cumulative empirical probabilities."""

    labels: tuple[str, ...]
    counts: tuple[int, ...]
    probabilities: tuple[float, ...]
    cumulative: tuple[float, ...]


def default_labels(n: int) -> tuple[str, ...]:
    """``A``, ``B``, ``C``... for up to 26 classes, then ``C27``, ``C28``..."""
    letters = string.ascii_uppercase
    return tuple(letters[i] if i < len(letters) else f"C{i + 1}" for i in range(n))


def simulate_classes(
    rng: UniformSource,
    n_draws: int,
    thresholds: Sequence[float] = (0.5, 0.65),
    labels: Sequence[str] | None = None,
) -> ClassCounts:
    """Draw ``n_draws`` values on [0, 1] and count them per class.

    A draw ``x`` lands in class ``i`` for the first threshold with
    ``x <= thresholds[i]``, or in the last class if it exceeds them all.

    Args:
        rng: Uniform source.
        n_draws: Number of draws.
        thresholds: Increasing inclusive upper bounds, one per class but
            the last.
        labels: Class labels; defaults to ``A``, ``B``, ...

    Returns:
        ClassCounts with one count per class.
    """
    if n_draws < 0:
        raise ValueError(f"n_draws must be non-negative, got {n_draws}")
    for lo, hi in zip(thresholds, thresholds[1:]):
        if hi <= lo:
            raise ValueError(f"thresholds must be strictly increasing, got {list(thresholds)}")
    n_classes = len(thresholds) + 1
    if labels is None:
        labels = default_labels(n_classes)
    if len(labels) != n_classes:
        raise ValueError(f"Expected {n_classes} labels, got {len(labels)}")

    draws = closed_reals(rng.next_u32_array(n_draws))
    idx = np.searchsorted(np.asarray(thresholds, dtype=np.float64), draws, side="left")
    counts = np.bincount(idx, minlength=n_classes)
    return ClassCounts(labels=tuple(labels), counts=tuple(int(c) for c in counts))


def class_frequencies(
    counts: Sequence[int] | ClassCounts,
    labels: Sequence[str] | None = None,
) -> FrequencyTable:
    """Turn class counts into probabilities and cumulative probabilities.

    Raises:
        SimulationError: If there are no classes or no observations.
    """
    if isinstance(counts, ClassCounts):
        if labels is None:
            labels = counts.labels
        counts = counts.counts
    arr = np.asarray(counts, dtype=np.int64)
    if arr.size == 0:
        raise SimulationError("Frequency table needs at least one class")
    if (arr < 0).any():
        raise SimulationError("Class counts must be non-negative")
    total = int(arr.sum())
    if total == 0:
        raise SimulationError("Frequency table has no observations")
    if labels is None:
        labels = default_labels(arr.size)
    if len(labels) != arr.size:
        raise ValueError(f"Expected {arr.size} labels, got {len(labels)}")

    proba = arr / total
    cumulative = np.cumsum(proba)
    return FrequencyTable(
        labels=tuple(labels),
        counts=tuple(int(c) for c in arr),
        probabilities=tuple(float(p) for p in proba),
        cumulative=tuple(float(c) for c in cumulative),
    )
