"""Default configuration values for mtsample."""

from __future__ import annotations

from mtsample.config.schema import (
    ClassesConfig,
    ExperimentConfig,
    ExponentialConfig,
    GeneratorConfig,
    UniformConfig,
)

# Worked example of a class frequency table: six classes A-F.
COURSE_CLASS_COUNTS: list[int] = [100, 400, 600, 400, 100, 200]

# Key used by the reference mt19937ar test program.
REFERENCE_INIT_KEY: list[int] = [0x123, 0x234, 0x345, 0x456]


def default_generator() -> GeneratorConfig:
    """Unseeded generator (falls back to seed 5489 on first draw)."""
    return GeneratorConfig()


def default_uniform() -> UniformConfig:
    """Ten draws on [-89.2, 56.7)."""
    return UniformConfig(low=-89.2, high=56.7, n_draws=10)


def default_classes() -> ClassesConfig:
    """1000 draws into A (<= 0.5), B (<= 0.65) and C."""
    return ClassesConfig(n_draws=1000, labels=["A", "B", "C"], thresholds=[0.5, 0.65])


def default_exponential() -> ExponentialConfig:
    """10 000 exponential draws with mean 11, histogrammed into 22 bins."""
    return ExponentialConfig(mean=11.0, n_draws=10_000, n_bins=22)


def default_experiment_config() -> ExperimentConfig:
    return ExperimentConfig(
        generator=default_generator(),
        uniform=default_uniform(),
        classes=default_classes(),
        exponential=default_exponential(),
    )
