"""Custom exceptions for mtsample."""

from __future__ import annotations


class MtsampleError(Exception):
    """Base exception for mtsample."""


class SeedError(MtsampleError, ValueError):
    """Invalid seed or seed key."""


class ConfigError(MtsampleError):
    """Invalid configuration."""


class SimulationError(MtsampleError):
    """Error during an experiment or aggregation."""
