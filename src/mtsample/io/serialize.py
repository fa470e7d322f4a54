"""Serialization for configs, results and frequency tables."""

from __future__ import annotations

import csv
import hashlib
import io
import json
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from mtsample.config.schema import ExperimentConfig
from mtsample.models.classes import FrequencyTable
from mtsample.utils.exceptions import ConfigError

if TYPE_CHECKING:
    from mtsample.core.engine import ExperimentResult


def compute_config_hash(config: ExperimentConfig) -> str:
    """Compute a deterministic SHA-256 hash of a config.

    Uses canonical JSON (sorted keys, no whitespace) so the same
    logical config always produces the same hash.
    """
    canonical = json.dumps(config.model_dump(), sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode()).hexdigest()


def dump_config(config: ExperimentConfig) -> str:
    """Serialize a config to a JSON string."""
    return json.dumps(config.model_dump(), indent=2)


def config_from_data(data: Any) -> ExperimentConfig:
    """Validate already-parsed config data.

    Raises:
        ConfigError: If the data is not a valid experiment config.
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")
    try:
        return ExperimentConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid experiment config:\n{exc}") from exc


def load_config(json_str: str) -> ExperimentConfig:
    """Deserialize a config from a JSON string."""
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config is not valid JSON: {exc}") from exc
    return config_from_data(data)


def dump_frequency_csv(table: FrequencyTable) -> str:
    """Export a frequency table as CSV (Class, Count, Probability, Cumulative)."""
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(["Class", "Count", "Probability", "Cumulative"])
    for label, count, p, cum in zip(
        table.labels, table.counts, table.probabilities, table.cumulative
    ):
        writer.writerow([label, count, f"{p:.6f}", f"{cum:.6f}"])
    return output.getvalue()


def dump_results_summary(result: ExperimentResult) -> str:
    """Serialize an experiment result summary to JSON."""
    summary = result.exponential_summary
    data = {
        "uniform_draws": [float(x) for x in result.uniform_draws],
        "classes": {
            "counts": result.class_counts.as_dict(),
            "probabilities": dict(zip(result.class_table.labels, result.class_table.probabilities)),
            "cumulative": dict(zip(result.class_table.labels, result.class_table.cumulative)),
        },
        "exponential": {
            "n": summary.n,
            "mean": summary.mean,
            "std": summary.std,
            "min": summary.minimum,
            "max": summary.maximum,
            "histogram": [int(c) for c in result.exponential_histogram],
        },
        "config_hash": result.config_hash,
        "engine_version": result.engine_version,
    }
    return json.dumps(data, indent=2)
