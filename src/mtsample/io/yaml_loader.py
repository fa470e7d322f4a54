"""YAML loader for experiment configs and packaged reference data."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from mtsample.config.schema import ExperimentConfig
from mtsample.io.serialize import config_from_data, load_config
from mtsample.utils.exceptions import ConfigError


def load_yaml(path: Path) -> Any:
    """Load and parse a YAML file.

    Args:
        path: Absolute or relative path to the YAML file.

    Returns:
        Parsed YAML content (typically a dict or list).

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    with open(path) as f:
        return yaml.safe_load(f)


def load_package_yaml(relative_path: str) -> Any:
    """Load a YAML file relative to the mtsample package root.

    Args:
        relative_path: Path relative to ``src/mtsample/``,
            e.g. ``"data/reference_vectors.yaml"``.
    """
    package_root = Path(__file__).resolve().parent.parent
    return load_yaml(package_root / relative_path)


def load_config_file(path: Path) -> ExperimentConfig:
    """Load an experiment config from a ``.json``, ``.yaml`` or ``.yml`` file.

    Raises:
        ConfigError: If the file has an unknown suffix or invalid content.
    """
    suffix = path.suffix.lower()
    if suffix == ".json":
        return load_config(path.read_text())
    if suffix in (".yaml", ".yml"):
        try:
            data = load_yaml(path)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Config is not valid YAML: {exc}") from exc
        return config_from_data(data)
    raise ConfigError(f"Unsupported config file type: {path.name}")
