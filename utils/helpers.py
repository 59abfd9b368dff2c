"""Helpers for reading the optional YAML configuration overlay."""
import os
from pathlib import Path

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "config.yaml"


def load_config(config_path: str = None) -> dict:
    """Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses config/config.yaml

    Returns:
        dict: Configuration dictionary (empty for an empty file)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the top level of the file is not a mapping
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    return config


def get_config_value(config: dict, key_path: str, default=None):
    """Get nested value from config dict using dot notation.

    Args:
        config: Configuration dictionary
        key_path: Dot-separated path (e.g., 'weather.timeout')
        default: Returned when the key is missing or set to null

    Returns:
        Value from config or default
    """
    value = config

    try:
        for key in key_path.split("."):
            value = value[key]
    except (KeyError, TypeError):
        return default

    return default if value is None else value


__all__ = ["load_config", "get_config_value", "DEFAULT_CONFIG_PATH"]
