"""Utility functions for SkyView"""

from .helpers import load_config, get_config_value

__all__ = ["load_config", "get_config_value"]
