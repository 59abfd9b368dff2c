"""
Configuration for the SkyView weather lookup.

Values come from the process environment. `WeatherSettings` bundles them into
one object that is handed to the weather fetcher at construction time.
"""

import os
from dataclasses import dataclass, replace
from typing import Optional

from utils.helpers import DEFAULT_CONFIG_PATH, get_config_value, load_config

# OpenWeatherMap API Configuration
OPENWEATHER_API_KEY = os.getenv("OPENWEATHER_API_KEY")
OPENWEATHERMAP_URL = os.getenv(
    "OPENWEATHERMAP_URL", "https://api.openweathermap.org/data/2.5/weather"
)

# Location used when the request does not name one
DEFAULT_LOCATION = os.getenv("DEFAULT_LOCATION", "London")

# Request Timeout (seconds); parsed by WeatherSettings.from_env
REQUEST_TIMEOUT = os.getenv("REQUEST_TIMEOUT", "10")

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class WeatherSettings:
    """Settings consumed by `WeatherAPI` and the application factory."""

    api_key: Optional[str] = None
    base_url: str = "https://api.openweathermap.org/data/2.5/weather"
    default_location: str = "London"
    timeout: float = 10.0
    log_level: str = "INFO"

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls) -> "WeatherSettings":
        """Build settings from the environment, re-reading it on every call."""
        return cls(
            api_key=os.getenv("OPENWEATHER_API_KEY") or None,
            base_url=os.getenv("OPENWEATHERMAP_URL", OPENWEATHERMAP_URL),
            default_location=os.getenv("DEFAULT_LOCATION", DEFAULT_LOCATION),
            timeout=float(os.getenv("REQUEST_TIMEOUT", "10")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    @classmethod
    def from_file(cls, config_path: Optional[str] = None) -> "WeatherSettings":
        """Environment settings overlaid with the `weather` / `logging` sections of a YAML file.

        Keys missing from the file keep their environment value.
        """
        base = cls.from_env()
        config = load_config(config_path)
        return replace(
            base,
            api_key=get_config_value(config, "weather.api_key", base.api_key),
            base_url=get_config_value(config, "weather.base_url", base.base_url),
            default_location=get_config_value(
                config, "weather.default_location", base.default_location
            ),
            timeout=float(get_config_value(config, "weather.timeout", base.timeout)),
            log_level=str(get_config_value(config, "logging.level", base.log_level)).upper(),
        )


def load_settings(config_path: Optional[str] = None) -> WeatherSettings:
    """Settings for the running app: the YAML overlay when present, else the environment."""
    path = config_path or DEFAULT_CONFIG_PATH
    if os.path.exists(path):
        return WeatherSettings.from_file(str(path))
    return WeatherSettings.from_env()
