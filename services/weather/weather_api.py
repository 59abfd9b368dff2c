"""
Weather API - fetches current conditions from OpenWeatherMap.

One GET per lookup, no retries and no cache. Failures are raised as typed
exceptions so the caller can tell an unknown city from an outage:
- UpstreamRejected: the provider answered with a non-200 `cod`
- FetchFailed: network error, timeout or unreadable body
- ReadingValidationError: a 200 payload that does not match the schema
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from config.settings import WeatherSettings
from services.weather.models import SUCCESS_CODE, WeatherReading, parse_status_code

logger = logging.getLogger("skyview.weather")


class WeatherServiceError(Exception):
    """Base exception for weather lookup failures."""
    pass


class UpstreamRejected(WeatherServiceError):
    """The provider returned a non-success status (e.g. unknown city)."""

    def __init__(self, message: str, code: Optional[int] = None, location: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code
        self.location = location


class FetchFailed(WeatherServiceError):
    """The request could not be completed or its body could not be read."""
    pass


class ReadingValidationError(FetchFailed):
    """A success payload failed schema validation."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


class WeatherAPI:
    """Handles current weather lookups against OpenWeatherMap"""

    def __init__(self, settings: WeatherSettings, session: Optional[requests.Session] = None):
        self.settings = settings
        # Without an injected session each lookup goes through requests.get
        self.session = session

    def build_params(self, location: str) -> Dict[str, str]:
        """Query string for one lookup; the location is passed through as given."""
        return {
            "q": location,
            "appid": self.settings.api_key or "",
        }

    def get_current_weather(self, location: str) -> WeatherReading:
        """Fetch and validate current weather for a location.

        Raises:
            UpstreamRejected: provider `cod` present and not 200
            FetchFailed: transport failure or non-JSON body
            ReadingValidationError: 200 payload with missing or invalid fields
        """
        logger.info(f"Fetching current weather for {location!r}")

        try:
            http = self.session if self.session is not None else requests
            response = http.get(
                self.settings.base_url,
                params=self.build_params(location),
                timeout=self.settings.timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"Timeout fetching weather for {location!r} ({self.settings.timeout}s)")
            raise FetchFailed(f"Timeout fetching weather for {location!r}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed fetching weather for {location!r}: {e}")
            raise FetchFailed(f"Request failed fetching weather for {location!r}") from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Non-JSON response for {location!r} (HTTP {response.status_code})")
            raise FetchFailed(f"Unreadable response for {location!r}") from e

        if not isinstance(data, dict):
            raise FetchFailed(f"Unexpected response shape for {location!r}")

        code = parse_status_code(data.get("cod"))
        if "cod" in data and code != SUCCESS_CODE:
            message = str(data.get("message") or "weather provider error")
            logger.warning(f"Upstream rejected {location!r}: {message} (cod={data.get('cod')})")
            raise UpstreamRejected(message, code=code, location=location)

        try:
            reading = WeatherReading.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid weather payload for {location!r}: {e.error_count()} errors")
            raise ReadingValidationError(
                f"Invalid weather payload for {location!r}",
                errors=e.errors(include_url=False),
            ) from e

        logger.info(f"✓ Fetched weather for {location!r}: {reading.name or location}")
        return reading
