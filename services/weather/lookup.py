"""
Weather lookup pipeline.

`WeatherLookup` runs one location query through the fetcher and tracks where
it is with `LookupState`. The state decides which view model the page gets:
the placeholder while idle or fetching, the real one once the reading is in.
"""

import logging
from datetime import date
from enum import Enum
from typing import Optional

from services.weather.models import WeatherReading
from services.weather.view_model import ViewModel, build_view_model, placeholder_view_model
from services.weather.weather_api import (
    FetchFailed,
    UpstreamRejected,
    WeatherAPI,
    WeatherServiceError,
)

logger = logging.getLogger("skyview.weather")

# Upstream codes that mean the caller asked for something that does not exist
_CLIENT_ERROR_CODES = {400, 404}


class LookupState(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    READY = "ready"
    FAILED = "failed"


def http_status_for(error: Exception) -> int:
    """HTTP status for a lookup failure.

    Unknown locations map to 404, provider-side refusals (bad key, quota) to
    502, transport and payload problems to 503.
    """
    if isinstance(error, UpstreamRejected):
        return 404 if error.code in _CLIENT_ERROR_CODES else 502
    if isinstance(error, FetchFailed):
        return 503
    return 500


def error_message_for(error: Exception) -> str:
    if isinstance(error, UpstreamRejected):
        if error.code in _CLIENT_ERROR_CODES:
            return f"No weather found for '{error.location}': {error.message}"
        return "The weather provider refused the request"
    if isinstance(error, FetchFailed):
        return "Weather service unavailable"
    return "An error occurred processing your request"


class WeatherLookup:
    """One lookup: IDLE -> FETCHING -> READY | FAILED."""

    def __init__(self, api: WeatherAPI, today: Optional[date] = None):
        self.api = api
        self.today = today
        self.state = LookupState.IDLE
        self.location: Optional[str] = None
        self.reading: Optional[WeatherReading] = None
        self.error: Optional[WeatherServiceError] = None

    def run(self, location: str) -> ViewModel:
        """Fetch `location` and return its view model.

        Raises the fetcher's `WeatherServiceError` after moving to FAILED.
        """
        self.location = location
        self.reading = None
        self.error = None
        self.state = LookupState.FETCHING
        try:
            self.reading = self.api.get_current_weather(location)
        except WeatherServiceError as e:
            self.error = e
            self.state = LookupState.FAILED
            logger.warning(f"Lookup for {location!r} failed: {e}")
            raise
        self.state = LookupState.READY
        return self.view_model()

    def view_model(self) -> ViewModel:
        if self.state is LookupState.FAILED:
            raise self.error
        if self.state is LookupState.READY:
            return build_view_model(self.reading, today=self.today)
        return placeholder_view_model(today=self.today)
