"""Weather lookup: location resolution, upstream fetch and view model."""

from services.weather.lookup import LookupState, WeatherLookup, error_message_for, http_status_for
from services.weather.query import resolve_location
from services.weather.view_model import ViewModel, build_view_model, placeholder_view_model
from services.weather.weather_api import (
    FetchFailed,
    ReadingValidationError,
    UpstreamRejected,
    WeatherAPI,
    WeatherServiceError,
)

__all__ = [
    "FetchFailed",
    "LookupState",
    "ReadingValidationError",
    "UpstreamRejected",
    "ViewModel",
    "WeatherAPI",
    "WeatherLookup",
    "WeatherServiceError",
    "build_view_model",
    "error_message_for",
    "http_status_for",
    "placeholder_view_model",
    "resolve_location",
]
