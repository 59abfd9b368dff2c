"""
JSON API for weather lookups.

GET /api/weather?location=<city> returns the same view model the HTML page
renders. Lookup failures keep their kind: 404 for an unknown location, 502
when the provider refuses the request, 503 when it cannot be reached.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import BaseModel

from config.settings import WeatherSettings
from services.weather import (
	LookupState,
	ViewModel,
	WeatherAPI,
	WeatherLookup,
	WeatherServiceError,
	error_message_for,
	http_status_for,
	resolve_location,
)

logger = logging.getLogger("skyview.api")

router = APIRouter(prefix="/api", tags=["weather"])


class WeatherResponse(BaseModel):
	location: str
	state: LookupState
	view: ViewModel


def get_settings(request: Request) -> WeatherSettings:
	settings = getattr(request.app.state, "settings", None)
	if isinstance(settings, WeatherSettings):
		return settings
	logger.warning("WeatherSettings not found in app.state; reading environment")
	return WeatherSettings.from_env()


def get_weather_api(request: Request) -> WeatherAPI:
	"""Shared fetcher from app state, or a fresh one built from settings."""
	api = getattr(request.app.state, "weather_api", None)
	if isinstance(api, WeatherAPI):
		return api
	return WeatherAPI(get_settings(request))


@router.get("/system-status")
def system_status(request: Request) -> Dict[str, bool]:
	"""Report whether the provider API key is configured. Safe to poll."""
	return {"api_key_configured": get_settings(request).has_api_key}


@router.get("/weather", response_model=WeatherResponse)
def get_weather(
	request: Request,
	location: Optional[str] = Query(None, description="City name; defaults to the configured location"),
) -> Any:
	"""GET /api/weather?location=<city>"""
	settings = get_settings(request)
	city = resolve_location({"location": location or ""}, settings.default_location)

	lookup = WeatherLookup(get_weather_api(request))
	try:
		view = lookup.run(city)
	except WeatherServiceError as e:
		raise HTTPException(status_code=http_status_for(e), detail=error_message_for(e)) from e
	except Exception as e:
		logger.exception(f"Weather request failed for {city!r}")
		raise HTTPException(
			status_code=500,
			detail="An error occurred processing your request",
		) from e

	return WeatherResponse(location=city, state=lookup.state, view=view)
