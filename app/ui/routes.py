from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.api import get_settings, get_weather_api
from services.weather import (
	WeatherLookup,
	WeatherServiceError,
	error_message_for,
	http_status_for,
	resolve_location,
)

logger = logging.getLogger("skyview.ui")

router = APIRouter()

TEMPLATE_DIR = "app/ui/templates"


def _get_templates(request: Request) -> Jinja2Templates:
	"""Get the shared Jinja templates instance from app state.

	`main.py` configures this in production. This fallback keeps the UI resilient
	in tests or alternate startup paths.
	"""
	templates = getattr(request.app.state, "templates", None)
	if isinstance(templates, Jinja2Templates):
		return templates
	logger.warning("Jinja2Templates not found in app.state; using fallback directory")
	return Jinja2Templates(directory=TEMPLATE_DIR)


@router.get("/", response_class=HTMLResponse)
def index(request: Request) -> Any:
	templates = _get_templates(request)
	location = resolve_location(request.query_params, get_settings(request).default_location)

	lookup = WeatherLookup(get_weather_api(request))
	try:
		view = lookup.run(location)
	except WeatherServiceError as e:
		status = http_status_for(e)
		return templates.TemplateResponse(
			request,
			"error.html",
			{"location": location, "status_code": status, "message": error_message_for(e)},
			status_code=status,
		)
	except Exception:
		logger.exception(f"Rendering weather page failed for {location!r}")
		return templates.TemplateResponse(
			request,
			"error.html",
			{"location": location, "status_code": 500, "message": error_message_for(None)},
			status_code=500,
		)

	return templates.TemplateResponse(
		request,
		"weather.html",
		{"location": location, "view": view, "state": lookup.state.value},
	)
