import logging
from pathlib import Path
from typing import Optional

import requests
from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from app.api import router as api_router
from app.ui.routes import router as ui_router
from config.settings import WeatherSettings, load_settings
from services.weather import WeatherAPI

logger = logging.getLogger("skyview")

TEMPLATE_DIR = Path(__file__).parent / "ui" / "templates"


def configure_logging(level: str) -> None:
	"""Configure root logging once and set the `skyview` logger level (case-insensitive)."""
	level = level.upper()
	logging.basicConfig(level=level)
	logging.getLogger("skyview").setLevel(level)


def create_app(
	settings: Optional[WeatherSettings] = None,
	session: Optional[requests.Session] = None,
) -> FastAPI:
	"""Create the FastAPI application with its settings, fetcher and templates."""
	settings = settings or load_settings()
	configure_logging(settings.log_level)

	app = FastAPI(title="SkyView - Weather Lookup")

	app.state.settings = settings
	app.state.weather_api = WeatherAPI(settings, session=session)
	app.state.templates = Jinja2Templates(directory=str(TEMPLATE_DIR))

	if not settings.has_api_key:
		# Not fatal: the provider rejects the request and the page reports it.
		logger.warning("OPENWEATHER_API_KEY is not set; weather lookups will be rejected upstream")
	else:
		logger.info(f"✓ Weather API configured ({settings.base_url})")

	# ---------------- ROUTES ----------------

	@app.get("/health")
	async def health():
		return {"status": "ok"}

	# ---------------- INCLUDE ROUTERS ----------------

	app.include_router(ui_router)
	app.include_router(api_router)

	return app


app = create_app()


if __name__ == "__main__":
	import uvicorn

	uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=False)
