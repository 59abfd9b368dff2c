"""Shared fakes for the weather test modules."""

import copy
import importlib.util
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from config.settings import WeatherSettings

PARIS_PAYLOAD: Dict[str, Any] = {
    "cod": 200,
    "main": {"temp": 290.15, "feels_like": 289.0, "humidity": 60},
    "clouds": {"all": 20},
    "wind": {"speed": 5, "deg": 180},
    "sys": {"sunrise": 1700000000, "sunset": 1700040000},
    "weather": [{"description": "clear sky", "icon": "01d"}],
    "name": "Paris",
}

NOT_FOUND_PAYLOAD: Dict[str, Any] = {"cod": "404", "message": "city not found"}


def paris_payload(**overrides) -> Dict[str, Any]:
    payload = copy.deepcopy(PARIS_PAYLOAD)
    payload.update(overrides)
    return payload


def make_settings(**overrides) -> WeatherSettings:
    values = {
        "api_key": "test-key",
        "base_url": "https://weather.test/data/2.5/weather",
        "default_location": "London",
        "timeout": 3.0,
    }
    values.update(overrides)
    return WeatherSettings(**values)


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200, body_error: Optional[Exception] = None):
        self.payload = payload
        self.status_code = status_code
        self.body_error = body_error

    def json(self):
        if self.body_error is not None:
            raise self.body_error
        return self.payload


class FakeSession:
    """Stands in for `requests.Session`; records every GET."""

    def __init__(
        self,
        response: Optional[FakeResponse] = None,
        error: Optional[Exception] = None,
        on_get: Optional[Callable[[], None]] = None,
    ):
        self.response = response or FakeResponse(PARIS_PAYLOAD)
        self.error = error
        self.on_get = on_get
        self.calls: List[Dict[str, Any]] = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        if self.on_get is not None:
            self.on_get()
        if self.error is not None:
            raise self.error
        return self.response


def load_module_copy(relative_path: str, name: str):
    """Execute a project module under a throwaway name, leaving the imported one untouched."""
    path = Path(__file__).parent / relative_path
    spec = importlib.util.spec_from_file_location(name, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@contextmanager
def patched_env(**values):
    """Set (or, with None, unset) environment variables for the duration of the block."""
    saved = {key: os.environ.get(key) for key in values}
    try:
        for key, value in values.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value
        yield
    finally:
        for key, value in saved.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value
