#!/usr/bin/env python3
"""
Test suite for the SkyView web application.

Tests:
1. End-to-end page render for ?location=Paris
2. Default location when none is given
3. Error pages keep the failure kind (404 / 502 / 503)
4. JSON API
5. Health and system status
6. Log level handling

Usage:
    python test_weather_app.py
"""

import sys
import logging
from pathlib import Path

import requests
from fastapi.testclient import TestClient

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from app.main import configure_logging, create_app
from weather_test_utils import (
    NOT_FOUND_PAYLOAD,
    FakeResponse,
    FakeSession,
    load_module_copy,
    make_settings,
    patched_env,
)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _client(session: FakeSession, **settings) -> TestClient:
    return TestClient(create_app(make_settings(**settings), session=session))


def test_page_end_to_end():
    """Test 1: ?location=Paris renders 17°C, warm theme and six detail rows."""
    session = FakeSession()
    client = _client(session)

    response = client.get("/", params={"location": "Paris"})

    assert response.status_code == 200
    assert session.calls[0]["params"]["q"] == "Paris"
    html = response.text
    assert "17°C" in html
    assert "Feels like 16°C" in html
    assert 'data-theme="warm"' in html
    assert "from-teal-700 to-teal-800" in html
    assert html.count("data-detail ") == 6
    assert "60%" in html
    assert "clear sky" in html
    assert "Paris" in html
    logger.info("  ✓ Page render")


def test_page_default_location():
    """Test 2: No location parameter looks up London."""
    session = FakeSession()
    client = _client(session)

    assert client.get("/").status_code == 200
    assert client.get("/", params={"location": ""}).status_code == 200
    assert [c["params"]["q"] for c in session.calls] == ["London", "London"]
    logger.info("  ✓ Default location")


def test_page_errors_keep_kind():
    """Test 3: Unknown city is 404, provider refusal 502, outage 503; no partial view."""
    not_found = _client(FakeSession(FakeResponse(NOT_FOUND_PAYLOAD, status_code=404)))
    response = not_found.get("/", params={"location": "Atlantis"})
    assert response.status_code == 404
    assert "city not found" in response.text
    assert "data-detail " not in response.text

    refused = _client(FakeSession(FakeResponse({"cod": 401, "message": "Invalid API key"})))
    assert refused.get("/").status_code == 502

    down = _client(FakeSession(error=requests.exceptions.ConnectionError("refused")))
    response = down.get("/")
    assert response.status_code == 503
    assert "Weather service unavailable" in response.text
    logger.info("  ✓ Error pages")


def test_json_api():
    """Test 4: /api/weather returns the view model, errors as HTTP statuses."""
    client = _client(FakeSession())
    response = client.get("/api/weather", params={"location": "Paris"})

    assert response.status_code == 200
    body = response.json()
    assert body["location"] == "Paris"
    assert body["state"] == "ready"
    view = body["view"]
    assert view["temperature"] == 17
    assert view["theme"] == "warm"
    assert [row["label"] for row in view["details"]] == [
        "Cloudiness",
        "Humidity",
        "Wind Speed",
        "Sunrise",
        "Sunset",
        "Wind Direction",
    ]
    assert view["details"][1]["value"] == "60%"

    default_session = FakeSession()
    _client(default_session, default_location="Berlin").get("/api/weather")
    assert default_session.calls[0]["params"]["q"] == "Berlin"

    missing = _client(FakeSession(FakeResponse(NOT_FOUND_PAYLOAD)))
    response = missing.get("/api/weather", params={"location": "Atlantis"})
    assert response.status_code == 404
    assert "city not found" in response.json()["detail"]

    broken = _client(FakeSession(FakeResponse({"cod": 200, "name": "Paris"})))
    assert broken.get("/api/weather").status_code == 503
    logger.info("  ✓ JSON API")


def test_health_and_status():
    """Test 5: Health check and API key status."""
    client = _client(FakeSession())
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/api/system-status").json() == {"api_key_configured": True}

    keyless = _client(FakeSession(), api_key=None)
    assert keyless.get("/api/system-status").json() == {"api_key_configured": False}
    logger.info("  ✓ Health and status")


def test_lowercase_log_level():
    """Test 6: LOG_LEVEL is case-insensitive, including at import time."""
    skyview_logger = logging.getLogger("skyview")
    try:
        with patched_env(LOG_LEVEL="debug"):
            main_module = load_module_copy("app/main.py", "skyview_main_copy")
        assert main_module.app.state.settings.log_level == "DEBUG"
        assert skyview_logger.level == logging.DEBUG

        configure_logging("warning")
        assert skyview_logger.level == logging.WARNING

        create_app(make_settings(log_level="error"), session=FakeSession())
        assert skyview_logger.level == logging.ERROR
    finally:
        skyview_logger.setLevel(logging.INFO)
    logger.info("  ✓ Log level")


def run_all_tests():
    """Run all tests and report results."""
    tests = [
        ("Page End-to-End", test_page_end_to_end),
        ("Default Location", test_page_default_location),
        ("Error Pages", test_page_errors_keep_kind),
        ("JSON API", test_json_api),
        ("Health and Status", test_health_and_status),
        ("Log Level", test_lowercase_log_level),
    ]

    passed = 0
    failed = 0

    for test_name, test_func in tests:
        logger.info("=" * 60)
        logger.info(f"TEST: {test_name}")
        try:
            test_func()
            passed += 1
        except AssertionError as e:
            logger.error(f"ASSERTION FAILED: {test_name}: {e}")
            failed += 1
        except Exception as e:
            logger.error(f"TEST FAILED: {test_name}: {e}", exc_info=True)
            failed += 1

    logger.info("=" * 60)
    logger.info(f"Results: {passed} passed, {failed} failed")
    return failed == 0


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
