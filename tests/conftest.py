"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock

import httpx
import pytest

from weather_widget.config import OPENWEATHER_URL, Settings


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for external API calls."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get = AsyncMock()
    mock_client.aclose = AsyncMock()
    return mock_client


@pytest.fixture
def mock_settings():
    """Settings with a configured API key and no .env file."""
    return Settings(
        _env_file=None,
        api_host="127.0.0.1",
        api_port=8000,
        weather_api_key="test-weather-key",
    )


@pytest.fixture
def unconfigured_settings():
    """Settings whose API key is still the placeholder."""
    return Settings(_env_file=None)


@pytest.fixture
def make_response():
    """Build real httpx responses so raise_for_status behaves as in production."""

    def _make(status_code: int, json_body=None, text: str = "") -> httpx.Response:
        request = httpx.Request("GET", OPENWEATHER_URL)
        if json_body is not None:
            return httpx.Response(status_code, json=json_body, request=request)
        return httpx.Response(status_code, text=text, request=request)

    return _make


@pytest.fixture
def paris_weather_response():
    """OpenWeatherMap current weather payload for Paris."""
    return {
        "coord": {"lon": 2.3488, "lat": 48.8534},
        "weather": [{"id": 804, "main": "Clouds", "description": "overcast clouds", "icon": "04d"}],
        "base": "stations",
        "main": {
            "temp": 18.4,
            "feels_like": 17.9,
            "temp_min": 17.0,
            "temp_max": 19.5,
            "pressure": 1016,
            "humidity": 60,
        },
        "visibility": 10000,
        "wind": {"speed": 3.1, "deg": 240},
        "clouds": {"all": 100},
        "dt": 1760000000,
        "sys": {"country": "FR", "sunrise": 1759990000, "sunset": 1760030000},
        "timezone": 7200,
        "id": 2988507,
        "name": "Paris",
        "cod": 200,
    }
