"""Weather API routes returning JSON."""

from typing import Any

import httpx
from fastapi import APIRouter, Depends, Query

from weather_widget.config import Settings, get_settings
from weather_widget.dependencies import get_http_client
from weather_widget.exceptions import ValidationException
from weather_widget.models.location import CoordinatesQuery
from weather_widget.services import locator, weather_service

router = APIRouter()


@router.get(
    "/current",
    summary="Get current weather",
    description="""
    Retrieves current weather conditions from OpenWeatherMap API,
    either by city name (`city`) or by coordinates (`lat` and `lon`).

    Temperatures are in °C and rounded to whole degrees.
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "name": "Paris",
                        "country": "FR",
                        "temperature": 18,
                        "feels_like": 18,
                        "humidity": 60,
                        "wind_speed": 3.1,
                        "condition": "Clouds",
                        "description": "overcast clouds",
                        "icon": "04d",
                        "icon_url": "https://openweathermap.org/img/wn/04d@2x.png",
                    }
                }
            },
        },
        400: {"description": "Neither a city nor a full coordinate pair was given"},
        404: {"description": "City not found"},
        500: {"description": "API key not configured"},
        502: {"description": "Weather API error"},
        503: {"description": "Weather API unreachable"},
    },
)
async def get_current_weather(
    city: str | None = Query(default=None, description="City name"),
    lat: float | None = Query(default=None, ge=-90, le=90, description="Latitude"),
    lon: float | None = Query(default=None, ge=-180, le=180, description="Longitude"),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """Get current weather data.

    Widget exceptions propagate to the registered error handler, which
    turns them into structured JSON errors.
    """
    if city is not None:
        query = locator.resolve_typed_query(city)
    elif lat is not None and lon is not None:
        query = CoordinatesQuery(latitude=lat, longitude=lon)
    else:
        raise ValidationException("Provide either a city name or both lat and lon.")

    weather_service.require_api_key(settings)
    report = await weather_service.fetch_query(client, query, settings)
    return {**report.model_dump(), "icon_url": report.icon_url(settings.weather_icon_base_url)}
