"""Weather service for OpenWeatherMap API integration."""

import httpx
from pydantic import ValidationError

from weather_widget.config import Settings, get_settings
from weather_widget.exceptions import (
    CityNotFoundException,
    InvalidCredentialException,
    MalformedResponseException,
    MissingCredentialException,
    NetworkException,
    ProviderUnavailableException,
)
from weather_widget.logging_config import get_logger, log_with_context
from weather_widget.models.location import CoordinatesQuery, NameQuery, Query
from weather_widget.models.weather import CurrentWeather, WeatherReport

logger = get_logger(__name__)


def require_api_key(settings: Settings) -> None:
    """Fail fast when the API key was never configured.

    Raises:
        MissingCredentialException: If the key is blank or still the placeholder
    """
    if not settings.is_weather_api_key_configured:
        raise MissingCredentialException()


async def fetch_by_name(client: httpx.AsyncClient, name: str, settings: Settings | None = None) -> WeatherReport:
    """Get current weather for a place name.

    Args:
        client: Shared HTTP client for making requests
        name: City name as typed (httpx URL-encodes it)
        settings: Settings instance (defaults to singleton)

    Returns:
        WeatherReport for the matched place

    Raises:
        WeatherException: Subclass describing why the lookup failed
    """
    if settings is None:
        settings = get_settings()
    params = {"q": name, "appid": settings.weather_api_key, "units": "metric"}
    return await _fetch(client, params, settings, by_name=True)


async def fetch_by_coordinates(
    client: httpx.AsyncClient,
    latitude: float,
    longitude: float,
    settings: Settings | None = None,
) -> WeatherReport:
    """Get current weather for a coordinate pair.

    A 404 here is reported as the provider being unavailable, not as an
    unknown city.
    """
    if settings is None:
        settings = get_settings()
    params = {"lat": str(latitude), "lon": str(longitude), "appid": settings.weather_api_key, "units": "metric"}
    return await _fetch(client, params, settings, by_name=False)


async def fetch_query(client: httpx.AsyncClient, query: Query, settings: Settings | None = None) -> WeatherReport:
    """Dispatch a query to the matching fetch function."""
    if isinstance(query, NameQuery):
        return await fetch_by_name(client, query.name, settings)
    if isinstance(query, CoordinatesQuery):
        return await fetch_by_coordinates(client, query.latitude, query.longitude, settings)
    raise TypeError(f"Unsupported query type: {type(query).__name__}")


async def _fetch(client: httpx.AsyncClient, params: dict[str, str], settings: Settings, by_name: bool) -> WeatherReport:
    """Issue one GET and classify the outcome. No retries.

    Any ``httpx.RequestError`` becomes a ``WeatherException`` so the action
    handler can always show a message.
    """
    try:
        response = await client.get(settings.weather_api_url, params=params)
    except httpx.DecodingError as e:
        raise MalformedResponseException(details={"error_type": "decoding_error", "error": str(e)}) from e
    except httpx.TransportError as e:
        raise NetworkException(details={"error_type": "network_error", "error": str(e)}) from e
    except httpx.RequestError as e:
        # Redirect loops and other failures that never produced a final response
        raise NetworkException(details={"error_type": type(e).__name__, "error": str(e)}) from e

    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        details = {"api_status": status_code}
        if status_code == 404 and by_name:
            raise CityNotFoundException(details=details) from e
        if status_code == 401:
            raise InvalidCredentialException(details=details) from e
        raise ProviderUnavailableException(details=details) from e

    try:
        current_weather = CurrentWeather.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        raise MalformedResponseException(details={"error_type": "parsing_error", "error": str(e)}) from e

    report = WeatherReport.from_openweather(current_weather)
    log_with_context(
        logger,
        "debug",
        "Weather data parsed",
        location=report.name,
        country=report.country,
        lookup="name" if by_name else "coordinates",
        event_type="weather_parsed",
    )
    return report
