"""Unit tests for the weather service."""

import httpx
import pytest

from weather_widget.config import OPENWEATHER_URL
from weather_widget.exceptions import (
    CityNotFoundException,
    InvalidCredentialException,
    MalformedResponseException,
    MissingCredentialException,
    NetworkException,
    ProviderUnavailableException,
)
from weather_widget.models.location import CoordinatesQuery, NameQuery
from weather_widget.models.weather import WeatherReport
from weather_widget.services import weather_service


@pytest.mark.asyncio
async def test_fetch_by_name_success(mock_http_client, mock_settings, make_response, paris_weather_response):
    """Test successful weather fetch by city name."""
    mock_http_client.get.return_value = make_response(200, paris_weather_response)

    result = await weather_service.fetch_by_name(mock_http_client, "Paris", mock_settings)

    assert isinstance(result, WeatherReport)
    assert result.name == "Paris"
    assert result.country == "FR"
    assert result.temperature == 18
    assert result.feels_like == 18
    assert result.humidity == 60
    assert result.wind_speed == 3.1
    assert result.condition == "Clouds"
    assert result.description == "overcast clouds"
    assert result.icon == "04d"

    mock_http_client.get.assert_called_once()
    call_args = mock_http_client.get.call_args
    assert call_args.args[0] == OPENWEATHER_URL
    assert call_args.kwargs["params"] == {"q": "Paris", "appid": "test-weather-key", "units": "metric"}


@pytest.mark.asyncio
async def test_fetch_by_coordinates_success(mock_http_client, mock_settings, make_response, paris_weather_response):
    """Test successful weather fetch by coordinates."""
    mock_http_client.get.return_value = make_response(200, paris_weather_response)

    result = await weather_service.fetch_by_coordinates(mock_http_client, 48.8534, 2.3488, mock_settings)

    assert result.name == "Paris"
    params = mock_http_client.get.call_args.kwargs["params"]
    assert float(params["lat"]) == 48.8534
    assert float(params["lon"]) == 2.3488
    assert params["appid"] == "test-weather-key"
    assert params["units"] == "metric"
    assert "q" not in params


@pytest.mark.asyncio
async def test_city_name_is_url_encoded(mock_settings, paris_weather_response):
    """Test the city name is percent-encoded on the wire."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=paris_weather_response)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        await weather_service.fetch_by_name(client, "São Paulo", mock_settings)

    assert len(seen) == 1
    assert seen[0].url.params["q"] == "São Paulo"
    assert "%C3%A3" in str(seen[0].url)
    assert seen[0].url.params["units"] == "metric"


@pytest.mark.asyncio
async def test_fetch_query_dispatches_on_query_type(
    mock_http_client, mock_settings, make_response, paris_weather_response
):
    """Test fetch_query routes name and coordinate queries."""
    mock_http_client.get.return_value = make_response(200, paris_weather_response)

    await weather_service.fetch_query(mock_http_client, NameQuery(name="Paris"), mock_settings)
    assert mock_http_client.get.call_args.kwargs["params"]["q"] == "Paris"

    await weather_service.fetch_query(mock_http_client, CoordinatesQuery(latitude=1.5, longitude=-2.5), mock_settings)
    assert mock_http_client.get.call_args.kwargs["params"]["lat"] == "1.5"


@pytest.mark.asyncio
async def test_name_lookup_404_is_city_not_found(mock_http_client, mock_settings, make_response):
    """Test 404 on a name lookup."""
    mock_http_client.get.return_value = make_response(404, {"cod": "404", "message": "city not found"})

    with pytest.raises(CityNotFoundException) as exc_info:
        await weather_service.fetch_by_name(mock_http_client, "Atlantis", mock_settings)

    assert exc_info.value.message == "City not found. Please check the city name and try again."
    assert exc_info.value.details["api_status"] == 404


@pytest.mark.asyncio
async def test_coordinates_lookup_404_is_provider_unavailable(mock_http_client, mock_settings, make_response):
    """Test 404 on a coordinates lookup is not reported as an unknown city."""
    mock_http_client.get.return_value = make_response(404, {"cod": "404"})

    with pytest.raises(ProviderUnavailableException):
        await weather_service.fetch_by_coordinates(mock_http_client, 0.0, 0.0, mock_settings)


@pytest.mark.asyncio
@pytest.mark.parametrize("lookup", ["name", "coordinates"])
async def test_401_is_invalid_credential(mock_http_client, mock_settings, make_response, lookup):
    """Test 401 for both lookup kinds."""
    mock_http_client.get.return_value = make_response(401, {"cod": 401, "message": "Invalid API key"})

    with pytest.raises(InvalidCredentialException) as exc_info:
        if lookup == "name":
            await weather_service.fetch_by_name(mock_http_client, "Paris", mock_settings)
        else:
            await weather_service.fetch_by_coordinates(mock_http_client, 1.0, 1.0, mock_settings)

    assert exc_info.value.message == "Invalid API key. Please check your API key configuration."


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [400, 429, 500, 502, 503])
async def test_other_error_status_is_provider_unavailable(mock_http_client, mock_settings, make_response, status_code):
    """Test any other failure status."""
    mock_http_client.get.return_value = make_response(status_code, text="error")

    with pytest.raises(ProviderUnavailableException) as exc_info:
        await weather_service.fetch_by_name(mock_http_client, "Paris", mock_settings)

    assert exc_info.value.message == "Failed to fetch weather data. Please try again later."
    assert exc_info.value.details["api_status"] == status_code


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectError("Connection refused"),
        httpx.ReadTimeout("Read timed out"),
        httpx.NetworkError("Connection failed"),
    ],
)
async def test_transport_failure_is_network_error(mock_http_client, mock_settings, error):
    """Test failures before any HTTP status is received."""
    mock_http_client.get.side_effect = error

    with pytest.raises(NetworkException) as exc_info:
        await weather_service.fetch_by_name(mock_http_client, "Paris", mock_settings)

    assert exc_info.value.message == "Network error. Please check your internet connection."
    assert exc_info.value.details["error_type"] == "network_error"


@pytest.mark.asyncio
async def test_redirect_loop_is_network_error(mock_settings):
    """Test a provider that keeps redirecting to itself."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(302, headers={"Location": str(request.url)})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler), follow_redirects=True) as client:
        with pytest.raises(NetworkException) as exc_info:
            await weather_service.fetch_by_name(client, "Paris", mock_settings)

    assert exc_info.value.details["error_type"] == "TooManyRedirects"
    assert isinstance(exc_info.value.__cause__, httpx.TooManyRedirects)


@pytest.mark.asyncio
async def test_corrupt_gzip_body_is_malformed_response(mock_settings):
    """Test a 200 response whose body does not match its Content-Encoding."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            headers={"Content-Encoding": "gzip", "Content-Type": "application/json"},
            stream=httpx.ByteStream(b"this is not gzip data"),
        )

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(MalformedResponseException) as exc_info:
            await weather_service.fetch_by_name(client, "Paris", mock_settings)

    assert exc_info.value.details["error_type"] == "decoding_error"
    assert exc_info.value.message == "Received an unexpected response from the weather service."


@pytest.mark.asyncio
async def test_too_many_redirects_on_coordinates_lookup(mock_http_client, mock_settings):
    """Test a request error that is not a transport failure on a coordinate lookup."""
    mock_http_client.get.side_effect = httpx.TooManyRedirects("Exceeded maximum allowed redirects.")

    with pytest.raises(NetworkException) as exc_info:
        await weather_service.fetch_by_coordinates(mock_http_client, 48.8534, 2.3488, mock_settings)

    assert exc_info.value.message == "Network error. Please check your internet connection."


@pytest.mark.asyncio
async def test_missing_fields_is_malformed_response(mock_http_client, mock_settings, make_response):
    """Test a 200 response without the expected fields."""
    mock_http_client.get.return_value = make_response(200, {"invalid": "data"})

    with pytest.raises(MalformedResponseException) as exc_info:
        await weather_service.fetch_by_name(mock_http_client, "Paris", mock_settings)

    assert exc_info.value.details["error_type"] == "parsing_error"


@pytest.mark.asyncio
async def test_empty_condition_list_is_malformed_response(
    mock_http_client, mock_settings, make_response, paris_weather_response
):
    """Test a 200 response with an empty weather array."""
    paris_weather_response["weather"] = []
    mock_http_client.get.return_value = make_response(200, paris_weather_response)

    with pytest.raises(MalformedResponseException):
        await weather_service.fetch_by_name(mock_http_client, "Paris", mock_settings)


@pytest.mark.asyncio
async def test_non_json_body_is_malformed_response(mock_http_client, mock_settings, make_response):
    """Test a 200 response that is not JSON."""
    mock_http_client.get.return_value = make_response(200, text="<html>maintenance</html>")

    with pytest.raises(MalformedResponseException):
        await weather_service.fetch_by_name(mock_http_client, "Paris", mock_settings)


def test_require_api_key(mock_settings, unconfigured_settings):
    """Test the configuration precondition."""
    weather_service.require_api_key(mock_settings)

    with pytest.raises(MissingCredentialException):
        weather_service.require_api_key(unconfigured_settings)
