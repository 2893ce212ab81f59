"""Weather Widget models"""

from weather_widget.models.base_models import HealthResponse
from weather_widget.models.location import Coordinates, CoordinatesQuery, NameQuery, PositionOptions, Query
from weather_widget.models.weather import CurrentWeather, WeatherReport

__all__ = [
    "HealthResponse",
    "Coordinates",
    "CoordinatesQuery",
    "NameQuery",
    "PositionOptions",
    "Query",
    "CurrentWeather",
    "WeatherReport",
]
