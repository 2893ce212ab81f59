"""Pydantic models for weather data."""

import math

from pydantic import BaseModel, ConfigDict, Field

from weather_widget.config import OPENWEATHER_ICON_URL


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity.

    20.5 -> 21, -0.5 -> 0, -1.5 -> -1.
    """
    return math.floor(value + 0.5)


class WeatherInfo(BaseModel):
    """Weather condition info from OpenWeatherMap."""

    main: str
    description: str
    icon: str


class MainInfo(BaseModel):
    """Main weather metrics from OpenWeatherMap."""

    temp: float
    feels_like: float
    humidity: int


class WindInfo(BaseModel):
    """Wind information from OpenWeatherMap."""

    speed: float


class SysInfo(BaseModel):
    """Location metadata from OpenWeatherMap."""

    country: str


class CurrentWeather(BaseModel):
    """Raw OpenWeatherMap current weather response.

    Only the fields the widget displays are declared; the rest of the
    payload is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    name: str
    sys: SysInfo
    main: MainInfo
    wind: WindInfo
    weather: list[WeatherInfo] = Field(min_length=1)


class WeatherReport(BaseModel):
    """Display-ready weather for one successful lookup."""

    model_config = ConfigDict(frozen=True)

    name: str
    country: str
    temperature: int
    feels_like: int
    humidity: int
    wind_speed: float
    condition: str
    description: str
    icon: str

    def icon_url(self, icon_base_url: str = OPENWEATHER_ICON_URL) -> str:
        """Get the high resolution OpenWeatherMap icon URL for this report."""
        return f"{icon_base_url}{self.icon}@2x.png"

    @classmethod
    def from_openweather(cls, data: CurrentWeather) -> "WeatherReport":
        """Create WeatherReport from OpenWeatherMap data.

        Args:
            data: Raw CurrentWeather data from OpenWeatherMap API

        Returns:
            WeatherReport with rounded temperatures and the first condition
        """
        condition = data.weather[0]
        return cls(
            name=data.name,
            country=data.sys.country,
            temperature=round_half_up(data.main.temp),
            feels_like=round_half_up(data.main.feels_like),
            humidity=data.main.humidity,
            wind_speed=data.wind.speed,
            condition=condition.main,
            description=condition.description,
            icon=condition.icon,
        )
