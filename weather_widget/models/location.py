"""Pydantic models describing what the user asked for."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    """A device-reported position."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class PositionOptions(BaseModel):
    """Options passed to the location service for a one-shot fix."""

    model_config = ConfigDict(frozen=True)

    timeout: float = Field(default=10.0, gt=0, description="Seconds to wait for a fix")
    enable_high_accuracy: bool = True


class NameQuery(BaseModel):
    """Look weather up by place name."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["name"] = "name"
    name: str = Field(min_length=1)


class CoordinatesQuery(BaseModel):
    """Look weather up by latitude and longitude."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["coordinates"] = "coordinates"
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)

    @classmethod
    def from_coordinates(cls, coordinates: Coordinates) -> "CoordinatesQuery":
        return cls(latitude=coordinates.latitude, longitude=coordinates.longitude)


Query = NameQuery | CoordinatesQuery
