"""Locator: turns user input or a device position into a weather query."""

import asyncio
from collections.abc import Callable

from weather_widget.exceptions import (
    EmptyInputException,
    LocationException,
    LocationPermissionDeniedException,
    LocationTimeoutException,
    LocationUnknownException,
    LocationUnsupportedException,
    PositionUnavailableException,
)
from weather_widget.logging_config import get_logger, log_with_context
from weather_widget.models.location import Coordinates, NameQuery, PositionOptions
from weather_widget.protocols import GeolocationProvider

logger = get_logger(__name__)

# W3C GeolocationPositionError codes
PERMISSION_DENIED = 1
POSITION_UNAVAILABLE = 2
TIMEOUT = 3

_LOCATION_ERRORS: dict[int, type[LocationException]] = {
    PERMISSION_DENIED: LocationPermissionDeniedException,
    POSITION_UNAVAILABLE: PositionUnavailableException,
    TIMEOUT: LocationTimeoutException,
}


def resolve_typed_query(raw_input: str) -> NameQuery:
    """Build a name query from the search box contents.

    Args:
        raw_input: Text exactly as typed by the user

    Returns:
        NameQuery with surrounding whitespace removed

    Raises:
        EmptyInputException: If nothing but whitespace was typed
    """
    name = raw_input.strip()
    if not name:
        raise EmptyInputException()
    return NameQuery(name=name)


def location_error_from_code(code: int) -> LocationException:
    """Map a platform geolocation error code to its exception."""
    return _LOCATION_ERRORS.get(code, LocationUnknownException)(details={"platform_code": code})


async def resolve_device_location(
    provider: GeolocationProvider | None,
    options: PositionOptions | None = None,
) -> Coordinates:
    """Get a one-shot position fix from the platform location service.

    The provider's callback API is wrapped as a single awaitable. Whichever
    callback fires first settles it; later callbacks are ignored. No retry
    is attempted.

    Args:
        provider: Location service, or None when the platform has none
        options: Timeout and accuracy request (defaults: 10s, high accuracy)

    Returns:
        The reported coordinates

    Raises:
        LocationException: Subclass matching the platform failure
    """
    if provider is None:
        raise LocationUnsupportedException()

    options = options or PositionOptions()
    future: asyncio.Future[Coordinates] = asyncio.get_running_loop().create_future()

    def on_success(coordinates: Coordinates) -> None:
        if not future.done():
            future.set_result(coordinates)

    def on_error(code: int) -> None:
        if not future.done():
            future.set_exception(location_error_from_code(code))

    provider.get_current_position(on_success, on_error, options)

    try:
        return await asyncio.wait_for(future, timeout=options.timeout)
    except TimeoutError as e:
        log_with_context(
            logger,
            "info",
            "Position fix timed out",
            timeout=options.timeout,
            event_type="location_timeout",
        )
        raise LocationTimeoutException(details={"timeout": options.timeout}) from e


class ReportedPosition:
    """Location service backed by what the browser already reported.

    The page runs the real geolocation request and posts either the
    coordinates or the error code; this replays that outcome through the
    callback interface.
    """

    def __init__(self, coordinates: Coordinates | None = None, error_code: int | None = None):
        if (coordinates is None) == (error_code is None):
            raise ValueError("Exactly one of coordinates or error_code must be given")
        self.coordinates = coordinates
        self.error_code = error_code

    @classmethod
    def from_report(
        cls,
        latitude: float | None = None,
        longitude: float | None = None,
        error_code: int | None = None,
    ) -> "ReportedPosition":
        """Build from form fields; a partial coordinate pair counts as unavailable."""
        if error_code is not None:
            return cls(error_code=error_code)
        if latitude is None or longitude is None:
            return cls(error_code=POSITION_UNAVAILABLE)
        return cls(coordinates=Coordinates(latitude=latitude, longitude=longitude))

    def get_current_position(
        self,
        on_success: Callable[[Coordinates], None],
        on_error: Callable[[int], None],
        options: PositionOptions,
    ) -> None:
        if self.coordinates is not None:
            on_success(self.coordinates)
        else:
            on_error(self.error_code)
