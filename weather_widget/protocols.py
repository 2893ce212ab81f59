"""Protocol definitions for dependency injection."""

from collections.abc import Callable
from typing import Protocol

from weather_widget.models.location import Coordinates, PositionOptions


class GeolocationProvider(Protocol):
    """Protocol for platform location services.

    Mirrors the browser Geolocation API: the provider answers a position
    request by calling exactly one of the two callbacks, possibly later.
    ``on_error`` receives a W3C error code (1 permission denied,
    2 position unavailable, 3 timeout).
    """

    def get_current_position(
        self,
        on_success: Callable[[Coordinates], None],
        on_error: Callable[[int], None],
        options: PositionOptions,
    ) -> None:
        """Request a one-shot position fix."""
        ...
