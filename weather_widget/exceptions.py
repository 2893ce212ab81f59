"""Custom exceptions for the weather widget with user-facing messages.

Every failure a user can trigger is a ``WidgetException``. The ``message``
is the sentence shown in the error banner; ``code`` and ``status_code`` are
only used by the JSON API and the logs.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    WIDGET_ERROR = "WIDGET_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Input validation
    VALIDATION_ERROR = "VALIDATION_ERROR"
    EMPTY_INPUT = "EMPTY_INPUT"

    # Device location
    LOCATION_ERROR = "LOCATION_ERROR"
    LOCATION_UNSUPPORTED = "LOCATION_UNSUPPORTED"
    LOCATION_PERMISSION_DENIED = "LOCATION_PERMISSION_DENIED"
    LOCATION_POSITION_UNAVAILABLE = "LOCATION_POSITION_UNAVAILABLE"
    LOCATION_TIMEOUT = "LOCATION_TIMEOUT"
    LOCATION_UNKNOWN = "LOCATION_UNKNOWN"

    # Weather provider
    WEATHER_ERROR = "WEATHER_ERROR"
    WEATHER_NETWORK_ERROR = "WEATHER_NETWORK_ERROR"
    WEATHER_CITY_NOT_FOUND = "WEATHER_CITY_NOT_FOUND"
    WEATHER_INVALID_CREDENTIAL = "WEATHER_INVALID_CREDENTIAL"
    WEATHER_PROVIDER_UNAVAILABLE = "WEATHER_PROVIDER_UNAVAILABLE"
    WEATHER_MALFORMED_RESPONSE = "WEATHER_MALFORMED_RESPONSE"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"
    CONFIG_MISSING_CREDENTIAL = "CONFIG_MISSING_CREDENTIAL"


class WidgetException(Exception):
    """Base exception for widget errors with HTTP status code support.

    All custom exceptions should inherit from this class so the action
    handlers and the API error handler can treat them uniformly.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.WIDGET_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize widget exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ValidationException(WidgetException):
    """User input was rejected before any request was made."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class EmptyInputException(ValidationException):
    """The search box was empty or whitespace only."""

    def __init__(self, message: str = "Please enter a city name.", details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.EMPTY_INPUT, details=details)


LOCATION_DENIED_PREFIX = "Location access denied. "


class LocationException(WidgetException):
    """Device location could not be determined."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.LOCATION_ERROR,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class LocationUnsupportedException(LocationException):
    """The platform has no location capability."""

    def __init__(
        self,
        message: str = "Geolocation is not supported by your browser.",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=ErrorCode.LOCATION_UNSUPPORTED, details=details)


class LocationPermissionDeniedException(LocationException):
    """The user refused to share their location."""

    def __init__(
        self,
        message: str = LOCATION_DENIED_PREFIX + "Please allow location access or search for a city manually.",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=ErrorCode.LOCATION_PERMISSION_DENIED, details=details)


class PositionUnavailableException(LocationException):
    """The location service could not produce a fix."""

    def __init__(
        self,
        message: str = LOCATION_DENIED_PREFIX + "Location information is unavailable.",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=ErrorCode.LOCATION_POSITION_UNAVAILABLE, details=details)


class LocationTimeoutException(LocationException):
    """No position fix arrived within the timeout."""

    def __init__(
        self,
        message: str = LOCATION_DENIED_PREFIX + "Location request timed out.",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=ErrorCode.LOCATION_TIMEOUT, details=details)


class LocationUnknownException(LocationException):
    """The location service reported an unrecognised error."""

    def __init__(
        self,
        message: str = LOCATION_DENIED_PREFIX + "An unknown error occurred.",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=ErrorCode.LOCATION_UNKNOWN, details=details)


class WeatherException(WidgetException):
    """Weather service errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.WEATHER_ERROR,
        status_code: int = 502,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class NetworkException(WeatherException):
    """No HTTP response was received from the weather API."""

    def __init__(
        self,
        message: str = "Network error. Please check your internet connection.",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=ErrorCode.WEATHER_NETWORK_ERROR, status_code=503, details=details)


class CityNotFoundException(WeatherException):
    """The weather API does not know the requested city."""

    def __init__(
        self,
        message: str = "City not found. Please check the city name and try again.",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=ErrorCode.WEATHER_CITY_NOT_FOUND, status_code=404, details=details)


class InvalidCredentialException(WeatherException):
    """The weather API rejected the API key."""

    def __init__(
        self,
        message: str = "Invalid API key. Please check your API key configuration.",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=ErrorCode.WEATHER_INVALID_CREDENTIAL, details=details)


class ProviderUnavailableException(WeatherException):
    """The weather API answered with an unexpected error status."""

    def __init__(
        self,
        message: str = "Failed to fetch weather data. Please try again later.",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=ErrorCode.WEATHER_PROVIDER_UNAVAILABLE, details=details)


class MalformedResponseException(WeatherException):
    """The weather API answered 2xx but the body could not be read."""

    def __init__(
        self,
        message: str = "Received an unexpected response from the weather service.",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=ErrorCode.WEATHER_MALFORMED_RESPONSE, details=details)


class ConfigurationException(WidgetException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class MissingCredentialException(ConfigurationException):
    """The weather API key is still the placeholder value."""

    def __init__(
        self,
        message: str = "Please configure your API key. Set WEATHER_API_KEY in the environment or .env file.",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=ErrorCode.CONFIG_MISSING_CREDENTIAL, details=details)
