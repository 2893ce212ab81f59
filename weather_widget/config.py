"""Application settings loaded from environment variables and .env."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # weather-widget/

API_KEY_PLACEHOLDER = "YOUR_API_KEY_HERE"
OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
OPENWEATHER_ICON_URL = "https://openweathermap.org/img/wn/"


class Settings(BaseSettings):
    """Application settings with validation.

    Every field has a default so the widget can start without a .env file.
    The weather API key defaults to a placeholder; until it is replaced,
    every lookup fails with a configuration error instead of calling the API.
    """

    # API server settings
    api_host: str = Field(default="127.0.0.1", min_length=1, description="API server host (e.g., '0.0.0.0')")
    api_port: int = Field(ge=1, le=65535, default=8000, description="API server port")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_dir: Path = Field(default=BASE_DIR / "logs", description="Directory for the JSON log file")
    log_file: str = Field(default="widget.log", min_length=1, description="JSON log file name")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, gt=0, description="Rotate the log file at this size")
    log_backup_count: int = Field(default=5, ge=0, description="Rotated log files to keep")

    # Weather API
    weather_api_key: str = Field(default=API_KEY_PLACEHOLDER, description="OpenWeatherMap API key")
    weather_api_url: str = Field(default=OPENWEATHER_URL, pattern=r"^https?://", description="Current weather endpoint")
    weather_icon_base_url: str = Field(
        default=OPENWEATHER_ICON_URL, pattern=r"^https?://", description="Base URL for condition icons"
    )

    # Device location
    geolocation_timeout: float = Field(default=10.0, gt=0, description="Seconds to wait for a position fix")
    geolocation_high_accuracy: bool = Field(default=True, description="Request highest available accuracy")

    # Comma-separated host patterns for TrustedHostMiddleware
    trusted_hosts: str = Field(default="localhost,127.0.0.1,testserver", description="Trusted host patterns")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @property
    def is_weather_api_key_configured(self) -> bool:
        """True once the API key has been changed from the placeholder."""
        key = self.weather_api_key.strip()
        return bool(key) and key != API_KEY_PLACEHOLDER

    @field_validator("api_host", mode="after")
    @classmethod
    def validate_api_host(cls, v: str) -> str:
        """Ensure api_host is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("api_host cannot be empty")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return v

    @field_validator("weather_icon_base_url", mode="after")
    @classmethod
    def validate_icon_base_url(cls, v: str) -> str:
        """Icon codes are appended directly, so the base must end with a slash."""
        return v if v.endswith("/") else f"{v}/"


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def get_trusted_hosts(settings: Settings) -> list[str]:
    """Get trusted host patterns from settings.

    Args:
        settings: Settings instance with trusted hosts configuration

    Returns:
        List of trusted host patterns
    """
    return [host.strip() for host in settings.trusted_hosts.split(",") if host.strip()]
