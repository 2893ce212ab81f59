"""Middleware configuration."""

from fastapi import FastAPI
from fastapi.middleware.trustedhost import TrustedHostMiddleware

from weather_widget.config import Settings, get_trusted_hosts
from weather_widget.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure all middleware for the application.

    Args:
        app: FastAPI application instance
        settings: Application settings
    """
    # Trusted hosts - prevent host header injection
    trusted_hosts = get_trusted_hosts(settings)
    log_with_context(
        logger,
        "info",
        "Configuring TrustedHost middleware",
        event_type="security_config",
        hosts=trusted_hosts,
    )
    app.add_middleware(TrustedHostMiddleware, allowed_hosts=trusted_hosts)
