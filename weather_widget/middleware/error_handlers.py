"""Exception handlers for the application."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from weather_widget.exceptions import WidgetException
from weather_widget.logging_config import get_logger, log_with_context
from weather_widget.middleware.logging_middleware import redact_sensitive_data

logger = get_logger(__name__)


async def widget_exception_handler(request: Request, exc: WidgetException) -> JSONResponse:
    """Handle widget exceptions raised from JSON API routes.

    Returns the user-facing message together with the error code and
    details so API clients can branch on the code.
    """
    log_with_context(
        logger,
        "warning",
        "Widget error",
        error_code=exc.code.value,
        error_message=exc.message,
        status_code=exc.status_code,
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="widget_error",
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": exc.code.value, "message": exc.message, "details": exc.details}},
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=exc)

    # Don't expose internal error details to clients
    return JSONResponse(
        status_code=500,
        content={"error": {"code": "INTERNAL_ERROR", "message": "Internal server error"}},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(WidgetException, widget_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
