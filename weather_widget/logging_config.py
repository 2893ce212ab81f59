"""Logging for the weather widget.

Widget events go to a rotating JSON file (one object per line, with the
structured fields passed to ``log_with_context``) and to a plain console
stream. Where the file lives and how it rotates come from ``Settings``.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any

from pythonjsonlogger import jsonlogger

from weather_widget.config import Settings, get_settings

JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d"
CONSOLE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Chatty libraries; their request lines are already covered by the client hooks
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """Install the JSON file handler and the console handler on the root logger.

    Args:
        settings: Settings instance (defaults to singleton)

    Returns:
        Configured root logger instance
    """
    if settings is None:
        settings = get_settings()
    level = getattr(logging, settings.log_level)

    settings.log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    json_handler = RotatingFileHandler(
        settings.log_dir / settings.log_file,
        maxBytes=settings.log_max_bytes,
        backupCount=settings.log_backup_count,
        encoding="utf-8",
    )
    json_handler.setFormatter(jsonlogger.JsonFormatter(JSON_LOG_FORMAT, timestamp=True))
    json_handler.setLevel(logging.DEBUG)
    root_logger.addHandler(json_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Module logger; call with ``__name__``."""
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log a message with structured fields attached.

    Args:
        logger: Logger instance
        level: Log level name (debug, info, warning, error, critical)
        message: Log message
        **extra_fields: Fields for the JSON record, e.g. ``event_type``, ``location``
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=extra_fields)
