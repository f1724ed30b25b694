"""
Logging for the bookstore service.

RequestContextFilter stamps every record with the request's correlation ID
and the fields LoggingContextMiddleware collected (endpoint, method,
status_code, duration_ms). The console shows them human-readable, or as
JSON lines when LOG_CONSOLE_FORMAT is "json"; errors are also appended to
LOG_FILE_PATH as JSON lines.
"""

import json
import logging
import sys
from contextvars import ContextVar
from typing import Any

from bookstore.middlewares.correlation_id import get_correlation_id
from bookstore.settings import app_settings

CONSOLE_FORMAT = (
    "%(asctime)s - [%(correlation_id)s] %(levelname)s: "
    "%(module)s:%(lineno)d - %(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

log_context: ContextVar[dict[str, Any] | None] = ContextVar(
    "log_context", default=None
)


def set_log_context(**kwargs: Any) -> None:
    """
    Add fields to the current request's log context.

    Example:
        >>> set_log_context(endpoint="/api/author", method="GET")
    """
    log_context.set({**(log_context.get() or {}), **kwargs})


def clear_log_context() -> None:
    log_context.set(None)


class RequestContextFilter(logging.Filter):
    """Attach `correlation_id` and `context` attributes to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        record.context = log_context.get() or {}
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per record, request context fields inlined."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
            "request_id": getattr(record, "correlation_id", "-"),
            "environment": app_settings.ENVIRONMENT,
            **getattr(record, "context", {}),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging() -> logging.Logger:
    """
    Configure the `bookstore` logger.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger("bookstore")
    logger.setLevel(app_settings.LOG_LEVEL.upper())
    logger.propagate = False

    # Clear existing handlers to avoid duplicates on reload
    logger.handlers.clear()

    context_filter = RequestContextFilter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.addFilter(context_filter)
    if app_settings.LOG_CONSOLE_FORMAT == "json":
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(
            logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT)
        )
    logger.addHandler(console_handler)

    try:
        file_handler = logging.FileHandler(app_settings.LOG_FILE_PATH)
    except OSError as e:
        logger.warning(f"Could not create file handler: {e}")
    else:
        file_handler.setLevel(logging.ERROR)
        file_handler.addFilter(context_filter)
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    # Disable logging during pytest runs
    if sys.argv[0].split("/")[-1] in ["pytest"]:
        logging.disable(logging.ERROR)

    return logger


logger = setup_logging()
