"""Custom filters for uvicorn access logging."""

import copy
import logging
from typing import Any

from uvicorn.config import LOGGING_CONFIG

DEFAULT_EXCLUDED_PATHS = ["/health"]


class ExcludeHealthFilter(logging.Filter):
    """
    Logging filter to exclude monitoring endpoint requests from access logs.

    Requests to paths listed in LOG_EXCLUDED_PATHS (by default only
    /health) do not appear in uvicorn's access log.

    Note: uvicorn builds its logging config before the app is imported, so
    settings are only read when a record is filtered.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Determine if the log record should be logged.

        Args:
            record: The log record to evaluate.

        Returns:
            False if the request path is in excluded paths, True otherwise.
        """
        message = record.getMessage()

        try:
            from bookstore.settings import app_settings

            excluded_paths = app_settings.LOG_EXCLUDED_PATHS
        except ImportError:
            excluded_paths = DEFAULT_EXCLUDED_PATHS

        return not any(f"{path} " in message for path in excluded_paths)


def uvicorn_log_config() -> dict[str, Any]:
    """Uvicorn's default logging config with the health filter on access logs."""
    config = copy.deepcopy(LOGGING_CONFIG)
    config.setdefault("filters", {})["exclude_health"] = {
        "()": "bookstore.uvicorn_filters.ExcludeHealthFilter"
    }
    config["handlers"]["access"]["filters"] = ["exclude_health"]
    return config
