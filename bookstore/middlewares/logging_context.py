"""
Middleware for injecting contextual fields into structured logs.

This middleware adds request-specific information to the log context
that will be included in all log messages during request processing.
"""

import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from bookstore.logging import clear_log_context, logger, set_log_context
from bookstore.settings import app_settings


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware to inject contextual fields into structured logs.

    This middleware:
    - Adds endpoint and method to log context
    - Logs one line per request with status code and duration
    - Clears log context after request completes
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        set_log_context(endpoint=request.url.path, method=request.method)
        start = time.perf_counter()

        try:
            response = await call_next(request)

            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            set_log_context(
                status_code=response.status_code, duration_ms=duration_ms
            )
            if request.url.path not in app_settings.LOG_EXCLUDED_PATHS:
                logger.info(
                    f"{request.method} {request.url.path} "
                    f"{response.status_code} ({duration_ms}ms)"
                )
            return response
        finally:
            clear_log_context()
