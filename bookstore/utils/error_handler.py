"""
Error handling for HTTP endpoints.

`handle_http_errors` turns AppException instances raised by repositories
and commands into HTTPExceptions carrying the error envelope, removing
try/except blocks from handlers. `register_exception_handlers` makes every
error response, including request validation failures, use the same
`{"error": {...}}` body.
"""

from functools import wraps
from typing import Any, Callable

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookstore.exceptions import AppException, DatabaseError, ValidationError
from bookstore.logging import logger
from bookstore.schemas.errors import (
    STATUS_ERROR_CODES,
    ErrorCode,
    ErrorEnvelope,
    HTTPErrorResponse,
)


def handle_http_errors(func: Callable) -> Callable:
    """
    Decorator for HTTP endpoints to convert AppException to HTTPException.

    Args:
        func: The HTTP endpoint function to wrap.

    Returns:
        Wrapped function that handles exceptions.

    Example:
        ```python
        @router.post("/product")
        @handle_http_errors
        async def create_product(data: ProductCreate, repo: ProductRepoDep) -> ProductRead:
            return await CreateProductCommand(repo).execute(data)  # No try/except needed!
        ```
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except AppException as ex:
            logger.warning(
                f"AppException in {func.__name__}: {ex.message}",
                extra={"exception_type": type(ex).__name__},
            )
            raise HTTPException(
                status_code=ex.http_status,
                detail=ex.to_envelope().model_dump(),
            ) from ex
        except SQLAlchemyError as ex:
            logger.error(
                f"Database error in {func.__name__}: {ex}",
                exc_info=True,
            )
            error = DatabaseError("Database error occurred")
            raise HTTPException(
                status_code=error.http_status,
                detail=error.to_envelope().model_dump(),
            ) from ex

    return wrapper


def _error_response(
    status_code: int,
    envelope: ErrorEnvelope,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(HTTPErrorResponse(error=envelope)),
        headers=headers,
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTPException as an error envelope."""
    if isinstance(exc.detail, dict) and "code" in exc.detail:
        envelope = ErrorEnvelope(**exc.detail)
    else:
        envelope = ErrorEnvelope(
            code=STATUS_ERROR_CODES.get(
                exc.status_code, ErrorCode.INTERNAL_ERROR
            ),
            msg=str(exc.detail),
        )
    return _error_response(exc.status_code, envelope, exc.headers)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Reject malformed requests with 400.

    Covers body shape errors as well as path parameters that are not
    integers, so such requests never reach a repository.
    """
    logger.info(f"Validation failed for {request.method} {request.url.path}")
    error = ValidationError(
        "Request validation failed",
        {"errors": jsonable_encoder(exc.errors())},
    )
    return _error_response(error.http_status, error.to_envelope())


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Last resort: log the failure and answer 500."""
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc}",
        exc_info=True,
    )
    envelope = ErrorEnvelope(
        code=ErrorCode.INTERNAL_ERROR, msg="Internal server error"
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, envelope)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register the error envelope handlers on the application.

    Args:
        app: FastAPI application.
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(
        RequestValidationError, validation_exception_handler
    )
    app.add_exception_handler(Exception, unhandled_exception_handler)
