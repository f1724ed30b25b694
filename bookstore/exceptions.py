"""
Custom exception classes for the application.

Each exception carries the HTTP status code and machine-readable error
code it maps to, so handlers can translate any of them into a response
without per-endpoint try/except blocks.
"""

from typing import Any

from bookstore.schemas.errors import ErrorCode, ErrorEnvelope, HTTPErrorResponse


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        details: Optional structured context for the error envelope.
        http_status: HTTP status code for REST API responses.
        error_code: Machine-readable code used in the error envelope.
    """

    http_status: int = 500
    error_code: str = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details
        super().__init__(message)

    def to_envelope(self) -> ErrorEnvelope:
        return ErrorEnvelope(
            code=self.error_code, msg=self.message, details=self.details
        )

    def to_http_response(self) -> HTTPErrorResponse:
        """
        Convert the exception into the HTTP error response body.

        Returns:
            HTTPErrorResponse wrapping this exception's envelope.
        """
        return HTTPErrorResponse(error=self.to_envelope())


class NotFoundError(AppException):
    """
    Resource not found.

    Raised when an update or delete targets an ID that does not exist.

    HTTP Status: 404 Not Found
    """

    http_status = 404
    error_code = ErrorCode.NOT_FOUND


class ReferentialIntegrityError(AppException):
    """
    Foreign key reference is missing or blocks the operation.

    Raised when a product points at an author that does not exist, or
    when an author that still has products is deleted.

    HTTP Status: 400 Bad Request
    """

    http_status = 400
    error_code = ErrorCode.REFERENTIAL_INTEGRITY


class ValidationError(AppException):
    """
    Request validation failed.

    Built by the RequestValidationError handler, so malformed bodies and
    path parameters share the error envelope and status of the app
    exceptions.

    HTTP Status: 400 Bad Request
    """

    http_status = 400
    error_code = ErrorCode.VALIDATION_ERROR


class DatabaseError(AppException):
    """
    Database operation failed.

    HTTP Status: 500 Internal Server Error
    """

    http_status = 500
    error_code = ErrorCode.DATABASE_ERROR
