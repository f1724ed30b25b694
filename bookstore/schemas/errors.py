"""
Error envelope models for HTTP responses.

Every error response body has the same shape:

    {
        "error": {
            "code": "not_found",
            "msg": "Author with ID 42 not found",
            "details": {"author_id": 42}
        }
    }
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorEnvelope(BaseModel):
    """
    Error envelope structure.

    Attributes:
        code: Machine-readable error code for client-side error handling.
        msg: Human-readable error description for display.
        details: Optional additional context (field errors, ids, etc.).
    """

    code: str = Field(
        ...,
        description="Machine-readable error code (e.g., 'validation_error', 'not_found')",
    )
    msg: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(
        default=None,
        description="Optional additional error context and metadata",
    )


class HTTPErrorResponse(BaseModel):
    """HTTP error response envelope, used as the JSON body of every error."""

    error: ErrorEnvelope = Field(..., description="Error details envelope")


class ErrorCode:
    """
    Standard error codes for consistent error reporting.

    Categories:
    - Validation errors: VALIDATION_ERROR
    - Resource errors: NOT_FOUND, REFERENTIAL_INTEGRITY
    - System errors: DATABASE_ERROR, INTERNAL_ERROR
    """

    VALIDATION_ERROR = "validation_error"

    NOT_FOUND = "not_found"
    REFERENTIAL_INTEGRITY = "referential_integrity"

    DATABASE_ERROR = "database_error"
    INTERNAL_ERROR = "internal_error"


# Fallback codes for HTTPExceptions raised without an envelope
STATUS_ERROR_CODES: dict[int, str] = {
    400: ErrorCode.VALIDATION_ERROR,
    404: ErrorCode.NOT_FOUND,
    422: ErrorCode.VALIDATION_ERROR,
    500: ErrorCode.INTERNAL_ERROR,
}
