"""Tests for application exception classes."""

from bookstore.exceptions import (
    AppException,
    DatabaseError,
    NotFoundError,
    ReferentialIntegrityError,
    ValidationError,
)
from bookstore.schemas.errors import ErrorCode, HTTPErrorResponse


class TestExceptionAttributes:
    def test_not_found(self):
        ex = NotFoundError("Author with ID 1 not found", {"id": 1})

        assert ex.http_status == 404
        assert ex.error_code == ErrorCode.NOT_FOUND
        assert ex.details == {"id": 1}
        assert str(ex) == "Author with ID 1 not found"

    def test_referential_integrity(self):
        ex = ReferentialIntegrityError("Referenced author does not exist")

        assert ex.http_status == 400
        assert ex.error_code == "referential_integrity"
        assert ex.details is None

    def test_validation_and_database(self):
        assert ValidationError("x").http_status == 400
        assert DatabaseError("x").http_status == 500

    def test_all_inherit_from_app_exception(self):
        for cls in (
            NotFoundError,
            ReferentialIntegrityError,
            ValidationError,
            DatabaseError,
        ):
            assert issubclass(cls, AppException)


class TestErrorEnvelope:
    def test_to_http_response(self):
        response = NotFoundError("gone", {"id": 5}).to_http_response()

        assert isinstance(response, HTTPErrorResponse)
        assert response.model_dump() == {
            "error": {"code": "not_found", "msg": "gone", "details": {"id": 5}}
        }
