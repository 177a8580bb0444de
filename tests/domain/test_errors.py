"""Tests for domain error classes."""

import pytest

from autohaus.domain.errors import (
    ConflictError,
    DomainError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    ServiceUnavailableError,
    UnauthorizedError,
    ValidationError,
)


class TestDomainError:
    def test_stores_message_and_context(self) -> None:
        error = DomainError("Something went wrong", resource="Vehicle")

        assert str(error) == "Something went wrong"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.to_dict() == {
            "message": "Something went wrong",
            "code": "DOMAIN_ERROR",
            "resource": "Vehicle",
        }


class TestValidationError:
    def test_default_message_without_field_errors(self) -> None:
        error = ValidationError()

        assert error.message == "Validation error"
        assert error.errors is None
        assert error.to_dict() == {"message": "Validation error", "code": "VALIDATION_ERROR"}

    def test_field_errors_are_listed(self) -> None:
        errors = [
            {"field": "title", "message": "This field is required"},
            {"field": "price", "message": "Must be a positive number"},
        ]

        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.to_dict() == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }


class TestNotFoundError:
    def test_message_names_resource_and_identifier(self) -> None:
        error = NotFoundError("Vehicle", "abc")

        assert error.message == "Vehicle with identifier 'abc' not found"
        assert error.to_dict() == {
            "message": "Vehicle with identifier 'abc' not found",
            "code": "NOT_FOUND",
            "resource": "Vehicle",
            "identifier": "abc",
        }

    def test_message_without_identifier(self) -> None:
        assert NotFoundError("StaffUser").message == "StaffUser not found"


@pytest.mark.parametrize(
    ("error_class", "code"),
    [
        (ConflictError, "CONFLICT"),
        (UnauthorizedError, "UNAUTHORIZED"),
        (ForbiddenError, "FORBIDDEN"),
        (ServiceUnavailableError, "SERVICE_UNAVAILABLE"),
        (InternalError, "INTERNAL_ERROR"),
    ],
)
def test_error_codes(error_class: type[DomainError], code: str) -> None:
    error = error_class("Something happened")

    assert error.error_code == code
    assert isinstance(error, DomainError)


def test_for_field_builds_single_field_error() -> None:
    error = ValidationError.for_field("images", "At most 10 images per vehicle")

    assert error.message == "Validation failed"
    assert error.errors == [{"field": "images", "message": "At most 10 images per vehicle"}]


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (UnauthorizedError(), "Authentication required"),
        (ForbiddenError(), "Administrator access required"),
        (
            ServiceUnavailableError(),
            "The service is temporarily unavailable. Please try again later.",
        ),
    ],
)
def test_default_messages(error: DomainError, message: str) -> None:
    assert error.message == message
    assert str(error) == message
