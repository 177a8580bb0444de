"""Error body models for the OpenAPI schema.

The handlers in ``exception_handlers`` build these bodies; routes reference
them through ``error_response`` in their ``responses=`` tables.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """A problem with one field. ``code`` is set for request parsing errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "phone",
                "message": "String should match pattern '^\\(\\d{3}\\)\\s\\d{3}-\\d{4}$'",
                "code": "string_pattern_mismatch",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Body of every non-2xx JSON response.

    ``errors`` is present for form and request validation failures and lists
    every failing field, not just the first.
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Vehicle with identifier 'abc' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {"field": "price", "message": "Must be a positive number"},
                        {"field": "year", "message": "Must be a whole number"},
                    ],
                },
                {
                    "detail": "The vehicle catalog is temporarily unavailable. Please try again later.",
                    "code": "SERVICE_UNAVAILABLE",
                },
            ]
        }
    )


def error_response(description: str, example: dict[str, Any] | None = None) -> dict[str, Any]:
    """One entry of a route's ``responses=`` table, documented as ErrorResponse."""
    entry: dict[str, Any] = {"model": ErrorResponse, "description": description}
    if example is not None:
        entry["content"] = {"application/json": {"example": example}}
    return entry
