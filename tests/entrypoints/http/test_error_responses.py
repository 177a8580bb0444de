"""Tests for REST error response models."""

from autohaus.entrypoints.http.error_responses import ErrorDetail, ErrorResponse, error_response


class TestErrorDetail:
    def test_code_is_optional(self) -> None:
        detail = ErrorDetail(field="price", message="Must be a positive number")

        assert detail.model_dump() == {
            "field": "price",
            "message": "Must be a positive number",
            "code": None,
        }


class TestErrorResponse:
    def test_simple_error_response(self) -> None:
        response = ErrorResponse(detail="Vehicle not found", code="NOT_FOUND")

        assert response.errors is None
        assert response.model_dump(exclude_none=True) == {
            "detail": "Vehicle not found",
            "code": "NOT_FOUND",
        }

    def test_error_response_with_field_errors(self) -> None:
        response = ErrorResponse(
            detail="Validation failed",
            code="VALIDATION_ERROR",
            errors=[ErrorDetail(field="year", message="Must be a whole number")],
        )

        assert response.model_dump()["errors"] == [
            {"field": "year", "message": "Must be a whole number", "code": None}
        ]

    def test_json_schema_has_examples(self) -> None:
        schema = ErrorResponse.model_json_schema()

        assert len(schema["examples"]) == 3
        assert schema["examples"][0]["code"] == "NOT_FOUND"


class TestErrorResponseEntry:
    def test_plain_entry(self) -> None:
        assert error_response("Not signed in") == {
            "model": ErrorResponse,
            "description": "Not signed in",
        }

    def test_entry_with_example(self) -> None:
        example = {"detail": "Vehicle with identifier 'abc' not found", "code": "NOT_FOUND"}

        entry = error_response("Unknown vehicle", example=example)

        assert entry["content"] == {"application/json": {"example": example}}
