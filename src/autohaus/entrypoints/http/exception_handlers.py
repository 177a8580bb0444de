"""Turns exceptions into the JSON error body every endpoint shares.

Body shape: ``{"detail": str, "code": str, "errors"?: [{"field", "message", "code"?}]}``
(see ``error_responses.ErrorResponse``).
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from autohaus.domain.errors import DomainError, InternalError, ServiceUnavailableError
from autohaus.ports.errors import StorageError

logger = logging.getLogger(__name__)

# Domain error code -> HTTP status; unknown codes fall back to 400
STATUS_CODE_MAP: dict[str, int] = {
    "VALIDATION_ERROR": 422,  # HTTP_422_UNPROCESSABLE_CONTENT
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "SERVICE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
    "INTERNAL_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Location prefixes FastAPI puts in front of field names
_LOCATION_PREFIXES = frozenset({"body", "query", "form"})


def _request_context(request: Request) -> dict[str, str]:
    return {"path": request.url.path, "method": request.method}


def _error_response(
    status_code: int, detail: str, code: str, errors: list[Any] | None = None
) -> JSONResponse:
    content: dict[str, Any] = {"detail": detail, "code": code}
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Map a DomainError to its status code by ``error_code``.

    Field errors of a ValidationError are passed through as ``errors``.
    The error's ``context`` goes to the log only.
    """
    status_code = STATUS_CODE_MAP.get(exc.error_code, status.HTTP_400_BAD_REQUEST)
    details = exc.to_dict()

    if status_code >= 500:
        logger.error(
            "Domain error occurred",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                "context": exc.context,
                **_request_context(request),
            },
        )
    else:
        logger.info(
            "Client error",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                **_request_context(request),
            },
        )

    return _error_response(status_code, exc.message, exc.error_code, details.get("errors"))


async def handle_storage_error(request: Request, exc: StorageError) -> JSONResponse:
    """Storage failures no use case recovered from become a generic 503.

    The driver message can name hosts and tables, so it is only logged.
    """
    logger.error("Storage unavailable", exc_info=exc, extra=_request_context(request))
    return _error_response(
        status.HTTP_503_SERVICE_UNAVAILABLE,
        ServiceUnavailableError.default_message,
        ServiceUnavailableError.error_code,
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report request parsing failures as field errors.

    Field paths are dotted and use the client's (camelCase) names, e.g.
    ``applicant.residence.zipCode``. Path parameters keep their ``path.``
    prefix.
    """
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"] if loc not in _LOCATION_PREFIXES),
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors()
    ]

    logger.info("Request validation error", extra={"errors": errors, **_request_context(request)})

    return _error_response(422, "Invalid request parameters", "VALIDATION_ERROR", errors)


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    """ValueErrors that escape a use case, e.g. an upload with a non-image extension."""
    logger.info("Value error", extra={"error_message": str(exc), **_request_context(request)})
    return _error_response(422, str(exc), "INVALID_VALUE")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Anything else is a bug: log the traceback, answer with a generic 500."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "error_message": str(exc),
            **_request_context(request),
        },
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        InternalError.default_message,
        InternalError.error_code,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install every handler on ``app``. Called once by ``build_app``."""
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(StorageError, handle_storage_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(ValueError, handle_value_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)
