"""Business failures raised by use cases and the domain model.

Nothing here knows about HTTP. The entrypoint layer maps ``error_code`` to a
status code and ``to_dict()`` to a response body.
"""

from typing import Any, TypedDict


class FieldError(TypedDict):
    """One problem with one submitted field, e.g. ``{"field": "price", ...}``."""

    field: str
    message: str


class DomainError(Exception):
    """Base class for all domain errors.

    ``error_code`` doubles as a stable key clients can branch on. Keyword
    arguments are kept as ``context`` for logs; they are not shown to users.
    """

    error_code: str = "DOMAIN_ERROR"
    default_message: str = "The request could not be completed"

    def __init__(self, message: str | None = None, **context: Any) -> None:
        self.message = message or self.default_message
        self.context = context
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.error_code, **self.context}


class ValidationError(DomainError):
    """A submitted form broke one or more rules (422).

    Raised by the admin inventory form and the lead-capture forms, always
    with every failing field listed at once. Catalog query parameters never
    raise this; unusable filters are dropped instead.
    """

    error_code: str = "VALIDATION_ERROR"
    default_message: str = "Validation error"

    def __init__(
        self,
        message: str | None = None,
        errors: list[FieldError] | None = None,
        **context: Any,
    ) -> None:
        self.errors: list[FieldError] | None = errors or None
        if self.errors and message is None:
            message = "Validation failed"
        super().__init__(message, **context)

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls(errors=[{"field": field, "message": message}])

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.errors:
            data["errors"] = self.errors
        return data


class NotFoundError(DomainError):
    """No such resource (404).

    Malformed identifiers are reported the same way as unknown ones, so
    callers cannot tell the two apart.
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"
        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """The request clashes with stored state (409).

    Duplicate staff e-mail, a second financing application inside 24 hours,
    an admin deleting their own account.
    """

    error_code: str = "CONFLICT"
    default_message: str = "The request conflicts with existing data"


class UnauthorizedError(DomainError):
    """Not signed in, or the credentials were wrong (401)."""

    error_code: str = "UNAUTHORIZED"
    default_message: str = "Authentication required"


class ForbiddenError(DomainError):
    """Signed in, but the account lacks the needed role (403)."""

    error_code: str = "FORBIDDEN"
    default_message: str = "Administrator access required"


class ServiceUnavailableError(DomainError):
    """A collaborator such as the store or the mail relay is down (503).

    The message is shown to end users as is; details belong in the logs.
    """

    error_code: str = "SERVICE_UNAVAILABLE"
    default_message: str = "The service is temporarily unavailable. Please try again later."


class InternalError(DomainError):
    """An invariant that should always hold did not (500)."""

    error_code: str = "INTERNAL_ERROR"
    default_message: str = "An unexpected error occurred"
