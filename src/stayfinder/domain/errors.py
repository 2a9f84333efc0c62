"""Errors raised by the domain and use cases.

The HTTP layer maps ``error_code`` to a status. Storage failures are not
domain errors; see ``ports.storage_medium``.
"""

from typing import Any


class DomainError(Exception):
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.error_code, **self.context}


class ValidationError(DomainError):
    """Input rejected by a ``validate()`` method.

    ``errors`` holds one ``{"field", "message", "code"}`` dict per offending
    field when the caller knows which fields failed.
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self, message: str | None = None, errors: list[dict[str, str]] | None = None
    ) -> None:
        self.errors = errors or None
        default = "Validation failed" if self.errors else "Validation error"
        super().__init__(message or default)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.errors:
            data["errors"] = self.errors
        return data


class NotFoundError(DomainError):
    """A listing id or shared wishlist token that resolves to nothing."""

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None) -> None:
        message = (
            f"{resource} with identifier '{identifier}' not found"
            if identifier
            else f"{resource} not found"
        )
        super().__init__(message, resource=resource, identifier=identifier)
