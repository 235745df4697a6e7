"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None


class NotFoundError(AppError):
    """Resource not found."""

    def __init__(self, message: str = "Not found", details: Any | None = None) -> None:
        super().__init__(code="not_found", message=message, status_code=404, details=details)


class ValidationError(AppError):
    """Input validation error."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class AlreadyUsedError(AppError):
    """The order number's single draw chance is already consumed."""

    def __init__(
        self,
        message: str = "This order number has already been used.",
        details: Any | None = None,
    ) -> None:
        super().__init__(code="already_used", message=message, status_code=400, details=details)


class AlreadyExistsError(AppError):
    """Order number registered twice."""

    def __init__(
        self,
        message: str = "Order number already exists.",
        details: Any | None = None,
    ) -> None:
        super().__init__(code="already_exists", message=message, status_code=400, details=details)


class ForbiddenError(AppError):
    """Caller is not allowed to perform the operation."""

    def __init__(self, message: str = "Forbidden", details: Any | None = None) -> None:
        super().__init__(code="forbidden", message=message, status_code=403, details=details)


class BackendError(AppError):
    """Document store failure; the message is passed through to the caller."""

    def __init__(self, message: str = "Backend error", details: Any | None = None) -> None:
        super().__init__(code="backend_error", message=message, status_code=500, details=details)


class ConfigurationError(Exception):
    """Invalid application configuration (raised at startup)."""


class CredentialsError(ConfigurationError):
    """Document store credentials could not be resolved."""


class MissingCredentialsError(CredentialsError):
    """No credential source is configured."""


class InvalidCredentialsError(CredentialsError):
    """A credential source is present but unusable."""
