"""
Error hierarchy for the user records service.

Every error carries the HTTP status it maps to, so the API layer can turn
any of them into the ``{"success": false, "message": ...}`` envelope
without knowing about individual cases.
"""

from typing import Optional


class UserServiceError(Exception):
    """Base exception for all user service errors."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(UserServiceError):
    """
    Raised when a field constraint on a user record fails.

    The message names the field, e.g.
    ``User validation failed: dateOfBirth: Invalid date format``.
    """

    status_code = 400

    def __init__(self, field: Optional[str], detail: str) -> None:
        if field:
            message = f"User validation failed: {field}: {detail}"
        else:
            message = f"Invalid request body: {detail}"
        super().__init__(message)
        self.field = field
        self.detail = detail


class ConflictError(UserServiceError):
    """Raised when a user with the same name, age and dateOfBirth exists."""

    status_code = 409


class NotFoundError(UserServiceError):
    """Raised when the addressed user id does not exist."""

    status_code = 404


class RepositoryError(UserServiceError):
    """Raised when the underlying store fails; carries the driver message."""

    status_code = 500
