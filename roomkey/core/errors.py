"""Application error taxonomy. Each error maps to one HTTP status."""

from fastapi import status


class AppError(Exception):
    """Base for errors that are safe to show to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class Unauthenticated(AppError):
    """Missing, malformed, expired or invalid credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(AppError):
    """Resource already exists (e.g. email already registered)."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class ConfigurationError(AppError):
    """Database schema cannot support the requested operation."""

    default_message = "Server configuration error"


class InternalError(AppError):
    """Unexpected store failure; details stay in the server log."""


class TokenError(Exception):
    """Raised when a bearer token cannot be accepted."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class TokenExpired(TokenError):
    """Token signature is valid but its exp claim is in the past."""


class TokenInvalid(TokenError):
    """Token is malformed, tampered with, or signed with another secret."""
