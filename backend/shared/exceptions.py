"""
Base exception classes for the Saarthi backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to one HTTP status, so modules never
deal with status codes directly.
"""

from typing import Optional, Any


class SaarthiError(Exception):
    """
    Base exception for all Saarthi errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logs and API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(SaarthiError):
    """Resource not found."""

    pass


class ValidationError(SaarthiError):
    """Input validation failed."""

    pass


class ConflictError(SaarthiError):
    """Resource already exists (e.g. duplicate email)."""

    pass


class AuthenticationError(SaarthiError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(SaarthiError):
    """Authorization failed (authenticated, but not allowed)."""

    pass


class ConfigurationError(SaarthiError):
    """Required configuration is missing or invalid."""

    pass
