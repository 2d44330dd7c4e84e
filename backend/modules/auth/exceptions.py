"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, ConflictError, ValidationError


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class UserNotFoundError(AuthenticationError):
    """Raised when a valid token names a user that no longer exists."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class InvalidCredentialsError(AuthenticationError):
    """
    Raised on a failed login.

    Unknown email and wrong PIN share this message so a caller cannot
    tell which accounts exist.
    """

    def __init__(self):
        super().__init__("Invalid email or PIN", code="INVALID_CREDENTIALS")


class MissingCredentialsError(ValidationError):
    """Raised when email or PIN is absent from a signup/login body."""

    def __init__(self):
        super().__init__("Please provide email and PIN", code="MISSING_CREDENTIALS")


class DuplicateEmailError(ConflictError):
    """Raised when registering an email that is already taken."""

    def __init__(self, email: str):
        super().__init__(
            "User already exists",
            code="DUPLICATE_EMAIL",
            details={"email": email},
        )
