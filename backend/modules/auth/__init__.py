"""
Authentication module.

Handles PIN-based registration and login, session token issuance and
verification, and resolving a bearer token to the acting identity.

Public API:
- IAuthService, ICredentialStore, ITokenService: Interfaces
- Identity, TokenPayload, AuthResponse: Models
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService, ICredentialStore, ITokenService
from .models import (
    Identity,
    TokenPayload,
    SignupRequest,
    LoginRequest,
    AuthResponse,
)
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    UserNotFoundError,
    InvalidCredentialsError,
    MissingCredentialsError,
    DuplicateEmailError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "ICredentialStore",
    "ITokenService",
    # Models
    "Identity",
    "TokenPayload",
    "SignupRequest",
    "LoginRequest",
    "AuthResponse",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "UserNotFoundError",
    "InvalidCredentialsError",
    "MissingCredentialsError",
    "DuplicateEmailError",
]
