"""
Authentication module interfaces.

Other modules should depend on these protocols, not the concrete
implementations. This enables testing with mocks and swapping the
credential backend without touching route code.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import Identity, TokenPayload, SignupRequest, LoginRequest, AuthResponse


@runtime_checkable
class ICredentialStore(Protocol):
    """Persists identities and checks PINs against their stored hashes."""

    def register(self, email: str, pin: str, name: Optional[str] = None) -> Identity:
        """
        Create a new identity with a salted hash of the PIN.

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        ...

    def find_by_email(self, email: str) -> Optional[Identity]:
        """Return the identity for an email, or None."""
        ...

    def verify_pin(self, identity: Identity, supplied_pin: str) -> bool:
        """Check a PIN with the hash algorithm's own verify primitive."""
        ...

    def get_identity(self, identity_id: str) -> Optional[AuthenticatedUser]:
        """Return the identity without its PIN hash, or None."""
        ...


@runtime_checkable
class ITokenService(Protocol):
    """Issues and verifies signed, time-limited bearer tokens."""

    def issue(self, identity_id: str) -> str:
        ...

    def verify(self, token: str) -> TokenPayload:
        """
        Raises:
            MissingTokenError, ExpiredTokenError, InvalidTokenError
        """
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer and the access guard.
    """

    async def signup(self, request: SignupRequest) -> AuthResponse:
        """
        Register a user and return a session token.

        Raises:
            MissingCredentialsError: If email or PIN is missing
            DuplicateEmailError: If the email is taken
        """
        ...

    async def login(self, request: LoginRequest) -> AuthResponse:
        """
        Authenticate with email and PIN.

        Raises:
            MissingCredentialsError: If email or PIN is missing
            InvalidCredentialsError: On unknown email or wrong PIN
        """
        ...

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Verify a bearer token and resolve the acting identity.

        Raises:
            AuthenticationError: If the token is invalid or expired, or the
                identity it names no longer exists
        """
        ...
