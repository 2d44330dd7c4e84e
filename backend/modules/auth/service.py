"""
Authentication service implementation.

Registers users, logs them in with email + PIN, and resolves bearer tokens
to the acting identity.
"""

import logging

from shared.models import AuthenticatedUser

from .interfaces import IAuthService, ICredentialStore, ITokenService
from .models import SignupRequest, LoginRequest, AuthResponse, Identity
from .exceptions import (
    InvalidCredentialsError,
    MissingCredentialsError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Credentials live in the credential store; tokens are stateless and
    only the identity ID is embedded in them.
    """

    def __init__(self, store: ICredentialStore, tokens: ITokenService):
        self._store = store
        self._tokens = tokens

    async def signup(self, request: SignupRequest) -> AuthResponse:
        """Register a new user and hand back a session token."""
        if not request.email or not request.pin:
            raise MissingCredentialsError()

        identity = self._store.register(request.email, request.pin, request.name)
        return self._session_for(identity)

    async def login(self, request: LoginRequest) -> AuthResponse:
        """
        Authenticate with email and PIN.

        Unknown email and wrong PIN fail identically.
        """
        if not request.email or not request.pin:
            raise MissingCredentialsError()

        identity = self._store.find_by_email(request.email)
        if identity is None or not self._store.verify_pin(identity, request.pin):
            logger.info("Failed login attempt")
            raise InvalidCredentialsError()

        return self._session_for(identity)

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Verify a token and load the identity it names.

        A valid token for a user that has since been deleted is rejected.
        """
        payload = self._tokens.verify(token)

        user = self._store.get_identity(payload.id)
        if user is None:
            raise UserNotFoundError(payload.id)
        return user

    def _session_for(self, identity: Identity) -> AuthResponse:
        return AuthResponse(
            id=identity.id,
            name=identity.name,
            email=identity.email,
            token=self._tokens.issue(identity.id),
        )
