"""
Bearer token access guard.

Resolves the Authorization header to the acting user or answers 401. The
client only ever sees one of two messages; the reason a token was rejected
goes to the log.
"""

import logging
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.exceptions import SaarthiError
from shared.models import AuthenticatedUser
from modules.auth.interfaces import IAuthService
from ..dependencies import get_auth_service

logger = logging.getLogger(__name__)

# Yields None for a missing or non-Bearer header
bearer_scheme = HTTPBearer(auto_error=False)

NO_TOKEN = "Not authorized, no token"
TOKEN_FAILED = "Not authorized, token failed"


class AuthError(HTTPException):
    """401 with a Bearer challenge."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Require a valid token and return the identity it was issued for.

    Usage:
        @router.get("")
        async def list_assignments(user: AuthenticatedUser = RequireAuth):
            ...
    """
    if credentials is None or not credentials.credentials:
        raise AuthError(NO_TOKEN)

    try:
        return await auth.validate_token(credentials.credentials)
    except SaarthiError as e:
        logger.warning("Token rejected: %s (%s)", e.message, e.code)
        raise AuthError(TOKEN_FAILED)


RequireAuth = Depends(get_current_user)
