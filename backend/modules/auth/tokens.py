"""
Session token issuance and verification.

Tokens are stateless HS256 JWTs carrying the identity ID. They are not stored
server-side and can only become invalid by expiring.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings, get_settings
from shared.exceptions import ConfigurationError

from .exceptions import InvalidTokenError, ExpiredTokenError, MissingTokenError
from .models import TokenPayload


DEFAULT_TOKEN_LIFETIME = timedelta(days=30)


class TokenService:
    """
    Implementation of ITokenService using PyJWT.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = DEFAULT_TOKEN_LIFETIME,
    ):
        if not secret:
            raise ConfigurationError("Token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = expires_in

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "TokenService":
        settings = settings or get_settings()
        return cls(
            secret=settings.resolve_jwt_secret(),
            algorithm=settings.jwt_algorithm,
            expires_in=timedelta(days=settings.token_expire_days),
        )

    def issue(self, identity_id: str) -> str:
        """Sign a token for an identity, valid for the configured lifetime."""
        now = datetime.now(timezone.utc)
        payload = {
            "id": identity_id,
            "iat": now,
            "exp": now + self._expires_in,
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenPayload:
        """
        Verify signature and expiry and return the claims.

        Raises:
            MissingTokenError: If token is empty
            ExpiredTokenError: If the token is past its expiry
            InvalidTokenError: If the signature or structure is wrong
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
            return TokenPayload(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))
        except PydanticValidationError:
            raise InvalidTokenError("Token is missing the identity claim")
