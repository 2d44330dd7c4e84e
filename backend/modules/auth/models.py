"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


DEFAULT_DISPLAY_NAME = "User"


class Identity(BaseModel):
    """
    A registered user as stored in the credential store.

    The PIN hash is excluded from serialization and repr so it cannot
    leak through a response body or a log line.
    """

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Email address, unique, stored as given")
    name: str = Field(default=DEFAULT_DISPLAY_NAME, description="Display name")
    pin_hash: str = Field(..., exclude=True, repr=False, description="bcrypt hash of the PIN")
    created_at: Optional[datetime] = Field(None, description="Account creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")


class TokenPayload(BaseModel):
    """
    Decoded session token claims.

    ``jti`` is random per issued token, so two logins never produce the
    same token string even within the same second.
    """

    id: str = Field(..., description="Identity ID the token was issued for")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")
    jti: Optional[str] = Field(None, description="Unique token ID")


class SignupRequest(BaseModel):
    """Body of POST /api/auth/signup. Presence is checked by the service."""

    email: Optional[str] = None
    pin: Optional[str] = None
    name: Optional[str] = None


class LoginRequest(BaseModel):
    """Body of POST /api/auth/login."""

    email: Optional[str] = None
    pin: Optional[str] = None


class AuthResponse(BaseModel):
    """Returned by signup and login; the client persists this blob."""

    id: str
    name: str
    email: str
    token: str
