"""
Endpoints about the signed-in user.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from shared.models import AuthenticatedUser
from ..middleware.auth import RequireAuth

router = APIRouter()


class UserProfileResponse(BaseModel):
    """Public profile. The PIN hash never leaves the credential store."""

    id: str
    name: str
    email: str


@router.get("/me", response_model=UserProfileResponse)
async def get_current_user_profile(user: AuthenticatedUser = RequireAuth) -> UserProfileResponse:
    """Return the identity the bearer token resolves to."""
    return UserProfileResponse(id=user.id, name=user.name, email=user.email)
