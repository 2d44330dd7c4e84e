"""
Authentication API endpoints.

Signup and login are public; everything else requires the token they return.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service

from .interfaces import IAuthService
from .models import SignupRequest, LoginRequest, AuthResponse

router = APIRouter()


@router.post("/signup", response_model=AuthResponse, status_code=201)
async def signup(
    request: SignupRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Register a new user.

    Returns 400 if email or PIN is missing or the email is already taken.
    """
    return await service.signup(request)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Log in with email and PIN.

    Returns 401 with the same message for an unknown email or a wrong PIN.
    """
    return await service.login(request)
