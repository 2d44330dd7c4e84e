"""
Voice API endpoints.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_voice_service
from shared.models import AuthenticatedUser

from .dictation import DictationRequest, DictationResponse, dictate
from .models import VoiceCommandRequest, VoiceResponse
from .service import VoiceService

router = APIRouter()


@router.post("/command", response_model=VoiceResponse)
async def handle_command(
    request: VoiceCommandRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: VoiceService = Depends(get_voice_service),
) -> VoiceResponse:
    """
    Interpret a transcript spoken on a page.

    Status changes and deletes are returned as actions; the client performs
    them through the assignment and note endpoints.
    """
    return await service.handle(user, request)


@router.post("/dictation", response_model=DictationResponse)
async def normalize_dictation(request: DictationRequest) -> DictationResponse:
    """
    Normalize a dictated email or PIN on the sign-in page.

    No token required: nothing is stored or looked up.
    """
    return dictate(request.field, request.transcript)
