"""
Note API endpoints.

Mirrors the assignment endpoints with ``{title, content}`` bodies.
"""

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_user
from api.dependencies import get_note_service
from shared.models import AuthenticatedUser
from modules.ownership.models import DeletedResponse

from .models import Note, CreateNoteRequest, UpdateNoteRequest
from .service import NoteService

router = APIRouter()
legacy_router = APIRouter()


@router.get("", response_model=list[Note])
async def list_notes(
    user: AuthenticatedUser = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
) -> list[Note]:
    """List the current user's notes, most recent first."""
    return await service.list_resources(user)


@router.post("", response_model=Note, status_code=201)
async def create_note(
    request: CreateNoteRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
) -> Note:
    return await service.create_note(user, request)


@router.put("/{note_id}", response_model=Note)
async def update_note(
    note_id: str,
    request: UpdateNoteRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
) -> Note:
    return await service.update_note(user, note_id, request)


@router.delete("/{note_id}", response_model=DeletedResponse)
async def delete_note(
    note_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: NoteService = Depends(get_note_service),
) -> DeletedResponse:
    await service.delete_resource(user, note_id)
    return DeletedResponse(id=note_id, message="Note deleted")


@legacy_router.get("", response_model=list[Note])
async def list_notes_for_user_id(
    user_id: str = Query(..., alias="userId", min_length=1),
    service: NoteService = Depends(get_note_service),
) -> list[Note]:
    """List notes for the userId query parameter, without authentication."""
    return await service.list_for_user_id(user_id)
