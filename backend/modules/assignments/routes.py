"""
Assignment API endpoints.

All endpoints require a bearer token and only ever touch the caller's
own assignments. ``legacy_router`` serves the old unauthenticated listing
and is mounted only when SAARTHI_ENABLE_LEGACY_ROUTES is set.
"""

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_user
from api.dependencies import get_assignment_service
from shared.models import AuthenticatedUser
from modules.ownership.models import DeletedResponse

from .models import Assignment, CreateAssignmentRequest, UpdateAssignmentRequest
from .service import AssignmentService

router = APIRouter()
legacy_router = APIRouter()


@router.get("", response_model=list[Assignment])
async def list_assignments(
    user: AuthenticatedUser = Depends(get_current_user),
    service: AssignmentService = Depends(get_assignment_service),
) -> list[Assignment]:
    """List the current user's assignments, most recent first."""
    return await service.list_resources(user)


@router.post("", response_model=Assignment, status_code=201)
async def create_assignment(
    request: CreateAssignmentRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: AssignmentService = Depends(get_assignment_service),
) -> Assignment:
    """Create an assignment. title and subject are required."""
    return await service.create_assignment(user, request)


@router.put("/{assignment_id}", response_model=Assignment)
async def update_assignment(
    assignment_id: str,
    request: UpdateAssignmentRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: AssignmentService = Depends(get_assignment_service),
) -> Assignment:
    """
    Update an assignment.

    404 if it doesn't exist, 403 if it belongs to another user.
    """
    return await service.update_assignment(user, assignment_id, request)


@router.delete("/{assignment_id}", response_model=DeletedResponse)
async def delete_assignment(
    assignment_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: AssignmentService = Depends(get_assignment_service),
) -> DeletedResponse:
    """
    Delete an assignment.

    404 if it doesn't exist, 403 if it belongs to another user.
    """
    await service.delete_resource(user, assignment_id)
    return DeletedResponse(id=assignment_id, message="Assignment deleted")


@legacy_router.get("", response_model=list[Assignment])
async def list_assignments_for_user_id(
    user_id: str = Query(..., alias="userId", min_length=1),
    service: AssignmentService = Depends(get_assignment_service),
) -> list[Assignment]:
    """List assignments for the userId query parameter, without authentication."""
    return await service.list_for_user_id(user_id)
