"""
Assignments service implementation.
"""

from shared.exceptions import ValidationError
from shared.models import AuthenticatedUser
from modules.ownership.service import OwnedResourceService

from .models import Assignment, CreateAssignmentRequest, UpdateAssignmentRequest


class AssignmentService(OwnedResourceService[Assignment]):
    """Owner-scoped CRUD for assignments."""

    resource_type = "assignment"

    async def create_assignment(
        self,
        user: AuthenticatedUser,
        request: CreateAssignmentRequest,
    ) -> Assignment:
        """
        Create an assignment for the user.

        Raises:
            ValidationError: If title or subject is missing
        """
        if not request.title or not request.subject:
            raise ValidationError(
                "Please add all required fields (title, subject)",
                code="MISSING_FIELDS",
            )
        return await self.create_resource(user, request.model_dump(mode="json"))

    async def update_assignment(
        self,
        user: AuthenticatedUser,
        assignment_id: str,
        request: UpdateAssignmentRequest,
    ) -> Assignment:
        changes = request.model_dump(mode="json", exclude_unset=True)
        return await self.update_resource(user, assignment_id, changes)
