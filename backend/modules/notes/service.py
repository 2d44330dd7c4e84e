"""
Notes service implementation.
"""

from shared.exceptions import ValidationError
from shared.models import AuthenticatedUser
from modules.ownership.service import OwnedResourceService

from .models import Note, CreateNoteRequest, UpdateNoteRequest


class NoteService(OwnedResourceService[Note]):
    """Owner-scoped CRUD for notes."""

    resource_type = "note"

    async def create_note(self, user: AuthenticatedUser, request: CreateNoteRequest) -> Note:
        """
        Create a note for the user.

        Raises:
            ValidationError: If title or content is missing
        """
        if not request.title or not request.content:
            raise ValidationError(
                "Please add all required fields (title, content)",
                code="MISSING_FIELDS",
            )
        return await self.create_resource(user, request.model_dump(mode="json"))

    async def update_note(
        self,
        user: AuthenticatedUser,
        note_id: str,
        request: UpdateNoteRequest,
    ) -> Note:
        changes = request.model_dump(mode="json", exclude_unset=True)
        return await self.update_resource(user, note_id, changes)
