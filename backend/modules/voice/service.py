"""
Voice service implementation.
"""

import logging
from typing import Optional

from shared.models import AuthenticatedUser
from modules.assignments.models import Assignment
from modules.assignments.service import AssignmentService
from modules.notes.service import NoteService
from modules.ownership.exceptions import ResourceNotFoundError

from .interpreter import VoiceCommandInterpreter
from .models import PageContext, VoiceCommandRequest, VoiceResponse
from .pages import (
    PageData,
    needs_assignments,
    needs_current_assignment,
    needs_notes,
    respond,
)

logger = logging.getLogger(__name__)


class VoiceService:
    """
    Answers spoken commands for an authenticated user.

    Interprets the transcript, loads only the data the matched command
    needs, and builds the reply. Never writes: mutations are returned as
    actions.
    """

    def __init__(
        self,
        assignments: AssignmentService,
        notes: NoteService,
        interpreter: Optional[VoiceCommandInterpreter] = None,
    ):
        self._assignments = assignments
        self._notes = notes
        self._interpreter = interpreter or VoiceCommandInterpreter()

    async def handle(self, user: AuthenticatedUser, request: VoiceCommandRequest) -> VoiceResponse:
        """
        Handle one transcript.

        Args:
            user: The acting user
            request: Transcript, page and optional open assignment

        Returns:
            Spoken reply and optional client action
        """
        page = PageContext.from_path(request.page)
        command = self._interpreter.interpret(request.transcript, page)
        logger.debug("Voice command %s on %s: %r", command.intent.value, page.value, command.transcript)

        data = PageData()
        if needs_assignments(command, page):
            data.assignments = await self._assignments.list_resources(user)
        if needs_notes(command, page):
            data.notes = await self._notes.list_resources(user)
        if needs_current_assignment(command, page):
            data.assignment = await self._current_assignment(user, request.assignment_id)

        return respond(command, page, data)

    async def _current_assignment(
        self,
        user: AuthenticatedUser,
        assignment_id: Optional[str],
    ) -> Optional[Assignment]:
        if not assignment_id:
            return None
        try:
            return await self._assignments.get_resource(user, assignment_id)
        except ResourceNotFoundError:
            logger.info("Voice command referenced missing assignment %s", assignment_id)
            return None
