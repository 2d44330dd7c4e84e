"""
Voice module data models.

A VoiceCommand is the parsed form of one utterance. It is built per
transcript, consumed immediately, and never stored.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import CamelModel


class PageContext(str, Enum):
    """The page the user was on when they spoke."""

    DASHBOARD = "dashboard"
    ASSIGNMENTS = "assignments"
    ASSIGNMENT_DETAIL = "assignment_detail"
    NOTES = "notes"
    AUTH = "auth"
    OTHER = "other"

    @classmethod
    def from_path(cls, path: Optional[str]) -> "PageContext":
        """
        Resolve a frontend pathname (``/assignments``) or a context value
        (``assignments``) to a PageContext.
        """
        value = (path or "").strip().lower()
        try:
            return cls(value)
        except ValueError:
            pass

        value = value.split("?", 1)[0].rstrip("/")
        if value in PATH_TO_PAGE:
            return PATH_TO_PAGE[value]
        if value.startswith("/assignment/"):
            return cls.ASSIGNMENT_DETAIL
        return cls.OTHER


PAGE_PATHS = {
    PageContext.DASHBOARD: "/dashboard",
    PageContext.ASSIGNMENTS: "/assignments",
    PageContext.ASSIGNMENT_DETAIL: "/assignment",
    PageContext.NOTES: "/notes",
    PageContext.AUTH: "/auth",
}

PATH_TO_PAGE = {path: page for page, path in PAGE_PATHS.items()}


class VoiceIntent(str, Enum):
    """Fixed vocabulary of things a user can ask for."""

    # Global
    STOP = "stop"
    MENU = "menu"
    CREATE_ASSIGNMENT = "create_assignment"
    CREATE_NOTE = "create_note"
    NAVIGATE_DASHBOARD = "navigate_dashboard"
    NAVIGATE_ASSIGNMENTS = "navigate_assignments"
    NAVIGATE_NOTES = "navigate_notes"
    READ_PAGE = "read_page"
    LOGOUT = "logout"

    # Page-specific
    LIST_ALL = "list_all"
    STATUS_SUMMARY = "status_summary"
    MARK_COMPLETE = "mark_complete"
    MARK_PENDING = "mark_pending"
    COMPLETE_BY_TITLE = "complete_by_title"
    DELETE_BY_TITLE = "delete_by_title"
    DESCRIBE_BY_TITLE = "describe_by_title"

    UNRECOGNIZED = "unrecognized"


class VoiceCommand(BaseModel):
    """A parsed utterance: an intent plus an optional free-text parameter."""

    intent: VoiceIntent
    parameter: Optional[str] = Field(None, description="e.g. a spoken title fragment")
    transcript: str = Field("", description="Normalized transcript")

    model_config = {"frozen": True}


class VoiceActionType(str, Enum):
    """What the client should do after speaking the response."""

    NAVIGATE = "navigate"
    OPEN_FORM = "open_form"
    UPDATE_STATUS = "update_status"
    DELETE = "delete"
    STOP_SPEAKING = "stop_speaking"
    LOGOUT = "logout"


class VoiceAction(CamelModel):
    """
    A UI action or a mutation intent for the client to carry out.

    Mutations (update_status, delete) are only described here; the client
    executes them through the regular authenticated endpoints.
    """

    type: VoiceActionType
    target: Optional[str] = Field(None, description="Page path or resource type")
    resource_id: Optional[str] = None
    status: Optional[str] = None


class VoiceResponse(BaseModel):
    """Spoken reply plus an optional action for one command."""

    command: VoiceCommand
    speech: Optional[str] = None
    action: Optional[VoiceAction] = None
    matches: list[str] = Field(
        default_factory=list,
        description="All titles that matched when a title lookup was ambiguous",
    )


class VoiceCommandRequest(CamelModel):
    """Body of POST /api/voice/command."""

    transcript: str = Field(..., description="Raw speech-to-text transcript")
    page: str = Field(default="dashboard", description="Current page path or context")
    assignment_id: Optional[str] = Field(None, description="Open assignment on the detail page")
