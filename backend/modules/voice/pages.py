"""
Page responders.

Turn an interpreted command plus the user's data into a spoken reply and an
optional client action. Nothing here touches storage: status changes and
deletes come back as actions for the client to perform through the regular
endpoints.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Optional

from modules.assignments.models import Assignment, AssignmentStatus
from modules.notes.models import Note

from .matching import find_title_matches
from .menu import get_menu_text
from .models import (
    PAGE_PATHS,
    PageContext,
    VoiceAction,
    VoiceActionType,
    VoiceCommand,
    VoiceIntent,
    VoiceResponse,
)

UNRECOGNIZED_SPEECH = "Command not recognized. Say 'menu' to hear available options."


@dataclass
class PageData:
    """What a responder may read. Lists are in API order, newest first."""

    assignments: list[Assignment] = field(default_factory=list)
    notes: list[Note] = field(default_factory=list)
    assignment: Optional[Assignment] = None

    @property
    def pending(self) -> list[Assignment]:
        return [a for a in self.assignments if a.status == AssignmentStatus.PENDING]

    @property
    def completed(self) -> list[Assignment]:
        return [a for a in self.assignments if a.status == AssignmentStatus.COMPLETED]


Responder = Callable[[VoiceCommand, PageContext, PageData], VoiceResponse]


def format_due(due_date: Optional[date]) -> str:
    """'due March 5' or 'no due date'."""
    if due_date is None:
        return "no due date"
    return f"due {due_date.strftime('%B')} {due_date.day}"


def format_full_date(due_date: date) -> str:
    return f"{due_date.strftime('%B')} {due_date.day}, {due_date.year}"


def _navigate(command: VoiceCommand, page: PageContext, speech: str) -> VoiceResponse:
    return VoiceResponse(
        command=command,
        speech=speech,
        action=VoiceAction(type=VoiceActionType.NAVIGATE, target=PAGE_PATHS[page]),
    )


def _set_status(
    command: VoiceCommand,
    assignment: Assignment,
    status: AssignmentStatus,
    speech: str,
    matches: Optional[list[str]] = None,
) -> VoiceResponse:
    return VoiceResponse(
        command=command,
        speech=speech,
        action=VoiceAction(
            type=VoiceActionType.UPDATE_STATUS,
            target="assignment",
            resource_id=assignment.id,
            status=status.value,
        ),
        matches=matches or [],
    )


def _ambiguity_prefix(matches: list, chosen) -> str:
    if len(matches) < 2:
        return ""
    return f"{len(matches)} matches found. Using {chosen.title}. "


def _titles(matches: list) -> list[str]:
    return [item.title for item in matches] if len(matches) > 1 else []


# Global commands

def _stop(command, page, data):
    return VoiceResponse(
        command=command,
        action=VoiceAction(type=VoiceActionType.STOP_SPEAKING),
    )


def _menu(command, page, data):
    return VoiceResponse(command=command, speech=get_menu_text(page))


def _create_assignment(command, page, data):
    if page == PageContext.ASSIGNMENTS:
        speech = "Opening create assignment form. Please fill in the title and subject."
    elif page == PageContext.DASHBOARD:
        speech = (
            "Opening create assignment form. Fill in the title and subject, "
            "then say submit or click create."
        )
    else:
        speech = "Opening create assignment form."
    return VoiceResponse(
        command=command,
        speech=speech,
        action=VoiceAction(type=VoiceActionType.OPEN_FORM, target="assignment"),
    )


def _create_note(command, page, data):
    if page == PageContext.NOTES:
        speech = "Opening create note form. Enter a title and content."
    else:
        speech = "Opening create note form."
    return VoiceResponse(
        command=command,
        speech=speech,
        action=VoiceAction(type=VoiceActionType.OPEN_FORM, target="note"),
    )


def _navigate_assignments(command, page, data):
    return _navigate(command, PageContext.ASSIGNMENTS, "Opening assignments")


def _navigate_notes(command, page, data):
    return _navigate(command, PageContext.NOTES, "Opening notes")


def _navigate_dashboard(command, page, data):
    if command.transcript in ("go back", "back"):
        return _navigate(command, PageContext.DASHBOARD, "Going to dashboard")
    return _navigate(command, PageContext.DASHBOARD, "Opening dashboard")


def _logout(command, page, data):
    return VoiceResponse(
        command=command,
        speech="Logging out.",
        action=VoiceAction(type=VoiceActionType.LOGOUT, target=PAGE_PATHS[PageContext.AUTH]),
    )


def _unrecognized(command, page, data):
    return VoiceResponse(command=command, speech=UNRECOGNIZED_SPEECH)


# Reading pages

def _summarize_assignments(command, page, data):
    if not data.assignments:
        return VoiceResponse(command=command, speech="You have no assignments.")

    pending = data.pending
    parts = [f"You have {len(pending)} pending and {len(data.completed)} completed assignments. "]
    for index, assignment in enumerate(pending, start=1):
        parts.append(f"{index}. {assignment.title}, {format_due(assignment.due_date)}. ")
    parts.append('Say an assignment title to hear more details. Say "mark complete" to complete first pending.')
    return VoiceResponse(command=command, speech="".join(parts))


def _summarize_notes(command, page, data):
    if not data.notes:
        return VoiceResponse(command=command, speech="You have no notes.")

    parts = [f"You have {len(data.notes)} notes. "]
    for index, note in enumerate(data.notes, start=1):
        parts.append(f"{index}. {note.title}. ")
    parts.append("Say a note title to hear its content.")
    return VoiceResponse(command=command, speech="".join(parts))


def _read_dashboard(command, page, data):
    speech = (
        f"Student Dashboard. You have {len(data.pending)} pending assignments and "
        f"{len(data.completed)} completed assignments. "
        'Say "open assignments" to view them or say "create assignment" to add new.'
    )
    return VoiceResponse(command=command, speech=speech)


def _status_summary(command, page, data):
    speech = f"You have {len(data.pending)} pending assignments and {len(data.completed)} completed."
    return VoiceResponse(command=command, speech=speech)


def _read_assignment_detail(command, page, data):
    assignment = data.assignment
    if assignment is None:
        return VoiceResponse(command=command, speech="Assignment not found.")

    due = f"Due {format_full_date(assignment.due_date)}" if assignment.due_date else "No due date"
    description = assignment.description or "No description."
    speech = f"{assignment.title}. {assignment.subject}. {due}. {description}"
    return VoiceResponse(command=command, speech=speech)


def _read_page(command, page, data):
    readers = {
        PageContext.ASSIGNMENTS: _summarize_assignments,
        PageContext.NOTES: _summarize_notes,
        PageContext.DASHBOARD: _read_dashboard,
        PageContext.ASSIGNMENT_DETAIL: _read_assignment_detail,
    }
    reader = readers.get(page)
    if reader is None:
        return VoiceResponse(command=command, speech=UNRECOGNIZED_SPEECH)
    return reader(command, page, data)


def _list_all(command, page, data):
    if page == PageContext.NOTES:
        return _summarize_notes(command, page, data)
    return _summarize_assignments(command, page, data)


# Assignment status

def _mark_complete(command, page, data):
    if page == PageContext.ASSIGNMENT_DETAIL:
        assignment = data.assignment
        if assignment is None:
            return VoiceResponse(command=command, speech="Assignment not found.")
        return _set_status(
            command, assignment, AssignmentStatus.COMPLETED,
            f"Marking {assignment.title} as complete.",
        )

    pending = data.pending
    if not pending:
        return VoiceResponse(command=command, speech="No pending assignments to mark as complete.")
    first = pending[0]
    return _set_status(
        command, first, AssignmentStatus.COMPLETED, f"Marking {first.title} as complete."
    )


def _mark_pending(command, page, data):
    if page == PageContext.ASSIGNMENT_DETAIL:
        assignment = data.assignment
        if assignment is None:
            return VoiceResponse(command=command, speech="Assignment not found.")
        return _set_status(
            command, assignment, AssignmentStatus.PENDING,
            f"Marking {assignment.title} as pending.",
        )

    completed = data.completed
    if not completed:
        return VoiceResponse(command=command, speech="No completed assignments to mark as pending.")
    first = completed[0]
    return _set_status(
        command, first, AssignmentStatus.PENDING, f"Marking {first.title} as pending."
    )


def _complete_by_title(command, page, data):
    matches = find_title_matches(data.assignments, command.parameter)
    if not matches:
        return VoiceResponse(
            command=command,
            speech='Assignment not found. Say "list all" to hear your assignments.',
        )

    target = matches[0]
    prefix = _ambiguity_prefix(matches, target)
    if target.status == AssignmentStatus.COMPLETED:
        return VoiceResponse(
            command=command,
            speech=f"{prefix}{target.title} is already completed.",
            matches=_titles(matches),
        )
    return _set_status(
        command, target, AssignmentStatus.COMPLETED,
        f"{prefix}Marking {target.title} as complete.",
        matches=_titles(matches),
    )


# Title lookups

def _describe_assignment(command, page, data):
    matches = find_title_matches(data.assignments, command.parameter)
    if not matches:
        return VoiceResponse(
            command=command,
            speech=f'Assignment "{command.parameter}" not found. Say "list all" to hear your assignments.',
        )

    found = matches[0]
    details = (
        f"{_ambiguity_prefix(matches, found)}{found.title}. {found.subject}. "
        f"{format_due(found.due_date)}. Status: {found.status.value}."
    )
    if found.status == AssignmentStatus.PENDING:
        speech = f'{details} Say "complete {found.title}" to mark it complete.'
    else:
        speech = f"{details} This assignment is already completed."
    return VoiceResponse(command=command, speech=speech, matches=_titles(matches))


def _describe_note(command, page, data):
    matches = find_title_matches(data.notes, command.parameter)
    if not matches:
        return VoiceResponse(
            command=command,
            speech=f'Note "{command.parameter}" not found. Say "list notes" to hear your notes.',
        )

    found = matches[0]
    speech = (
        f"{_ambiguity_prefix(matches, found)}{found.title}. {found.content}. "
        f'Say "delete {found.title}" to delete this note.'
    )
    return VoiceResponse(command=command, speech=speech, matches=_titles(matches))


def _describe_by_title(command, page, data):
    if page == PageContext.NOTES:
        return _describe_note(command, page, data)
    return _describe_assignment(command, page, data)


def _delete_by_title(command, page, data):
    matches = find_title_matches(data.notes, command.parameter)
    if not matches:
        return VoiceResponse(
            command=command,
            speech='Note not found. Say "list notes" to hear your notes.',
        )

    target = matches[0]
    return VoiceResponse(
        command=command,
        speech=f"{_ambiguity_prefix(matches, target)}Deleting note: {target.title}",
        action=VoiceAction(type=VoiceActionType.DELETE, target="note", resource_id=target.id),
        matches=_titles(matches),
    )


RESPONDERS: dict[VoiceIntent, Responder] = {
    VoiceIntent.STOP: _stop,
    VoiceIntent.MENU: _menu,
    VoiceIntent.CREATE_ASSIGNMENT: _create_assignment,
    VoiceIntent.CREATE_NOTE: _create_note,
    VoiceIntent.NAVIGATE_ASSIGNMENTS: _navigate_assignments,
    VoiceIntent.NAVIGATE_NOTES: _navigate_notes,
    VoiceIntent.NAVIGATE_DASHBOARD: _navigate_dashboard,
    VoiceIntent.READ_PAGE: _read_page,
    VoiceIntent.LOGOUT: _logout,
    VoiceIntent.LIST_ALL: _list_all,
    VoiceIntent.STATUS_SUMMARY: _status_summary,
    VoiceIntent.MARK_COMPLETE: _mark_complete,
    VoiceIntent.MARK_PENDING: _mark_pending,
    VoiceIntent.COMPLETE_BY_TITLE: _complete_by_title,
    VoiceIntent.DESCRIBE_BY_TITLE: _describe_by_title,
    VoiceIntent.DELETE_BY_TITLE: _delete_by_title,
    VoiceIntent.UNRECOGNIZED: _unrecognized,
}


# Which data each page needs before responding
ASSIGNMENT_INTENTS = frozenset({
    VoiceIntent.READ_PAGE,
    VoiceIntent.LIST_ALL,
    VoiceIntent.STATUS_SUMMARY,
    VoiceIntent.MARK_COMPLETE,
    VoiceIntent.MARK_PENDING,
    VoiceIntent.COMPLETE_BY_TITLE,
    VoiceIntent.DESCRIBE_BY_TITLE,
})
NOTE_INTENTS = frozenset({
    VoiceIntent.READ_PAGE,
    VoiceIntent.LIST_ALL,
    VoiceIntent.DESCRIBE_BY_TITLE,
    VoiceIntent.DELETE_BY_TITLE,
})


def needs_assignments(command: VoiceCommand, page: PageContext) -> bool:
    return page in (PageContext.ASSIGNMENTS, PageContext.DASHBOARD) and command.intent in ASSIGNMENT_INTENTS


def needs_notes(command: VoiceCommand, page: PageContext) -> bool:
    return page == PageContext.NOTES and command.intent in NOTE_INTENTS


def needs_current_assignment(command: VoiceCommand, page: PageContext) -> bool:
    return page == PageContext.ASSIGNMENT_DETAIL and command.intent in (
        VoiceIntent.READ_PAGE,
        VoiceIntent.MARK_COMPLETE,
        VoiceIntent.MARK_PENDING,
    )


def respond(command: VoiceCommand, page: PageContext, data: Optional[PageData] = None) -> VoiceResponse:
    """Build the reply for a command on a page."""
    responder = RESPONDERS.get(command.intent, _unrecognized)
    return responder(command, page, data or PageData())
