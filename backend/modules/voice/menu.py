"""
Context-sensitive help text read out for the "menu" command.
"""

from .models import PageContext


GLOBAL_COMMANDS = (
    'Say "create assignment" to add a new assignment.',
    'Say "open assignments" to view your assignments.',
    'Say "open notes" or "my notes" to view your notes.',
    'Say "create note" to add a new note.',
    'Say "open dashboard" to go to the dashboard.',
    'Say "read page" to hear the current page content.',
    'Say "go back" to navigate back.',
    'Say "logout" or "sign out" to logout.',
)

PAGE_COMMANDS = {
    PageContext.ASSIGNMENTS: (
        'Say "mark complete" to complete first pending assignment. Say "mark pending" to undo.',
        'Say "complete" followed by a title to complete that assignment.',
    ),
    PageContext.ASSIGNMENT_DETAIL: (
        'Say "mark complete" to complete this assignment. Say "mark pending" to undo.',
    ),
    PageContext.NOTES: (
        "Say a note title to hear its content.",
        'Say "delete" followed by the title to delete a note.',
    ),
    PageContext.DASHBOARD: (
        'Say "how many" to hear your assignment counts.',
    ),
}


def get_menu_text(page: PageContext) -> str:
    """Build the spoken list of commands available on a page."""
    lines = ["Available commands:", *GLOBAL_COMMANDS]
    lines.extend(PAGE_COMMANDS.get(page, ()))
    lines.append('Say "stop speaking" to stop audio.')
    return " ".join(lines)
