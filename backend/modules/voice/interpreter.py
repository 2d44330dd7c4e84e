"""
Voice command interpreter.

Turns a raw transcript into a VoiceCommand. Pure function of
(transcript, page): no I/O and no state, so it runs the same on the server
and in tests.

Rules live in ordered tables. Global rules run first on every page; the
first rule whose predicate matches wins. If none match, the current page's
rules run. Anything left is UNRECOGNIZED.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .models import PageContext, VoiceCommand, VoiceIntent


@dataclass(frozen=True)
class CommandRule:
    """One row of a rule table."""

    name: str
    matches: Callable[[str], bool]
    build: Callable[[str], VoiceCommand]


def normalize(transcript: Optional[str]) -> str:
    """Case-fold and trim a transcript."""
    return (transcript or "").casefold().strip()


def _contains(*phrases: str) -> Callable[[str], bool]:
    return lambda text: any(phrase in text for phrase in phrases)


def _exactly(*phrases: str) -> Callable[[str], bool]:
    return lambda text: text in phrases


def _any(*predicates: Callable[[str], bool]) -> Callable[[str], bool]:
    return lambda text: any(predicate(text) for predicate in predicates)


def _intent(intent: VoiceIntent) -> Callable[[str], VoiceCommand]:
    return lambda text: VoiceCommand(intent=intent, transcript=text)


def _after(keyword: str, intent: VoiceIntent) -> Callable[[str], VoiceCommand]:
    """Build a command whose parameter is the text with ``keyword`` removed once."""

    def build(text: str) -> VoiceCommand:
        parameter = text.replace(keyword, "", 1).strip()
        return VoiceCommand(intent=intent, parameter=parameter or None, transcript=text)

    return build


def _with_text(intent: VoiceIntent) -> Callable[[str], VoiceCommand]:
    return lambda text: VoiceCommand(intent=intent, parameter=text, transcript=text)


def _longer_than(length: int) -> Callable[[str], bool]:
    return lambda text: len(text) > length


def _note_with_creation_word(text: str) -> bool:
    return "note" in text and any(word in text for word in ("create", "new", "add"))


GLOBAL_RULES: Sequence[CommandRule] = (
    CommandRule("stop", _contains("stop", "quiet"), _intent(VoiceIntent.STOP)),
    CommandRule("menu", _contains("menu", "help"), _intent(VoiceIntent.MENU)),
    CommandRule(
        "create_assignment",
        _contains("create assignment", "new assignment", "add assignment"),
        _intent(VoiceIntent.CREATE_ASSIGNMENT),
    ),
    CommandRule(
        "open_assignments",
        _any(
            _contains("open assignment", "view assignment", "go to assignment"),
            _exactly("assignments"),
        ),
        _intent(VoiceIntent.NAVIGATE_ASSIGNMENTS),
    ),
    CommandRule(
        "open_notes",
        _any(_contains("open note", "my note", "view note"), _exactly("notes")),
        _intent(VoiceIntent.NAVIGATE_NOTES),
    ),
    CommandRule(
        "create_note",
        _any(
            _contains("create note", "new note", "add note"),
            _exactly("note"),
            _note_with_creation_word,
        ),
        _intent(VoiceIntent.CREATE_NOTE),
    ),
    CommandRule(
        "open_dashboard",
        _any(_contains("dashboard", "open home"), _exactly("home", "go home")),
        _intent(VoiceIntent.NAVIGATE_DASHBOARD),
    ),
    CommandRule(
        "go_back",
        _exactly("go back", "back"),
        _intent(VoiceIntent.NAVIGATE_DASHBOARD),
    ),
    CommandRule(
        "read_page",
        _contains("read page", "read this"),
        _intent(VoiceIntent.READ_PAGE),
    ),
    CommandRule(
        "logout",
        _contains("logout", "log out", "sign out"),
        _intent(VoiceIntent.LOGOUT),
    ),
)


PAGE_RULES: dict[PageContext, Sequence[CommandRule]] = {
    PageContext.ASSIGNMENTS: (
        CommandRule("list_all", _contains("list all", "read all"), _intent(VoiceIntent.LIST_ALL)),
        CommandRule(
            "mark_complete",
            _contains("mark complete", "complete assignment"),
            _intent(VoiceIntent.MARK_COMPLETE),
        ),
        CommandRule(
            "mark_pending",
            _contains("mark pending", "undo complete"),
            _intent(VoiceIntent.MARK_PENDING),
        ),
        CommandRule(
            "complete_by_title",
            lambda text: text.startswith("complete ") or "complete " in text,
            _after("complete", VoiceIntent.COMPLETE_BY_TITLE),
        ),
        CommandRule(
            "create",
            _contains("create", "add"),
            _intent(VoiceIntent.CREATE_ASSIGNMENT),
        ),
        CommandRule(
            "describe_by_title",
            _longer_than(2),
            _with_text(VoiceIntent.DESCRIBE_BY_TITLE),
        ),
    ),
    PageContext.ASSIGNMENT_DETAIL: (
        CommandRule(
            "mark_pending",
            _contains("mark pending", "mark as pending", "not done", "incomplete"),
            _intent(VoiceIntent.MARK_PENDING),
        ),
        CommandRule(
            "mark_complete",
            _contains(
                "mark complete",
                "mark as complete",
                "completed",
                "finished",
                "mark as done",
                "done",
            ),
            _intent(VoiceIntent.MARK_COMPLETE),
        ),
    ),
    PageContext.NOTES: (
        CommandRule(
            "list_all",
            _contains("list all", "read all", "list notes"),
            _intent(VoiceIntent.LIST_ALL),
        ),
        CommandRule(
            "delete_by_title",
            lambda text: text.startswith("delete "),
            _after("delete", VoiceIntent.DELETE_BY_TITLE),
        ),
        CommandRule(
            "describe_by_title",
            _longer_than(2),
            _with_text(VoiceIntent.DESCRIBE_BY_TITLE),
        ),
    ),
    PageContext.DASHBOARD: (
        CommandRule(
            "status_summary",
            _contains("how many", "status"),
            _intent(VoiceIntent.STATUS_SUMMARY),
        ),
        CommandRule("create", _contains("create"), _intent(VoiceIntent.CREATE_ASSIGNMENT)),
    ),
}


class VoiceCommandInterpreter:
    """
    Applies the rule tables to transcripts.

    Tables can be swapped for tests or for a different vocabulary.
    """

    def __init__(
        self,
        global_rules: Sequence[CommandRule] = GLOBAL_RULES,
        page_rules: Optional[dict[PageContext, Sequence[CommandRule]]] = None,
    ):
        self._global_rules = tuple(global_rules)
        self._page_rules = PAGE_RULES if page_rules is None else page_rules

    def interpret(self, transcript: Optional[str], page: PageContext) -> VoiceCommand:
        """
        Parse one transcript in the context of a page.

        Args:
            transcript: Raw speech-to-text output
            page: The page the user is on

        Returns:
            The matched command, or UNRECOGNIZED
        """
        text = normalize(transcript)
        if not text:
            return VoiceCommand(intent=VoiceIntent.UNRECOGNIZED, transcript=text)

        rule = self.match(text, page)
        if rule is None:
            return VoiceCommand(intent=VoiceIntent.UNRECOGNIZED, transcript=text)
        return rule.build(text)

    def match(self, text: str, page: PageContext) -> Optional[CommandRule]:
        """First rule matching already-normalized text, or None."""
        for rule in (*self._global_rules, *self._page_rules.get(page, ())):
            if rule.matches(text):
                return rule
        return None


_default_interpreter = VoiceCommandInterpreter()


def interpret(transcript: Optional[str], page: PageContext = PageContext.OTHER) -> VoiceCommand:
    """Interpret with the default rule tables."""
    return _default_interpreter.interpret(transcript, page)
