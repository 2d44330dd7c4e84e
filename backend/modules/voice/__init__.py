"""
Voice module.

Interprets spoken transcripts against a page context and builds spoken
replies plus client actions.

Public API:
- interpret / VoiceCommandInterpreter: transcript -> VoiceCommand
- find_by_title / find_title_matches: spoken-title matching
- get_menu_text: help text per page
- normalize_spoken_email / normalize_spoken_pin: dictated credentials
- VoiceService: authenticated command handling for the API
- VoiceSession: client-side listen/speak loop
"""

from .models import (
    PageContext,
    VoiceIntent,
    VoiceCommand,
    VoiceAction,
    VoiceActionType,
    VoiceResponse,
    VoiceCommandRequest,
)
from .interpreter import CommandRule, VoiceCommandInterpreter, interpret
from .matching import find_by_title, find_title_matches, title_matches
from .menu import get_menu_text
from .dictation import (
    DictationField,
    credential_error,
    dictate,
    normalize_spoken_email,
    normalize_spoken_pin,
)
from .pages import PageData, respond
from .service import VoiceService
from .session import VoiceSession, ISpeechRecognizer, ISpeechSynthesizer

__all__ = [
    "PageContext",
    "VoiceIntent",
    "VoiceCommand",
    "VoiceAction",
    "VoiceActionType",
    "VoiceResponse",
    "VoiceCommandRequest",
    "CommandRule",
    "VoiceCommandInterpreter",
    "interpret",
    "find_by_title",
    "find_title_matches",
    "title_matches",
    "get_menu_text",
    "DictationField",
    "credential_error",
    "dictate",
    "normalize_spoken_email",
    "normalize_spoken_pin",
    "PageData",
    "respond",
    "VoiceService",
    "VoiceSession",
    "ISpeechRecognizer",
    "ISpeechSynthesizer",
]
