"""
Dictated credentials for the sign-in page.

Speech-to-text renders "jane at gmail dot com" and "one two three four"
as words. These helpers turn such transcripts into the email and PIN the
auth endpoints expect, and check them before submission with the same
spoken messages the sign-in form uses.
"""

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PIN_PATTERN = re.compile(r"^\d{4}$")

# Applied in order; "at the rate" must go before "at rate" and " at "
EMAIL_REPLACEMENTS = (
    ("at the rate", "@"),
    ("at rate", "@"),
    (" at ", "@"),
    (" dot ", "."),
)

INVALID_EMAIL_SPEECH = "Invalid email. Please say or type a valid email address."
INVALID_PIN_SPEECH = "Invalid PIN. Please enter a 4-digit number."
PIN_SET_SPEECH = "Pin set, value hidden."


class DictationField(str, Enum):
    EMAIL = "email"
    PIN = "pin"


class DictationRequest(BaseModel):
    """Body of POST /api/voice/dictation."""

    field: DictationField
    transcript: str = Field(..., description="Raw speech-to-text transcript")


class DictationResponse(BaseModel):
    """Normalized value, whether it is acceptable, and what to say back."""

    field: DictationField
    value: str
    valid: bool
    speech: str


def normalize_spoken_email(transcript: Optional[str]) -> str:
    """'Jane Doe at gmail dot com' -> 'janedoe@gmail.com'."""
    text = (transcript or "").lower()
    for spoken, symbol in EMAIL_REPLACEMENTS:
        text = text.replace(spoken, symbol)
    return re.sub(r"\s+", "", text)


def normalize_spoken_pin(transcript: Optional[str]) -> str:
    """Keep digits only: '1 2 3 4' -> '1234'."""
    return re.sub(r"\D", "", transcript or "")


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


def is_valid_pin(pin: str) -> bool:
    return bool(PIN_PATTERN.match(pin))


def credential_error(email: str, pin: str) -> Optional[str]:
    """
    Spoken reason the credentials can't be submitted, or None if they can.

    The email is checked first, so only one problem is announced at a time.
    """
    if not is_valid_email(email):
        return INVALID_EMAIL_SPEECH
    if not is_valid_pin(pin):
        return INVALID_PIN_SPEECH
    return None


def dictate(field: DictationField, transcript: Optional[str]) -> DictationResponse:
    """Normalize one dictated field. The PIN is never read back."""
    if field == DictationField.EMAIL:
        email = normalize_spoken_email(transcript)
        valid = is_valid_email(email)
        speech = f"Email set to {email}" if valid else INVALID_EMAIL_SPEECH
        return DictationResponse(field=field, value=email, valid=valid, speech=speech)

    pin = normalize_spoken_pin(transcript)
    valid = is_valid_pin(pin)
    return DictationResponse(
        field=field,
        value=pin,
        valid=valid,
        speech=PIN_SET_SPEECH if valid else INVALID_PIN_SPEECH,
    )
