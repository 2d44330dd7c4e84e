"""
Voice session: the listen / interpret / speak loop.

Speech recognition and synthesis are platform services, so they are
reached through Protocols. A session owns at most one recognition at a
time. Each activation gets a new generation number and callbacks from an
older generation are dropped, so a superseded recognition can never
deliver a transcript.
"""

import logging
from typing import Callable, Optional, Protocol, runtime_checkable

from .interpreter import VoiceCommandInterpreter
from .models import PageContext, VoiceActionType, VoiceResponse
from .pages import PageData, respond

logger = logging.getLogger(__name__)

DISABLED_SPEECH = "Voice control is disabled. Enable it in settings."
MIC_DENIED_SPEECH = "Microphone access denied. Please enable microphone permissions."
NOT_ALLOWED = "not-allowed"


@runtime_checkable
class ISpeechRecognizer(Protocol):
    """Single-shot speech-to-text."""

    def start(
        self,
        on_result: Callable[[str], None],
        on_error: Callable[[str], None],
        on_end: Callable[[], None],
    ) -> None:
        """Begin listening; exactly one of on_result/on_error then on_end fires."""
        ...

    def stop(self) -> None:
        """Stop listening."""
        ...


@runtime_checkable
class ISpeechSynthesizer(Protocol):
    """Text-to-speech."""

    def speak(self, text: str) -> None:
        ...

    def cancel(self) -> None:
        """Stop any utterance in progress."""
        ...


DataLoader = Callable[[PageContext], PageData]


class VoiceSession:
    """
    Client-side voice loop.

    ``activate`` starts a fresh single-shot recognition, stopping any
    previous one. When a transcript arrives the session stops listening
    before interpreting so the reply is not picked up by the microphone.
    """

    def __init__(
        self,
        recognizer: ISpeechRecognizer,
        synthesizer: ISpeechSynthesizer,
        interpreter: Optional[VoiceCommandInterpreter] = None,
        data_loader: Optional[DataLoader] = None,
        enabled: bool = True,
    ):
        self._recognizer = recognizer
        self._synthesizer = synthesizer
        self._interpreter = interpreter or VoiceCommandInterpreter()
        self._data_loader = data_loader
        self.enabled = enabled
        self.listening = False
        self.last_response: Optional[VoiceResponse] = None
        self._generation = 0
        self._page = PageContext.OTHER

    @property
    def generation(self) -> int:
        return self._generation

    def activate(self, page: PageContext) -> bool:
        """
        Start listening on a page.

        Returns:
            False if voice control is disabled
        """
        if not self.enabled:
            self.speak(DISABLED_SPEECH)
            return False

        if self.listening:
            self._recognizer.stop()

        self._generation += 1
        generation = self._generation
        self._page = page
        self.listening = True
        self._recognizer.start(
            on_result=lambda transcript: self._on_result(generation, transcript),
            on_error=lambda error: self._on_error(generation, error),
            on_end=lambda: self._on_end(generation),
        )
        return True

    def deactivate(self) -> None:
        """Stop listening and invalidate pending callbacks."""
        if self.listening:
            self._recognizer.stop()
        self._generation += 1
        self.listening = False

    def speak(self, text: Optional[str]) -> None:
        """Cancel any utterance in progress, then speak."""
        self._synthesizer.cancel()
        if text:
            self._synthesizer.speak(text)

    def stop_speaking(self) -> None:
        self._synthesizer.cancel()

    def _on_result(self, generation: int, transcript: str) -> None:
        if generation != self._generation:
            logger.debug("Dropping transcript from superseded recognition")
            return

        self._recognizer.stop()
        self.listening = False

        command = self._interpreter.interpret(transcript, self._page)
        data = self._data_loader(self._page) if self._data_loader else PageData()
        response = respond(command, self._page, data)
        self.last_response = response

        if response.speech:
            self.speak(response.speech)
        elif response.action is not None and response.action.type == VoiceActionType.STOP_SPEAKING:
            self.stop_speaking()

    def _on_error(self, generation: int, error: str) -> None:
        if generation != self._generation:
            return
        logger.warning("Speech recognition error: %s", error)
        self.listening = False
        if error == NOT_ALLOWED:
            self.speak(MIC_DENIED_SPEECH)

    def _on_end(self, generation: int) -> None:
        if generation == self._generation:
            self.listening = False
