"""Process-wide conversation state: the current result language.

A single shared cell. The session controller is the only writer; every
search reads it. No locking: a read or write is one attribute access, so
a search running concurrently with a toggle simply sees either value.
"""

import logging

from .config import LANGUAGES

logger = logging.getLogger("leakbot.state")


class ConversationState:
    """Language toggle between the two supported LeakOSINT languages."""

    def __init__(self, language: str = LANGUAGES[0]):
        self.set(language)

    def get(self) -> str:
        return self._language

    def set(self, language: str) -> None:
        if language not in LANGUAGES:
            raise ValueError(f"Unsupported language {language!r} (expected one of {LANGUAGES})")
        self._language = language

    def toggle(self) -> str:
        """Flip to the other language and return the new value."""
        primary, secondary = LANGUAGES
        self._language = secondary if self._language == primary else primary
        logger.info(f"Language switched to {self._language}")
        return self._language
