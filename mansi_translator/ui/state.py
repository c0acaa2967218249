# mansi_translator/ui/state.py
"""
Session state for the Mansi Translator.
Single source of truth for the text panel; nothing here is persisted.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional

from mansi_translator.models.types import Direction, SessionPhase

# Module logger
logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    """
    State of one translation session.

    Mutated only on the event loop thread by TranslationSessionController.
    A debounce timer and in-flight requests may coexist (a new edit can arrive
    while an older request is still running).
    """
    input_text: str = ""
    translated_text: str = ""
    direction: Direction = Direction.SOURCE_TO_TARGET

    # Generation of the most recently issued request (0 = none issued yet)
    latest_generation: int = 0

    # Single debounce slot: re-arming cancels the previous handle
    debounce_handle: Optional[asyncio.TimerHandle] = field(default=None, repr=False)

    # Requests issued but not yet applied
    in_flight: set[asyncio.Task] = field(default_factory=set, repr=False)

    @property
    def phase(self) -> SessionPhase:
        """Current state machine phase (an armed timer takes precedence)"""
        if self.debounce_handle is not None and not self.debounce_handle.cancelled():
            return SessionPhase.AWAITING_DEBOUNCE
        if self.in_flight:
            return SessionPhase.IN_FLIGHT
        return SessionPhase.IDLE

    def has_input(self) -> bool:
        return bool(self.input_text.strip())

    def next_generation(self) -> int:
        self.latest_generation += 1
        return self.latest_generation

    def cancel_debounce(self) -> bool:
        """Cancel the armed timer, if any. Returns True if one was cancelled."""
        handle = self.debounce_handle
        self.debounce_handle = None
        if handle is None or handle.cancelled():
            return False
        handle.cancel()
        return True

    def swap_texts(self) -> None:
        """Exchange input and output (the previous output becomes the new input)"""
        self.input_text, self.translated_text = self.translated_text, self.input_text

