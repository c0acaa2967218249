# mansi_translator/ui/controller.py
"""
Translation session controller.

Turns text-edit events into debounced translation requests and applies the
settled responses back to SessionState. Runs entirely on the asyncio event
loop; the debounce delay is a loop.call_later handle and every request is a
separate task.

Stale responses:
- StaleResponsePolicy.LATEST (default): each debounce window that fires gets
  a new generation, and a response is applied only if its generation is
  still the latest one. Late answers to superseded text are dropped.
- StaleResponsePolicy.LAST_ARRIVAL: every response is applied in arrival
  order, so a slow earlier request can overwrite a newer translation.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Protocol

from mansi_translator.config.settings import AppSettings
from mansi_translator.models.types import (
    COPY_NOTIFICATION_BODY,
    COPY_NOTIFICATION_TITLE,
    StaleResponsePolicy,
    TranslationRequest,
    TranslationResult,
)
from mansi_translator.services.exceptions import (
    MalformedResponseError,
    TranslationTransportError,
)
from mansi_translator.ui.state import SessionState

logger = logging.getLogger(__name__)


class Translator(Protocol):
    async def translate(self, request: TranslationRequest) -> str: ...


class TranslationSessionController:
    """Owns one SessionState and coordinates debounce, requests and results."""

    def __init__(
        self,
        client: Translator,
        settings: Optional[AppSettings] = None,
        state: Optional[SessionState] = None,
        set_clipboard_text: Optional[Callable[[str], None]] = None,
        show_notification: Optional[Callable[[str, str], None]] = None,
        on_state_changed: Optional[Callable[[SessionState], None]] = None,
    ) -> None:
        self._client = client
        self._settings = settings or AppSettings()
        self.state = state or SessionState()
        self._set_clipboard_text = set_clipboard_text
        self._show_notification = show_notification
        self.on_state_changed = on_state_changed

    @property
    def policy(self) -> StaleResponsePolicy:
        return self._settings.response_policy

    @property
    def debounce_seconds(self) -> float:
        return self._settings.debounce_seconds

    # --- Events ---

    def on_text_changed(self, new_text: str) -> None:
        """Replace the input and (re)arm the debounce timer. No network effect."""
        state = self.state
        state.input_text = new_text or ""
        state.cancel_debounce()
        loop = asyncio.get_running_loop()
        state.debounce_handle = loop.call_later(self.debounce_seconds, self._debounce_elapsed)
        self._notify()

    def on_key_pressed(self, key: str) -> None:
        """On-screen keyboard: append a character verbatim."""
        self.on_text_changed(self.state.input_text + key)

    def on_debounce_fire(self) -> Optional[asyncio.Task]:
        """Issue a request for the current input, or clear the output if it is blank.

        Returns the request task, or None when no call was made.
        """
        state = self.state
        generation = state.next_generation()

        if not state.has_input():
            state.translated_text = ""
            logger.debug("Debounce fired on blank input (generation %d), output cleared", generation)
            self._notify()
            return None

        source, target = state.direction.language_pair(
            self._settings.russian_language_id,
            self._settings.mansi_language_id,
        )
        request = TranslationRequest(text=state.input_text, source_language=source, target_language=target)
        logger.debug("Issuing translation request (generation %d, %s -> %s)", generation, source, target)

        task = asyncio.get_running_loop().create_task(
            self._run_request(request, generation),
            name=f"translate-{generation}",
        )
        state.in_flight.add(task)
        task.add_done_callback(state.in_flight.discard)
        self._notify()
        return task

    def on_toggle_direction(self) -> None:
        """Flip the direction, swap input and output, and re-arm the timer."""
        state = self.state
        state.direction = state.direction.flipped()
        state.swap_texts()
        logger.debug("Direction toggled to %s", state.direction.value)
        self.on_text_changed(state.input_text)

    def on_translation_result(self, result: TranslationResult) -> bool:
        """Apply a settled request. Returns False if it was discarded as stale."""
        state = self.state
        if self.policy == StaleResponsePolicy.LATEST and result.generation != state.latest_generation:
            logger.debug(
                "Discarding stale response (generation %d, latest %d)",
                result.generation, state.latest_generation,
            )
            return False

        state.translated_text = result.display_text
        self._notify()
        return True

    def on_copy_requested(self) -> None:
        """Copy the output to the clipboard and confirm, even when it is empty."""
        text = self.state.translated_text
        if self._set_clipboard_text is not None:
            self._set_clipboard_text(text)
        if self._show_notification is not None:
            self._show_notification(COPY_NOTIFICATION_TITLE, COPY_NOTIFICATION_BODY)

    # --- Lifecycle ---

    async def wait_idle(self) -> None:
        """Wait until every issued request has been applied."""
        while self.state.in_flight:
            await asyncio.gather(*list(self.state.in_flight), return_exceptions=True)

    async def close(self) -> None:
        """Session end: drop the timer, cancel outstanding requests."""
        state = self.state
        state.cancel_debounce()
        tasks = list(state.in_flight)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        logger.debug("Session closed (%d request(s) cancelled)", len(tasks))

    # --- Internals ---

    def _debounce_elapsed(self) -> None:
        self.state.debounce_handle = None
        self.on_debounce_fire()

    async def _run_request(self, request: TranslationRequest, generation: int) -> None:
        try:
            result = await self._execute(request, generation)
        finally:
            self.state.in_flight.discard(asyncio.current_task())
        self.on_translation_result(result)

    async def _execute(self, request: TranslationRequest, generation: int) -> TranslationResult:
        try:
            text = await self._client.translate(request)
        except MalformedResponseError as e:
            logger.warning("Translation response malformed (generation %d): %s", generation, e)
            return TranslationResult.malformed(generation, str(e))
        except TranslationTransportError as e:
            logger.warning("Translation request failed (generation %d): %s", generation, e)
            return TranslationResult.transport_failure(generation, str(e))
        except Exception as e:
            logger.exception("Unexpected error during translation (generation %d): %s", generation, e)
            return TranslationResult.transport_failure(generation, str(e))
        return TranslationResult.success(generation, text)

    def _notify(self) -> None:
        callback = self.on_state_changed
        if callback is None:
            return
        try:
            callback(self.state)
        except Exception as e:
            logger.exception("State change listener failed: %s", e)
