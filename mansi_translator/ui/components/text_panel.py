# mansi_translator/ui/components/text_panel.py
"""
Translation panel: input area, direction toggle, output area with copy
button, and the Mansi on-screen keyboard.
All behavior is delegated to TranslationSessionController.
"""

import logging
from typing import Callable

from nicegui import ui

from mansi_translator.config.settings import AppSettings
from mansi_translator.models.types import MANSI_KEYS, Direction
from mansi_translator.ui.controller import TranslationSessionController
from mansi_translator.ui.state import SessionState

logger = logging.getLogger(__name__)

INPUT_PLACEHOLDER = 'Введите текст'
OUTPUT_PLACEHOLDER = 'Здесь будет перевод...'


def output_display_text(text: str) -> str:
    """Text shown in the output area (placeholder while empty)"""
    return text or OUTPUT_PLACEHOLDER


def keyboard_visible(direction: Direction, settings: AppSettings) -> bool:
    """The Mansi picker is shown only while Mansi is the source language"""
    return settings.show_mansi_keyboard and direction.mansi_is_source


def _create_mansi_keyboard(on_key: Callable[[str], None]) -> ui.element:
    with ui.row().classes('mansi-keyboard w-full flex-wrap justify-center gap-1') as keyboard:
        for key in MANSI_KEYS:
            ui.button(key, on_click=lambda _, k=key: on_key(k)) \
                .props('flat dense no-caps') \
                .classes('mansi-key')
    return keyboard


def create_text_panel(controller: TranslationSessionController, settings: AppSettings) -> None:
    """Build the panel for one browser client."""
    state = controller.state

    with ui.column().classes('translation-box w-full'):
        # Source section
        ui.label().classes('section-title').bind_text_from(
            state, 'direction', backward=lambda d: d.source_label
        )

        def handle_change(e) -> None:
            value = e.value or ''
            # Programmatic updates (swap on toggle) echo back here
            if value == state.input_text:
                return
            controller.on_text_changed(value)

        textarea = ui.textarea(
            placeholder=INPUT_PLACEHOLDER,
            value=state.input_text,
            on_change=handle_change,
        ).classes('w-full input-area').props('outlined autogrow aria-label="Исходный текст"')

        # Direction toggle
        ui.button('⇅', on_click=controller.on_toggle_direction) \
            .props('round flat aria-label="Сменить направление"') \
            .classes('switch-button self-center')

        # Target section
        ui.label().classes('section-title').bind_text_from(
            state, 'direction', backward=lambda d: d.target_label
        )
        with ui.row().classes('output-container w-full no-wrap items-start'):
            ui.button('📋', on_click=controller.on_copy_requested) \
                .props('flat dense aria-label="Копировать перевод"') \
                .classes('copy-button')
            output = ui.label(output_display_text(state.translated_text)).classes('output-text')
            if settings.copy_on_output_tap:
                output.on('click', controller.on_copy_requested)
                output.classes('cursor-pointer')

    keyboard = _create_mansi_keyboard(controller.on_key_pressed)
    keyboard.bind_visibility_from(
        state, 'direction', backward=lambda d: keyboard_visible(d, settings)
    )

    def sync_from_state(current: SessionState) -> None:
        if textarea.value != current.input_text:
            textarea.value = current.input_text
        output.set_text(output_display_text(current.translated_text))

    controller.on_state_changed = sync_from_state
