# mansi_translator/ui/app.py
from __future__ import annotations

"""
Mansi Translator page: one TranslationSessionController per browser client,
one shared HTTP client per process.
"""

import logging
from pathlib import Path
from typing import Optional

from mansi_translator import __app_name__
from mansi_translator.config.settings import AppSettings, get_default_settings_path
from mansi_translator.services.translation_client import TranslationClient
from mansi_translator.ui.controller import TranslationSessionController

# Module logger
logger = logging.getLogger(__name__)

# NiceGUI imports are deferred to run_app()/create_ui() for faster startup
ui = None
nicegui_app = None


def _import_nicegui() -> None:
    global ui, nicegui_app
    if ui is None:
        from nicegui import ui as _ui, app as _app
        ui = _ui
        nicegui_app = _app


def notify_copied(title: str, body: str) -> None:
    """Show the copy confirmation as a NiceGUI toast."""
    _import_nicegui()
    ui.notify(title, caption=body, type='positive')


def write_clipboard(text: str) -> None:
    _import_nicegui()
    ui.clipboard.write(text)


class MansiTranslatorApp:
    """Application shell: settings, shared HTTP client and the page factory."""

    def __init__(self, settings: Optional[AppSettings] = None, settings_path: Optional[Path] = None):
        self.settings_path = settings_path or get_default_settings_path()
        self.settings = settings or AppSettings.load(self.settings_path)
        self._client: Optional[TranslationClient] = None
        self.controllers: set[TranslationSessionController] = set()

    @property
    def client(self) -> TranslationClient:
        if self._client is None:
            self._client = TranslationClient(self.settings)
            logger.info("Translation endpoint: %s", self._client.api_url)
        return self._client

    def create_controller(self) -> TranslationSessionController:
        controller = TranslationSessionController(
            self.client,
            settings=self.settings,
            set_clipboard_text=write_clipboard,
            show_notification=notify_copied,
        )
        self.controllers.add(controller)
        return controller

    async def release_controller(self, controller: TranslationSessionController) -> None:
        """Session end for one browser client."""
        self.controllers.discard(controller)
        await controller.close()

    def bind_client(self, client, controller: TranslationSessionController) -> None:
        """End the session when the NiceGUI client is deleted (on_disconnect also fires on reconnect)."""
        async def on_delete() -> None:
            await self.release_controller(controller)

        client.on_delete(on_delete)

    async def shutdown(self) -> None:
        for controller in list(self.controllers):
            await self.release_controller(controller)
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        logger.info("%s shut down", __app_name__)

    def create_ui(self) -> None:
        """Register the page and lifecycle hooks with NiceGUI."""
        _import_nicegui()
        from nicegui import Client
        from mansi_translator.ui.components.text_panel import create_text_panel
        from mansi_translator.ui.styles import COMPLETE_CSS

        @ui.page('/')
        async def index(client: Client) -> None:
            ui.add_css(COMPLETE_CSS)
            controller = self.create_controller()
            self.bind_client(client, controller)

            with ui.column().classes('w-full max-w-xl mx-auto p-4 gap-4'):
                ui.label('Переводчик').classes('app-title self-center')
                create_text_panel(controller, self.settings)

        nicegui_app.on_shutdown(self.shutdown)


def create_app(settings: Optional[AppSettings] = None) -> MansiTranslatorApp:
    """Create application instance"""
    return MansiTranslatorApp(settings=settings)


def run_app(
    host: str = '127.0.0.1',
    port: int = 8765,
    native: bool = False,
    reload: bool = False,
) -> None:
    """Run the application.

    Args:
        host: Host to bind to
        port: Port to bind to
        native: Use native window mode (pywebview)
        reload: NiceGUI auto-reload (development only)
    """
    _import_nicegui()

    translator_app = create_app()
    translator_app.create_ui()

    logger.info("Starting %s on http://%s:%d", __app_name__, host, port)
    ui.run(
        host=host,
        port=port,
        title=__app_name__,
        native=native,
        reload=reload,
        show=not native,
    )
