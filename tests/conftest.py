from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import pytest


# Ensure the project root is importable when running `pytest` via its entrypoint,
# where `sys.path[0]` may not be the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from mansi_translator.config.settings import AppSettings, invalidate_settings_cache
from mansi_translator.models.types import TranslationRequest


class FakeTranslator:
    """Translator double whose calls settle only when the test says so."""

    def __init__(self) -> None:
        self.requests: list[TranslationRequest] = []
        self._futures: list[asyncio.Future] = []

    async def translate(self, request: TranslationRequest) -> str:
        self.requests.append(request)
        future = asyncio.get_running_loop().create_future()
        self._futures.append(future)
        return await future

    def respond(self, index: int, text: str) -> None:
        self._futures[index].set_result(text)

    def fail(self, index: int, error: BaseException) -> None:
        self._futures[index].set_exception(error)


@pytest.fixture
def fast_settings() -> AppSettings:
    """Settings with a short debounce so timer tests stay quick"""
    return AppSettings(debounce_seconds=0.02)


@pytest.fixture
def legacy_settings() -> AppSettings:
    return AppSettings(debounce_seconds=0.02, stale_response_policy="last_arrival")


@pytest.fixture
def fake_translator() -> FakeTranslator:
    return FakeTranslator()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    invalidate_settings_cache()
    yield
    invalidate_settings_cache()
