# mansi_translator/services/translation_client.py
from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from mansi_translator.config.settings import AppSettings
from mansi_translator.models.types import TranslationRequest
from mansi_translator.services.exceptions import (
    MalformedResponseError,
    TranslationTransportError,
)

logger = logging.getLogger(__name__)


def parse_translation_payload(response: httpx.Response) -> str:
    """Extract translatedText from a 2xx response.

    Raises MalformedResponseError when the body is not JSON, not an object, or
    the field is missing, not a string or empty.
    """
    try:
        payload: Any = response.json()
    except ValueError as e:
        raise MalformedResponseError(f"non-JSON response: {response.text[:200]!r}") from e

    if not isinstance(payload, dict):
        raise MalformedResponseError(f"unexpected payload type: {type(payload).__name__}")

    translated = payload.get("translatedText")
    if not isinstance(translated, str) or not translated:
        raise MalformedResponseError("translatedText is missing or empty")
    return translated


class TranslationClient:
    """Async client for the remote Russian/Mansi translator endpoint.

    One POST per call, no retries. The underlying httpx.AsyncClient can be
    injected (tests pass one backed by httpx.MockTransport).
    """

    def __init__(
        self,
        settings: AppSettings,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._settings = settings
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.request_timeout, connect=min(10.0, settings.request_timeout)),
        )

    @property
    def api_url(self) -> str:
        return self._settings.api_url

    async def translate(self, request: TranslationRequest) -> str:
        """Send one request and return the translated text.

        Raises:
            TranslationTransportError: connection failure, timeout or non-2xx status
            MalformedResponseError: 2xx response without a usable translatedText
        """
        logger.debug(
            "POST %s (%s -> %s, %d chars)",
            self.api_url, request.source_language, request.target_language, len(request.text),
        )
        try:
            response = await self._client.post(
                self.api_url,
                json=request.to_payload(),
                headers={"Content-Type": "application/json"},
            )
        except httpx.TimeoutException as e:
            raise TranslationTransportError(f"request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise TranslationTransportError(f"connection failed: {e}") from e

        if not response.is_success:
            raise TranslationTransportError(
                f"HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        return parse_translation_payload(response)

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
