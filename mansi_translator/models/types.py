# mansi_translator/models/types.py
"""
Core data types for the Mansi Translator application.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# Wire identifiers expected by the remote translator
RUSSIAN_LANGUAGE_ID = "rus_Cyrl"
MANSI_LANGUAGE_ID = "mancy_Cyrl"

# Fixed markers shown in place of a translation
TRANSLATION_ERROR_TEXT = "Ошибка перевода"
CONNECTION_ERROR_TEXT = "Ошибка подключения к API"

# Copy confirmation
COPY_NOTIFICATION_TITLE = "Скопировано"
COPY_NOTIFICATION_BODY = "Текст перевода скопирован в буфер обмена."

# Mansi-specific letters offered by the on-screen keyboard
MANSI_KEYS: tuple[str, ...] = (
    'а', 'в', 'г', 'д', 'е', 'ё', 'ж', 'з', 'и', 'й', 'к', 'л', 'м', 'н', 'о',
    'п', 'р', 'с', 'т', 'у', 'ф', 'х', 'ц', 'ч', 'ш', 'щ', 'ъ', 'ы', 'ь', 'э',
    'ю', 'я', 'ӈ', 'ӑ', 'ӗ', 'ӱ', 'ҥ', 'ӟ',
)


class Direction(Enum):
    """Translation direction (Russian is the source language by default)"""
    SOURCE_TO_TARGET = "rus_to_mansi"
    TARGET_TO_SOURCE = "mansi_to_rus"

    def flipped(self) -> "Direction":
        if self is Direction.SOURCE_TO_TARGET:
            return Direction.TARGET_TO_SOURCE
        return Direction.SOURCE_TO_TARGET

    def language_pair(
        self,
        russian_id: str = RUSSIAN_LANGUAGE_ID,
        mansi_id: str = MANSI_LANGUAGE_ID,
    ) -> tuple[str, str]:
        """Return (source_language, target_language) identifiers."""
        if self is Direction.SOURCE_TO_TARGET:
            return russian_id, mansi_id
        return mansi_id, russian_id

    @property
    def source_label(self) -> str:
        return "Русский" if self is Direction.SOURCE_TO_TARGET else "Мансийский"

    @property
    def target_label(self) -> str:
        return "Мансийский" if self is Direction.SOURCE_TO_TARGET else "Русский"

    @property
    def mansi_is_source(self) -> bool:
        return self is Direction.TARGET_TO_SOURCE


class StaleResponsePolicy(Enum):
    """How responses to superseded requests are treated"""
    LATEST = "latest"              # Discard responses from older generations
    LAST_ARRIVAL = "last_arrival"  # Legacy: whichever response settles last wins


class SessionPhase(Enum):
    """Controller state machine"""
    IDLE = "idle"
    AWAITING_DEBOUNCE = "awaiting_debounce"
    IN_FLIGHT = "in_flight"


class TranslationStatus(Enum):
    """Outcome of a single remote call"""
    SUCCESS = "success"
    MALFORMED_RESPONSE = "malformed_response"
    TRANSPORT_FAILURE = "transport_failure"


@dataclass(frozen=True)
class TranslationRequest:
    """
    A single call to the remote translator.
    Captured from the session at debounce fire time.
    """
    text: str
    source_language: str
    target_language: str

    def to_payload(self) -> dict[str, str]:
        return {
            "text": self.text,
            "sourceLanguage": self.source_language,
            "targetLanguage": self.target_language,
        }


@dataclass(frozen=True)
class TranslationResult:
    """
    Settled outcome of a request, tagged with the generation it was issued under.
    """
    status: TranslationStatus
    generation: int
    text: str = ""
    error: Optional[str] = None  # Diagnostic message (logged, never displayed)

    @property
    def display_text(self) -> str:
        """Text to put into the output area"""
        if self.status == TranslationStatus.SUCCESS:
            return self.text
        if self.status == TranslationStatus.MALFORMED_RESPONSE:
            return TRANSLATION_ERROR_TEXT
        return CONNECTION_ERROR_TEXT

    @classmethod
    def success(cls, generation: int, text: str) -> "TranslationResult":
        return cls(status=TranslationStatus.SUCCESS, generation=generation, text=text)

    @classmethod
    def malformed(cls, generation: int, error: str) -> "TranslationResult":
        return cls(status=TranslationStatus.MALFORMED_RESPONSE, generation=generation, error=error)

    @classmethod
    def transport_failure(cls, generation: int, error: str) -> "TranslationResult":
        return cls(status=TranslationStatus.TRANSPORT_FAILURE, generation=generation, error=error)
