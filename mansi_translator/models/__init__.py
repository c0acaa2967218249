# mansi_translator/models/__init__.py
"""
Data models for the Mansi Translator.
"""

from .types import (
    Direction,
    StaleResponsePolicy,
    SessionPhase,
    TranslationStatus,
    TranslationRequest,
    TranslationResult,
    RUSSIAN_LANGUAGE_ID,
    MANSI_LANGUAGE_ID,
    TRANSLATION_ERROR_TEXT,
    CONNECTION_ERROR_TEXT,
    MANSI_KEYS,
)

__all__ = [
    'Direction',
    'StaleResponsePolicy',
    'SessionPhase',
    'TranslationStatus',
    'TranslationRequest',
    'TranslationResult',
    'RUSSIAN_LANGUAGE_ID',
    'MANSI_LANGUAGE_ID',
    'TRANSLATION_ERROR_TEXT',
    'CONNECTION_ERROR_TEXT',
    'MANSI_KEYS',
]
