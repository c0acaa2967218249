# tests/test_types.py
"""
Tests for core data types.
"""

import pytest

from mansi_translator.models.types import (
    CONNECTION_ERROR_TEXT,
    MANSI_KEYS,
    TRANSLATION_ERROR_TEXT,
    Direction,
    TranslationRequest,
    TranslationResult,
    TranslationStatus,
)


class TestDirection:

    def test_flipped(self):
        assert Direction.SOURCE_TO_TARGET.flipped() == Direction.TARGET_TO_SOURCE
        assert Direction.TARGET_TO_SOURCE.flipped() == Direction.SOURCE_TO_TARGET

    @pytest.mark.parametrize("direction,expected", [
        (Direction.SOURCE_TO_TARGET, ("rus_Cyrl", "mancy_Cyrl")),
        (Direction.TARGET_TO_SOURCE, ("mancy_Cyrl", "rus_Cyrl")),
    ])
    def test_language_pair(self, direction, expected):
        assert direction.language_pair() == expected

    def test_labels(self):
        assert Direction.SOURCE_TO_TARGET.source_label == "Русский"
        assert Direction.SOURCE_TO_TARGET.target_label == "Мансийский"
        assert Direction.TARGET_TO_SOURCE.source_label == "Мансийский"
        assert Direction.TARGET_TO_SOURCE.target_label == "Русский"

    def test_mansi_is_source(self):
        assert Direction.TARGET_TO_SOURCE.mansi_is_source is True
        assert Direction.SOURCE_TO_TARGET.mansi_is_source is False


class TestTranslationRequest:

    def test_payload_uses_wire_names(self):
        request = TranslationRequest(text="дом", source_language="rus_Cyrl", target_language="mancy_Cyrl")
        assert request.to_payload() == {
            "text": "дом",
            "sourceLanguage": "rus_Cyrl",
            "targetLanguage": "mancy_Cyrl",
        }


class TestTranslationResult:

    def test_success_display_text(self):
        result = TranslationResult.success(1, "ойка")
        assert result.status == TranslationStatus.SUCCESS
        assert result.display_text == "ойка"

    def test_malformed_display_text(self):
        result = TranslationResult.malformed(1, "translatedText is missing")
        assert result.display_text == TRANSLATION_ERROR_TEXT

    def test_transport_failure_display_text(self):
        result = TranslationResult.transport_failure(1, "HTTP 500")
        assert result.display_text == CONNECTION_ERROR_TEXT
        assert result.error == "HTTP 500"


def test_mansi_keys_include_special_letters():
    for letter in ('ӈ', 'ӑ', 'ӗ', 'ӱ', 'ҥ', 'ӟ'):
        assert letter in MANSI_KEYS
    assert len(MANSI_KEYS) == len(set(MANSI_KEYS))
