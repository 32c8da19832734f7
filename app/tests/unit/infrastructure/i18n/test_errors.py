"""Unit tests for infrastructure.i18n.errors module."""

import pytest

from infrastructure.i18n.errors import (
    ConfigurationError,
    I18nError,
    LanguageNotFoundError,
    TranslationMissingError,
)

pytestmark = pytest.mark.unit


class TestI18nErrors:
    """Tests for the localization exception hierarchy."""

    def test_configuration_error_prefixes_message(self):
        """ConfigurationError messages start with 'Configuration error:'."""
        error = ConfigurationError("at least one language is required")

        assert str(error) == "Configuration error: at least one language is required"
        assert error.code == "CONFIGURATION_ERROR"

    def test_language_not_found_carries_code(self):
        """LanguageNotFoundError records the language and optional reason."""
        error = LanguageNotFoundError("de-DE", "invalid json")

        assert error.language_code == "de-DE"
        assert error.context == {"language_code": "de-DE", "reason": "invalid json"}
        assert "de-DE" in str(error)

    def test_translation_missing_carries_key_and_language(self):
        """TranslationMissingError records the key and language."""
        error = TranslationMissingError("a.b", "fr-FR")

        assert error.key == "a.b"
        assert error.language == "fr-FR"
        assert error.code == "TRANSLATION_MISSING"

    def test_to_dict(self):
        """to_dict() exposes type, code, message and context."""
        error = TranslationMissingError("a.b", "fr-FR")

        assert error.to_dict() == {
            "error": "TranslationMissingError",
            "code": "TRANSLATION_MISSING",
            "message": "Translation missing for key 'a.b' in language 'fr-FR'",
            "context": {"key": "a.b", "language": "fr-FR"},
        }

    @pytest.mark.parametrize(
        "error",
        [
            ConfigurationError("x"),
            LanguageNotFoundError("x"),
            TranslationMissingError("x", "y"),
        ],
    )
    def test_all_share_base(self, error):
        """Every localization error is an I18nError."""
        assert isinstance(error, I18nError)
