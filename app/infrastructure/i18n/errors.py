"""Custom exceptions for the i18n system.

Every exception carries a stable `code` and a `context` dict so callers can
report failures without parsing messages.
"""

from typing import Any, Dict, Optional


class I18nError(Exception):
    """Base exception for all localization errors.

    Example:
        try:
            resolver.resolve("welcome.subject")
        except I18nError as e:
            logger.error("localization_failed", **e.to_dict())
    """

    code = "I18N_ERROR"

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


class ConfigurationError(I18nError):
    """Raised for invalid input or configuration.

    Example:
        >>> resolver.resolve("welcome.subject", [])
        Traceback (most recent call last):
        ...
        ConfigurationError: Configuration error: at least one language is required
    """

    code = "CONFIGURATION_ERROR"

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(f"Configuration error: {message}", context)


class LanguageNotFoundError(I18nError):
    """Raised when a language catalog is missing or unusable."""

    code = "LANGUAGE_NOT_FOUND"

    def __init__(self, language_code: str, reason: Optional[str] = None):
        context: Dict[str, Any] = {"language_code": language_code}
        if reason:
            context["reason"] = reason
        super().__init__(f"Language '{language_code}' not found", context)
        self.language_code = language_code


class TranslationMissingError(I18nError):
    """Raised when a loaded catalog has no entry for a key."""

    code = "TRANSLATION_MISSING"

    def __init__(self, key: str, language: str):
        super().__init__(
            f"Translation missing for key '{key}' in language '{language}'",
            {"key": key, "language": language},
        )
        self.key = key
        self.language = language
