"""Translation service for retrieving and interpolating single messages.

Complements LiquidConditionResolver when the recipient language is already
known and only one language's text is needed.
"""

import re
from typing import Any, Dict, Optional

from infrastructure.i18n.errors import TranslationMissingError
from infrastructure.i18n.loader import CatalogLoader
from infrastructure.logging import get_module_logger

logger = get_module_logger()

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


class Translator:
    """Service for translating messages with variable interpolation.

    Attributes:
        loader: CatalogLoader supplying catalogs.
        fallback_language: Language used when the key is missing.
    """

    def __init__(self, loader: CatalogLoader, fallback_language: Optional[str] = None):
        """Initialize Translator.

        Args:
            loader: CatalogLoader instance.
            fallback_language: Default fallback language (optional).
        """
        self.loader = loader
        self.fallback_language = fallback_language
        logger.info("initialized_translator", fallback_language=fallback_language)

    def translate(
        self,
        key: str,
        language: str,
        fallback_language: Optional[str] = None,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Retrieve and interpolate a translated message.

        Replaces {{variable_name}} placeholders; placeholders without a
        matching variable are left as-is. Falls back to fallback_language
        if the key is not found in the requested language.

        Args:
            key: Translation key.
            language: Language to translate to.
            fallback_language: Overrides the default fallback language.
            variables: Optional dict of variables for interpolation.

        Returns:
            Translated and interpolated message string.

        Raises:
            LanguageNotFoundError: If a needed catalog cannot be loaded.
            TranslationMissingError: If key is in neither language.
        """
        fallback = fallback_language or self.fallback_language

        message = self.loader.load(language).get_value(key)

        if message is None and fallback and fallback != language:
            message = self.loader.load(fallback).get_value(key)
            if message is not None:
                logger.warning(
                    "used_fallback_translation",
                    key=key,
                    requested_language=language,
                    fallback_language=fallback,
                )

        if message is None:
            logger.error(
                "translation_not_found",
                key=key,
                language=language,
                fallback_language=fallback,
            )
            raise TranslationMissingError(key, language)

        return interpolate(message, variables)

    def has_message(self, key: str, language: str) -> bool:
        """Check if a translation exists for key in language."""
        catalog = self.loader.get_loaded(language) or self.loader.load(language)
        return catalog.has_key(key)


def interpolate(message: str, variables: Optional[Dict[str, Any]] = None) -> str:
    """Replace {{name}} placeholders with values from variables.

    Example:
        >>> interpolate("Hello {{name}}", {"name": "Ada"})
        'Hello Ada'
        >>> interpolate("Hello {{name}}")
        'Hello {{name}}'
    """
    if not variables:
        return message

    def _substitute(match: re.Match) -> str:
        name = match.group(1)
        if name in variables and variables[name] is not None:
            return str(variables[name])
        return match.group(0)

    return _PLACEHOLDER.sub(_substitute, message)
