"""Liquid condition resolution for translation keys.

Expands a translation key into one Liquid conditional covering every
configured language, so a single template serves all recipients:

    {% if user.user_metadata.language == 'fr-FR' %}Bonjour
    {% elsif user.user_metadata.language == 'en-US' %}Hello
    {% else %}Bonjour{% endif %}

The first language is the default: it fills both the `if` branch and the
closing `else` branch.
"""

from typing import List, Mapping, Optional, Sequence

from infrastructure.i18n.errors import ConfigurationError, TranslationMissingError
from infrastructure.i18n.loader import CatalogLoader
from infrastructure.i18n.models import TranslationCatalog
from infrastructure.logging import get_module_logger

logger = get_module_logger().bind(component="i18n.resolver")

DEFAULT_LANGUAGE_VARIABLE = "user.user_metadata.language"
MISSING_PLACEHOLDER = "[MISSING: {key}]"


def missing_placeholder(key: str) -> str:
    """Visible marker rendered for a key absent from a catalog."""
    return MISSING_PLACEHOLDER.format(key=key)


def build_condition(
    values: Sequence[tuple], language_variable: str = DEFAULT_LANGUAGE_VARIABLE
) -> str:
    """Join per-language values into a Liquid conditional.

    Args:
        values: (language_code, text) pairs in priority order, non-empty.
        language_variable: Liquid variable compared in each branch.

    Returns:
        Newline-joined branches: one if, one elsif per further language,
        and an else branch repeating the first language's text.
    """
    (first_language, first_value), *rest = values

    branches = [f"{{% if {language_variable} == '{first_language}' %}}{first_value}"]
    branches.extend(
        f"{{% elsif {language_variable} == '{language}' %}}{value}"
        for language, value in rest
    )
    branches.append(f"{{% else %}}{first_value}{{% endif %}}")
    return "\n".join(branches)


class LiquidConditionResolver:
    """Resolves translation keys into multi-language Liquid conditionals.

    Two entry points with different failure policies:

    - resolve(): strict. Loads each catalog through the CatalogLoader in
      priority order and aborts on the first language lacking the key.
    - resolve_from_catalogs(): lenient. Works on catalogs the caller has
      already loaded and renders a [MISSING: key] placeholder instead of
      failing. Used by batch template localization.

    Attributes:
        loader: CatalogLoader for strict resolution.
        languages: Default ordered language list.
        language_variable: Liquid variable compared in each branch.
    """

    def __init__(
        self,
        loader: Optional[CatalogLoader] = None,
        languages: Optional[Sequence[str]] = None,
        language_variable: str = DEFAULT_LANGUAGE_VARIABLE,
    ):
        """Initialize resolver.

        Args:
            loader: CatalogLoader used by resolve(). Optional when only
                resolve_from_catalogs() is used.
            languages: Default ordered languages, highest priority first.
            language_variable: Liquid variable holding the recipient language.
        """
        self.loader = loader
        self.languages: List[str] = list(languages or [])
        self.language_variable = language_variable
        self.log = logger.bind(language_variable=language_variable)

    def resolve(self, key: str, languages: Optional[Sequence[str]] = None) -> str:
        """Build the conditional for key, failing on any missing translation.

        Catalogs are loaded one at a time in priority order; a failure stops
        the expansion before later languages are attempted.

        Args:
            key: Translation key (e.g., "welcome.subject").
            languages: Ordered language codes; defaults to self.languages.

        Returns:
            Liquid conditional string.

        Raises:
            ConfigurationError: If the language list is empty or no loader
                is configured.
            LanguageNotFoundError: If a language catalog cannot be loaded.
            TranslationMissingError: If a catalog lacks the key.
        """
        ordered = self._ordered(languages)
        if self.loader is None:
            raise ConfigurationError("strict resolution requires a catalog loader")

        values = []
        for language in ordered:
            catalog = self.loader.load(language)
            value = catalog.get_value(key)
            if not value:
                self.log.error("translation_not_found", key=key, language=language)
                raise TranslationMissingError(key, language)
            values.append((language, value))

        return build_condition(values, self.language_variable)

    def resolve_from_catalogs(
        self,
        key: str,
        catalogs: Mapping[str, TranslationCatalog],
        languages: Optional[Sequence[str]] = None,
    ) -> str:
        """Build the conditional for key from pre-loaded catalogs.

        A language whose catalog is absent or lacks the key renders the
        [MISSING: key] placeholder; nothing is raised for missing keys.

        Args:
            key: Translation key.
            catalogs: Loaded catalogs by language code.
            languages: Ordered language codes; defaults to self.languages.

        Returns:
            Liquid conditional string.

        Raises:
            ConfigurationError: If the language list is empty.
        """
        ordered = self._ordered(languages)

        values = []
        for language in ordered:
            catalog = catalogs.get(language)
            value = catalog.get_value(key) if catalog is not None else None
            if not value:
                self.log.warning("translation_placeholder_used", key=key, language=language)
                value = missing_placeholder(key)
            values.append((language, value))

        return build_condition(values, self.language_variable)

    def _ordered(self, languages: Optional[Sequence[str]]) -> List[str]:
        ordered = list(languages) if languages is not None else list(self.languages)
        if not ordered:
            raise ConfigurationError("at least one language is required")
        return ordered
