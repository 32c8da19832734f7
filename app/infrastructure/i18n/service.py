"""Localization service for dependency injection.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

from typing import Any, Dict, Mapping, Optional, Sequence

from infrastructure.caching import CacheService
from infrastructure.i18n.loader import CatalogLoader
from infrastructure.i18n.models import TranslationCatalog
from infrastructure.i18n.resolvers import LiquidConditionResolver
from infrastructure.i18n.translator import Translator


class LocalizationService:
    """Class-based localization service.

    Single surface for the callers of the localization core (build and
    validation commands): strict and lenient resolution, catalog loads and
    cache operations.

    This is a thin facade - all actual work is delegated to the resolver,
    loader and cache it wraps.

    Usage:
        service = LocalizationService(resolver)

        subject = service.resolve("welcome.subject")
        catalog = service.load_catalog("fr-FR")
        service.cache_clear()
    """

    def __init__(
        self,
        resolver: Optional[LiquidConditionResolver] = None,
        translator: Optional[Translator] = None,
    ):
        """Initialize localization service.

        Args:
            resolver: Optional pre-configured resolver. If not provided,
                creates one via the factory.
            translator: Optional Translator sharing the resolver's loader.
        """
        if resolver is None:
            from infrastructure.i18n.factory import create_resolver

            resolver = create_resolver()

        self._resolver = resolver
        self._translator = translator

    @property
    def loader(self) -> CatalogLoader:
        return self._resolver.loader

    @property
    def cache(self) -> CacheService:
        return self.loader.cache

    @property
    def resolver(self) -> LiquidConditionResolver:
        return self._resolver

    @property
    def translator(self) -> Translator:
        """Translator over the same loader, created on first use."""
        if self._translator is None:
            languages = self._resolver.languages
            self._translator = Translator(
                self.loader, fallback_language=languages[0] if languages else None
            )
        return self._translator

    def resolve(self, key: str, languages: Optional[Sequence[str]] = None) -> str:
        """Strict resolution, see LiquidConditionResolver.resolve()."""
        return self._resolver.resolve(key, languages)

    def resolve_from_catalogs(
        self,
        key: str,
        catalogs: Mapping[str, TranslationCatalog],
        languages: Optional[Sequence[str]] = None,
    ) -> str:
        """Lenient resolution, see LiquidConditionResolver.resolve_from_catalogs()."""
        return self._resolver.resolve_from_catalogs(key, catalogs, languages)

    def translate(
        self,
        key: str,
        language: str,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        return self.translator.translate(key, language, variables=variables)

    def load_catalog(self, language_code: str) -> TranslationCatalog:
        """Load one catalog; raises LanguageNotFoundError when unusable."""
        return self.loader.load(language_code)

    def invalidate(self, language_code: Optional[str] = None) -> None:
        self.loader.invalidate(language_code)

    def cache_get(self, key: str) -> Optional[Any]:
        return self.cache.get(key)

    def cache_set(self, key: str, data: Any, ttl_seconds: Optional[int] = None) -> None:
        self.cache.set(key, data, ttl_seconds)

    def cache_delete(self, key: str) -> None:
        self.cache.delete(key)

    def cache_clear(self) -> None:
        self.cache.clear()

    def cache_stats(self) -> Dict[str, Any]:
        return self.cache.get_stats()
