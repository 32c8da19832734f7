"""Translation catalog loading.

CatalogLoader turns a language's raw resource into a TranslationCatalog and
memoizes it in a CacheService. Resources come from an injected
ResourceReader, so catalogs can live on disk or in memory.
"""

import json
from typing import Any, Dict, Iterable, List, Optional, Sequence

import yaml

from infrastructure.caching import CacheService
from infrastructure.i18n.errors import ConfigurationError, LanguageNotFoundError
from infrastructure.i18n.models import LoadReport, TranslationAnalysis, TranslationCatalog
from infrastructure.i18n.readers import RawResource, ResourceNotFoundError, ResourceReader
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_CATALOG_TTL_SECONDS = 3600


class CatalogLoader:
    """Loads and caches translation catalogs by language code.

    Catalogs are cached under "language:<code>" with a fixed TTL. A cached
    catalog is dropped and reloaded when the reader reports a modification
    time different from the one recorded at load.

    Attributes:
        reader: ResourceReader supplying raw catalogs.
        cache: CacheService memoizing parsed catalogs.
        ttl_seconds: Cache lifetime of a catalog.
        catalogs: Catalogs loaded by this loader, by language code.
    """

    def __init__(
        self,
        reader: ResourceReader,
        cache: Optional[CacheService] = None,
        ttl_seconds: int = DEFAULT_CATALOG_TTL_SECONDS,
    ):
        """Initialize catalog loader.

        Args:
            reader: ResourceReader for raw catalog text.
            cache: CacheService for parsed catalogs (default: memory cache).
            ttl_seconds: Cache lifetime of a catalog.
        """
        self.reader = reader
        self.cache = cache or CacheService(strategy="memory")
        self.ttl_seconds = ttl_seconds
        self.catalogs: Dict[str, TranslationCatalog] = {}

    @staticmethod
    def cache_key(language_code: str) -> str:
        return f"language:{language_code}"

    def load(self, language_code: str) -> TranslationCatalog:
        """Load the catalog for a language.

        Args:
            language_code: Language to load (e.g., "fr-FR").

        Returns:
            TranslationCatalog for the language.

        Raises:
            LanguageNotFoundError: If the resource is missing, unreadable,
                malformed or not a flat mapping of strings.
        """
        cache_key = self.cache_key(language_code)
        cached = self.cache.get(cache_key)

        if cached is not None:
            catalog = self._restore(language_code, cached)
            if catalog is not None and not self._is_stale(catalog):
                logger.debug("catalog_loaded_from_cache", language=language_code)
                self.catalogs[language_code] = catalog
                return catalog

            logger.info("catalog_cache_invalidated", language=language_code)
            self.cache.delete(cache_key)

        catalog = self._read_catalog(language_code)
        self.catalogs[language_code] = catalog
        self.cache.set(cache_key, catalog.to_dict(), self.ttl_seconds)

        logger.info(
            "catalog_loaded",
            language=language_code,
            entries_count=len(catalog.entries),
            completeness=catalog.metadata.completeness,
        )
        return catalog

    def load_many(self, language_codes: Sequence[str]) -> LoadReport:
        """Load several languages in priority order.

        The first language is the default: its failure is fatal. Failures
        of other languages are logged and recorded in the report.

        Args:
            language_codes: Ordered language codes, default first.

        Returns:
            LoadReport with loaded catalogs and per-language failures.

        Raises:
            ConfigurationError: If language_codes is empty.
            LanguageNotFoundError: If the default language cannot be loaded.
        """
        if not language_codes:
            raise ConfigurationError("at least one language is required")

        report = LoadReport()
        for position, language_code in enumerate(language_codes):
            try:
                report.catalogs[language_code] = self.load(language_code)
            except LanguageNotFoundError as e:
                if position == 0:
                    logger.error(
                        "default_language_load_failed",
                        language=language_code,
                        error=e.message,
                    )
                    raise
                logger.warning(
                    "language_load_failed",
                    language=language_code,
                    error=e.message,
                )
                report.failures[language_code] = e.message

        logger.info(
            "languages_loaded",
            loaded=len(report.catalogs),
            failed=len(report.failures),
        )
        return report

    def invalidate(self, language_code: Optional[str] = None) -> None:
        """Drop cached catalogs.

        Args:
            language_code: Language to drop; all loaded languages if None.
        """
        if language_code:
            self.cache.delete(self.cache_key(language_code))
            self.catalogs.pop(language_code, None)
        else:
            for code in list(self.catalogs):
                self.cache.delete(self.cache_key(code))
            self.catalogs.clear()

        logger.info("catalog_cache_invalidated", language=language_code or "all")

    def get_loaded(self, language_code: str) -> Optional[TranslationCatalog]:
        """Get a catalog already loaded by this loader, without I/O."""
        return self.catalogs.get(language_code)

    def available_languages(self) -> List[str]:
        return list(self.catalogs.keys())

    def analyze(self, language_codes: Optional[Iterable[str]] = None) -> TranslationAnalysis:
        """Report keys missing from each catalog.

        Args:
            language_codes: Languages to analyse (loads them if needed).
                Defaults to the languages already loaded.

        Returns:
            TranslationAnalysis over the union of all keys.

        Raises:
            LanguageNotFoundError: If a requested language cannot be loaded.
        """
        if language_codes is None:
            catalogs = dict(self.catalogs)
        else:
            catalogs = {code: self.load(code) for code in language_codes}

        all_keys = set()
        for catalog in catalogs.values():
            all_keys.update(catalog.entries)

        missing = {}
        for code, catalog in catalogs.items():
            gaps = sorted(all_keys.difference(catalog.entries))
            if gaps:
                missing[code] = gaps

        return TranslationAnalysis(
            total_keys=len(all_keys),
            languages_count=len(catalogs),
            missing=missing,
        )

    def _read_catalog(self, language_code: str) -> TranslationCatalog:
        try:
            resource = self.reader.read(language_code)
        except ResourceNotFoundError as e:
            logger.warning("translation_resource_not_found", language=language_code)
            raise LanguageNotFoundError(language_code, str(e)) from e
        except UnicodeDecodeError as e:
            logger.error(
                "translation_resource_decode_failed",
                language=language_code,
                error=str(e),
            )
            raise LanguageNotFoundError(language_code, "invalid utf-8") from e
        except OSError as e:
            logger.error(
                "translation_resource_read_failed",
                language=language_code,
                error=str(e),
            )
            raise LanguageNotFoundError(language_code, str(e)) from e

        messages = self._parse(language_code, resource)
        return TranslationCatalog.from_messages(
            language_code, messages, last_modified=resource.modified_at
        )

    def _parse(self, language_code: str, resource: RawResource) -> Dict[str, str]:
        try:
            if resource.format == "yaml":
                data = yaml.safe_load(resource.text)
            else:
                data = json.loads(resource.text)
        except (ValueError, yaml.YAMLError) as e:
            logger.error(
                "translation_parse_error",
                language=language_code,
                format=resource.format,
                error=str(e),
            )
            raise LanguageNotFoundError(language_code, f"invalid {resource.format}") from e

        if data is None:
            data = {}

        if not isinstance(data, dict):
            logger.error(
                "invalid_catalog_format", language=language_code, expected="dict"
            )
            raise LanguageNotFoundError(language_code, "catalog must be a mapping")

        invalid_keys = sorted(
            str(key) for key, value in data.items() if not isinstance(value, str)
        )
        if invalid_keys:
            logger.error(
                "invalid_catalog_values",
                language=language_code,
                keys=invalid_keys[:10],
            )
            raise LanguageNotFoundError(
                language_code, f"non-string values for keys: {', '.join(invalid_keys)}"
            )

        return {str(key): value for key, value in data.items()}

    def _restore(self, language_code: str, payload: Any) -> Optional[TranslationCatalog]:
        try:
            return TranslationCatalog.from_dict(payload)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(
                "cached_catalog_unreadable", language=language_code, error=str(e)
            )
            return None

    def _is_stale(self, catalog: TranslationCatalog) -> bool:
        recorded = catalog.metadata.last_modified
        if recorded is None:
            return False
        current = self.reader.modified_at(catalog.code)
        return current is not None and current != recorded
