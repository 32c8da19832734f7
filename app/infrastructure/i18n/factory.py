"""Factory functions for creating i18n components.

Provides convenience functions for wiring readers, loaders and resolvers
from application settings.
"""

from pathlib import Path
from typing import Optional, Sequence

from infrastructure.caching import CacheService, create_cache_service
from infrastructure.configuration import Settings
from infrastructure.i18n.loader import CatalogLoader
from infrastructure.i18n.readers import FileResourceReader
from infrastructure.i18n.resolvers import LiquidConditionResolver
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def create_catalog_loader(
    settings: Optional[Settings] = None,
    languages_dir: Path | str | None = None,
    cache: Optional[CacheService] = None,
) -> CatalogLoader:
    """Create a CatalogLoader reading catalogs from a directory.

    Args:
        settings: Settings instance (default: application settings).
        languages_dir: Catalog directory (default: settings.i18n.languages_dir).
        cache: CacheService to use (default: built from settings.cache).

    Returns:
        CatalogLoader: Configured loader.
    """
    if settings is None:
        from infrastructure.services.providers import get_settings

        settings = get_settings()

    directory = Path(languages_dir or settings.i18n.languages_dir)
    if not directory.is_dir():
        logger.warning("languages_dir_not_found", languages_dir=str(directory))

    return CatalogLoader(
        reader=FileResourceReader(directory),
        cache=cache or create_cache_service(settings),
        ttl_seconds=settings.i18n.catalog_ttl_seconds,
    )


def create_resolver(
    settings: Optional[Settings] = None,
    languages: Optional[Sequence[str]] = None,
    loader: Optional[CatalogLoader] = None,
    preload: bool = False,
) -> LiquidConditionResolver:
    """Create and configure a LiquidConditionResolver.

    Args:
        settings: Settings instance (default: application settings).
        languages: Ordered languages (default: settings.i18n.languages).
        loader: CatalogLoader to use (default: create_catalog_loader()).
        preload: Whether to load every language immediately.

    Returns:
        LiquidConditionResolver: Configured resolver.

    Raises:
        LanguageNotFoundError: If preload is set and the default language
            cannot be loaded.

    Usage:
        # Use defaults from environment
        resolver = create_resolver()

        # Explicit language order
        resolver = create_resolver(languages=["fr-FR", "en-US"])
    """
    if settings is None:
        from infrastructure.services.providers import get_settings

        settings = get_settings()

    loader = loader or create_catalog_loader(settings)
    ordered = list(languages) if languages is not None else list(settings.i18n.languages)

    resolver = LiquidConditionResolver(
        loader=loader,
        languages=ordered,
        language_variable=settings.i18n.language_variable,
    )

    if preload:
        report = loader.load_many(ordered)
        logger.info(
            "resolver_created_with_preload",
            languages=ordered,
            failures=list(report.failures),
        )
    else:
        logger.info("resolver_created_lazy", languages=ordered)

    return resolver
