"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.caching import CacheService, create_cache_service
from infrastructure.configuration import Settings
from infrastructure.i18n import (
    CatalogLoader,
    LocalizationService,
    create_catalog_loader,
    create_resolver,
)


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process,
    even if called from multiple packages.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_cache_service() -> CacheService:
    """
    Get application-scoped cache service singleton.

    The background sweep is started on first use.

    Returns:
        CacheService: Cached service configured from settings.cache.
    """
    return create_cache_service(get_settings(), start_sweeper=True)


@lru_cache
def get_catalog_loader() -> CatalogLoader:
    """
    Get application-scoped catalog loader singleton sharing the cache service.

    Returns:
        CatalogLoader: Loader reading settings.i18n.languages_dir.
    """
    return create_catalog_loader(get_settings(), cache=get_cache_service())


@lru_cache
def get_localization_service() -> LocalizationService:
    """
    Get application-scoped localization service singleton.

    Returns:
        LocalizationService: Facade over the resolver, loader and cache.

    Usage:
        service = get_localization_service()
        subject = service.resolve("welcome.subject")
    """
    resolver = create_resolver(get_settings(), loader=get_catalog_loader())
    return LocalizationService(resolver)
