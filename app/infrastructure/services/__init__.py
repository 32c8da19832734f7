"""
Application-scoped service providers.

Provides cached provider functions for the core infrastructure services.
"""

from infrastructure.services.providers import (
    get_settings,
    get_cache_service,
    get_catalog_loader,
    get_localization_service,
)

__all__ = [
    "get_settings",
    "get_cache_service",
    "get_catalog_loader",
    "get_localization_service",
]
