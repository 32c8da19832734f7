"""Infrastructure modules for the liquid localizer.

Centralized infrastructure components:
- configuration: Settings management (settings, CacheSettings, I18nSettings)
- logging: Structured logging (get_module_logger, bind_build_context)
- caching: Memory/disk/hybrid TTL cache (CacheService)
- i18n: Translation catalogs and Liquid condition resolution
- services: Application-scoped providers (get_settings, get_localization_service)
"""

# Configuration
from infrastructure.configuration import settings

# Logging
from infrastructure.logging import get_module_logger

__all__ = [
    "settings",
    "get_module_logger",
]
