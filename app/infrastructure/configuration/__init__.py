"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the liquid
localizer using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    CacheSettings: Cache settings class (for testing)
    I18nSettings: Localization settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    # Access settings
    languages = settings.i18n.languages
    ttl = settings.cache.ttl_seconds

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.features import I18nSettings
from infrastructure.configuration.infrastructure import CacheSettings

__all__ = ["Settings", "settings", "CacheSettings", "I18nSettings"]
