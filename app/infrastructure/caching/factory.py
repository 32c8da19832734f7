"""Cache service factory."""

from typing import Optional

from infrastructure.caching.service import CacheService
from infrastructure.configuration import Settings
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def create_cache_service(
    settings: Optional[Settings] = None,
    start_sweeper: bool = False,
) -> CacheService:
    """Create a CacheService from cache settings.

    Args:
        settings: Settings instance (default: application settings).
        start_sweeper: Whether to start the background expiry sweep.

    Returns:
        Configured CacheService.
    """
    if settings is None:
        from infrastructure.services.providers import get_settings

        settings = get_settings()

    cache_settings = settings.cache
    service = CacheService(
        strategy=cache_settings.strategy,
        ttl_seconds=cache_settings.ttl_seconds,
        max_size_mb=cache_settings.max_size_mb,
        directory=cache_settings.directory,
        sweep_interval_seconds=cache_settings.sweep_interval_seconds,
    )

    if start_sweeper:
        service.start_sweeper()

    logger.info(
        "cache_service_created",
        strategy=cache_settings.strategy,
        sweeper=start_sweeper,
    )
    return service
