"""Cache infrastructure settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings

CACHE_STRATEGIES = ("memory", "disk", "hybrid")


class CacheSettings(InfrastructureSettings):
    """Cache configuration for catalog and project configuration loads.

    Environment Variables:
        CACHE_STRATEGY: Storage tier - 'memory', 'disk' or 'hybrid' (default: memory)
        CACHE_TTL_SECONDS: Default time-to-live for entries (default: 3600s = 1h)
        CACHE_MAX_SIZE_MB: Memory tier capacity before eviction (default: 50)
        CACHE_DIRECTORY: Directory for disk entries (default: .cache)
        CACHE_SWEEP_INTERVAL_SECONDS: Expired entry sweep interval (default: 300s = 5min)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.cache.strategy != "memory":
            directory = settings.cache.directory
            # Prepare disk tier...
        ```
    """

    strategy: str = Field(
        default="memory",
        alias="CACHE_STRATEGY",
        description="Cache strategy: 'memory', 'disk', or 'hybrid'",
    )
    ttl_seconds: int = Field(
        default=3600,
        alias="CACHE_TTL_SECONDS",
        description="Default time-to-live for cache entries (seconds, 1 hour)",
    )
    max_size_mb: int = Field(
        default=50,
        alias="CACHE_MAX_SIZE_MB",
        description="Maximum memory tier size (megabytes)",
    )
    directory: str = Field(
        default=".cache",
        alias="CACHE_DIRECTORY",
        description="Directory holding disk cache entries",
    )
    sweep_interval_seconds: int = Field(
        default=300,
        alias="CACHE_SWEEP_INTERVAL_SECONDS",
        description="Interval between expired entry sweeps (seconds, 5 minutes)",
    )

    @field_validator("strategy")
    @classmethod
    def validate_strategy(cls, value: str) -> str:
        """Ensure strategy is one of the supported tiers."""
        normalized = value.lower()
        if normalized not in CACHE_STRATEGIES:
            raise ValueError(
                f"CACHE_STRATEGY must be one of {', '.join(CACHE_STRATEGIES)}: {value}"
            )
        return normalized

    @field_validator("ttl_seconds", "max_size_mb", "sweep_interval_seconds")
    @classmethod
    def validate_positive(cls, value: int) -> int:
        """Reject zero or negative durations and sizes."""
        if value <= 0:
            raise ValueError("value must be greater than zero")
        return value
