"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.cache import CacheSettings

__all__ = [
    "CacheSettings",
]
