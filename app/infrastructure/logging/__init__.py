"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
for the liquid localizer using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_build_context(): Context manager for build-scoped logging
    - get_build_id(): Get current build id from context

Example:
    from infrastructure.logging import configure_logging, get_module_logger

    # At startup
    configure_logging()

    # In a module
    logger = get_module_logger()
    logger.info("module_initialized")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)
from infrastructure.logging.context import (
    bind_build_context,
    get_build_id,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_build_context",
    "get_build_id",
]
