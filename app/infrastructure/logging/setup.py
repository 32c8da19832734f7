"""Structlog configuration for the localizer.

Every log line goes through one processor chain: bound build context,
level, ISO timestamp, call site and exception text, then a renderer chosen
by environment (console for development, JSON for production). Under pytest
the same chain is installed with the root level raised above CRITICAL, so
loggers stay usable but nothing is printed.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging(log_level="DEBUG")

    logger = get_module_logger()
    logger.info("templates_localized", count=3)
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from infrastructure.configuration import settings

SILENT_LEVEL = logging.CRITICAL + 1

_CALLSITE_FIELDS = (
    structlog.processors.CallsiteParameter.FILENAME,
    structlog.processors.CallsiteParameter.LINENO,
    structlog.processors.CallsiteParameter.FUNC_NAME,
)


def running_under_pytest() -> bool:
    return "pytest" in sys.modules


def resolve_level(name: Optional[str]) -> int:
    """Map a level name such as "debug" to its logging constant.

    Unknown or empty names resolve to INFO.
    """
    if not name:
        return logging.INFO
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def build_processors(json_output: bool) -> List[Processor]:
    """Processor chain ending in the renderer for the output format.

    Args:
        json_output: Render JSON lines instead of colored console output.
    """
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(parameters=list(_CALLSITE_FIELDS)),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    quiet: Optional[bool] = None,
) -> BoundLogger:
    """Install the structlog configuration and return a root logger.

    Args:
        log_level: Level name; defaults to settings.LOG_LEVEL.
        is_production: JSON output when true; defaults to settings.is_production.
        quiet: Discard every record; defaults to True under pytest.

    Returns:
        Logger bound to the new configuration.
    """
    if quiet is None:
        quiet = running_under_pytest()
    if is_production is None:
        is_production = settings.is_production

    level = SILENT_LEVEL if quiet else resolve_level(log_level or settings.LOG_LEVEL)

    structlog.configure(
        processors=build_processors(json_output=is_production),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    # force=True so a second call (tests, CLI flag parsing) replaces the
    # handler installed by the import-time call.
    logging.basicConfig(format="%(message)s", level=level, force=True)

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Logger bound to the importing module's name.

    Binds "module_path" (dotted module name) and "component" (its last
    segment), so `logger = get_module_logger()` in
    infrastructure/i18n/loader.py tags events with component="loader".
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module_name = caller.f_globals.get("__name__") if caller is not None else None

    if not module_name:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
