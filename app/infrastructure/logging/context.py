"""Build context binding for structured logging.

Binds build-scoped context to logs so every entry emitted while a batch of
templates is localized carries the same build identifier.

Usage:
    from infrastructure.logging import bind_build_context

    with bind_build_context(project="Auth0 Email Templates"):
        logger.info("localizing_templates")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_build_context(
    build_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind build-scoped context to all logs within the context manager.

    Args:
        build_id: Unique build identifier. Auto-generated if not provided.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        The build identifier bound for the duration of the block.
    """
    context: dict[str, Any] = {"build_id": build_id or str(uuid.uuid4())}
    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["build_id"]
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_build_id() -> Optional[str]:
    """Get the current build identifier from the logging context.

    Returns:
        The build id if set, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("build_id")
