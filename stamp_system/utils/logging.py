"""Structured logging utilities using structlog for provider context and tracing."""

import sys
import uuid
from typing import Any, Optional
import structlog
from structlog.processors import JSONRenderer
from structlog.contextvars import merge_contextvars

from stamp_system.config.logging import use_console_output
from stamp_system.config.settings import settings


def configure_structured_logging() -> None:
    """
    Configure structlog from settings.log_format and settings.log_level.

    The renderer follows the loguru sink: colorized console output on an
    interactive terminal with LOG_FORMAT=console, JSON lines otherwise.
    """
    processors = [
        merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_console_output():
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
    else:
        processors.append(JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level.upper()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_structured_logger(
    name: str,
    **additional_context: Any,
) -> structlog.BoundLogger:
    """
    Get a structured logger with bound context.

    Args:
        name: Logger name (typically module name)
        **additional_context: Additional context to bind

    Returns:
        Configured BoundLogger instance with context

    Example:
        >>> logger = get_structured_logger("sources.subgraph", component="SubgraphClient")
        >>> logger.info("query_sent", url="https://...")
    """
    logger = structlog.get_logger(name)

    if additional_context:
        logger = logger.bind(**additional_context)

    return logger


def get_correlation_id() -> str:
    """
    Generate a correlation ID for tracing one verification request.

    Returns:
        UUID string for correlation
    """
    return str(uuid.uuid4())


def bind_provider_context(
    logger: structlog.BoundLogger,
    provider_type: str,
    correlation_id: Optional[str] = None,
) -> structlog.BoundLogger:
    """
    Bind provider context to an existing logger.

    Args:
        logger: Existing logger instance
        provider_type: Provider type identifier (e.g. "SelfStakingBronze")
        correlation_id: Optional correlation ID for tracing

    Returns:
        Logger with bound provider context
    """
    bound_logger = logger.bind(provider=provider_type)

    if correlation_id:
        bound_logger = bound_logger.bind(correlation_id=correlation_id)

    return bound_logger


# Configure on module import
configure_structured_logging()


__all__ = [
    "get_structured_logger",
    "get_correlation_id",
    "bind_provider_context",
    "configure_structured_logging",
]
