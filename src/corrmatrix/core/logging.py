"""Structured logging for correlation computations.

Nothing is configured on import: the package only emits events through
structlog, and the embedding application decides where they go. Call
configure_logging() to get console or JSON output driven by Settings.

Usage:
    from corrmatrix.core.logging import configure_logging, get_logger, log_context

    # Configure at startup (optional)
    configure_logging()

    # Get logger in any module
    logger = get_logger(__name__)

    # Log with structured context
    logger.info("correlation_matrix_computed", columns=3, complete_rows=12)

    # Scope context to a block
    with log_context(dataset="regional_indicators"):
        logger.info("columns_dropped", dropped=["notes"])
"""

from __future__ import annotations

import logging
import sys
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Any, cast

import structlog
from structlog.typing import FilteringBoundLogger

if TYPE_CHECKING:
    from corrmatrix.core.config import Settings


def configure_logging(
    settings: Settings | None = None,
    show_timestamps: bool = True,
    color: bool = True,
) -> None:
    """Configure structlog output from settings.

    Only structlog is configured; stdlib logging handlers and levels are
    left untouched.

    Args:
        settings: Source of log_level and log_format (environment if None)
        show_timestamps: Whether to add ISO UTC timestamps
        color: Whether to use colors in console mode
    """
    if settings is None:
        from corrmatrix.core.config import get_settings

        settings = get_settings()

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if show_timestamps:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso", utc=True))

    if settings.log_format == "json":
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=color,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Bound structlog logger
    """
    return cast(FilteringBoundLogger, structlog.get_logger(name))


def log_context(**context: Any) -> AbstractContextManager[Any]:
    """Bind key-value pairs to every event logged inside the block.

    Usage:
        with log_context(dataset="abc"):
            logger.info("processing")  # Will include dataset
    """
    return structlog.contextvars.bound_contextvars(**context)
