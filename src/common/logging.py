"""Structured logging configuration (structlog)."""

from __future__ import annotations

import structlog

from src.common.constants import DEFAULT_LOG_LEVEL

LOGGER_PREFIX = "stats"


def configure_structlog(level: int = DEFAULT_LOG_LEVEL) -> None:
    """Configure structlog for human-readable console output.

    The library itself only asks for loggers; an application with no
    structlog setup of its own calls this once at startup.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Return the library logger for module *name*, e.g. ``stats.summary``."""
    return structlog.get_logger(f"{LOGGER_PREFIX}.{name}")
