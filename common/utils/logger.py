"""Shared structured logging configuration for SimpleMemoryStore."""

from __future__ import annotations

import logging
import sys

import structlog


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def configure_logging(
    service_name: str, *, level: int | str = logging.INFO
) -> structlog.stdlib.BoundLogger:
    """Configure structlog for JSON output and return a service-bound logger."""

    level = _resolve_level(level)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
    return structlog.get_logger(service=service_name)


def get_logger(service_name: str, **initial_values: object) -> structlog.stdlib.BoundLogger:
    """Return a lazily bound logger without mutating global configuration.

    ``initial_values`` (for example ``component``) are attached to every event.
    """

    return structlog.get_logger(service=service_name, **initial_values)


__all__ = ["configure_logging", "get_logger"]
