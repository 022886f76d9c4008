"""Structured logging for proctop.

Stdout belongs to the process table, so log events are rendered as
key/value lines on stderr. The default level is WARNING, which keeps the
per-process debug events (vanished processes, unreadable sources) silent.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure(level: int = logging.WARNING) -> None:
    """Configure structlog to write filtered key/value lines to stderr.

    Args:
        level: Minimum stdlib log level to emit.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S", utc=False),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(
                key_order=["timestamp", "level", "event"], drop_missing=True
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Get a structlog logger, optionally bound to a component name."""
    if name is None:
        return structlog.get_logger()
    return structlog.get_logger(component=name)
