"""Structured logging configuration using structlog.

Everything is written to stderr. ``configure_logging`` is for entry points
that own the process; ``ensure_logging`` is what the cache client calls so
that a host application which never configured structlog still gets its
connection errors on stderr rather than structlog's stdout default.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars

if TYPE_CHECKING:
    from kvcache_core.config.settings import Settings

_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(settings: Settings) -> None:
    """Route structlog through stdlib logging with a JSON or console renderer."""
    shared_processors = _shared_processors()

    if settings.log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    level = _resolve_level(settings.log_level)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # redis-py logs every reconnect attempt at DEBUG
    logging.getLogger("redis").setLevel(max(level, logging.WARNING))


def ensure_logging() -> None:
    """Send structlog output to stderr unless the host already configured it."""
    if structlog.is_configured():
        return
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        logger_factory=_stderr_logger,
    )


def bind_context(**values: object) -> None:
    """Bind key/value pairs to all subsequent log entries via contextvars."""
    bind_contextvars(**values)


def clear_context() -> None:
    """Clear all bound context variables."""
    clear_contextvars()


def _stderr_logger(*args: object) -> structlog.PrintLogger:
    """Build a PrintLogger on whatever ``sys.stderr`` is at call time."""
    return structlog.PrintLogger(file=sys.stderr)


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _resolve_level(level_name: str) -> int:
    """Convert a level name string to a logging level int."""
    return _LEVELS.get(level_name.upper(), logging.INFO)
