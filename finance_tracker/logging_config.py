"""Structured logging setup built on structlog."""

import logging
import sys

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars

from finance_tracker.config import settings

__all__ = ["configure_logging", "get_logger", "bind_contextvars", "clear_contextvars"]


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Log level name, defaults to LOG_LEVEL
        fmt: "console" or "json", defaults to LOG_FORMAT
    """
    level_name = (level or settings.log_level).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    use_json = (fmt or settings.log_format).lower() == "json"

    # Library loggers (sqlalchemy, httpx) go through stdlib logging
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric_level)

    processors = [
        merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if use_json:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Get a structlog logger bound to a module name.

    Bound as ``logger_name`` because ``logger`` is a reserved argument of
    ``structlog.get_logger``.
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()
