"""Structlog configuration for tokend.

Events are rendered as colored console lines for interactive use and as
JSON lines otherwise. Sensitive values never reach the logger: probes only
receive identifiers, policy codes and error descriptions.
"""

import logging
import os
import sys

import structlog

from infrastructure.settings import get_settings

# Storage driver loggers stay at WARNING or above, whatever the app level
_DRIVER_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "asyncpg")


def _use_colors() -> bool:
    # FORCE_COLOR=1 enables colors even in non-TTY environments (like Docker)
    force_color = os.environ.get("FORCE_COLOR", "").lower() in ("1", "true", "yes")
    return force_color or sys.stdout.isatty()


def _renderers(use_colors: bool) -> list[structlog.types.Processor]:
    if use_colors:
        return [structlog.dev.ConsoleRenderer(colors=True)]
    return [
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def configure_logging(level: str | None = None) -> None:
    """Configure structlog for the process.

    Args:
        level: Minimum level name; defaults to the configured log level
    """
    level_name = (level or get_settings().log_level).upper()
    min_level = logging.getLevelNamesMapping().get(level_name, logging.INFO)

    for name in _DRIVER_LOGGERS:
        logging.getLogger(name).setLevel(max(min_level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            *_renderers(_use_colors()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
