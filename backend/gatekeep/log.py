"""Structured logging setup.

gatekeep never configures logging on import. Applications that want the
library's events rendered the gatekeep way call configure_logging() once:

    from gatekeep.log import configure_logging
    configure_logging()
"""

import logging
from typing import Optional

import structlog

from gatekeep.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog from settings (defaults to get_settings())."""
    settings = settings or get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )

    structlog.get_logger().debug("logging_configured", level=settings.LOG_LEVEL, debug=settings.DEBUG)
