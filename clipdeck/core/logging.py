"""Structured logging setup.

Configures structlog on top of the stdlib logging module so that both
structlog loggers and third-party stdlib loggers (uvicorn, httpx) share
one level and one output stream.
"""

import logging
import sys

import structlog

from clipdeck.config.settings import Settings


def configure_logging(settings: Settings) -> None:
    """Install the structlog processor chain for the given settings.

    JSON lines are rendered outside development; development gets the
    console renderer.
    """
    level = getattr(logging, settings.log_level)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    renderer = (
        structlog.dev.ConsoleRenderer()
        if settings.is_development
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
