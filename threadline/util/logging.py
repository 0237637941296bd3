"""Stdlib logging for third-party libraries.

Threadline's own code logs through logfire; this only sets the root logger
up so uvicorn, SQLAlchemy and httpx messages land on stdout too.
"""

import logging
import sys

from threadline.config import Settings

# Libraries that are chatty at INFO
_QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "asyncio")


def log_level_for(settings: Settings) -> int:
    """DEBUG in debug mode, WARNING in production, INFO otherwise."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger on stdout.

    Args:
        settings: Application settings
    """
    level = log_level_for(settings)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
