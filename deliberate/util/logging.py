"""Stdlib logging for entry points.

The API itself reports through logfire. Plain ``logging`` covers the scripts
and the third-party libraries that log through it (uvicorn, alembic).
"""

import logging
import sys

from deliberate.config import Settings

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Chatty libraries held at WARNING unless debugging
_QUIET_LOGGERS = ("sqlalchemy.engine", "asyncpg", "alembic.runtime.migration")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the current environment.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    quiet_level = level if settings.debug else logging.WARNING
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    logging.getLogger("deliberate").setLevel(level)

    get_logger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, usually ``get_logger(__name__)``."""
    return logging.getLogger(name)
