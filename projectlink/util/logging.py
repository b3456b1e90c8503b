"""Stdlib logging setup for uvicorn, SQLAlchemy and scripts.

Application events go through logfire; this only decides what the
standard library loggers print.
"""

import logging
import sys

from projectlink.config import Settings

_LEVELS = {
    "production": logging.WARNING,
    "staging": logging.INFO,
    "development": logging.INFO,
    "test": logging.WARNING,
}

# Library loggers that are too chatty below WARNING
_QUIET = ("sqlalchemy.engine", "sqlalchemy.pool", "asyncpg", "alembic.runtime")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger from the environment.

    ``DEBUG=true`` forces DEBUG everywhere except the quiet library loggers.
    """
    level = logging.DEBUG if settings.debug else _LEVELS[settings.environment]

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in _QUIET:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    if settings.environment == "production":
        # Request spans already come from logfire
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
