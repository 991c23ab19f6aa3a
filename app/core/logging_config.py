"""
Logging configuration.

Configures the standard library logging tree once at start-up.
Modules obtain their own logger with ``logging.getLogger(__name__)``.
"""

import logging.config

from app.core.config import settings


def configure_logging(level: str | None = None) -> None:
    """Install the console handler and set levels for app and server loggers."""
    level = (level or settings.LOG_LEVEL).upper()

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "loggers": {
            "app": {"handlers": ["console"], "level": level, "propagate": False},
            "uvicorn": {"handlers": ["console"], "level": level, "propagate": False},
            # SQL echo is controlled by the engine, keep it quiet otherwise
            "sqlalchemy.engine": {"level": "INFO" if settings.DEBUG else "WARNING"},
        },
        "root": {"handlers": ["console"], "level": "WARNING"},
    })
