"""Logging setup and Logfire cloud instrumentation."""

import logging
from logging.config import dictConfig

import logfire
from sqlalchemy.engine import Engine

from clinical_users import __version__
from clinical_users.config import Settings

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure console logging for the service and its test harness."""
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                    "datefmt": "%H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "root": {"level": settings.log_level, "handlers": ["console"]},
            "loggers": {
                # SQL statements are traced through Logfire instead
                "sqlalchemy.engine": {"level": "WARNING"},
            },
        }
    )


def initialize_logfire(settings: Settings, engine: Engine | None = None) -> None:
    """
    Initialize Logfire and bridge Python logging to it.

    Call once at startup, after the engine is created so its queries are
    traced.

    Args:
        settings: Application settings containing the Logfire token
        engine: SQLAlchemy engine to instrument, if any
    """
    if not settings.logfire_token:
        logger.warning("Logfire token not set - observability disabled")
        return

    try:
        logfire.configure(
            token=settings.logfire_token,
            service_name="clinical-users",
            service_version=__version__,
            environment=settings.environment,
        )

        if engine is not None:
            logfire.instrument_sqlalchemy(engine=engine)

        root_logger = logging.getLogger()
        root_logger.addHandler(logfire.LogfireLoggingHandler())

        logger.info("Logfire cloud tracking initialized")

    except Exception as e:
        # Observability is optional; the service keeps running without it
        logger.warning(f"Failed to initialize Logfire: {e}")
