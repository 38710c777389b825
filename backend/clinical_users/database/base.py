"""
Declarative base, engine construction and session factory.

This module provides:
- Base: declarative base shared by every model
- create_engine_from_config(): engine for a DatabaseConfig
- create_session_factory(): sessionmaker used by repositories and fixtures
- init_db(): create the schema (tests and local runs only)
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from clinical_users.config import DatabaseConfig

logger = logging.getLogger(__name__)

Base = declarative_base()


def create_engine_from_config(config: DatabaseConfig) -> Engine:
    """
    Build an engine for the configured URL.

    In-memory SQLite gets a single shared connection so every session sees
    the same database.
    """
    kwargs: dict = {"echo": config.echo, "pool_pre_ping": config.pool_pre_ping}

    if config.url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in config.url or config.url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool

    engine = create_engine(config.url, **kwargs)
    logger.info(f"Created engine for {engine.url.render_as_string(hide_password=True)}")
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    """
    Create the session factory handed to repositories.

    expire_on_commit is off so entities stay readable after their unit of
    work closes.
    """
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


def init_db(engine: Engine) -> None:
    """Create all tables registered on Base."""
    # Registers the mapped classes on Base.metadata
    import clinical_users.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info(f"Created {len(Base.metadata.tables)} tables")


def drop_db(engine: Engine) -> None:
    """Drop all tables registered on Base."""
    import clinical_users.models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
