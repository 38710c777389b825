"""
Unit-of-work context manager.

Every repository call and every fixture step runs inside exactly one of
these scopes.
"""

from contextlib import contextmanager
from typing import Generator

from sqlalchemy.orm import Session, sessionmaker


@contextmanager
def unit_of_work(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """
    Open a session, commit on success and roll back on any exception.

    Usage:
        with unit_of_work(SessionLocal) as session:
            session.add(role)

    Yields:
        Session: SQLAlchemy session with an open transaction

    Ensures:
        - Pending changes are flushed then committed on normal exit
        - Rollback on error, the exception is re-raised
        - Session is closed on every exit path
    """
    session = session_factory()
    try:
        yield session
        session.flush()
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
