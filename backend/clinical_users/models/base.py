"""Base model utilities for SQLAlchemy."""

from sqlalchemy import Column, Integer

from clinical_users.database.base import Base


class IdentityMixin:
    """Mixin that adds an auto-incrementing integer primary key."""

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Unique identifier"
    )


class BaseModel(IdentityMixin, Base):
    """
    Base model class for all clinical user models.

    Provides:
    - Integer primary key
    """
    __abstract__ = True
