"""Helpers for building domain objects before they are persisted."""

from clinical_users.services.user_factory import UserFactory

__all__ = ["UserFactory"]
