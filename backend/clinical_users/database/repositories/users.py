"""
UserRepository

Specialized Methods:
- get_by_username(username) -> Optional[User]
"""

from typing import Optional

from sqlalchemy.orm import sessionmaker

from clinical_users.database.repositories.base import GenericRepository
from clinical_users.models import User


class UserRepository(GenericRepository[User, int]):
    """Access to the users table; roles load with each user."""

    def __init__(self, session_factory: sessionmaker):
        super().__init__(User, session_factory)

    def get_by_username(self, username: str) -> Optional[User]:
        """Fetch single user by username."""
        return self.get_unique_by_attribute(User.username, username)
