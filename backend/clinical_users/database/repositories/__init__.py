"""
Repository layer over SQLAlchemy sessions.

Repositories:
- GenericRepository: get-by-id, unique-attribute lookup, persist, remove
- LoginTypeRepository / AuthenticationMethodRepository: enum name lookups
- RoleRepository: role name lookup
- UserRepository: username lookup
"""

from clinical_users.database.repositories.base import GenericRepository
from clinical_users.database.repositories.lookups import (
    AuthenticationMethodRepository,
    LoginTypeRepository,
)
from clinical_users.database.repositories.roles import RoleRepository
from clinical_users.database.repositories.users import UserRepository

__all__ = [
    "AuthenticationMethodRepository",
    "GenericRepository",
    "LoginTypeRepository",
    "RoleRepository",
    "UserRepository",
]
