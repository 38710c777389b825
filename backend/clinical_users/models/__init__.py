"""Database models module."""

from clinical_users.models.enums import AuthenticationMethodName, LoginTypeName
from clinical_users.models.login_type import AuthenticationMethod, LoginType
from clinical_users.models.role import Role
from clinical_users.models.user import User, user_roles

__all__ = [
    "AuthenticationMethod",
    "AuthenticationMethodName",
    "LoginType",
    "LoginTypeName",
    "Role",
    "User",
    "user_roles",
]
