"""
Typed lookup repositories for the closed-enumeration tables.

Specialized Methods:
- LoginTypeRepository.get_by_name(LoginTypeName) -> Optional[LoginType]
- AuthenticationMethodRepository.get_by_name(AuthenticationMethodName)
  -> Optional[AuthenticationMethod]

Both translate the enum member to its stored string and reuse the single
unique-attribute lookup of GenericRepository.
"""

from typing import Optional, Union

from sqlalchemy.orm import sessionmaker

from clinical_users.database.repositories.base import GenericRepository
from clinical_users.models import (
    AuthenticationMethod,
    AuthenticationMethodName,
    LoginType,
    LoginTypeName,
)


class LoginTypeRepository(GenericRepository[LoginType, int]):
    """Access to the login_types table."""

    def __init__(self, session_factory: sessionmaker):
        super().__init__(LoginType, session_factory)

    def get_by_name(self, name: Union[LoginTypeName, str]) -> Optional[LoginType]:
        """
        Gets the login type with the given name.

        Raises:
            ValueError: If name is not a LoginTypeName value
        """
        return self.get_unique_by_attribute(LoginType.name, LoginTypeName(name).value)


class AuthenticationMethodRepository(GenericRepository[AuthenticationMethod, int]):
    """Access to the authentication_methods table."""

    def __init__(self, session_factory: sessionmaker):
        super().__init__(AuthenticationMethod, session_factory)

    def get_by_name(
        self, name: Union[AuthenticationMethodName, str]
    ) -> Optional[AuthenticationMethod]:
        """
        Gets the authentication method with the given name.

        Raises:
            ValueError: If name is not an AuthenticationMethodName value
        """
        return self.get_unique_by_attribute(
            AuthenticationMethod.name, AuthenticationMethodName(name).value
        )
