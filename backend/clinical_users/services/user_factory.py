"""Builds new user instances wired to their login type and authentication method."""

import logging

from clinical_users.database.repositories import (
    AuthenticationMethodRepository,
    LoginTypeRepository,
)
from clinical_users.models import AuthenticationMethodName, LoginTypeName, User

logger = logging.getLogger(__name__)


class UserFactory:
    """
    Creates transient User instances.

    The login type and authentication method are resolved by name; if the
    lookup row is missing the reference is left empty.
    """

    def __init__(
        self,
        login_types: LoginTypeRepository,
        authentication_methods: AuthenticationMethodRepository,
    ):
        self._login_types = login_types
        self._authentication_methods = authentication_methods

    def new_user(
        self,
        login_type: LoginTypeName,
        authentication_method: AuthenticationMethodName,
    ) -> User:
        """Return an unsaved user referencing the named lookup rows."""
        user = User()
        user.login_type = self._login_types.get_by_name(login_type)
        user.authentication_method = self._authentication_methods.get_by_name(
            authentication_method
        )
        if user.login_type is None or user.authentication_method is None:
            logger.warning(
                f"Missing lookup rows for {login_type.value}/"
                f"{authentication_method.value}; user left unlinked"
            )
        return user

    def new_local_user(self) -> User:
        """User that signs in with an internally managed password."""
        return self.new_user(LoginTypeName.INTERNAL, AuthenticationMethodName.LOCAL)
