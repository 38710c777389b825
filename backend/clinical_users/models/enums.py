"""Closed enumerations stored in the name column of lookup tables."""

from enum import Enum


class LoginTypeName(str, Enum):
    """How a user signs in."""

    INTERNAL = "INTERNAL"
    PROVIDER = "PROVIDER"


class AuthenticationMethodName(str, Enum):
    """Where a user's credentials are verified."""

    LOCAL = "LOCAL"
    LDAP = "LDAP"
    OAUTH = "OAUTH"
