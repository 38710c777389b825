"""LoginType and AuthenticationMethod lookup models."""

from sqlalchemy import Column, String

from clinical_users.models.base import BaseModel


class LoginType(BaseModel):
    """One row per LoginTypeName value."""

    __tablename__ = "login_types"

    # Holds LoginTypeName values
    name = Column(String(50), unique=True, nullable=False, index=True)
    description = Column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<LoginType {self.name}>"


class AuthenticationMethod(BaseModel):
    """One row per AuthenticationMethodName value."""

    __tablename__ = "authentication_methods"

    # Holds AuthenticationMethodName values
    name = Column(String(50), unique=True, nullable=False, index=True)
    description = Column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<AuthenticationMethod {self.name}>"
