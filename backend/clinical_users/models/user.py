"""User database model and the user/role association table."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
)
from sqlalchemy.orm import relationship

from clinical_users.database.base import Base
from clinical_users.models.base import BaseModel


user_roles = Table(
    "user_roles",
    Base.metadata,
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "role_id",
        Integer,
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class User(BaseModel):
    """Local user account with its roles."""

    __tablename__ = "users"

    # Identity
    email = Column(String(255), nullable=False)
    username = Column(String(255), unique=True, nullable=False, index=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    organization = Column(String(255), nullable=True)

    # Credentials; never the plaintext password
    password_hash = Column(String(255), nullable=True)
    last_login = Column(DateTime(timezone=True), nullable=True)

    # Status
    active = Column(Boolean, nullable=False, default=False)
    verified = Column(Boolean, nullable=False, default=False)

    # Foreign keys
    login_type_id = Column(
        Integer,
        ForeignKey("login_types.id"),
        nullable=True,
        index=True,
    )
    authentication_method_id = Column(
        Integer,
        ForeignKey("authentication_methods.id"),
        nullable=True,
        index=True,
    )

    # Relationships
    roles = relationship("Role", secondary=user_roles, lazy="selectin")
    login_type = relationship("LoginType", lazy="joined")
    authentication_method = relationship("AuthenticationMethod", lazy="joined")

    @property
    def role_names(self) -> set[str]:
        """Names of the assigned roles."""
        return {role.name for role in self.roles}

    def __repr__(self) -> str:
        return f"<User {self.username}>"
