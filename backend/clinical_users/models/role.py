"""Role database model."""

from sqlalchemy import Boolean, Column, String

from clinical_users.models.base import BaseModel


class Role(BaseModel):
    """Named permission bundle assigned to users."""

    __tablename__ = "roles"

    name = Column(String(100), unique=True, nullable=False, index=True)
    is_default = Column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Role {self.name}>"
