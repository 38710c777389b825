"""RoleRepository: name lookup over the roles table."""

from typing import Optional

from sqlalchemy.orm import sessionmaker

from clinical_users.database.repositories.base import GenericRepository
from clinical_users.models import Role


class RoleRepository(GenericRepository[Role, int]):

    def __init__(self, session_factory: sessionmaker):
        super().__init__(Role, session_factory)

    def get_by_name(self, name: str) -> Optional[Role]:
        return self.get_unique_by_attribute(Role.name, name)
