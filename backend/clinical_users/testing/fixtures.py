"""
Seeds the data store with a small, known graph of entities to test against
and removes it afterwards.

Setup order:
1. researcher role (default) and admin role
2. INTERNAL login type and LOCAL authentication method, created if missing
3. a researcher user and an admin user holding both roles

Each step commits through the matching repository, in its own unit of
work. Teardown deletes every user and every role; login types and
authentication methods are reference data and stay in the store.
"""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Generator, Optional

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from clinical_users.config import FixtureConfig
from clinical_users.database.repositories import (
    AuthenticationMethodRepository,
    GenericRepository,
    LoginTypeRepository,
    RoleRepository,
    UserRepository,
)
from clinical_users.database.session import unit_of_work
from clinical_users.exceptions import FixtureSetupError, PasswordHashError
from clinical_users.models import (
    AuthenticationMethod,
    AuthenticationMethodName,
    LoginType,
    LoginTypeName,
    Role,
    User,
)
from clinical_users.security import hash_password
from clinical_users.services import UserFactory
from clinical_users.testing.dependencies import missing_prerequisites, teardown_order

logger = logging.getLogger(__name__)

RESEARCHER_ROLE = "researcher"
ADMIN_ROLE = "admin"

# (name, is_default)
ROLE_SEEDS: tuple[tuple[str, bool], ...] = (
    (RESEARCHER_ROLE, True),
    (ADMIN_ROLE, False),
)


@dataclass(frozen=True)
class UserSeed:
    """Fixed attributes of a seeded user."""

    email: str
    first_name: str
    last_name: str
    roles: tuple[str, ...]


USER_SEEDS: tuple[UserSeed, ...] = (
    UserSeed("user@emory.edu", "Regular", "User", (RESEARCHER_ROLE,)),
    UserSeed("admin.user@emory.edu", "Admin", "User", (RESEARCHER_ROLE, ADMIN_ROLE)),
)


class TestDataProvider(ABC):
    """Bootstraps and retracts the data an integration test runs against."""

    __test__ = False

    @abstractmethod
    def set_up(self) -> None:
        """Populate the store."""

    @abstractmethod
    def tear_down(self) -> None:
        """Remove what set_up created."""


class FixtureOrchestrator(TestDataProvider):
    """
    Seeds roles, lookup rows and users in dependency order.

    Password hashing failures abort setup with FixtureSetupError; rows
    committed by earlier steps stay. Database errors propagate unchanged.

    Example:
        orchestrator = FixtureOrchestrator(SessionLocal, settings.fixtures)
        with orchestrator.seeded():
            ...
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        config: Optional[FixtureConfig] = None,
    ):
        self._session_factory = session_factory
        self.config = config or FixtureConfig()

        self.login_type_repository = LoginTypeRepository(session_factory)
        self.authentication_method_repository = AuthenticationMethodRepository(
            session_factory
        )
        self.role_repository = RoleRepository(session_factory)
        self.user_repository = UserRepository(session_factory)
        self._user_factory = UserFactory(
            self.login_type_repository, self.authentication_method_repository
        )
        self._repositories: dict[type, GenericRepository] = {
            Role: self.role_repository,
            LoginType: self.login_type_repository,
            AuthenticationMethod: self.authentication_method_repository,
            User: self.user_repository,
        }

        self.roles: dict[str, Role] = {}
        self.login_types: list[LoginType] = []
        self.authentication_methods: list[AuthenticationMethod] = []
        self.users: dict[str, User] = {}
        self._seeded: set[type] = set()

    # ============================================================
    # Lifecycle
    # ============================================================

    def set_up(self) -> None:
        """
        Create the test data graph.

        Raises:
            FixtureSetupError: If a user password cannot be hashed, or a step
                runs before its prerequisites were seeded
        """
        logger.info("Seeding test data")
        self._seeded.clear()
        self.roles = {}
        self.users = {}

        for name, is_default in ROLE_SEEDS:
            self.roles[name] = self._create_role(name, is_default)

        self.login_types = [self._ensure_login_type(LoginTypeName.INTERNAL)]
        self.authentication_methods = [
            self._ensure_authentication_method(AuthenticationMethodName.LOCAL)
        ]

        for seed in USER_SEEDS:
            self.users[seed.email] = self._create_user(seed)

        logger.info(
            f"Seeded {len(self.roles)} roles and {len(self.users)} users"
        )

    def tear_down(self) -> None:
        """Delete all test-data rows, dependents first."""
        for entity_type in teardown_order():
            self._remove_all(entity_type)
            self._seeded.discard(entity_type)

        self.roles = {}
        self.users = {}

    @contextmanager
    def seeded(self) -> Generator["FixtureOrchestrator", None, None]:
        """Run set_up, yield, and always run tear_down on exit."""
        try:
            self.set_up()
            yield self
        finally:
            self.tear_down()

    # ============================================================
    # Setup steps
    # ============================================================

    def _check_prerequisites(self, entity_type: type) -> None:
        missing = missing_prerequisites(entity_type, self._seeded)
        if missing:
            names = ", ".join(t.__name__ for t in missing)
            logger.error(f"Prerequisites missing for {entity_type.__name__}: {names}")
            raise FixtureSetupError(
                f"Cannot create {entity_type.__name__} before {names}"
            )

    def _persist(self, entity):
        entity_type = type(entity)
        self._check_prerequisites(entity_type)
        self._repositories[entity_type].persist(entity)
        self._seeded.add(entity_type)
        return entity

    def _create_role(self, name: str, is_default: bool) -> Role:
        role = self._persist(Role(name=name, is_default=is_default))
        logger.info(f"Created role {name} (id={role.id})")
        return role

    def _ensure_login_type(self, name: LoginTypeName) -> LoginType:
        existing = self.login_type_repository.get_by_name(name)
        if existing is not None:
            logger.debug(f"Login type {name.value} already present")
            self._seeded.add(LoginType)
            return existing
        return self._persist(LoginType(name=name.value, description=name.value))

    def _ensure_authentication_method(
        self, name: AuthenticationMethodName
    ) -> AuthenticationMethod:
        existing = self.authentication_method_repository.get_by_name(name)
        if existing is not None:
            logger.debug(f"Authentication method {name.value} already present")
            self._seeded.add(AuthenticationMethod)
            return existing
        return self._persist(
            AuthenticationMethod(name=name.value, description=name.value)
        )

    def _create_user(self, seed: UserSeed) -> User:
        self._check_prerequisites(User)

        try:
            password_hash = hash_password(
                self.config.password, self.config.password_hash_algorithm
            )
        except PasswordHashError as e:
            logger.error(f"Aborting setup: cannot hash the password for {seed.email}")
            raise FixtureSetupError(
                f"Could not hash the password for {seed.email}"
            ) from e

        user = self._user_factory.new_local_user()
        user.password_hash = password_hash
        user.active = True
        user.verified = True
        user.email = seed.email
        user.username = seed.email
        user.first_name = seed.first_name
        user.last_name = seed.last_name
        user.organization = self.config.organization
        user.last_login = datetime.now(timezone.utc)
        user.roles = [self.roles[name] for name in seed.roles]
        self._persist(user)

        logger.info(f"Created user {user.username} with roles {sorted(seed.roles)}")
        return user

    # ============================================================
    # Teardown
    # ============================================================

    def _remove_all(self, entity_type: type) -> None:
        with unit_of_work(self._session_factory) as session:
            entities = list(session.execute(select(entity_type)).scalars().all())
            logger.info(f"Deleting {entity_type.__name__}; count: {len(entities)}")
            for i, entity in enumerate(entities, start=1):
                logger.debug(f"on {i}; {entity!r}")
                session.flush()
                session.delete(entity)
