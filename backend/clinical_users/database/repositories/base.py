"""
GenericRepository

Entity-agnostic persistence operations, one unit of work per call.

Methods:
- get_by_id(id) -> Optional[EntityT]
- get_unique_by_attribute(attribute, value) -> Optional[EntityT]
- get_all() -> list[EntityT]
- persist(entity) -> EntityT: insert or update
- remove(entity) -> bool: False when there is no row to delete

Subclasses bind the model type and add domain lookups that delegate to
get_unique_by_attribute.
"""

import logging
from typing import Any, Generic, Optional, TypeVar, Union

from sqlalchemy import inspect, select
from sqlalchemy.exc import MultipleResultsFound
from sqlalchemy.orm import InstrumentedAttribute, sessionmaker

from clinical_users.database.session import unit_of_work
from clinical_users.exceptions import DataIntegrityError

# Type variables for generics
EntityT = TypeVar("EntityT")  # Mapped model type
IdT = TypeVar("IdT")  # Primary key type

logger = logging.getLogger(__name__)


class GenericRepository(Generic[EntityT, IdT]):
    """
    Base repository over a single mapped model.

    The session factory is provided by the caller; connection pooling
    belongs to its engine.

    Example:
        class RoleRepository(GenericRepository[Role, int]):
            def __init__(self, session_factory: sessionmaker):
                super().__init__(Role, session_factory)
    """

    def __init__(self, model: type[EntityT], session_factory: sessionmaker):
        self.model = model
        self._session_factory = session_factory

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def _resolve_attribute(
        self, attribute: Union[str, InstrumentedAttribute]
    ) -> InstrumentedAttribute:
        if isinstance(attribute, str):
            column = getattr(self.model, attribute, None)
            if not isinstance(column, InstrumentedAttribute):
                raise AttributeError(
                    f"{self.entity_name} has no mapped attribute '{attribute}'"
                )
            return column
        return attribute

    def get_by_id(self, entity_id: IdT) -> Optional[EntityT]:
        """Fetch single entity by primary key."""
        with unit_of_work(self._session_factory) as session:
            return session.get(self.model, entity_id)

    def get_unique_by_attribute(
        self,
        attribute: Union[str, InstrumentedAttribute],
        value: Any,
    ) -> Optional[EntityT]:
        """
        Fetch the single entity whose attribute equals value.

        Args:
            attribute: Column name or mapped attribute
            value: Value to match

        Returns:
            The matching entity, or None if no row matches

        Raises:
            DataIntegrityError: If more than one row matches
        """
        column = self._resolve_attribute(attribute)
        logger.debug(f"Lookup {self.entity_name}.{column.key} == {value!r}")

        with unit_of_work(self._session_factory) as session:
            result = session.execute(select(self.model).where(column == value))
            try:
                return result.scalar_one_or_none()
            except MultipleResultsFound as e:
                logger.error(
                    f"Integrity violation: several {self.entity_name} rows "
                    f"with {column.key}={value!r}"
                )
                raise DataIntegrityError(
                    f"Expected at most one {self.entity_name} with "
                    f"{column.key}={value!r}",
                    entity=self.entity_name,
                    attribute=column.key,
                    value=value,
                ) from e

    def get_all(self) -> list[EntityT]:
        """Fetch every row of the entity type."""
        with unit_of_work(self._session_factory) as session:
            result = session.execute(select(self.model))
            return list(result.scalars().all())

    def persist(self, entity: EntityT) -> EntityT:
        """
        Insert a new entity or update a detached one.

        Returns the same instance with its generated identity populated.
        """
        with unit_of_work(self._session_factory) as session:
            session.add(entity)
        return entity

    def remove(self, entity: EntityT) -> bool:
        """
        Delete the row behind a loaded or persisted entity.

        Returns:
            True if a row was deleted, False if the entity was never persisted
            or its row is already gone
        """
        state = inspect(entity)
        if not state.has_identity:
            logger.debug(f"Remove skipped: {self.entity_name} was never persisted")
            return False

        with unit_of_work(self._session_factory) as session:
            instance = session.get(self.model, state.identity)
            if instance is None:
                logger.debug(
                    f"Remove skipped: {self.entity_name} {state.identity} not found"
                )
                return False
            session.delete(instance)
        return True
