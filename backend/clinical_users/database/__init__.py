"""
Database module initialization.
Exports database components for use throughout the application.
"""

from clinical_users.database.base import (
    Base,
    create_engine_from_config,
    create_session_factory,
    drop_db,
    init_db,
)
from clinical_users.database.session import unit_of_work

__all__ = [
    # Engine and schema
    "Base",
    "create_engine_from_config",
    "create_session_factory",
    "init_db",
    "drop_db",
    # Transactions
    "unit_of_work",
]
