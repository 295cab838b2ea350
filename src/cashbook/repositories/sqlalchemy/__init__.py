"""SQLAlchemy repository implementations."""

from cashbook.repositories.sqlalchemy.database import (
    build_engine,
    build_session_factory,
    init_db,
    drop_db,
    Base,
)
from cashbook.repositories.sqlalchemy.transaction_repo import SqlAlchemyTransactionRepository

__all__ = [
    "build_engine",
    "build_session_factory",
    "init_db",
    "drop_db",
    "Base",
    "SqlAlchemyTransactionRepository",
]
