"""Database engine helpers for the ledger store.

Engines are created lazily from the ``LEDGER_DB_URL`` environment variable
(loaded from ``.env`` when present) and cached for the process lifetime.
"""

import os

import dotenv
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort

_ledger_engine: Engine | None = None


def _get_env_var(name: str) -> str:
    """Return a required environment variable.

    Args:
        name: Variable name.

    Returns:
        str: Variable value.

    Raises:
        RuntimeError: If the variable is not set.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Environment variable {name} is not set.")
    return value


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _create_engine(db_url: str, echo: bool = False) -> Engine:
    """Create an engine with a bounded, health-checked pool.

    SQLite URLs keep SQLAlchemy's default pool and get foreign keys enforced.
    """
    if db_url.startswith("sqlite"):
        engine = create_engine(db_url, echo=echo, future=True)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        echo=echo,
        future=True,
    )


def get_ledger_engine(echo: bool = False) -> Engine:
    """Return the cached ledger engine, creating it on first use."""
    global _ledger_engine
    if _ledger_engine is None:
        _ledger_engine = _create_engine(_get_env_var("LEDGER_DB_URL"), echo=echo)
    return _ledger_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Adapter exposing the ledger engine through the database port.

    An explicit engine may be injected; otherwise the process-wide engine
    is used.
    """

    def __init__(self, engine: Engine | None = None, echo: bool = False) -> None:
        self._engine = engine
        self._echo = echo

    def get_ledger_engine(self) -> Engine:
        if self._engine is not None:
            return self._engine
        return get_ledger_engine(echo=self._echo)


__all__ = [
    "get_ledger_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
