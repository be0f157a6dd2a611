"""Shared fixtures for ledger tests."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.pool import StaticPool

from src.infrastructure import db as db_module
from src.infrastructure.clock import FixedClock
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.schema import create_schema

FIXED_NOW = datetime(2025, 3, 31, 18, 0, tzinfo=timezone.utc)


@pytest.fixture
def sqlite_engine():
    """In-memory SQLite engine with the ledger schema and foreign keys on."""
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    event.listen(engine, "connect", db_module._enable_sqlite_foreign_keys)
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_port(sqlite_engine):
    return SqlAlchemyDatabaseEngineAdapter(engine=sqlite_engine)


@pytest.fixture
def fixed_clock():
    return FixedClock(FIXED_NOW)


@pytest.fixture
def fake_logger():
    return MagicMock()
