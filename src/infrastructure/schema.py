"""SQLAlchemy Core tables of the ledger store.

Every table carries ``tenant_id`` and every query filters on it.
"""

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.engine import Engine

metadata = MetaData()

accounts = Table(
    "accounts",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("tenant_id", String(64), nullable=False),
    Column("code", String(20), nullable=False),
    Column("name", String(100), nullable=False),
    Column("account_type", String(16), nullable=False),
    Column("normal_balance", String(8), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint("tenant_id", "code", name="uq_accounts_tenant_code"),
)

journal_entries = Table(
    "journal_entries",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("tenant_id", String(64), nullable=False),
    Column("entry_number", String(50), nullable=True),
    Column("description", String(500), nullable=False),
    Column("entry_date", Date, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Index("ix_journal_entries_tenant_date", "tenant_id", "entry_date"),
)

journal_lines = Table(
    "journal_lines",
    metadata,
    Column("id", String(36), primary_key=True),
    Column(
        "journal_entry_id",
        String(36),
        ForeignKey("journal_entries.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("account_id", String(36), ForeignKey("accounts.id"), nullable=False),
    Column("position", Integer, nullable=False),
    Column("amount", Numeric(18, 2), nullable=False),
    Column("side", String(8), nullable=False),
)

periods = Table(
    "periods",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("tenant_id", String(64), nullable=False),
    Column("name", String(100), nullable=False),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date, nullable=False),
    Column("status", String(8), nullable=False),
    Column("closed_at", DateTime(timezone=True), nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint("tenant_id", "name", name="uq_periods_tenant_name"),
)


def create_schema(engine: Engine) -> None:
    """Create any missing ledger tables."""
    metadata.create_all(engine)


__all__ = [
    "metadata",
    "accounts",
    "journal_entries",
    "journal_lines",
    "periods",
    "create_schema",
]
