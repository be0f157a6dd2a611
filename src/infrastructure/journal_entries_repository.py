"""SQLAlchemy-backed repository for journal entries and their lines."""

from collections import defaultdict
from decimal import Decimal
import uuid

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.clock import ClockPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.journal_entries_repository import (
    JournalEntriesRepositoryPort,
)
from src.domain.models.journal import (
    JournalEntry,
    JournalLine,
    JournalLineSide,
    NewJournalEntry,
)
from src.domain.results import Outcome, Success
from src.infrastructure.clock import SystemClock
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.repository_errors import failure_from_exception
from src.infrastructure.schema import journal_entries, journal_lines


def _to_line(row) -> JournalLine:
    return JournalLine(
        account_id=row.account_id,
        amount=Decimal(str(row.amount)),
        side=JournalLineSide(row.side),
    )


def _to_entry(row, lines: list[JournalLine]) -> JournalEntry:
    return JournalEntry(
        id=row.id,
        tenant_id=row.tenant_id,
        description=row.description,
        date=row.entry_date,
        lines=tuple(lines),
        entry_number=row.entry_number,
        created_at=row.created_at,
    )


class SqlAlchemyJournalEntriesRepository(JournalEntriesRepositoryPort):
    """Repository persisting entries and lines in one transaction.

    Either the header and every line are stored, or nothing is.
    """

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        clock: ClockPort | None = None,
        logger=None,
    ) -> None:
        self._db_port = db_port
        self._clock = clock or SystemClock()
        self._logger = logger or get_app_logger()

    def create_entry(self, entry: NewJournalEntry) -> Outcome[JournalEntry]:
        """Insert the entry header and its ordered lines atomically.

        Args:
            entry: Validated, balanced entry.

        Returns:
            Outcome[JournalEntry]: The stored entry or an infrastructure
            failure.
        """
        created = JournalEntry(
            id=str(uuid.uuid4()),
            tenant_id=entry.tenant_id,
            description=entry.description,
            date=entry.date,
            lines=tuple(entry.lines),
            entry_number=entry.entry_number,
            created_at=self._clock.now(),
        )
        line_rows = [
            {
                "id": str(uuid.uuid4()),
                "journal_entry_id": created.id,
                "account_id": line.account_id,
                "position": position,
                "amount": line.amount,
                "side": line.side.value,
            }
            for position, line in enumerate(created.lines)
        ]
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                conn.execute(
                    journal_entries.insert().values(
                        id=created.id,
                        tenant_id=created.tenant_id,
                        entry_number=created.entry_number,
                        description=created.description,
                        entry_date=created.date,
                        created_at=created.created_at,
                    )
                )
                conn.execute(journal_lines.insert(), line_rows)
        except SQLAlchemyError as exc:
            return failure_from_exception(exc, "create_journal_entry", self._logger)
        return Success(created)

    def find_by_id(
        self,
        tenant_id: str,
        entry_id: str,
    ) -> Outcome[JournalEntry | None]:
        """Fetch one entry with its lines; None when the tenant has no such entry."""
        query = select(journal_entries).where(
            journal_entries.c.tenant_id == tenant_id,
            journal_entries.c.id == entry_id,
        )
        fetched = self._fetch_entries(query, "find_journal_entry_by_id")
        if not isinstance(fetched, Success):
            return fetched
        return Success(fetched.value[0] if fetched.value else None)

    def list_entries(
        self,
        tenant_id: str,
        skip: int = 0,
        take: int | None = None,
    ) -> Outcome[list[JournalEntry]]:
        """List a tenant's entries by date, newest first.

        Args:
            tenant_id: Owning tenant.
            skip: Number of entries to skip.
            take: Maximum number of entries, or None for all.

        Returns:
            Outcome[list[JournalEntry]]: Entries with their ordered lines.
        """
        query = (
            select(journal_entries)
            .where(journal_entries.c.tenant_id == tenant_id)
            .order_by(
                journal_entries.c.entry_date.desc(),
                journal_entries.c.created_at.desc(),
            )
            .offset(skip)
        )
        if take is not None:
            query = query.limit(take)
        return self._fetch_entries(query, "list_journal_entries")

    def _fetch_entries(self, query, operation: str) -> Outcome[list[JournalEntry]]:
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                headers = conn.execute(query).all()
                ids = [row.id for row in headers]
                line_rows = []
                if ids:
                    line_rows = conn.execute(
                        select(journal_lines)
                        .where(journal_lines.c.journal_entry_id.in_(ids))
                        .order_by(
                            journal_lines.c.journal_entry_id,
                            journal_lines.c.position,
                        )
                    ).all()
        except SQLAlchemyError as exc:
            return failure_from_exception(exc, operation, self._logger)

        lines_by_entry: dict[str, list[JournalLine]] = defaultdict(list)
        for row in line_rows:
            lines_by_entry[row.journal_entry_id].append(_to_line(row))
        return Success([_to_entry(row, lines_by_entry[row.id]) for row in headers])


__all__ = ["SqlAlchemyJournalEntriesRepository"]
