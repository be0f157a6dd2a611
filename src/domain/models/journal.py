"""Domain models for journal entries."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


class JournalLineSide(str, Enum):
    """Side of a journal line."""

    DEBIT = "Debit"
    CREDIT = "Credit"


@dataclass(frozen=True)
class JournalLine:
    """Debit or credit against one account. Owned by its entry."""

    account_id: str
    amount: Decimal
    side: JournalLineSide


def _total(lines: tuple[JournalLine, ...], side: JournalLineSide) -> Decimal:
    return sum(
        (line.amount for line in lines if line.side == side),
        Decimal("0"),
    )


@dataclass(frozen=True)
class NewJournalEntry:
    """Validated journal entry waiting to be persisted."""

    tenant_id: str
    description: str
    date: date
    lines: tuple[JournalLine, ...]
    entry_number: str | None = None

    @property
    def total_debits(self) -> Decimal:
        return _total(self.lines, JournalLineSide.DEBIT)

    @property
    def total_credits(self) -> Decimal:
        return _total(self.lines, JournalLineSide.CREDIT)


@dataclass(frozen=True)
class JournalEntry:
    """Persisted, immutable journal entry.

    Attributes:
        id: Generated identifier.
        tenant_id: Owning tenant.
        description: Free-text description.
        date: Accounting date.
        lines: Ordered lines, at least two.
        entry_number: Optional external reference.
        created_at: Creation timestamp.
    """

    id: str
    tenant_id: str
    description: str
    date: date
    lines: tuple[JournalLine, ...]
    entry_number: str | None = None
    created_at: datetime | None = None

    @property
    def total_debits(self) -> Decimal:
        return _total(self.lines, JournalLineSide.DEBIT)

    @property
    def total_credits(self) -> Decimal:
        return _total(self.lines, JournalLineSide.CREDIT)


__all__ = ["JournalLineSide", "JournalLine", "NewJournalEntry", "JournalEntry"]
