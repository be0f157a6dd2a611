"""Port for tenant-scoped journal entry storage."""

from typing import Protocol

from src.domain.models.journal import JournalEntry, NewJournalEntry
from src.domain.results import Outcome


class JournalEntriesRepositoryPort(Protocol):
    """Port exposing journal entry persistence."""

    def create_entry(self, entry: NewJournalEntry) -> Outcome[JournalEntry]:
        """Persist the entry and all of its lines as one atomic unit."""

    def find_by_id(
        self,
        tenant_id: str,
        entry_id: str,
    ) -> Outcome[JournalEntry | None]:
        """Return the entry with its lines, or None."""

    def list_entries(
        self,
        tenant_id: str,
        skip: int = 0,
        take: int | None = None,
    ) -> Outcome[list[JournalEntry]]:
        """Return the tenant's entries, newest date first."""


__all__ = ["JournalEntriesRepositoryPort"]
