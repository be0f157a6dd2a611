"""Application ports package."""

from .accounts_repository import AccountsRepositoryPort
from .clock import ClockPort
from .database import DatabaseEnginePort
from .journal_entries_repository import JournalEntriesRepositoryPort
from .periods_repository import PeriodsRepositoryPort

__all__ = [
    "AccountsRepositoryPort",
    "ClockPort",
    "DatabaseEnginePort",
    "JournalEntriesRepositoryPort",
    "PeriodsRepositoryPort",
]
