"""Domain models package."""

from .accounts import Account, AccountType, NewAccount, NormalBalance
from .journal import JournalEntry, JournalLine, JournalLineSide, NewJournalEntry
from .periods import NewPeriod, Period, PeriodStatus

__all__ = [
    "Account",
    "AccountType",
    "NewAccount",
    "NormalBalance",
    "JournalEntry",
    "JournalLine",
    "JournalLineSide",
    "NewJournalEntry",
    "NewPeriod",
    "Period",
    "PeriodStatus",
]
