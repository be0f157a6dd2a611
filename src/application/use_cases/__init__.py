"""Application use cases package."""

from .close_period import ClosePeriodUseCase
from .create_account import CreateAccountUseCase
from .create_period import CreatePeriodUseCase
from .post_journal_entry import PostJournalEntryUseCase
from .post_manual_journal_entry import PostManualJournalEntryUseCase
from .queries import (
    GetAccountsUseCase,
    GetJournalEntriesUseCase,
    ListPeriodsUseCase,
)
from .seed_chart_of_accounts import (
    SeedChartOfAccountsResult,
    SeedChartOfAccountsUseCase,
)

__all__ = [
    "ClosePeriodUseCase",
    "CreateAccountUseCase",
    "CreatePeriodUseCase",
    "PostJournalEntryUseCase",
    "PostManualJournalEntryUseCase",
    "GetAccountsUseCase",
    "GetJournalEntriesUseCase",
    "ListPeriodsUseCase",
    "SeedChartOfAccountsResult",
    "SeedChartOfAccountsUseCase",
]
