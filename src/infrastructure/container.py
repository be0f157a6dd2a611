"""Composition root for wiring infrastructure adapters and use cases."""

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.journal_entries_repository import (
    JournalEntriesRepositoryPort,
)
from src.application.ports.periods_repository import PeriodsRepositoryPort
from src.application.use_cases.close_period import ClosePeriodUseCase
from src.application.use_cases.create_account import CreateAccountUseCase
from src.application.use_cases.create_period import CreatePeriodUseCase
from src.application.use_cases.post_journal_entry import PostJournalEntryUseCase
from src.application.use_cases.post_manual_journal_entry import (
    PostManualJournalEntryUseCase,
)
from src.application.use_cases.queries import (
    GetAccountsUseCase,
    GetJournalEntriesUseCase,
    ListPeriodsUseCase,
)
from src.application.use_cases.seed_chart_of_accounts import (
    SeedChartOfAccountsUseCase,
)
from src.infrastructure.accounts_repository import SqlAlchemyAccountsRepository
from src.infrastructure.clock import SystemClock
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.journal_entries_repository import (
    SqlAlchemyJournalEntriesRepository,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.periods_repository import SqlAlchemyPeriodsRepository
from src.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter configured from the environment."""
    settings = LedgerSettings.from_env()
    settings.require_db_url()
    return SqlAlchemyDatabaseEngineAdapter(echo=settings.sql_echo)


def build_accounts_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AccountsRepositoryPort:
    """Return the accounts repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAccountsRepository(resolved_db, logger=get_app_logger())


def build_journal_entries_repository(
    db_port: DatabaseEnginePort | None = None,
) -> JournalEntriesRepositoryPort:
    """Return the journal entries repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyJournalEntriesRepository(resolved_db, logger=get_app_logger())


def build_periods_repository(
    db_port: DatabaseEnginePort | None = None,
) -> PeriodsRepositoryPort:
    """Return the periods repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyPeriodsRepository(resolved_db, logger=get_app_logger())


def build_create_account_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> CreateAccountUseCase:
    return CreateAccountUseCase(
        build_accounts_repository(db_port),
        logger=get_app_logger(),
    )


def build_seed_chart_of_accounts_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> SeedChartOfAccountsUseCase:
    return SeedChartOfAccountsUseCase(
        build_create_account_use_case(db_port),
        logger=get_app_logger(),
    )


def build_post_journal_entry_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> PostJournalEntryUseCase:
    resolved_db = db_port or build_database_adapter()
    return PostJournalEntryUseCase(
        build_accounts_repository(resolved_db),
        build_journal_entries_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_post_manual_journal_entry_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> PostManualJournalEntryUseCase:
    """Return the period-gated posting workflow."""
    resolved_db = db_port or build_database_adapter()
    return PostManualJournalEntryUseCase(
        build_periods_repository(resolved_db),
        build_post_journal_entry_use_case(resolved_db),
        logger=get_app_logger(),
    )


def build_create_period_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> CreatePeriodUseCase:
    return CreatePeriodUseCase(
        build_periods_repository(db_port),
        logger=get_app_logger(),
    )


def build_close_period_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ClosePeriodUseCase:
    return ClosePeriodUseCase(
        build_periods_repository(db_port),
        clock=SystemClock(),
        logger=get_app_logger(),
    )


def build_get_accounts_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetAccountsUseCase:
    return GetAccountsUseCase(build_accounts_repository(db_port))


def build_get_journal_entries_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetJournalEntriesUseCase:
    return GetJournalEntriesUseCase(build_journal_entries_repository(db_port))


def build_list_periods_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ListPeriodsUseCase:
    return ListPeriodsUseCase(build_periods_repository(db_port))


__all__ = [
    "build_database_adapter",
    "build_accounts_repository",
    "build_journal_entries_repository",
    "build_periods_repository",
    "build_create_account_use_case",
    "build_seed_chart_of_accounts_use_case",
    "build_post_journal_entry_use_case",
    "build_post_manual_journal_entry_use_case",
    "build_create_period_use_case",
    "build_close_period_use_case",
    "build_get_accounts_use_case",
    "build_get_journal_entries_use_case",
    "build_list_periods_use_case",
]
