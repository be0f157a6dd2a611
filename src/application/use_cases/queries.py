"""Read-only use cases over accounts, journal entries and periods.

Each query is scoped to one tenant and passes repository failures through.
"""

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.journal_entries_repository import (
    JournalEntriesRepositoryPort,
)
from src.application.ports.periods_repository import PeriodsRepositoryPort
from src.domain.errors import (
    LedgerDomainSubtype,
    PeriodDomainSubtype,
    domain_failure,
)
from src.domain.models.accounts import Account
from src.domain.models.journal import JournalEntry
from src.domain.models.periods import Period, PeriodStatus
from src.domain.results import Failure, Outcome, Success


def _require_found(outcome: Outcome, subtype, message: str) -> Outcome:
    if isinstance(outcome, Failure):
        return outcome
    if outcome.value is None:
        return Failure(domain_failure(subtype, message))
    return Success(outcome.value)


class GetAccountsUseCase:
    """Fetch a tenant's chart of accounts."""

    def __init__(self, accounts_repository: AccountsRepositoryPort) -> None:
        self._accounts = accounts_repository

    def execute(self, tenant_id: str) -> Outcome[list[Account]]:
        """Return every account of the tenant, ordered by code."""
        return self._accounts.list_accounts(tenant_id)

    def get(self, tenant_id: str, account_id: str) -> Outcome[Account]:
        """Return one account or ``AccountNotFound``."""
        return _require_found(
            self._accounts.find_by_id(tenant_id, account_id),
            LedgerDomainSubtype.ACCOUNT_NOT_FOUND,
            f"Account {account_id} does not exist.",
        )


class GetJournalEntriesUseCase:
    """Fetch posted journal entries."""

    def __init__(self, journal_entries_repository: JournalEntriesRepositoryPort) -> None:
        self._entries = journal_entries_repository

    def execute(
        self,
        tenant_id: str,
        skip: int = 0,
        take: int | None = None,
    ) -> Outcome[list[JournalEntry]]:
        """Return a page of the tenant's entries, newest date first."""
        return self._entries.list_entries(tenant_id, skip=max(skip, 0), take=take)

    def get(self, tenant_id: str, entry_id: str) -> Outcome[JournalEntry]:
        """Return one entry or ``JournalEntryNotFound``."""
        return _require_found(
            self._entries.find_by_id(tenant_id, entry_id),
            LedgerDomainSubtype.JOURNAL_ENTRY_NOT_FOUND,
            f"Journal entry {entry_id} does not exist.",
        )


class ListPeriodsUseCase:
    """Fetch a tenant's periods, optionally filtered by status."""

    def __init__(self, periods_repository: PeriodsRepositoryPort) -> None:
        self._periods = periods_repository

    def execute(
        self,
        tenant_id: str,
        status: PeriodStatus | None = None,
    ) -> Outcome[list[Period]]:
        """Return the tenant's periods, latest start date first.

        Args:
            tenant_id: Owning tenant.
            status: Optional status filter.

        Returns:
            Outcome[list[Period]]: Matching periods or a repository failure.
        """
        return self._periods.list_periods(tenant_id, status=status)

    def get(self, tenant_id: str, period_id: str) -> Outcome[Period]:
        """Return one period or ``PeriodNotFound``."""
        return _require_found(
            self._periods.find_by_id(tenant_id, period_id),
            PeriodDomainSubtype.PERIOD_NOT_FOUND,
            f"Period with ID {period_id} not found.",
        )


__all__ = ["GetAccountsUseCase", "GetJournalEntriesUseCase", "ListPeriodsUseCase"]
