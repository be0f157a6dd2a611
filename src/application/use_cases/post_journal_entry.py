"""Use case for posting a journal entry to the ledger.

The workflow runs in a fixed order and returns at the first failure:

* pure validation of description, date and line structure;
* pure validation of each line's amount and side;
* pure balance check (debits equal credits within tolerance);
* tenant-scoped lookup of every referenced account;
* atomic write of the entry and its lines.

Only the last step mutates storage.
"""

from src.application.commands import PostJournalEntryCommand
from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.journal_entries_repository import (
    JournalEntriesRepositoryPort,
)
from src.application.use_cases.outcome_logging import log_failure
from src.domain.errors import LedgerDomainSubtype, domain_failure
from src.domain.models.journal import JournalEntry, NewJournalEntry
from src.domain.results import Failure, Outcome, Success
from src.domain.services.ledger import build_journal_entry, distinct_account_ids
from src.infrastructure.logging.logger import get_app_logger


class PostJournalEntryUseCase:
    """Validate and persist a balanced journal entry."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        journal_entries_repository: JournalEntriesRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Storage used to check referenced accounts.
            journal_entries_repository: Storage receiving the entry.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._accounts = accounts_repository
        self._entries = journal_entries_repository
        self._logger = logger or get_app_logger()

    def execute(self, command: PostJournalEntryCommand) -> Outcome[JournalEntry]:
        """Post the entry described by ``command``.

        Returns:
            Outcome[JournalEntry]: Persisted entry, or the first failure.
        """
        built = build_journal_entry(
            command.tenant_id,
            command.description,
            command.date,
            command.lines,
            command.entry_number,
        )
        if isinstance(built, Failure):
            log_failure(self._logger, "post_journal_entry", built.error)
            return built

        accounts_check = self._ensure_accounts_exist(built.value)
        if isinstance(accounts_check, Failure):
            log_failure(self._logger, "post_journal_entry", accounts_check.error)
            return accounts_check

        created = self._entries.create_entry(built.value)
        if isinstance(created, Failure):
            log_failure(self._logger, "post_journal_entry", created.error)
            return created
        entry = created.value
        self._logger.info(
            f"Posted journal entry {entry.id} for tenant {entry.tenant_id} "
            f"with {len(entry.lines)} lines totalling {entry.total_debits}"
        )
        return created

    def _ensure_accounts_exist(self, entry: NewJournalEntry) -> Outcome[None]:
        """Require every referenced account to exist for the entry's tenant.

        A lookup error is reported as ``AccountNotFound`` as well, since the
        account could not be confirmed.
        """
        for account_id in distinct_account_ids(entry.lines):
            lookup = self._accounts.find_by_id(entry.tenant_id, account_id)
            if isinstance(lookup, Failure):
                return Failure(
                    domain_failure(
                        LedgerDomainSubtype.ACCOUNT_NOT_FOUND,
                        f"Account {account_id} not found or access denied.",
                    )
                )
            if lookup.value is None:
                return Failure(
                    domain_failure(
                        LedgerDomainSubtype.ACCOUNT_NOT_FOUND,
                        f"Account {account_id} does not exist.",
                    )
                )
        return Success(None)


__all__ = ["PostJournalEntryUseCase"]
