"""Use case for adding an account to a tenant's chart of accounts."""

from src.application.commands import CreateAccountCommand
from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.use_cases.outcome_logging import log_failure
from src.domain.errors import LedgerDomainSubtype, domain_failure
from src.domain.models.accounts import Account
from src.domain.results import Failure, Outcome
from src.domain.services.ledger import build_account
from src.infrastructure.logging.logger import get_app_logger


class CreateAccountUseCase:
    """Validate, check code uniqueness, then persist an account.

    The uniqueness lookup and the insert are not atomic. A concurrent
    duplicate loses on the storage unique constraint and is returned as
    ``InfrastructureFailure/DuplicateKey``.
    """

    def __init__(self, accounts_repository: AccountsRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Tenant-scoped account storage.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._accounts = accounts_repository
        self._logger = logger or get_app_logger()

    def execute(self, command: CreateAccountCommand) -> Outcome[Account]:
        """Create the account described by ``command``.

        Returns:
            Outcome[Account]: Persisted account, or the first failure.
        """
        built = build_account(
            command.tenant_id,
            command.code,
            command.name,
            command.account_type,
            command.normal_balance,
        )
        if isinstance(built, Failure):
            log_failure(self._logger, "create_account", built.error)
            return built
        new_account = built.value

        existing = self._accounts.find_by_code(new_account.tenant_id, new_account.code)
        if isinstance(existing, Failure):
            log_failure(self._logger, "create_account", existing.error)
            return existing
        if existing.value is not None:
            failure = Failure(
                domain_failure(
                    LedgerDomainSubtype.DUPLICATE_ACCOUNT_CODE,
                    f"Account code {new_account.code} already exists for this tenant.",
                )
            )
            log_failure(self._logger, "create_account", failure.error)
            return failure

        created = self._accounts.create_account(new_account)
        if isinstance(created, Failure):
            log_failure(self._logger, "create_account", created.error)
            return created
        self._logger.info(
            f"Created account {created.value.code} ({created.value.id}) "
            f"for tenant {created.value.tenant_id}"
        )
        return created


__all__ = ["CreateAccountUseCase"]
