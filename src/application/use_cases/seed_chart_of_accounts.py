"""Use case for giving a new tenant the default chart of accounts."""

from dataclasses import dataclass

from src.application.commands import CreateAccountCommand
from src.application.use_cases.create_account import CreateAccountUseCase
from src.domain.constants import DEFAULT_CHART_OF_ACCOUNTS
from src.domain.errors import InfrastructureSubtype, LedgerDomainSubtype
from src.domain.results import Failure, Outcome, Success
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SeedChartOfAccountsResult:
    """Result of a seeding run.

    Attributes:
        created_codes: Codes created by this run.
        skipped_codes: Codes the tenant already had.
    """

    created_codes: tuple[str, ...]
    skipped_codes: tuple[str, ...]


class SeedChartOfAccountsUseCase:
    """Create every template account a tenant does not already have.

    Accounts go through ``CreateAccountUseCase`` so they obey the same rules
    as user-created ones. Seeding stops at the first other failure; accounts
    created before it are kept.
    """

    def __init__(
        self,
        create_account: CreateAccountUseCase,
        chart=DEFAULT_CHART_OF_ACCOUNTS,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            create_account: Use case that validates and stores one account.
            chart: ``(code, name, type, normal balance)`` template rows.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._create_account = create_account
        self._chart = tuple(chart)
        self._logger = logger or get_app_logger()

    def execute(self, tenant_id: str) -> Outcome[SeedChartOfAccountsResult]:
        """Create the missing template accounts for ``tenant_id``.

        Returns:
            Outcome[SeedChartOfAccountsResult]: Created and skipped codes, or
            the first failure that is not a duplicate code.
        """
        created: list[str] = []
        skipped: list[str] = []
        for code, name, account_type, normal_balance in self._chart:
            outcome = self._create_account.execute(
                CreateAccountCommand(
                    tenant_id=tenant_id,
                    code=code,
                    name=name,
                    account_type=account_type,
                    normal_balance=normal_balance,
                )
            )
            if isinstance(outcome, Failure):
                if outcome.error.subtype in (
                    LedgerDomainSubtype.DUPLICATE_ACCOUNT_CODE.value,
                    InfrastructureSubtype.DUPLICATE_KEY.value,
                ):
                    skipped.append(code)
                    continue
                return outcome
            created.append(code)

        self._logger.info(
            f"Seeded {len(created)} accounts for tenant {tenant_id} "
            f"({len(skipped)} already present)"
        )
        return Success(
            SeedChartOfAccountsResult(
                created_codes=tuple(created),
                skipped_codes=tuple(skipped),
            )
        )


__all__ = ["SeedChartOfAccountsUseCase", "SeedChartOfAccountsResult"]
