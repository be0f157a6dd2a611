"""Tests for account creation, lookup and seeding use cases."""

from unittest.mock import MagicMock

from src.application.commands import CreateAccountCommand
from src.application.use_cases.create_account import CreateAccountUseCase
from src.application.use_cases.queries import GetAccountsUseCase
from src.application.use_cases.seed_chart_of_accounts import (
    SeedChartOfAccountsUseCase,
)
from src.domain.constants import DEFAULT_CHART_OF_ACCOUNTS
from src.domain.errors import InfrastructureSubtype, infrastructure_failure
from src.domain.models.accounts import Account, AccountType, NormalBalance
from src.domain.results import Failure, Success


class _FakeAccountsRepository:
    """In-memory accounts store keyed by tenant."""

    def __init__(self, create_failure=None):
        self.accounts: list[Account] = []
        self._create_failure = create_failure

    def find_by_id(self, tenant_id, account_id):
        return Success(
            next(
                (
                    a
                    for a in self.accounts
                    if a.tenant_id == tenant_id and a.id == account_id
                ),
                None,
            )
        )

    def find_by_code(self, tenant_id, code):
        return Success(
            next(
                (a for a in self.accounts if a.tenant_id == tenant_id and a.code == code),
                None,
            )
        )

    def create_account(self, account):
        if self._create_failure is not None:
            return self._create_failure
        stored = Account(
            id=f"acc-{len(self.accounts) + 1}",
            tenant_id=account.tenant_id,
            code=account.code,
            name=account.name,
            account_type=account.account_type,
            normal_balance=account.normal_balance,
        )
        self.accounts.append(stored)
        return Success(stored)

    def list_accounts(self, tenant_id):
        return Success(
            sorted(
                (a for a in self.accounts if a.tenant_id == tenant_id),
                key=lambda a: a.code,
            )
        )


def _command(tenant_id="tenant-a", code="101", name="Cash"):
    return CreateAccountCommand(
        tenant_id=tenant_id,
        code=code,
        name=name,
        account_type="Asset",
        normal_balance="Debit",
    )


def test_create_account_persists_validated_account():
    repo = _FakeAccountsRepository()
    logger = MagicMock()

    result = CreateAccountUseCase(repo, logger=logger).execute(
        _command(code=" 101 ", name=" Cash ")
    )

    assert isinstance(result, Success)
    assert result.value.code == "101"
    assert result.value.name == "Cash"
    assert result.value.account_type is AccountType.ASSET
    assert result.value.normal_balance is NormalBalance.DEBIT
    logger.info.assert_called_once()


def test_duplicate_code_in_same_tenant_is_rejected():
    repo = _FakeAccountsRepository()
    use_case = CreateAccountUseCase(repo, logger=MagicMock())
    use_case.execute(_command())

    result = use_case.execute(_command(name="Petty cash"))

    assert isinstance(result, Failure)
    assert result.error.subtype == "DuplicateAccountCode"
    assert len(repo.accounts) == 1


def test_same_code_in_other_tenant_is_allowed():
    repo = _FakeAccountsRepository()
    use_case = CreateAccountUseCase(repo, logger=MagicMock())

    use_case.execute(_command(tenant_id="tenant-a"))
    result = use_case.execute(_command(tenant_id="tenant-b"))

    assert isinstance(result, Success)
    assert len(repo.accounts) == 2


def test_invalid_fields_never_reach_storage():
    repo = MagicMock()

    result = CreateAccountUseCase(repo, logger=MagicMock()).execute(
        _command(code="ABC")
    )

    assert result.error.subtype == "InvalidAccountCode"
    repo.find_by_code.assert_not_called()
    repo.create_account.assert_not_called()


def test_storage_duplicate_key_is_passed_through():
    failure = Failure(
        infrastructure_failure(InfrastructureSubtype.DUPLICATE_KEY, "dup")
    )
    repo = _FakeAccountsRepository(create_failure=failure)

    result = CreateAccountUseCase(repo, logger=MagicMock()).execute(_command())

    assert result is failure


def test_get_accounts_lists_tenant_accounts_and_finds_by_id():
    repo = _FakeAccountsRepository()
    create = CreateAccountUseCase(repo, logger=MagicMock())
    create.execute(_command(code="201", name="Payables"))
    create.execute(_command(code="101"))
    create.execute(_command(tenant_id="tenant-b", code="301", name="Capital"))
    queries = GetAccountsUseCase(repo)

    listed = queries.execute("tenant-a")

    assert [a.code for a in listed.value] == ["101", "201"]
    assert queries.get("tenant-a", "acc-1").value.code == "201"
    assert queries.get("tenant-b", "acc-1").error.subtype == "AccountNotFound"


def test_seed_chart_of_accounts_creates_template_and_skips_existing():
    repo = _FakeAccountsRepository()
    create = CreateAccountUseCase(repo, logger=MagicMock())
    create.execute(_command(code="101"))
    seed = SeedChartOfAccountsUseCase(create, logger=MagicMock())

    result = seed.execute("tenant-a")

    assert isinstance(result, Success)
    assert result.value.skipped_codes == ("101",)
    assert len(result.value.created_codes) == len(DEFAULT_CHART_OF_ACCOUNTS) - 1
    assert len(repo.accounts) == len(DEFAULT_CHART_OF_ACCOUNTS)

    again = seed.execute("tenant-a")
    assert again.value.created_codes == ()


def test_seed_chart_of_accounts_stops_on_storage_failure():
    failure = Failure(
        infrastructure_failure(InfrastructureSubtype.REPOSITORY_ERROR, "down")
    )
    repo = _FakeAccountsRepository(create_failure=failure)
    seed = SeedChartOfAccountsUseCase(
        CreateAccountUseCase(repo, logger=MagicMock()),
        logger=MagicMock(),
    )

    assert seed.execute("tenant-a") is failure
