"""SQLAlchemy-backed repository for ledger accounts."""

import uuid

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.clock import ClockPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models.accounts import (
    Account,
    AccountType,
    NewAccount,
    NormalBalance,
)
from src.domain.results import Outcome, Success
from src.infrastructure.clock import SystemClock
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.repository_errors import failure_from_exception
from src.infrastructure.schema import accounts


def _to_account(row) -> Account:
    return Account(
        id=row.id,
        tenant_id=row.tenant_id,
        code=row.code,
        name=row.name,
        account_type=AccountType(row.account_type),
        normal_balance=NormalBalance(row.normal_balance),
        created_at=row.created_at,
    )


class SqlAlchemyAccountsRepository(AccountsRepositoryPort):
    """Repository backed by SQLAlchemy for tenant-scoped accounts."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        clock: ClockPort | None = None,
        logger=None,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            clock: Optional time source for ``created_at``.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._clock = clock or SystemClock()
        self._logger = logger or get_app_logger()

    def find_by_id(self, tenant_id: str, account_id: str) -> Outcome[Account | None]:
        """Fetch one account of the tenant, or None when it does not exist."""
        query = select(accounts).where(
            accounts.c.tenant_id == tenant_id,
            accounts.c.id == account_id,
        )
        return self._fetch_one(query, "find_account_by_id")

    def find_by_code(self, tenant_id: str, code: str) -> Outcome[Account | None]:
        """Fetch an account by its per-tenant unique code."""
        query = select(accounts).where(
            accounts.c.tenant_id == tenant_id,
            accounts.c.code == code,
        )
        return self._fetch_one(query, "find_account_by_code")

    def create_account(self, account: NewAccount) -> Outcome[Account]:
        """Insert ``account``; the (tenant, code) constraint rejects duplicates."""
        created = Account(
            id=str(uuid.uuid4()),
            tenant_id=account.tenant_id,
            code=account.code,
            name=account.name,
            account_type=account.account_type,
            normal_balance=account.normal_balance,
            created_at=self._clock.now(),
        )
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                conn.execute(
                    accounts.insert().values(
                        id=created.id,
                        tenant_id=created.tenant_id,
                        code=created.code,
                        name=created.name,
                        account_type=created.account_type.value,
                        normal_balance=created.normal_balance.value,
                        created_at=created.created_at,
                    )
                )
        except SQLAlchemyError as exc:
            return failure_from_exception(exc, "create_account", self._logger)
        return Success(created)

    def list_accounts(self, tenant_id: str) -> Outcome[list[Account]]:
        """List the tenant's chart of accounts.

        Args:
            tenant_id: Owning tenant.

        Returns:
            Outcome[list[Account]]: Accounts ordered by code.
        """
        query = (
            select(accounts)
            .where(accounts.c.tenant_id == tenant_id)
            .order_by(accounts.c.code)
        )
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                rows = conn.execute(query).all()
        except SQLAlchemyError as exc:
            return failure_from_exception(exc, "list_accounts", self._logger)
        return Success([_to_account(row) for row in rows])

    def _fetch_one(self, query, operation: str) -> Outcome[Account | None]:
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                row = conn.execute(query).first()
        except SQLAlchemyError as exc:
            return failure_from_exception(exc, operation, self._logger)
        return Success(_to_account(row) if row is not None else None)


__all__ = ["SqlAlchemyAccountsRepository"]
