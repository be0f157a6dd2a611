"""Port for tenant-scoped account storage."""

from typing import Protocol

from src.domain.models.accounts import Account, NewAccount
from src.domain.results import Outcome


class AccountsRepositoryPort(Protocol):
    """Port exposing reads and writes of accounts.

    Every method is scoped to ``tenant_id``; accounts of other tenants are
    reported as absent.
    """

    def find_by_id(self, tenant_id: str, account_id: str) -> Outcome[Account | None]:
        """Return the account with this id, or None."""

    def find_by_code(self, tenant_id: str, code: str) -> Outcome[Account | None]:
        """Return the account with this code, or None."""

    def create_account(self, account: NewAccount) -> Outcome[Account]:
        """Persist an account atomically.

        A (tenant, code) collision fails with ``DuplicateKey``.
        """

    def list_accounts(self, tenant_id: str) -> Outcome[list[Account]]:
        """Return the tenant's accounts ordered by code."""


__all__ = ["AccountsRepositoryPort"]
