"""Domain models for the chart of accounts."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class AccountType(str, Enum):
    """Classification of an account on the financial statements."""

    ASSET = "Asset"
    LIABILITY = "Liability"
    EQUITY = "Equity"
    REVENUE = "Revenue"
    EXPENSE = "Expense"


class NormalBalance(str, Enum):
    """Side on which an account's value naturally increases."""

    DEBIT = "Debit"
    CREDIT = "Credit"


@dataclass(frozen=True)
class NewAccount:
    """Validated account waiting to be persisted."""

    tenant_id: str
    code: str
    name: str
    account_type: AccountType
    normal_balance: NormalBalance


@dataclass(frozen=True)
class Account:
    """Persisted account owned by a tenant.

    Attributes:
        id: Generated identifier.
        tenant_id: Owning tenant.
        code: Numeric code, unique per tenant and immutable.
        name: Display name.
        account_type: Statement classification.
        normal_balance: Natural side of the account.
        created_at: Creation timestamp.
    """

    id: str
    tenant_id: str
    code: str
    name: str
    account_type: AccountType
    normal_balance: NormalBalance
    created_at: datetime | None = None


__all__ = ["AccountType", "NormalBalance", "NewAccount", "Account"]
