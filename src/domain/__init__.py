"""Domain package for ledger business rules and core models."""

from .constants import DEFAULT_CHART_OF_ACCOUNTS
from .errors import (
    AppError,
    ApplicationSubtype,
    ErrorKind,
    InfrastructureSubtype,
    LedgerDomainSubtype,
    PeriodDomainSubtype,
    application_failure,
    domain_failure,
    infrastructure_failure,
)
from .models import (
    Account,
    AccountType,
    JournalEntry,
    JournalLine,
    JournalLineSide,
    NewAccount,
    NewJournalEntry,
    NewPeriod,
    NormalBalance,
    Period,
    PeriodStatus,
)
from .results import Failure, Outcome, Success

__all__ = [
    "DEFAULT_CHART_OF_ACCOUNTS",
    "AppError",
    "ApplicationSubtype",
    "ErrorKind",
    "InfrastructureSubtype",
    "LedgerDomainSubtype",
    "PeriodDomainSubtype",
    "application_failure",
    "domain_failure",
    "infrastructure_failure",
    "Account",
    "AccountType",
    "JournalEntry",
    "JournalLine",
    "JournalLineSide",
    "NewAccount",
    "NewJournalEntry",
    "NewPeriod",
    "NormalBalance",
    "Period",
    "PeriodStatus",
    "Failure",
    "Outcome",
    "Success",
]
