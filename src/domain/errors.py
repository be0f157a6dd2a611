"""Error taxonomy for ledger workflows.

Failures are values, not exceptions. Every fallible step returns an
``Outcome`` whose failure branch carries an ``AppError`` classified by kind
and subtype.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Top-level classification of a failure."""

    APPLICATION = "ApplicationFailure"
    DOMAIN = "DomainFailure"
    INFRASTRUCTURE = "InfrastructureFailure"


class LedgerDomainSubtype(str, Enum):
    """Business-rule violations of the ledger."""

    INVALID_ACCOUNT_CODE = "InvalidAccountCode"
    INVALID_ACCOUNT_NAME = "InvalidAccountName"
    INVALID_ACCOUNT_TYPE = "InvalidAccountType"
    INVALID_NORMAL_BALANCE = "InvalidNormalBalance"
    INVALID_AMOUNT = "InvalidAmount"
    INVALID_SIDE = "InvalidSide"
    INVALID_DESCRIPTION = "InvalidJournalEntryDescription"
    INVALID_DATE = "InvalidJournalEntryDate"
    INVALID_ENTRY_NUMBER = "InvalidEntryNumber"
    DATE_IN_FUTURE = "DateInFuture"
    INSUFFICIENT_LINES = "InsufficientLines"
    NOT_BALANCED = "JournalEntryNotBalanced"
    ACCOUNT_NOT_FOUND = "AccountNotFound"
    JOURNAL_ENTRY_NOT_FOUND = "JournalEntryNotFound"
    DUPLICATE_ACCOUNT_CODE = "DuplicateAccountCode"


class PeriodDomainSubtype(str, Enum):
    """Business-rule violations of the period lifecycle."""

    INVALID_PERIOD_NAME = "InvalidPeriodName"
    INVALID_DATE_RANGE = "InvalidPeriodDateRange"
    PERIOD_NOT_FOUND = "PeriodNotFound"
    PERIOD_ALREADY_CLOSED = "PeriodAlreadyClosed"
    PERIOD_NOT_OPEN = "PeriodNotOpen"


class InfrastructureSubtype(str, Enum):
    """Storage-layer failures."""

    DUPLICATE_KEY = "DuplicateKey"
    REPOSITORY_ERROR = "RepositoryError"


class ApplicationSubtype(str, Enum):
    """Malformed or incomplete requests."""

    INVALID_COMMAND = "InvalidCommand"
    MISSING_FIELD = "MissingField"


@dataclass(frozen=True)
class AppError:
    """Classified failure carried by ``Failure``.

    Attributes:
        kind: Failure tier.
        subtype: Specific subtype name, e.g. ``"AccountNotFound"``.
        message: Human-readable explanation.
        cause: Underlying exception for diagnostics. Never shown to users.
    """

    kind: ErrorKind
    subtype: str
    message: str
    cause: Any = field(default=None, compare=False, repr=False)

    def public_view(self) -> dict[str, str]:
        """Return the error without its diagnostic cause."""
        return {
            "type": self.kind.value,
            "subtype": self.subtype,
            "message": self.message,
        }


def _subtype_name(subtype) -> str:
    return subtype.value if isinstance(subtype, Enum) else str(subtype)


def domain_failure(subtype, message: str) -> AppError:
    """Build a business-rule violation."""
    return AppError(ErrorKind.DOMAIN, _subtype_name(subtype), message)


def infrastructure_failure(subtype, message: str, cause=None) -> AppError:
    """Build a storage failure, keeping the cause for diagnostics."""
    return AppError(
        ErrorKind.INFRASTRUCTURE,
        _subtype_name(subtype),
        message,
        cause,
    )


def application_failure(subtype, message: str) -> AppError:
    """Build a malformed-request failure."""
    return AppError(ErrorKind.APPLICATION, _subtype_name(subtype), message)


__all__ = [
    "AppError",
    "ErrorKind",
    "LedgerDomainSubtype",
    "PeriodDomainSubtype",
    "InfrastructureSubtype",
    "ApplicationSubtype",
    "domain_failure",
    "infrastructure_failure",
    "application_failure",
]
