"""Pure validators for ledger and period fields.

Each validator normalizes one value and returns an ``Outcome``. None of them
touch storage, so workflows run them before any lookup or write.
"""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Callable, TypeVar

from src.domain.constants import (
    ACCOUNT_CODE_MAX_LENGTH,
    ACCOUNT_CODE_PATTERN,
    AMOUNT_MAX_INTEGER_DIGITS,
    BALANCE_TOLERANCE,
    CENT,
    DESCRIPTION_MAX_LENGTH,
    DESCRIPTION_MIN_LENGTH,
    ENTRY_NUMBER_MAX_LENGTH,
    MIN_JOURNAL_LINES,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
)
from src.domain.errors import (
    LedgerDomainSubtype,
    PeriodDomainSubtype,
    domain_failure,
)
from src.domain.models.accounts import AccountType, NormalBalance
from src.domain.models.journal import JournalLine, JournalLineSide
from src.domain.results import (
    Failure,
    Outcome,
    Success,
    and_then,
    collect,
    map_success,
    pipe_validators,
)
from src.domain.services.normalization import (
    normalize_text,
    parse_calendar_date,
)
from src.utils.decimal_utils import coerce_decimal

E = TypeVar("E", bound=Enum)


def _length_validator(
    min_length: int,
    max_length: int,
    subtype,
    message: str,
) -> Callable[[str], Outcome[str]]:
    def _validate(value) -> Outcome[str]:
        trimmed = normalize_text(value)
        if min_length <= len(trimmed) <= max_length:
            return Success(trimmed)
        return Failure(domain_failure(subtype, message))

    return _validate


def _enum_validator(
    enum_cls: type[E],
    subtype,
    label: str,
) -> Callable[[object], Outcome[E]]:
    allowed = ", ".join(member.value for member in enum_cls)

    def _validate(value) -> Outcome[E]:
        if isinstance(value, enum_cls):
            return Success(value)
        try:
            return Success(enum_cls(normalize_text(value)))
        except ValueError:
            return Failure(
                domain_failure(subtype, f"{label} must be one of: {allowed}.")
            )

    return _validate


validate_account_name = _length_validator(
    NAME_MIN_LENGTH,
    NAME_MAX_LENGTH,
    LedgerDomainSubtype.INVALID_ACCOUNT_NAME,
    "Account name must be between 1 and 100 characters.",
)

validate_period_name = _length_validator(
    NAME_MIN_LENGTH,
    NAME_MAX_LENGTH,
    PeriodDomainSubtype.INVALID_PERIOD_NAME,
    "Period name must be between 1 and 100 characters.",
)

validate_description = _length_validator(
    DESCRIPTION_MIN_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    LedgerDomainSubtype.INVALID_DESCRIPTION,
    "Description must be between 1 and 500 characters.",
)

validate_account_type = _enum_validator(
    AccountType,
    LedgerDomainSubtype.INVALID_ACCOUNT_TYPE,
    "Account type",
)

validate_normal_balance = _enum_validator(
    NormalBalance,
    LedgerDomainSubtype.INVALID_NORMAL_BALANCE,
    "Normal balance",
)

validate_side = _enum_validator(
    JournalLineSide,
    LedgerDomainSubtype.INVALID_SIDE,
    "Line side",
)


def validate_account_code(code) -> Outcome[str]:
    """Validate and trim an account code such as ``101`` or ``191.1``."""
    trimmed = normalize_text(code)
    if (
        len(trimmed) <= ACCOUNT_CODE_MAX_LENGTH
        and ACCOUNT_CODE_PATTERN.match(trimmed)
    ):
        return Success(trimmed)
    return Failure(
        domain_failure(
            LedgerDomainSubtype.INVALID_ACCOUNT_CODE,
            "Account code must be numeric with optional dot, max 20 chars.",
        )
    )


def _invalid_amount(message: str) -> Failure:
    return Failure(domain_failure(LedgerDomainSubtype.INVALID_AMOUNT, message))


def _require_positive(value: Decimal) -> Outcome[Decimal]:
    # NaN must be rejected before any ordering comparison.
    if value.is_finite() and value > 0:
        return Success(value)
    return _invalid_amount("Amount must be a positive number.")


def _require_storable(value: Decimal) -> Outcome[Decimal]:
    if value.adjusted() < AMOUNT_MAX_INTEGER_DIGITS:
        return Success(value)
    return _invalid_amount(
        f"Amount must have at most {AMOUNT_MAX_INTEGER_DIGITS} integer digits."
    )


def _require_cents(value: Decimal) -> Outcome[Decimal]:
    if value == value.quantize(CENT):
        return Success(value)
    return _invalid_amount("Amount must have at most two decimal places.")


_check_amount = pipe_validators(_require_positive, _require_storable, _require_cents)


def validate_amount(amount) -> Outcome[Decimal]:
    """Validate a positive amount that fits the stored precision.

    The size check runs before any arithmetic, so oversized input such as
    ``1E+999999`` fails as ``InvalidAmount`` instead of overflowing, and
    every accepted amount sums exactly in the default Decimal context.

    Args:
        amount: Raw amount (Decimal, int, float or numeric string).

    Returns:
        Outcome[Decimal]: The amount, or ``InvalidAmount``.
    """
    return _check_amount(coerce_decimal(amount))


def validate_entry_date(value) -> Outcome[date]:
    """Parse the accounting date of a journal entry."""
    parsed = parse_calendar_date(value)
    if parsed is None:
        return Failure(
            domain_failure(
                LedgerDomainSubtype.INVALID_DATE,
                "Date must be a valid date.",
            )
        )
    return Success(parsed)


def validate_date_not_future(value, today: date) -> Outcome[date]:
    """Validate a date that must not be later than ``today``.

    The journal posting path does not apply this rule.
    """
    parsed = parse_calendar_date(value)
    if parsed is None:
        return Failure(
            domain_failure(
                LedgerDomainSubtype.INVALID_DATE,
                "Date must be a valid date.",
            )
        )
    if parsed > today:
        return Failure(
            domain_failure(
                LedgerDomainSubtype.DATE_IN_FUTURE,
                "Date cannot be in the future.",
            )
        )
    return Success(parsed)


def validate_entry_number(entry_number) -> Outcome[str | None]:
    """Validate the optional external entry number."""
    if entry_number is None:
        return Success(None)
    trimmed = normalize_text(entry_number)
    if not trimmed:
        return Success(None)
    if len(trimmed) > ENTRY_NUMBER_MAX_LENGTH:
        return Failure(
            domain_failure(
                LedgerDomainSubtype.INVALID_ENTRY_NUMBER,
                "Entry number must be at most 50 characters.",
            )
        )
    return Success(trimmed)


def validate_has_lines(lines: Sequence) -> Outcome[Sequence]:
    """Require at least two lines, independently of their balance."""
    if len(lines) < MIN_JOURNAL_LINES:
        return Failure(
            domain_failure(
                LedgerDomainSubtype.INSUFFICIENT_LINES,
                "Journal entry must have at least two lines.",
            )
        )
    return Success(lines)


def validate_journal_line(account_id: str, amount, side) -> Outcome[JournalLine]:
    """Validate one line's amount, then its side."""
    return and_then(
        validate_amount(amount),
        lambda value: map_success(
            validate_side(side),
            lambda valid_side: JournalLine(
                account_id=account_id,
                amount=value,
                side=valid_side,
            ),
        ),
    )


def validate_balanced(
    lines: Sequence[JournalLine],
) -> Outcome[tuple[JournalLine, ...]]:
    """Require total debits to equal total credits within tolerance."""
    debits = sum(
        (line.amount for line in lines if line.side == JournalLineSide.DEBIT),
        Decimal("0"),
    )
    credits = sum(
        (line.amount for line in lines if line.side == JournalLineSide.CREDIT),
        Decimal("0"),
    )
    if abs(debits - credits) > BALANCE_TOLERANCE:
        return Failure(
            domain_failure(
                LedgerDomainSubtype.NOT_BALANCED,
                f"Debits ({debits}) do not equal credits ({credits}).",
            )
        )
    return Success(tuple(lines))


def validate_journal_lines(raw_lines: Sequence) -> Outcome[tuple[JournalLine, ...]]:
    """Validate line structure, then each line, then the balance.

    Args:
        raw_lines: Objects exposing ``account_id``, ``amount`` and ``side``.

    Returns:
        Outcome[tuple[JournalLine, ...]]: Typed lines or the first failure.
    """
    typed = and_then(
        validate_has_lines(raw_lines),
        lambda lines: collect(
            validate_journal_line(line.account_id, line.amount, line.side)
            for line in lines
        ),
    )
    return and_then(typed, validate_balanced)


def validate_period_date_range(
    start_date,
    end_date,
) -> Outcome[tuple[date, date]]:
    """Parse both bounds and require ``start_date < end_date``."""
    start = parse_calendar_date(start_date)
    end = parse_calendar_date(end_date)
    if start is None or end is None:
        return Failure(
            domain_failure(
                PeriodDomainSubtype.INVALID_DATE_RANGE,
                "Start date or end date is invalid.",
            )
        )
    if start >= end:
        return Failure(
            domain_failure(
                PeriodDomainSubtype.INVALID_DATE_RANGE,
                "Start date must be before end date.",
            )
        )
    return Success((start, end))


__all__ = [
    "validate_account_code",
    "validate_account_name",
    "validate_account_type",
    "validate_normal_balance",
    "validate_amount",
    "validate_side",
    "validate_description",
    "validate_entry_date",
    "validate_date_not_future",
    "validate_entry_number",
    "validate_has_lines",
    "validate_journal_line",
    "validate_balanced",
    "validate_journal_lines",
    "validate_period_name",
    "validate_period_date_range",
]
