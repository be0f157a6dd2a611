"""Tests for the pure ledger and period validators."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from src.domain.models.accounts import AccountType, NormalBalance
from src.domain.models.journal import JournalLine, JournalLineSide
from src.domain.results import Failure, Success
from src.domain.services.validation import (
    validate_account_code,
    validate_account_name,
    validate_account_type,
    validate_amount,
    validate_balanced,
    validate_date_not_future,
    validate_description,
    validate_entry_date,
    validate_entry_number,
    validate_has_lines,
    validate_journal_line,
    validate_journal_lines,
    validate_normal_balance,
    validate_period_date_range,
    validate_period_name,
    validate_side,
)


def _line(account_id, amount, side):
    return SimpleNamespace(account_id=account_id, amount=amount, side=side)


@pytest.mark.parametrize("code", ["101", "191.1", "  401  ", "1" * 20])
def test_validate_account_code_accepts_numeric_codes(code):
    result = validate_account_code(code)

    assert isinstance(result, Success)
    assert result.value == code.strip()


@pytest.mark.parametrize("code", ["", "abc", "10a", "1.", ".1", "1.2.3", "1" * 21, None])
def test_validate_account_code_rejects_invalid_codes(code):
    result = validate_account_code(code)

    assert isinstance(result, Failure)
    assert result.error.subtype == "InvalidAccountCode"
    assert result.error.kind.value == "DomainFailure"


def test_validate_account_name_trims_and_bounds_length():
    assert validate_account_name("  Cash  ").value == "Cash"
    assert validate_account_name("x" * 100).value == "x" * 100
    assert validate_account_name("   ").error.subtype == "InvalidAccountName"
    assert validate_account_name("x" * 101).error.subtype == "InvalidAccountName"


def test_validate_period_name_uses_period_subtype():
    assert validate_period_name("Q1 2025").value == "Q1 2025"
    assert validate_period_name("").error.subtype == "InvalidPeriodName"


def test_validate_description_bounds():
    assert validate_description(" Rent ").value == "Rent"
    assert validate_description("d" * 500).value == "d" * 500
    failure = validate_description("d" * 501)
    assert failure.error.subtype == "InvalidJournalEntryDescription"


def test_enum_validators_accept_members_and_values():
    assert validate_account_type("Asset").value is AccountType.ASSET
    assert validate_account_type(AccountType.EXPENSE).value is AccountType.EXPENSE
    assert validate_normal_balance(" Credit ").value is NormalBalance.CREDIT
    assert validate_side("Debit").value is JournalLineSide.DEBIT


def test_enum_validators_reject_unknown_values():
    assert validate_account_type("asset").error.subtype == "InvalidAccountType"
    assert validate_normal_balance("Left").error.subtype == "InvalidNormalBalance"
    failure = validate_side("debit")
    assert failure.error.subtype == "InvalidSide"
    assert "Debit, Credit" in failure.error.message


@pytest.mark.parametrize(
    "amount, expected",
    [
        (100, Decimal("100")),
        ("0.01", Decimal("0.01")),
        (12.5, Decimal("12.5")),
        (Decimal("99.99"), Decimal("99.99")),
    ],
)
def test_validate_amount_accepts_positive_two_decimal_values(amount, expected):
    result = validate_amount(amount)

    assert isinstance(result, Success)
    assert result.value == expected


@pytest.mark.parametrize(
    "amount",
    [0, -5, "0.001", 1.005, "abc", float("nan"), float("inf"), True, None],
)
def test_validate_amount_rejects_invalid_values(amount):
    result = validate_amount(amount)

    assert isinstance(result, Failure)
    assert result.error.subtype == "InvalidAmount"


@pytest.mark.parametrize(
    "amount",
    [
        "1E+999999",
        "10000000000000000",
        "1000000000000000000000000000001",
        "1.000000000000000000000000000001",
    ],
)
def test_validate_amount_rejects_values_beyond_stored_precision(amount):
    result = validate_amount(amount)

    assert isinstance(result, Failure)
    assert result.error.subtype == "InvalidAmount"


def test_validate_amount_accepts_largest_storable_value():
    assert validate_amount("9999999999999999.99").value == Decimal(
        "9999999999999999.99"
    )


def test_validate_journal_lines_rejects_oversized_amounts_before_summing():
    lines = [
        _line("a", "1000000000000000000000000000001", "Debit"),
        _line("b", "1000000000000000000000000000000", "Credit"),
    ]

    assert validate_journal_lines(lines).error.subtype == "InvalidAmount"


def test_validate_journal_lines_detects_one_cent_gap_on_large_amounts():
    lines = [
        _line("a", "9999999999999999.99", "Debit"),
        _line("b", "9999999999999999.98", "Credit"),
    ]

    assert validate_journal_lines(lines).error.subtype == "JournalEntryNotBalanced"


def test_validate_entry_date_parses_iso_values():
    assert validate_entry_date("2025-01-15").value == date(2025, 1, 15)
    assert validate_entry_date("2025-01-15T10:00:00Z").value == date(2025, 1, 15)
    assert validate_entry_date(date(2025, 2, 1)).value == date(2025, 2, 1)
    assert validate_entry_date("2025-02-30").error.subtype == "InvalidJournalEntryDate"
    assert validate_entry_date("").error.subtype == "InvalidJournalEntryDate"


def test_validate_date_not_future():
    today = date(2025, 6, 1)

    assert validate_date_not_future("2025-06-01", today).value == today
    failure = validate_date_not_future("2025-06-02", today)
    assert failure.error.subtype == "DateInFuture"
    assert validate_date_not_future("nope", today).error.subtype == (
        "InvalidJournalEntryDate"
    )


def test_validate_entry_number_is_optional():
    assert validate_entry_number(None).value is None
    assert validate_entry_number("   ").value is None
    assert validate_entry_number(" JE-1 ").value == "JE-1"
    assert validate_entry_number("n" * 51).error.subtype == "InvalidEntryNumber"


def test_validate_has_lines_requires_two():
    assert validate_has_lines([]).error.subtype == "InsufficientLines"
    assert validate_has_lines([object()]).error.subtype == "InsufficientLines"
    assert isinstance(validate_has_lines([object(), object()]), Success)


def test_validate_journal_line_checks_amount_before_side():
    failure = validate_journal_line("acc-1", -1, "Sideways")

    assert failure.error.subtype == "InvalidAmount"
    assert validate_journal_line("acc-1", 5, "Up").error.subtype == "InvalidSide"
    line = validate_journal_line("acc-1", "5.25", "Credit").value
    assert line == JournalLine("acc-1", Decimal("5.25"), JournalLineSide.CREDIT)


def test_validate_balanced_uses_tolerance():
    balanced = [
        JournalLine("a", Decimal("10.00"), JournalLineSide.DEBIT),
        JournalLine("b", Decimal("10.00"), JournalLineSide.CREDIT),
    ]
    unbalanced = [
        JournalLine("a", Decimal("100.00"), JournalLineSide.DEBIT),
        JournalLine("b", Decimal("99.00"), JournalLineSide.CREDIT),
    ]

    assert isinstance(validate_balanced(balanced), Success)
    failure = validate_balanced(unbalanced)
    assert failure.error.subtype == "JournalEntryNotBalanced"
    assert "100.00" in failure.error.message
    assert "99.00" in failure.error.message


def test_validate_balanced_allows_one_sided_debits_and_credits_per_account():
    lines = [
        JournalLine("a", Decimal("60"), JournalLineSide.DEBIT),
        JournalLine("a", Decimal("40"), JournalLineSide.DEBIT),
        JournalLine("b", Decimal("100"), JournalLineSide.CREDIT),
    ]

    assert isinstance(validate_balanced(lines), Success)


def test_validate_journal_lines_order_structure_lines_then_balance():
    assert validate_journal_lines([_line("a", 1, "Debit")]).error.subtype == (
        "InsufficientLines"
    )
    bad_line_and_unbalanced = [_line("a", 0, "Debit"), _line("b", 5, "Credit")]
    assert validate_journal_lines(bad_line_and_unbalanced).error.subtype == (
        "InvalidAmount"
    )
    unbalanced = [_line("a", 100, "Debit"), _line("b", 99, "Credit")]
    assert validate_journal_lines(unbalanced).error.subtype == (
        "JournalEntryNotBalanced"
    )


def test_validate_journal_lines_preserves_order():
    raw = [
        _line("a", "50", "Debit"),
        _line("b", "25", "Credit"),
        _line("c", "25", "Credit"),
    ]

    result = validate_journal_lines(raw)

    assert [line.account_id for line in result.value] == ["a", "b", "c"]


def test_validate_period_date_range():
    assert validate_period_date_range("2025-01-01", "2025-03-31").value == (
        date(2025, 1, 1),
        date(2025, 3, 31),
    )
    same_day = validate_period_date_range("2025-01-01", "2025-01-01")
    assert same_day.error.subtype == "InvalidPeriodDateRange"
    assert same_day.error.message == "Start date must be before end date."
    invalid = validate_period_date_range("garbage", "2025-01-01")
    assert invalid.error.message == "Start date or end date is invalid."
