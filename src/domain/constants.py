"""Domain constants for the ledger."""

from decimal import Decimal
import re

from src.domain.models.accounts import AccountType, NormalBalance

ACCOUNT_CODE_PATTERN = re.compile(r"^[0-9]+(\.[0-9]+)?$")
ACCOUNT_CODE_MAX_LENGTH = 20
NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 100
DESCRIPTION_MIN_LENGTH = 1
DESCRIPTION_MAX_LENGTH = 500
ENTRY_NUMBER_MAX_LENGTH = 50
MIN_JOURNAL_LINES = 2

# Debits and credits may differ by at most this amount.
BALANCE_TOLERANCE = Decimal("0.001")
CENT = Decimal("0.01")
# Amounts are stored as Numeric(18, 2): at most 16 integer digits.
AMOUNT_MAX_INTEGER_DIGITS = 16

# (code, name, type, normal balance). Codes are immutable, names renamable.
DEFAULT_CHART_OF_ACCOUNTS = (
    ("101", "Cash", AccountType.ASSET, NormalBalance.DEBIT),
    ("111", "Accounts Receivable", AccountType.ASSET, NormalBalance.DEBIT),
    ("141", "Supplies", AccountType.ASSET, NormalBalance.DEBIT),
    ("145", "Prepaid Insurance", AccountType.ASSET, NormalBalance.DEBIT),
    ("191", "Equipment / Fixed Assets", AccountType.ASSET, NormalBalance.DEBIT),
    (
        "191.1",
        "Accumulated Depreciation - Equipment",
        AccountType.ASSET,
        NormalBalance.CREDIT,
    ),
    ("201", "Accounts Payable", AccountType.LIABILITY, NormalBalance.CREDIT),
    ("251", "Notes Payable", AccountType.LIABILITY, NormalBalance.CREDIT),
    ("255", "Unearned Revenue", AccountType.LIABILITY, NormalBalance.CREDIT),
    ("301", "Owner, Capital", AccountType.EQUITY, NormalBalance.CREDIT),
    ("302", "Owner, Drawing", AccountType.EQUITY, NormalBalance.DEBIT),
    ("401", "Service Revenue", AccountType.REVENUE, NormalBalance.CREDIT),
    (
        "501",
        "Salaries Expense / Subcontractor Fee",
        AccountType.EXPENSE,
        NormalBalance.DEBIT,
    ),
    ("502", "Rent Expense", AccountType.EXPENSE, NormalBalance.DEBIT),
    ("503", "Office Supplies Expense", AccountType.EXPENSE, NormalBalance.DEBIT),
    ("504", "Training Expense", AccountType.EXPENSE, NormalBalance.DEBIT),
    (
        "505",
        "Interest Expense / Late Fees",
        AccountType.EXPENSE,
        NormalBalance.DEBIT,
    ),
    (
        "506",
        "Repairs & Maintenance Expense",
        AccountType.EXPENSE,
        NormalBalance.DEBIT,
    ),
)


__all__ = [
    "ACCOUNT_CODE_PATTERN",
    "ACCOUNT_CODE_MAX_LENGTH",
    "NAME_MIN_LENGTH",
    "NAME_MAX_LENGTH",
    "DESCRIPTION_MIN_LENGTH",
    "DESCRIPTION_MAX_LENGTH",
    "ENTRY_NUMBER_MAX_LENGTH",
    "MIN_JOURNAL_LINES",
    "BALANCE_TOLERANCE",
    "CENT",
    "AMOUNT_MAX_INTEGER_DIGITS",
    "DEFAULT_CHART_OF_ACCOUNTS",
]
