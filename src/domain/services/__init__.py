"""Domain services package."""

from .ledger import build_account, build_journal_entry, distinct_account_ids
from .normalization import normalize_text, parse_calendar_date
from .periods import (
    build_period,
    close_period,
    ensure_period_can_be_closed,
    ensure_period_is_open,
    find_open_period_covering,
    require_open_period_covering,
)
from .validation import (
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

__all__ = [
    "build_account",
    "build_journal_entry",
    "distinct_account_ids",
    "normalize_text",
    "parse_calendar_date",
    "build_period",
    "close_period",
    "ensure_period_can_be_closed",
    "ensure_period_is_open",
    "find_open_period_covering",
    "require_open_period_covering",
    "validate_account_code",
    "validate_account_name",
    "validate_account_type",
    "validate_amount",
    "validate_balanced",
    "validate_date_not_future",
    "validate_description",
    "validate_entry_date",
    "validate_entry_number",
    "validate_has_lines",
    "validate_journal_line",
    "validate_journal_lines",
    "validate_normal_balance",
    "validate_period_date_range",
    "validate_period_name",
    "validate_side",
]
