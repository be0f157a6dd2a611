"""Domain services for journal entries and accounts."""

from collections.abc import Iterable, Sequence

from src.domain.models.accounts import NewAccount
from src.domain.models.journal import JournalLine, NewJournalEntry
from src.domain.results import Failure, Outcome, map_success
from src.domain.services.validation import (
    validate_account_code,
    validate_account_name,
    validate_account_type,
    validate_description,
    validate_entry_date,
    validate_entry_number,
    validate_journal_lines,
    validate_normal_balance,
)


def build_journal_entry(
    tenant_id: str,
    description,
    entry_date,
    lines: Sequence,
    entry_number=None,
) -> Outcome[NewJournalEntry]:
    """Validate raw entry fields into a ``NewJournalEntry``.

    Checks run in a fixed order and stop at the first failure: description,
    date, entry number, line count, each line, then the balance.

    Args:
        tenant_id: Owning tenant.
        description: Raw description.
        entry_date: Raw date (date, datetime or ISO string).
        lines: Raw lines exposing ``account_id``, ``amount`` and ``side``.
        entry_number: Optional external reference.

    Returns:
        Outcome[NewJournalEntry]: Validated entry or the first failure.
    """
    description_result = validate_description(description)
    if isinstance(description_result, Failure):
        return description_result
    date_result = validate_entry_date(entry_date)
    if isinstance(date_result, Failure):
        return date_result
    number_result = validate_entry_number(entry_number)
    if isinstance(number_result, Failure):
        return number_result
    return map_success(
        validate_journal_lines(lines),
        lambda valid_lines: NewJournalEntry(
            tenant_id=tenant_id,
            description=description_result.value,
            date=date_result.value,
            lines=valid_lines,
            entry_number=number_result.value,
        ),
    )


def build_account(
    tenant_id: str,
    code,
    name,
    account_type,
    normal_balance,
) -> Outcome[NewAccount]:
    """Validate raw account fields into a ``NewAccount``."""
    code_result = validate_account_code(code)
    if isinstance(code_result, Failure):
        return code_result
    name_result = validate_account_name(name)
    if isinstance(name_result, Failure):
        return name_result
    type_result = validate_account_type(account_type)
    if isinstance(type_result, Failure):
        return type_result
    return map_success(
        validate_normal_balance(normal_balance),
        lambda balance: NewAccount(
            tenant_id=tenant_id,
            code=code_result.value,
            name=name_result.value,
            account_type=type_result.value,
            normal_balance=balance,
        ),
    )


def distinct_account_ids(lines: Iterable[JournalLine]) -> list[str]:
    """Return referenced account ids once each, in first-seen order."""
    return list(dict.fromkeys(line.account_id for line in lines))


__all__ = ["build_journal_entry", "build_account", "distinct_account_ids"]
