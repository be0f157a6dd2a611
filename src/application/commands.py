"""Typed commands and the parse step that builds them from raw payloads.

Parsing only checks the payload's shape (presence and types). Business rules
stay in the domain validators run by the use cases.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any

from src.domain.errors import ApplicationSubtype, application_failure
from src.domain.results import Failure, Outcome, Success


@dataclass(frozen=True)
class JournalLineInput:
    """Unvalidated journal line as received from a caller."""

    account_id: str
    amount: Any
    side: Any


@dataclass(frozen=True)
class CreateAccountCommand:
    tenant_id: str
    code: str
    name: str
    account_type: Any
    normal_balance: Any


@dataclass(frozen=True)
class PostJournalEntryCommand:
    """Request to post a journal entry.

    Attributes:
        tenant_id: Owning tenant.
        description: Raw description.
        date: ISO 8601 date string (or a date).
        lines: Unvalidated lines, in order.
        entry_number: Optional external reference.
    """

    tenant_id: str
    description: str
    date: str | date
    lines: tuple[JournalLineInput, ...]
    entry_number: str | None = None


# Manual adjusting entries share the posting command shape.
PostManualJournalEntryCommand = PostJournalEntryCommand


@dataclass(frozen=True)
class CreatePeriodCommand:
    tenant_id: str
    name: str
    start_date: str | date
    end_date: str | date


@dataclass(frozen=True)
class ClosePeriodCommand:
    tenant_id: str
    period_id: str


def _missing(field_name: str, expected: str = "a string") -> Failure:
    return Failure(
        application_failure(
            ApplicationSubtype.MISSING_FIELD,
            f"{field_name} is required and must be {expected}.",
        )
    )


def _invalid(message: str) -> Failure:
    return Failure(
        application_failure(ApplicationSubtype.INVALID_COMMAND, message)
    )


def _require_tenant(payload: Mapping) -> Outcome[str]:
    tenant_id = payload.get("tenant_id")
    if not isinstance(tenant_id, str) or not tenant_id.strip():
        return _missing("tenant_id", "a non-empty string")
    return Success(tenant_id.strip())


def _require_str(payload: Mapping, field_name: str) -> Outcome[str]:
    value = payload.get(field_name)
    if not isinstance(value, str):
        return _missing(field_name)
    return Success(value)


def _require_date(payload: Mapping, field_name: str) -> Outcome[str | date]:
    value = payload.get(field_name)
    if isinstance(value, (str, date)):
        return Success(value)
    return _missing(field_name, "an ISO 8601 string")


def _parse_line(index: int, raw) -> Outcome[JournalLineInput]:
    if not isinstance(raw, Mapping):
        return _invalid(f"Line {index} must be an object.")
    account_id = raw.get("account_id")
    if not isinstance(account_id, str) or not account_id.strip():
        return _invalid(f"Line {index} requires an account_id string.")
    amount = raw.get("amount")
    if isinstance(amount, bool) or not isinstance(
        amount, (int, float, str, Decimal)
    ):
        return _invalid(f"Line {index} requires a numeric amount.")
    side = raw.get("side")
    if not isinstance(side, str):
        return _invalid(f"Line {index} requires a side of Debit or Credit.")
    return Success(
        JournalLineInput(account_id=account_id.strip(), amount=amount, side=side)
    )


def parse_journal_lines(raw_lines) -> Outcome[tuple[JournalLineInput, ...]]:
    """Parse the ``lines`` array of a posting payload."""
    if isinstance(raw_lines, (str, bytes)) or not isinstance(raw_lines, Sequence):
        return _missing("lines", "an array")
    parsed = []
    for index, raw in enumerate(raw_lines):
        line = _parse_line(index, raw)
        if isinstance(line, Failure):
            return line
        parsed.append(line.value)
    return Success(tuple(parsed))


def parse_create_account_command(payload: Mapping) -> Outcome[CreateAccountCommand]:
    tenant = _require_tenant(payload)
    if isinstance(tenant, Failure):
        return tenant
    fields = {}
    for name in ("code", "name", "account_type", "normal_balance"):
        result = _require_str(payload, name)
        if isinstance(result, Failure):
            return result
        fields[name] = result.value
    return Success(CreateAccountCommand(tenant_id=tenant.value, **fields))


def parse_post_journal_entry_command(
    payload: Mapping,
) -> Outcome[PostJournalEntryCommand]:
    """Build a posting command from an untyped payload.

    Args:
        payload: Mapping with ``tenant_id``, ``description``, ``date``,
            ``lines`` and an optional ``entry_number``.

    Returns:
        Outcome[PostJournalEntryCommand]: Command or an ApplicationFailure.
    """
    tenant = _require_tenant(payload)
    if isinstance(tenant, Failure):
        return tenant
    description = _require_str(payload, "description")
    if isinstance(description, Failure):
        return description
    entry_date = _require_date(payload, "date")
    if isinstance(entry_date, Failure):
        return entry_date
    lines = parse_journal_lines(payload.get("lines"))
    if isinstance(lines, Failure):
        return lines
    entry_number = payload.get("entry_number")
    if entry_number is not None and not isinstance(entry_number, str):
        return _invalid("entry_number must be a string when provided.")
    return Success(
        PostJournalEntryCommand(
            tenant_id=tenant.value,
            description=description.value,
            date=entry_date.value,
            lines=lines.value,
            entry_number=entry_number,
        )
    )


parse_post_manual_journal_entry_command = parse_post_journal_entry_command


def parse_create_period_command(payload: Mapping) -> Outcome[CreatePeriodCommand]:
    tenant = _require_tenant(payload)
    if isinstance(tenant, Failure):
        return tenant
    name = _require_str(payload, "name")
    if isinstance(name, Failure):
        return name
    start = _require_date(payload, "start_date")
    if isinstance(start, Failure):
        return start
    end = _require_date(payload, "end_date")
    if isinstance(end, Failure):
        return end
    return Success(
        CreatePeriodCommand(
            tenant_id=tenant.value,
            name=name.value,
            start_date=start.value,
            end_date=end.value,
        )
    )


def parse_close_period_command(payload: Mapping) -> Outcome[ClosePeriodCommand]:
    tenant = _require_tenant(payload)
    if isinstance(tenant, Failure):
        return tenant
    period_id = _require_str(payload, "period_id")
    if isinstance(period_id, Failure):
        return period_id
    return Success(
        ClosePeriodCommand(tenant_id=tenant.value, period_id=period_id.value)
    )


__all__ = [
    "JournalLineInput",
    "CreateAccountCommand",
    "PostJournalEntryCommand",
    "PostManualJournalEntryCommand",
    "CreatePeriodCommand",
    "ClosePeriodCommand",
    "parse_journal_lines",
    "parse_create_account_command",
    "parse_post_journal_entry_command",
    "parse_post_manual_journal_entry_command",
    "parse_create_period_command",
    "parse_close_period_command",
]
