"""Tests for parsing raw payloads into commands."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.commands import (
    JournalLineInput,
    parse_close_period_command,
    parse_create_account_command,
    parse_create_period_command,
    parse_post_journal_entry_command,
)
from src.application.use_cases.queries import GetJournalEntriesUseCase
from src.domain.results import Failure, Success

ENTRY_PAYLOAD = {
    "tenant_id": " tenant-a ",
    "description": "Rent",
    "date": "2025-01-31",
    "lines": [
        {"account_id": "rent", "amount": "1200.00", "side": "Debit"},
        {"account_id": "cash", "amount": Decimal("1200"), "side": "Credit"},
    ],
}


def test_parse_post_journal_entry_command_builds_typed_command():
    result = parse_post_journal_entry_command(ENTRY_PAYLOAD)

    assert isinstance(result, Success)
    command = result.value
    assert command.tenant_id == "tenant-a"
    assert command.entry_number is None
    assert command.lines == (
        JournalLineInput("rent", "1200.00", "Debit"),
        JournalLineInput("cash", Decimal("1200"), "Credit"),
    )


def test_missing_tenant_is_missing_field():
    payload = dict(ENTRY_PAYLOAD, tenant_id="")

    result = parse_post_journal_entry_command(payload)

    assert result.error.kind.value == "ApplicationFailure"
    assert result.error.subtype == "MissingField"


@pytest.mark.parametrize(
    "lines, subtype",
    [
        (None, "MissingField"),
        ("not-a-list", "MissingField"),
        ([{"account_id": "a", "amount": True, "side": "Debit"}], "InvalidCommand"),
        ([{"account_id": "", "amount": 1, "side": "Debit"}], "InvalidCommand"),
        ([{"account_id": "a", "amount": 1}], "InvalidCommand"),
        (["line"], "InvalidCommand"),
    ],
)
def test_malformed_lines_are_application_failures(lines, subtype):
    result = parse_post_journal_entry_command(dict(ENTRY_PAYLOAD, lines=lines))

    assert isinstance(result, Failure)
    assert result.error.subtype == subtype


def test_empty_strings_are_left_for_domain_validation():
    result = parse_post_journal_entry_command(
        dict(ENTRY_PAYLOAD, description="", lines=[])
    )

    assert isinstance(result, Success)
    assert result.value.description == ""
    assert result.value.lines == ()


def test_non_string_entry_number_is_rejected():
    result = parse_post_journal_entry_command(dict(ENTRY_PAYLOAD, entry_number=7))

    assert result.error.subtype == "InvalidCommand"


def test_parse_create_account_command_requires_all_fields():
    payload = {
        "tenant_id": "t",
        "code": "101",
        "name": "Cash",
        "account_type": "Asset",
        "normal_balance": "Debit",
    }

    assert parse_create_account_command(payload).value.code == "101"
    missing = parse_create_account_command(dict(payload, normal_balance=None))
    assert missing.error.subtype == "MissingField"
    assert "normal_balance" in missing.error.message


def test_parse_period_commands():
    created = parse_create_period_command(
        {"tenant_id": "t", "name": "Q1", "start_date": "2025-01-01", "end_date": "2025-03-31"}
    )
    closed = parse_close_period_command({"tenant_id": "t", "period_id": "p-1"})

    assert created.value.name == "Q1"
    assert closed.value.period_id == "p-1"
    assert parse_create_period_command({"tenant_id": "t", "name": "Q1"}).error.subtype == (
        "MissingField"
    )


def test_get_journal_entries_clamps_skip_and_reports_missing_entry():
    repo = MagicMock()
    repo.list_entries.return_value = Success([])
    repo.find_by_id.return_value = Success(None)
    queries = GetJournalEntriesUseCase(repo)

    queries.execute("t", skip=-5, take=10)
    missing = queries.get("t", "je-9")

    repo.list_entries.assert_called_once_with("t", skip=0, take=10)
    assert missing.error.subtype == "JournalEntryNotFound"
