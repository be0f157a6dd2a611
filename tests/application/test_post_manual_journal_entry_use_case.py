"""Tests for the period-gated PostManualJournalEntryUseCase."""

from dataclasses import replace
from datetime import date
from unittest.mock import MagicMock

import pytest

from src.application.commands import JournalLineInput, PostManualJournalEntryCommand
from src.application.use_cases.post_manual_journal_entry import (
    PostManualJournalEntryUseCase,
)
from src.domain.errors import InfrastructureSubtype, infrastructure_failure
from src.domain.models.periods import Period, PeriodStatus
from src.domain.results import Failure, Success


class _FakePeriodsRepository:
    def __init__(self, periods=(), failure=None):
        self._periods = list(periods)
        self._failure = failure
        self.calls = []

    def list_periods(self, tenant_id, status=None):
        self.calls.append((tenant_id, status))
        if self._failure is not None:
            return self._failure
        return Success(
            [
                p
                for p in self._periods
                if p.tenant_id == tenant_id and (status is None or p.status == status)
            ]
        )


def _period(name, start, end, status=PeriodStatus.OPEN, tenant_id="tenant-a"):
    return Period(
        id=name,
        tenant_id=tenant_id,
        name=name,
        start_date=start,
        end_date=end,
        status=status,
    )


Q1 = _period("Q1", date(2025, 1, 1), date(2025, 3, 31))
Q2_CLOSED = _period(
    "Q2", date(2025, 4, 1), date(2025, 6, 30), status=PeriodStatus.CLOSED
)

COMMAND = PostManualJournalEntryCommand(
    tenant_id="tenant-a",
    description="Depreciation adjustment",
    date="2025-02-14",
    lines=(
        JournalLineInput("expense", 250, "Debit"),
        JournalLineInput("accumulated", 250, "Credit"),
    ),
)


def _use_case(periods):
    post = MagicMock()
    post.execute.return_value = Success("posted")
    logger = MagicMock()
    use_case = PostManualJournalEntryUseCase(periods, post, logger=logger)
    return use_case, post, logger


def test_entry_inside_open_period_is_delegated():
    periods = _FakePeriodsRepository([Q1, Q2_CLOSED])
    use_case, post, _ = _use_case(periods)

    result = use_case.execute(COMMAND)

    assert result == Success("posted")
    post.execute.assert_called_once_with(COMMAND)
    assert periods.calls == [("tenant-a", PeriodStatus.OPEN)]


@pytest.mark.parametrize("entry_date", ["2025-01-01", "2025-03-31"])
def test_period_bounds_are_inclusive(entry_date):
    use_case, post, _ = _use_case(_FakePeriodsRepository([Q1]))

    result = use_case.execute(replace(COMMAND, date=entry_date))

    assert isinstance(result, Success)
    post.execute.assert_called_once()


def test_entry_inside_closed_period_is_rejected():
    use_case, post, logger = _use_case(_FakePeriodsRepository([Q1, Q2_CLOSED]))

    result = use_case.execute(replace(COMMAND, date="2025-05-10"))

    assert isinstance(result, Failure)
    assert result.error.kind.value == "DomainFailure"
    assert result.error.subtype == "PeriodNotOpen"
    assert "2025-05-10" in result.error.message
    post.execute.assert_not_called()
    logger.warning.assert_called_once()


def test_no_periods_at_all_is_rejected():
    use_case, post, _ = _use_case(_FakePeriodsRepository())

    result = use_case.execute(COMMAND)

    assert result.error.subtype == "PeriodNotOpen"
    post.execute.assert_not_called()


def test_open_period_of_another_tenant_does_not_admit_entry():
    other = _period(
        "Q1-b", date(2025, 1, 1), date(2025, 3, 31), tenant_id="tenant-b"
    )
    use_case, post, _ = _use_case(_FakePeriodsRepository([other]))

    result = use_case.execute(COMMAND)

    assert result.error.subtype == "PeriodNotOpen"
    post.execute.assert_not_called()


@pytest.mark.parametrize(
    "changes, message",
    [
        ({"description": "   "}, "Description is required."),
        ({"date": ""}, "Date is required."),
        ({"date": None}, "Date is required."),
        ({"lines": ()}, "At least one journal line is required."),
        ({"date": "14/02/2025"}, "Invalid date format."),
    ],
)
def test_shape_errors_are_application_failures(changes, message):
    periods = _FakePeriodsRepository([Q1])
    use_case, post, _ = _use_case(periods)

    result = use_case.execute(replace(COMMAND, **changes))

    assert result.error.kind.value == "ApplicationFailure"
    assert result.error.subtype == "InvalidCommand"
    assert result.error.message == message
    assert periods.calls == []
    post.execute.assert_not_called()


def test_period_listing_failure_is_passed_through():
    failure = Failure(
        infrastructure_failure(InfrastructureSubtype.REPOSITORY_ERROR, "down")
    )
    use_case, post, _ = _use_case(_FakePeriodsRepository(failure=failure))

    assert use_case.execute(COMMAND) is failure
    post.execute.assert_not_called()


def test_posting_failure_after_gate_is_returned_unchanged():
    use_case, post, _ = _use_case(_FakePeriodsRepository([Q1]))
    rejected = Failure(
        infrastructure_failure(InfrastructureSubtype.DUPLICATE_KEY, "dup")
    )
    post.execute.return_value = rejected

    assert use_case.execute(COMMAND) is rejected
