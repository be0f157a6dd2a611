"""Domain services for the period lifecycle.

States are Open (initial) and Closed (terminal). There is no reopen.
"""

from collections.abc import Iterable
from dataclasses import replace
from datetime import date, datetime

from src.domain.errors import PeriodDomainSubtype, domain_failure
from src.domain.models.periods import NewPeriod, Period, PeriodStatus
from src.domain.results import Failure, Outcome, Success, and_then, map_success
from src.domain.services.validation import (
    validate_period_date_range,
    validate_period_name,
)


def build_period(
    tenant_id: str,
    name,
    start_date,
    end_date,
) -> Outcome[NewPeriod]:
    """Validate raw period fields into an Open ``NewPeriod``."""
    return and_then(
        validate_period_name(name),
        lambda valid_name: map_success(
            validate_period_date_range(start_date, end_date),
            lambda bounds: NewPeriod(
                tenant_id=tenant_id,
                name=valid_name,
                start_date=bounds[0],
                end_date=bounds[1],
            ),
        ),
    )


def ensure_period_is_open(period: Period) -> Outcome[Period]:
    if period.status == PeriodStatus.CLOSED:
        return Failure(
            domain_failure(
                PeriodDomainSubtype.PERIOD_ALREADY_CLOSED,
                f"Period {period.name} is already closed.",
            )
        )
    return Success(period)


def ensure_period_can_be_closed(period: Period) -> Outcome[Period]:
    """Check close preconditions. Only the Open status is required today."""
    return ensure_period_is_open(period)


def close_period(period: Period, closed_at: datetime) -> Period:
    """Return the closed version of an open period."""
    return replace(period, status=PeriodStatus.CLOSED, closed_at=closed_at)


def find_open_period_covering(
    periods: Iterable[Period],
    value: date,
) -> Period | None:
    """Return the first open period covering ``value``, if any."""
    for period in periods:
        if period.is_open and period.covers(value):
            return period
    return None


def require_open_period_covering(
    periods: Iterable[Period],
    value: date,
) -> Outcome[Period]:
    """Fail with ``PeriodNotOpen`` unless an open period covers ``value``."""
    period = find_open_period_covering(periods, value)
    if period is None:
        return Failure(
            domain_failure(
                PeriodDomainSubtype.PERIOD_NOT_OPEN,
                f"The date {value.isoformat()} is not within any open period.",
            )
        )
    return Success(period)


__all__ = [
    "build_period",
    "ensure_period_is_open",
    "ensure_period_can_be_closed",
    "close_period",
    "find_open_period_covering",
    "require_open_period_covering",
]
