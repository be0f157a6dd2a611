"""Domain models for accounting periods."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class PeriodStatus(str, Enum):
    """Lifecycle status. Closed is terminal."""

    OPEN = "Open"
    CLOSED = "Closed"


@dataclass(frozen=True)
class NewPeriod:
    """Validated period waiting to be persisted."""

    tenant_id: str
    name: str
    start_date: date
    end_date: date
    status: PeriodStatus = PeriodStatus.OPEN


@dataclass(frozen=True)
class Period:
    """Named date range gating manual postings.

    Attributes:
        id: Generated identifier.
        tenant_id: Owning tenant.
        name: Name, unique per tenant.
        start_date: First covered date (inclusive).
        end_date: Last covered date (inclusive).
        status: Open or Closed.
        closed_at: Set once, on the Open to Closed transition.
        created_at: Creation timestamp.
    """

    id: str
    tenant_id: str
    name: str
    start_date: date
    end_date: date
    status: PeriodStatus = PeriodStatus.OPEN
    closed_at: datetime | None = None
    created_at: datetime | None = None

    @property
    def is_open(self) -> bool:
        return self.status == PeriodStatus.OPEN

    def covers(self, value: date) -> bool:
        """Return True when ``value`` falls inside the period, bounds included."""
        return self.start_date <= value <= self.end_date


__all__ = ["PeriodStatus", "NewPeriod", "Period"]
