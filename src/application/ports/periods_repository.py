"""Port for tenant-scoped period storage."""

from datetime import datetime
from typing import Protocol

from src.domain.models.periods import NewPeriod, Period, PeriodStatus
from src.domain.results import Outcome


class PeriodsRepositoryPort(Protocol):
    """Port exposing period reads and writes."""

    def find_by_id(self, tenant_id: str, period_id: str) -> Outcome[Period | None]:
        """Return the period with this id, or None."""

    def list_periods(
        self,
        tenant_id: str,
        status: PeriodStatus | None = None,
    ) -> Outcome[list[Period]]:
        """Return the tenant's periods, newest start date first."""

    def create_period(self, period: NewPeriod) -> Outcome[Period]:
        """Persist a period. A (tenant, name) collision fails with ``DuplicateKey``."""

    def update_period(
        self,
        tenant_id: str,
        period_id: str,
        *,
        status: PeriodStatus,
        closed_at: datetime | None,
        expected_status: PeriodStatus | None = None,
    ) -> Outcome[Period | None]:
        """Update status fields in a single statement.

        Returns None when no row matched, including when ``expected_status``
        no longer holds.
        """


__all__ = ["PeriodsRepositoryPort"]
