"""SQLAlchemy-backed repository for accounting periods."""

from datetime import datetime
import uuid

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.clock import ClockPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.periods_repository import PeriodsRepositoryPort
from src.domain.models.periods import NewPeriod, Period, PeriodStatus
from src.domain.results import Outcome, Success
from src.infrastructure.clock import SystemClock
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.repository_errors import failure_from_exception
from src.infrastructure.schema import periods


def _to_period(row) -> Period:
    return Period(
        id=row.id,
        tenant_id=row.tenant_id,
        name=row.name,
        start_date=row.start_date,
        end_date=row.end_date,
        status=PeriodStatus(row.status),
        closed_at=row.closed_at,
        created_at=row.created_at,
    )


class SqlAlchemyPeriodsRepository(PeriodsRepositoryPort):
    """Repository backed by SQLAlchemy for tenant-scoped periods."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        clock: ClockPort | None = None,
        logger=None,
    ) -> None:
        self._db_port = db_port
        self._clock = clock or SystemClock()
        self._logger = logger or get_app_logger()

    def find_by_id(self, tenant_id: str, period_id: str) -> Outcome[Period | None]:
        """Fetch one period of the tenant, or None when it does not exist."""
        query = select(periods).where(
            periods.c.tenant_id == tenant_id,
            periods.c.id == period_id,
        )
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                row = conn.execute(query).first()
        except SQLAlchemyError as exc:
            return failure_from_exception(exc, "find_period_by_id", self._logger)
        return Success(_to_period(row) if row is not None else None)

    def list_periods(
        self,
        tenant_id: str,
        status: PeriodStatus | None = None,
    ) -> Outcome[list[Period]]:
        """List a tenant's periods ordered by start date, newest first.

        Args:
            tenant_id: Owning tenant.
            status: Optional status filter.

        Returns:
            Outcome[list[Period]]: Matching periods or ``RepositoryError``.
        """
        query = select(periods).where(periods.c.tenant_id == tenant_id)
        if status is not None:
            query = query.where(periods.c.status == PeriodStatus(status).value)
        query = query.order_by(periods.c.start_date.desc())
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                rows = conn.execute(query).all()
        except SQLAlchemyError as exc:
            return failure_from_exception(exc, "list_periods", self._logger)
        return Success([_to_period(row) for row in rows])

    def create_period(self, period: NewPeriod) -> Outcome[Period]:
        created = Period(
            id=str(uuid.uuid4()),
            tenant_id=period.tenant_id,
            name=period.name,
            start_date=period.start_date,
            end_date=period.end_date,
            status=period.status,
            closed_at=None,
            created_at=self._clock.now(),
        )
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                conn.execute(
                    periods.insert().values(
                        id=created.id,
                        tenant_id=created.tenant_id,
                        name=created.name,
                        start_date=created.start_date,
                        end_date=created.end_date,
                        status=created.status.value,
                        closed_at=None,
                        created_at=created.created_at,
                    )
                )
        except SQLAlchemyError as exc:
            return failure_from_exception(exc, "create_period", self._logger)
        return Success(created)

    def update_period(
        self,
        tenant_id: str,
        period_id: str,
        *,
        status: PeriodStatus,
        closed_at: datetime | None,
        expected_status: PeriodStatus | None = None,
    ) -> Outcome[Period | None]:
        """Update status fields in one guarded statement.

        Args:
            tenant_id: Owning tenant.
            period_id: Period to update.
            status: New status.
            closed_at: New close timestamp.
            expected_status: When given, the row only changes if it still
                has this status.

        Returns:
            Outcome[Period | None]: The updated period, or None when no row
            matched.
        """
        statement = (
            periods.update()
            .where(periods.c.tenant_id == tenant_id, periods.c.id == period_id)
            .values(status=PeriodStatus(status).value, closed_at=closed_at)
        )
        if expected_status is not None:
            statement = statement.where(
                periods.c.status == PeriodStatus(expected_status).value
            )
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                result = conn.execute(statement)
                if result.rowcount == 0:
                    return Success(None)
                row = conn.execute(
                    select(periods).where(
                        periods.c.tenant_id == tenant_id,
                        periods.c.id == period_id,
                    )
                ).first()
        except SQLAlchemyError as exc:
            return failure_from_exception(exc, "update_period", self._logger)
        return Success(_to_period(row))


__all__ = ["SqlAlchemyPeriodsRepository"]
