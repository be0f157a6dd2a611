"""Use case for closing an accounting period.

Closing is the only transition: Open to Closed. It sets ``closed_at`` once
and cannot be undone.
"""

from src.application.commands import ClosePeriodCommand
from src.application.ports.clock import ClockPort
from src.application.ports.periods_repository import PeriodsRepositoryPort
from src.application.use_cases.outcome_logging import log_failure
from src.domain.errors import (
    ApplicationSubtype,
    PeriodDomainSubtype,
    application_failure,
    domain_failure,
)
from src.domain.models.periods import Period, PeriodStatus
from src.domain.results import Failure, Outcome, Success
from src.domain.services.periods import close_period, ensure_period_can_be_closed
from src.infrastructure.logging.logger import get_app_logger


class ClosePeriodUseCase:
    """Close an open period owned by the requesting tenant."""

    def __init__(
        self,
        periods_repository: PeriodsRepositoryPort,
        clock: ClockPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            periods_repository: Tenant-scoped period storage.
            clock: Time source for ``closed_at``.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._periods = periods_repository
        self._clock = clock
        self._logger = logger or get_app_logger()

    def execute(self, command: ClosePeriodCommand) -> Outcome[Period]:
        """Close the period named by ``command``.

        Returns:
            Outcome[Period]: The closed period, or ``PeriodNotFound`` /
            ``PeriodAlreadyClosed`` / an infrastructure failure.
        """
        if not command.period_id or not command.period_id.strip():
            failure = Failure(
                application_failure(
                    ApplicationSubtype.INVALID_COMMAND, "Period ID is required."
                )
            )
            log_failure(self._logger, "close_period", failure.error)
            return failure

        found = self._periods.find_by_id(command.tenant_id, command.period_id)
        if isinstance(found, Failure):
            log_failure(self._logger, "close_period", found.error)
            return found
        if found.value is None:
            failure = Failure(
                domain_failure(
                    PeriodDomainSubtype.PERIOD_NOT_FOUND,
                    f"Period with ID {command.period_id} not found.",
                )
            )
            log_failure(self._logger, "close_period", failure.error)
            return failure

        closable = ensure_period_can_be_closed(found.value)
        if isinstance(closable, Failure):
            log_failure(self._logger, "close_period", closable.error)
            return closable

        closed = close_period(closable.value, self._clock.now())
        updated = self._periods.update_period(
            command.tenant_id,
            command.period_id,
            status=closed.status,
            closed_at=closed.closed_at,
            expected_status=PeriodStatus.OPEN,
        )
        if isinstance(updated, Failure):
            log_failure(self._logger, "close_period", updated.error)
            return updated
        if updated.value is None:
            # Closed concurrently after the read above.
            failure = Failure(
                domain_failure(
                    PeriodDomainSubtype.PERIOD_ALREADY_CLOSED,
                    f"Period {found.value.name} is already closed.",
                )
            )
            log_failure(self._logger, "close_period", failure.error)
            return failure

        self._logger.info(
            f"Closed period {updated.value.name} for tenant {command.tenant_id} "
            f"at {updated.value.closed_at}"
        )
        return Success(updated.value)


__all__ = ["ClosePeriodUseCase"]
