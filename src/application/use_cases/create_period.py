"""Use case for opening a new accounting period."""

from src.application.commands import CreatePeriodCommand
from src.application.ports.periods_repository import PeriodsRepositoryPort
from src.application.use_cases.outcome_logging import log_failure
from src.domain.models.periods import Period
from src.domain.results import Failure, Outcome
from src.domain.services.periods import build_period
from src.infrastructure.logging.logger import get_app_logger


class CreatePeriodUseCase:
    """Validate and persist a period in the Open state.

    Period names are unique per tenant through the storage constraint; a
    duplicate surfaces as ``InfrastructureFailure/DuplicateKey``.
    """

    def __init__(self, periods_repository: PeriodsRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            periods_repository: Tenant-scoped period storage.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._periods = periods_repository
        self._logger = logger or get_app_logger()

    def execute(self, command: CreatePeriodCommand) -> Outcome[Period]:
        """Validate the command and store the new period.

        Args:
            command: Tenant, name and date bounds of the period.

        Returns:
            Outcome[Period]: The stored Open period, a validation failure, or
            an infrastructure failure from storage.
        """
        built = build_period(
            command.tenant_id,
            command.name,
            command.start_date,
            command.end_date,
        )
        if isinstance(built, Failure):
            log_failure(self._logger, "create_period", built.error)
            return built

        created = self._periods.create_period(built.value)
        if isinstance(created, Failure):
            log_failure(self._logger, "create_period", created.error)
            return created
        period = created.value
        self._logger.info(
            f"Opened period {period.name} ({period.start_date} to "
            f"{period.end_date}) for tenant {period.tenant_id}"
        )
        return created


__all__ = ["CreatePeriodUseCase"]
