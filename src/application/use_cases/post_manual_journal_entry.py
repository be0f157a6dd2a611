"""Use case for posting manual adjusting entries into open periods.

Entries generated by other business processes call
``PostJournalEntryUseCase`` directly and skip the period gate.
"""

from src.application.commands import PostManualJournalEntryCommand
from src.application.ports.periods_repository import PeriodsRepositoryPort
from src.application.use_cases.outcome_logging import log_failure
from src.application.use_cases.post_journal_entry import PostJournalEntryUseCase
from src.domain.errors import ApplicationSubtype, application_failure
from src.domain.models.journal import JournalEntry
from src.domain.models.periods import PeriodStatus
from src.domain.results import Failure, Outcome, Success
from src.domain.services.normalization import normalize_text, parse_calendar_date
from src.domain.services.periods import require_open_period_covering
from src.infrastructure.logging.logger import get_app_logger


def _validate_command(
    command: PostManualJournalEntryCommand,
) -> Outcome[PostManualJournalEntryCommand]:
    if not normalize_text(command.description):
        return Failure(
            application_failure(
                ApplicationSubtype.INVALID_COMMAND, "Description is required."
            )
        )
    if command.date is None or (
        isinstance(command.date, str) and not command.date.strip()
    ):
        return Failure(
            application_failure(ApplicationSubtype.INVALID_COMMAND, "Date is required.")
        )
    if not command.lines:
        return Failure(
            application_failure(
                ApplicationSubtype.INVALID_COMMAND,
                "At least one journal line is required.",
            )
        )
    return Success(command)


class PostManualJournalEntryUseCase:
    """Admit a manual entry only when an open period covers its date.

    The open-period check and the delegated write are separate storage
    operations. A period closing between them does not block the write.
    """

    def __init__(
        self,
        periods_repository: PeriodsRepositoryPort,
        post_journal_entry: PostJournalEntryUseCase,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            periods_repository: Storage used to list open periods.
            post_journal_entry: Posting workflow run once the gate passes.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._periods = periods_repository
        self._post_journal_entry = post_journal_entry
        self._logger = logger or get_app_logger()

    def execute(self, command: PostManualJournalEntryCommand) -> Outcome[JournalEntry]:
        """Gate ``command`` on open periods, then post it.

        Returns:
            Outcome[JournalEntry]: Outcome of the posting workflow, or the
            gate's failure.
        """
        validated = _validate_command(command)
        if isinstance(validated, Failure):
            log_failure(self._logger, "post_manual_journal_entry", validated.error)
            return validated

        entry_date = parse_calendar_date(command.date)
        if entry_date is None:
            failure = Failure(
                application_failure(
                    ApplicationSubtype.INVALID_COMMAND, "Invalid date format."
                )
            )
            log_failure(self._logger, "post_manual_journal_entry", failure.error)
            return failure

        open_periods = self._periods.list_periods(
            command.tenant_id, status=PeriodStatus.OPEN
        )
        if isinstance(open_periods, Failure):
            log_failure(self._logger, "post_manual_journal_entry", open_periods.error)
            return open_periods

        admitted = require_open_period_covering(open_periods.value, entry_date)
        if isinstance(admitted, Failure):
            log_failure(self._logger, "post_manual_journal_entry", admitted.error)
            return admitted

        self._logger.info(
            f"Manual entry dated {entry_date.isoformat()} admitted by period "
            f"{admitted.value.name} for tenant {command.tenant_id}"
        )
        return self._post_journal_entry.execute(command)


__all__ = ["PostManualJournalEntryUseCase"]
