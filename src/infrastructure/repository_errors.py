"""Translation of SQLAlchemy errors into infrastructure failures."""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from src.domain.errors import InfrastructureSubtype, infrastructure_failure
from src.domain.results import Failure

_UNIQUE_VIOLATION_PGCODE = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """Return True when ``exc`` reports a unique constraint violation."""
    if getattr(exc.orig, "pgcode", None) == _UNIQUE_VIOLATION_PGCODE:
        return True
    message = str(exc.orig).lower()
    return "unique" in message or "duplicate" in message


def failure_from_exception(exc: SQLAlchemyError, operation: str, logger) -> Failure:
    """Log ``exc`` and wrap it as an infrastructure failure.

    Args:
        exc: Error raised by the driver or SQLAlchemy.
        operation: Short label of the failed repository call.
        logger: Logger compatible with logging.Logger-like API.

    Returns:
        Failure: ``DuplicateKey`` for unique violations, otherwise
        ``RepositoryError``. The exception is kept as the cause.
    """
    if isinstance(exc, IntegrityError) and is_unique_violation(exc):
        logger.warning(f"{operation} hit a unique constraint: {exc.orig}")
        return Failure(
            infrastructure_failure(
                InfrastructureSubtype.DUPLICATE_KEY,
                "A record with the same unique key already exists.",
                cause=exc,
            )
        )
    logger.error(f"{operation} failed: {exc}")
    return Failure(
        infrastructure_failure(
            InfrastructureSubtype.REPOSITORY_ERROR,
            f"Database operation {operation} failed.",
            cause=exc,
        )
    )


__all__ = ["is_unique_violation", "failure_from_exception"]
