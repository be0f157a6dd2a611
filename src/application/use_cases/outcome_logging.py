"""Shared logging of workflow failures."""

from src.domain.errors import AppError, ErrorKind


def log_failure(logger, operation: str, error: AppError) -> None:
    """Log a failed workflow step at a level matching its kind.

    Domain and application failures are expected rejections and go to
    WARNING. Infrastructure failures go to ERROR with their cause.

    Args:
        logger: Logger compatible with logging.Logger-like API.
        operation: Name of the workflow that failed.
        error: Failure to report.
    """
    if error.kind == ErrorKind.INFRASTRUCTURE:
        logger.error(
            f"{operation} failed: {error.subtype}: {error.message} "
            f"(cause={error.cause!r})"
        )
        return
    logger.warning(f"{operation} rejected: {error.subtype}: {error.message}")


__all__ = ["log_failure"]
