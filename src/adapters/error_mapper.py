"""Map application errors onto status codes and public payloads.

Infrastructure failures are reported with a generic message; their cause and
original message stay in the logs.
"""

from dataclasses import dataclass

from src.domain.errors import (
    AppError,
    ErrorKind,
    InfrastructureSubtype,
    LedgerDomainSubtype,
    PeriodDomainSubtype,
)

_NOT_FOUND = {
    LedgerDomainSubtype.ACCOUNT_NOT_FOUND.value,
    LedgerDomainSubtype.JOURNAL_ENTRY_NOT_FOUND.value,
    PeriodDomainSubtype.PERIOD_NOT_FOUND.value,
}
_CONFLICT = {
    LedgerDomainSubtype.DUPLICATE_ACCOUNT_CODE.value,
    InfrastructureSubtype.DUPLICATE_KEY.value,
}
_INTERNAL_MESSAGE = "An internal error occurred."


@dataclass(frozen=True)
class ErrorResponse:
    """Status and body presented to callers."""

    status: int
    body: dict[str, str]


def status_for(error: AppError) -> int:
    """Return the HTTP-like status for ``error``."""
    if error.subtype in _NOT_FOUND:
        return 404
    if error.subtype in _CONFLICT:
        return 409
    if error.kind == ErrorKind.INFRASTRUCTURE:
        return 500
    return 400


def to_error_response(error: AppError) -> ErrorResponse:
    """Build the public response for ``error``.

    Args:
        error: Failure returned by a workflow.

    Returns:
        ErrorResponse: Status plus a body with ``type``, ``subtype`` and
        ``message``; the cause is never included.
    """
    status = status_for(error)
    body = error.public_view()
    if status == 500:
        body["message"] = _INTERNAL_MESSAGE
    return ErrorResponse(status=status, body=body)


__all__ = ["ErrorResponse", "status_for", "to_error_response"]
