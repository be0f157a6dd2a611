"""Clock adapters."""

from datetime import datetime, timezone


class SystemClock:
    """Clock reading the system time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock that always returns the same instant."""

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant


__all__ = ["SystemClock", "FixedClock"]
