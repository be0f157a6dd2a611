"""Port for the current time."""

from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    """Source of timestamps, injectable for deterministic tests."""

    def now(self) -> datetime:
        """Return the current timezone-aware UTC time."""


__all__ = ["ClockPort"]
