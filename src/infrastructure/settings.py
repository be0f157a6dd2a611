"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

import dotenv

from src.infrastructure.logging.logger import get_app_logger

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the ledger store.

    Attributes:
        db_url: SQLAlchemy URL of the ledger database.
        sql_echo: Whether SQLAlchemy echoes emitted SQL.
    """

    db_url: Optional[str] = None
    sql_echo: bool = False

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        db_url = os.getenv("LEDGER_DB_URL", "").strip() or None
        if db_url is None:
            get_app_logger().warning("LEDGER_DB_URL is not set")
        return cls(
            db_url=db_url,
            sql_echo=cls._parse_flag(os.getenv("LEDGER_SQL_ECHO", "")),
        )

    def require_db_url(self) -> str:
        """Return the database URL.

        Raises:
            RuntimeError: If no URL is configured.
        """
        if not self.db_url:
            raise RuntimeError("Environment variable LEDGER_DB_URL is not set.")
        return self.db_url

    @staticmethod
    def _parse_flag(raw: str) -> bool:
        return raw.strip().lower() in _TRUE_VALUES


__all__ = ["LedgerSettings"]
