"""Settings helpers for the ledger engine."""

from dataclasses import dataclass
import os

from src.domain.constants import MAX_RECURRENCE_INSTANCES
from src.infrastructure.logging.logger import get_app_logger


_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class LedgerSettings:
    """Runtime options for ledger computations.

    Attributes:
        company_id: Default company filter, or None for every company.
        history_honors_active: Drop settled rows of deactivated payables
            and receivables from historical aggregation too.
        recurrence_max_instances: Cap on instances per recurrence expansion.
    """

    company_id: str | None = None
    history_honors_active: bool = False
    recurrence_max_instances: int = MAX_RECURRENCE_INSTANCES

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        company_id = os.getenv("LEDGER_COMPANY_ID", "").strip() or None
        honors_active = (
            os.getenv("LEDGER_HISTORY_HONORS_ACTIVE", "false").strip().lower()
            in _TRUE_VALUES
        )
        max_instances = cls._parse_max_instances(
            os.getenv("LEDGER_RECURRENCE_MAX_INSTANCES"),
        )
        return cls(
            company_id=company_id,
            history_honors_active=honors_active,
            recurrence_max_instances=max_instances,
        )

    @staticmethod
    def _parse_max_instances(raw_value: str | None) -> int:
        """Parse the recurrence cap, falling back to the default.

        Args:
            raw_value: Raw environment value.

        Returns:
            int: A positive instance cap.
        """
        if not raw_value or not raw_value.strip():
            return MAX_RECURRENCE_INSTANCES
        try:
            value = int(raw_value)
        except ValueError:
            get_app_logger().warning(
                f"Invalid LEDGER_RECURRENCE_MAX_INSTANCES={raw_value!r}; "
                f"using {MAX_RECURRENCE_INSTANCES}"
            )
            return MAX_RECURRENCE_INSTANCES
        if value <= 0:
            get_app_logger().warning(
                f"LEDGER_RECURRENCE_MAX_INSTANCES must be positive; "
                f"using {MAX_RECURRENCE_INSTANCES}"
            )
            return MAX_RECURRENCE_INSTANCES
        return value


__all__ = ["LedgerSettings"]
