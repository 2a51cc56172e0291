"""Secret lifetime value object."""

import calendar
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class SecretLifetime:
    """Lifetime of a newly created client secret (in months)."""

    months: int = 24

    def __post_init__(self) -> None:
        """Validate lifetime is positive."""
        if self.months <= 0:
            msg = f"Secret lifetime must be positive, got {self.months} months"
            raise ValueError(msg)

    def expires_at(self, start: datetime) -> datetime:
        """
        Calculate the expiry for a secret created at ``start``.

        Adds calendar months, clamping the day to the last day of the
        target month.
        """
        month_index = start.month - 1 + self.months
        year = start.year + month_index // 12
        month = month_index % 12 + 1
        day = min(start.day, calendar.monthrange(year, month)[1])
        return start.replace(year=year, month=month, day=day)
