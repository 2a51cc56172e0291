"""Tests for SecretLifetime value object."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from secret_bootstrap.domain.value_objects import SecretLifetime


class TestSecretLifetime:
    """Tests for SecretLifetime value object."""

    def test_default_lifetime(self) -> None:
        """Default lifetime should be 24 months."""
        assert SecretLifetime().months == 24

    def test_expires_at_adds_months(self) -> None:
        """Expiry should land on the same day and time, N months later."""
        start = datetime(2025, 3, 15, 9, 30, tzinfo=UTC)
        assert SecretLifetime(24).expires_at(start) == datetime(2027, 3, 15, 9, 30, tzinfo=UTC)

    def test_expires_at_crosses_year_boundary(self) -> None:
        """Adding months past December should roll the year."""
        start = datetime(2025, 11, 1, tzinfo=UTC)
        assert SecretLifetime(3).expires_at(start) == datetime(2026, 2, 1, tzinfo=UTC)

    def test_expires_at_clamps_to_month_end(self) -> None:
        """31 January plus one month should be the last day of February."""
        assert SecretLifetime(1).expires_at(datetime(2025, 1, 31, tzinfo=UTC)) == datetime(2025, 2, 28, tzinfo=UTC)
        assert SecretLifetime(1).expires_at(datetime(2024, 1, 31, tzinfo=UTC)) == datetime(2024, 2, 29, tzinfo=UTC)

    def test_expires_at_from_leap_day(self) -> None:
        """29 February plus 12 months should clamp to 28 February."""
        start = datetime(2024, 2, 29, tzinfo=UTC)
        assert SecretLifetime(12).expires_at(start) == datetime(2025, 2, 28, tzinfo=UTC)

    @pytest.mark.parametrize("months", [0, -1])
    def test_non_positive_lifetime_invalid(self, months: int) -> None:
        """Lifetime must be positive."""
        with pytest.raises(ValueError, match="must be positive"):
            SecretLifetime(months)

    def test_lifetime_is_frozen(self) -> None:
        """Lifetime should be immutable."""
        lifetime = SecretLifetime()
        with pytest.raises(AttributeError):
            lifetime.months = 12  # type: ignore[misc]
