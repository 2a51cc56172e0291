"""Secret credential entity returned when a client secret is created."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Self


@dataclass(frozen=True, slots=True)
class SecretCredential:
    """
    A password credential freshly added to an app registration.

    The secret value is only readable at creation time. It is kept out of
    ``repr()`` so the entity can be logged safely.
    """

    secret_value: str | None = field(repr=False)
    display_name: str | None
    expires_at: datetime | None
    key_id: str | None

    @property
    def has_secret(self) -> bool:
        """Check if the directory returned a usable secret value."""
        return bool(self.secret_value)

    @classmethod
    def from_graph(cls, raw: dict[str, Any]) -> Self:
        """Factory method to create a credential from an addPassword response."""
        return cls(
            secret_value=raw.get("secretText"),
            display_name=raw.get("displayName"),
            expires_at=_parse_datetime(raw.get("endDateTime")),
            key_id=raw.get("keyId"),
        )


def _parse_datetime(value: str | None) -> datetime | None:
    """Parse an ISO datetime string from Graph, assuming UTC when naive."""
    if not value:
        return None
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return dt if dt.tzinfo else dt.replace(tzinfo=UTC)
