"""Application identity entity representing an Entra ID app registration."""

from dataclasses import dataclass
from typing import Any, Self


@dataclass(frozen=True, slots=True)
class ApplicationIdentity:
    """
    An app registration as seen by the directory.

    ``client_id`` is the public application (client) ID; ``object_id`` is the
    directory record ID that credential operations are scoped to.
    """

    client_id: str
    object_id: str
    display_name: str | None = None

    @classmethod
    def from_graph(cls, raw: dict[str, Any]) -> Self:
        """Factory method to create an identity from a Graph application record."""
        return cls(
            client_id=raw.get("appId", ""),
            object_id=raw.get("id", ""),
            display_name=raw.get("displayName"),
        )
