"""Display label generation for runtime-created secrets."""

from datetime import UTC, datetime

RUNTIME_LABEL_PREFIX = "Runtime-created-"


def runtime_secret_label(now: datetime | None = None, prefix: str = RUNTIME_LABEL_PREFIX) -> str:
    """
    Build the display name recorded on a runtime-created secret.

    The label carries the UTC creation time, e.g. ``Runtime-created-2025-01-31-14-05``.
    """
    created = (now or datetime.now(UTC)).astimezone(UTC)
    return f"{prefix}{created:%Y-%m-%d-%H-%M}"
