"""Tests for SecretProvisioner."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

import pytest

from secret_bootstrap.application.exceptions import DirectoryServiceError, ProvisioningError
from secret_bootstrap.application.use_cases import SecretProvisioner
from secret_bootstrap.domain.entities import ApplicationIdentity, SecretCredential
from secret_bootstrap.domain.value_objects import ProvisioningFailureReason

from ..fakes import FakeDirectoryService


class TestSecretProvisioner:
    """Tests for creating client secrets."""

    async def test_creates_secret_for_resolved_application(self, directory: FakeDirectoryService) -> None:
        """The credential is created on the resolved object ID with the given label."""
        secret = await SecretProvisioner(directory).create_secret("abc-123", "my-label", 24)

        assert secret == "s3cr3t"
        assert len(directory.lookup_calls) == 1
        assert len(directory.add_calls) == 1
        object_id, label, _ = directory.add_calls[0]
        assert object_id == "obj-999"
        assert label == "my-label"

    async def test_expiry_is_lifetime_months_from_now(self, directory: FakeDirectoryService) -> None:
        """The requested expiry should be lifetime_months after creation."""
        before = datetime.now(UTC)
        await SecretProvisioner(directory).create_secret("abc-123", "label", 6)

        _, _, expires_at = directory.add_calls[0]
        assert expires_at.tzinfo is not None
        days = (expires_at - before).days
        assert 178 <= days <= 185

    async def test_default_label_and_lifetime(self, directory: FakeDirectoryService) -> None:
        """Defaults are an 'Auto-generated' label and a 24 month lifetime."""
        await SecretProvisioner(directory).create_secret("abc-123")

        _, label, expires_at = directory.add_calls[0]
        assert label == "Auto-generated"
        assert expires_at.year - datetime.now(UTC).year == 2

    async def test_not_found_fails_without_creating(self, empty_directory: FakeDirectoryService) -> None:
        """An unresolvable client ID fails with APPLICATION_NOT_FOUND and no create call."""
        with pytest.raises(ProvisioningError) as exc_info:
            await SecretProvisioner(empty_directory).create_secret("abc-123", "label", 24)

        assert exc_info.value.reason is ProvisioningFailureReason.APPLICATION_NOT_FOUND
        assert "don't have permission" in str(exc_info.value)
        assert empty_directory.add_calls == []

    @pytest.mark.parametrize("secret_value", [None, ""])
    async def test_empty_secret_is_rejected(
        self, registered_app: ApplicationIdentity, secret_value: str | None
    ) -> None:
        """A successful call without a secret value fails with EMPTY_RESULT."""
        directory = FakeDirectoryService(
            [registered_app],
            SecretCredential(secret_value=secret_value, display_name="label", expires_at=None, key_id="k1"),
        )
        with pytest.raises(ProvisioningError) as exc_info:
            await SecretProvisioner(directory).create_secret("abc-123", "label", 24)

        assert exc_info.value.reason is ProvisioningFailureReason.EMPTY_RESULT
        assert len(directory.add_calls) == 1

    async def test_create_failure_propagates(self, registered_app: ApplicationIdentity) -> None:
        """Directory errors from addPassword surface unchanged."""
        directory = FakeDirectoryService(
            [registered_app],
            add_error=DirectoryServiceError("HTTP 403 from POST /v1.0/applications/obj-999/addPassword"),
        )
        with pytest.raises(DirectoryServiceError):
            await SecretProvisioner(directory).create_secret("abc-123", "label", 24)

    async def test_invalid_lifetime_makes_no_calls(self, directory: FakeDirectoryService) -> None:
        """A non-positive lifetime is rejected before contacting the directory."""
        with pytest.raises(ValueError, match="must be positive"):
            await SecretProvisioner(directory).create_secret("abc-123", "label", 0)
        assert directory.call_count == 0

    async def test_logs_key_id_but_never_secret(
        self, directory: FakeDirectoryService, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Success is logged with the key ID; the secret value is never logged."""
        caplog.set_level(logging.DEBUG)
        await SecretProvisioner(directory).create_secret("abc-123", "label", 24)

        assert "Creating client secret for app registration with Client ID abc-123" in caplog.text
        assert "with key ID k1" in caplog.text
        assert "s3cr3t" not in caplog.text
