"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from secret_bootstrap.application.exceptions import DirectoryServiceError
from secret_bootstrap.domain.entities import ApplicationIdentity, SecretCredential

from .fakes import FakeDirectoryService


@pytest.fixture
def registered_app() -> ApplicationIdentity:
    """An app registration visible in the directory."""
    return ApplicationIdentity(client_id="abc-123", object_id="obj-999", display_name="Knowledge Agent")


@pytest.fixture
def created_credential() -> SecretCredential:
    """A credential as returned by addPassword."""
    return SecretCredential(
        secret_value="s3cr3t",
        display_name="Runtime-created-2025-01-31-14-05",
        expires_at=None,
        key_id="k1",
    )


@pytest.fixture
def directory(registered_app: ApplicationIdentity, created_credential: SecretCredential) -> FakeDirectoryService:
    """Directory containing one registered app that can mint a secret."""
    return FakeDirectoryService([registered_app], created_credential)


@pytest.fixture
def empty_directory() -> FakeDirectoryService:
    """Directory where no application is visible."""
    return FakeDirectoryService()


@pytest.fixture
def failing_directory() -> FakeDirectoryService:
    """Directory that cannot be reached."""
    return FakeDirectoryService(lookup_error=DirectoryServiceError("HTTP 403 from GET /v1.0/applications"))
