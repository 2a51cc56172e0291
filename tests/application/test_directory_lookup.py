"""Tests for DirectoryLookupClient."""

from __future__ import annotations

import logging

import pytest

from secret_bootstrap.application.exceptions import DirectoryServiceError
from secret_bootstrap.application.use_cases import DirectoryLookupClient
from secret_bootstrap.domain.entities import ApplicationIdentity

from ..fakes import FakeDirectoryService


class TestDirectoryLookupClient:
    """Tests for resolving client IDs to object IDs."""

    async def test_resolves_single_match(self, directory: FakeDirectoryService) -> None:
        """A client ID with one record resolves to that record's object ID."""
        lookup = DirectoryLookupClient(directory)
        assert await lookup.resolve_object_id("abc-123") == "obj-999"
        assert directory.lookup_calls == ["abc-123"]

    async def test_first_match_wins(self) -> None:
        """With several records the first one is used."""
        directory = FakeDirectoryService(
            [
                ApplicationIdentity("dup-1", "obj-first", "First"),
                ApplicationIdentity("dup-1", "obj-second", "Second"),
            ]
        )
        assert await DirectoryLookupClient(directory).resolve_object_id("dup-1") == "obj-first"

    async def test_not_found_returns_none(
        self, empty_directory: FakeDirectoryService, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Zero matches is a negative result, not an error."""
        caplog.set_level(logging.WARNING)
        assert await DirectoryLookupClient(empty_directory).resolve_object_id("missing") is None
        assert "Application with Client ID missing not found" in caplog.text

    async def test_success_is_logged(
        self, directory: FakeDirectoryService, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A match logs the display name and object ID."""
        caplog.set_level(logging.INFO)
        await DirectoryLookupClient(directory).resolve_object_id("abc-123")
        assert "Found application 'Knowledge Agent' with Object ID: obj-999" in caplog.text

    async def test_transport_error_propagates(self, failing_directory: FakeDirectoryService) -> None:
        """Directory failures surface unchanged and are not retried."""
        lookup = DirectoryLookupClient(failing_directory)
        with pytest.raises(DirectoryServiceError, match="HTTP 403"):
            await lookup.resolve_object_id("abc-123")
        assert len(failing_directory.lookup_calls) == 1
