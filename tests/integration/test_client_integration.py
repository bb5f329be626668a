"""Integration tests for WarmupClient with the real API."""

from __future__ import annotations

import pytest

from pywarmup import AuthenticationError, WarmupClient


pytestmark = pytest.mark.integration


class TestStatusIntegration:
    """Read-only calls against the real API."""

    async def test_get_status(self, integration_client: WarmupClient) -> None:
        """Test that the account status can be read."""
        status = await integration_client.get_status()

        assert status is not None, "Status should be returned with valid credentials"
        assert status.is_success
        assert integration_client.is_authenticated

        for room in status.rooms:
            assert room.id, "Every room should have an ID"

    async def test_token_reused(self, integration_client: WarmupClient) -> None:
        """Test that a second call reuses the session token."""
        await integration_client.get_status()
        token = integration_client.auth_handler.token

        await integration_client.get_status()

        assert integration_client.auth_handler.token == token


class TestAuthenticationIntegration:
    """Authentication failures against the real API."""

    async def test_invalid_credentials_exhaust_budget(self, integration_config: dict[str, str]) -> None:
        """Test that invalid credentials fail softly twice, then raise."""
        async with WarmupClient(username=integration_config["username"], password="wrong_password") as client:
            assert await client.get_status() is None
            assert await client.get_status() is None

            with pytest.raises(AuthenticationError):
                await client.get_status()
