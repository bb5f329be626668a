"""Pytest configuration and fixtures for integration tests."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from dotenv import load_dotenv


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from pywarmup import WarmupClient


# Load .env file from project root
env_path = Path(__file__).parents[2] / ".env"
load_dotenv(env_path)


@pytest.fixture(scope="session")
def integration_config() -> dict[str, str]:
    """Load integration test configuration from environment.

    Returns:
        Dictionary with API credentials.
    """
    username = os.getenv("WARMUP_USERNAME")
    password = os.getenv("WARMUP_PASSWORD")

    if not username or not password:
        pytest.skip("Set WARMUP_USERNAME and WARMUP_PASSWORD (or a .env file) to run integration tests")

    return {"username": username, "password": password}


@pytest.fixture
async def integration_client(integration_config: dict[str, str]) -> AsyncGenerator[WarmupClient]:
    """Create a client against the real API."""
    from pywarmup import WarmupClient

    async with WarmupClient(
        username=integration_config["username"],
        password=integration_config["password"],
    ) as client:
        yield client
