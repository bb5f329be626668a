"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import copy
import json
from typing import TYPE_CHECKING, Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiohttp import ClientSession


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable


SAMPLE_STATUS_RESPONSE: dict[str, Any] = {
    "status": "success",
    "data": {
        "user": {
            "locations": [
                {
                    "id": 1234,
                    "name": "Home",
                    "rooms": [
                        {
                            "id": 5678,
                            "roomName": "Bathroom",
                            "runMode": "schedule",
                            "overrideDur": 0,
                            "targetTemp": 210,
                            "currentTemp": 195,
                            "thermostat4ies": [{"deviceSN": "WU-0001"}],
                        },
                        {
                            "id": 5679,
                            "roomName": "Kitchen",
                            "runMode": "override",
                            "overrideDur": 45,
                            "targetTemp": 225,
                            "currentTemp": 218,
                            "thermostat4ies": [{"deviceSN": "WU-0002"}, {"deviceSN": "WU-0003"}],
                        },
                    ],
                }
            ]
        }
    },
}


@pytest.fixture
async def mock_session() -> AsyncGenerator[ClientSession]:
    """Create a mock aiohttp ClientSession.

    Yields:
        Mock ClientSession for testing.
    """
    session = AsyncMock(spec=ClientSession)
    session.closed = False

    async def mock_close() -> None:
        session.closed = True

    session.close = mock_close

    yield session

    if not session.closed:
        await session.close()


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Create mock aiohttp ClientResponse objects usable with ``async with``.

    Returns:
        Factory taking a status code and a body (dict bodies are JSON encoded,
        str bodies UTF-8 encoded, bytes bodies sent as-is).
    """

    def _make(status: int = 200, body: dict[str, Any] | str | bytes = "") -> MagicMock:
        if isinstance(body, dict):
            body = json.dumps(body)
        raw = body.encode("utf-8") if isinstance(body, str) else body
        response = MagicMock()
        response.status = status
        response.headers = {}
        response.read = AsyncMock(return_value=raw)
        response.__aenter__ = AsyncMock(return_value=response)
        response.__aexit__ = AsyncMock(return_value=None)
        return response

    return _make


@pytest.fixture
def status_response_body() -> dict[str, Any]:
    """Create a sample successful status query response.

    Returns:
        Response body with one location and two rooms.
    """
    return copy.deepcopy(SAMPLE_STATUS_RESPONSE)
