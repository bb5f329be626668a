"""Python client library for Warmup smart thermostats.

This package provides an async client for the My Warmup cloud API.

The library is organized into three layers:
1. **API Layer** (pywarmup.api): Single HTTP exchange with the Warmup endpoints
2. **Session Layer** (pywarmup.auth): Session token and authentication failure budget
3. **Client Layer** (pywarmup.client): Status queries, overrides, and frost protection

Example:
    ```python
    from pywarmup import WarmupClient

    async with WarmupClient(username="user@example.com", password="password") as client:
        status = await client.get_status()

        # None means "try again later"
        if status is not None:
            for location in status.locations:
                for room in location.rooms:
                    print(f"{room.name}: {room.current_temperature}")

            room = status.rooms[0]
            await client.set_override(status.locations[0].id, room.id, 21.5, duration=60)
    ```
"""

from __future__ import annotations

from pywarmup.api import WarmupAPI
from pywarmup.auth import AuthenticationHandler
from pywarmup.client import WarmupClient
from pywarmup.exceptions import (
    ApiCallError,
    AuthenticationError,
    InvalidParameterError,
    WarmupConnectionError,
    WarmupError,
    WarmupTimeoutError,
)
from pywarmup.models import (
    AuthResponse,
    AuthState,
    Credentials,
    Location,
    QueryResponse,
    Room,
    Thermostat,
)


__version__ = "0.1.0"

__all__ = [
    "ApiCallError",
    "AuthResponse",
    "AuthState",
    "AuthenticationError",
    "AuthenticationHandler",
    "Credentials",
    "InvalidParameterError",
    "Location",
    "QueryResponse",
    "Room",
    "Thermostat",
    "WarmupAPI",
    "WarmupClient",
    "WarmupConnectionError",
    "WarmupError",
    "WarmupTimeoutError",
    "__version__",
]
