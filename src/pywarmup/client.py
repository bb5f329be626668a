"""High-level client for Warmup thermostats.

This module composes the session manager, the call dispatcher, and the codec
into the domain operations: reading status, setting temperature overrides,
and toggling frost protection.
"""

from __future__ import annotations

import asyncio
import logging
import re
from decimal import Decimal
from numbers import Real
from typing import TYPE_CHECKING

from aiohttp import ClientSession  # noqa: TC002 - Used at runtime for constructor signature

from pywarmup.api import WarmupAPI
from pywarmup.auth import AuthenticationHandler
from pywarmup.const import (
    APP_ENDPOINT,
    DEFAULT_TIMEOUT,
    OVERRIDE_DURATION_MAX,
    OVERRIDE_DURATION_MIN,
    OVERRIDE_TEMPERATURE_MAX,
    OVERRIDE_TEMPERATURE_MIN,
    QUERY_ENDPOINT,
)
from pywarmup.exceptions import InvalidParameterError
from pywarmup.models import AuthState, Credentials, QueryResponse, Room
from pywarmup.serializers import (
    build_frost_protection_mutation,
    build_override_mutation,
    build_status_query,
    deserialize_query_response,
    serialize_query,
)


if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

_LOGGER = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"[A-Za-z0-9]+")


class WarmupClient:
    """Client for the My Warmup cloud API.

    Every operation follows the same pattern: ensure a session, dispatch a
    GraphQL-style call, decode the response, and invalidate the token if the
    API did not report success so the next call re-authenticates.

    Operations return None (or False) when the call could not be completed
    yet: the session is still being established, or the API reported a
    non-success status. Callers should treat that as "try again later" on
    their own polling schedule. The two cases are not distinguished.

    Concurrent operations on one client are serialized, so callers never race
    on the session token.

    Example:
        ```python
        from pywarmup import WarmupClient

        async with WarmupClient(username="user@example.com", password="password") as client:
            status = await client.get_status()
            if status is not None:
                for room in status.rooms:
                    print(f"{room.name}: {room.current_temperature}")

                room = status.rooms[0]
                await client.set_override(status.locations[0].id, room.id, 21.5, 60)
        ```

    Raises from operations:
        AuthenticationError: Authentication failed repeatedly.
        ApiCallError: The call failed (non-200 status or transport fault).
    """

    def __init__(
        self,
        username: str,
        password: str,
        *,
        session: ClientSession | None = None,
        app_endpoint: str = APP_ENDPOINT,
        query_endpoint: str = QUERY_ENDPOINT,
        timeout: float = DEFAULT_TIMEOUT,
        on_session_updated: Callable[[AuthenticationHandler], None] | None = None,
    ) -> None:
        """Initialize the Warmup client.

        Args:
            username: Account email address.
            password: Account password.
            session: Optional aiohttp ClientSession. If not provided, one will be
                created when entering the context manager.
            app_endpoint: URL of the authentication endpoint.
            query_endpoint: URL of the query/mutation endpoint.
            timeout: Total timeout per call in seconds.
            on_session_updated: Optional callback invoked when authentication
                succeeds.
        """
        self._auth_handler = AuthenticationHandler(
            Credentials(username=username, password=password),
            app_endpoint=app_endpoint,
            on_session_updated=on_session_updated,
        )
        self._api = WarmupAPI(auth_handler=self._auth_handler, session=session, timeout=timeout)
        self._query_endpoint = query_endpoint
        self._call_lock = asyncio.Lock()

    @property
    def api(self) -> WarmupAPI:
        """Get the underlying call dispatcher."""
        return self._api

    @property
    def auth_handler(self) -> AuthenticationHandler:
        """Get the session manager."""
        return self._auth_handler

    @property
    def is_authenticated(self) -> bool:
        """Check if the client currently holds a session token."""
        return self._auth_handler.is_authenticated()

    async def __aenter__(self) -> WarmupClient:
        """Enter the context manager.

        Creates a session if one wasn't provided. Authentication is deferred
        to the first call.

        Returns:
            Self for use in async with statements.
        """
        await self._api.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager, closing the session if the client owns it."""
        await self._api.__aexit__(exc_type, exc_val, exc_tb)

    def set_configuration(self, credentials: Credentials) -> None:
        """Replace the account credentials.

        The current token is discarded, so the next call authenticates with
        the new credentials.

        Args:
            credentials: New account credentials.
        """
        self._auth_handler.set_configuration(credentials)

    async def _call_graphql(self, query: str) -> QueryResponse | None:
        """Ensure a session, send a query, and check the response status.

        Returns:
            The decoded response if the API reported success, otherwise None.
            In the None case the token has been invalidated.
        """
        async with self._call_lock:
            state = await self._auth_handler.ensure_authenticated(self._api)

            if state is AuthState.AUTHENTICATED:
                body = await self._api.send(self._query_endpoint, serialize_query(query), authenticated=True)
                response = deserialize_query_response(body)

                if response.is_success:
                    return response

                _LOGGER.debug("Query returned status %r, invalidating session", response.status)
            else:
                _LOGGER.debug("Session not ready, skipping call")

            self._auth_handler.invalidate()
            return None

    async def get_status(self) -> QueryResponse | None:
        """Get the status of all locations, rooms, and thermostats.

        Returns:
            QueryResponse with parsed locations, or None if the call could not
            be completed yet.

        Raises:
            AuthenticationError: If authentication failed repeatedly.
            ApiCallError: If the call failed.
        """
        return await self._call_graphql(build_status_query())

    async def get_rooms(self) -> list[Room] | None:
        """Get all rooms of the account across locations.

        Returns:
            List of rooms, or None if the call could not be completed yet.
        """
        status = await self.get_status()
        if status is None:
            return None
        return status.rooms

    async def set_override(
        self,
        location_id: str,
        room_id: str,
        temperature: float | Decimal,
        duration: int,
    ) -> bool:
        """Set a temporary temperature override on a room.

        Args:
            location_id: Location identifier.
            room_id: Room identifier.
            temperature: Target temperature in degrees Celsius, as a real number or Decimal.
            duration: Override duration in minutes.

        Returns:
            True if the API accepted the override, False if the call could not
            be completed yet.

        Raises:
            InvalidParameterError: If an identifier is not alphanumeric or an
                argument is out of range.
            AuthenticationError: If authentication failed repeatedly.
            ApiCallError: If the call failed.
        """
        _validate_id("location_id", location_id)
        _validate_id("room_id", room_id)

        if not _is_valid_temperature(temperature):
            msg = f"Temperature must be between {OVERRIDE_TEMPERATURE_MIN} and {OVERRIDE_TEMPERATURE_MAX}"
            raise InvalidParameterError(msg, parameter_name="temperature", value=temperature)

        if (
            isinstance(duration, bool)
            or not isinstance(duration, int)
            or not OVERRIDE_DURATION_MIN <= duration <= OVERRIDE_DURATION_MAX
        ):
            msg = f"Duration must be between {OVERRIDE_DURATION_MIN} and {OVERRIDE_DURATION_MAX} minutes"
            raise InvalidParameterError(msg, parameter_name="duration", value=duration)

        response = await self._call_graphql(build_override_mutation(location_id, room_id, temperature, duration))
        return response is not None

    async def toggle_frost_protection(self, location_id: str, room_id: str, command: bool) -> bool:
        """Toggle frost protection mode on a room.

        Args:
            location_id: Location identifier.
            room_id: Room identifier.
            command: Current frost protection state. If on, frost protection
                is turned off; if off, it is turned on.

        Returns:
            True if the API accepted the change, False if the call could not
            be completed yet.

        Raises:
            InvalidParameterError: If an identifier is not alphanumeric.
            AuthenticationError: If authentication failed repeatedly.
            ApiCallError: If the call failed.
        """
        _validate_id("location_id", location_id)
        _validate_id("room_id", room_id)

        response = await self._call_graphql(build_frost_protection_mutation(location_id, room_id, command))
        return response is not None


def _validate_id(name: str, value: str) -> None:
    # Identifiers are written unquoted into the query text
    if not _ID_PATTERN.fullmatch(str(value)):
        msg = f"{name} must be a non-empty alphanumeric identifier"
        raise InvalidParameterError(msg, parameter_name=name, value=value)


def _is_valid_temperature(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real | Decimal):
        return False
    try:
        return OVERRIDE_TEMPERATURE_MIN <= value <= OVERRIDE_TEMPERATURE_MAX
    except ArithmeticError:
        # Decimal NaN raises on ordering comparisons
        return False
