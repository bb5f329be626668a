"""Session management for the Warmup API."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from pywarmup.const import APP_ENDPOINT, MAX_AUTH_FAILURES
from pywarmup.exceptions import ApiCallError, AuthenticationError
from pywarmup.models import AuthState, Credentials
from pywarmup.serializers import deserialize_auth_response, serialize_auth_request


if TYPE_CHECKING:
    from collections.abc import Callable

    from pywarmup.api import WarmupAPI

_LOGGER = logging.getLogger(__name__)


class AuthenticationHandler:
    """Own the Warmup session token and the authentication failure budget.

    The handler holds at most one token at a time. A token is obtained lazily
    by ensure_authenticated() and discarded by invalidate() whenever a call is
    rejected, so the next call re-authenticates.

    Failure Budget:
        Each failed authentication increments fail_count. While the count is
        within MAX_AUTH_FAILURES the failure is soft: ensure_authenticated()
        returns AuthState.PENDING and the caller simply tries again later.
        The next failure raises AuthenticationError. A successful
        authentication resets the count to zero.

    Example:
        ```python
        handler = AuthenticationHandler(Credentials("user@example.com", "password"))

        state = await handler.ensure_authenticated(api)
        if state is AuthState.AUTHENTICATED:
            body = await api.send(QUERY_ENDPOINT, query, authenticated=True)
        ```

    Attributes:
        credentials: Credentials used for the next authentication.
        token: Current session token (None if not authenticated).
        fail_count: Consecutive authentication failures.
        last_authenticated_at: Timestamp of last successful authentication.
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        app_endpoint: str = APP_ENDPOINT,
        on_session_updated: Callable[[AuthenticationHandler], None] | None = None,
    ) -> None:
        """Initialize the authentication handler.

        Args:
            credentials: Account credentials.
            app_endpoint: URL of the authentication endpoint.
            on_session_updated: Optional callback invoked when authentication
                succeeds. Receives the handler instance with the new token.
        """
        self.credentials = credentials
        self.token: str | None = None
        self.fail_count = 0
        self.last_authenticated_at: datetime | None = None

        self._app_endpoint = app_endpoint
        self._auth_lock = asyncio.Lock()
        self._on_session_updated = on_session_updated

    def is_authenticated(self) -> bool:
        """Check if the handler holds a session token."""
        return self.token is not None

    def invalidate(self) -> None:
        """Discard the current token so the next call re-authenticates."""
        if self.token is not None:
            _LOGGER.debug("Session token invalidated")
        self.token = None

    def set_configuration(self, credentials: Credentials) -> None:
        """Replace the credentials and force re-authentication.

        The token is cleared unconditionally and the failure budget is reset,
        so the new credentials get a fresh set of attempts.

        Args:
            credentials: New account credentials.
        """
        self.token = None
        self.fail_count = 0
        self.last_authenticated_at = None
        self.credentials = credentials
        _LOGGER.debug("Credentials replaced for %s", credentials.username)

    async def ensure_authenticated(self, api: WarmupAPI) -> AuthState:
        """Ensure a session token is held, authenticating if necessary.

        Only one authentication attempt runs at a time. Callers waiting on the
        lock reuse the token obtained by the attempt ahead of them.

        Args:
            api: Call dispatcher used for the authentication request.

        Returns:
            AuthState.AUTHENTICATED if a token is held or was just obtained,
            AuthState.PENDING after a soft failure.

        Raises:
            AuthenticationError: If authentication failed more than
                MAX_AUTH_FAILURES times in a row.
        """
        if self.token is not None:
            return AuthState.AUTHENTICATED

        async with self._auth_lock:
            if self.token is not None:
                return AuthState.AUTHENTICATED
            return await self._authenticate(api)

    async def _authenticate(self, api: WarmupAPI) -> AuthState:
        """Perform a single authentication attempt and apply the failure budget."""
        credentials = self.credentials
        _LOGGER.debug("Authenticating %s with %s", credentials.username, self._app_endpoint)

        try:
            body = await api.send(self._app_endpoint, serialize_auth_request(credentials), authenticated=False)
            response = deserialize_auth_response(body)

            if not response.is_success or not response.token:
                _LOGGER.debug("Authentication failure: result=%r", response.result)
                msg = "Authentication Failed"
                raise ApiCallError(msg, endpoint=self._app_endpoint)

        except ApiCallError as exc:
            self.fail_count += 1
            if self.fail_count > MAX_AUTH_FAILURES:
                _LOGGER.error("Multiple authentication failures: %s", exc)
                raise AuthenticationError(str(exc), fail_count=self.fail_count) from exc

            _LOGGER.warning(
                "Authentication attempt failed (%d/%d), will retry on next call: %s",
                self.fail_count,
                MAX_AUTH_FAILURES + 1,
                exc,
            )
            return AuthState.PENDING

        # Credentials may have been replaced while the request was in flight
        if credentials is not self.credentials:
            _LOGGER.debug("Discarding token obtained with replaced credentials")
            return AuthState.PENDING

        self.token = response.token
        self.fail_count = 0
        self.last_authenticated_at = datetime.now(UTC)

        _LOGGER.info("Authentication successful for %s", credentials.username)

        if self._on_session_updated is not None:
            self._on_session_updated(self)

        return AuthState.AUTHENTICATED
