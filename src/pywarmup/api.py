"""Low-level call dispatcher for the Warmup API.

This module performs the single HTTP exchange behind every Warmup call:
building headers, applying the timeout, and mapping the HTTP outcome to
either a response body or an ApiCallError. It never retries.
"""

from __future__ import annotations

import asyncio
import logging
from http import HTTPStatus
from typing import TYPE_CHECKING

from aiohttp import ClientError, ClientSession, ClientTimeout

from pywarmup.const import (
    APP_TOKEN,
    CONTENT_TYPE_JSON,
    DEFAULT_TIMEOUT,
    HEADER_APP_TOKEN,
    HEADER_AUTHORIZATION,
    USER_AGENT,
)
from pywarmup.exceptions import ApiCallError, WarmupConnectionError, WarmupTimeoutError


if TYPE_CHECKING:
    from types import TracebackType

    from pywarmup.auth import AuthenticationHandler

_LOGGER = logging.getLogger(__name__)


class WarmupAPI:
    """Call dispatcher for the Warmup authentication and query endpoints.

    Every call is a JSON POST carrying the fixed application headers. Calls
    made with ``authenticated=True`` also carry the session token held by the
    AuthenticationHandler. A 401 response invalidates that token.

    Calls through one instance are serialized: at most one HTTP exchange is
    in flight at a time.

    Example:
        ```python
        from aiohttp import ClientSession
        from pywarmup.api import WarmupAPI
        from pywarmup.auth import AuthenticationHandler
        from pywarmup.models import Credentials

        async with ClientSession() as session:
            auth = AuthenticationHandler(Credentials("user@example.com", "pass"))
            api = WarmupAPI(auth_handler=auth, session=session)

            await auth.ensure_authenticated(api)
            body = await api.send(QUERY_ENDPOINT, '{"query": "..."}', authenticated=True)
        ```
    """

    def __init__(
        self,
        *,
        auth_handler: AuthenticationHandler,
        session: ClientSession | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            auth_handler: AuthenticationHandler holding the session token.
            session: Optional aiohttp ClientSession. If not provided, one will be
                created when entering the context manager.
            timeout: Total timeout per call in seconds.
        """
        self._auth_handler = auth_handler
        self._session = session
        self._owns_session = session is None
        self._timeout = ClientTimeout(total=timeout)
        self._request_lock = asyncio.Lock()

    def set_session(self, session: ClientSession) -> None:
        """Set the aiohttp session for this dispatcher.

        The dispatcher will not take ownership and will not close this session.

        Args:
            session: The aiohttp ClientSession to use for requests.
        """
        self._session = session
        self._owns_session = False

    async def __aenter__(self) -> WarmupAPI:
        """Enter the context manager.

        Creates a new aiohttp session if one wasn't provided.

        Returns:
            Self for use in async with statements.
        """
        if self._session is None:
            self._session = ClientSession()
            self._owns_session = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager.

        Closes the session if it was created by this dispatcher.

        Args:
            exc_type: Exception type if an exception occurred.
            exc_val: Exception value if an exception occurred.
            exc_tb: Exception traceback if an exception occurred.
        """
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def _validate_session(self) -> ClientSession:
        """Return the session, checking that it is initialized and open.

        Raises:
            RuntimeError: If session is not initialized or is closed.
        """
        if self._session is None:
            msg = "Session not initialized. Use 'async with' or provide a session."
            raise RuntimeError(msg)

        if self._session.closed:
            msg = "Session is closed. Cannot make request."
            raise RuntimeError(msg)

        return self._session

    def _build_headers(self, *, authenticated: bool) -> dict[str, str]:
        headers = {
            "User-Agent": USER_AGENT,
            "Content-Type": CONTENT_TYPE_JSON,
            HEADER_APP_TOKEN: APP_TOKEN,
        }
        if authenticated:
            headers[HEADER_AUTHORIZATION] = self._auth_handler.token or ""
        return headers

    async def send(self, endpoint: str, body: str, *, authenticated: bool) -> str:
        """Send one POST call and return the response body.

        Args:
            endpoint: Full URL of the endpoint.
            body: JSON request body.
            authenticated: Whether to send the session token.

        Returns:
            Response body of a 200 response, decoded as UTF-8.

        Raises:
            ApiCallError: If the response status is not 200 or the body is not
                valid UTF-8. A 401 also invalidates the session token.
            WarmupTimeoutError: If the call times out.
            WarmupConnectionError: If the connection fails.
            RuntimeError: If session is not initialized or is closed.
        """
        session = self._validate_session()

        async with self._request_lock:
            headers = self._build_headers(authenticated=authenticated)

            try:
                # Auth bodies carry the password and token, keep them out of traces
                _LOGGER.debug(
                    "Sending body to Warmup: endpoint %s, body %s",
                    endpoint,
                    body if authenticated else "<redacted>",
                )
                async with session.post(endpoint, data=body, headers=headers, timeout=self._timeout) as response:
                    raw = await response.read()
                    _LOGGER.debug(
                        "Response from Warmup: status %d, body %s",
                        response.status,
                        raw.decode("utf-8", errors="replace") if authenticated else "<redacted>",
                    )

                    if response.status == HTTPStatus.UNAUTHORIZED:
                        self._auth_handler.invalidate()

                    if response.status != HTTPStatus.OK:
                        msg = "Callout failed"
                        raise ApiCallError(msg, status=response.status, endpoint=endpoint)

                    try:
                        return raw.decode("utf-8")
                    except UnicodeDecodeError as exc:
                        msg = f"Undecodable response from API: {exc}"
                        raise ApiCallError(msg, status=response.status, endpoint=endpoint) from exc

            except TimeoutError as exc:
                _LOGGER.debug("Request to %s timed out", endpoint)
                msg = f"Request to {endpoint} timed out"
                raise WarmupTimeoutError(msg, endpoint=endpoint) from exc

            except ClientError as exc:
                _LOGGER.debug("Connection error for %s: %s", endpoint, exc)
                raise WarmupConnectionError(str(exc), endpoint=endpoint) from exc
