"""Custom exceptions for pywarmup library."""

from __future__ import annotations

from typing import Any


class WarmupError(Exception):
    """Base exception for all Warmup errors."""


class AuthenticationError(WarmupError):
    """Exception raised when authentication fails repeatedly.

    Raised only once the failure budget is exhausted. The client should be
    treated as unusable until new credentials are configured.

    Attributes:
        reason: Message describing the last authentication failure.
        fail_count: Number of consecutive failures when the error was raised.
    """

    def __init__(self, reason: str = "", fail_count: int = 0) -> None:
        """Initialize AuthenticationError.

        Args:
            reason: Message describing the last authentication failure.
            fail_count: Number of consecutive failures.
        """
        super().__init__(reason)
        self.reason = reason
        self.fail_count = fail_count


class ApiCallError(WarmupError):
    """Exception raised when a call to the Warmup API fails.

    Attributes:
        status: Optional HTTP status code returned by the API.
        endpoint: Optional endpoint the call was made against.
    """

    def __init__(
        self,
        message: str = "",
        status: int | None = None,
        endpoint: str | None = None,
    ) -> None:
        """Initialize ApiCallError.

        Args:
            message: Error message.
            status: Optional HTTP status code returned by the API.
            endpoint: Optional endpoint the call was made against.
        """
        super().__init__(message)
        self.status = status
        self.endpoint = endpoint


class WarmupConnectionError(ApiCallError):
    """Exception raised for connection failures."""


class WarmupTimeoutError(ApiCallError):
    """Exception raised when API requests timeout."""


class InvalidParameterError(WarmupError):
    """Exception raised for invalid parameter values.

    Attributes:
        parameter_name: Optional name of the invalid parameter.
        value: Optional value that was invalid.
    """

    def __init__(
        self,
        message: str = "",
        parameter_name: str | None = None,
        value: Any = None,
    ) -> None:
        """Initialize InvalidParameterError.

        Args:
            message: Error message.
            parameter_name: Optional name of the invalid parameter.
            value: Optional value that was invalid.
        """
        super().__init__(message)
        self.parameter_name = parameter_name
        self.value = value
