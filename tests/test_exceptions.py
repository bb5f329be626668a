"""Tests for pywarmup exceptions."""

from __future__ import annotations

from pywarmup.exceptions import (
    ApiCallError,
    AuthenticationError,
    InvalidParameterError,
    WarmupConnectionError,
    WarmupError,
    WarmupTimeoutError,
)


class TestWarmupError:
    """Test WarmupError base exception."""

    def test_base_exception_inherits_from_exception(self) -> None:
        """Test that WarmupError inherits from Exception."""
        assert issubclass(WarmupError, Exception)

    def test_base_exception_message(self) -> None:
        """Test that WarmupError can be created with a message."""
        error = WarmupError("Test error message")
        assert str(error) == "Test error message"


class TestAuthenticationError:
    """Test AuthenticationError exception."""

    def test_inherits_from_base_error(self) -> None:
        """Test that AuthenticationError inherits from WarmupError."""
        assert issubclass(AuthenticationError, WarmupError)

    def test_carries_reason_and_fail_count(self) -> None:
        """Test AuthenticationError with a reason and failure count."""
        error = AuthenticationError("Authentication Failed", fail_count=3)
        assert str(error) == "Authentication Failed"
        assert error.reason == "Authentication Failed"
        assert error.fail_count == 3

    def test_defaults(self) -> None:
        """Test AuthenticationError without arguments."""
        error = AuthenticationError()
        assert error.reason == ""
        assert error.fail_count == 0


class TestApiCallError:
    """Test ApiCallError exception."""

    def test_inherits_from_base_error(self) -> None:
        """Test that ApiCallError inherits from WarmupError."""
        assert issubclass(ApiCallError, WarmupError)

    def test_with_status_and_endpoint(self) -> None:
        """Test ApiCallError with status and endpoint."""
        error = ApiCallError("Callout failed", status=500, endpoint="https://example.com")
        assert str(error) == "Callout failed"
        assert error.status == 500
        assert error.endpoint == "https://example.com"

    def test_without_status(self) -> None:
        """Test ApiCallError without optional attributes."""
        error = ApiCallError("Callout failed")
        assert error.status is None
        assert error.endpoint is None

    def test_transport_errors_are_api_call_errors(self) -> None:
        """Test that transport faults are caught as ApiCallError."""
        assert issubclass(WarmupConnectionError, ApiCallError)
        assert issubclass(WarmupTimeoutError, ApiCallError)
        assert not issubclass(AuthenticationError, ApiCallError)


class TestInvalidParameterError:
    """Test InvalidParameterError exception."""

    def test_inherits_from_base_error(self) -> None:
        """Test that InvalidParameterError inherits from WarmupError."""
        assert issubclass(InvalidParameterError, WarmupError)

    def test_with_parameter_name_and_value(self) -> None:
        """Test InvalidParameterError with parameter name and value."""
        error = InvalidParameterError("Temperature out of range", parameter_name="temperature", value=45.0)
        assert str(error) == "Temperature out of range"
        assert error.parameter_name == "temperature"
        assert error.value == 45.0
