"""Integration tests for pywarmup library.

These tests use real API credentials from a .env file and make actual API calls.
They are marked with @pytest.mark.integration and skipped when no credentials
are configured.

To run integration tests:
    pytest tests/integration -v -m integration

Environment variables required in .env:
    WARMUP_USERNAME: Account email
    WARMUP_PASSWORD: Account password
"""
