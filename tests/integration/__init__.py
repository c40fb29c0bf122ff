"""Integration tests for pyblueair library.

These tests use real account credentials from .env file and make actual API calls.
They are marked with @pytest.mark.integration and skipped by default.

To run integration tests:
    pytest tests/integration -v -m integration

Environment variables read from .env:
    BLUEAIR_USERNAME: Account email
    BLUEAIR_PASSWORD: Account password
    BLUEAIR_API_KEY: API key (optional, defaults to the public app key)
    BLUEAIR_DISCOVERY_URL: Discovery URL (optional, defaults to production)
    BLUEAIR_TEST_DEVICE_UUID: Device used by write tests (optional)
"""
