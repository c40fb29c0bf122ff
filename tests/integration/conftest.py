"""Pytest configuration and fixtures for integration tests."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from dotenv import load_dotenv

from pyblueair import BlueairClient
from pyblueair.const import API_KEY_ENV_VAR, DEFAULT_DISCOVERY_URL


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


# Load .env file from project root
env_path = Path(__file__).parents[2] / ".env"
load_dotenv(env_path)


@pytest.fixture(scope="session")
def integration_config() -> dict[str, str | None]:
    """Load integration test configuration from environment.

    Returns:
        Dictionary with account credentials and configuration.
    """
    username = os.getenv("BLUEAIR_USERNAME")
    password = os.getenv("BLUEAIR_PASSWORD")

    if not username or not password:
        pytest.skip("Create a .env file with BLUEAIR_USERNAME and BLUEAIR_PASSWORD to run integration tests")

    return {
        "username": username,
        "password": password,
        "api_key": os.getenv(API_KEY_ENV_VAR),
        "discovery_url": os.getenv("BLUEAIR_DISCOVERY_URL", DEFAULT_DISCOVERY_URL),
    }


@pytest.fixture(scope="session")
def test_device_uuid() -> str | None:
    """Get the device used for write tests, None to skip them."""
    return os.getenv("BLUEAIR_TEST_DEVICE_UUID")


@pytest.fixture
async def integration_client(integration_config: dict[str, str | None]) -> AsyncGenerator[BlueairClient]:
    """Create an initialized client for the configured account."""
    async with BlueairClient(
        integration_config["username"] or "",
        integration_config["password"] or "",
        api_key=integration_config["api_key"],
        discovery_url=integration_config["discovery_url"] or DEFAULT_DISCOVERY_URL,
    ) as client:
        assert await client.initialize(), "Login should succeed with the configured account"
        yield client


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for integration tests."""
    config.addinivalue_line("markers", "integration: Integration tests requiring real API access")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")


@pytest.fixture(autouse=True)
async def rate_limit_delay(request: pytest.FixtureRequest) -> AsyncGenerator[None]:
    """Pause after each integration test so the account is not locked out."""
    yield
    if "integration" in request.keywords:
        await asyncio.sleep(2.0)
