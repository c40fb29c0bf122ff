"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiohttp import ClientSession

from pyblueair.client import BlueairClient
from pyblueair.const import API_KEY_ENV_VAR
from tests.fakes import PASSWORD, USERNAME, FakeBlueairBackend


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable

    from aiohttp.test_utils import TestClient


@pytest.fixture(autouse=True)
def _default_api_key(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a locally configured API key away from the fake backend."""
    if "integration" not in request.keywords:
        monkeypatch.delenv(API_KEY_ENV_VAR, raising=False)


@pytest.fixture
def backend() -> FakeBlueairBackend:
    """Create a fresh fake backend."""
    return FakeBlueairBackend()


@pytest.fixture
async def blueair_server(aiohttp_client: Callable[..., Any], backend: FakeBlueairBackend) -> TestClient:
    """Serve the fake backend and return a test client bound to it."""
    return await aiohttp_client(backend.make_app())


@pytest.fixture
def make_client(blueair_server: TestClient) -> Callable[..., BlueairClient]:
    """Build BlueairClient instances pointed at the fake backend."""

    def _make(username: str = USERNAME, password: str = PASSWORD, **kwargs: Any) -> BlueairClient:
        kwargs.setdefault("retry_delay", 0)
        return BlueairClient(
            username,
            password,
            session=blueair_server.session,
            discovery_url=str(blueair_server.make_url("/v2/")),
            scheme="http",
            **kwargs,
        )

    return _make


@pytest.fixture
async def client(make_client: Callable[..., BlueairClient]) -> BlueairClient:
    """Create an initialized client."""
    blueair = make_client()
    assert await blueair.initialize() is True
    return blueair


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
def mock_response() -> MagicMock:
    """Create a mock aiohttp ClientResponse usable as an async context manager.

    Returns:
        Mock ClientResponse for testing.
    """
    response = MagicMock()
    response.status = 200
    response.headers = {}
    response.content_type = "application/json"
    response.text = AsyncMock(return_value="")
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response
