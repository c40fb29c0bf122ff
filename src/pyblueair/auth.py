"""Session management for the Blueair API.

Login is a two-step protocol: the global discovery host tells which regional
host ("homehost") the account lives on, then that host issues a session token
in a response header.
"""

from __future__ import annotations

import asyncio
import logging
import os
from http import HTTPStatus
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pyblueair.api import BlueairAPI, encode_path_segment, get_header
from pyblueair.const import (
    API_KEY_ENV_VAR,
    DEFAULT_API_KEY,
    DEFAULT_DISCOVERY_URL,
    DEFAULT_SCHEME,
    DEFAULT_TIMEOUT,
    HEADER_AUTH_TOKEN,
    HEADER_AUTHORIZATION,
)
from pyblueair.exceptions import (
    AuthFetchError,
    EndpointDiscoveryError,
    LockedOutError,
    NetworkError,
    UserNotFoundError,
)
from pyblueair.models import BlueairSession, Credentials
from pyblueair.parsers import parse_endpoint, parse_error_message
from pyblueair.resilience import RetryingRequestExecutor


if TYPE_CHECKING:
    from types import TracebackType

    from aiohttp import ClientSession

    from pyblueair.api import ApiResponse

_LOGGER = logging.getLogger(__name__)


def resolve_api_key(api_key: str | None = None) -> str:
    """Pick the API key from the argument, the environment, or the shipped default."""
    return api_key or os.getenv(API_KEY_ENV_VAR) or DEFAULT_API_KEY


@runtime_checkable
class SessionProvider(Protocol):
    """Source of the endpoint and token used for authenticated calls."""

    @property
    def endpoint(self) -> str | None:
        """Regional host, None until initialized."""

    @property
    def token(self) -> str | None:
        """Session token, None until initialized."""

    async def initialize(self) -> bool:
        """Populate endpoint and token, returning whether it succeeded."""


class SessionManager:
    """Turn credentials into a usable endpoint/token pair.

    The session is populated once by a successful initialize() and never
    changed afterwards. There is no token refresh: when the backend starts
    rejecting the token, construct a new client.

    Concurrent initialize() calls on one instance are serialized; callers
    arriving after a successful initialization get True without any network
    traffic.

    Example:
        ```python
        async with ClientSession() as session:
            manager = SessionManager("user@example.com", "password", session=session)
            if await manager.initialize():
                print(manager.endpoint)
        ```

    Attributes:
        credentials: Immutable username/password pair.
        discovery_url: Global discovery base URL (with trailing slash).
        scheme: URL scheme used for the regional host.
    """

    def __init__(
        self,
        username: str,
        password: str,
        *,
        session: ClientSession | None = None,
        api: BlueairAPI | None = None,
        api_key: str | None = None,
        discovery_url: str = DEFAULT_DISCOVERY_URL,
        scheme: str = DEFAULT_SCHEME,
        timeout: float = DEFAULT_TIMEOUT,
        executor: RetryingRequestExecutor | None = None,
    ) -> None:
        """Initialize the session manager.

        Args:
            username: User's email address.
            password: User's password.
            session: Optional aiohttp ClientSession. If not provided, one will be
                created when entering the context manager.
            api: Optional pre-configured transport. Takes precedence over
                session, api_key and timeout.
            api_key: API key header value. Defaults to the BLUEAIR_API_KEY
                environment variable, then to the public vendor key.
            discovery_url: Base URL of the global discovery host.
            scheme: URL scheme for the regional host.
            timeout: Total timeout per request in seconds.
            executor: Retry executor wrapping each network exchange.
        """
        self.credentials = Credentials(username=username, password=password)
        self.discovery_url = discovery_url if discovery_url.endswith("/") else f"{discovery_url}/"
        self.scheme = scheme

        self._api = api or BlueairAPI(api_key=resolve_api_key(api_key), session=session, timeout=timeout)
        self._executor = executor or RetryingRequestExecutor()
        self._session_state = BlueairSession()
        self._init_lock = asyncio.Lock()

    @property
    def api(self) -> BlueairAPI:
        """Get the underlying transport."""
        return self._api

    @property
    def username(self) -> str:
        """Get the account user name."""
        return self.credentials.username

    @property
    def session(self) -> BlueairSession:
        """Get a snapshot of the session state."""
        return self._session_state

    @property
    def endpoint(self) -> str | None:
        """Get the regional host, None until initialized."""
        return self._session_state.endpoint

    @property
    def token(self) -> str | None:
        """Get the session token, None until initialized."""
        return self._session_state.token

    def is_initialized(self) -> bool:
        """Check if both endpoint and token are present."""
        return self._session_state.is_ready

    async def __aenter__(self) -> SessionManager:
        """Enter the context manager, creating an HTTP session if needed."""
        await self._api.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager, closing an owned HTTP session."""
        await self._api.__aexit__(exc_type, exc_val, exc_tb)

    def _basic_headers(self) -> dict[str, str]:
        return {HEADER_AUTHORIZATION: f"Basic {self.credentials.basic_auth}"}

    async def determine_endpoint(self) -> str:
        """Ask the discovery host which regional host serves this account.

        Transport failures and non-success statuses are retried.

        Returns:
            The regional host name, e.g. "api-eu.blueair.io".

        Raises:
            EndpointDiscoveryError: If discovery keeps answering with a non-success status.
            NetworkError: If the discovery host keeps being unreachable.
            InvalidResponseError: If the body does not contain a host name.
        """
        url = f"{self.discovery_url}user/{encode_path_segment(self.username)}/homehost/"
        _LOGGER.debug("Determining endpoint with URL: %s", url)

        async def _attempt() -> ApiResponse:
            response = await self._api.get(url, headers=self._basic_headers())
            if not response.ok:
                message = parse_error_message(response.data)
                msg = f"Failed to determine endpoint. Status: {response.status}. Message: {message}"
                raise EndpointDiscoveryError(msg, status=response.status, body=response.data)
            return response

        response = await self._executor.execute(
            _attempt,
            retryable_exceptions=(NetworkError, EndpointDiscoveryError),
        )

        endpoint = parse_endpoint(response.data)
        _LOGGER.debug("Determined endpoint: %s", endpoint)
        return endpoint

    async def fetch_token(self, endpoint: str | None) -> str:
        """Log in on the regional host and return the session token.

        Only transport failures are retried; every status the backend answers
        with is final.

        Args:
            endpoint: Regional host returned by determine_endpoint().

        Returns:
            The session token from the X-Auth-Token response header.

        Raises:
            EndpointDiscoveryError: If endpoint is empty.
            LockedOutError: If the backend reports the account as locked.
            UserNotFoundError: If the backend does not know the user (404).
            AuthFetchError: For any other failed login.
            NetworkError: If the regional host keeps being unreachable.
        """
        if not endpoint:
            msg = "Endpoint is null. Cannot fetch auth token."
            raise EndpointDiscoveryError(msg)

        url = f"{self.scheme}://{endpoint}/v2/user/{encode_path_segment(self.username)}/login/"
        _LOGGER.debug("Determining login endpoint with URL: %s", url)

        response = await self._executor.execute(
            lambda: self._api.get(url, headers=self._basic_headers()),
            retryable_exceptions=(NetworkError,),
        )

        if response.status == HTTPStatus.OK:
            if response.data is False or (isinstance(response.data, str) and response.data.strip() == "false"):
                msg = "User is locked out"
                raise LockedOutError(msg)

            token = get_header(response.headers, HEADER_AUTH_TOKEN)
            if not token:
                msg = "Failed to fetch auth token. Missing token header in login response"
                raise AuthFetchError(msg, status=response.status)
            return token

        message = parse_error_message(response.data)
        if response.status == HTTPStatus.NOT_FOUND:
            msg = f"User not found: {message}"
            raise UserNotFoundError(msg)

        msg = f"Failed to fetch auth token. Status: {response.status}. Message: {message}"
        raise AuthFetchError(msg, status=response.status)

    async def initialize(self) -> bool:
        """Discover the endpoint and log in.

        Never raises: every failure is logged and reported as False. The
        session is committed only when both steps succeed.

        Returns:
            True if the session is ready, False otherwise.
        """
        async with self._init_lock:
            if self.is_initialized():
                _LOGGER.debug("Skipping initialization - session already established")
                return True

            _LOGGER.debug("Initializing session for %s", self.username)
            try:
                endpoint = await self.determine_endpoint()
                token = await self.fetch_token(endpoint)
            except Exception as exc:  # noqa: BLE001
                _LOGGER.error("Error during initialization: %s", exc)
                return False

            self._session_state = BlueairSession(endpoint=endpoint, token=token)
            _LOGGER.info("Client initialized with endpoint %s", endpoint)
            return True
