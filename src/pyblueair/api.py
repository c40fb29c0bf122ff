"""Low-level HTTP transport for the Blueair API.

This module performs raw HTTP exchanges with the Blueair cloud. Every call
returns an ApiResponse carrying status, decoded body and headers; status
classification is left to SessionManager and BlueairClient.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from aiohttp import ClientError, ClientSession, ClientTimeout
from yarl import URL

from pyblueair.const import DEFAULT_TIMEOUT, HEADER_API_KEY, URL_SAFE_CHARS
from pyblueair.exceptions import BlueairTimeoutError, InvalidResponseError, NetworkError


if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

_LOGGER = logging.getLogger(__name__)


def encode_path_segment(value: str) -> str:
    """Percent-encode a URL path segment.

    Matches JavaScript's encodeURIComponent, which the Blueair backend expects
    for user names containing "@" and "+".
    """
    return quote(value, safe=URL_SAFE_CHARS)


def get_header(headers: Mapping[str, str], name: str) -> str | None:
    """Look up a response header case-insensitively."""
    value = headers.get(name)
    if value is not None:
        return value

    lowered = name.lower()
    for key, header_value in headers.items():
        if key.lower() == lowered:
            return header_value
    return None


@dataclass
class ApiResponse:
    """Result of one HTTP exchange.

    Attributes:
        status: HTTP status code.
        data: Decoded JSON body, raw text for non-JSON bodies, None when empty.
        headers: Response headers.
    """

    status: int
    data: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Check if the status is 2xx."""
        return HTTPStatus.OK <= self.status < HTTPStatus.MULTIPLE_CHOICES


class BlueairAPI:
    """HTTP transport for the Blueair cloud.

    Adds the API key header to every request, applies a total timeout, and
    translates aiohttp transport failures into NetworkError.

    Example:
        ```python
        async with ClientSession() as session:
            api = BlueairAPI(session=session, api_key=key)
            response = await api.get(
                "https://api.blueair.io/v2/user/me%40example.com/homehost/",
                headers={"Authorization": "Basic ..."},
            )
            if response.ok:
                print(response.data)
        ```
    """

    def __init__(
        self,
        *,
        api_key: str,
        session: ClientSession | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the transport.

        Args:
            api_key: Value of the X-API-KEY-TOKEN header.
            session: Optional aiohttp ClientSession. If not provided, one will be
                created when entering the context manager.
            timeout: Total timeout per request in seconds.
        """
        self._api_key = api_key
        self._session = session
        self._owns_session = session is None
        self._timeout = timeout

    @property
    def api_key(self) -> str:
        """Get the API key sent with every request."""
        return self._api_key

    def set_session(self, session: ClientSession) -> None:
        """Use an externally managed session.

        The transport will not take ownership and will not close this session.

        Args:
            session: The aiohttp ClientSession to use for requests.
        """
        self._session = session
        self._owns_session = False

    async def __aenter__(self) -> BlueairAPI:
        """Enter the context manager, creating a session if none was provided."""
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
        """Exit the context manager, closing the session if this transport created it."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def validate_session(self) -> ClientSession:
        """Return the open session.

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

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        json_data: dict[str, Any] | None = None,
    ) -> ApiResponse:
        """Perform one HTTP exchange.

        Args:
            method: HTTP method (GET, POST).
            url: Fully built, already percent-encoded URL.
            headers: Extra request headers. The API key header is always added.
            json_data: Optional JSON request body.

        Returns:
            ApiResponse with status, decoded body and headers.

        Raises:
            RuntimeError: If session is not initialized or is closed.
            BlueairTimeoutError: If the request times out.
            NetworkError: If the connection fails.
            InvalidResponseError: If the body cannot be decoded as text, or a
                successful response declares JSON but is malformed.
        """
        session = self.validate_session()

        request_headers = {HEADER_API_KEY: self._api_key}
        if headers:
            request_headers.update(headers)

        _LOGGER.debug("%s %s", method, url)

        try:
            async with session.request(
                method,
                URL(url, encoded=True),
                json=json_data,
                headers=request_headers,
                timeout=ClientTimeout(total=self._timeout),
            ) as response:
                text = await response.text()
                result = ApiResponse(status=response.status, headers=response.headers)
                result.data = self._decode(text, response.content_type, ok=result.ok)

        except TimeoutError as exc:
            _LOGGER.debug("Request to %s timed out", url)
            msg = f"Request to {url} timed out"
            raise BlueairTimeoutError(msg) from exc

        except ClientError as exc:
            _LOGGER.debug("Connection error for %s: %s", url, exc)
            msg = f"Failed to connect to API: {exc}"
            raise NetworkError(msg) from exc

        except UnicodeDecodeError as exc:
            _LOGGER.debug("Undecodable body from %s: %s", url, exc)
            msg = f"Response body could not be decoded: {exc.reason}"
            raise InvalidResponseError(msg) from exc

        _LOGGER.debug("%s %s returned %d", method, url, result.status)
        return result

    async def get(self, url: str, *, headers: dict[str, str] | None = None) -> ApiResponse:
        """Perform a GET request."""
        return await self.request("GET", url, headers=headers)

    async def post(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        json_data: dict[str, Any] | None = None,
    ) -> ApiResponse:
        """Perform a POST request with a JSON body."""
        return await self.request("POST", url, headers=headers, json_data=json_data)

    @staticmethod
    def _decode(text: str, content_type: str | None, *, ok: bool) -> Any:
        """Decode a response body.

        JSON bodies are decoded when the content type says so. Anything else is
        returned as text and left to the caller.
        """
        if not text:
            return None

        # Substring match handles "application/json; charset=utf-8"
        if content_type and "json" in content_type:
            try:
                return json.loads(text)
            except json.JSONDecodeError as exc:
                if ok:
                    msg = "Invalid JSON response"
                    raise InvalidResponseError(msg) from exc
                return text

        return text
