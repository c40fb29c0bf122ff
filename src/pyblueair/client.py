"""Public client for Blueair air purifiers.

This module provides the device gateway: listing devices, reading attributes
and info, and writing fan speed, fan mode, brightness and child lock.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import TYPE_CHECKING, Any, TypeVar

from pyblueair.api import BlueairAPI, encode_path_segment
from pyblueair.auth import SessionManager, SessionProvider, resolve_api_key
from pyblueair.const import (
    DEFAULT_DISCOVERY_URL,
    DEFAULT_RETRIES,
    DEFAULT_RETRY_DELAY,
    DEFAULT_SCHEME,
    DEFAULT_TIMEOUT,
    HEADER_AUTH_TOKEN,
    HEADER_CONTENT_TYPE,
)
from pyblueair.exceptions import (
    AttributeWriteError,
    AuthInvalidError,
    DeviceFetchError,
    NotInitializedError,
)
from pyblueair.models import AttributeName
from pyblueair.parsers import decode_json_body, parse_devices, parse_error_message
from pyblueair.resilience import RetryingRequestExecutor
from pyblueair.serializers import build_attribute_write, serialize_attribute_write
from pyblueair.validation import require_arguments, validate_attribute_write


if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from types import TracebackType

    from aiohttp import ClientSession

    from pyblueair.api import ApiResponse
    from pyblueair.models import Device

_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")


class BlueairClient:
    """Client for Blueair air purifiers.

    Call initialize() once before any other operation. Every operation then
    validates its arguments locally, checks that the session is ready, and
    runs the network call inside the retry executor. A 401 from the backend
    surfaces as AuthInvalidError once the retry budget is spent; there is no
    automatic re-login.

    Example:
        ```python
        from pyblueair import BlueairClient

        async with BlueairClient(username="user@example.com", password="password") as client:
            if not await client.initialize():
                raise SystemExit("login failed")

            for device in await client.get_devices():
                print(device.name, await client.get_device_info(device.uuid))
                await client.set_fan_speed(device.uuid, "2", "2")
        ```

    Attributes:
        api: Low-level transport.
        session_provider: Source of endpoint and token.
    """

    def __init__(
        self,
        username: str,
        password: str,
        *,
        session: ClientSession | None = None,
        api_key: str | None = None,
        discovery_url: str = DEFAULT_DISCOVERY_URL,
        scheme: str = DEFAULT_SCHEME,
        timeout: float = DEFAULT_TIMEOUT,
        retries: int = DEFAULT_RETRIES,
        retry_delay: float = DEFAULT_RETRY_DELAY,
        session_provider: SessionProvider | None = None,
        executor: RetryingRequestExecutor | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            username: User's email address.
            password: User's password.
            session: Optional aiohttp ClientSession. If not provided, one will be
                created when entering the context manager.
            api_key: API key header value. Defaults to the BLUEAIR_API_KEY
                environment variable, then to the public vendor key.
            discovery_url: Base URL of the global discovery host.
            scheme: URL scheme for the regional host.
            timeout: Total timeout per request in seconds.
            retries: Attempts per network operation.
            retry_delay: Seconds between attempts.
            session_provider: Optional source of endpoint and token. Defaults to
                a SessionManager logging in with the given credentials.
            executor: Optional pre-configured retry executor. Takes precedence
                over retries and retry_delay.
        """
        self._username = username
        self._scheme = scheme
        self._api = BlueairAPI(api_key=resolve_api_key(api_key), session=session, timeout=timeout)
        self._executor = executor or RetryingRequestExecutor(retries=retries, delay=retry_delay)

        if session_provider is not None:
            self._session_provider = session_provider
        else:
            self._session_provider = SessionManager(
                username,
                password,
                api=self._api,
                discovery_url=discovery_url,
                scheme=scheme,
                executor=self._executor,
            )

    @property
    def api(self) -> BlueairAPI:
        """Get the underlying transport."""
        return self._api

    @property
    def session_provider(self) -> SessionProvider:
        """Get the source of endpoint and token."""
        return self._session_provider

    @property
    def endpoint(self) -> str | None:
        """Get the regional host, None until initialized."""
        return self._session_provider.endpoint

    @property
    def token(self) -> str | None:
        """Get the session token, None until initialized."""
        return self._session_provider.token

    def is_initialized(self) -> bool:
        """Check if endpoint and token are both present."""
        return bool(self.endpoint) and bool(self.token)

    async def __aenter__(self) -> BlueairClient:
        """Enter the context manager.

        Creates an HTTP session if none was provided. Does not log in; call
        initialize() for that.
        """
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

    async def initialize(self) -> bool:
        """Discover the regional endpoint and log in.

        Returns:
            True on success, False on any failure (never raises).
        """
        return await self._session_provider.initialize()

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _require_session(self) -> tuple[str, str]:
        """Return endpoint and token once the client can send requests.

        Raises:
            NotInitializedError: If either is missing.
            RuntimeError: If there is no open HTTP session.
        """
        endpoint = self._session_provider.endpoint
        token = self._session_provider.token
        if not endpoint or not token:
            _LOGGER.error("Client not initialized or missing endpoint/authToken")
            raise NotInitializedError
        # Checked before the retry loop
        self._api.validate_session()
        return endpoint, token

    def _url(self, endpoint: str, path: str) -> str:
        return f"{self._scheme}://{endpoint}/v2/{path}"

    async def _execute(self, func: Callable[[], Awaitable[_T]]) -> _T:
        return await self._executor.execute(func)

    @staticmethod
    def _raise_for_unauthorized(response: ApiResponse) -> None:
        if response.status == HTTPStatus.UNAUTHORIZED:
            raise AuthInvalidError

    @staticmethod
    def _failure_message(response: ApiResponse) -> str:
        return parse_error_message(response.data, default=f"Request failed with status code {response.status}")

    # -------------------------------------------------------------------------
    # Read Operations
    # -------------------------------------------------------------------------

    async def get_devices(self) -> list[Device]:
        """Get all devices owned by the account.

        Returns:
            List of Device records. The backend is the source of truth; nothing
            is cached.

        Raises:
            NotInitializedError: If initialize() has not succeeded.
            AuthInvalidError: If the token is rejected.
            DeviceFetchError: If the listing fails.
            NetworkError: If the backend is unreachable.
        """
        endpoint, token = self._require_session()
        url = self._url(endpoint, f"owner/{encode_path_segment(self._username)}/device/")
        headers = {HEADER_AUTH_TOKEN: token}
        _LOGGER.debug("Fetching devices from: %s", url)

        async def _fetch() -> list[Device]:
            response = await self._api.get(url, headers=headers)
            self._raise_for_unauthorized(response)
            if not response.ok:
                msg = f"Error fetching devices: {response.status}"
                raise DeviceFetchError(msg, status=response.status)
            return parse_devices(response.data)

        devices = await self._execute(_fetch)
        _LOGGER.debug("Received %d devices", len(devices))
        return devices

    async def get_device_attributes(self, uuid: str) -> Any:
        """Get the attributes of a device.

        Args:
            uuid: Device identifier.

        Returns:
            Decoded attributes response, typically a list of
            {"name": str, "currentValue": str, "defaultValue": str, ...} records.

        Raises:
            MissingArgumentsError: If uuid is empty.
            NotInitializedError: If initialize() has not succeeded.
            AuthInvalidError: If the token is rejected.
            DeviceFetchError: If the request fails.
        """
        endpoint, token = self._require_session()
        require_arguments(uuid=uuid)
        url = self._url(endpoint, f"device/{encode_path_segment(uuid)}/attributes/")
        headers = {HEADER_AUTH_TOKEN: token}
        _LOGGER.debug("Fetching attributes for device UUID %s from: %s", uuid, url)

        async def _fetch() -> Any:
            response = await self._api.get(url, headers=headers)
            self._raise_for_unauthorized(response)
            if not response.ok:
                msg = f"Error fetching attributes: {self._failure_message(response)}"
                raise DeviceFetchError(msg, status=response.status)
            return decode_json_body(response.data)

        return await self._execute(_fetch)

    async def get_device_info(self, uuid: str) -> Any:
        """Get the info document of a device.

        The backend may serve the document as JSON or as a JSON string in a
        text body; both are decoded.

        Args:
            uuid: Device identifier.

        Returns:
            Decoded device info.

        Raises:
            NotInitializedError: If initialize() has not succeeded.
            MissingArgumentsError: If uuid is empty.
            InvalidResponseError: If the body is not valid JSON.
            AuthInvalidError: If the token is rejected.
            DeviceFetchError: If the request fails.
        """
        endpoint, token = self._require_session()
        require_arguments(uuid=uuid)
        url = self._url(endpoint, f"device/{encode_path_segment(uuid)}/info/")
        headers = {HEADER_AUTH_TOKEN: token}
        _LOGGER.debug("Fetching device info for UUID %s from: %s", uuid, url)

        async def _fetch() -> Any:
            response = await self._api.get(url, headers=headers)
            self._raise_for_unauthorized(response)
            if response.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
                _LOGGER.warning("Server error while fetching device info: %s", response.data)
            if not response.ok:
                msg = f"Error fetching device info: {self._failure_message(response)}"
                raise DeviceFetchError(msg, status=response.status)
            return decode_json_body(response.data)

        return await self._execute(_fetch)

    # -------------------------------------------------------------------------
    # Attribute Writes
    # -------------------------------------------------------------------------

    async def _set_attribute(
        self,
        name: AttributeName,
        uuid: str,
        current_value: str,
        default_value: str,
        user_id: int | None,
    ) -> Any:
        """Validate and send an attribute write.

        Validation runs before the session check and before the retry loop, so
        invalid arguments fail immediately and are never retried.
        """
        rule = validate_attribute_write(name, uuid, current_value, default_value)
        endpoint, token = self._require_session()

        body = serialize_attribute_write(
            build_attribute_write(name, uuid, current_value, default_value, user_id=user_id)
        )
        url = self._url(endpoint, f"device/{encode_path_segment(uuid)}/attribute/{rule.path}/")
        headers = {HEADER_AUTH_TOKEN: token, HEADER_CONTENT_TYPE: "application/json"}
        _LOGGER.debug("Setting %s of %s to %s", rule.label, uuid, current_value)

        async def _post() -> Any:
            response = await self._api.post(url, headers=headers, json_data=body)
            self._raise_for_unauthorized(response)
            if not response.ok:
                msg = f"Error setting {rule.label}: {self._failure_message(response)}"
                raise AttributeWriteError(msg, status=response.status, attribute=name.value)
            return response.data

        result = await self._execute(_post)
        _LOGGER.info("%s set successfully for %s", rule.label.capitalize(), uuid)
        return result

    async def set_fan_speed(
        self,
        uuid: str,
        current_value: str,
        default_value: str,
        user_id: int | None = None,
    ) -> Any:
        """Set the fan speed.

        Args:
            uuid: Device identifier.
            current_value: Fan speed, "0" to "3".
            default_value: Default fan speed, "0" to "3".
            user_id: Optional user ID.

        Returns:
            Decoded response body, None if empty.

        Raises:
            MissingArgumentsError: If an argument is empty.
            NonNumericValueError: If a value is not numeric.
            InvalidValueError: If a value is not 0, 1, 2 or 3.
            NotInitializedError: If initialize() has not succeeded.
            AuthInvalidError: If the token is rejected.
            AttributeWriteError: If the write fails.
        """
        return await self._set_attribute(AttributeName.FAN_SPEED, uuid, current_value, default_value, user_id)

    async def set_fan_auto(
        self,
        uuid: str,
        current_value: str,
        default_value: str,
        user_id: int | None = None,
    ) -> Any:
        """Switch the fan between automatic and manual mode.

        Args:
            uuid: Device identifier.
            current_value: "auto" or "manual".
            default_value: "auto" or "manual".
            user_id: Optional user ID.

        Returns:
            Decoded response body, None if empty.

        Raises:
            MissingArgumentsError: If an argument is empty.
            InvalidValueError: If a value is not "auto" or "manual".
            NotInitializedError: If initialize() has not succeeded.
            AuthInvalidError: If the token is rejected.
            AttributeWriteError: If the write fails.
        """
        return await self._set_attribute(AttributeName.MODE, uuid, current_value, default_value, user_id)

    async def set_brightness(
        self,
        uuid: str,
        current_value: str,
        default_value: str,
        user_id: int | None = None,
    ) -> Any:
        """Set the display brightness ("0" to "4")."""
        return await self._set_attribute(AttributeName.BRIGHTNESS, uuid, current_value, default_value, user_id)

    async def set_child_lock(
        self,
        uuid: str,
        current_value: str,
        default_value: str,
        user_id: int | None = None,
    ) -> Any:
        """Set the child lock ("0" unlocked, "1" locked)."""
        return await self._set_attribute(AttributeName.CHILD_LOCK, uuid, current_value, default_value, user_id)
