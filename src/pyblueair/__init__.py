"""Python client library for Blueair air purifiers.

This package provides an async client for the Blueair cloud API.

The library is organized into four parts:
1. **Session** (pyblueair.auth): Endpoint discovery and login
2. **Retry policy** (pyblueair.resilience): Bounded fixed-delay retries around network calls
3. **Validation** (pyblueair.validation): Local checks for attribute writes
4. **Client** (pyblueair.client): Device listing, reads and attribute writes

Example:
    ```python
    from pyblueair import BlueairClient

    async with BlueairClient(username="user@example.com", password="password") as client:
        if await client.initialize():
            devices = await client.get_devices()
            await client.set_brightness(devices[0].uuid, "2", "2")
    ```
"""

from __future__ import annotations

from pyblueair.api import ApiResponse, BlueairAPI
from pyblueair.auth import SessionManager, SessionProvider
from pyblueair.client import BlueairClient
from pyblueair.exceptions import (
    AttributeWriteError,
    AuthenticationError,
    AuthFetchError,
    AuthInvalidError,
    BlueairError,
    BlueairTimeoutError,
    DeviceFetchError,
    EndpointDiscoveryError,
    ErrorKind,
    InvalidResponseError,
    InvalidValueError,
    LockedOutError,
    MissingArgumentsError,
    NetworkError,
    NonNumericValueError,
    NotInitializedError,
    RetriesExhaustedError,
    UnexpectedStatusError,
    UserNotFoundError,
    ValidationError,
)
from pyblueair.models import AttributeName, AttributeWriteRequest, BlueairSession, Credentials, Device
from pyblueair.resilience import RetryingRequestExecutor


__version__ = "0.1.0"

__all__ = [
    "ApiResponse",
    "AttributeName",
    "AttributeWriteError",
    "AttributeWriteRequest",
    "AuthFetchError",
    "AuthInvalidError",
    "AuthenticationError",
    "BlueairAPI",
    "BlueairClient",
    "BlueairError",
    "BlueairSession",
    "BlueairTimeoutError",
    "Credentials",
    "Device",
    "DeviceFetchError",
    "EndpointDiscoveryError",
    "ErrorKind",
    "InvalidResponseError",
    "InvalidValueError",
    "LockedOutError",
    "MissingArgumentsError",
    "NetworkError",
    "NonNumericValueError",
    "NotInitializedError",
    "RetriesExhaustedError",
    "RetryingRequestExecutor",
    "SessionManager",
    "SessionProvider",
    "UnexpectedStatusError",
    "UserNotFoundError",
    "ValidationError",
    "__version__",
]
