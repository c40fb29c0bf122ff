"""Custom exceptions for pyblueair library.

Every exception carries a ``kind`` tag so callers can dispatch on the failure
category without matching message text. Messages keep the wording the Blueair
apps have always produced.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Discriminator for pyblueair failures."""

    UNKNOWN = "unknown"
    MISSING_ARGUMENTS = "missing_arguments"
    NON_NUMERIC_VALUE = "non_numeric_value"
    INVALID_VALUE = "invalid_value"
    NOT_INITIALIZED = "not_initialized"
    ENDPOINT_DISCOVERY = "endpoint_discovery"
    LOCKED_OUT = "locked_out"
    USER_NOT_FOUND = "user_not_found"
    AUTH_FETCH = "auth_fetch"
    AUTH_INVALID = "auth_invalid"
    NETWORK = "network"
    TIMEOUT = "timeout"
    UNEXPECTED_STATUS = "unexpected_status"
    DEVICE_FETCH = "device_fetch"
    ATTRIBUTE_WRITE = "attribute_write"
    INVALID_RESPONSE = "invalid_response"
    RETRIES_EXHAUSTED = "retries_exhausted"


class BlueairError(Exception):
    """Base exception for all Blueair errors.

    Attributes:
        kind: Category of the failure.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN

    @property
    def message(self) -> str:
        """Human-readable error message."""
        return str(self)


# -------------------------------------------------------------------------
# Local validation errors (raised before any network call, never retried)
# -------------------------------------------------------------------------


class ValidationError(BlueairError):
    """Exception raised for invalid command arguments.

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
        """Initialize ValidationError.

        Args:
            message: Error message.
            parameter_name: Optional name of the invalid parameter.
            value: Optional value that was invalid.
        """
        super().__init__(message)
        self.parameter_name = parameter_name
        self.value = value


class MissingArgumentsError(ValidationError):
    """Exception raised when a required argument is empty or absent."""

    kind = ErrorKind.MISSING_ARGUMENTS

    def __init__(self, message: str = "Missing arguments", parameter_name: str | None = None) -> None:
        """Initialize MissingArgumentsError."""
        super().__init__(message, parameter_name=parameter_name)


class NonNumericValueError(ValidationError):
    """Exception raised when a numeric attribute receives a non-numeric value."""

    kind = ErrorKind.NON_NUMERIC_VALUE


class InvalidValueError(ValidationError):
    """Exception raised when a value is outside the attribute's legal set.

    Attributes:
        legal_values: The values the attribute accepts.
    """

    kind = ErrorKind.INVALID_VALUE

    def __init__(
        self,
        message: str = "",
        parameter_name: str | None = None,
        value: Any = None,
        legal_values: tuple[str, ...] = (),
    ) -> None:
        """Initialize InvalidValueError.

        Args:
            message: Error message.
            parameter_name: Optional name of the invalid parameter.
            value: Optional value that was invalid.
            legal_values: The values the attribute accepts.
        """
        super().__init__(message, parameter_name=parameter_name, value=value)
        self.legal_values = legal_values


class NotInitializedError(BlueairError):
    """Exception raised when an authenticated call is made before initialize()."""

    kind = ErrorKind.NOT_INITIALIZED

    def __init__(self, message: str = "Client not initialized or missing endpoint/authToken") -> None:
        """Initialize NotInitializedError."""
        super().__init__(message)


# -------------------------------------------------------------------------
# Authentication errors
# -------------------------------------------------------------------------


class AuthenticationError(BlueairError):
    """Exception raised for authentication failures."""


class EndpointDiscoveryError(AuthenticationError):
    """Exception raised when the regional endpoint cannot be determined.

    Attributes:
        status: HTTP status of the discovery response, if one was received.
        body: Response body of the discovery call.
    """

    kind = ErrorKind.ENDPOINT_DISCOVERY

    def __init__(self, message: str = "", status: int | None = None, body: Any = None) -> None:
        """Initialize EndpointDiscoveryError.

        Args:
            message: Error message.
            status: HTTP status code.
            body: Response body.
        """
        super().__init__(message)
        self.status = status
        self.body = body


class LockedOutError(AuthenticationError):
    """Exception raised when the backend reports the account as locked."""

    kind = ErrorKind.LOCKED_OUT

    def __init__(self, message: str = "User is locked out") -> None:
        """Initialize LockedOutError."""
        super().__init__(message)


class UserNotFoundError(AuthenticationError):
    """Exception raised when the login endpoint does not know the user."""

    kind = ErrorKind.USER_NOT_FOUND


class AuthFetchError(AuthenticationError):
    """Exception raised when the login call fails for any other reason.

    Attributes:
        status: HTTP status of the login response.
    """

    kind = ErrorKind.AUTH_FETCH

    def __init__(self, message: str = "", status: int | None = None) -> None:
        """Initialize AuthFetchError."""
        super().__init__(message)
        self.status = status


class AuthInvalidError(AuthenticationError):
    """Exception raised when the backend rejects the session token (HTTP 401)."""

    kind = ErrorKind.AUTH_INVALID

    def __init__(self, message: str = "Auth token invalid or expired") -> None:
        """Initialize AuthInvalidError."""
        super().__init__(message)


# -------------------------------------------------------------------------
# Transport and response errors
# -------------------------------------------------------------------------


class NetworkError(BlueairError):
    """Exception raised for connection failures."""

    kind = ErrorKind.NETWORK


class BlueairTimeoutError(NetworkError):
    """Exception raised when API requests timeout."""

    kind = ErrorKind.TIMEOUT


class UnexpectedStatusError(BlueairError):
    """Exception raised for a non-success HTTP status.

    Attributes:
        status: HTTP status code of the response.
    """

    kind = ErrorKind.UNEXPECTED_STATUS

    def __init__(self, message: str = "", status: int | None = None) -> None:
        """Initialize UnexpectedStatusError.

        Args:
            message: Error message.
            status: HTTP status code.
        """
        super().__init__(message)
        self.status = status


class DeviceFetchError(UnexpectedStatusError):
    """Exception raised when reading devices, attributes or info fails."""

    kind = ErrorKind.DEVICE_FETCH


class AttributeWriteError(UnexpectedStatusError):
    """Exception raised when an attribute write is rejected.

    Attributes:
        attribute: Name of the attribute being written.
    """

    kind = ErrorKind.ATTRIBUTE_WRITE

    def __init__(self, message: str = "", status: int | None = None, attribute: str | None = None) -> None:
        """Initialize AttributeWriteError."""
        super().__init__(message, status=status)
        self.attribute = attribute


class InvalidResponseError(BlueairError):
    """Exception raised when a response body cannot be decoded."""

    kind = ErrorKind.INVALID_RESPONSE

    def __init__(self, message: str = "Invalid JSON response") -> None:
        """Initialize InvalidResponseError."""
        super().__init__(message)


class RetriesExhaustedError(BlueairError):
    """Exception raised when the retry loop ends without an attempt result."""

    kind = ErrorKind.RETRIES_EXHAUSTED

    def __init__(self, message: str = "Failed after multiple retries") -> None:
        """Initialize RetriesExhaustedError."""
        super().__init__(message)
