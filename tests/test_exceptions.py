"""Tests for pyblueair exceptions."""

from __future__ import annotations

import pytest

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


class TestBlueairError:
    """Test BlueairError base exception."""

    def test_inherits_from_exception(self) -> None:
        """Test that BlueairError inherits from Exception."""
        assert issubclass(BlueairError, Exception)

    def test_message(self) -> None:
        """Test the message property mirrors str()."""
        error = BlueairError("Something broke")
        assert error.message == "Something broke"
        assert error.kind is ErrorKind.UNKNOWN


class TestHierarchy:
    """Test the exception hierarchy."""

    @pytest.mark.parametrize(
        ("exc_class", "parent"),
        [
            (MissingArgumentsError, ValidationError),
            (NonNumericValueError, ValidationError),
            (InvalidValueError, ValidationError),
            (EndpointDiscoveryError, AuthenticationError),
            (LockedOutError, AuthenticationError),
            (UserNotFoundError, AuthenticationError),
            (AuthFetchError, AuthenticationError),
            (AuthInvalidError, AuthenticationError),
            (BlueairTimeoutError, NetworkError),
            (DeviceFetchError, UnexpectedStatusError),
            (AttributeWriteError, UnexpectedStatusError),
            (NotInitializedError, BlueairError),
            (InvalidResponseError, BlueairError),
            (RetriesExhaustedError, BlueairError),
        ],
    )
    def test_parent(self, exc_class: type[BlueairError], parent: type[BlueairError]) -> None:
        """Test each exception derives from its category."""
        assert issubclass(exc_class, parent)
        assert issubclass(exc_class, BlueairError)


class TestKinds:
    """Test kind tags and default messages."""

    @pytest.mark.parametrize(
        ("error", "kind", "message"),
        [
            (MissingArgumentsError(), ErrorKind.MISSING_ARGUMENTS, "Missing arguments"),
            (NotInitializedError(), ErrorKind.NOT_INITIALIZED, "Client not initialized or missing endpoint/authToken"),
            (LockedOutError(), ErrorKind.LOCKED_OUT, "User is locked out"),
            (AuthInvalidError(), ErrorKind.AUTH_INVALID, "Auth token invalid or expired"),
            (InvalidResponseError(), ErrorKind.INVALID_RESPONSE, "Invalid JSON response"),
            (RetriesExhaustedError(), ErrorKind.RETRIES_EXHAUSTED, "Failed after multiple retries"),
        ],
    )
    def test_defaults(self, error: BlueairError, kind: ErrorKind, message: str) -> None:
        """Test the kind tag and default message of each error."""
        assert error.kind is kind
        assert str(error) == message

    def test_timeout_kind_differs_from_network(self) -> None:
        """Test a timeout is still a network error but has its own kind."""
        error = BlueairTimeoutError("timed out")
        assert isinstance(error, NetworkError)
        assert error.kind is ErrorKind.TIMEOUT


class TestErrorDetails:
    """Test extra attributes carried by errors."""

    def test_endpoint_discovery_error(self) -> None:
        """Test status and body are kept."""
        error = EndpointDiscoveryError("Failed", status=503, body={"message": "down"})
        assert error.status == 503
        assert error.body == {"message": "down"}

    def test_auth_fetch_error(self) -> None:
        """Test the login status is kept."""
        assert AuthFetchError("Failed", status=401).status == 401

    def test_invalid_value_error(self) -> None:
        """Test parameter, value and legal values are kept."""
        error = InvalidValueError("Invalid", parameter_name="current_value", value="9", legal_values=("0", "1"))
        assert error.parameter_name == "current_value"
        assert error.value == "9"
        assert error.legal_values == ("0", "1")

    def test_attribute_write_error(self) -> None:
        """Test status and attribute are kept."""
        error = AttributeWriteError("Error setting brightness: nope", status=400, attribute="brightness")
        assert error.status == 400
        assert error.attribute == "brightness"
        assert error.kind is ErrorKind.ATTRIBUTE_WRITE

    def test_catch_by_base(self) -> None:
        """Test all errors can be caught as BlueairError."""
        with pytest.raises(BlueairError):
            raise DeviceFetchError("Error fetching devices: 500", status=500)
