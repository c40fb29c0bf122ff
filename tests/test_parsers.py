"""Tests for the parsers module."""

import pytest

from pyblueair.exceptions import InvalidResponseError
from pyblueair.models import Device
from pyblueair.parsers import (
    decode_json_body,
    parse_device,
    parse_devices,
    parse_endpoint,
    parse_error_message,
)


class TestDecodeJsonBody:
    """Tests for decode_json_body function."""

    def test_decoded_body_unchanged(self) -> None:
        """Test already decoded bodies pass through."""
        data = {"uuid": "abc"}
        assert decode_json_body(data) is data

    def test_string_body_decoded(self) -> None:
        """Test a JSON document in a string is decoded."""
        assert decode_json_body('{"firmware": "1.0.6"}') == {"firmware": "1.0.6"}

    def test_bytes_body_decoded(self) -> None:
        """Test a JSON document in bytes is decoded."""
        assert decode_json_body(b"[1, 2]") == [1, 2]

    def test_none_unchanged(self) -> None:
        """Test an empty body stays None."""
        assert decode_json_body(None) is None

    def test_invalid_json(self) -> None:
        """Test malformed text raises InvalidResponseError."""
        with pytest.raises(InvalidResponseError, match="Invalid JSON response"):
            decode_json_body("{not json")


class TestParseEndpoint:
    """Tests for parse_endpoint function."""

    def test_plain_host(self) -> None:
        """Test a decoded JSON string is used as is."""
        assert parse_endpoint("api-eu.blueair.io") == "api-eu.blueair.io"

    def test_quoted_host(self) -> None:
        """Test surrounding quotes and whitespace are removed."""
        assert parse_endpoint(' "api-us-east-1.blueair.io"\n') == "api-us-east-1.blueair.io"

    def test_bytes_host(self) -> None:
        """Test a bytes body is decoded."""
        assert parse_endpoint(b'"api-eu.blueair.io"') == "api-eu.blueair.io"

    @pytest.mark.parametrize("data", ["", '""', None, {"host": "x"}])
    def test_no_host(self, data: object) -> None:
        """Test bodies without a host name are rejected."""
        with pytest.raises(InvalidResponseError):
            parse_endpoint(data)


class TestParseDevice:
    """Tests for parse_device function."""

    def test_complete_record(self) -> None:
        """Test all fields are read and the raw record is kept."""
        data = {"uuid": "abc", "userId": 42, "mac": "AA:BB", "name": "Office", "extra": True}

        device = parse_device(data)

        assert device == Device(uuid="abc", user_id="42", mac="AA:BB", name="Office")
        assert device.raw_data["extra"] is True

    def test_missing_fields(self) -> None:
        """Test absent keys become empty strings."""
        device = parse_device({"uuid": "abc"})
        assert device.name == ""
        assert device.mac == ""


class TestParseDevices:
    """Tests for parse_devices function."""

    def test_list(self) -> None:
        """Test a list of records is parsed in order."""
        devices = parse_devices([{"uuid": "a"}, {"uuid": "b"}])
        assert [device.uuid for device in devices] == ["a", "b"]

    def test_json_text(self) -> None:
        """Test a listing served as text is decoded first."""
        assert parse_devices('[{"uuid": "a"}]')[0].uuid == "a"

    def test_empty_body(self) -> None:
        """Test an empty body means no devices."""
        assert parse_devices(None) == []

    def test_non_record_items_skipped(self) -> None:
        """Test items that are not objects are ignored."""
        assert len(parse_devices([{"uuid": "a"}, "junk", 3])) == 1

    def test_not_a_list(self) -> None:
        """Test an object body is rejected."""
        with pytest.raises(InvalidResponseError, match="Expected a list of devices"):
            parse_devices({"uuid": "a"})


class TestParseErrorMessage:
    """Tests for parse_error_message function."""

    def test_message_field(self) -> None:
        """Test the message field of a JSON error body."""
        assert parse_error_message({"message": "Bad credentials"}) == "Bad credentials"

    def test_text_body(self) -> None:
        """Test a text error body."""
        assert parse_error_message("  Service Unavailable ") == "Service Unavailable"

    @pytest.mark.parametrize("data", [None, "", {}, {"message": ""}, []])
    def test_default(self, data: object) -> None:
        """Test the default is used when the body has no message."""
        assert parse_error_message(data, default="fallback") == "fallback"
