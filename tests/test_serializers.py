"""Tests for the serializers module."""

from pyblueair.models import AttributeName, AttributeWriteRequest
from pyblueair.serializers import build_attribute_write, serialize_attribute_write


class TestBuildAttributeWrite:
    """Tests for build_attribute_write function."""

    def test_builds_request(self) -> None:
        """Test arguments map onto the request model."""
        request = build_attribute_write(AttributeName.CHILD_LOCK, "uuid-1", "1", "0", user_id=7)

        assert request == AttributeWriteRequest(
            uuid="uuid-1",
            name=AttributeName.CHILD_LOCK,
            current_value="1",
            default_value="0",
            user_id=7,
        )
        assert request.scope == "device"


class TestSerializeAttributeWrite:
    """Tests for serialize_attribute_write function."""

    def test_without_user_id(self) -> None:
        """Test the body has no userId when none was given."""
        body = serialize_attribute_write(build_attribute_write(AttributeName.FAN_SPEED, "uuid-1", "3", "2"))

        assert body == {
            "uuid": "uuid-1",
            "scope": "device",
            "name": "fan_speed",
            "currentValue": "3",
            "defaultValue": "2",
        }

    def test_with_user_id(self) -> None:
        """Test userId leads the body when given."""
        body = serialize_attribute_write(build_attribute_write(AttributeName.MODE, "uuid-1", "auto", "auto", 42))

        assert next(iter(body)) == "userId"
        assert body["userId"] == 42
        assert body["name"] == "mode"

    def test_user_id_zero_is_kept(self) -> None:
        """Test a zero user ID is still sent."""
        body = serialize_attribute_write(build_attribute_write(AttributeName.BRIGHTNESS, "u", "1", "1", user_id=0))
        assert body["userId"] == 0
