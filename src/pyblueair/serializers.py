"""Serialization of API request bodies.

Stateless functions converting typed request models into the JSON bodies the
Blueair API expects.
"""

from __future__ import annotations

from typing import Any

from pyblueair.models import AttributeName, AttributeWriteRequest


__all__ = [
    "build_attribute_write",
    "serialize_attribute_write",
]


def build_attribute_write(
    name: AttributeName,
    uuid: str,
    current_value: str,
    default_value: str,
    user_id: int | None = None,
) -> AttributeWriteRequest:
    """Build an attribute write request from already validated arguments."""
    return AttributeWriteRequest(
        uuid=uuid,
        name=name,
        current_value=current_value,
        default_value=default_value,
        user_id=user_id,
    )


def serialize_attribute_write(request: AttributeWriteRequest) -> dict[str, Any]:
    """Serialize an attribute write for the attribute POST endpoint.

    ``userId`` is left out when no user ID was given.

    Args:
        request: The attribute write request.

    Returns:
        Request body in format:
        {"userId": int, "uuid": str, "scope": "device", "name": str,
         "currentValue": str, "defaultValue": str}

    Example:
        >>> body = serialize_attribute_write(
        ...     AttributeWriteRequest(uuid="abc", name=AttributeName.BRIGHTNESS,
        ...                           current_value="2", default_value="2")
        ... )
        >>> body["name"]
        'brightness'
    """
    body: dict[str, Any] = {}
    if request.user_id is not None:
        body["userId"] = request.user_id

    body.update(
        {
            "uuid": request.uuid,
            "scope": request.scope,
            "name": request.name.value,
            "currentValue": request.current_value,
            "defaultValue": request.default_value,
        }
    )
    return body
