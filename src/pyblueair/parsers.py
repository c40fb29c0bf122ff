"""Parsing utilities for Blueair API responses.

This module provides shared parsing functions used by SessionManager and
BlueairClient to convert raw API responses into data models.
"""

from __future__ import annotations

import json
from typing import Any

from pyblueair.exceptions import InvalidResponseError
from pyblueair.models import Device


__all__ = [
    "decode_json_body",
    "parse_device",
    "parse_devices",
    "parse_endpoint",
    "parse_error_message",
]


def decode_json_body(data: Any) -> Any:
    """Return a decoded JSON body.

    The info endpoint sometimes answers with a JSON document served as plain
    text. Already-decoded bodies are returned unchanged.

    Args:
        data: Response body, either decoded or a JSON string.

    Returns:
        Decoded JSON value.

    Raises:
        InvalidResponseError: If a string body is not valid JSON.
    """
    if not isinstance(data, str | bytes):
        return data

    try:
        return json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        msg = "Invalid JSON response"
        raise InvalidResponseError(msg) from exc


def parse_endpoint(data: Any) -> str:
    """Parse the regional host name from a homehost response.

    Args:
        data: Response body, a bare JSON string such as "api-eu.blueair.io".

    Returns:
        Host name without quotes or surrounding whitespace.

    Raises:
        InvalidResponseError: If the body does not contain a host name.
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="replace")

    if not isinstance(data, str):
        msg = f"Unexpected homehost response: {data!r}"
        raise InvalidResponseError(msg)

    endpoint = data.strip().strip('"').strip()
    if not endpoint:
        msg = "Empty homehost response"
        raise InvalidResponseError(msg)

    return endpoint


def parse_device(data: dict[str, Any]) -> Device:
    """Parse a device record from the owner device listing.

    The record shape is not validated; absent keys become empty strings.

    Args:
        data: Raw device record in format:
              {"uuid": str, "userId": str, "mac": str, "name": str}

    Returns:
        Device instance keeping the raw record in raw_data.
    """
    return Device(
        uuid=str(data.get("uuid", "")),
        user_id=str(data.get("userId", "")),
        mac=str(data.get("mac", "")),
        name=str(data.get("name", "")),
        raw_data=data,
    )


def parse_devices(data: Any) -> list[Device]:
    """Parse the owner device listing.

    Args:
        data: Raw response body, expected to be a list of device records.

    Returns:
        List of Device instances.

    Raises:
        InvalidResponseError: If the body is not a list.
    """
    data = decode_json_body(data)
    if data is None:
        return []

    if not isinstance(data, list):
        msg = f"Expected a list of devices, got {type(data).__name__}"
        raise InvalidResponseError(msg)

    return [parse_device(item) for item in data if isinstance(item, dict)]


def parse_error_message(data: Any, default: str = "") -> str:
    """Extract a human-readable message from an error body.

    Args:
        data: Response body of a failed request.
        default: Message to use when the body carries none.

    Returns:
        The body's "message" field, the text body, or default.
    """
    if isinstance(data, dict):
        message = data.get("message")
        if message:
            return str(message)
    elif isinstance(data, str) and data.strip():
        return data.strip()
    return default
