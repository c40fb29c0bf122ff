"""Data models for Blueair API requests and responses."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pyblueair.const import ATTRIBUTE_SCOPE


__all__ = [
    "AttributeName",
    "AttributeWriteRequest",
    "BlueairSession",
    "Credentials",
    "Device",
]


class AttributeName(Enum):
    """Device attributes the client can write."""

    FAN_SPEED = "fan_speed"
    MODE = "mode"
    BRIGHTNESS = "brightness"
    CHILD_LOCK = "child_lock"


@dataclass(frozen=True)
class Credentials:
    """Account credentials.

    Attributes:
        username: User's email address.
        password: User's password.
    """

    username: str
    password: str = field(repr=False)
    basic_auth: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Derive the Basic-auth blob once."""
        encoded = base64.b64encode(f"{self.username}:{self.password}".encode()).decode("ascii")
        object.__setattr__(self, "basic_auth", encoded)


@dataclass(frozen=True)
class BlueairSession:
    """Snapshot of the authenticated session.

    Attributes:
        endpoint: Regional host the account is pinned to (None until discovered).
        token: Session token issued at login (None until logged in).
    """

    endpoint: str | None = None
    token: str | None = field(default=None, repr=False)

    @property
    def is_ready(self) -> bool:
        """Check if both endpoint and token are present."""
        return bool(self.endpoint) and bool(self.token)


@dataclass(frozen=True)
class Device:
    """Device record returned by the owner device listing.

    Attributes:
        uuid: Unique device identifier.
        user_id: Owning user identifier.
        mac: Device MAC address.
        name: Human-readable device name.
        raw_data: Unmodified API record.
    """

    uuid: str
    user_id: str
    mac: str
    name: str
    raw_data: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True)
class AttributeWriteRequest:
    """Request body for a device attribute write.

    Attributes:
        uuid: Target device identifier.
        name: Attribute being written.
        current_value: New current value.
        default_value: New default value.
        user_id: Optional user identifier.
        scope: Write target classification, always "device".
    """

    uuid: str
    name: AttributeName
    current_value: str
    default_value: str
    user_id: int | None = None
    scope: str = ATTRIBUTE_SCOPE
