"""Argument validation for device attribute writes.

All checks here are pure: they never perform I/O and never look at the
session. They run before a command is handed to the retry executor so that
malformed requests fail immediately instead of being retried.

Validation order for every attribute:
1. uuid, current value and default value must all be present
2. numeric attributes must receive numeric-parsable values
3. both values must belong to the attribute's legal set
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pyblueair.const import BRIGHTNESS_VALUES, CHILD_LOCK_VALUES, FAN_MODE_VALUES, FAN_SPEED_VALUES
from pyblueair.exceptions import InvalidValueError, MissingArgumentsError, NonNumericValueError
from pyblueair.models import AttributeName


__all__ = [
    "ATTRIBUTE_RULES",
    "AttributeRule",
    "is_numeric",
    "require_arguments",
    "validate_attribute_write",
    "validate_brightness",
    "validate_child_lock",
    "validate_fan_mode",
    "validate_fan_speed",
]


@dataclass(frozen=True)
class AttributeRule:
    """Legal values and wire details for one writable attribute.

    Attributes:
        name: Attribute name sent in the request body.
        label: Human-readable name used in error messages.
        path: URL segment of the attribute endpoint.
        legal_values: Accepted values for current and default value.
        numeric_message: Message for non-numeric values, None to skip the numeric check.
        invalid_message: Message for values outside legal_values.
    """

    name: AttributeName
    label: str
    path: str
    legal_values: tuple[str, ...]
    numeric_message: str | None
    invalid_message: str


_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_PREFIXED_INT_RE = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")
_INFINITY_RE = re.compile(r"[+-]?Infinity")

ATTRIBUTE_RULES: dict[AttributeName, AttributeRule] = {
    AttributeName.FAN_SPEED: AttributeRule(
        name=AttributeName.FAN_SPEED,
        label="fan speed",
        path="fanspeed",
        legal_values=FAN_SPEED_VALUES,
        numeric_message="Fan speed value must be numeric.",
        invalid_message="Invalid fan speed value. Acceptable values are 0, 1, 2, or 3.",
    ),
    # Mode shares the fanspeed endpoint with fan_speed
    AttributeName.MODE: AttributeRule(
        name=AttributeName.MODE,
        label="fan mode",
        path="fanspeed",
        legal_values=FAN_MODE_VALUES,
        numeric_message=None,
        invalid_message="Invalid fan speed value. Acceptable values are manual or auto",
    ),
    AttributeName.BRIGHTNESS: AttributeRule(
        name=AttributeName.BRIGHTNESS,
        label="brightness",
        path="brightness",
        legal_values=BRIGHTNESS_VALUES,
        numeric_message="Brightness value must be numeric.",
        invalid_message="Invalid brightness value. Acceptable values are 0, 1, 2, 3 or 4.",
    ),
    AttributeName.CHILD_LOCK: AttributeRule(
        name=AttributeName.CHILD_LOCK,
        label="child lock",
        path="childlock",
        legal_values=CHILD_LOCK_VALUES,
        numeric_message="Child lock values must be numeric.",
        invalid_message="Invalid child lock value. Acceptable values are 0 (unlocked) or 1 (locked).",
    ),
}


def is_numeric(value: str) -> bool:
    """Check whether a string parses as a number the way the Blueair apps read it.

    Follows JavaScript number conversion: surrounding whitespace is ignored,
    a blank string reads as 0, unsigned 0x/0o/0b integer literals and the
    ``Infinity`` spelling are accepted. Digit separators (``1_0``) and the
    ``inf``/``nan`` spellings are not numbers.

    Args:
        value: Raw string value.

    Returns:
        True if the value can be read as a number.
    """
    if not isinstance(value, str):
        return False

    text = value.strip()
    if not text:
        return True
    return bool(_DECIMAL_RE.fullmatch(text) or _PREFIXED_INT_RE.fullmatch(text) or _INFINITY_RE.fullmatch(text))


def require_arguments(**arguments: str | None) -> None:
    """Raise if any keyword argument is empty or absent.

    Raises:
        MissingArgumentsError: Naming the first missing argument.
    """
    for parameter_name, value in arguments.items():
        if not value:
            raise MissingArgumentsError(parameter_name=parameter_name)


def validate_attribute_write(
    name: AttributeName,
    uuid: str,
    current_value: str,
    default_value: str,
) -> AttributeRule:
    """Validate the arguments of an attribute write.

    Args:
        name: Attribute being written.
        uuid: Target device identifier.
        current_value: New current value.
        default_value: New default value.

    Returns:
        The rule that was applied, for building the request.

    Raises:
        MissingArgumentsError: If uuid or either value is empty.
        NonNumericValueError: If a numeric attribute receives a non-numeric value.
        InvalidValueError: If either value is outside the legal set.
    """
    rule = ATTRIBUTE_RULES[name]

    require_arguments(uuid=uuid, current_value=current_value, default_value=default_value)

    if rule.numeric_message is not None:
        for parameter_name, value in (("current_value", current_value), ("default_value", default_value)):
            if not is_numeric(value):
                raise NonNumericValueError(rule.numeric_message, parameter_name=parameter_name, value=value)

    for parameter_name, value in (("current_value", current_value), ("default_value", default_value)):
        if value not in rule.legal_values:
            raise InvalidValueError(
                rule.invalid_message,
                parameter_name=parameter_name,
                value=value,
                legal_values=rule.legal_values,
            )

    return rule


def validate_fan_speed(uuid: str, current_value: str, default_value: str) -> AttributeRule:
    """Validate a fan speed write (0-3)."""
    return validate_attribute_write(AttributeName.FAN_SPEED, uuid, current_value, default_value)


def validate_fan_mode(uuid: str, current_value: str, default_value: str) -> AttributeRule:
    """Validate a fan mode write ("auto" or "manual")."""
    return validate_attribute_write(AttributeName.MODE, uuid, current_value, default_value)


def validate_brightness(uuid: str, current_value: str, default_value: str) -> AttributeRule:
    """Validate a brightness write (0-4)."""
    return validate_attribute_write(AttributeName.BRIGHTNESS, uuid, current_value, default_value)


def validate_child_lock(uuid: str, current_value: str, default_value: str) -> AttributeRule:
    """Validate a child lock write (0 unlocked, 1 locked)."""
    return validate_attribute_write(AttributeName.CHILD_LOCK, uuid, current_value, default_value)
