"""Constants for pyblueair library."""

from __future__ import annotations


# API Configuration
DEFAULT_DISCOVERY_URL = "https://api.blueair.io/v2/"
DEFAULT_SCHEME = "https"
DEFAULT_TIMEOUT = 30  # seconds

# Public key shipped with the vendor apps; override via constructor or environment
DEFAULT_API_KEY = (
    "eyJhbGciOiJIUzI1NiJ9.eyJncmFudGVlIjoiYmx1ZWFpciIsImlhdCI6MTQ1MzEyNTYzMiwidmFsaWRpdHkiOi0xLCJqdGkiOiJkNmY3OGE0Yi1i"
    "MWNkLTRkZDgtOTA2Yi1kN2JkNzM0MTQ2NzQiLCJwZXJtaXNzaW9ucyI6WyJhbGwiXSwicXVvdGEiOi0xLCJyYXRlTGltaXQiOi0xfQ."
    "CJsfWVzFKKDDA6rWdh-hjVVVE9S3d6Hu9BzXG9htWFw"
)
API_KEY_ENV_VAR = "BLUEAIR_API_KEY"

# Headers
HEADER_API_KEY = "X-API-KEY-TOKEN"
HEADER_AUTH_TOKEN = "X-AUTH-TOKEN"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"

# Retry Configuration
DEFAULT_RETRIES = 3
DEFAULT_RETRY_DELAY = 1.0  # seconds between attempts

# Attribute Writes
ATTRIBUTE_SCOPE = "device"
FAN_SPEED_VALUES = ("0", "1", "2", "3")
BRIGHTNESS_VALUES = ("0", "1", "2", "3", "4")
CHILD_LOCK_VALUES = ("0", "1")
FAN_MODE_VALUES = ("auto", "manual")

# Characters encodeURIComponent leaves untouched besides alphanumerics and -_.~
URL_SAFE_CHARS = "!~*'()"
