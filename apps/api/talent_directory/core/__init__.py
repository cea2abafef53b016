"""Core configuration, auth, and shared infrastructure."""

from talent_directory.core.config import Settings, get_settings
from talent_directory.core.auth import create_access_token, decode_access_token
from talent_directory.core.limiter import limiter

__all__ = [
    "Settings",
    "get_settings",
    "create_access_token",
    "decode_access_token",
    "limiter",
]
