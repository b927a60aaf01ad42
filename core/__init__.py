"""Core configuration and security helpers."""

from .config import Settings, settings
from .logging import configure_logging
from .security import ACCESS_TOKEN_TYPE, create_access_token, decode_token

__all__ = [
    "Settings",
    "settings",
    "configure_logging",
    "ACCESS_TOKEN_TYPE",
    "create_access_token",
    "decode_token",
]
