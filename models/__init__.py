"""SQLModel models package."""

from .property import MAX_PROPERTY_KEY_LENGTH, Property
from .user import User

__all__ = [
    "User",
    "Property",
    "MAX_PROPERTY_KEY_LENGTH",
]
