"""Business logic services."""

from .properties import save_property, select_properties, select_user_properties

__all__ = [
    "select_properties",
    "select_user_properties",
    "save_property",
]
