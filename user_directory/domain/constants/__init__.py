"""Constants for domain model field names"""

from .user_fields import UserFields, UserErrorKeys

__all__ = [
    "UserFields",
    "UserErrorKeys",
]
