# Standard library imports
from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass
class User:
    """
    Pure domain model for User entity.

    The id is assigned by the repository on insert when it is not supplied
    by the caller (PUT supplies it from the route).
    """
    id: Optional[UUID]
    login: str
    first_name: str
    last_name: str

    def __post_init__(self) -> None:
        """Business validations"""
        if self.id is not None and not isinstance(self.id, UUID):
            raise ValueError("User ID must be a UUID")
