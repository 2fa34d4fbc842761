"""
Exceptions raised by the user use cases.

Each one maps onto a single HTTP outcome; the API layer registers a handler
per class (see api/v1/error_handlers.py).
"""

# Standard library imports
from typing import Dict, Optional


class UserDirectoryError(Exception):
    """Base exception for user directory errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ClientInputError(UserDirectoryError):
    """Raised when the request is missing its body or carries an unusable ID (400)."""
    pass


class UserNotFoundError(UserDirectoryError):
    """Raised when no user exists for the requested ID (404)."""

    def __init__(self, user_id: object) -> None:
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class UserValidationError(UserDirectoryError):
    """Raised with a field -> message map when a user document is invalid (422)."""

    def __init__(self, errors: Optional[Dict[str, str]] = None) -> None:
        self.errors: Dict[str, str] = dict(errors or {})
        super().__init__(
            "Invalid user: " + ", ".join(f"{key}: {value}" for key, value in self.errors.items())
        )
