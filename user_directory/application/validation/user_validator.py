"""
Field-level validation shared by create, upsert and partial update.

Returns a mapping of field name -> message; an empty mapping means valid.
"""

# Standard library imports
import re
from typing import Dict, Optional, Union

# Local application imports
from ...domain.constants import UserErrorKeys
from ..dto.user_dto import CreateUserRequest, UpdateUserRequest, PatchUserDto

LOGIN_PATTERN = re.compile(r"[A-Za-z0-9_]*")

LOGIN_REQUIRED_MESSAGE = "Login is required"
LOGIN_CHARSET_MESSAGE = "Login should contain only letters or digits"
FIRST_NAME_MISSING_MESSAGE = "FirstName is missing"
LAST_NAME_MISSING_MESSAGE = "LastName is missing"

UserDocument = Union[CreateUserRequest, UpdateUserRequest, PatchUserDto]


def is_valid_login(login: Optional[str]) -> bool:
    return bool(login) and LOGIN_PATTERN.fullmatch(login) is not None


def validate_user_fields(document: UserDocument) -> Dict[str, str]:
    """
    Check a user document against the login and name rules.

    Args:
        document: Any of the user request DTOs

    Returns:
        Dict of error key (Login, FirstName, LastName) to message
    """
    errors: Dict[str, str] = {}

    if not document.login:
        errors[UserErrorKeys.LOGIN] = LOGIN_REQUIRED_MESSAGE
    elif not is_valid_login(document.login):
        errors[UserErrorKeys.LOGIN] = LOGIN_CHARSET_MESSAGE

    if not document.first_name:
        errors[UserErrorKeys.FIRST_NAME] = FIRST_NAME_MISSING_MESSAGE

    if not document.last_name:
        errors[UserErrorKeys.LAST_NAME] = LAST_NAME_MISSING_MESSAGE

    return errors
