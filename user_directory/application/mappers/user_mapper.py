# Standard library imports
from typing import Optional, Union
from uuid import UUID

# Local application imports
from ...domain.models.user import User
from ..dto.user_dto import UserResponse, CreateUserRequest, UpdateUserRequest, PatchUserDto


def user_to_response(user: User) -> UserResponse:
    """Map a stored user to its response DTO"""
    if user.id is None:
        raise ValueError("Cannot map a user without an ID")
    return UserResponse(
        id=user.id,
        login=user.login,
        first_name=user.first_name,
        last_name=user.last_name,
    )


def user_to_patch_document(user: User) -> PatchUserDto:
    """Project a stored user onto the document a JSON-Patch applies to"""
    return PatchUserDto(
        login=user.login,
        first_name=user.first_name,
        last_name=user.last_name,
    )


def request_to_user(
    request: Union[CreateUserRequest, UpdateUserRequest, PatchUserDto],
    user_id: Optional[UUID] = None,
) -> User:
    """
    Build a domain user from a validated request DTO

    Args:
        request: Request DTO (already validated)
        user_id: Caller-supplied ID, or None to let the repository assign one

    Returns:
        User domain model
    """
    return User(
        id=user_id,
        login=request.login or "",
        first_name=request.first_name or "",
        last_name=request.last_name or "",
    )
