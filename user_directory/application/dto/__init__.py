from .user_dto import (
    UserResponse,
    CreateUserRequest,
    UpdateUserRequest,
    PatchUserDto,
    PaginationMetadata,
)

__all__ = [
    "UserResponse",
    "CreateUserRequest",
    "UpdateUserRequest",
    "PatchUserDto",
    "PaginationMetadata",
]
