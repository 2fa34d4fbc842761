from .user import (
    GetUserUseCase,
    CreateUserUseCase,
    UpsertUserUseCase,
    PatchUserUseCase,
    DeleteUserUseCase,
    ListUsersUseCase,
)

__all__ = [
    "GetUserUseCase",
    "CreateUserUseCase",
    "UpsertUserUseCase",
    "PatchUserUseCase",
    "DeleteUserUseCase",
    "ListUsersUseCase",
]
