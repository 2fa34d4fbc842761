from .get_user import GetUserUseCase
from .create_user import CreateUserUseCase
from .upsert_user import UpsertUserUseCase
from .patch_user import PatchUserUseCase
from .delete_user import DeleteUserUseCase
from .list_users import ListUsersUseCase

__all__ = [
    "GetUserUseCase",
    "CreateUserUseCase",
    "UpsertUserUseCase",
    "PatchUserUseCase",
    "DeleteUserUseCase",
    "ListUsersUseCase",
]
