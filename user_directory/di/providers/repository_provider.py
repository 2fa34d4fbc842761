from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.in_memory_user_repository import InMemoryUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the UserRepository implementation selected by
        USER_REPOSITORY_BACKEND ("mongo" or "memory").
        """
        backend = container.get(Settings).user_repository_backend
        
        if backend == "memory":
            container.register_singleton(UserRepository, InMemoryUserRepository())
        elif backend == "mongo":
            container.register_singleton(
                UserRepository,
                MongoUserRepository(user_collection=container.get("user_collection"))
            )
        else:
            raise ValueError(f"Unknown user repository backend: {backend}")
