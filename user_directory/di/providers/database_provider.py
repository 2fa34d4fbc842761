from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import get_user_collection

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the database collections in the container.
        Repositories pick their collection up from here.
        """
        container.register_singleton("user_collection", get_user_collection())
