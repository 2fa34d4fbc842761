# Standard library imports
import logging
from uuid import UUID

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...exceptions import UserNotFoundError

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: UUID) -> None:
        """
        Delete a user
        
        Raises:
            UserNotFoundError: If no user has this ID
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        
        await self.user_repository.delete(user_id)
        logger.info(f"Deleted user {user_id}")
