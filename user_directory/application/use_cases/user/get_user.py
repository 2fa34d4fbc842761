# Standard library imports
from uuid import UUID

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse
from ...exceptions import UserNotFoundError
from ...mappers.user_mapper import user_to_response


class GetUserUseCase:
    """Use case for getting a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: UUID) -> UserResponse:
        """
        Get a user by ID
        
        Args:
            user_id: ID of the user
            
        Returns:
            UserResponse with user information
            
        Raises:
            UserNotFoundError: If no user has this ID
        """
        user = await self.user_repository.find_by_id(user_id)
        
        if user is None:
            raise UserNotFoundError(user_id)
        
        return user_to_response(user)
