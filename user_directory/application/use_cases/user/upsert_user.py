# Standard library imports
import logging
from typing import Optional, Tuple
from uuid import UUID

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UpdateUserRequest, UserResponse
from ...exceptions import ClientInputError, UserValidationError
from ...mappers.user_mapper import request_to_user, user_to_response
from ...validation.user_validator import validate_user_fields

logger = logging.getLogger(__name__)

NIL_UUID = UUID(int=0)


class UpsertUserUseCase:
    """Use case for replacing a user by ID, or creating it under that ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(
        self,
        user_id: UUID,
        request: Optional[UpdateUserRequest],
    ) -> Tuple[UserResponse, bool]:
        """
        Update or insert a user under a caller-supplied ID
        
        Args:
            user_id: ID from the route
            request: Replacement user fields (None when the body was absent)
            
        Returns:
            Tuple of (stored user, True if it was newly created)
            
        Raises:
            ClientInputError: If the ID is the nil UUID or the body is missing
            UserValidationError: If any field is invalid
        """
        if user_id == NIL_UUID or request is None:
            raise ClientInputError("A non-empty user ID and a user body are required")
        
        errors = validate_user_fields(request)
        if errors:
            logger.info(f"Rejected upsert of user {user_id}: {errors}")
            raise UserValidationError(errors)
        
        user = request_to_user(request, user_id=user_id)
        inserted = await self.user_repository.update_or_insert(user)
        
        logger.info(f"{'Inserted' if inserted else 'Updated'} user {user_id}")
        return user_to_response(user), inserted
