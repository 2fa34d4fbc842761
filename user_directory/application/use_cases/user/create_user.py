# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import CreateUserRequest, UserResponse
from ...exceptions import ClientInputError, UserValidationError
from ...mappers.user_mapper import request_to_user, user_to_response
from ...validation.user_validator import validate_user_fields

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a user with a server-assigned ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: Optional[CreateUserRequest]) -> UserResponse:
        """
        Create a new user
        
        Args:
            request: User creation request (None when the body was absent)
            
        Returns:
            UserResponse for the stored user, including its new ID
            
        Raises:
            ClientInputError: If the request body is missing
            UserValidationError: If any field is invalid
        """
        if request is None:
            raise ClientInputError("User body is required")
        
        errors = validate_user_fields(request)
        if errors:
            logger.info(f"Rejected user creation for login {request.login!r}: {errors}")
            raise UserValidationError(errors)
        
        saved_user = await self.user_repository.insert(request_to_user(request))
        
        logger.info(f"Created user {saved_user.id} with login {saved_user.login}")
        return user_to_response(saved_user)
