# Standard library imports
import logging
from typing import Any, Optional
from uuid import UUID

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...exceptions import ClientInputError, UserNotFoundError, UserValidationError
from ...mappers.user_mapper import request_to_user, user_to_patch_document
from ...services.user_patch_service import apply_user_patch
from ...validation.user_validator import validate_user_fields

logger = logging.getLogger(__name__)


class PatchUserUseCase:
    """
    Use case for applying a JSON-Patch document to a user.

    The patched user is always validated. It is written back only when
    persist_changes is set; otherwise the operation is validation-only.
    """
    
    def __init__(self, user_repository: UserRepository, persist_changes: bool = False) -> None:
        self.user_repository = user_repository
        self.persist_changes = persist_changes
    
    async def execute(self, user_id: UUID, operations: Optional[Any]) -> None:
        """
        Apply and validate a JSON-Patch document
        
        Args:
            user_id: ID of the user to patch
            operations: Parsed JSON-Patch array (None when the body was absent)
            
        Raises:
            ClientInputError: If the patch document is missing or not an array
            UserNotFoundError: If no user has this ID
            UserValidationError: If an operation fails or the result is invalid
        """
        if operations is None:
            raise ClientInputError("Patch document is required")
        if not isinstance(operations, list):
            raise ClientInputError("Patch document must be a JSON array")
        
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        
        patched, errors = apply_user_patch(user_to_patch_document(user), operations)
        for key, message in validate_user_fields(patched).items():
            errors.setdefault(key, message)
        
        if errors:
            logger.info(f"Rejected patch of user {user_id}: {errors}")
            raise UserValidationError(errors)
        
        if self.persist_changes:
            await self.user_repository.update_or_insert(request_to_user(patched, user_id=user_id))
            logger.info(f"Patched user {user_id}")
