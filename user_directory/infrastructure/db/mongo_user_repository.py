# Standard library imports
import logging
import uuid
from typing import Any, Dict, List, Optional
from uuid import UUID

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.models.page import Page
from ...domain.constants import UserFields
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """
    MongoDB implementation of UserRepository.

    User IDs are stored as canonical UUID strings in _id.
    """
    
    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
    
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Find user by ID
        
        Args:
            user_id: User ID to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        if user_id is None:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: str(user_id)})
        except PyMongoError as e:
            logger.error(f"Error finding user {user_id}: {e}", exc_info=True)
            raise RuntimeError(f"Error finding user by ID: {str(e)}") from e
        
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def insert(self, user: User) -> User:
        """
        Insert a new user under a freshly generated ID
        
        Args:
            user: User domain model (its ID is ignored)
            
        Returns:
            Stored User domain model with ID set
        """
        if not user:
            raise ValueError("User cannot be None")
        
        new_user = User(
            id=uuid.uuid4(),
            login=user.login,
            first_name=user.first_name,
            last_name=user.last_name,
        )
        
        try:
            await self.user_collection.insert_one(self._user_to_dict(new_user))
        except PyMongoError as e:
            logger.error(f"Error inserting user {new_user.login}: {e}", exc_info=True)
            raise RuntimeError(f"Error inserting user: {str(e)}") from e
        
        return new_user
    
    async def update_or_insert(self, user: User) -> bool:
        """
        Replace the stored user with the same ID, inserting it if absent
        
        Args:
            user: User domain model with ID set
            
        Returns:
            True if the user was inserted, False if an existing one was replaced
        """
        if not user or user.id is None:
            raise ValueError("User with an ID is required")
        
        try:
            result = await self.user_collection.replace_one(
                {UserFields.MONGO_ID: str(user.id)},
                self._user_to_dict(user),
                upsert=True,
            )
        except PyMongoError as e:
            logger.error(f"Error upserting user {user.id}: {e}", exc_info=True)
            raise RuntimeError(f"Error saving user: {str(e)}") from e
        
        return result.upserted_id is not None
    
    async def delete(self, user_id: UUID) -> None:
        """Delete user by ID"""
        try:
            await self.user_collection.delete_one({UserFields.MONGO_ID: str(user_id)})
        except PyMongoError as e:
            logger.error(f"Error deleting user {user_id}: {e}", exc_info=True)
            raise RuntimeError(f"Error deleting user: {str(e)}") from e
    
    async def get_page(self, page_number: int, page_size: int) -> Page[User]:
        """
        Get one page of users ordered by login, then ID
        
        Args:
            page_number: 1-based page number
            page_size: Number of users per page
            
        Returns:
            Page with the users and the total count
        """
        page_number = max(1, int(page_number))
        page_size = max(1, int(page_size))
        
        try:
            total = await self.user_collection.count_documents({})
            cursor = (
                self.user_collection.find({})
                .sort([(UserFields.LOGIN, ASCENDING), (UserFields.MONGO_ID, ASCENDING)])
                .skip((page_number - 1) * page_size)
                .limit(page_size)
            )
            
            items: List[User] = []
            async for document in cursor:
                items.append(self._document_to_user(document))
        except PyMongoError as e:
            logger.error(f"Error listing users page {page_number}: {e}", exc_info=True)
            raise RuntimeError(f"Error listing users: {str(e)}") from e
        
        return Page(items=items, total_count=total, current_page=page_number, page_size=page_size)
    
    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        return User(
            id=UUID(str(document[UserFields.MONGO_ID])),
            login=document.get(UserFields.LOGIN, ""),
            first_name=document.get(UserFields.FIRST_NAME, ""),
            last_name=document.get(UserFields.LAST_NAME, ""),
        )
    
    def _user_to_dict(self, user: User) -> Dict[str, Any]:
        """
        Convert User domain model to MongoDB document
        
        Args:
            user: User domain model with ID set
            
        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.MONGO_ID: str(user.id),
            UserFields.LOGIN: user.login,
            UserFields.FIRST_NAME: user.first_name,
            UserFields.LAST_NAME: user.last_name,
        }
