from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from ..models.user import User
from ..models.page import Page


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def insert(self, user: User) -> User:
        """Insert a new user, assigning a fresh ID, and return it"""
        pass
    
    @abstractmethod
    async def update_or_insert(self, user: User) -> bool:
        """Replace the user with the same ID or insert it. Returns True when inserted"""
        pass
    
    @abstractmethod
    async def delete(self, user_id: UUID) -> None:
        """Delete user by ID"""
        pass
    
    @abstractmethod
    async def get_page(self, page_number: int, page_size: int) -> Page[User]:
        """Get one page of users ordered by login"""
        pass
