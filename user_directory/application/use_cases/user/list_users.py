# Standard library imports
from typing import Optional

# Local application imports
from ....domain.models.page import Page
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse
from ...mappers.user_mapper import user_to_response

DEFAULT_PAGE_SIZE = 10
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 20


def normalize_page_number(page_number: Optional[int]) -> int:
    """Absent or non-positive page numbers mean the first page"""
    if page_number is None or page_number < 1:
        return 1
    return page_number


def normalize_page_size(page_size: Optional[int]) -> int:
    """Absent means the default size; anything else is clamped to [1, 20]"""
    if page_size is None:
        return DEFAULT_PAGE_SIZE
    return max(MIN_PAGE_SIZE, min(MAX_PAGE_SIZE, page_size))


class ListUsersUseCase:
    """Use case for listing users one page at a time"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(
        self,
        page_number: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> Page[UserResponse]:
        """
        List one page of users
        
        Args:
            page_number: Requested page (1-based); normalized before use
            page_size: Requested page size; normalized before use
            
        Returns:
            Page of UserResponse with the normalized page number and size
        """
        number = normalize_page_number(page_number)
        size = normalize_page_size(page_size)
        
        page = await self.user_repository.get_page(number, size)
        
        return Page(
            items=[user_to_response(user) for user in page.items],
            total_count=page.total_count,
            current_page=number,
            page_size=size,
        )
