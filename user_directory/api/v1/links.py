"""
URL templates for the users resource.

Links are absolute: they start from the request's base URL (scheme, host
and any root path the app is mounted under).
"""

# Standard library imports
from typing import Any, Optional
from urllib.parse import urlencode
from uuid import UUID

# Local application imports
from ...application.dto.user_dto import PaginationMetadata
from ...domain.models.page import Page

USERS_ROUTE = "/api/users"


def users_link(base_url: str) -> str:
    return f"{base_url.rstrip('/')}{USERS_ROUTE}"


def user_link(base_url: str, user_id: UUID) -> str:
    """Absolute URL of GET /users/{user_id}"""
    return f"{users_link(base_url)}/{user_id}"


def users_page_link(base_url: str, page_number: int, page_size: int) -> str:
    """Absolute URL of GET /users for the given page"""
    query = urlencode({"pageNumber": page_number, "pageSize": page_size})
    return f"{users_link(base_url)}?{query}"


def build_pagination_metadata(base_url: str, page: Page[Any]) -> PaginationMetadata:
    """
    Navigation data for the X-Pagination header.

    The previous link is null on the first page; the next link always
    points at the following page, even past the last one.
    """
    previous_link: Optional[str] = None
    if page.has_previous:
        previous_link = users_page_link(base_url, page.current_page - 1, page.page_size)

    return PaginationMetadata(
        previous_page_link=previous_link,
        next_page_link=users_page_link(base_url, page.current_page + 1, page.page_size),
        total_count=page.total_count,
        page_size=page.page_size,
        current_page=page.current_page,
        total_pages=page.total_pages,
    )
