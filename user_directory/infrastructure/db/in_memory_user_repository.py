# Standard library imports
import asyncio
import uuid
from dataclasses import replace
from typing import Dict, Optional
from uuid import UUID

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.models.page import Page


class InMemoryUserRepository(UserRepository):
    """
    Dict-backed UserRepository for local runs and tests.

    Stored entities are copied on the way in and out so callers never hold
    a reference into the store.
    """

    def __init__(self) -> None:
        self._users: Dict[UUID, User] = {}
        self._lock = asyncio.Lock()

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        async with self._lock:
            user = self._users.get(user_id)
            return replace(user) if user is not None else None

    async def insert(self, user: User) -> User:
        if not user:
            raise ValueError("User cannot be None")
        async with self._lock:
            new_id = uuid.uuid4()
            while new_id in self._users:
                new_id = uuid.uuid4()
            stored = replace(user, id=new_id)
            self._users[new_id] = stored
            return replace(stored)

    async def update_or_insert(self, user: User) -> bool:
        if not user or user.id is None:
            raise ValueError("User with an ID is required")
        async with self._lock:
            inserted = user.id not in self._users
            self._users[user.id] = replace(user)
            return inserted

    async def delete(self, user_id: UUID) -> None:
        async with self._lock:
            self._users.pop(user_id, None)

    async def get_page(self, page_number: int, page_size: int) -> Page[User]:
        page_number = max(1, int(page_number))
        page_size = max(1, int(page_size))
        async with self._lock:
            ordered = sorted(self._users.values(), key=lambda u: (u.login, str(u.id)))
            start = (page_number - 1) * page_size
            items = [replace(user) for user in ordered[start:start + page_size]]
            return Page(
                items=items,
                total_count=len(ordered),
                current_page=page_number,
                page_size=page_size,
            )
