from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Wire format uses camelCase keys (firstName); Python code uses snake_case"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserResponse(_CamelModel):
    """DTO for user response"""
    id: UUID
    login: str
    first_name: str
    last_name: str


class CreateUserRequest(_CamelModel):
    """DTO for POST /users (ID is assigned by the server)"""
    login: Optional[str] = None
    first_name: Optional[str] = "John"
    last_name: Optional[str] = "Doe"


class UpdateUserRequest(_CamelModel):
    """DTO for PUT /users/{id} (ID comes from the route)"""
    login: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class PatchUserDto(_CamelModel):
    """Document a JSON-Patch is applied to"""
    login: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class PaginationMetadata(_CamelModel):
    """Serialized into the X-Pagination response header"""
    previous_page_link: Optional[str] = None
    next_page_link: Optional[str] = None
    total_count: int
    page_size: int
    current_page: int
    total_pages: int
