"""
Users API: get, create, upsert, patch, delete, paginated list and options.
"""

# Standard library imports
import logging
from typing import Any, Optional
from uuid import UUID

# External package imports
from fastapi import APIRouter, Body, Query, Request, status
from fastapi.responses import Response

# Local application imports
from ...application.dto.user_dto import CreateUserRequest, UpdateUserRequest
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...application.use_cases.user.upsert_user import UpsertUserUseCase
from ...application.use_cases.user.patch_user import PatchUserUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...di.container import get_container
from .links import build_pagination_metadata, user_link
from .negotiation import render

logger = logging.getLogger(__name__)
router = APIRouter(tags=["users"])

ALLOWED_METHODS = "POST,GET,OPTIONS"


@router.api_route("/{user_id}", methods=["GET", "HEAD"], response_model=None)
async def get_user_by_id(user_id: UUID, http_request: Request) -> Response:
    """
    Get a user by ID. HEAD returns the same status and headers without a body.
    
    Args:
        user_id: ID of the user
        
    Returns:
        200 with the user, or 404 with an empty body
    """
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)
    
    user = await get_user_use_case.execute(user_id)
    response = render(http_request, user)
    
    if http_request.method == "HEAD":
        return Response(status_code=response.status_code, headers=dict(response.headers))
    return response


@router.post("", status_code=status.HTTP_201_CREATED, response_model=None)
async def create_user(
    http_request: Request,
    user: Optional[CreateUserRequest] = Body(None),
) -> Response:
    """
    Create a user with a server-assigned ID
    
    Returns:
        201 with a Location header and the new ID as body
    """
    container = get_container()
    create_user_use_case = container.get(CreateUserUseCase)
    
    created = await create_user_use_case.execute(user)
    return render(
        http_request,
        created.id,
        status_code=status.HTTP_201_CREATED,
        headers={"Location": user_link(str(http_request.base_url), created.id)},
    )


@router.put("/{user_id}", response_model=None)
async def upsert_user(
    user_id: UUID,
    http_request: Request,
    user: Optional[UpdateUserRequest] = Body(None),
) -> Response:
    """
    Replace a user, or create it under the given ID
    
    Returns:
        201 with Location and ID when created, 204 when updated
    """
    container = get_container()
    upsert_user_use_case = container.get(UpsertUserUseCase)
    
    stored, inserted = await upsert_user_use_case.execute(user_id, user)
    if inserted:
        return render(
            http_request,
            stored.id,
            status_code=status.HTTP_201_CREATED,
            headers={"Location": user_link(str(http_request.base_url), stored.id)},
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_model=None)
async def partially_update_user(
    user_id: UUID,
    operations: Optional[Any] = Body(None),
) -> Response:
    """
    Apply a JSON-Patch document (application/json-patch+json) to a user
    
    Returns:
        204 when every operation applied and the result is valid
    """
    container = get_container()
    patch_user_use_case = container.get(PatchUserUseCase)
    
    await patch_user_use_case.execute(user_id, operations)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_model=None)
async def delete_user(user_id: UUID) -> Response:
    """Delete a user by ID"""
    container = get_container()
    delete_user_use_case = container.get(DeleteUserUseCase)
    
    await delete_user_use_case.execute(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=None)
async def get_users(
    http_request: Request,
    page_number: Optional[int] = Query(None, alias="pageNumber"),
    page_size: Optional[int] = Query(None, alias="pageSize"),
) -> Response:
    """
    List users one page at a time.
    - pageNumber below 1 or absent means 1
    - pageSize absent means 10, otherwise clamped to [1, 20]
    Navigation links and counts go in the X-Pagination header.
    """
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)
    
    page = await list_users_use_case.execute(page_number=page_number, page_size=page_size)
    metadata = build_pagination_metadata(str(http_request.base_url), page)
    
    return render(
        http_request,
        page.items,
        headers={"X-Pagination": metadata.model_dump_json(by_alias=True)},
    )


@router.options("", response_model=None)
async def get_options() -> Response:
    """Advertise the methods supported on the collection"""
    return Response(status_code=status.HTTP_200_OK, headers={"Allow": ALLOWED_METHODS})
