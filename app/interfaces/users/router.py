"""
FastAPI router for the users bounded context.

All routes delegate to the UserService. No business logic here.
Input validation is handled by Pydantic schemas before a handler runs.
Error mapping is handled by centralized error handlers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status

from app.application.users.dtos import (
    CreateUserCommand,
    ListUsersQuery,
    UpdateUserCommand,
)
from app.application.users.user_service import UserService
from app.interfaces.users.dependencies import get_user_service
from app.interfaces.users.schemas import (
    CreateUserRequest,
    ErrorResponse,
    PaginationMetaResponse,
    UpdateUserRequest,
    UserEnvelope,
    UserListResponse,
    UserResponse,
)
from app.shared.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT

router = APIRouter(prefix="/users", tags=["users"])

UserId = Annotated[str, Path(min_length=1, description="User id")]
Service = Annotated[UserService, Depends(get_user_service)]


@router.get(
    "",
    response_model=UserListResponse,
    responses={422: {"model": ErrorResponse}},
    summary="List users",
    description="Return users in insertion order, one page at a time.",
)
def list_users(
    service: Service,
    page: Annotated[int, Query(gt=0, description="1-based page number")] = DEFAULT_PAGE,
    limit: Annotated[
        int, Query(gt=0, le=MAX_LIMIT, description="Page size (max 100)")
    ] = DEFAULT_LIMIT,
) -> UserListResponse:
    """List users with offset/limit pagination."""
    result = service.list_users(ListUsersQuery(page=page, limit=limit))
    return UserListResponse(
        data=[UserResponse.from_entity(u) for u in result.data],
        meta=PaginationMetaResponse.from_meta(result.meta),
    )


@router.get(
    "/{user_id}",
    response_model=UserEnvelope,
    responses={404: {"model": ErrorResponse}},
    summary="Get a user",
)
def get_user(user_id: UserId, service: Service) -> UserEnvelope:
    """Fetch a single user by id."""
    user = service.get_user_by_id(user_id)
    return UserEnvelope(data=UserResponse.from_entity(user))


@router.post(
    "",
    response_model=UserEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Create a user",
    description="Create a user. The email must not already be in use.",
)
def create_user(request: CreateUserRequest, service: Service) -> UserEnvelope:
    """Create a user from a validated body."""
    command = CreateUserCommand(name=request.name, email=request.email, role=request.role)
    user = service.create_user(command)
    return UserEnvelope(data=UserResponse.from_entity(user))


@router.patch(
    "/{user_id}",
    response_model=UserEnvelope,
    responses={
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
    summary="Update a user",
    description="Change any non-empty subset of name, email and role.",
)
def update_user(
    user_id: UserId, request: UpdateUserRequest, service: Service
) -> UserEnvelope:
    """Apply a partial update to a user."""
    command = UpdateUserCommand(name=request.name, email=request.email, role=request.role)
    user = service.update_user(user_id, command)
    return UserEnvelope(data=UserResponse.from_entity(user))


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
    summary="Delete a user",
)
def delete_user(user_id: UserId, service: Service) -> Response:
    """Delete a user. Responds with an empty body."""
    service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
