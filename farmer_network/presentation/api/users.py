"""
Users API Router - profiles and the follow graph.
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel
from farmer_network.application.commands.users import (
    FollowUserCommand,
    FollowUserHandler,
    UnfollowUserCommand,
    UnfollowUserHandler,
    UpdateProfileCommand,
    UpdateProfileHandler,
)
from farmer_network.application.queries.users import (
    GetUserQuery,
    GetUserHandler,
    ListUsersQuery,
    ListUsersHandler,
)
from farmer_network.application.dto import CamelModel, UserDTO
from farmer_network.domain.exceptions import DomainValidationError, EntityNotFoundError
from farmer_network.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


class UpdateProfileRequest(CamelModel):
    """Only fields that are present are changed."""

    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    farm_type: Optional[str] = None
    crops: Optional[list[str]] = None


class UserResponse(BaseModel):
    user: UserDTO


class ListUsersResponse(BaseModel):
    users: list[UserDTO]


router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=ListUsersResponse, status_code=status.HTTP_200_OK)
@inject
async def list_users(handler: FromDishka[ListUsersHandler]):
    """All users, newest first."""
    users = await handler.execute(ListUsersQuery())
    return ListUsersResponse(users=[UserDTO.from_entity(u) for u in users])


@router.patch("/me", response_model=UserResponse, status_code=status.HTTP_200_OK)
@inject
async def update_profile(
    request: UpdateProfileRequest,
    handler: FromDishka[UpdateProfileHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        user = await handler.execute(
            UpdateProfileCommand(
                user_id=current_user.user_id,
                full_name=request.full_name,
                avatar_url=request.avatar_url,
                farm_type=request.farm_type,
                crops=tuple(request.crops) if request.crops is not None else None,
            )
        )
        return UserResponse(user=UserDTO.from_entity(user))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("/{username}", response_model=UserResponse, status_code=status.HTTP_200_OK)
@inject
async def get_user(username: str, handler: FromDishka[GetUserHandler]):
    try:
        user = await handler.execute(GetUserQuery(username=username))
        return UserResponse(user=UserDTO.from_entity(user))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post(
    "/{username}/follow",
    response_model=UserResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def follow_user(
    username: str,
    handler: FromDishka[FollowUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Follow `username`. Returns the caller with the updated following list."""
    try:
        user = await handler.execute(
            FollowUserCommand(follower=current_user.username, target=username)
        )
        return UserResponse(user=UserDTO.from_entity(user))
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete(
    "/{username}/follow",
    response_model=UserResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def unfollow_user(
    username: str,
    handler: FromDishka[UnfollowUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        user = await handler.execute(
            UnfollowUserCommand(follower=current_user.username, target=username)
        )
        return UserResponse(user=UserDTO.from_entity(user))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
