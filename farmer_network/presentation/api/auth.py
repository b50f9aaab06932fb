"""
Auth API Router - registration, login and the current-user lookup.

Both register and login answer with the user and a bearer token.
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel
from farmer_network.application.commands.users import (
    LoginUserCommand,
    LoginUserHandler,
    RegisterUserCommand,
    RegisterUserHandler,
)
from farmer_network.application.queries.users import GetUserQuery, GetUserHandler
from farmer_network.application.dto import CamelModel, UserDTO
from farmer_network.domain.exceptions import (
    AuthenticationError,
    DomainValidationError,
    EntityNotFoundError,
)
from farmer_network.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class RegisterRequest(CamelModel):
    username: str
    password: str
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    farm_type: Optional[str] = None
    crops: list[str] = []


class LoginRequest(BaseModel):
    username: str
    password: str


class AuthResponse(BaseModel):
    user: UserDTO
    token: str


class UserResponse(BaseModel):
    user: UserDTO


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def register(
    request: RegisterRequest,
    handler: FromDishka[RegisterUserHandler],
):
    try:
        result = await handler.execute(
            RegisterUserCommand(
                username=request.username,
                password=request.password,
                full_name=request.full_name,
                avatar_url=request.avatar_url,
                farm_type=request.farm_type,
                crops=tuple(request.crops),
            )
        )
        return AuthResponse(user=UserDTO.from_entity(result.user), token=result.token)
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.post("/login", response_model=AuthResponse, status_code=status.HTTP_200_OK)
@inject
async def login(
    request: LoginRequest,
    handler: FromDishka[LoginUserHandler],
):
    try:
        result = await handler.execute(
            LoginUserCommand(username=request.username, password=request.password)
        )
        return AuthResponse(user=UserDTO.from_entity(result.user), token=result.token)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e)
        ) from e


@router.get("/me", response_model=UserResponse, status_code=status.HTTP_200_OK)
@inject
async def me(
    handler: FromDishka[GetUserHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """The account behind the bearer token."""
    try:
        user = await handler.execute(GetUserQuery(user_id=current_user.user_id))
        return UserResponse(user=UserDTO.from_entity(user))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
