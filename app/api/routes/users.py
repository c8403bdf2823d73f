"""
User registration and profile endpoints
"""

from fastapi import APIRouter, Depends, Response, status

from app.api.dependencies import ensure_self_or_admin, get_current_user
from app.domains.ecommerce.api.dependencies import get_user_service
from app.domains.ecommerce.api.schemas import (
    AccountResponse,
    AccountUpdateRequest,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)
from app.domains.ecommerce.application.dto import CreateUserRequest, UpdateAccountRequest, UpdateUserRequest
from app.domains.ecommerce.application.services import UserService
from app.models.db import User

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: UserCreateRequest,
    service: UserService = Depends(get_user_service),  # noqa: B008
):
    """Register a new user (public)."""
    return await service.create_user(CreateUserRequest(**request.model_dump()))


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    ensure_self_or_admin(current_user, user_id, "get_user")
    return await service.get_user(user_id)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    request: UserUpdateRequest,
    service: UserService = Depends(get_user_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    ensure_self_or_admin(current_user, user_id, "update_user")
    return await service.update_user(user_id, UpdateUserRequest(**request.model_dump()))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    """Delete a user. Users that own a shop or have orders are kept."""
    ensure_self_or_admin(current_user, user_id, "delete_user")
    await service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}/account", response_model=AccountResponse)
async def get_account(
    user_id: int,
    service: UserService = Depends(get_user_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    ensure_self_or_admin(current_user, user_id, "get_account")
    return await service.get_account(user_id)


@router.put("/{user_id}/account", response_model=AccountResponse)
async def update_account(
    user_id: int,
    request: AccountUpdateRequest,
    service: UserService = Depends(get_user_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    """Partially update profile preferences; omitted fields are left unchanged."""
    ensure_self_or_admin(current_user, user_id, "update_account")
    return await service.update_account(user_id, UpdateAccountRequest(**request.model_dump()))
