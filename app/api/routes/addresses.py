"""
Saved address endpoints
"""

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.dependencies import ensure_self_or_admin, get_current_user, is_admin, require_roles
from app.core.domain import AuthorizationException
from app.domains.ecommerce.api.dependencies import get_address_service
from app.domains.ecommerce.api.schemas import (
    AddressCreateRequest,
    AddressResponse,
    AddressUpdateRequest,
    ExistsResponse,
)
from app.domains.ecommerce.application.dto import AddressRequest
from app.domains.ecommerce.application.services import AddressService
from app.domains.ecommerce.domain.value_objects import RoleName
from app.models.db import User

router = APIRouter(prefix="/addresses", tags=["addresses"])


@router.get(
    "",
    response_model=list[AddressResponse],
    dependencies=[Depends(require_roles(RoleName.ADMIN.value))],
)
async def get_all_addresses(
    country: str | None = Query(None),
    city: str | None = Query(None),
    state: str | None = Query(None),
    service: AddressService = Depends(get_address_service),  # noqa: B008
):
    """Addresses of every user, optionally filtered by location (admin)."""
    return await service.get_all_addresses(country=country, city=city, state=state)


@router.get("/user/{user_id}", response_model=list[AddressResponse])
async def get_all_addresses_by_user_id(
    user_id: int,
    service: AddressService = Depends(get_address_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    ensure_self_or_admin(current_user, user_id, "get_addresses")
    return await service.get_all_addresses_by_user_id(user_id)


@router.post("/user/{user_id}", response_model=AddressResponse, status_code=status.HTTP_201_CREATED)
async def add_address(
    user_id: int,
    request: AddressCreateRequest,
    service: AddressService = Depends(get_address_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    """
    Save an address. The first address of a type becomes its default; a new
    default address replaces the previous default of the same type.
    """
    ensure_self_or_admin(current_user, user_id, "add_address")
    return await service.add_address(AddressRequest(**request.model_dump()), user_id)


@router.get("/user/{user_id}/default", response_model=AddressResponse)
async def get_default_address(
    user_id: int,
    address_type: str | None = Query(None, description="SHIPPING, BILLING o BOTH"),
    service: AddressService = Depends(get_address_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    ensure_self_or_admin(current_user, user_id, "get_default_address")
    return await service.get_default_address_by_user_id(user_id, address_type)


@router.put("/user/{user_id}/{address_id}", response_model=AddressResponse)
async def update_address(
    user_id: int,
    address_id: int,
    request: AddressUpdateRequest,
    service: AddressService = Depends(get_address_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    ensure_self_or_admin(current_user, user_id, "update_address")
    return await service.update_address(address_id, AddressRequest(**request.model_dump()), user_id)


@router.delete("/user/{user_id}/{address_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_address(
    user_id: int,
    address_id: int,
    service: AddressService = Depends(get_address_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    ensure_self_or_admin(current_user, user_id, "delete_address")
    await service.delete_address(address_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/user/{user_id}/{address_id}/default", response_model=AddressResponse)
async def set_default_address(
    user_id: int,
    address_id: int,
    service: AddressService = Depends(get_address_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    ensure_self_or_admin(current_user, user_id, "set_default_address")
    return await service.set_default_address(user_id, address_id)


@router.get("/user/{user_id}/{address_id}/exists", response_model=ExistsResponse)
async def exists_by_id_and_user(
    user_id: int,
    address_id: int,
    service: AddressService = Depends(get_address_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    ensure_self_or_admin(current_user, user_id, "check_address")
    return {"exists": await service.exists_by_id_and_user(address_id, user_id)}


@router.get("/{address_id}", response_model=AddressResponse)
async def get_address_by_id(
    address_id: int,
    service: AddressService = Depends(get_address_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    address = await service.get_address_by_id(address_id)
    own_account_id = current_user.account.id if current_user.account else None
    if address.user_account_id != own_account_id and not is_admin(current_user):
        raise AuthorizationException("get_address", f"address {address_id}", current_user.id)
    return address
