"""
Shop endpoints
"""

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.dependencies import ensure_self_or_admin, ensure_shop_owner_or_admin, get_current_user
from app.domains.ecommerce.api.dependencies import get_shop_service
from app.domains.ecommerce.api.schemas import (
    CountResponse,
    OrderResponse,
    ShopCreateRequest,
    ShopResponse,
    ShopUpdateRequest,
)
from app.domains.ecommerce.application.dto import ShopRequest
from app.domains.ecommerce.application.services import ShopService
from app.models.db import User

router = APIRouter(prefix="/shops", tags=["shops"])


@router.get("", response_model=list[ShopResponse])
async def get_all_shops(service: ShopService = Depends(get_shop_service)):  # noqa: B008
    shops = await service.get_all_shops()
    return [ShopResponse.from_details(await service.get_shop_details(shop)) for shop in shops]


@router.get("/by-name", response_model=ShopResponse)
async def get_shop_by_name(
    name: str = Query(..., min_length=1),
    service: ShopService = Depends(get_shop_service),  # noqa: B008
):
    shop = await service.get_shop_by_name(name)
    return ShopResponse.from_details(await service.get_shop_details(shop))


@router.post("/user/{user_id}", response_model=ShopResponse, status_code=status.HTTP_201_CREATED)
async def add_shop(
    user_id: int,
    request: ShopCreateRequest,
    service: ShopService = Depends(get_shop_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    """Open the user's shop; the owner is granted ROLE_SHOP_OWNER."""
    ensure_self_or_admin(current_user, user_id, "add_shop")
    shop = await service.add_shop(ShopRequest(**request.model_dump()), user_id)
    return ShopResponse.from_details(await service.get_shop_details(shop))


@router.get("/user/{user_id}", response_model=ShopResponse)
async def get_shop_by_user_id(
    user_id: int,
    service: ShopService = Depends(get_shop_service),  # noqa: B008
):
    shop = await service.get_shop_by_user_id(user_id)
    return ShopResponse.from_details(await service.get_shop_details(shop))


@router.get("/{shop_id}", response_model=ShopResponse)
async def get_shop_by_id(
    shop_id: int,
    service: ShopService = Depends(get_shop_service),  # noqa: B008
):
    shop = await service.get_shop_by_id(shop_id)
    return ShopResponse.from_details(await service.get_shop_details(shop))


@router.put("/{shop_id}", response_model=ShopResponse)
async def update_shop(
    shop_id: int,
    request: ShopUpdateRequest,
    service: ShopService = Depends(get_shop_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    ensure_shop_owner_or_admin(current_user, await service.get_shop_by_id(shop_id), "update_shop")
    shop = await service.update_shop(shop_id, ShopRequest(**request.model_dump()))
    return ShopResponse.from_details(await service.get_shop_details(shop))


@router.delete("/{shop_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_shop(
    shop_id: int,
    service: ShopService = Depends(get_shop_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    """Delete a shop with its products. Shops that received orders are kept."""
    ensure_shop_owner_or_admin(current_user, await service.get_shop_by_id(shop_id), "delete_shop")
    await service.delete_shop(shop_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{shop_id}/products/count", response_model=CountResponse)
async def count_products_in_shop(
    shop_id: int,
    service: ShopService = Depends(get_shop_service),  # noqa: B008
):
    return {"count": await service.count_products_in_shop(shop_id)}


@router.get("/{shop_id}/orders", response_model=list[OrderResponse])
async def get_orders_by_shop_id(
    shop_id: int,
    service: ShopService = Depends(get_shop_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    ensure_shop_owner_or_admin(current_user, await service.get_shop_by_id(shop_id), "get_shop_orders")
    return await service.get_orders_by_shop_id(shop_id)
