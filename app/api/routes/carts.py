"""
Shopping cart endpoints

A cart is reachable by its owner or an admin.
"""

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import ensure_self_or_admin, get_current_user
from app.domains.ecommerce.api.dependencies import get_cart_service
from app.domains.ecommerce.api.schemas import CartItemRequest, CartResponse, CartTotalResponse
from app.domains.ecommerce.application.services import CartService
from app.models.db import Cart, User

router = APIRouter(prefix="/carts", tags=["carts"])


async def _get_owned_cart(cart_id: int, service: CartService, current_user: User, operation: str) -> Cart:
    cart = await service.get_cart(cart_id)
    ensure_self_or_admin(current_user, cart.user_id, operation)
    return cart


@router.get("/me", response_model=CartResponse)
async def get_my_cart(
    service: CartService = Depends(get_cart_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    """Cart of the current user (created on first access)."""
    return await service.initialize_new_cart(current_user.id)


@router.post("/me/items", response_model=CartResponse)
async def add_item_to_cart(
    request: CartItemRequest,
    service: CartService = Depends(get_cart_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    """Add a product to the current user's cart. All items must come from one shop."""
    return await service.add_item_to_cart(current_user.id, request.product_id, request.quantity)


@router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(
    cart_id: int,
    service: CartService = Depends(get_cart_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    return await _get_owned_cart(cart_id, service, current_user, "get_cart")


@router.get("/{cart_id}/total", response_model=CartTotalResponse)
async def get_total_price(
    cart_id: int,
    service: CartService = Depends(get_cart_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    await _get_owned_cart(cart_id, service, current_user, "get_cart_total")
    return {"cart_id": cart_id, "total_price": await service.get_total_price(cart_id)}


@router.delete("/{cart_id}/items", response_model=CartResponse)
async def clear_cart(
    cart_id: int,
    service: CartService = Depends(get_cart_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    await _get_owned_cart(cart_id, service, current_user, "clear_cart")
    return await service.clear_cart(cart_id)


@router.put("/{cart_id}/items/{product_id}", response_model=CartResponse)
async def update_item_quantity(
    cart_id: int,
    product_id: int,
    quantity: int = Query(..., description="Nueva cantidad (>= 1)"),
    service: CartService = Depends(get_cart_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    await _get_owned_cart(cart_id, service, current_user, "update_cart_item")
    return await service.update_item_quantity(cart_id, product_id, quantity)


@router.delete("/{cart_id}/items/{product_id}", response_model=CartResponse)
async def remove_item_from_cart(
    cart_id: int,
    product_id: int,
    service: CartService = Depends(get_cart_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    await _get_owned_cart(cart_id, service, current_user, "remove_cart_item")
    return await service.remove_item_from_cart(cart_id, product_id)
